from dataclasses import dataclass
from typing import Optional


@dataclass
class PropertyLine:
    raw: str
    kind: str  # "blank", "comment" or "entry"
    key: Optional[str] = None
    value: Optional[str] = None
    prefix: Optional[str] = None
    comment_for: Optional[str] = None
