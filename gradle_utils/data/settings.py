from dataclasses import dataclass
from typing import Optional

import environs
from dataclasses_json import LetterCase, dataclass_json


@dataclass_json(letter_case=LetterCase.CAMEL)
@dataclass
class Settings:
    platform_dir: str = "."
    log_level: str = "INFO"
    log_file: Optional[str] = None


def load_settings(read_env: bool = True) -> Settings:
    env = environs.Env()
    if read_env:
        env.read_env()

    with env.prefixed("GRADLE_PROPS_"):
        return Settings(
            platform_dir=env.str("PLATFORM_DIR", "."),
            log_level=env.str("LOG_LEVEL", "INFO").upper(),
            log_file=env.str("LOG_FILE", None) or None,
        )
