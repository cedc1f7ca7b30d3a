from dataclasses import replace
from typing import Iterable, Optional

from .data import PropertyLine
from .parser import (
    detect_newline,
    ends_with_continuation,
    escape_key,
    format_comment,
    format_property_line,
    iter_property_lines,
    split_terminator,
)
from .utils import PathLike, read_properties_text, write_properties_text


def _to_property_string(value) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class PropertiesFile:
    """An editable properties file that keeps its layout.

    Comments, blank lines, key order and the spelling of untouched entries are
    kept as they were read, so ``to_string()`` only differs from the source in
    the entries that have been set or unset.
    """

    def __init__(self, lines: Iterable[PropertyLine] = (), newline: str = "\n"):
        self.lines: list[PropertyLine] = list(lines)
        self.newline = newline

    @classmethod
    def from_string(cls, content: str) -> "PropertiesFile":
        return cls(iter_property_lines(content), newline=detect_newline(content))

    @classmethod
    def load(cls, path: PathLike) -> "PropertiesFile":
        return cls.from_string(read_properties_text(path))

    def save(self, path: PathLike):
        write_properties_text(path, self.to_string())

    def to_string(self) -> str:
        return "".join(line.raw for line in self.lines)

    def _positions(self, key: str) -> list[int]:
        return [
            index
            for index, line in enumerate(self.lines)
            if line.kind == "entry" and line.key == key
        ]

    def get(self, key: str) -> Optional[str]:
        positions = self._positions(key)
        if not positions:
            return None
        return self.lines[positions[-1]].value

    def set(self, key: str, value, comment: Optional[str] = None):
        """Associate ``value`` with ``key``.

        :param key: the property key
        :param value: the new value, or None to unset the property
        :param comment: optional comment written on the line above the entry

        """
        if value is None:
            self.unset(key)
            return

        value = _to_property_string(value)
        positions = self._positions(key)
        if not positions:
            self._append(key, value, comment)
            return

        # the last occurrence is the effective one, earlier ones are dropped
        *duplicates, position = positions
        line = self.lines[position]
        _, newline = split_terminator(line.raw)
        self.lines[position] = replace(
            line,
            raw=format_property_line(line.prefix, value, newline),
            value=value,
        )
        if comment is not None:
            self._set_comment(position, key, comment)
        for index in reversed(duplicates):
            del self.lines[index]

    def unset(self, key: str):
        for index in reversed(self._positions(key)):
            del self.lines[index]
            if index > 0 and self.lines[index - 1].comment_for == key:
                del self.lines[index - 1]

    def _set_comment(self, position: int, key: str, comment: str):
        comment_line = PropertyLine(
            raw=format_comment(comment, self.newline),
            kind="comment",
            comment_for=key,
        )
        if position > 0 and self.lines[position - 1].comment_for == key:
            self.lines[position - 1] = comment_line
        else:
            self.lines.insert(position, comment_line)

    def _append(self, key: str, value: str, comment: Optional[str]):
        if self.lines:
            last = self.lines[-1]
            if ends_with_continuation(last):
                # a trailing backslash would swallow the appended line
                newline = split_terminator(last.raw)[1] or self.newline
                last = replace(
                    last, raw=format_property_line(last.prefix, last.value, newline)
                )
            if not split_terminator(last.raw)[1]:
                last = replace(last, raw=last.raw + self.newline)
            self.lines[-1] = last

        if comment is not None:
            self.lines.append(
                PropertyLine(
                    raw=format_comment(comment, self.newline),
                    kind="comment",
                    comment_for=key,
                )
            )
        prefix = escape_key(key) + "="
        self.lines.append(
            PropertyLine(
                raw=format_property_line(prefix, value, self.newline),
                kind="entry",
                key=key,
                value=value,
                prefix=prefix,
            )
        )

    def keys(self) -> list[str]:
        return list(self.to_dict())

    def items(self) -> list[tuple[str, str]]:
        return list(self.to_dict().items())

    def to_dict(self) -> dict[str, str]:
        properties = {}
        for line in self.lines:
            if line.kind == "entry":
                properties[line.key] = line.value
        return properties

    def __contains__(self, key: str) -> bool:
        return bool(self._positions(key))

    def __len__(self) -> int:
        return len(self.to_dict())
