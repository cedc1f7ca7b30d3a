import re
import string
from typing import Iterator, Optional

from ..data import PropertyLine

WHITESPACE = " \t\f"
SEPARATORS = "=:"
COMMENT_CHARS = "#!"

_NEWLINE = re.compile(r"\r\n|\r|\n")

_UNESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}
_ESCAPES = {"\\": "\\\\", "\t": "\\t", "\n": "\\n", "\r": "\\r", "\f": "\\f"}


def split_natural_lines(content: str) -> list[str]:
    """Split ``content`` into lines, keeping every line's terminator."""
    lines = []
    start = 0
    for match in _NEWLINE.finditer(content):
        lines.append(content[start : match.end()])
        start = match.end()
    if start < len(content):
        lines.append(content[start:])
    return lines


def split_terminator(line: str) -> tuple[str, str]:
    if line.endswith("\r\n"):
        return line[:-2], "\r\n"
    if line.endswith(("\n", "\r")):
        return line[:-1], line[-1]
    return line, ""


def detect_newline(content: str) -> str:
    match = _NEWLINE.search(content)
    return match.group() if match else "\n"


def _continues(text: str) -> bool:
    return (len(text) - len(text.rstrip("\\"))) % 2 == 1


def split_key_value(text: str) -> tuple[str, str, str]:
    """Split a logical line into its raw key, separator and raw value.

    :param text: the logical line without leading whitespace
    :return: ``(raw_key, separator, raw_value)``, still escaped
    """
    length = len(text)
    index = 0
    while index < length:
        char = text[index]
        if char == "\\":
            index += 2
            continue
        if char in SEPARATORS or char in WHITESPACE:
            break
        index += 1
    index = min(index, length)
    key_end = index

    while index < length and text[index] in WHITESPACE:
        index += 1
    if index < length and text[index] in SEPARATORS:
        index += 1
        while index < length and text[index] in WHITESPACE:
            index += 1

    return text[:key_end], text[key_end:index], text[index:]


def unescape(text: str) -> str:
    out = []
    index = 0
    length = len(text)
    while index < length:
        char = text[index]
        index += 1
        if char != "\\":
            out.append(char)
            continue
        if index >= length:
            # dangling backslash at the end of the input
            break
        char = text[index]
        index += 1
        if char == "u":
            digits = text[index : index + 4]
            if len(digits) == 4 and all(c in string.hexdigits for c in digits):
                out.append(chr(int(digits, 16)))
                index += 4
            else:
                out.append("\\u")
            continue
        out.append(_UNESCAPES.get(char, char))
    # \uXXXX pairs may encode a surrogate pair
    return (
        "".join(out)
        .encode("utf-16-le", "surrogatepass")
        .decode("utf-16-le", "surrogatepass")
    )


def _escape_char(char: str) -> str:
    code = ord(char)
    if code > 0xFFFF:
        code -= 0x10000
        return "\\u%04X\\u%04X" % (0xD800 + (code >> 10), 0xDC00 + (code & 0x3FF))
    return "\\u%04X" % code


def _escape(text: str, special: str, escape_spaces: bool, leading: str = "") -> str:
    out = []
    for position, char in enumerate(text):
        if char in _ESCAPES:
            out.append(_ESCAPES[char])
        elif char == " " and (escape_spaces or position == 0):
            out.append("\\ ")
        elif char in special or (position == 0 and char in leading):
            out.append("\\" + char)
        elif ord(char) < 0x20 or ord(char) > 0x7E:
            out.append(_escape_char(char))
        else:
            out.append(char)
    return "".join(out)


def escape_key(key: str) -> str:
    return _escape(key, SEPARATORS + COMMENT_CHARS, escape_spaces=True)


def escape_value(value: str) -> str:
    # a leading separator would be read as part of a whitespace separator
    return _escape(value, "", escape_spaces=False, leading=SEPARATORS)


def format_property_line(prefix: str, value: str, newline: str = "\n") -> str:
    """Render an entry from its raw ``key=`` prefix and an unescaped value."""
    return prefix + escape_value(value) + newline


def format_comment(comment: str, newline: str = "\n") -> str:
    return "".join(
        "# "
        + "".join(c if ord(c) <= 0xFF else _escape_char(c) for c in line)
        + newline
        for line in comment.splitlines() or [""]
    )


def iter_property_lines(content: str) -> Iterator[PropertyLine]:
    """Yield the logical lines of a properties file in order.

    Blank and comment lines are yielded as they are. Entries that continue
    over several natural lines are yielded once, with ``raw`` holding every
    natural line they span, so that joining all ``raw`` texts gives back
    ``content`` unchanged.
    """
    natural = split_natural_lines(content)
    index = 0
    while index < len(natural):
        line = natural[index]
        index += 1
        body, _ = split_terminator(line)
        text = body.lstrip(WHITESPACE)

        if not text:
            yield PropertyLine(raw=line, kind="blank")
            continue
        if text[0] in COMMENT_CHARS:
            yield PropertyLine(raw=line, kind="comment")
            continue

        indent = body[: len(body) - len(text)]
        raw_parts = [line]
        while _continues(text) and index < len(natural):
            next_line = natural[index]
            index += 1
            raw_parts.append(next_line)
            next_body, _ = split_terminator(next_line)
            text = text[:-1] + next_body.lstrip(WHITESPACE)

        raw_key, separator, raw_value = split_key_value(text)
        yield PropertyLine(
            raw="".join(raw_parts),
            kind="entry",
            key=unescape(raw_key),
            value=unescape(raw_value),
            prefix=indent + raw_key + (separator or "="),
        )


def parse_gradle_properties(init_content: str) -> dict[str, str]:
    properties = {}

    for line in iter_property_lines(init_content):
        if line.kind == "entry":
            properties[line.key] = line.value

    return properties


def ends_with_continuation(line: Optional[PropertyLine]) -> bool:
    if line is None or line.kind != "entry":
        return False
    body, _ = split_terminator(split_natural_lines(line.raw)[-1])
    return _continues(body)
