from .gradle_properties import (
    detect_newline,
    ends_with_continuation,
    escape_key,
    escape_value,
    format_comment,
    format_property_line,
    iter_property_lines,
    parse_gradle_properties,
    split_key_value,
    split_terminator,
    unescape,
)
