"""
YAML escaping for front matter values.

Keeps user-provided names and tags from breaking the front matter block
or injecting extra keys into it.
"""

import re

# Characters that force a value to be quoted
_SPECIAL_CHARS = re.compile(r"[\x00-\x1f\x7f:\"'\[\]{}#&*!|>%@`\\]")
_LEADING = re.compile(r"^[-? ]")
_TRAILING = re.compile(r" $")
_CONTROL = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")


def _escape_double_quoted(value: str) -> str:
    escaped = (
        value.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
    )
    return _CONTROL.sub(lambda m: f"\\x{ord(m.group(0)):02x}", escaped)


def escape_yaml_value(value: str) -> str:
    """Escape a scalar value for YAML front matter.

    Plain values are returned as-is; anything containing YAML
    indicators, leading/trailing spaces or control characters is
    wrapped in double quotes with backslash escapes.

    Examples:
        escape_yaml_value("SimpleValue")        -> SimpleValue
        escape_yaml_value("Value with: colon")  -> "Value with: colon"
    """
    if value == "":
        return '""'

    needs_quoting = (
        _SPECIAL_CHARS.search(value) is not None
        or _LEADING.search(value) is not None
        or _TRAILING.search(value) is not None
    )
    if not needs_quoting:
        return value

    return f'"{_escape_double_quoted(value)}"'


def escape_yaml_tag(tag: str) -> str:
    """Escape a tag for a YAML flow sequence. Tags are always quoted."""
    return f'"{_escape_double_quoted(tag)}"'
