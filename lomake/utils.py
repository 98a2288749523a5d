"""Small string helpers shared by the interpreter."""

_BLANKS = " \t"


def trim(text: str) -> str:
    """Strip spaces and tabs (only) from both ends of ``text``."""
    return text.strip(_BLANKS)


def is_string_literal(value: str) -> bool:
    """Return True if ``value`` is wrapped in double quotes."""
    return len(value) >= 2 and value.startswith('"') and value.endswith('"')


def strip_quotes(text: str) -> str:
    """Remove one pair of surrounding double quotes, if present."""
    return text[1:-1] if is_string_literal(text) else text