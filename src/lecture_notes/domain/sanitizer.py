"""Cleanup of free text returned by external providers."""

import re

_LINE_BREAKS = re.compile(r"\r\n?|\f")
_CONTROL_CHARACTERS = re.compile(r"[\x00-\x08\x0b-\x1f]")


def strip_control_characters(text: str) -> str:
    """
    Removes control characters that carry no text content.

    Carriage returns and form-feeds become newlines, then every remaining
    character in U+0000-U+001F other than newline and tab is dropped.
    Backslashes and quotes are left alone; JSON escaping happens when the
    response model is serialized.

    Args:
        text: Raw provider output.

    Returns:
        The cleaned text. Applying the function again returns it unchanged.
    """
    text = _LINE_BREAKS.sub("\n", text)
    return _CONTROL_CHARACTERS.sub("", text)
