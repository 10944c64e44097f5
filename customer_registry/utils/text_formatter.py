"""
Text formatting utilities for customer data
"""

import re

# Whitespace, double and single quotes, commas and semicolons
NOISE_CHARACTERS = r"\s\"',;"

_LEADING_NOISE = re.compile(rf"\A[{NOISE_CHARACTERS}]+")
_TRAILING_NOISE = re.compile(rf"[{NOISE_CHARACTERS}]+\Z")


def trim_noise(text: str) -> str:
    """
    Strip noise characters from both ends of a string

    Args:
        text: The text to trim

    Returns:
        The text without leading and trailing whitespace, quotes,
        commas and semicolons. Interior characters are kept as-is.
    """
    if not text:
        return ""
    text = _LEADING_NOISE.sub("", text)
    return _TRAILING_NOISE.sub("", text)


def is_blank(text) -> bool:
    """Check if a value is missing, not a string, or whitespace only"""
    return not isinstance(text, str) or not text.strip()
