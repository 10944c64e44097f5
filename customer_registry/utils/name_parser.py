"""
Single-string name parsing

Splits human-entered names into first and last name parts:

- names containing a separator (comma or semicolon) split at the first
  separator into a last name part before it and a first name part after it,
  e.g. "Schulz-Müller, Tim Anton" -> ("Tim Anton", "Schulz-Müller")
- names without a separator use the trailing word as last name and all
  prior words as first name, e.g. "Tim Anton Schulz-Müller" ->
  ("Tim Anton", "Schulz-Müller")
- leading and trailing whitespace, quotes and separators are trimmed from
  the whole name and from each part
"""

import logging
import re
from typing import Tuple

from customer_registry.infrastructure.utilities.exceptions import (
    InvalidArgumentError,
    validate_and_raise,
)

from .text_formatter import is_blank, trim_noise

logger = logging.getLogger(__name__)

SEPARATORS = ",;"

_SEPARATOR_PATTERN = re.compile(f"[{SEPARATORS}]")


def split_name(name: str) -> Tuple[str, str]:
    """
    Split a single-string name into first and last name.

    Args:
        name: Single-string name, e.g. "Eric Meyer" or "Meyer, Eric"

    Returns:
        Tuple of (first_name, last_name)

    Raises:
        InvalidArgumentError: if name is None, not a string or blank

    Examples:
        >>> split_name("Eric Meyer")
        ('Eric', 'Meyer')

        >>> split_name("Meyer; Anne")
        ('Anne', 'Meyer')

        >>> split_name("Nadine     Ulla     Blumenfeld")
        ('Nadine Ulla', 'Blumenfeld')

        >>> split_name("Madonna")
        ('Madonna', '')
    """
    validate_and_raise(
        not is_blank(name), InvalidArgumentError, "Name cannot be empty", field="name"
    )

    name = trim_noise(name)

    if _SEPARATOR_PATTERN.search(name):
        last_part, first_part = _SEPARATOR_PATTERN.split(name, maxsplit=1)
        first_name, last_name = trim_noise(first_part), trim_noise(last_part)
    else:
        parts = name.split()
        if not parts:
            # Nothing but quotes and separators
            first_name, last_name = "", ""
        elif len(parts) == 1:
            first_name, last_name = parts[0], ""
        else:
            first_name, last_name = " ".join(parts[:-1]), parts[-1]

    logger.debug(
        "Split name into first=%r last=%r", first_name, last_name,
        extra={"operation": "split_name"},
    )
    return first_name, last_name
