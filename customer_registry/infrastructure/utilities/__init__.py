"""
Infrastructure utilities

Error types and validation helpers.
"""

from .exceptions import (
    CustomerRegistryError,
    InvalidArgumentError,
    InvalidStateError,
    validate_and_raise,
)

__all__ = [
    "CustomerRegistryError",
    "InvalidArgumentError",
    "InvalidStateError",
    "validate_and_raise",
]
