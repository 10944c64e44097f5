"""
Custom exceptions and error helpers for the customer registry
"""

import logging

logger = logging.getLogger(__name__)


class CustomerRegistryError(Exception):
    """Base exception for the customer registry"""

    def __init__(self, message: str, user_message: str = None, error_code: str = None):
        super().__init__(message)
        self.message = message
        self.user_message = user_message or "An error occurred. Please try again."
        self.error_code = error_code or "GENERAL_ERROR"


class InvalidArgumentError(CustomerRegistryError, ValueError):
    """An argument was missing, blank or out of range"""

    def __init__(self, message: str, field: str = None):
        super().__init__(
            message, message, "INVALID_ARGUMENT"  # Argument errors are user-friendly
        )
        self.field = field


class InvalidStateError(CustomerRegistryError, RuntimeError):
    """The operation is not allowed in the entity's current state"""

    def __init__(self, message: str, user_message: str = None):
        super().__init__(message, user_message or message, "INVALID_STATE")


def validate_and_raise(condition: bool, error_class: type, *args, **kwargs):
    """Helper function to validate condition and raise specific error"""
    if not condition:
        error = error_class(*args, **kwargs)
        logger.warning(
            "Rejected operation: %s",
            error,
            extra={"error_code": getattr(error, "error_code", None)},
        )
        raise error
