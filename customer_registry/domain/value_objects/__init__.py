"""
Domain value objects package

Contains immutable value objects that represent concepts in the customer domain.
"""

from .contact import Contact
from .customer_id import CustomerId
from .customer_name import CustomerName

__all__ = [
    "Contact",
    "CustomerId",
    "CustomerName",
]
