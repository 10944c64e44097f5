"""
Customer Registry

Customer domain model with single-string name parsing.

Usage:
    from customer_registry import Customer

    customer = Customer("Schulz-Müller, Tim Anton").set_id(1)
    customer.first_name   # "Tim Anton"
    customer.last_name    # "Schulz-Müller"
"""

from .domain.entities import ContactsView, Customer
from .domain.value_objects import Contact, CustomerId, CustomerName
from .infrastructure.utilities.exceptions import (
    CustomerRegistryError,
    InvalidArgumentError,
    InvalidStateError,
)
from .utils import split_name, trim_noise

__version__ = "1.0.0"

__all__ = [
    "Contact",
    "ContactsView",
    "Customer",
    "CustomerId",
    "CustomerName",
    "CustomerRegistryError",
    "InvalidArgumentError",
    "InvalidStateError",
    "split_name",
    "trim_noise",
]
