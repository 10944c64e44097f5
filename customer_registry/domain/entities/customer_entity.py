"""
Customer domain entity

Represents a customer in the registry: an identifier that can be assigned
once, a name split into first and last name, and an ordered list of
contacts without duplicates.
"""

import logging
from collections.abc import Sequence
from dataclasses import InitVar, dataclass, field
from typing import Any, Dict, Iterator, List, Optional

from customer_registry.domain.value_objects.contact import Contact
from customer_registry.domain.value_objects.customer_id import CustomerId
from customer_registry.domain.value_objects.customer_name import CustomerName
from customer_registry.infrastructure.utilities.exceptions import (
    InvalidStateError,
    validate_and_raise,
)

logger = logging.getLogger(__name__)


class ContactsView(Sequence):
    """Read-only live view over a customer's contacts"""

    def __init__(self, contacts: List[str]):
        self._contacts = contacts

    def __getitem__(self, index):
        return self._contacts[index]

    def __len__(self) -> int:
        return len(self._contacts)

    def __iter__(self) -> Iterator[str]:
        return iter(self._contacts)

    def __repr__(self) -> str:
        return f"ContactsView({self._contacts!r})"


@dataclass
class Customer:
    """
    Customer domain entity

    Create empty with ``Customer()`` or from a single-string name with
    ``Customer("Eric Meyer")``. ``Customer(None)`` is the same as
    ``Customer()``; blank names are rejected. Mutators return the customer so calls
    can be chained:

        customer = Customer("Meyer, Eric").set_id(42).add_contact("eric@example.com")
    """

    full_name: InitVar[Optional[str]] = None
    customer_id: Optional[CustomerId] = field(default=None, init=False)
    name: CustomerName = field(default_factory=CustomerName, init=False)
    _contacts: List[str] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self, full_name: Optional[str]):
        """Parse the initial name if one was given"""
        if full_name is not None:
            self.set_full_name(full_name)

    @property
    def id(self) -> Optional[int]:
        """Assigned identifier, or None while unassigned"""
        return int(self.customer_id) if self.customer_id is not None else None

    @property
    def has_id(self) -> bool:
        return self.customer_id is not None

    @property
    def first_name(self) -> str:
        return self.name.first

    @property
    def last_name(self) -> str:
        return self.name.last

    @property
    def contacts(self) -> ContactsView:
        return self.get_contacts()

    def set_id(self, value: int) -> "Customer":
        """
        Assign the identifier. Only possible once.

        Raises:
            InvalidStateError: if an id has already been assigned
            InvalidArgumentError: if value is not a non-negative 64-bit integer
        """
        validate_and_raise(
            self.customer_id is None,
            InvalidStateError,
            f"Customer ID already set to {self.customer_id}",
        )
        self.customer_id = CustomerId(value)
        logger.debug("Assigned customer id %s", self.customer_id)
        return self

    def set_full_name(self, full_name: str) -> "Customer":
        """Parse a single-string name into first and last name"""
        self.name = CustomerName.parse(full_name)
        logger.debug(
            "Customer name set from %r to first=%r last=%r",
            full_name,
            self.name.first,
            self.name.last,
        )
        return self

    def set_name(self, first: Optional[str] = None, last: Optional[str] = None) -> "Customer":
        """Set first and/or last name; None leaves that part unchanged"""
        self.name = self.name.replace(first=first, last=last)
        return self

    def contacts_count(self) -> int:
        return len(self._contacts)

    def get_contacts(self) -> ContactsView:
        """Return a read-only view reflecting the current contacts"""
        return ContactsView(self._contacts)

    def add_contact(self, contact: str) -> "Customer":
        """Add a trimmed contact unless an identical one is already stored"""
        value = Contact(contact).value
        if value not in self._contacts:
            self._contacts.append(value)
            logger.debug("Added contact %r (%d total)", value, len(self._contacts))
        return self

    def delete_contact(self, index: int) -> None:
        """Remove the contact at index; out-of-range indexes are ignored"""
        if 0 <= index < len(self._contacts):
            removed = self._contacts.pop(index)
            logger.debug("Deleted contact %r at index %d", removed, index)

    def delete_all_contacts(self) -> None:
        self._contacts.clear()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation"""
        return {
            "id": self.id,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "contacts": list(self._contacts),
        }

    def __str__(self) -> str:
        return (
            f"Customer(id={self.customer_id}, name={self.name}, "
            f"contacts={self.contacts_count()})"
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, Customer):
            return False
        if self.customer_id is None or other.customer_id is None:
            return False
        return self.customer_id == other.customer_id
