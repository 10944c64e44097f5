"""
Domain entities package

Contains the core business entities of the customer registry.
"""

from .customer_entity import ContactsView, Customer

__all__ = ["Customer", "ContactsView"]
