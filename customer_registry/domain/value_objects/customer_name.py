"""
Customer Name value object

Holds a name split into first and last name parts.
"""

from dataclasses import dataclass

from customer_registry.utils.name_parser import split_name
from customer_registry.utils.text_formatter import trim_noise


@dataclass(frozen=True)
class CustomerName:
    """Customer name value object with first and last name parts"""

    first: str = ""
    last: str = ""

    def __post_init__(self):
        """Replace missing name parts with empty strings"""
        object.__setattr__(self, "first", self.first or "")
        object.__setattr__(self, "last", self.last or "")

    @classmethod
    def parse(cls, name: str) -> "CustomerName":
        """Create a name from a single-string name, e.g. "Meyer, Eric" """
        first, last = split_name(name)
        return cls(first, last)

    def replace(self, first: str = None, last: str = None) -> "CustomerName":
        """Return a copy with the given parts trimmed and replaced; None keeps a part"""
        return CustomerName(
            self.first if first is None else trim_noise(first),
            self.last if last is None else trim_noise(last),
        )

    def display_name(self) -> str:
        """Return "First Last", skipping empty parts"""
        return " ".join(part for part in (self.first, self.last) if part)

    def __str__(self) -> str:
        return self.display_name()
