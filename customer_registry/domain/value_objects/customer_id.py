"""
Customer ID value object
"""

from dataclasses import dataclass
from typing import ClassVar

from customer_registry.infrastructure.utilities.exceptions import InvalidArgumentError


@dataclass(frozen=True)
class CustomerId:
    """Customer identifier value object"""

    value: int

    MAX_VALUE: ClassVar[int] = 2**63 - 1

    def __post_init__(self):
        """Validate customer ID"""
        if (
            isinstance(self.value, bool)
            or not isinstance(self.value, int)
            or not 0 <= self.value <= self.MAX_VALUE
        ):
            raise InvalidArgumentError(
                f"Customer ID must be a non-negative 64-bit integer: {self.value!r}",
                field="id",
            )

    def __str__(self) -> str:
        return str(self.value)

    def __int__(self) -> int:
        return self.value
