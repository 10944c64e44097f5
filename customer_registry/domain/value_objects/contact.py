"""
Contact value object
"""

from dataclasses import dataclass

from customer_registry.infrastructure.utilities.exceptions import InvalidArgumentError
from customer_registry.utils.text_formatter import is_blank, trim_noise


@dataclass(frozen=True)
class Contact:
    """A single contact entry such as an email address or phone number"""

    value: str

    def __post_init__(self):
        """Validate and trim contact"""
        if is_blank(self.value):
            raise InvalidArgumentError("Contact cannot be empty", field="contact")

        cleaned = trim_noise(self.value)
        if not cleaned:
            raise InvalidArgumentError(
                f"Contact contains no usable characters: {self.value!r}",
                field="contact",
            )

        # Use object.__setattr__ because the class is frozen
        object.__setattr__(self, "value", cleaned)

    def __str__(self) -> str:
        return self.value
