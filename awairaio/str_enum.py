"""String enum used for AwairAIO constants."""

from enum import Enum


class StrEnum(str, Enum):
    """Enum whose members are also strings."""

    def __str__(self) -> str:
        return str(self.value)
