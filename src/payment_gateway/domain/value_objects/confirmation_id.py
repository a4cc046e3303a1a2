from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID, uuid4

from payment_gateway.domain.exceptions import InvalidConfirmationIdError


@dataclass(frozen=True, slots=True)
class ConfirmationId:
    """Value object for confirmation identifiers (UUID v4)."""

    value: UUID

    @classmethod
    def generate(cls) -> ConfirmationId:
        """Generate a new unique ConfirmationId."""
        return cls(value=uuid4())

    @classmethod
    def from_string(cls, id_str: str) -> ConfirmationId:
        """Parse a ConfirmationId from a string representation.

        Args:
            id_str: UUID string (with or without hyphens, any case).

        Raises:
            InvalidConfirmationIdError: If the string is not a valid UUID.
        """
        try:
            return cls(value=UUID(id_str))
        except (ValueError, AttributeError, TypeError) as e:
            raise InvalidConfirmationIdError(f"Invalid confirmation ID: {id_str}") from e

    def __str__(self) -> str:
        return str(self.value)
