from __future__ import annotations

from enum import Enum

from payment_gateway.domain.exceptions import UnknownCircuitVariantError


class CircuitVariant(Enum):
    """Payment backends a charge can be routed through."""

    PAYPAL = "paypal"
    CREDIT_CARD = "credit_card"

    @classmethod
    def from_string(cls, name: str) -> CircuitVariant:
        """Parse a variant from its name, case-insensitively.

        Hyphens are accepted in place of underscores ("credit-card").

        Raises:
            UnknownCircuitVariantError: If the name matches no variant.
        """
        try:
            key = name.strip().lower().replace("-", "_")
            return cls(key)
        except (ValueError, AttributeError) as e:
            raise UnknownCircuitVariantError(f"Unknown circuit variant: {name!r}") from e
