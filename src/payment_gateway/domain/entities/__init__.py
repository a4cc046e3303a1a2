"""Domain entities - Objects with identity."""

from payment_gateway.domain.entities.confirmation import Confirmation, as_utc

__all__ = [
    "Confirmation",
    "as_utc",
]
