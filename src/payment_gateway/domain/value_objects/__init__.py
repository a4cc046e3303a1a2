"""Value objects - Immutable objects defined by their attributes."""

from payment_gateway.domain.value_objects.amount import ACCEPTED_CURRENCY, Amount
from payment_gateway.domain.value_objects.circuit_variant import CircuitVariant
from payment_gateway.domain.value_objects.confirmation_id import ConfirmationId
from payment_gateway.domain.value_objects.order import Order, OrderItem

__all__ = [
    "ACCEPTED_CURRENCY",
    "Amount",
    "CircuitVariant",
    "ConfirmationId",
    "Order",
    "OrderItem",
]
