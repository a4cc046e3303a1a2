from __future__ import annotations

from typing import TYPE_CHECKING

from payment_gateway.application.payment_gateway import PaymentGateway
from payment_gateway.domain.value_objects import CircuitVariant
from payment_gateway.infrastructure.time_provider import SystemTimeProvider

if TYPE_CHECKING:
    from payment_gateway.application.ports import Circuit, TimeProvider


def build_gateway(
    paypal: Circuit | None = None,
    credit_card: Circuit | None = None,
    time_provider: TimeProvider | None = None,
) -> PaymentGateway:
    """Bind one circuit per variant and return a ready gateway.

    A variant left as None is unsupported by the returned gateway.
    Confirmations are stamped with the system clock unless a
    time_provider is given.
    """
    return PaymentGateway(
        circuits={
            CircuitVariant.PAYPAL: paypal,
            CircuitVariant.CREDIT_CARD: credit_card,
        },
        time_provider=time_provider or SystemTimeProvider(),
    )
