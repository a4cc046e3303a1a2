from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, timedelta
from typing import TYPE_CHECKING

from payment_gateway.domain.value_objects import ConfirmationId

if TYPE_CHECKING:
    from datetime import datetime

    from payment_gateway.domain.value_objects import Amount, CircuitVariant, Order


def as_utc(moment: datetime) -> datetime:
    """Return moment with tzinfo=datetime.UTC.

    Any zone with a zero offset at that instant (ZoneInfo("UTC"),
    timezone(timedelta(0)), ...) is accepted and normalised.

    Raises:
        ValueError: If moment is naive or not at UTC offset zero.
    """
    if moment.utcoffset() != timedelta(0):
        raise ValueError(f"datetime must be in UTC, got tzinfo={moment.tzinfo}")
    return moment.replace(tzinfo=UTC)


@dataclass(frozen=True, slots=True)
class Confirmation:
    """Receipt for a charge a circuit reported as successful.

    Only successful charges produce a Confirmation; a decline is
    represented by the absence of one.

    Use the create() factory method to construct instances.
    """

    id: ConfirmationId
    amount: Amount
    order: Order
    circuit: CircuitVariant
    confirmed_at: datetime

    @classmethod
    def create(
        cls,
        amount: Amount,
        order: Order,
        circuit: CircuitVariant,
        confirmed_at: datetime,
    ) -> Confirmation:
        """Factory method to create a Confirmation with a fresh ID.

        Args:
            amount: The amount that was charged.
            order: The order the charge was made for.
            circuit: The circuit variant that confirmed the charge.
            confirmed_at: Timestamp of the confirmation, at UTC offset zero.

        Raises:
            ValueError: If confirmed_at is naive or not at UTC offset zero.
        """
        return cls(
            id=ConfirmationId.generate(),
            amount=amount,
            order=order,
            circuit=circuit,
            confirmed_at=as_utc(confirmed_at),
        )
