from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime

from payment_gateway.application.ports import TimeProvider
from payment_gateway.domain.entities import as_utc


class SystemTimeProvider(TimeProvider):
    """Stamps confirmations with the current system time."""

    def now(self) -> datetime:
        return datetime.now(UTC)


@dataclass(frozen=True)
class FixedTimeProvider(TimeProvider):
    """Stamps every confirmation with the same instant.

    The instant is normalised to tzinfo=datetime.UTC at construction,
    so an invalid clock fails when it is built, not when a gateway
    reads it.
    """

    moment: datetime

    def __post_init__(self) -> None:
        object.__setattr__(self, "moment", as_utc(self.moment))

    def now(self) -> datetime:
        return self.moment
