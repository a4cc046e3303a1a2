from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import datetime


class TimeProvider(ABC):
    """Source of confirmation timestamps.

    PaymentGateway reads now() once per request, after validation and
    before the circuit is charged. A value that is naive or not at UTC
    offset zero rejects the request without charging anything.
    """

    @abstractmethod
    def now(self) -> datetime:
        """Return the instant to stamp a confirmation with."""
