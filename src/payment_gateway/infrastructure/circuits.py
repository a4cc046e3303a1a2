from __future__ import annotations

from threading import Lock
from typing import TYPE_CHECKING

from payment_gateway.application.ports import Circuit

if TYPE_CHECKING:
    from payment_gateway.domain.value_objects import Amount


class InMemoryCircuit(Circuit):
    """Circuit that answers every charge with a fixed outcome.

    Implementation notes:
    - Records each charged Amount in call order
    - Recording is guarded by a lock, so one instance can back a gateway
      shared across threads
    - charges returns a copy; callers cannot alter the recorded history
    """

    def __init__(self, approve: bool = True) -> None:
        self._approve = approve
        self._charges: list[Amount] = []
        self._lock = Lock()

    def pay(self, amount: Amount) -> bool:
        with self._lock:
            self._charges.append(amount)
        return self._approve

    @property
    def charges(self) -> list[Amount]:
        with self._lock:
            return list(self._charges)

    @property
    def call_count(self) -> int:
        with self._lock:
            return len(self._charges)


class PayPalCircuit(InMemoryCircuit):
    """In-memory stand-in for the PayPal backend."""


class CreditCardCircuit(InMemoryCircuit):
    """In-memory stand-in for the card-network backend."""
