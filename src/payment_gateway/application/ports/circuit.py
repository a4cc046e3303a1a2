from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from payment_gateway.domain.value_objects import Amount


class Circuit(ABC):
    """Port for a payment backend (PayPal, card network, ...).

    Contract:
    - pay() returns True iff the backend confirms the charge succeeded
    - pay() returns False for a decline; a decline is not an error
    - pay() MAY raise; the gateway does not catch, wrap or retry
    - Authentication, retries and idempotency belong to the implementation
    - Implementations shared by a gateway across threads MUST be safe
      for concurrent invocation
    """

    @abstractmethod
    def pay(self, amount: Amount) -> bool:
        """Attempt to charge the amount through this backend.

        Args:
            amount: A validated, positive EUR amount.

        Returns:
            True if the charge was confirmed, False if it was declined.
        """
