"""Infrastructure layer - Concrete implementations of ports.

This layer contains:
- Circuits: In-memory payment backends
- Time Provider: Clock abstraction for testability
- Config & Logging: Settings and logger setup
- Wiring: Gateway assembly with default adapters

Infrastructure adapters implement the ports defined in the application layer.
"""

from payment_gateway.infrastructure.circuits import (
    CreditCardCircuit,
    InMemoryCircuit,
    PayPalCircuit,
)
from payment_gateway.infrastructure.time_provider import FixedTimeProvider, SystemTimeProvider

__all__ = [
    "CreditCardCircuit",
    "FixedTimeProvider",
    "InMemoryCircuit",
    "PayPalCircuit",
    "SystemTimeProvider",
]
