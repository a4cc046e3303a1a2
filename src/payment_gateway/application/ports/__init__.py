"""Ports - Abstract interfaces for external dependencies.

Ports define the contracts that infrastructure adapters must implement.
This allows the gateway to remain decoupled from concrete payment backends.
"""

from payment_gateway.application.ports.circuit import Circuit
from payment_gateway.application.ports.time_provider import TimeProvider

__all__ = [
    "Circuit",
    "TimeProvider",
]
