"""Application layer - The gateway service and port definitions.

This layer contains:
- PaymentGateway: Validates charge requests and dispatches them to a circuit
- Ports: Abstract interfaces for payment circuits and the clock

The application layer depends only on the domain layer.
Infrastructure implementations are injected via ports.
"""
