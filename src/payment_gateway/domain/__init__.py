"""Domain layer - Value objects, entities, and rules of a charge request.

This layer contains:
- Value Objects: Immutable objects defined by their attributes (e.g., Amount, Order)
- Entities: Objects with identity (e.g., Confirmation)
- Domain Exceptions: Rejected requests

The domain layer has NO dependencies on external frameworks or infrastructure.
"""
