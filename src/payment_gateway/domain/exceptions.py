"""Domain exceptions for payment-gateway.

Exception hierarchy:
    DomainException (base)
    └── InvalidArgumentError (also a ValueError)
        ├── Request Errors (raised by PaymentGateway.pay)
        │   ├── InvalidAmountError
        │   ├── UnsupportedCurrencyError
        │   ├── EmptyOrderError
        │   └── CircuitNotBoundError
        └── Construction Errors (raised by value objects)
            ├── InvalidCurrencyError
            ├── UnknownCircuitVariantError
            └── InvalidConfirmationIdError

A declined charge is NOT an exception: pay() returns None.
Errors raised by a circuit are not wrapped and reach the caller unchanged.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base exception for all domain-level errors.

    All domain exceptions inherit from this class to enable
    catching domain errors distinctly from circuit failures.
    """


class InvalidArgumentError(DomainException, ValueError):
    """Raised when the caller supplied a request that violates a precondition.

    Always detected before any circuit is called; never retried.
    """


# =============================================================================
# Request Errors
# =============================================================================


class InvalidAmountError(InvalidArgumentError):
    """Raised when an amount is not a strictly positive decimal.

    Zero and negative amounts are constructible; pay() rejects them.
    """


class UnsupportedCurrencyError(InvalidArgumentError):
    """Raised when the amount's currency is not the accepted one (EUR).

    An unset currency (None) is unsupported too.
    """


class EmptyOrderError(InvalidArgumentError):
    """Raised when an order has no items."""


class CircuitNotBoundError(InvalidArgumentError):
    """Raised when no circuit is bound for the requested variant.

    This is a configuration error of the gateway deployment, or a
    request for a variant the deployment does not support.
    """


# =============================================================================
# Construction Errors
# =============================================================================


class InvalidCurrencyError(InvalidArgumentError):
    """Raised when a currency code is not three ASCII letters."""


class UnknownCircuitVariantError(InvalidArgumentError):
    """Raised when a circuit name does not match any CircuitVariant."""


class InvalidConfirmationIdError(InvalidArgumentError):
    """Raised when a confirmation ID is not a valid UUID."""
