from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING

from payment_gateway.application.ports import Circuit
from payment_gateway.domain.entities import Confirmation, as_utc
from payment_gateway.domain.exceptions import (
    CircuitNotBoundError,
    EmptyOrderError,
    InvalidAmountError,
    InvalidArgumentError,
    UnknownCircuitVariantError,
    UnsupportedCurrencyError,
)
from payment_gateway.domain.value_objects import ACCEPTED_CURRENCY, CircuitVariant

if TYPE_CHECKING:
    from payment_gateway.application.ports import TimeProvider
    from payment_gateway.domain.value_objects import Amount, Order

logger = logging.getLogger(__name__)


class PaymentGateway:
    """Validates a charge request and dispatches it to the selected circuit.

    Responsibilities:
    - Reject invalid requests before any circuit is called
    - Resolve the requested variant to its bound circuit
    - Call that circuit exactly once (no retry, no fallback)
    - Map the circuit's answer to a Confirmation (True) or None (False)

    The gateway holds one binding per supported variant, fixed at
    construction. A variant bound to None is treated as unsupported.
    pay() does not mutate the gateway, so a single instance can serve
    concurrent callers as long as its circuits can.
    """

    def __init__(
        self,
        circuits: Mapping[CircuitVariant | str, Circuit | None],
        time_provider: TimeProvider,
    ) -> None:
        """Bind circuits to variants.

        Keys may be CircuitVariant members or their names. Values must be
        Circuit instances or None.

        Raises:
            UnknownCircuitVariantError: A key names no variant.
            InvalidArgumentError: Two keys name the same variant.
            TypeError: A value is neither a Circuit nor None.
        """
        bindings: dict[CircuitVariant, Circuit | None] = {}
        for key, circuit in circuits.items():
            variant = _to_variant(key)
            if variant in bindings:
                raise InvalidArgumentError(f"circuit variant bound twice: {variant.value}")
            if circuit is not None and not isinstance(circuit, Circuit):
                raise TypeError(
                    f"circuit for {variant.value} must implement Circuit, "
                    f"got {type(circuit).__name__}"
                )
            bindings[variant] = circuit

        self._circuits: Mapping[CircuitVariant, Circuit] = MappingProxyType(
            {variant: circuit for variant, circuit in bindings.items() if circuit is not None}
        )
        self._time_provider = time_provider

    @property
    def bound_variants(self) -> frozenset[CircuitVariant]:
        return frozenset(self._circuits)

    def pay(
        self,
        amount: Amount | None,
        order: Order | None,
        circuit: CircuitVariant | str | None,
    ) -> Confirmation | None:
        """Charge the amount for the order through the requested circuit.

        Args:
            amount: Amount to charge; must be positive and in EUR.
            order: The order being paid; must contain at least one item.
            circuit: The variant to route through, or its name.

        Returns:
            A Confirmation if the circuit confirmed the charge,
            None if the circuit declined it.

        Raises:
            InvalidAmountError: Amount is missing, zero or negative.
            UnsupportedCurrencyError: Currency is not EUR (or unset).
            EmptyOrderError: Order is missing or has no items.
            UnknownCircuitVariantError: Circuit name matches no variant.
            CircuitNotBoundError: No circuit is bound for the variant.
            ValueError: The time provider returned a non-UTC datetime;
                raised before the circuit is called.

            Any exception raised by the circuit itself propagates unchanged.
        """
        try:
            variant, bound = self._validate(amount, order, circuit)
        except InvalidArgumentError as e:
            logger.warning("Rejected payment request: %s", e)
            raise

        # Stamp before charging: nothing after the circuit call may fail
        try:
            confirmed_at = as_utc(self._time_provider.now())
        except ValueError:
            logger.exception("Time provider returned an unusable timestamp")
            raise

        logger.debug("Dispatching %s to %s circuit", amount, variant.value)
        try:
            charged = bound.pay(amount)
        except Exception:
            logger.exception("%s circuit failed while charging %s", variant.value, amount)
            raise

        if not charged:
            logger.info("%s circuit declined %s", variant.value, amount)
            return None

        confirmation = Confirmation.create(
            amount=amount,
            order=order,
            circuit=variant,
            confirmed_at=confirmed_at,
        )
        logger.info(
            "%s circuit confirmed %s (confirmation_id=%s)",
            variant.value,
            amount,
            confirmation.id,
        )
        return confirmation

    def _validate(
        self,
        amount: Amount | None,
        order: Order | None,
        circuit: CircuitVariant | str | None,
    ) -> tuple[CircuitVariant, Circuit]:
        """Check the request in order; the first violation wins."""
        if amount is None or not amount.is_positive:
            raise InvalidAmountError("amount must be positive")

        if amount.currency != ACCEPTED_CURRENCY:
            raise UnsupportedCurrencyError("unsupported currency")

        if order is None or order.is_empty:
            raise EmptyOrderError("order must contain at least one item")

        return self._resolve(circuit)

    def _resolve(self, circuit: CircuitVariant | str | None) -> tuple[CircuitVariant, Circuit]:
        if isinstance(circuit, str):
            circuit = CircuitVariant.from_string(circuit)

        bound = self._circuits.get(circuit) if isinstance(circuit, CircuitVariant) else None
        if bound is None:
            raise CircuitNotBoundError("no circuit bound for requested variant")

        return circuit, bound


def _to_variant(key: object) -> CircuitVariant:
    if isinstance(key, CircuitVariant):
        return key
    if isinstance(key, str):
        return CircuitVariant.from_string(key)
    raise UnknownCircuitVariantError(f"Unknown circuit variant: {key!r}")
