from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from payment_gateway.domain.exceptions import InvalidAmountError, InvalidCurrencyError

ACCEPTED_CURRENCY = "EUR"


@dataclass(frozen=True, slots=True)
class Amount:
    """Value object for a monetary quantity in a given currency.

    - value is coerced to Decimal (Decimal, int or numeric str; floats rejected)
    - currency is a three-letter code, upper-cased; None means unset

    Positivity and the accepted currency are request rules checked by
    PaymentGateway.pay, so Amount(Decimal("0"), None) is constructible.
    """

    value: Decimal
    currency: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", _to_decimal(self.value))

        if self.currency is not None:
            code = str(self.currency).strip().upper()
            if len(code) != 3 or not (code.isascii() and code.isalpha()):
                raise InvalidCurrencyError(f"Invalid currency code: {self.currency!r}")
            object.__setattr__(self, "currency", code)

    @property
    def is_positive(self) -> bool:
        return self.value > 0

    def __str__(self) -> str:
        return f"{self.value} {self.currency or '---'}"


def _to_decimal(raw: object) -> Decimal:
    if isinstance(raw, (bool, float)):
        raise InvalidAmountError(f"Amount value must be Decimal, int or str, got {raw!r}")

    if isinstance(raw, Decimal):
        value = raw
    elif isinstance(raw, (int, str)):
        try:
            value = Decimal(raw)
        except InvalidOperation as e:
            raise InvalidAmountError(f"Invalid amount value: {raw!r}") from e
    else:
        raise InvalidAmountError(f"Amount value must be Decimal, int or str, got {raw!r}")

    if not value.is_finite():
        raise InvalidAmountError(f"Amount value must be finite, got {raw!r}")
    return value
