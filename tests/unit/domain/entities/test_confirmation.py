from datetime import UTC, datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from payment_gateway.domain.entities import Confirmation, as_utc
from payment_gateway.domain.value_objects import Amount, CircuitVariant, ConfirmationId, Order


class TestConfirmationCreate:
    def test_create_sets_all_fields(
        self, amount: Amount, order: Order, fixed_time: datetime
    ) -> None:
        confirmation = Confirmation.create(
            amount=amount,
            order=order,
            circuit=CircuitVariant.PAYPAL,
            confirmed_at=fixed_time,
        )

        assert isinstance(confirmation.id, ConfirmationId)
        assert confirmation.amount == amount
        assert confirmation.order == order
        assert confirmation.circuit is CircuitVariant.PAYPAL
        assert confirmation.confirmed_at == fixed_time

    def test_create_generates_distinct_ids(
        self, amount: Amount, order: Order, fixed_time: datetime
    ) -> None:
        first = Confirmation.create(amount, order, CircuitVariant.PAYPAL, fixed_time)
        second = Confirmation.create(amount, order, CircuitVariant.PAYPAL, fixed_time)

        assert first.id != second.id

    def test_create_raises_for_naive_timestamp(self, amount: Amount, order: Order) -> None:
        with pytest.raises(ValueError, match="must be in UTC"):
            Confirmation.create(amount, order, CircuitVariant.PAYPAL, datetime(2024, 1, 1))

    def test_create_raises_for_non_utc_timestamp(self, amount: Amount, order: Order) -> None:
        offset_tz = timezone(timedelta(hours=6))

        with pytest.raises(ValueError, match="must be in UTC"):
            Confirmation.create(
                amount, order, CircuitVariant.CREDIT_CARD, datetime(2024, 1, 1, tzinfo=offset_tz)
            )

    def test_create_normalises_zoneinfo_utc(self, amount: Amount, order: Order) -> None:
        confirmation = Confirmation.create(
            amount, order, CircuitVariant.CREDIT_CARD, datetime(2024, 1, 1, tzinfo=ZoneInfo("UTC"))
        )

        assert confirmation.confirmed_at.tzinfo is UTC


class TestAsUtc:
    def test_returns_utc_datetime_unchanged(self, fixed_time: datetime) -> None:
        assert as_utc(fixed_time) == fixed_time
        assert as_utc(fixed_time).tzinfo is UTC

    def test_keeps_the_instant_when_normalising(self) -> None:
        moment = datetime(2024, 1, 1, 9, 30, tzinfo=ZoneInfo("Etc/UTC"))

        result = as_utc(moment)

        assert result == moment
        assert result.tzinfo is UTC

    def test_rejects_zone_with_offset(self) -> None:
        with pytest.raises(ValueError, match="must be in UTC"):
            as_utc(datetime(2024, 1, 1, tzinfo=ZoneInfo("Europe/Berlin")))
