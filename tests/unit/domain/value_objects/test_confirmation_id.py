from uuid import UUID

import pytest

from payment_gateway.domain.exceptions import InvalidConfirmationIdError
from payment_gateway.domain.value_objects import ConfirmationId


class TestConfirmationIdGeneration:
    def test_generate_creates_uuid4(self) -> None:
        confirmation_id = ConfirmationId.generate()

        assert isinstance(confirmation_id.value, UUID)
        assert confirmation_id.value.version == 4

    def test_generate_creates_unique_ids(self) -> None:
        assert ConfirmationId.generate() != ConfirmationId.generate()


class TestConfirmationIdFromString:
    def test_parses_valid_uuid_string(self) -> None:
        uuid_str = "550e8400-e29b-41d4-a716-446655440000"

        confirmation_id = ConfirmationId.from_string(uuid_str)

        assert str(confirmation_id) == uuid_str

    def test_parses_uppercase_without_hyphens(self) -> None:
        confirmation_id = ConfirmationId.from_string("550E8400E29B41D4A716446655440000")

        assert confirmation_id.value == UUID("550e8400-e29b-41d4-a716-446655440000")

    def test_raises_for_invalid_string(self) -> None:
        with pytest.raises(InvalidConfirmationIdError):
            ConfirmationId.from_string("not-a-uuid")

    def test_raises_for_none(self) -> None:
        with pytest.raises(InvalidConfirmationIdError):
            ConfirmationId.from_string(None)  # type: ignore[arg-type]
