"""Tests for identifier validation and the ownership guard."""

from unittest.mock import MagicMock
from uuid import UUID, uuid4

import pytest

from mediashare.domain.enums import ObjectKind
from mediashare.errors import ForbiddenError, InvalidReferenceError
from mediashare.services.identifiers import parse_optional_reference, validate_reference
from mediashare.services.ownership import authorize
from mediashare.services.toggle import ToggleEngine


class TestValidateReference:
    """Tests for validate_reference."""

    def test_valid_reference(self) -> None:
        ref = uuid4()
        assert validate_reference(str(ref)) == ref

    def test_uuid_passthrough(self) -> None:
        ref = uuid4()
        assert validate_reference(ref) is ref

    def test_surrounding_whitespace_ignored(self) -> None:
        ref = uuid4()
        assert validate_reference(f"  {ref} ") == ref

    @pytest.mark.parametrize("bad", ["not-an-id", "", "   ", "1234", "zzzzzzzz-zzzz-zzzz-zzzz-zzzzzzzzzzzz"])
    def test_invalid_reference(self, bad: str) -> None:
        with pytest.raises(InvalidReferenceError):
            validate_reference(bad)

    def test_none_rejected(self) -> None:
        with pytest.raises(InvalidReferenceError):
            validate_reference(None)

    def test_error_names_field(self) -> None:
        with pytest.raises(InvalidReferenceError) as exc_info:
            validate_reference("not-an-id", field="video_id")

        assert exc_info.value.field == "video_id"
        assert exc_info.value.value == "not-an-id"
        assert exc_info.value.status_code == 400

    def test_rejected_before_any_store_call(self) -> None:
        """A malformed object reference never reaches the store."""
        store = MagicMock()
        engine = ToggleEngine(store)

        with pytest.raises(InvalidReferenceError):
            engine.toggle(uuid4(), "not-an-id", ObjectKind.VIDEO)

        assert store.mock_calls == []


class TestParseOptionalReference:
    """Tests for parse_optional_reference."""

    def test_valid(self) -> None:
        ref = uuid4()
        assert parse_optional_reference(str(ref)) == ref

    def test_missing(self) -> None:
        assert parse_optional_reference(None) is None

    def test_malformed_dropped(self) -> None:
        assert parse_optional_reference("nope") is None


class TestAuthorize:
    """Tests for the ownership guard."""

    def test_owner_allowed(self) -> None:
        owner = uuid4()
        authorize(owner, UUID(str(owner)), resource="tweet")

    def test_non_owner_forbidden(self) -> None:
        with pytest.raises(ForbiddenError) as exc_info:
            authorize(uuid4(), uuid4(), resource="tweet")

        assert exc_info.value.status_code == 403
        assert exc_info.value.field == "tweet"
