# Area: Shared Tests
"""Tests for the error hierarchy and action outcomes."""

import pytest

from salad_bowl.errors import (
    ContentSupplyShortfall,
    OperationNotAllowed,
    Outcome,
    SaladBowlError,
    SettingsError,
    ValidationError,
    invalid,
    not_allowed,
)


class TestErrorHierarchy:
    def test_all_errors_share_base(self):
        for cls in (ValidationError, OperationNotAllowed, ContentSupplyShortfall, SettingsError):
            assert issubclass(cls, SaladBowlError)

    def test_error_carries_code_and_context(self):
        err = ValidationError("blank_name", "Player name must not be blank", {"name": ""})
        assert err.code == "blank_name"
        assert err.message == "Player name must not be blank"
        assert err.context == {"name": ""}
        assert str(err) == "Player name must not be blank"

    def test_supply_shortfall_fields(self):
        err = ContentSupplyShortfall(requested=40, supplied=12)
        assert err.code == "supply_shortfall"
        assert err.requested == 40
        assert err.supplied == 12
        assert "12 of 40" in err.message
        assert err.context == {"requested": 40, "supplied": 12}

    def test_settings_error_lists_validation_errors(self):
        err = SettingsError(["players: too small"], config={"players": 1})
        assert err.validation_errors == ["players: too small"]
        assert err.context["config"] == {"players": 1}


class TestFormatErrorLog:
    def test_block_contains_type_code_and_context(self):
        err = OperationNotAllowed("skip_disabled", "Skipping is not allowed in round 1", {"round": 1})
        block = err.format_error_log()
        assert "OPERATION_NOT_ALLOWED" in block
        assert "skip_disabled" in block
        assert "CONTEXT" in block
        assert '"round": 1' in block

    def test_settings_error_block_lists_details(self):
        block = SettingsError(["timer_seconds: too small"]).format_error_log()
        assert "DETAILS" in block
        assert "timer_seconds: too small" in block

    def test_no_context_section_when_empty(self):
        block = OperationNotAllowed("deck_empty", "The deck is empty").format_error_log()
        assert "CONTEXT" not in block


class TestOutcome:
    def test_success(self):
        outcome = Outcome.success(5)
        assert outcome.ok is True
        assert outcome.value == 5
        assert outcome.error is None
        assert outcome.code is None
        assert outcome.unwrap() == 5

    def test_failure(self):
        outcome = not_allowed("not_paused", "Turn is not paused")
        assert outcome.ok is False
        assert isinstance(outcome.error, OperationNotAllowed)
        assert outcome.code == "not_paused"

    def test_unwrap_raises_carried_error(self):
        outcome = invalid("pick_count", "Pick exactly 3 titles", picked=2)
        with pytest.raises(ValidationError) as exc_info:
            outcome.unwrap()
        assert exc_info.value.context == {"picked": 2}
