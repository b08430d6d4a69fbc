"""
salad_bowl.errors — Game error classes and action outcomes
==========================================================

Defines the error hierarchy for the game core. Each error stores full
context for structured logging.

Errors in this package are expected, user-correctable conditions. Actions
*return* them inside an ``Outcome`` instead of raising them; callers that
prefer exceptions can call ``Outcome.unwrap()``.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Generic, List, Optional, TypeVar
import json

T = TypeVar("T")


class SaladBowlError(Exception):
    """Base exception for all salad_bowl errors."""

    error_type = "GAME_ERROR"

    def __init__(self, code: str, message: str, context: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.context = context or {}
        super().__init__(message)

    def format_error_log(self) -> str:
        return _format_error_block(
            error_type=self.error_type,
            code=self.code,
            message=self.message,
            context=self.context,
            details=None,
        )


class ValidationError(SaladBowlError):
    """Intake input was rejected (name, picks or manual words)."""

    error_type = "VALIDATION_ERROR"


class OperationNotAllowed(SaladBowlError):
    """An action was attempted in a state that does not permit it."""

    error_type = "OPERATION_NOT_ALLOWED"


class ContentSupplyShortfall(SaladBowlError):
    """The title source could not supply enough distinct titles."""

    error_type = "CONTENT_SUPPLY_SHORTFALL"

    def __init__(self, requested: int, supplied: int, message: Optional[str] = None):
        self.requested = requested
        self.supplied = supplied
        super().__init__(
            code="supply_shortfall",
            message=message or f"Title source supplied {supplied} of {requested} titles",
            context={"requested": requested, "supplied": supplied},
        )


class SettingsError(SaladBowlError):
    """Configuration values failed validation."""

    error_type = "SETTINGS_ERROR"

    def __init__(self, validation_errors: List[str], config: Optional[Dict[str, Any]] = None):
        self.validation_errors = validation_errors
        super().__init__(
            code="invalid_settings",
            message=f"Settings failed validation: {validation_errors}",
            context={"config": config or {}},
        )

    def format_error_log(self) -> str:
        return _format_error_block(
            error_type=self.error_type,
            code=self.code,
            message=self.message,
            context=self.context,
            details=self.validation_errors,
        )


@dataclass
class Outcome(Generic[T]):
    """
    Result of a game action.

    Attributes:
        ok: True when the action was applied
        value: Optional payload (the new Player, the drawn Card, ...)
        error: The error explaining why nothing changed, when ok is False
    """

    ok: bool
    value: Optional[T] = None
    error: Optional[SaladBowlError] = None

    @classmethod
    def success(cls, value: Optional[T] = None) -> "Outcome[T]":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: SaladBowlError) -> "Outcome[T]":
        return cls(ok=False, error=error)

    @property
    def code(self) -> Optional[str]:
        return self.error.code if self.error else None

    def unwrap(self) -> Optional[T]:
        """Return the value, or raise the carried error."""
        if self.error is not None:
            raise self.error
        return self.value


def not_allowed(code: str, message: str, **context: Any) -> Outcome:
    """Shorthand for a failed Outcome carrying OperationNotAllowed."""
    return Outcome.failure(OperationNotAllowed(code, message, context))


def invalid(code: str, message: str, **context: Any) -> Outcome:
    """Shorthand for a failed Outcome carrying ValidationError."""
    return Outcome.failure(ValidationError(code, message, context))


def _format_error_block(
    error_type: str,
    code: str,
    message: str,
    context: Dict[str, Any],
    details: Optional[List[str]],
) -> str:
    """Format a structured error block for the log."""
    from datetime import datetime, timezone

    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"

    lines = [
        "",
        "=" * 64,
        f" GAME ERROR — {error_type}",
        "=" * 64,
        f" Timestamp:    {timestamp}",
        f" Code:         {code}",
        f" Message:      {message}",
    ]

    if context:
        lines.append("")
        lines.append(" ── CONTEXT " + "─" * 52)
        lines.append(_indent_json(context))

    if details:
        lines.append("")
        lines.append(" ── DETAILS " + "─" * 52)
        for detail in details:
            lines.append(f" • {detail}")

    lines.append("")
    lines.append("=" * 64)
    lines.append("")

    return "\n".join(lines)


def _indent_json(data: Dict[str, Any], indent: int = 2) -> str:
    """Format JSON with indentation for error logs."""
    try:
        formatted = json.dumps(data, indent=indent, default=str)
        return "\n".join(" " + line for line in formatted.split("\n"))
    except (TypeError, ValueError):
        return f" {repr(data)}"
