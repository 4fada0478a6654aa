"""Domain-Specific Error Builders

Ergonomic constructors for typed errors.
Each builder creates AppError with appropriate code and context.
"""
from typing import Any, Iterable

from .types import AppError, ErrorCode, ErrorContext, Err


# =============================================================================
# Validation Errors (E2xxx)
# =============================================================================

def validation_error(
    message: str,
    *,
    code: ErrorCode = ErrorCode.E2000_VALIDATION_GENERIC,
    field: str | None = None,
    value: str | None = None,
    origin: str = "",
    **metadata,
) -> Err[AppError]:
    """Create validation error."""
    meta = {"field": field, "value": value, **metadata}
    return Err(AppError(
        code=code,
        message=message,
        context=ErrorContext(origin=origin),
        metadata={k: v for k, v in meta.items() if v is not None},
    ))


def required_field(field: str, origin: str = "") -> Err[AppError]:
    return validation_error(
        f"Required field '{field}' is missing",
        code=ErrorCode.E2001_REQUIRED_FIELD_MISSING,
        field=field,
        origin=origin,
    )


def invalid_grammar_parameter(
    parameter: str,
    value: Any,
    allowed: Iterable[str] = (),
    origin: str = "",
) -> Err[AppError]:
    """A grammar value outside its closed domain (unknown case, gender, ...)."""
    allowed = list(allowed)
    msg = f"Invalid value for grammar parameter '{parameter}': {value!r}"
    if allowed:
        msg += f" (allowed: {', '.join(allowed)})"
    return validation_error(
        msg,
        code=ErrorCode.E2030_INVALID_GRAMMAR_PARAMETER,
        field=parameter,
        value=str(value),
        allowed=allowed or None,
        origin=origin,
    )


def unsupported_part_of_speech(
    part_of_speech: str, expected: str, origin: str = ""
) -> Err[AppError]:
    return validation_error(
        f"Entry is a '{part_of_speech}', expected '{expected}'",
        code=ErrorCode.E2031_UNSUPPORTED_PART_OF_SPEECH,
        field="partOfSpeech",
        value=part_of_speech,
        origin=origin,
    )

