"""Error Boundary Mappers

Provides module boundary error mapping for clean error propagation.
Each module should have a single error type at its boundary, with
internal errors mapped at the boundary.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from .types import (
    AppError,
    ErrorCode,
    ErrorContext,
    Err,
    Ok,
    Result,
)

T = TypeVar("T")


class ErrorMapper(ABC, Generic[T]):
    """Base class for module boundary error mappers."""

    @abstractmethod
    def map_error(self, error: AppError) -> AppError:
        """Map an error to the boundary's error type."""
        ...

    def map_result(self, result: Result[T, AppError]) -> Result[T, AppError]:
        """Map error in Result if present."""
        match result:
            case Ok(_):
                return result
            case Err(e):
                return Err(self.map_error(e))


class ValidationErrorMapper(ErrorMapper[T]):
    """Maps record validation errors to AppErrors."""

    def __init__(self, origin: str = "validation"):
        self.origin = origin

    def map_error(self, error: AppError) -> AppError:
        """Map validation error."""
        if 2000 <= error.code.value < 3000:
            return error
        return error.with_context(origin=self.origin)

    def map_pydantic_errors(self, errors: list[dict]) -> list[AppError]:
        """Map Pydantic validation errors to AppErrors."""
        result = []
        for err in errors:
            field = ".".join(str(loc) for loc in err.get("loc", []))
            msg = err.get("msg", "Validation error")
            err_type = err.get("type", "value_error")

            code = ErrorCode.E2000_VALIDATION_GENERIC
            if err_type == "missing":
                code = ErrorCode.E2001_REQUIRED_FIELD_MISSING
            elif err_type.endswith("_type") or "type_error" in err_type:
                code = ErrorCode.E2004_INVALID_TYPE
            elif "value_error" in err_type:
                code = ErrorCode.E2002_INVALID_FORMAT

            result.append(AppError(
                code=code,
                message=f"{field}: {msg}",
                context=ErrorContext(origin=self.origin),
                metadata={"field": field, "error_type": err_type},
            ))

        return result

    def map_pydantic_exception(self, exc: Exception, errors: list[dict]) -> AppError:
        """Collapse a pydantic ValidationError into a single boundary error."""
        mapped = self.map_pydantic_errors(errors)
        if len(mapped) == 1:
            return mapped[0].with_metadata(error_count=1)
        first_code = mapped[0].code if mapped else ErrorCode.E2000_VALIDATION_GENERIC
        return AppError(
            code=first_code,
            message="; ".join(e.message for e in mapped) or str(exc),
            context=ErrorContext(origin=self.origin),
            metadata={
                "error_count": len(mapped),
                "fields": [e.metadata.get("field") for e in mapped],
            },
            cause=exc,
        )


class EngineErrorMapper(ErrorMapper[T]):
    """Maps engine errors to caller-facing errors."""

    def __init__(self, engine_name: str):
        self.engine_name = engine_name
        self.origin = f"engine.{engine_name}"

    def map_error(self, error: AppError) -> AppError:
        """Map engine error with origin context."""
        return error.with_context(origin=self.origin)
