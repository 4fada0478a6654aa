"""Monadic Error Handling System

Type-safe error handling inspired by Haskell's Either monad and Rust's
Result type.

Key components:
- Result[T, E]: Monadic container for success/failure
- AppError: Base error type with full context
- ErrorCode: Hierarchical error code taxonomy
- Builder functions: Ergonomic error construction

Expected grammatical gaps (a missing plural, indefinite + plural) are not
errors: resolvers report them inside the Ok value. Err is reserved for
malformed records and out-of-domain grammar values.

Usage:
    from core.errors import Ok, Err, Result, AppError, invalid_grammar_parameter

    def parse_case(value: str) -> Result[Case, AppError]:
        try:
            return Ok(Case(value))
        except ValueError:
            return invalid_grammar_parameter("case", value, origin="declension")

    match parse_case("dative"):
        case Ok(case):
            print(case.label)
        case Err(error):
            log.warning(error.message, code=error.code.name)
"""
from .types import (
    # Core types
    Result,
    Ok,
    Err,
    AppError,
    ErrorCode,
    ErrorContext,
    # Combinators
    sequence_results,
)

from .builders import (
    # Validation (E2xxx)
    validation_error,
    required_field,
    invalid_grammar_parameter,
    unsupported_part_of_speech,
)

from .boundaries import (
    ErrorMapper,
    ValidationErrorMapper,
    EngineErrorMapper,
)

__all__ = [
    # Core types
    "Result",
    "Ok",
    "Err",
    "AppError",
    "ErrorCode",
    "ErrorContext",
    # Combinators
    "sequence_results",
    # Validation (E2xxx)
    "validation_error",
    "required_field",
    "invalid_grammar_parameter",
    "unsupported_part_of_speech",
    # Boundary Mappers
    "ErrorMapper",
    "ValidationErrorMapper",
    "EngineErrorMapper",
]
