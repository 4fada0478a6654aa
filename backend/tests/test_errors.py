# tests/test_errors.py
"""Result combinators and boundary mappers."""
from core.errors import (
    AppError,
    EngineErrorMapper,
    Err,
    ErrorCode,
    Ok,
    ValidationErrorMapper,
    invalid_grammar_parameter,
    sequence_results,
)


def test_invalid_grammar_parameter_metadata():
    error = invalid_grammar_parameter("case", "instrumental", allowed=["nominative"], origin="test").unwrap_err()
    assert error.code is ErrorCode.E2030_INVALID_GRAMMAR_PARAMETER
    assert error.metadata == {"field": "case", "value": "instrumental", "allowed": ["nominative"]}
    assert error.context.origin == "test"
    assert error.code.category == "validation"


def test_sequence_results_stops_at_first_error():
    failure = invalid_grammar_parameter("number", "dual")
    assert sequence_results([Ok(1), Ok(2)]).unwrap() == [1, 2]
    first = sequence_results([Ok(1), failure, invalid_grammar_parameter("case", "x")])
    assert first.unwrap_err() is failure.unwrap_err()


def test_engine_mapper_sets_origin():
    mapper = EngineErrorMapper("selection")
    result = mapper.map_result(invalid_grammar_parameter("case", "x"))
    assert result.unwrap_err().context.origin == "engine.selection"
    assert mapper.map_result(Ok(3)).unwrap() == 3


def test_pydantic_errors_are_mapped_by_type():
    mapper = ValidationErrorMapper(origin="record")
    errors = mapper.map_pydantic_errors([
        {"loc": ("baseForm",), "msg": "Field required", "type": "missing"},
        {"loc": ("separable",), "msg": "Input should be a valid boolean", "type": "bool_type"},
        {"loc": ("plural",), "msg": "bad", "type": "value_error"},
    ])
    assert [e.code for e in errors] == [
        ErrorCode.E2001_REQUIRED_FIELD_MISSING,
        ErrorCode.E2004_INVALID_TYPE,
        ErrorCode.E2002_INVALID_FORMAT,
    ]
    assert errors[0].metadata["field"] == "baseForm"


def test_collapsed_pydantic_exception():
    mapper = ValidationErrorMapper(origin="record")
    exc = ValueError("two problems")
    error = mapper.map_pydantic_exception(exc, [
        {"loc": ("baseForm",), "msg": "Field required", "type": "missing"},
        {"loc": ("separable",), "msg": "Input should be a valid boolean", "type": "bool_type"},
    ])
    assert isinstance(error, AppError)
    assert error.code is ErrorCode.E2001_REQUIRED_FIELD_MISSING
    assert error.metadata["error_count"] == 2
    assert error.cause is exc


def test_err_match():
    result = Err(AppError(code=ErrorCode.E9001_UNEXPECTED_ERROR, message="boom"))
    assert result.match(ok=lambda v: v, err=lambda e: e.message) == "boom"
