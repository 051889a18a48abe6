"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: test_exceptions.py
@DateTime: 2026-10-19
@Docs: Tests for exceptions.py module.
exceptions.py 模块测试。
"""

from request_validator.exceptions import (
    VALIDATION_ERRORS_EXIST_CODE,
    InvalidUsage,
    RequestValidatorError,
    ValidationFailed,
    ValueParseError,
)
from request_validator.records import ParameterError


class TestRequestValidatorError:
    """Tests for RequestValidatorError.
    RequestValidatorError 测试。
    """

    def test_attributes(self) -> None:
        """All attributes assigned correctly / 所有属性正确赋值。"""
        exc = RequestValidatorError(message="boom", status_code=422, details={"k": "v"}, error_code="custom")
        assert exc.message == "boom"
        assert exc.status_code == 422
        assert exc.details == {"k": "v"}
        assert exc.error_code == "custom"
        assert str(exc) == "boom"

    def test_defaults(self) -> None:
        """Default status_code and error_code / 默认 status_code 和 error_code。"""
        exc = RequestValidatorError(message="msg")
        assert exc.status_code == 400
        assert exc.details is None
        assert exc.error_code == "request_validator_error"


class TestValidationFailed:
    """Tests for ValidationFailed.
    ValidationFailed 测试。
    """

    def test_carries_errors_in_order(self) -> None:
        """Errors kept as a tuple in insertion order / 错误按插入顺序保存为元组。"""
        first = ParameterError("a.code", "a", "a")
        second = ParameterError("b.code", "b", "b", rejected_value=3, args=(3,))
        exc = ValidationFailed(errors=[first, second])
        assert exc.errors == (first, second)
        assert exc.status_code == 400
        assert exc.error_code == VALIDATION_ERRORS_EXIST_CODE
        assert exc.message == "Validation errors exist."
        assert exc.details[1] == {
            "code": "b.code",
            "default_message": "b",
            "field": "b",
            "rejected_value": 3,
            "args": [3],
        }

    def test_is_request_validator_error(self) -> None:
        exc = ValidationFailed(errors=[])
        assert isinstance(exc, RequestValidatorError)
        assert not isinstance(exc, InvalidUsage)


class TestInvalidUsage:
    """Tests for InvalidUsage and ValueParseError.
    InvalidUsage 与 ValueParseError 测试。
    """

    def test_invalid_usage_defaults(self) -> None:
        """Programming errors map to 500 / 编程错误对应 500。"""
        exc = InvalidUsage(message="bad call")
        assert exc.status_code == 500
        assert exc.error_code == "invalid_usage"

    def test_value_parse_error_is_invalid_usage(self) -> None:
        exc = ValueParseError(message="not a number", details={"field": "age"})
        assert isinstance(exc, InvalidUsage)
        assert exc.error_code == "value_parse_error"
        assert exc.details == {"field": "age"}
        assert exc.status_code == 500
