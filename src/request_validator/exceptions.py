"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: exceptions.py
@DateTime: 2026-10-19
@Docs: Request validation error hierarchy.
请求校验异常体系。

Two disjoint failure channels:
两条互不相交的失败通道：
- ValidationFailed: accumulated input violations, recoverable by the client.
    ValidationFailed：累计的输入校验错误，客户端修正后可重试。
- InvalidUsage: caller programming errors, never recorded as violations.
    InvalidUsage：调用方编程错误，绝不记录为校验错误。
"""

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from request_validator.records import ParameterError
    from request_validator.schemas import ValidationErrorPayload

VALIDATION_ERRORS_EXIST_CODE = "validation.msg.validation.errors.exist"
VALIDATION_ERRORS_EXIST_MESSAGE = "Validation errors exist."


class RequestValidatorError(Exception):
    """
    Request Validator Errors.
    请求校验异常。

    Attributes:
        message: Error message.
        message: 错误消息。
        status_code: Suggested HTTP status code.
        status_code: 建议的 HTTP 状态码。
        details: Error details.
        details: 错误详情。
        error_code: Stable error code.
        error_code: 稳定错误码。
    """

    def __init__(
        self,
        *,
        message: str,
        status_code: int = 400,
        details: Any | None = None,
        error_code: str = "request_validator_error",
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details
        self.error_code = error_code


class ValidationFailed(RequestValidatorError):
    """
    Aggregate failure raised once per session by ValidationContext.finish().
    会话结束时由 ValidationContext.finish() 抛出的聚合失败。

    Attributes:
        errors: Recorded violations in insertion order.
        errors: 按记录顺序排列的校验错误。
    """

    def __init__(
        self,
        *,
        errors: Iterable["ParameterError"],
        message: str = VALIDATION_ERRORS_EXIST_MESSAGE,
        status_code: int = 400,
        error_code: str = VALIDATION_ERRORS_EXIST_CODE,
    ) -> None:
        self.errors: tuple[ParameterError, ...] = tuple(errors)
        super().__init__(
            message=message,
            status_code=status_code,
            details=[e.to_dict() for e in self.errors],
            error_code=error_code,
        )

    def to_payload(self) -> "ValidationErrorPayload":
        """Build the serializable payload for the error list.
        构建错误列表的可序列化载荷。

        Returns:
            ValidationErrorPayload: Payload model.
            ValidationErrorPayload: 载荷模型。
        """
        from request_validator.schemas import ValidationErrorPayload

        return ValidationErrorPayload.from_exception(self)


class InvalidUsage(RequestValidatorError):
    """
    Caller contract violation (programming error).
    调用方契约违规（编程错误）。
    """

    def __init__(
        self,
        *,
        message: str,
        status_code: int = 500,
        details: Any | None = None,
        error_code: str = "invalid_usage",
    ) -> None:
        super().__init__(message=message, status_code=status_code, details=details, error_code=error_code)


class ValueParseError(InvalidUsage):
    """
    Focus value could not be coerced to the type a rule needs.
    焦点值无法转换为规则所需的类型。
    """

    def __init__(
        self,
        *,
        message: str,
        details: Any | None = None,
        error_code: str = "value_parse_error",
    ) -> None:
        super().__init__(message=message, details=details, error_code=error_code)
