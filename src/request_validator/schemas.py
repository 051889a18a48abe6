"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: schemas.py
@DateTime: 2026-10-19
@Docs: Serializable models for accumulated validation errors.
累计校验错误的可序列化模型。

Field names serialize in camelCase (`userMessageGlobalisationCode`, ...),
the shape client tooling parses.
字段以 camelCase 序列化（`userMessageGlobalisationCode` 等），即客户端工具解析的格式。
"""

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field

from request_validator.records import ParameterError

if TYPE_CHECKING:
    from request_validator.exceptions import ValidationFailed

DEVELOPER_MESSAGE = "The request was invalid. This typically will happen due to validation errors which are provided."


class _CamelModel(BaseModel):
    model_config = ConfigDict(validate_by_name=True, validate_by_alias=True, serialize_by_alias=True)


class ErrorArg(_CamelModel):
    """
    One message argument.
    单个消息参数。
    """

    value: Any | None = None


class ParameterErrorItem(_CamelModel):
    """
    Serialized ParameterError.
    序列化后的 ParameterError。
    """

    developer_message: str = Field(alias="developerMessage")
    default_user_message: str = Field(alias="defaultUserMessage")
    user_message_globalisation_code: str = Field(alias="userMessageGlobalisationCode")
    parameter_name: str = Field(alias="parameterName")
    value: Any | None = None
    args: list[ErrorArg] = Field(default_factory=list)

    @classmethod
    def from_record(cls, record: ParameterError) -> "ParameterErrorItem":
        """Build an item from an error record.
        由错误记录构建条目。

        Args:
            record: Error record.
                错误记录。

        Returns:
            ParameterErrorItem: Serializable item.
            ParameterErrorItem: 可序列化条目。
        """
        return cls(
            developer_message=record.default_message,
            default_user_message=record.default_message,
            user_message_globalisation_code=record.code,
            parameter_name=record.field,
            value=record.rejected_value,
            args=[ErrorArg(value=a) for a in record.args],
        )


class ValidationErrorPayload(_CamelModel):
    """
    Payload describing a ValidationFailed.
    描述 ValidationFailed 的载荷。
    """

    developer_message: str = Field(default=DEVELOPER_MESSAGE, alias="developerMessage")
    http_status_code: str = Field(default="400", alias="httpStatusCode")
    default_user_message: str = Field(alias="defaultUserMessage")
    user_message_globalisation_code: str = Field(alias="userMessageGlobalisationCode")
    errors: list[ParameterErrorItem] = Field(default_factory=list)

    @classmethod
    def from_exception(cls, exc: "ValidationFailed") -> "ValidationErrorPayload":
        return cls(
            http_status_code=str(exc.status_code),
            default_user_message=exc.message,
            user_message_globalisation_code=exc.error_code,
            errors=[ParameterErrorItem.from_record(e) for e in exc.errors],
        )
