"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: codes.py
@DateTime: 2026-10-19
@Docs: Error code grammar and record construction.
错误码语法与错误记录构造。

Grammar / 语法:
    validation.msg.<resource>.<field>[.<arrayPart>].<suffix>

Variants / 变体:
    - linked:   validation.msg.<resource>.<linkedField>.<suffix>
    - resource: validation.msg.<resource>.<suffix>
    - fixed:    validation.msg.<suffix>

Codes are consumed by message resolution and client tooling; they must stay
stable character for character.
错误码被消息解析与客户端工具使用，必须逐字符保持稳定。
"""

from typing import Any

from request_validator.coercion import to_text
from request_validator.focus import Focus
from request_validator.records import ParameterError

CODE_PREFIX = "validation.msg"


def field_code(focus: Focus, suffix: str, *, with_array_part: bool = False) -> str:
    """Build `validation.msg.<resource>.<field>[.<arrayPart>].<suffix>`.
    构建字段级错误码。

    Args:
        focus: Current focus.
            当前焦点。
        suffix: Rule suffix, e.g. "cannot.be.blank".
            规则后缀。
        with_array_part: Insert the array part when an array position is set.
            设置数组位置时插入数组部分。

    Returns:
        str: Error code.
        str: 错误码。
    """
    segments = [CODE_PREFIX, to_text(focus.resource), to_text(focus.field)]
    pos = focus.array_position
    if with_array_part and pos is not None and pos.part.strip():
        segments.append(pos.part)
    segments.append(suffix)
    return ".".join(segments)


def linked_code(focus: Focus, linked_field: str, suffix: str) -> str:
    return ".".join([CODE_PREFIX, to_text(focus.resource), linked_field, suffix])


def resource_code(focus: Focus, suffix: str) -> str:
    return ".".join([CODE_PREFIX, to_text(focus.resource), suffix])


def fixed_code(suffix: str) -> str:
    return f"{CODE_PREFIX}.{suffix}"


def param_message(field: str | None, text: str) -> str:
    """Default message of the form "The parameter `<field>` <text>".
    形如 "The parameter `<field>` <text>" 的默认消息。
    """
    return f"The parameter `{to_text(field)}` {text}"


def build_error(
    code: str,
    message: str,
    field: str | None,
    *,
    rejected_value: Any | None = None,
    args: tuple[Any, ...] = (),
) -> ParameterError:
    """Construct an error record.
    构造错误记录。

    Args:
        code: Error code.
            错误码。
        message: Default message.
            默认消息。
        field: Parameter name.
            参数名。
        rejected_value: Rejected value (optional).
            被拒绝的值（可选）。
        args: Message arguments.
            消息参数。

    Returns:
        ParameterError: Immutable record.
        ParameterError: 不可变错误记录。
    """
    return ParameterError(
        code=code,
        default_message=message,
        field=to_text(field) if field is not None else "",
        rejected_value=rejected_value,
        args=tuple(args),
    )
