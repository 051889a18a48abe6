"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: patterns.py
@DateTime: 2026-10-19
@Docs: Pattern, token and length rules.
模式、取值标记与长度规则。
"""

import re
from collections.abc import Sequence
from typing import Any

from request_validator.codes import build_error, field_code, param_message
from request_validator.coercion import to_text
from request_validator.focus import Focus
from request_validator.records import ParameterError

VALID_INPUT_SEPARATOR = "_"
BOOLEAN_INPUTS = ("TRUE", "FALSE")

# Digits, spaces, dots, parentheses and hyphens, optional leading "+", at most 25 characters.
PHONE_NUMBER_PATTERN = re.compile(r"^\+?[0-9. ()-]{0,25}$")


def true_or_false_required(focus: Focus, flag: Any) -> ParameterError | None:
    """A supplied flag must read as true or false (case-insensitive).
    提供的标志必须为 true 或 false（不区分大小写）。
    """
    if flag is None or to_text(flag).lower() in ("true", "false"):
        return None
    return build_error(
        field_code(focus, "must.be.true.or.false"),
        param_message(focus.field, "must be set as true or false."),
        focus.field,
        rejected_value=flag,
    )


def validate_for_tokens(focus: Focus, valid_inputs: str, separator: str = VALID_INPUT_SEPARATOR) -> ParameterError | None:
    """Trimmed value must equal one of the separator-delimited tokens, ignoring case.
    去除首尾空白后的值必须等于分隔符分隔的某个标记（不区分大小写）。

    Args:
        focus: Current focus.
            当前焦点。
        valid_inputs: Tokens joined by `separator`, e.g. "TRUE_FALSE".
            以 `separator` 连接的标记，例如 "TRUE_FALSE"。
        separator: Token separator.
            标记分隔符。

    Returns:
        ParameterError | None: Violation or None.
        ParameterError | None: 违规记录或 None。
    """
    if focus.value is None:
        return None
    tokens = {t.lower() for t in valid_inputs.split(separator)}
    if to_text(focus.value).strip().lower() in tokens:
        return None
    return build_error(
        field_code(focus, "value.should.true.or.false"),
        param_message(focus.field, "value should true or false "),
        focus.field,
        rejected_value=focus.value,
        args=(focus.value,),
    )


def validate_for_boolean_value(
    focus: Focus, separator: str = VALID_INPUT_SEPARATOR, inputs: Sequence[str] = BOOLEAN_INPUTS
) -> ParameterError | None:
    return validate_for_tokens(focus, separator.join(inputs), separator)


def matches_regular_expression(focus: Focus, expression: str, message: str | None = None) -> ParameterError | None:
    """Whole value text must match `expression`.
    值的完整文本必须匹配 `expression`。

    Args:
        focus: Current focus.
            当前焦点。
        expression: Regular expression.
            正则表达式。
        message: Default message override (optional).
            自定义默认消息（可选）。
    """
    if focus.value is None:
        return None
    if re.fullmatch(expression, to_text(focus.value)) is not None:
        return None
    return build_error(
        field_code(focus, "does.not.match.regexp"),
        message or param_message(focus.field, f"must match the provided regular expression [ {expression} ] ."),
        focus.field,
        rejected_value=focus.value,
        args=(focus.value, expression),
    )


def validate_phone_number(focus: Focus) -> ParameterError | None:
    if focus.value is None:
        return None
    if PHONE_NUMBER_PATTERN.fullmatch(to_text(focus.value)) is not None:
        return None
    return build_error(
        field_code(focus, "format.is.invalid"),
        param_message(focus.field, "is in invalid format, should contain '-','+','()' and numbers only."),
        focus.field,
        rejected_value=focus.value,
        args=(focus.value,),
    )


def not_exceeding_length_of(focus: Focus, max_length: int) -> ParameterError | None:
    """Trimmed text length must not exceed `max_length`.
    去除首尾空白后的文本长度不得超过 `max_length`。
    """
    if focus.value is None:
        return None
    text = to_text(focus.value)
    if len(text.strip()) <= max_length:
        return None
    return build_error(
        field_code(focus, "exceeds.max.length"),
        param_message(focus.field, f"exceeds max length of {max_length}."),
        focus.field,
        rejected_value=focus.value,
        args=(max_length, text),
    )


def not_exceeding_list_length_of(focus: Focus, max_length: int) -> ParameterError | None:
    """A list value must not hold more than `max_length` elements.
    列表值的元素个数不得超过 `max_length`。
    """
    if not isinstance(focus.value, (list, tuple)) or len(focus.value) <= max_length:
        return None
    return build_error(
        field_code(focus, "exceeds.max.length.allowed"),
        param_message(focus.field, f"exceeds allowed max length of {max_length}."),
        focus.field,
        args=(max_length,),
    )
