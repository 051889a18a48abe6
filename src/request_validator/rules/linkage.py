"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: linkage.py
@DateTime: 2026-10-19
@Docs: Cross-field linkage rules.
跨字段关联规则。

Linked rules report against the linked parameter: the code reads
`validation.msg.<resource>.<linkedField>.<suffix naming the focus field>`.
关联规则针对被关联参数报告，错误码为
`validation.msg.<resource>.<linkedField>.<引用焦点字段的后缀>`。
"""

from typing import Any

from request_validator.codes import build_error, field_code, linked_code, param_message, resource_code
from request_validator.coercion import is_blank, same_value, to_text
from request_validator.focus import Focus
from request_validator.records import ParameterError


def _both_absent(focus: Focus, linked_value: Any) -> bool:
    return focus.skips and linked_value is None


def and_not_blank(focus: Focus, linked_name: str, linked_value: Any) -> ParameterError | None:
    """Linked parameter must be non-blank when the focus field is populated.
    焦点字段有值时，被关联参数不能为空。

    Args:
        focus: Current focus.
            当前焦点。
        linked_name: Linked parameter name.
            被关联参数名。
        linked_value: Linked parameter value.
            被关联参数值。

    Returns:
        ParameterError | None: Violation or None.
        ParameterError | None: 违规记录或 None。
    """
    if _both_absent(focus, linked_value):
        return None
    if focus.value is None or not is_blank(linked_value):
        return None
    return build_error(
        linked_code(focus, linked_name, f"cannot.be.empty.when.{to_text(focus.field)}.is.populated"),
        f"The parameter `{linked_name}` cannot be empty when {to_text(focus.field)} is populated.",
        linked_name,
        rejected_value=linked_value,
        args=(focus.value,),
    )


def equal_to_parameter(focus: Focus, linked_name: str, linked_value: Any) -> ParameterError | None:
    """Linked parameter must equal the focus value.
    被关联参数必须等于焦点值。
    """
    if _both_absent(focus, linked_value):
        return None
    if focus.value is None or same_value(focus.value, linked_value):
        return None
    return build_error(
        linked_code(focus, linked_name, f"not.equal.to.{to_text(focus.field)}"),
        f"The parameter `{linked_name}` is not equal to {to_text(focus.field)}.",
        linked_name,
        rejected_value=linked_value,
        args=(focus.value,),
    )


def not_same_as_parameter(focus: Focus, linked_name: str, linked_value: Any) -> ParameterError | None:
    """Linked parameter must differ from the focus value.
    被关联参数必须不同于焦点值。
    """
    if _both_absent(focus, linked_value):
        return None
    if focus.value is None or not same_value(focus.value, linked_value):
        return None
    return build_error(
        linked_code(focus, linked_name, f"same.as.{to_text(focus.field)}"),
        f"The parameter `{linked_name}` is same as {to_text(focus.field)}.",
        linked_name,
        rejected_value=linked_value,
        args=(focus.value,),
    )


def _blank_when_provided(focus: Focus, parameter_value: Any) -> bool:
    """True when the focus satisfies "blank while the other parameter is set".
    焦点值满足"另一参数有值时为空"时返回 True。
    """
    if focus.value is None and parameter_value is not None:
        return True
    return is_blank(focus.value) and not is_blank(parameter_value)


def must_be_blank_when_parameter_provided(focus: Focus, parameter_name: str, parameter_value: Any) -> ParameterError | None:
    """Focus value cannot also be provided when another parameter is populated.
    另一参数有值时，焦点值不能同时提供。
    """
    if focus.skips or _blank_when_provided(focus, parameter_value):
        return None
    return build_error(
        field_code(focus, f"cannot.also.be.provided.when.{parameter_name}.is.populated"),
        param_message(focus.field, f"cannot also be provided when `{parameter_name}` is populated."),
        focus.field,
        rejected_value=focus.value,
        args=(parameter_name, parameter_value),
    )


def must_be_blank_when_parameter_provided_is(focus: Focus, parameter_name: str, parameter_value: Any) -> ParameterError | None:
    """Focus value cannot also be provided when another parameter has a given value.
    另一参数为指定值时，焦点值不能同时提供。
    """
    if focus.skips or _blank_when_provided(focus, parameter_value):
        return None
    shown = to_text(parameter_value)
    return build_error(
        field_code(focus, f"cannot.also.be.provided.when.{parameter_name}.is.{shown}"),
        param_message(focus.field, f"cannot also be provided when `{parameter_name}` is {shown}"),
        focus.field,
        rejected_value=focus.value,
        args=(parameter_name, parameter_value),
    )


def any_of_not_null(focus: Focus, *values: Any) -> ParameterError | None:
    """At least one of the given update values must be present.
    给定的更新值中至少有一个存在。
    """
    if any(v is not None for v in values):
        return None
    return build_error(
        resource_code(focus, "no.parameters.for.update"),
        "No parameters passed for update.",
        "id",
    )
