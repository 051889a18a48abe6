"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: presence.py
@DateTime: 2026-10-19
@Docs: Presence rules (absence itself is the tested condition).
存在性规则（缺失本身即为被检查的条件）。
"""

from typing import Any

from request_validator.codes import build_error, field_code, param_message
from request_validator.coercion import as_collection, as_sequence, is_blank, to_text
from request_validator.focus import Focus
from request_validator.records import ParameterError

CANNOT_BE_BLANK = "cannot.be.blank"
CANNOT_BE_EMPTY = "cannot.be.empty"


def _mandatory(focus: Focus) -> ParameterError:
    name = focus.reported_field
    pos = focus.array_position
    return build_error(
        field_code(focus, CANNOT_BE_BLANK, with_array_part=True),
        param_message(name, "is mandatory."),
        name,
        args=(pos.index,) if pos is not None and pos.part.strip() else (),
    )


def not_null(focus: Focus) -> ParameterError | None:
    """Value must be present.
    值必须存在。

    Args:
        focus: Current focus.
            当前焦点。

    Returns:
        ParameterError | None: Violation or None.
        ParameterError | None: 违规记录或 None。
    """
    if focus.value is None and not focus.skip_if_absent:
        return _mandatory(focus)
    return None


def not_blank(focus: Focus) -> ParameterError | None:
    """Value must be present and not blank text.
    值必须存在且不为空白文本。
    """
    if focus.skips:
        return None
    if is_blank(focus.value):
        return _mandatory(focus)
    return None


def array_not_empty(focus: Focus) -> ParameterError | None:
    """Array value must hold at least one element; absent counts as empty.
    数组值至少包含一个元素；缺失视为空。

    Raises:
        InvalidUsage: Value is present but is not an array.
            值存在但不是数组。
    """
    if focus.skips:
        return None
    if focus.value is None or not as_sequence(focus.value, field=focus.field):
        return build_error(
            field_code(focus, CANNOT_BE_EMPTY),
            param_message(focus.field, "cannot be empty. You must select at least one."),
            focus.field,
        )
    return None


def collection_not_empty(focus: Focus) -> ParameterError | None:
    """A present collection (e.g. a JSON array) must not be empty.
    已提供的集合（如 JSON 数组）不能为空。
    """
    if focus.value is None:
        return None
    if not as_collection(focus.value, field=focus.field):
        return build_error(
            field_code(focus, CANNOT_BE_EMPTY),
            param_message(focus.field, "cannot be empty. You must select at least one."),
            focus.field,
        )
    return None


def cant_be_blank_when_parameter_provided_is(focus: Focus, parameter_name: str, parameter_value: Any) -> ParameterError | None:
    """Value must be provided when another parameter has a given value.
    当另一参数为指定值时，当前值必须提供。

    The caller decides when the other parameter holds the value; this rule
    only checks the focus.
    由调用方判断另一参数是否为该值；本规则只检查焦点值。
    """
    if not is_blank(focus.value):
        return None
    shown = to_text(parameter_value)
    return build_error(
        field_code(focus, f"must.be.provided.when.{parameter_name}.is.{shown}"),
        param_message(focus.field, f"must be provided when `{parameter_name}` is {shown}"),
        focus.field,
        rejected_value=focus.value,
        args=(parameter_name, parameter_value),
    )


def true_or_false_provided(focus: Focus, provided: bool) -> ParameterError | None:
    """Record a missing or unreadable mandatory boolean.
    记录缺失或无法识别的必填布尔参数。
    """
    if provided or focus.skip_if_absent:
        return None
    return build_error(
        field_code(focus, "must.be.true.or.false"),
        param_message(focus.field, "must be set as true or false."),
        focus.field,
    )
