"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: membership.py
@DateTime: 2026-10-19
@Docs: Set membership rules.
集合成员规则。
"""

from collections.abc import Iterable
from enum import Enum
from typing import Any

from request_validator.codes import build_error, field_code, param_message
from request_validator.coercion import same_value, to_text
from request_validator.focus import Focus
from request_validator.records import ParameterError

NOT_ONE_OF_EXPECTED = "is.not.one.of.expected.enumerations"


def _listing(values: Iterable[Any]) -> str:
    return ", ".join(to_text(v) for v in values)


def _member(value: Any, values: tuple[Any, ...]) -> bool:
    return any(same_value(value, v) for v in values)


def _not_one_of(focus: Focus, values: tuple[Any, ...]) -> ParameterError:
    return build_error(
        field_code(focus, NOT_ONE_OF_EXPECTED),
        param_message(focus.field, f"must be one of [ {_listing(values)} ] ."),
        focus.field,
        rejected_value=focus.value,
        args=(focus.value, values),
    )


def is_one_of_these_values(focus: Focus, *values: Any) -> ParameterError | None:
    """Value must equal one of `values`; absent is a violation.
    值必须等于 `values` 之一；缺失视为违规。

    Matching is case- and type-sensitive: `True` does not match `1`.
    匹配区分大小写与类型：`True` 不匹配 `1`。

    Args:
        focus: Current focus.
            当前焦点。
        *values: Allowed values.
            允许的值。

    Returns:
        ParameterError | None: Violation with args (value, values).
        ParameterError | None: 违规记录，args 为 (value, values)。
    """
    if focus.skips:
        return None
    if focus.value is None or not _member(focus.value, values):
        return _not_one_of(focus, values)
    return None


def is_one_of_these_string_values(focus: Focus, *values: Any) -> ParameterError | None:
    """Lower-cased value must match one of the lower-cased `values`.
    小写后的值必须匹配小写后的 `values` 之一。
    """
    if focus.skips:
        return None
    allowed = {to_text(v).lower() for v in values}
    if focus.value is None or to_text(focus.value).lower() not in allowed:
        return _not_one_of(focus, values)
    return None


def is_one_of_enum_values(focus: Focus, enum_cls: type[Enum]) -> ParameterError | None:
    """Value must name a member of `enum_cls` (case-insensitive).
    值必须为 `enum_cls` 某个成员的名称（不区分大小写）。
    """
    return is_one_of_these_string_values(focus, *(member.name for member in enum_cls))


def is_not_one_of_these_values(focus: Focus, *values: Any) -> ParameterError | None:
    """Value must not equal any of `values`.
    值不得等于 `values` 中的任何一个。
    """
    if focus.value is None or not _member(focus.value, values):
        return None
    return build_error(
        field_code(focus, "is.one.of.unwanted.enumerations"),
        param_message(focus.field, f"must not be any of [ {_listing(values)} ] ."),
        focus.field,
        rejected_value=focus.value,
        args=(focus.value, values),
    )
