"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: dates.py
@DateTime: 2026-10-19
@Docs: Date ordering rules.
日期顺序规则。

The focus value must be a date, a datetime or ISO-8601 date text; anything else
raises ValueParseError. An absent value or bound passes.
焦点值必须是 date、datetime 或 ISO-8601 日期文本，否则抛出 ValueParseError。
值或边界缺失时直接通过。
"""

from collections.abc import Callable
from datetime import date

from request_validator.codes import build_error, field_code, param_message
from request_validator.coercion import as_date
from request_validator.focus import Focus
from request_validator.records import ParameterError

IS_GREATER_THAN_DATE = "is.greater.than.date"


def _compare(
    focus: Focus,
    bound: date | None,
    violated: Callable[[date, date], bool],
    suffix: str,
    text: str,
) -> ParameterError | None:
    if focus.value is None or bound is None:
        return None
    value = as_date(focus.value, field=focus.field)
    bound = as_date(bound, field=focus.field)
    if not violated(value, bound):
        return None
    return build_error(
        field_code(focus, suffix),
        param_message(focus.field, f"{text}{bound.isoformat()}"),
        focus.field,
        rejected_value=value,
        args=(value, bound),
    )


def validate_date_after(focus: Focus, bound: date | None) -> ParameterError | None:
    """Date must not be earlier than `bound`.
    日期不得早于 `bound`。
    """
    return _compare(focus, bound, lambda v, b: b > v, "is.less.than.date", "must be greater than the provided date ")


def validate_date_before(focus: Focus, bound: date | None) -> ParameterError | None:
    """Date must not be later than `bound`.
    日期不得晚于 `bound`。
    """
    return _compare(focus, bound, lambda v, b: b < v, IS_GREATER_THAN_DATE, "must be less than the provided date ")


def validate_date_before_or_equal(focus: Focus, bound: date | None) -> ParameterError | None:
    return _compare(
        focus, bound, lambda v, b: v > b, IS_GREATER_THAN_DATE, "must be less than or equal to the provided date: "
    )


def validate_date_for_equal(focus: Focus, bound: date | None) -> ParameterError | None:
    return _compare(focus, bound, lambda v, b: v != b, "is.not.equal.to.date", "must be equal to the provided date ")
