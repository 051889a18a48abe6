"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: magnitude.py
@DateTime: 2026-10-19
@Docs: Bounded magnitude and ordering rules for integers, longs and decimals.
整数、长整数与小数的数值范围及顺序规则。

These rules pass vacuously on an absent value; pair them with not_null() when
the field is mandatory. An unparseable value raises ValueParseError.
这些规则在值缺失时直接通过；字段必填时请先调用 not_null()。
无法解析的值会抛出 ValueParseError。
"""

from decimal import Decimal
from typing import Any

from request_validator.codes import build_error, field_code, param_message
from request_validator.coercion import as_decimal, as_integer, scale_of
from request_validator.exceptions import InvalidUsage
from request_validator.focus import Focus
from request_validator.records import ParameterError

NOT_WITHIN_EXPECTED_RANGE = "is.not.within.expected.range"
NOT_GREATER_THAN_ZERO = "not.greater.than.zero"
NOT_ZERO_OR_GREATER = "not.zero.or.greater"
NOT_GREATER_THAN_SPECIFIED_NUMBER = "not.greater.than.specified.number"
IS_LESS_THAN_MIN = "is.less.than.min"
IS_GREATER_THAN_MAX = "is.greater.than.max"


def _violation(focus: Focus, suffix: str, text: str, *args: Any) -> ParameterError:
    return build_error(
        field_code(focus, suffix),
        param_message(focus.field, text),
        focus.field,
        rejected_value=focus.value,
        args=args,
    )


def _int(focus: Focus) -> int:
    return as_integer(focus.value, field=focus.field, bits=32)


def _long(focus: Focus) -> int:
    return as_integer(focus.value, field=focus.field, bits=64)


def _dec(focus: Focus) -> Decimal:
    return as_decimal(focus.value, field=focus.field)


def in_min_max_range(focus: Focus, minimum: int, maximum: int) -> ParameterError | None:
    """Integer value must lie within [minimum, maximum].
    整数值必须位于 [minimum, maximum] 区间内。

    Args:
        focus: Current focus.
            当前焦点。
        minimum: Inclusive lower bound.
            下界（含）。
        maximum: Inclusive upper bound.
            上界（含）。

    Returns:
        ParameterError | None: Violation with args (value, minimum, maximum).
        ParameterError | None: 违规记录，args 为 (value, minimum, maximum)。
    """
    if focus.value is None:
        return None
    number = _int(focus)
    if number < minimum or number > maximum:
        return _violation(focus, NOT_WITHIN_EXPECTED_RANGE, f"must be between {minimum} and {maximum}.", number, minimum, maximum)
    return None


def positive_amount(focus: Focus) -> ParameterError | None:
    if focus.value is None:
        return None
    number = _dec(focus)
    if number <= 0:
        return _violation(focus, NOT_GREATER_THAN_ZERO, "must be greater than 0.", number, 0)
    return None


def zero_or_positive_amount(focus: Focus) -> ParameterError | None:
    if focus.value is None:
        return None
    number = _dec(focus)
    if number < 0:
        return _violation(focus, NOT_ZERO_OR_GREATER, "must be greater than or equal to 0.", number, 0)
    return None


def integer_zero_or_greater(focus: Focus) -> ParameterError | None:
    if focus.value is None:
        return None
    number = _int(focus)
    if number < 0:
        return _violation(focus, NOT_ZERO_OR_GREATER, "must be zero or greater.", number, 0)
    return None


def integer_greater_than_zero(focus: Focus) -> ParameterError | None:
    if focus.value is None:
        return None
    number = _int(focus)
    if number < 1:
        return _violation(focus, NOT_GREATER_THAN_ZERO, "must be greater than 0.", number, 0)
    return None


def integer_greater_than_number(focus: Focus, number: int) -> ParameterError | None:
    if focus.value is None:
        return None
    value = _int(focus)
    if value <= number:
        return _violation(focus, NOT_GREATER_THAN_SPECIFIED_NUMBER, f"must be greater than {number}", value, number)
    return None


def integer_equal_to_or_greater_than_number(focus: Focus, number: int) -> ParameterError | None:
    if focus.value is None:
        return None
    value = _int(focus)
    if value < number:
        return _violation(
            focus,
            "not.equal.to.or.greater.than.specified.number",
            f"must be equal to or greater than {number}",
            value,
            number,
        )
    return None


def integer_same_as_number(focus: Focus, number: int) -> ParameterError | None:
    if focus.value is None:
        return None
    value = _int(focus)
    if value != number:
        return _violation(focus, "not.equal.to.specified.number", f"must be same as {number}", value, number)
    return None


def integer_in_multiples_of_number(focus: Focus, number: int) -> ParameterError | None:
    """Integer value must be a positive multiple of `number`.
    整数值必须是 `number` 的正整数倍。

    Raises:
        InvalidUsage: number is zero.
            number 为 0。
    """
    if focus.value is None:
        return None
    if number == 0:
        raise InvalidUsage(message="integer_in_multiples_of_number() needs a non-zero number", details={"field": focus.field})
    value = _int(focus)
    if value < number or value % number != 0:
        return _violation(focus, "not.in.multiples.of.specified.number", f"must be multiples of {number}", value, number)
    return None


def long_greater_than_zero(focus: Focus) -> ParameterError | None:
    if focus.value is None:
        return None
    number = _long(focus)
    if number < 1:
        return _violation(focus, NOT_GREATER_THAN_ZERO, "must be greater than 0.", number, 0)
    return None


def long_zero_or_greater(focus: Focus) -> ParameterError | None:
    if focus.value is None:
        return None
    number = _long(focus)
    if number < 0:
        return _violation(focus, "not.equal.or.greater.than.zero", "must be equal or greater than 0.", number, 0)
    return None


def long_greater_than_number(focus: Focus, number: int) -> ParameterError | None:
    if focus.value is None:
        return None
    value = _long(focus)
    if value <= number:
        return _violation(focus, NOT_GREATER_THAN_SPECIFIED_NUMBER, f"must be greater than {number}", value, number)
    return None


def long_greater_than_number_at(focus: Focus, param_name: str, number: int, index: int) -> ParameterError | None:
    """Long value must exceed `number`, reported against a named bound at an index.
    长整数值必须大于 `number`，错误码包含边界名与下标。
    """
    if focus.value is None:
        return None
    value = _long(focus)
    if value <= number:
        # "at Index" keeps its space: downstream message bundles are keyed on it.
        return _violation(
            focus, f"not.greater.than.specified.{param_name}.at Index.{index}", f"must be greater than {number}", value, number
        )
    return None


def integer_not_less_than_min(focus: Focus, minimum: int | None) -> ParameterError | None:
    if focus.value is None or minimum is None:
        return None
    number = _int(focus)
    if number < minimum:
        return _violation(focus, IS_LESS_THAN_MIN, f"must be greater than the minimum value {minimum}", number, minimum)
    return None


def integer_not_greater_than_max(focus: Focus, maximum: int | None) -> ParameterError | None:
    if focus.value is None or maximum is None:
        return None
    number = _int(focus)
    if number > maximum:
        return _violation(focus, IS_GREATER_THAN_MAX, f"must be less than the maximum value {maximum}", number, maximum)
    return None


def not_less_than_min(focus: Focus, minimum: Decimal | None) -> ParameterError | None:
    """Decimal value must not be below `minimum`.
    小数值不得小于 `minimum`。
    """
    if focus.value is None or minimum is None:
        return None
    amount = _dec(focus)
    if amount < minimum:
        return _violation(
            focus, IS_LESS_THAN_MIN, f"value {amount} must not be less than the minimum value {minimum}", amount, minimum
        )
    return None


def not_greater_than_max(focus: Focus, maximum: Decimal | None) -> ParameterError | None:
    """Decimal value must not exceed `maximum`.
    小数值不得大于 `maximum`。
    """
    if focus.value is None or maximum is None:
        return None
    amount = _dec(focus)
    if amount > maximum:
        return _violation(
            focus, IS_GREATER_THAN_MAX, f"value {amount} must not be more than maximum value {maximum}", amount, maximum
        )
    return None


def in_min_and_max_amount_range(focus: Focus, minimum: Decimal | None, maximum: Decimal | None) -> ParameterError | None:
    """Decimal value must lie within [minimum, maximum]; unset bounds disable the check.
    小数值必须位于 [minimum, maximum]；任一边界未设置时不检查。
    """
    if focus.value is None or minimum is None or maximum is None:
        return None
    amount = _dec(focus)
    if amount < minimum or amount > maximum:
        return _violation(
            focus,
            "amount.is.not.within.min.max.range",
            f"amount {amount} must be between {minimum} and {maximum} .",
            amount,
            minimum,
            maximum,
        )
    return None


def scale_not_greater_than(focus: Focus, scale: int) -> ParameterError | None:
    """Decimal value must have at most `scale` digits after the decimal point.
    小数值的小数位数不得超过 `scale`。
    """
    if focus.skips or focus.value is None:
        return None
    value = _dec(focus)
    if scale_of(value) > scale:
        return _violation(
            focus,
            f"scale.is.greater.than.{scale}",
            f"value {value} decimal place must not be more than {scale} places",
            value,
            scale,
        )
    return None


def compare_minimum_and_maximum_amounts(focus: Focus, minimum: Decimal | None, maximum: Decimal | None) -> ParameterError | None:
    """Two supplied amounts must be ordered, independent of the focus value.
    两个给定金额必须有序，与焦点值无关。
    """
    if minimum is None or maximum is None or maximum >= minimum:
        return None
    return build_error(
        field_code(focus, NOT_WITHIN_EXPECTED_RANGE),
        param_message(focus.field, f"minimum amount {minimum} should less than the maximum amount {maximum}."),
        focus.field,
        args=(minimum, maximum),
    )


def compare_min_and_max(focus: Focus, minimum: Decimal | None, maximum: Decimal | None) -> ParameterError | None:
    """Two supplied numbers must be ordered, independent of the focus value.
    两个给定数值必须有序，与焦点值无关。
    """
    if minimum is None or maximum is None or maximum >= minimum:
        return None
    return build_error(
        field_code(focus, NOT_WITHIN_EXPECTED_RANGE),
        f"The min number {minimum} should less than max number {maximum}.",
        focus.field,
        args=(minimum, maximum),
    )
