"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: coercion.py
@DateTime: 2026-10-19
@Docs: Explicit coercion of focus values for numeric, date and text rules.
为数值、日期和文本规则显式转换焦点值。

Every failed coercion raises ValueParseError: malformed input handed to a
magnitude or date rule is a caller bug, not a validation violation.
所有转换失败都会抛出 ValueParseError：传给数值或日期规则的非法输入属于调用方缺陷，
而非校验错误。
"""

import re
from collections.abc import Collection, Sequence
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any

from request_validator.exceptions import InvalidUsage, ValueParseError

INT32_MIN, INT32_MAX = -(2**31), 2**31 - 1
INT64_MIN, INT64_MAX = -(2**63), 2**63 - 1

_INTEGER_RE = re.compile(r"[+-]?\d+")


def to_text(value: Any) -> str:
    """Render a value the way codes and messages expect it.
    按错误码与消息的约定渲染值。

    Args:
        value: Any value.
            任意值。

    Returns:
        str: "null" for None, lowercase booleans, otherwise str(value).
        str: None 渲染为 "null"，布尔值小写，其余为 str(value)。
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def is_blank(value: Any) -> bool:
    """Return True for None, empty or whitespace-only text.
    None、空串或仅含空白的文本返回 True。
    """
    return value is None or not to_text(value).strip()


def _parse_failure(value: Any, target: str, field: str | None) -> ValueParseError:
    return ValueParseError(
        message=f"Cannot parse value {value!r} of parameter `{field}` as {target}",
        details={"field": field, "value": value, "target": target},
    )


def as_integer(value: Any, *, field: str | None = None, bits: int = 32) -> int:
    """Coerce a value to a bounded integer.
    将值转换为有界整数。

    Args:
        value: Raw value (int or integer text).
            原始值（整数或整数文本）。
        field: Field name for error details.
            用于错误详情的字段名。
        bits: Integer width, 32 or 64.
            整数位宽，32 或 64。

    Returns:
        int: Parsed integer.
        int: 解析后的整数。

    Raises:
        ValueParseError: Not an integer or out of range.
            非整数或超出范围。
    """
    target = "int" if bits == 32 else "long"
    lo, hi = (INT32_MIN, INT32_MAX) if bits == 32 else (INT64_MIN, INT64_MAX)
    if isinstance(value, bool):
        raise _parse_failure(value, target, field)
    if isinstance(value, int):
        number = value
    else:
        text = to_text(value)
        if _INTEGER_RE.fullmatch(text) is None:
            raise _parse_failure(value, target, field)
        number = int(text)
    if number < lo or number > hi:
        raise _parse_failure(value, target, field)
    return number


def as_decimal(value: Any, *, field: str | None = None) -> Decimal:
    """Coerce a value to a finite Decimal.
    将值转换为有限的 Decimal。

    Raises:
        ValueParseError: Not a finite number.
            非有限数值。
    """
    if isinstance(value, bool):
        raise _parse_failure(value, "decimal", field)
    if isinstance(value, Decimal):
        number = value
    elif isinstance(value, int):
        number = Decimal(value)
    else:
        try:
            number = Decimal(to_text(value).strip())
        except InvalidOperation as exc:
            raise _parse_failure(value, "decimal", field) from exc
    if not number.is_finite():
        raise _parse_failure(value, "decimal", field)
    return number


def as_date(value: Any, *, field: str | None = None) -> date:
    """Coerce a value to a date (ISO text accepted).
    将值转换为日期（接受 ISO 文本）。

    Raises:
        ValueParseError: Not a date.
            非日期。
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip())
        except ValueError as exc:
            raise _parse_failure(value, "date", field) from exc
    raise _parse_failure(value, "date", field)


def scale_of(number: Decimal) -> int:
    """Digits after the decimal point, ignoring trailing zeros.
    小数位数（忽略末尾的 0）。

    `Decimal("1.250")` has scale 2, `Decimal("5.000")` scale 0.
    """
    return max(0, -int(number.normalize().as_tuple().exponent))


def same_value(left: Any, right: Any) -> bool:
    """Equality that never mixes types: `True != 1` and `1 != 1.0`.
    不跨类型的相等判断：`True != 1`，`1 != 1.0`。
    """
    return type(left) is type(right) and left == right


def as_sequence(value: Any, *, field: str | None = None) -> Sequence[Any]:
    """Require an array-like value (list or tuple).
    要求值为数组（list 或 tuple）。

    Raises:
        InvalidUsage: Value is not a list or tuple.
            值不是 list 或 tuple。
    """
    if isinstance(value, (list, tuple)):
        return value
    raise InvalidUsage(
        message=f"Parameter `{field}` was validated as an array but holds {type(value).__name__}",
        details={"field": field, "type": type(value).__name__},
    )


def as_collection(value: Any, *, field: str | None = None) -> Collection[Any]:
    """Require a collection that is not text.
    要求值为非文本的集合。

    Raises:
        InvalidUsage: Value is not a collection.
            值不是集合。
    """
    if isinstance(value, Collection) and not isinstance(value, (str, bytes)):
        return value
    raise InvalidUsage(
        message=f"Parameter `{field}` was validated as a collection but holds {type(value).__name__}",
        details={"field": field, "type": type(value).__name__},
    )
