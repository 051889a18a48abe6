"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: escape.py
@DateTime: 2026-10-19
@Docs: Unconditional rules for violations the generic rules cannot express.
通用规则无法表达时使用的无条件规则。
"""

from typing import Any

from request_validator.codes import build_error, field_code, param_message, resource_code
from request_validator.focus import Focus
from request_validator.records import ParameterError


def fail_with_code(focus: Focus, error_code: str, *args: Any) -> ParameterError:
    """Record `validation.msg.<resource>.<field>.<error_code>`.
    记录 `validation.msg.<resource>.<field>.<error_code>`。
    """
    return build_error(
        field_code(focus, error_code),
        f"Failed data validation due to: {error_code}.",
        focus.field,
        rejected_value=focus.value,
        args=args,
    )


def fail_with_code_no_parameter_added_to_error_code(focus: Focus, error_code: str, *args: Any) -> ParameterError:
    """Record `validation.msg.<resource>.<error_code>`.
    记录 `validation.msg.<resource>.<error_code>`。
    """
    return build_error(
        resource_code(focus, error_code),
        f"Failed data validation due to: {error_code}.",
        focus.field,
        rejected_value=focus.value,
        args=args,
    )


def in_valid_value(focus: Focus, value_code: str, invalid_value: Any) -> ParameterError:
    return build_error(
        field_code(focus, f"invalid.{value_code}"),
        param_message(focus.field, "has an invalid value."),
        focus.field,
        rejected_value=invalid_value,
        args=(invalid_value,),
    )


def expected_array_but_is_not(focus: Focus) -> ParameterError:
    return build_error(
        field_code(focus, "is.not.an.array"),
        param_message(focus.field, "is not an array."),
        focus.field,
    )
