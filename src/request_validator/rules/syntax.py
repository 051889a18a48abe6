"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: syntax.py
@DateTime: 2026-10-19
@Docs: Rules delegating to opaque syntax validators.
委托不透明语法校验器的规则。
"""

from request_validator.adapters import SyntaxOutcome, SyntaxValidator
from request_validator.codes import build_error, field_code, fixed_code, param_message
from request_validator.coercion import is_blank, to_text
from request_validator.focus import Focus
from request_validator.records import ParameterError

INVALID_RECURRING_RULE = fixed_code("invalid.recurring.rule")
RECURRING_RULE_PARSING_ERROR = fixed_code("recurring.rule.parsing.error")


def is_valid_recurring_rule(focus: Focus, recurring_rule: str | None, validator: SyntaxValidator) -> ParameterError | None:
    """Recurrence rule text must be accepted by `validator`; blank text passes.
    重复规则文本必须被 `validator` 接受；空白文本直接通过。

    Codes do not depend on resource or field.
    错误码与资源、字段无关。

    Args:
        focus: Current focus.
            当前焦点。
        recurring_rule: RRULE text.
            RRULE 文本。
        validator: Recurrence rule validator.
            重复规则校验器。
    """
    if recurring_rule is None or is_blank(recurring_rule):
        return None
    result = validator.check(recurring_rule)
    if result.outcome is SyntaxOutcome.VALID:
        return None
    if result.outcome is SyntaxOutcome.PARSE_ERROR:
        code = RECURRING_RULE_PARSING_ERROR
        message = f"Error in parsing the Recurring Rule value: {recurring_rule}."
    else:
        code = INVALID_RECURRING_RULE
        message = f"The Recurring Rule value: {recurring_rule} is not valid."
    return build_error(code, message, focus.field, rejected_value=recurring_rule, args=(recurring_rule,))


def validate_cron_expression(focus: Focus, validator: SyntaxValidator) -> ParameterError | None:
    if focus.value is None:
        return None
    if validator.check(to_text(focus.value).strip()).ok:
        return None
    return build_error(
        field_code(focus, "invalid"),
        param_message(focus.field, "value is not a valid cron expression"),
        focus.field,
        rejected_value=focus.value,
        args=(focus.value,),
    )
