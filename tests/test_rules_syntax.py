"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: test_rules_syntax.py
@DateTime: 2026-10-19
@Docs: Tests for rules/syntax.py module.
rules/syntax.py 模块测试。
"""

from request_validator.adapters import SyntaxOutcome
from request_validator.focus import Focus
from request_validator.rules import (
    INVALID_RECURRING_RULE,
    RECURRING_RULE_PARSING_ERROR,
    is_valid_recurring_rule,
    validate_cron_expression,
)


class TestRecurringRule:
    """Tests for is_valid_recurring_rule.
    is_valid_recurring_rule 测试。
    """

    def test_blank_rule_not_checked(self, focus: Focus, stub_syntax: type) -> None:
        validator = stub_syntax(SyntaxOutcome.INVALID)
        assert is_valid_recurring_rule(focus, None, validator) is None
        assert is_valid_recurring_rule(focus, "  ", validator) is None
        assert validator.seen == []

    def test_valid(self, focus: Focus, stub_syntax: type) -> None:
        assert is_valid_recurring_rule(focus, "FREQ=DAILY", stub_syntax()) is None

    def test_invalid_code_is_fixed(self, stub_syntax: type) -> None:
        """Code independent of resource and field / 错误码与资源、字段无关。"""
        f = Focus(resource="calendar", field="recurrence")
        err = is_valid_recurring_rule(f, "FREQ=SOMETIMES", stub_syntax(SyntaxOutcome.INVALID))
        assert err is not None
        assert err.code == INVALID_RECURRING_RULE == "validation.msg.invalid.recurring.rule"
        assert err.field == "recurrence"
        assert err.args == ("FREQ=SOMETIMES",)

    def test_parse_error_code(self, focus: Focus, stub_syntax: type) -> None:
        err = is_valid_recurring_rule(focus, "garbage", stub_syntax(SyntaxOutcome.PARSE_ERROR))
        assert err is not None
        assert err.code == RECURRING_RULE_PARSING_ERROR == "validation.msg.recurring.rule.parsing.error"


class TestCronExpression:
    """Tests for validate_cron_expression.
    validate_cron_expression 测试。
    """

    def test_invalid(self, stub_syntax: type) -> None:
        f = Focus(resource="job", field="cronExpression", value="nope")
        err = validate_cron_expression(f, stub_syntax(SyntaxOutcome.INVALID))
        assert err is not None
        assert err.code == "validation.msg.job.cronExpression.invalid"
        assert err.rejected_value == "nope"

    def test_valid_and_absent(self, stub_syntax: type) -> None:
        f = Focus(resource="job", field="cronExpression")
        validator = stub_syntax()
        assert validate_cron_expression(f, validator) is None
        assert validate_cron_expression(f.with_value("0 0 12 * * ?"), validator) is None
        assert validator.seen == ["0 0 12 * * ?"]
