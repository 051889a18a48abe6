"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: context.py
@DateTime: 2026-10-19
@Docs: Validation context: current focus plus the accumulated error list.
校验上下文：当前焦点与累计的错误列表。

Typical use / 典型用法:

    >>> ctx = ValidationContext().with_resource("client")
    >>> _ = ctx.with_field("firstname").with_value("").not_blank().not_exceeding_length_of(50)
    >>> _ = ctx.reset().with_field("age").with_value("17").integer_greater_than_number(17)
    >>> [e.code for e in ctx.errors]
    ['validation.msg.client.firstname.cannot.be.blank', 'validation.msg.client.age.not.greater.than.specified.number']

A context is not thread-safe; use one per request or nested sub-object.
上下文不是线程安全的；每个请求或嵌套子对象使用一个上下文。
"""

import logging
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Any

from request_validator import rules
from request_validator.adapters import CronExpressionSyntax, RecurrenceRuleSyntax, SyntaxValidator
from request_validator.config import DEFAULT_CONFIG, ValidatorConfig
from request_validator.exceptions import InvalidUsage, ValidationFailed
from request_validator.focus import Focus
from request_validator.records import ParameterError

logger = logging.getLogger(__name__)


class ValidationContext:
    """Accumulates rule violations for one validation session.
    为一次校验会话累计规则违规。

    Focus setters replace the immutable Focus and return the context; rule
    methods evaluate a pure rule against the current focus, append at most one
    ParameterError and return the context.
    焦点设置方法替换不可变的 Focus 并返回上下文；规则方法针对当前焦点执行纯规则，
    最多追加一条 ParameterError 并返回上下文。
    """

    def __init__(
        self,
        errors: list[ParameterError] | None = None,
        *,
        config: ValidatorConfig | None = None,
        resource: str | None = None,
        recurrence_validator: SyntaxValidator | None = None,
        cron_validator: SyntaxValidator | None = None,
    ) -> None:
        """Start a new validation chain, or continue one with an existing error list.
        开始新的校验链，或基于已有错误列表继续。

        Args:
            errors: Shared error sink (optional).
                共享的错误列表（可选）。
            config: Validator configuration (optional).
                校验器配置（可选）。
            resource: Initial resource name (optional).
                初始资源名（可选）。
            recurrence_validator: RRULE validator (optional).
                RRULE 校验器（可选）。
            cron_validator: Cron validator (optional).
                cron 校验器（可选）。
        """
        self._errors: list[ParameterError] = errors if errors is not None else []
        self.config = config or DEFAULT_CONFIG
        self._focus = Focus(resource=resource)
        self._recurrence = recurrence_validator or RecurrenceRuleSyntax()
        self._cron = cron_validator or CronExpressionSyntax(
            min_year=self.config.cron_min_year, max_year=self.config.cron_max_year
        )
        self._finished = False

    # ------------------------------------------------------------------
    # Focus / 焦点
    # ------------------------------------------------------------------

    @property
    def focus(self) -> Focus:
        return self._focus

    @property
    def resource(self) -> str | None:
        return self._focus.resource

    @property
    def field(self) -> str | None:
        return self._focus.field

    @property
    def value(self) -> Any | None:
        return self._focus.value

    def with_resource(self, name: str) -> "ValidationContext":
        self._focus = self._focus.with_resource(name)
        return self

    def with_field(self, name: str) -> "ValidationContext":
        """Move focus to a new field; clears any array position.
        将焦点移到新字段；清除数组位置。
        """
        self._focus = self._focus.with_field(name)
        return self

    def at_array_position(self, part: str, index: int) -> "ValidationContext":
        """Focus an element part inside the current collection field.
        聚焦当前集合字段内某元素的子字段。

        Args:
            part: Element part name, e.g. "amount".
                元素子字段名，例如 "amount"。
            index: Element index, zero or greater.
                元素下标（大于等于 0）。

        Raises:
            InvalidUsage: Blank part or negative index.
                子字段名为空或下标为负。
        """
        if not isinstance(part, str) or not part.strip():
            raise InvalidUsage(message="Array position needs a non-blank part name", details={"field": self.field})
        if isinstance(index, bool) or not isinstance(index, int) or index < 0:
            raise InvalidUsage(
                message=f"Array position index must be an integer >= 0, got {index!r}", details={"field": self.field}
            )
        self._focus = self._focus.with_array_position(part, index)
        return self

    def with_value(self, value: Any) -> "ValidationContext":
        self._focus = self._focus.with_value(value)
        return self

    def skip_when_absent(self) -> "ValidationContext":
        """Treat an absent value as no violation until the next reset().
        在下一次 reset() 之前，值缺失时视为无违规。
        """
        self._focus = self._focus.skipping_absent()
        return self

    # ------------------------------------------------------------------
    # Session / 会话
    # ------------------------------------------------------------------

    @property
    def errors(self) -> tuple[ParameterError, ...]:
        """Snapshot of recorded errors in insertion order.
        按记录顺序返回错误快照。
        """
        return tuple(self._errors)

    def has_errors(self) -> bool:
        return bool(self._errors)

    def reset(self) -> "ValidationContext":
        """Start a new session on the same error list, keeping only the resource.
        在同一错误列表上开始新会话，仅保留资源名。

        Returns:
            ValidationContext: Fresh context sharing this error list.
            ValidationContext: 共享当前错误列表的新上下文。
        """
        logger.debug("reset validation context for resource %s", self.resource)
        return ValidationContext(
            self._errors,
            config=self.config,
            resource=self.resource,
            recurrence_validator=self._recurrence,
            cron_validator=self._cron,
        )

    def merge(self, other: "ValidationContext") -> None:
        """Append another context's errors, preserving their order.
        追加另一上下文的错误并保持其顺序。

        Raises:
            InvalidUsage: `other` writes to this context's error list.
                `other` 与当前上下文共享错误列表。
        """
        if other._errors is self._errors:
            raise InvalidUsage(message="Cannot merge a context that shares this error list", details={"resource": self.resource})
        self._errors.extend(other._errors)
        logger.debug("merged %d errors from resource %s into %s", len(other._errors), other.resource, self.resource)

    def finish(self) -> None:
        """End the session: raise ValidationFailed when any error was recorded.
        结束会话：若存在错误则抛出 ValidationFailed。

        Raises:
            ValidationFailed: At least one error was recorded.
                至少记录了一条错误。
            InvalidUsage: finish() already called on this context (strict mode).
                严格模式下该上下文已调用过 finish()。
        """
        if self._finished and self.config.strict_finish:
            raise InvalidUsage(message="finish() called twice on the same validation context", details={"resource": self.resource})
        self._finished = True
        if self._errors:
            logger.info("validation of %s failed with %d errors", self.resource, len(self._errors))
            raise ValidationFailed(errors=self._errors)

    def _record(self, error: ParameterError | None) -> "ValidationContext":
        if error is not None:
            logger.debug("validation error %s on %s", error.code, error.field)
            self._errors.append(error)
        return self

    # ------------------------------------------------------------------
    # Presence / 存在性
    # ------------------------------------------------------------------

    def not_null(self) -> "ValidationContext":
        return self._record(rules.not_null(self._focus))

    def not_blank(self) -> "ValidationContext":
        return self._record(rules.not_blank(self._focus))

    def array_not_empty(self) -> "ValidationContext":
        return self._record(rules.array_not_empty(self._focus))

    def collection_not_empty(self) -> "ValidationContext":
        return self._record(rules.collection_not_empty(self._focus))

    def cant_be_blank_when_parameter_provided_is(self, parameter_name: str, parameter_value: Any) -> "ValidationContext":
        return self._record(rules.cant_be_blank_when_parameter_provided_is(self._focus, parameter_name, parameter_value))

    def true_or_false_provided(self, provided: bool) -> "ValidationContext":
        """Record a missing mandatory boolean when `provided` is False.
        `provided` 为 False 时记录缺失的必填布尔参数。
        """
        return self._record(rules.true_or_false_provided(self._focus, provided))

    # ------------------------------------------------------------------
    # Cross-field linkage / 跨字段关联
    # ------------------------------------------------------------------

    def and_not_blank(self, linked_name: str, linked_value: Any) -> "ValidationContext":
        return self._record(rules.and_not_blank(self._focus, linked_name, linked_value))

    def equal_to_parameter(self, linked_name: str, linked_value: Any) -> "ValidationContext":
        return self._record(rules.equal_to_parameter(self._focus, linked_name, linked_value))

    def not_same_as_parameter(self, linked_name: str, linked_value: Any) -> "ValidationContext":
        return self._record(rules.not_same_as_parameter(self._focus, linked_name, linked_value))

    def must_be_blank_when_parameter_provided(self, parameter_name: str, parameter_value: Any) -> "ValidationContext":
        return self._record(rules.must_be_blank_when_parameter_provided(self._focus, parameter_name, parameter_value))

    def must_be_blank_when_parameter_provided_is(self, parameter_name: str, parameter_value: Any) -> "ValidationContext":
        return self._record(rules.must_be_blank_when_parameter_provided_is(self._focus, parameter_name, parameter_value))

    def any_of_not_null(self, *values: Any) -> "ValidationContext":
        """Record "no parameters for update" when every value is None.
        所有值均为 None 时记录"无更新参数"。
        """
        return self._record(rules.any_of_not_null(self._focus, *values))

    # ------------------------------------------------------------------
    # Boolean tokens / 布尔标记
    # ------------------------------------------------------------------

    def true_or_false_required(self, flag: Any) -> "ValidationContext":
        return self._record(rules.true_or_false_required(self._focus, flag))

    def validate_for_tokens(self, valid_inputs: str) -> "ValidationContext":
        """Value must be one of the tokens in `valid_inputs`, split on the configured separator.
        值必须是 `valid_inputs` 中的某个标记（按配置的分隔符拆分）。
        """
        return self._record(rules.validate_for_tokens(self._focus, valid_inputs, self.config.input_separator))

    def validate_for_boolean_value(self) -> "ValidationContext":
        return self._record(
            rules.validate_for_boolean_value(self._focus, self.config.input_separator, self.config.boolean_inputs)
        )

    # ------------------------------------------------------------------
    # Bounded magnitude / 数值范围
    # ------------------------------------------------------------------

    def in_min_max_range(self, minimum: int, maximum: int) -> "ValidationContext":
        return self._record(rules.in_min_max_range(self._focus, minimum, maximum))

    def positive_amount(self) -> "ValidationContext":
        return self._record(rules.positive_amount(self._focus))

    def zero_or_positive_amount(self) -> "ValidationContext":
        return self._record(rules.zero_or_positive_amount(self._focus))

    def integer_zero_or_greater(self) -> "ValidationContext":
        return self._record(rules.integer_zero_or_greater(self._focus))

    def integer_greater_than_zero(self) -> "ValidationContext":
        return self._record(rules.integer_greater_than_zero(self._focus))

    def integer_greater_than_number(self, number: int) -> "ValidationContext":
        return self._record(rules.integer_greater_than_number(self._focus, number))

    def integer_equal_to_or_greater_than_number(self, number: int) -> "ValidationContext":
        return self._record(rules.integer_equal_to_or_greater_than_number(self._focus, number))

    def integer_same_as_number(self, number: int) -> "ValidationContext":
        return self._record(rules.integer_same_as_number(self._focus, number))

    def integer_in_multiples_of_number(self, number: int) -> "ValidationContext":
        return self._record(rules.integer_in_multiples_of_number(self._focus, number))

    def long_greater_than_zero(self) -> "ValidationContext":
        return self._record(rules.long_greater_than_zero(self._focus))

    def long_zero_or_greater(self) -> "ValidationContext":
        return self._record(rules.long_zero_or_greater(self._focus))

    def long_greater_than_number(self, number: int) -> "ValidationContext":
        return self._record(rules.long_greater_than_number(self._focus, number))

    def long_greater_than_number_at(self, param_name: str, number: int, index: int) -> "ValidationContext":
        return self._record(rules.long_greater_than_number_at(self._focus, param_name, number, index))

    def integer_not_less_than_min(self, minimum: int | None) -> "ValidationContext":
        return self._record(rules.integer_not_less_than_min(self._focus, minimum))

    def integer_not_greater_than_max(self, maximum: int | None) -> "ValidationContext":
        return self._record(rules.integer_not_greater_than_max(self._focus, maximum))

    def not_less_than_min(self, minimum: Decimal | None) -> "ValidationContext":
        return self._record(rules.not_less_than_min(self._focus, minimum))

    def not_greater_than_max(self, maximum: Decimal | None) -> "ValidationContext":
        return self._record(rules.not_greater_than_max(self._focus, maximum))

    def in_min_and_max_amount_range(self, minimum: Decimal | None, maximum: Decimal | None) -> "ValidationContext":
        return self._record(rules.in_min_and_max_amount_range(self._focus, minimum, maximum))

    def scale_not_greater_than(self, scale: int) -> "ValidationContext":
        return self._record(rules.scale_not_greater_than(self._focus, scale))

    def compare_minimum_and_maximum_amounts(self, minimum: Decimal | None, maximum: Decimal | None) -> "ValidationContext":
        return self._record(rules.compare_minimum_and_maximum_amounts(self._focus, minimum, maximum))

    def compare_min_and_max(self, minimum: Decimal | None, maximum: Decimal | None) -> "ValidationContext":
        return self._record(rules.compare_min_and_max(self._focus, minimum, maximum))

    # ------------------------------------------------------------------
    # Set membership / 集合成员
    # ------------------------------------------------------------------

    def is_one_of_these_values(self, *values: Any) -> "ValidationContext":
        return self._record(rules.is_one_of_these_values(self._focus, *values))

    def is_one_of_these_string_values(self, *values: Any) -> "ValidationContext":
        return self._record(rules.is_one_of_these_string_values(self._focus, *values))

    def is_one_of_enum_values(self, enum_cls: type[Enum]) -> "ValidationContext":
        return self._record(rules.is_one_of_enum_values(self._focus, enum_cls))

    def is_not_one_of_these_values(self, *values: Any) -> "ValidationContext":
        return self._record(rules.is_not_one_of_these_values(self._focus, *values))

    # ------------------------------------------------------------------
    # Patterns and length / 模式与长度
    # ------------------------------------------------------------------

    def matches_regular_expression(self, expression: str, message: str | None = None) -> "ValidationContext":
        return self._record(rules.matches_regular_expression(self._focus, expression, message))

    def validate_phone_number(self) -> "ValidationContext":
        return self._record(rules.validate_phone_number(self._focus))

    def not_exceeding_length_of(self, max_length: int) -> "ValidationContext":
        return self._record(rules.not_exceeding_length_of(self._focus, max_length))

    def not_exceeding_list_length_of(self, max_length: int) -> "ValidationContext":
        return self._record(rules.not_exceeding_list_length_of(self._focus, max_length))

    # ------------------------------------------------------------------
    # Dates / 日期
    # ------------------------------------------------------------------

    def validate_date_after(self, bound: date | None) -> "ValidationContext":
        return self._record(rules.validate_date_after(self._focus, bound))

    def validate_date_before(self, bound: date | None) -> "ValidationContext":
        return self._record(rules.validate_date_before(self._focus, bound))

    def validate_date_before_or_equal(self, bound: date | None) -> "ValidationContext":
        return self._record(rules.validate_date_before_or_equal(self._focus, bound))

    def validate_date_for_equal(self, bound: date | None) -> "ValidationContext":
        return self._record(rules.validate_date_for_equal(self._focus, bound))

    # ------------------------------------------------------------------
    # Opaque syntaxes / 不透明语法
    # ------------------------------------------------------------------

    def is_valid_recurring_rule(self, recurring_rule: str | None) -> "ValidationContext":
        return self._record(rules.is_valid_recurring_rule(self._focus, recurring_rule, self._recurrence))

    def validate_cron_expression(self) -> "ValidationContext":
        return self._record(rules.validate_cron_expression(self._focus, self._cron))

    # ------------------------------------------------------------------
    # Escape hatches / 兜底规则
    # ------------------------------------------------------------------

    def fail_with_code(self, error_code: str, *args: Any) -> "ValidationContext":
        return self._record(rules.fail_with_code(self._focus, error_code, *args))

    def fail_with_code_no_parameter_added_to_error_code(self, error_code: str, *args: Any) -> "ValidationContext":
        return self._record(rules.fail_with_code_no_parameter_added_to_error_code(self._focus, error_code, *args))

    def in_valid_value(self, value_code: str, invalid_value: Any) -> "ValidationContext":
        return self._record(rules.in_valid_value(self._focus, value_code, invalid_value))

    def expected_array_but_is_not(self) -> "ValidationContext":
        return self._record(rules.expected_array_but_is_not(self._focus))

