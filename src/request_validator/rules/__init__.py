"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: __init__.py
@DateTime: 2026-10-19
@Docs: Rule library: pure functions of (focus, args) returning at most one error.
规则库：以（焦点，参数）为输入、最多返回一条错误的纯函数。
"""

from request_validator.rules.dates import (
    validate_date_after,
    validate_date_before,
    validate_date_before_or_equal,
    validate_date_for_equal,
)
from request_validator.rules.escape import (
    expected_array_but_is_not,
    fail_with_code,
    fail_with_code_no_parameter_added_to_error_code,
    in_valid_value,
)
from request_validator.rules.linkage import (
    and_not_blank,
    any_of_not_null,
    equal_to_parameter,
    must_be_blank_when_parameter_provided,
    must_be_blank_when_parameter_provided_is,
    not_same_as_parameter,
)
from request_validator.rules.magnitude import (
    compare_min_and_max,
    compare_minimum_and_maximum_amounts,
    in_min_and_max_amount_range,
    in_min_max_range,
    integer_equal_to_or_greater_than_number,
    integer_greater_than_number,
    integer_greater_than_zero,
    integer_in_multiples_of_number,
    integer_not_greater_than_max,
    integer_not_less_than_min,
    integer_same_as_number,
    integer_zero_or_greater,
    long_greater_than_number,
    long_greater_than_number_at,
    long_greater_than_zero,
    long_zero_or_greater,
    not_greater_than_max,
    not_less_than_min,
    positive_amount,
    scale_not_greater_than,
    zero_or_positive_amount,
)
from request_validator.rules.membership import (
    is_not_one_of_these_values,
    is_one_of_enum_values,
    is_one_of_these_string_values,
    is_one_of_these_values,
)
from request_validator.rules.patterns import (
    BOOLEAN_INPUTS,
    PHONE_NUMBER_PATTERN,
    VALID_INPUT_SEPARATOR,
    matches_regular_expression,
    not_exceeding_length_of,
    not_exceeding_list_length_of,
    true_or_false_required,
    validate_for_boolean_value,
    validate_for_tokens,
    validate_phone_number,
)
from request_validator.rules.presence import (
    array_not_empty,
    cant_be_blank_when_parameter_provided_is,
    collection_not_empty,
    not_blank,
    not_null,
    true_or_false_provided,
)
from request_validator.rules.syntax import (
    INVALID_RECURRING_RULE,
    RECURRING_RULE_PARSING_ERROR,
    is_valid_recurring_rule,
    validate_cron_expression,
)

__all__ = [
    "BOOLEAN_INPUTS",
    "INVALID_RECURRING_RULE",
    "PHONE_NUMBER_PATTERN",
    "RECURRING_RULE_PARSING_ERROR",
    "VALID_INPUT_SEPARATOR",
    "and_not_blank",
    "any_of_not_null",
    "array_not_empty",
    "cant_be_blank_when_parameter_provided_is",
    "collection_not_empty",
    "compare_min_and_max",
    "compare_minimum_and_maximum_amounts",
    "equal_to_parameter",
    "expected_array_but_is_not",
    "fail_with_code",
    "fail_with_code_no_parameter_added_to_error_code",
    "in_min_and_max_amount_range",
    "in_min_max_range",
    "in_valid_value",
    "integer_equal_to_or_greater_than_number",
    "integer_greater_than_number",
    "integer_greater_than_zero",
    "integer_in_multiples_of_number",
    "integer_not_greater_than_max",
    "integer_not_less_than_min",
    "integer_same_as_number",
    "integer_zero_or_greater",
    "is_not_one_of_these_values",
    "is_one_of_enum_values",
    "is_one_of_these_string_values",
    "is_one_of_these_values",
    "is_valid_recurring_rule",
    "long_greater_than_number",
    "long_greater_than_number_at",
    "long_greater_than_zero",
    "long_zero_or_greater",
    "matches_regular_expression",
    "must_be_blank_when_parameter_provided",
    "must_be_blank_when_parameter_provided_is",
    "not_blank",
    "not_exceeding_length_of",
    "not_exceeding_list_length_of",
    "not_greater_than_max",
    "not_less_than_min",
    "not_null",
    "not_same_as_parameter",
    "positive_amount",
    "scale_not_greater_than",
    "true_or_false_provided",
    "true_or_false_required",
    "validate_cron_expression",
    "validate_date_after",
    "validate_date_before",
    "validate_date_before_or_equal",
    "validate_date_for_equal",
    "validate_for_boolean_value",
    "validate_for_tokens",
    "validate_phone_number",
    "zero_or_positive_amount",
]
