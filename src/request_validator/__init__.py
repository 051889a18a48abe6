"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: __init__.py
@DateTime: 2026-10-19
@Docs: Package exports for request_validator.
request_validator 包导出定义。
"""

from request_validator.adapters import (
    CronExpressionSyntax,
    RecurrenceRuleSyntax,
    SyntaxCheck,
    SyntaxOutcome,
    SyntaxValidator,
)
from request_validator.codes import CODE_PREFIX
from request_validator.config import DEFAULT_CONFIG, ValidatorConfig, resolve_config
from request_validator.context import ValidationContext
from request_validator.exceptions import InvalidUsage, RequestValidatorError, ValidationFailed, ValueParseError
from request_validator.focus import ArrayPosition, Focus
from request_validator.records import ParameterError
from request_validator.rules import VALID_INPUT_SEPARATOR
from request_validator.schemas import ErrorArg, ParameterErrorItem, ValidationErrorPayload

__version__ = "0.1.0"

__all__ = [
    "ValidationContext",
    "Focus",
    "ArrayPosition",
    "ParameterError",
    "RequestValidatorError",
    "ValidationFailed",
    "InvalidUsage",
    "ValueParseError",
    "ValidatorConfig",
    "DEFAULT_CONFIG",
    "resolve_config",
    "SyntaxValidator",
    "SyntaxCheck",
    "SyntaxOutcome",
    "RecurrenceRuleSyntax",
    "CronExpressionSyntax",
    "ErrorArg",
    "ParameterErrorItem",
    "ValidationErrorPayload",
    "CODE_PREFIX",
    "VALID_INPUT_SEPARATOR",
]
