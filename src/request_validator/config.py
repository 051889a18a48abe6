"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: config.py
@DateTime: 2026-10-19
@Docs: Validator configuration helpers.
校验器配置助手。

Configuration is resolved once and handed to each ValidationContext
explicitly; rules never read process-wide state.
配置只解析一次并显式传给每个 ValidationContext；规则从不读取进程级全局状态。

Environment variables / 环境变量:
        - REQUEST_VALIDATOR_INPUT_SEPARATOR:
            Separator of token lists for boolean-like checks (default: _).
            布尔类标记列表的分隔符（默认 _）。
        - REQUEST_VALIDATOR_BOOLEAN_INPUTS:
            Comma-separated accepted boolean tokens (default: TRUE,FALSE).
            接受的布尔标记，逗号分隔（默认 TRUE,FALSE）。
        - REQUEST_VALIDATOR_STRICT_FINISH:
            Reject a second finish() call on the same context (default: true).
            同一上下文第二次调用 finish() 时报错（默认 true）。
        - REQUEST_VALIDATOR_CRON_MIN_YEAR / REQUEST_VALIDATOR_CRON_MAX_YEAR:
            Accepted range of the cron year field (default: 1970..2199).
            cron 年字段的允许范围（默认 1970..2199）。

Examples:
        >>> from request_validator.config import resolve_config
        >>> cfg = resolve_config()
        >>> cfg.input_separator
        '_'
"""

import os
from collections.abc import Iterable
from dataclasses import dataclass

from request_validator.exceptions import InvalidUsage
from request_validator.rules.patterns import BOOLEAN_INPUTS, VALID_INPUT_SEPARATOR

_TRUTHY = ("1", "true", "yes", "on")
_FALSY = ("0", "false", "no", "off")


@dataclass(frozen=True, slots=True)
class ValidatorConfig:
    """Validator configuration.

    校验器配置。

    Attributes:
        input_separator: Separator of token lists.
            标记列表分隔符。
        boolean_inputs: Accepted boolean tokens.
            接受的布尔标记。
        strict_finish: Reject a second finish() call.
            拒绝第二次 finish() 调用。
        cron_min_year: Lowest accepted cron year.
            cron 年字段下限。
        cron_max_year: Highest accepted cron year.
            cron 年字段上限。
    """

    input_separator: str = VALID_INPUT_SEPARATOR
    boolean_inputs: tuple[str, ...] = BOOLEAN_INPUTS
    strict_finish: bool = True
    cron_min_year: int = 1970
    cron_max_year: int = 2199


DEFAULT_CONFIG = ValidatorConfig()


def _env_get(*names: str) -> str | None:
    """Get the first non-empty environment variable value.

    获取第一个非空环境变量值。

    Args:
        *names: Candidate environment variable names in priority order.
            候选环境变量名（按优先级顺序）。

    Returns:
        The first non-empty value, or None.
            返回第一个非空值；若都为空则返回 None。
    """
    for n in names:
        v = os.getenv(n)
        if v is not None and v.strip():
            return v.strip()
    return None


def _split_csv(value: str | None) -> list[str]:
    """
    Split a comma-separated string into items.
    将逗号分隔字符串拆分为列表。
    """
    if value is None:
        return []
    return [v.strip() for v in value.split(",") if v.strip()]


def _parse_bool(name: str, value: str | None, default: bool) -> bool:
    if value is None:
        return default
    lowered = value.lower()
    if lowered in _TRUTHY:
        return True
    if lowered in _FALSY:
        return False
    raise InvalidUsage(message=f"Environment variable {name} is not a boolean: {value!r}", details={"name": name})


def _parse_int(name: str, value: str | None, default: int) -> int:
    if value is None:
        return default
    try:
        return int(value)
    except ValueError as exc:
        raise InvalidUsage(message=f"Environment variable {name} is not an integer: {value!r}", details={"name": name}) from exc


def _normalize_tokens(values: Iterable[str]) -> tuple[str, ...]:
    """
    Normalize boolean tokens (strip, upper-case, keep order, drop duplicates).
    规范化布尔标记（去空白、转大写、保序去重）。
    """
    seen: list[str] = []
    for v in values:
        item = str(v).strip().upper()
        if item and item not in seen:
            seen.append(item)
    return tuple(seen)


def resolve_config(
    *,
    input_separator: str | None = None,
    boolean_inputs: Iterable[str] | None = None,
    strict_finish: bool | None = None,
    cron_min_year: int | None = None,
    cron_max_year: int | None = None,
    env_prefix: str = "REQUEST_VALIDATOR",
) -> ValidatorConfig:
    """Resolve configuration from parameters and environment variables.

    从参数和环境变量解析配置。

    Resolution order / 解析优先级:
        1) function parameters / 函数参数
        2) env: `{env_prefix}_*` / 环境变量 `{env_prefix}_*`
        3) defaults / 默认值

    Args:
        input_separator: Token list separator.
            标记列表分隔符。
        boolean_inputs: Accepted boolean tokens.
            接受的布尔标记。
        strict_finish: Reject a second finish() call.
            拒绝第二次 finish() 调用。
        cron_min_year: Lowest accepted cron year.
            cron 年字段下限。
        cron_max_year: Highest accepted cron year.
            cron 年字段上限。
        env_prefix: Prefix for environment variables.
            环境变量前缀（默认 REQUEST_VALIDATOR）。

    Returns:
        A ValidatorConfig instance.
            返回 ValidatorConfig 配置实例。

    Raises:
        InvalidUsage: An environment value cannot be parsed, or the separator is empty.
            环境变量值无法解析，或分隔符为空。
    """
    sep_name = f"{env_prefix}_INPUT_SEPARATOR"
    separator = input_separator if input_separator is not None else (os.getenv(sep_name) or VALID_INPUT_SEPARATOR)
    if not separator:
        raise InvalidUsage(message="input_separator must not be empty", details={"name": sep_name})

    tokens = _normalize_tokens(
        boolean_inputs
        if boolean_inputs is not None
        else (_split_csv(_env_get(f"{env_prefix}_BOOLEAN_INPUTS")) or BOOLEAN_INPUTS)
    )

    strict_name = f"{env_prefix}_STRICT_FINISH"
    min_name = f"{env_prefix}_CRON_MIN_YEAR"
    max_name = f"{env_prefix}_CRON_MAX_YEAR"
    return ValidatorConfig(
        input_separator=separator,
        boolean_inputs=tokens,
        strict_finish=strict_finish if strict_finish is not None else _parse_bool(strict_name, _env_get(strict_name), True),
        cron_min_year=cron_min_year if cron_min_year is not None else _parse_int(min_name, _env_get(min_name), 1970),
        cron_max_year=cron_max_year if cron_max_year is not None else _parse_int(max_name, _env_get(max_name), 2199),
    )
