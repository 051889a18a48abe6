"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: adapters.py
@DateTime: 2026-10-19
@Docs: Adapters delegating opaque syntaxes to third-party parsers.
将不透明语法委托给第三方解析器的适配器。

- RecurrenceRuleSyntax: iCalendar RRULE text, parsed with python-dateutil.
    RecurrenceRuleSyntax：iCalendar RRULE 文本，使用 python-dateutil 解析。
- CronExpressionSyntax: Quartz-style cron text, checked with croniter.
    CronExpressionSyntax：Quartz 风格 cron 文本，使用 croniter 校验。
"""

import logging
import re
from dataclasses import dataclass
from enum import StrEnum
from typing import Protocol

from croniter import croniter
from dateutil.rrule import rrulestr

logger = logging.getLogger(__name__)

_RRULE_PART_RE = re.compile(r"[A-Za-z][A-Za-z-]*=[^=;]+")
_SIGNED_INT_RE = re.compile(r"[+-]?\d+")

# (lowest, highest, negative allowed) per RFC 5545 BY* part.
_BY_PART_RANGES: dict[str, tuple[int, int, bool]] = {
    "BYSECOND": (0, 60, False),
    "BYMINUTE": (0, 59, False),
    "BYHOUR": (0, 23, False),
    "BYMONTHDAY": (1, 31, True),
    "BYYEARDAY": (1, 366, True),
    "BYWEEKNO": (1, 53, True),
    "BYMONTH": (1, 12, False),
    "BYSETPOS": (1, 366, True),
}
_YEAR_ITEM_RE = re.compile(r"(\d{4})(?:-(\d{4}))?(?:/\d+)?")
_YEAR_ANY_RE = re.compile(r"\*(?:/\d+)?")

# Quartz day-of-week: 1-7 (1 = SUN) or names, with ranges, steps, "nL", "n#k" and a bare "L".
_DOW = r"(?:[1-7]|SUN|MON|TUE|WED|THU|FRI|SAT)"
_DOW_ITEM_RE = re.compile(rf"\*(?:/[1-9]\d*)?|L|{_DOW}(?:-{_DOW})?(?:/[1-9]\d*)?|{_DOW}L|{_DOW}#[1-5]", re.IGNORECASE)
# Quartz-only day-of-month forms: "L", "L-n", "LW" and "nW".
_DOM_SPECIAL_RE = re.compile(r"L(?:-(\d{1,2}))?|LW|(\d{1,2})W", re.IGNORECASE)


class SyntaxOutcome(StrEnum):
    """
    Syntax check outcome.
    语法检查结果。
    """

    VALID = "valid"
    INVALID = "invalid"
    PARSE_ERROR = "parse_error"


@dataclass(frozen=True, slots=True)
class SyntaxCheck:
    """Result of delegating a syntax string to an external validator.
    委托外部校验器检查语法字符串的结果。

    Attributes:
        outcome: Check outcome.
            检查结果。
        reason: Rejection reason from the parser (optional).
            解析器给出的拒绝原因（可选）。
    """

    outcome: SyntaxOutcome
    reason: str | None = None

    @property
    def ok(self) -> bool:
        return self.outcome is SyntaxOutcome.VALID


VALID = SyntaxCheck(SyntaxOutcome.VALID)


class SyntaxValidator(Protocol):
    """Protocol for opaque syntax validators.
    不透明语法校验器协议。
    """

    def check(self, text: str) -> SyntaxCheck:
        """Check a syntax string.
        检查语法字符串。

        Args:
            text: Text to check.
                待检查文本。
        Returns:
            SyntaxCheck: Outcome and optional reason.
                检查结果与可选原因。
        """
        ...


class RecurrenceRuleSyntax:
    """RFC 5545 recurrence rule validator backed by dateutil.
    基于 dateutil 的 RFC 5545 重复规则校验器。

    Text whose `NAME=VALUE` parts cannot be split is a parse error; a rule that
    splits but is rejected (unknown part, bad value, missing FREQ, a BY* value
    out of its RFC 5545 range, COUNT together with UNTIL) is invalid.
    无法拆分为 `NAME=VALUE` 的文本属于解析错误；可拆分但被拒绝的规则
    （未知部分、非法取值、缺少 FREQ、BY* 取值超出 RFC 5545 范围、COUNT 与 UNTIL 同时出现）
    属于无效规则。
    """

    def check(self, text: str) -> SyntaxCheck:
        body = text.strip()
        if body.upper().startswith("RRULE:"):
            body = body[len("RRULE:") :]
        parts = body.split(";")
        if not body or any(_RRULE_PART_RE.fullmatch(p.strip()) is None for p in parts):
            logger.debug("recurrence rule %r cannot be tokenized", text)
            return SyntaxCheck(SyntaxOutcome.PARSE_ERROR, "expected NAME=VALUE parts separated by ';'")
        problem = self._part_problem(dict(p.strip().upper().split("=", 1) for p in parts))
        if problem is not None:
            logger.debug("recurrence rule %r rejected: %s", text, problem)
            return SyntaxCheck(SyntaxOutcome.INVALID, problem)
        try:
            rrulestr(body)
        except (ValueError, TypeError) as exc:
            logger.debug("recurrence rule %r rejected: %s", text, exc)
            return SyntaxCheck(SyntaxOutcome.INVALID, str(exc))
        return VALID

    @staticmethod
    def _part_problem(parts: dict[str, str]) -> str | None:
        """Check constraints dateutil leaves unchecked.
        检查 dateutil 未校验的约束。

        Args:
            parts: Upper-cased `NAME -> VALUE` parts.
                大写的 `NAME -> VALUE` 部分。

        Returns:
            str | None: Reason the rule is invalid, or None.
            str | None: 规则无效的原因；有效时为 None。
        """
        if "COUNT" in parts and "UNTIL" in parts:
            return "COUNT and UNTIL must not both be set"
        for name, (lowest, highest, signed) in _BY_PART_RANGES.items():
            if name not in parts:
                continue
            for item in parts[name].split(","):
                if _SIGNED_INT_RE.fullmatch(item) is None:
                    return f"{name} value {item!r} is not an integer"
                number = int(item)
                if number < 0 and not signed:
                    return f"{name} value {number} must not be negative"
                if not lowest <= abs(number) <= highest:
                    return f"{name} value {number} outside {lowest}..{highest}"
        return None


class CronExpressionSyntax:
    """Quartz-style cron validator backed by croniter.
    基于 croniter 的 Quartz 风格 cron 校验器。

    Accepts six or seven fields: seconds, minutes, hours, day-of-month, month,
    day-of-week and an optional year. Exactly one of day-of-month and
    day-of-week must be "?". Day-of-month also takes "L", "L-n", "LW" and "nW";
    day-of-week counts 1-7 from Sunday and takes "nL" and "n#k".
    接受六或七个字段：秒、分、时、日、月、周以及可选的年。
    日与周中必须且只能有一个为 "?"。日字段另支持 "L"、"L-n"、"LW" 与 "nW"；
    周字段取值 1-7（1 为周日），并支持 "nL" 与 "n#k"。
    """

    def __init__(self, *, min_year: int = 1970, max_year: int = 2199) -> None:
        self.min_year = min_year
        self.max_year = max_year

    def _year_ok(self, year: str) -> bool:
        for item in year.split(","):
            if _YEAR_ANY_RE.fullmatch(item):
                continue
            m = _YEAR_ITEM_RE.fullmatch(item)
            if m is None:
                return False
            bounds = [int(g) for g in m.groups() if g is not None]
            if any(y < self.min_year or y > self.max_year for y in bounds) or bounds != sorted(bounds):
                return False
        return True

    def check(self, text: str) -> SyntaxCheck:
        fields = text.split()
        if len(fields) not in (6, 7):
            return self._reject(text, f"expected 6 or 7 fields, got {len(fields)}")
        if len(fields) == 7 and not self._year_ok(fields.pop()):
            return self._reject(text, "year field out of range")
        if (fields[3] == "?") == (fields[5] == "?"):
            return self._reject(text, "exactly one of day-of-month and day-of-week must be '?'")
        day_of_month = self._day_of_month(fields[3])
        if day_of_month is None:
            return self._reject(text, "invalid day-of-month field")
        day_of_week = self._day_of_week(fields[5])
        if day_of_week is None:
            return self._reject(text, "invalid day-of-week field")
        fields[3], fields[5] = day_of_month, day_of_week
        if not croniter.is_valid(" ".join(fields), second_at_beginning=True):
            return self._reject(text, "rejected by croniter")
        return VALID

    @staticmethod
    def _day_of_month(field: str) -> str | None:
        """Translate a Quartz day-of-month field for croniter.
        将 Quartz 日字段转换为 croniter 可接受的形式。

        Returns:
            str | None: croniter field, or None when the Quartz form is out of range.
            str | None: croniter 字段；Quartz 形式越界时为 None。
        """
        if field == "?":
            return "*"
        m = _DOM_SPECIAL_RE.fullmatch(field)
        if m is None:
            return field
        offset, nearest = m.groups()
        if offset is not None and not 1 <= int(offset) <= 30:
            return None
        if nearest is not None and not 1 <= int(nearest) <= 31:
            return None
        return "*"

    @staticmethod
    def _day_of_week(field: str) -> str | None:
        # croniter counts 0-6 from Sunday, Quartz 1-7; the field is checked here in full.
        if field == "?":
            return "*"
        if all(_DOW_ITEM_RE.fullmatch(item) for item in field.split(",")):
            return "*"
        return None

    @staticmethod
    def _reject(text: str, reason: str) -> SyntaxCheck:
        logger.debug("cron expression %r rejected: %s", text, reason)
        return SyntaxCheck(SyntaxOutcome.INVALID, reason)
