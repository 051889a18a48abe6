"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: records.py
@DateTime: 2026-10-19
@Docs: Immutable error record for one rule violation.
单条规则违规的不可变错误记录。
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class ParameterError:
    """One validation violation.
    一条校验错误。

    Attributes:
        code: Dot-separated machine code, e.g. validation.msg.client.firstname.cannot.be.blank.
            点分隔的机器可读错误码。
        default_message: Human-readable fallback message.
            默认的可读错误消息。
        field: Offending parameter name (may embed array position).
            出错参数名（可能包含数组位置）。
        rejected_value: Value that failed, if applicable.
            被拒绝的值（可选）。
        args: Extra values for message formatters.
            供消息格式化使用的附加参数。
    """

    code: str
    default_message: str
    field: str
    rejected_value: Any | None = None
    args: tuple[Any, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        """Render the record as a plain dict.
        将记录渲染为普通字典。

        Returns:
            dict[str, Any]: Record fields.
            dict[str, Any]: 记录字段。
        """
        return {
            "code": self.code,
            "default_message": self.default_message,
            "field": self.field,
            "rejected_value": self.rejected_value,
            "args": list(self.args),
        }
