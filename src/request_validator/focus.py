"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: focus.py
@DateTime: 2026-10-19
@Docs: Immutable focus value read by rule functions.
规则函数读取的不可变焦点值。

A Focus is the (resource, field, array position, value, skip flag) tuple a rule
call inspects. Context setters never mutate a Focus; they replace it.
Focus 即规则调用所检查的（资源、字段、数组位置、值、跳过标志）元组。
上下文的设置方法不会修改 Focus，而是替换它。
"""

from dataclasses import dataclass, replace
from typing import Any, NamedTuple


class ArrayPosition(NamedTuple):
    """Element position inside a collection-valued field.
    集合类型字段中的元素位置。
    """

    part: str
    index: int


@dataclass(frozen=True, slots=True)
class Focus:
    """Current validation focus.
    当前校验焦点。

    Attributes:
        resource: Logical entity name, e.g. "client".
            逻辑实体名，例如 "client"。
        field: Field under inspection.
            当前检查的字段。
        array_position: Element position, when validating inside a collection.
            校验集合元素时的位置。
        value: Raw value under inspection.
            当前检查的原始值。
        skip_if_absent: Treat an absent value as no violation.
            值缺失时视为无违规。
    """

    resource: str | None = None
    field: str | None = None
    array_position: ArrayPosition | None = None
    value: Any | None = None
    skip_if_absent: bool = False

    def with_resource(self, name: str) -> "Focus":
        return replace(self, resource=name)

    def with_field(self, name: str) -> "Focus":
        # A new field never inherits the previous element position.
        return replace(self, field=name, array_position=None)

    def with_array_position(self, part: str, index: int) -> "Focus":
        return replace(self, array_position=ArrayPosition(part, index))

    def with_value(self, value: Any) -> "Focus":
        return replace(self, value=value)

    def skipping_absent(self) -> "Focus":
        return replace(self, skip_if_absent=True)

    @property
    def skips(self) -> bool:
        """Whether the universal null-skip applies to the current value.
        当前值是否适用通用空值跳过。
        """
        return self.value is None and self.skip_if_absent

    @property
    def reported_field(self) -> str:
        """Field name as reported by presence rules.
        存在性规则报告的字段名。

        Returns:
            str: `field` or `field[index][part]` when an array position is set.
            str: 设置数组位置时为 `field[index][part]`，否则为 `field`。
        """
        name = self.field or ""
        pos = self.array_position
        if pos is not None and pos.part.strip():
            return f"{name}[{pos.index}][{pos.part}]"
        return name
