"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: test_rules_presence.py
@DateTime: 2026-10-19
@Docs: Tests for rules/presence.py module.
rules/presence.py 模块测试。
"""

import pytest

from request_validator.exceptions import InvalidUsage
from request_validator.focus import Focus
from request_validator.rules import (
    array_not_empty,
    cant_be_blank_when_parameter_provided_is,
    collection_not_empty,
    not_blank,
    not_null,
    true_or_false_provided,
)


class TestNotNull:
    """Tests for not_null.
    not_null 测试。
    """

    def test_absent_is_violation(self, focus: Focus) -> None:
        err = not_null(focus)
        assert err is not None
        assert err.code == "validation.msg.client.firstname.cannot.be.blank"
        assert err.args == ()

    def test_empty_text_passes(self, focus: Focus) -> None:
        """Only None counts as absent / 仅 None 视为缺失。"""
        assert not_null(focus.with_value("")) is None
        assert not_null(focus.with_value(0)) is None

    def test_skip(self, focus: Focus) -> None:
        assert not_null(focus.skipping_absent()) is None


class TestNotBlank:
    """Tests for not_blank.
    not_blank 测试。
    """

    def test_blank_values(self, focus: Focus) -> None:
        for v in (None, "", "  \n"):
            assert not_blank(focus.with_value(v)) is not None

    def test_non_blank_values(self, focus: Focus) -> None:
        for v in ("a", 0, False):
            assert not_blank(focus.with_value(v)) is None

    def test_array_position(self) -> None:
        """Array part and index reported / 报告数组部分与下标。"""
        f = Focus(resource="loan", field="charges").with_array_position("chargeId", 0).with_value(" ")
        err = not_blank(f)
        assert err is not None
        assert err.code == "validation.msg.loan.charges.chargeId.cannot.be.blank"
        assert err.field == "charges[0][chargeId]"
        assert err.args == (0,)


class TestEmptiness:
    """Tests for array_not_empty and collection_not_empty.
    array_not_empty 与 collection_not_empty 测试。
    """

    def test_array_not_empty(self, focus: Focus) -> None:
        f = focus.with_field("ids")
        assert array_not_empty(f.with_value([1])) is None
        err = array_not_empty(f.with_value([]))
        assert err is not None
        assert err.code == "validation.msg.client.ids.cannot.be.empty"

    def test_array_absent_is_empty(self, focus: Focus) -> None:
        """Absent array counts as empty unless skipped / 缺失数组视为空，除非跳过。"""
        assert array_not_empty(focus.with_field("ids")) is not None
        assert array_not_empty(focus.with_field("ids").skipping_absent()) is None

    def test_array_wrong_type(self, focus: Focus) -> None:
        with pytest.raises(InvalidUsage):
            array_not_empty(focus.with_value("1,2"))

    def test_collection_not_empty(self, focus: Focus) -> None:
        """Absent collection passes, empty one fails / 缺失集合通过，空集合失败。"""
        assert collection_not_empty(focus) is None
        assert collection_not_empty(focus.with_value({"a": 1})) is None
        err = collection_not_empty(focus.with_value({}))
        assert err is not None
        assert err.code.endswith(".cannot.be.empty")


class TestConditionalPresence:
    """Tests for cant_be_blank_when_parameter_provided_is and true_or_false_provided.
    条件存在性规则测试。
    """

    def test_cant_be_blank_when_parameter_is(self, focus: Focus) -> None:
        f = focus.with_field("endDate")
        err = cant_be_blank_when_parameter_provided_is(f, "type", "fixed")
        assert err is not None
        assert err.code == "validation.msg.client.endDate.must.be.provided.when.type.is.fixed"
        assert err.args == ("type", "fixed")
        assert cant_be_blank_when_parameter_provided_is(f.with_value("2024-01-01"), "type", "fixed") is None

    def test_cant_be_blank_ignores_skip(self, focus: Focus) -> None:
        """No null-skip for this rule / 该规则无空值跳过。"""
        assert cant_be_blank_when_parameter_provided_is(focus.skipping_absent(), "active", True) is not None

    def test_true_or_false_provided(self, focus: Focus) -> None:
        f = focus.with_field("active")
        assert true_or_false_provided(f, True) is None
        err = true_or_false_provided(f, False)
        assert err is not None
        assert err.code == "validation.msg.client.active.must.be.true.or.false"
        assert true_or_false_provided(f.skipping_absent(), False) is None
