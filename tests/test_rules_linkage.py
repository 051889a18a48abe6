"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: test_rules_linkage.py
@DateTime: 2026-10-19
@Docs: Tests for rules/linkage.py module.
rules/linkage.py 模块测试。
"""

from request_validator.focus import Focus
from request_validator.rules import (
    and_not_blank,
    any_of_not_null,
    equal_to_parameter,
    must_be_blank_when_parameter_provided,
    must_be_blank_when_parameter_provided_is,
    not_same_as_parameter,
)


def _user(field: str, value: object) -> Focus:
    return Focus(resource="user", field=field, value=value)


class TestAndNotBlank:
    """Tests for and_not_blank.
    and_not_blank 测试。
    """

    def test_linked_blank_while_populated(self) -> None:
        """Reported against the linked parameter / 针对被关联参数报告。"""
        err = and_not_blank(_user("loanId", 7), "savingsId", " ")
        assert err is not None
        assert err.code == "validation.msg.user.savingsId.cannot.be.empty.when.loanId.is.populated"
        assert err.field == "savingsId"
        assert err.rejected_value == " "
        assert err.args == (7,)

    def test_passes(self) -> None:
        assert and_not_blank(_user("loanId", 7), "savingsId", 9) is None
        assert and_not_blank(_user("loanId", None), "savingsId", None) is None

    def test_both_absent_with_skip(self) -> None:
        assert and_not_blank(_user("loanId", None).skipping_absent(), "savingsId", None) is None


class TestEquality:
    """Tests for equal_to_parameter and not_same_as_parameter.
    equal_to_parameter 与 not_same_as_parameter 测试。
    """

    def test_equal_to_parameter(self) -> None:
        f = _user("password", "s3cret")
        assert equal_to_parameter(f, "repeatPassword", "s3cret") is None
        err = equal_to_parameter(f, "repeatPassword", "other")
        assert err is not None
        assert err.code == "validation.msg.user.repeatPassword.not.equal.to.password"
        assert err.field == "repeatPassword"
        assert err.rejected_value == "other"
        assert err.args == ("s3cret",)

    def test_not_same_as_parameter(self) -> None:
        f = _user("password", "s3cret")
        assert not_same_as_parameter(f, "oldPassword", "older") is None
        err = not_same_as_parameter(f, "oldPassword", "s3cret")
        assert err is not None
        assert err.code == "validation.msg.user.oldPassword.same.as.password"

    def test_types_not_mixed(self) -> None:
        """True is not equal to 1 / True 不等于 1。"""
        assert equal_to_parameter(_user("flag", True), "other", 1) is not None
        assert not_same_as_parameter(_user("flag", True), "other", 1) is None

    def test_absent_focus_passes(self) -> None:
        assert equal_to_parameter(_user("password", None), "repeatPassword", "x") is None
        assert not_same_as_parameter(_user("password", None), "oldPassword", None) is None


class TestMustBeBlank:
    """Tests for must_be_blank_when_parameter_provided(_is).
    must_be_blank_when_parameter_provided(_is) 测试。
    """

    def test_provided_while_other_populated(self) -> None:
        err = must_be_blank_when_parameter_provided(_user("savingsId", 5), "loanId", 3)
        assert err is not None
        assert err.code == "validation.msg.user.savingsId.cannot.also.be.provided.when.loanId.is.populated"
        assert err.args == ("loanId", 3)

    def test_blank_while_other_populated_passes(self) -> None:
        """Blank focus while the other is set satisfies the rule / 另一参数有值且焦点为空时满足规则。"""
        assert must_be_blank_when_parameter_provided(_user("savingsId", None), "loanId", 3) is None
        assert must_be_blank_when_parameter_provided(_user("savingsId", ""), "loanId", 3) is None

    def test_skip(self) -> None:
        assert must_be_blank_when_parameter_provided(_user("savingsId", None).skipping_absent(), "loanId", None) is None

    def test_provided_is_code_renders_value(self) -> None:
        """Booleans render lowercase in the code / 布尔值在错误码中小写渲染。"""
        err = must_be_blank_when_parameter_provided_is(_user("endDate", "2024-01-01"), "isOpen", True)
        assert err is not None
        assert err.code == "validation.msg.user.endDate.cannot.also.be.provided.when.isOpen.is.true"


class TestAnyOfNotNull:
    """Tests for any_of_not_null.
    any_of_not_null 测试。
    """

    def test_all_absent(self) -> None:
        err = any_of_not_null(Focus(resource="client"), None, None)
        assert err is not None
        assert err.code == "validation.msg.client.no.parameters.for.update"
        assert err.field == "id"

    def test_one_present(self) -> None:
        assert any_of_not_null(Focus(resource="client"), None, "", None) is None
