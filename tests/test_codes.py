"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: test_codes.py
@DateTime: 2026-10-19
@Docs: Tests for codes.py module.
codes.py 模块测试。
"""

from request_validator.codes import (
    build_error,
    field_code,
    fixed_code,
    linked_code,
    param_message,
    resource_code,
)
from request_validator.focus import Focus


class TestCodeGrammar:
    """Tests for error code builders.
    错误码构建函数测试。
    """

    def test_field_code(self) -> None:
        focus = Focus(resource="client", field="firstname")
        assert field_code(focus, "cannot.be.blank") == "validation.msg.client.firstname.cannot.be.blank"

    def test_field_code_with_array_part(self) -> None:
        """Array part inserted only on request / 仅在要求时插入数组部分。"""
        focus = Focus(resource="loan", field="charges").with_array_position("amount", 2)
        assert field_code(focus, "cannot.be.blank", with_array_part=True) == "validation.msg.loan.charges.amount.cannot.be.blank"
        assert field_code(focus, "cannot.be.blank") == "validation.msg.loan.charges.cannot.be.blank"

    def test_missing_resource_renders_null(self) -> None:
        """Absent names render as "null" / 缺失名称渲染为 "null"。"""
        assert field_code(Focus(field="x"), "invalid") == "validation.msg.null.x.invalid"

    def test_linked_resource_fixed(self) -> None:
        focus = Focus(resource="user", field="password")
        assert linked_code(focus, "repeatPassword", "not.equal.to.password") == (
            "validation.msg.user.repeatPassword.not.equal.to.password"
        )
        assert resource_code(focus, "no.parameters.for.update") == "validation.msg.user.no.parameters.for.update"
        assert fixed_code("invalid.recurring.rule") == "validation.msg.invalid.recurring.rule"


class TestBuildError:
    """Tests for build_error and param_message.
    build_error 与 param_message 测试。
    """

    def test_param_message(self) -> None:
        assert param_message("age", "is mandatory.") == "The parameter `age` is mandatory."

    def test_build_error_none_field(self) -> None:
        """None field becomes empty string / None 字段变为空字符串。"""
        err = build_error("c", "m", None)
        assert err.field == ""

    def test_build_error_args_tuple(self) -> None:
        err = build_error("c", "m", "f", rejected_value=5, args=[5, 6])  # type: ignore[arg-type]
        assert err.args == (5, 6)
        assert err.rejected_value == 5
