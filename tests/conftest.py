"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: conftest.py
@DateTime: 2026-10-19
@Docs: Shared test fixtures for the request-validator test suite.
测试套件的公共 fixtures。
"""

import pytest

from request_validator.adapters import SyntaxCheck, SyntaxOutcome
from request_validator.context import ValidationContext
from request_validator.focus import Focus


class StubSyntax:
    """Syntax validator returning a fixed outcome and remembering its inputs.
    返回固定结果并记录输入的语法校验器。
    """

    def __init__(self, outcome: SyntaxOutcome = SyntaxOutcome.VALID) -> None:
        self.outcome = outcome
        self.seen: list[str] = []

    def check(self, text: str) -> SyntaxCheck:
        self.seen.append(text)
        return SyntaxCheck(self.outcome)


@pytest.fixture
def stub_syntax() -> type[StubSyntax]:
    """Return the StubSyntax class for tests building their own validators.
    返回 StubSyntax 类，供测试自行构建校验器。
    """
    return StubSyntax


@pytest.fixture
def ctx() -> ValidationContext:
    """Return a context focused on the "client" resource.
    返回聚焦于 "client" 资源的上下文。
    """
    return ValidationContext(resource="client")


@pytest.fixture
def focus() -> Focus:
    """Return a focus on client.firstname without a value.
    返回 client.firstname 且无值的焦点。
    """
    return Focus(resource="client", field="firstname")
