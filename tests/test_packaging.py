"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: test_packaging.py
@DateTime: 2026-10-19
@Docs: Tests for packaging, __all__ exports, and pip-readiness.
打包、__all__ 导出与 pip 就绪性测试。
"""

import importlib
import tomllib
from pathlib import Path

ROOT = Path(__file__).parent.parent


class TestAllExports:
    """Tests for __all__ exports.
    __all__ 导出测试。
    """

    def test_every_name_importable(self) -> None:
        """Every name in __all__ can be successfully imported / __all__ 中每个名字都能成功导入。"""
        import request_validator

        for name in request_validator.__all__:
            obj = getattr(request_validator, name, None)
            assert obj is not None, f"{name} is in __all__ but not importable / {name} 在 __all__ 中但无法导入"

    def test_rules_exports(self) -> None:
        """Every rule listed in rules.__all__ exists / rules.__all__ 中的规则均存在。"""
        rules = importlib.import_module("request_validator.rules")
        for name in rules.__all__:
            assert hasattr(rules, name), name

    def test_context_exposes_every_rule(self) -> None:
        """Each rule function has a chainable context method / 每个规则函数都有对应的链式上下文方法。"""
        from request_validator import ValidationContext, rules

        names = [n for n in rules.__all__ if n.islower()]
        missing = [n for n in names if not callable(getattr(ValidationContext, n, None))]
        assert missing == []


class TestPyTyped:
    """Tests for py.typed marker.
    py.typed 标记文件测试。
    """

    def test_py_typed_exists(self) -> None:
        assert (ROOT / "src" / "request_validator" / "py.typed").exists()


class TestExtrasKeys:
    """Tests for pyproject.toml extras.
    pyproject.toml extras 测试。
    """

    def test_extras_keys_present(self) -> None:
        data = tomllib.loads((ROOT / "pyproject.toml").read_text(encoding="utf-8"))
        extras = data.get("project", {}).get("optional-dependencies", {})
        for key in ("test", "full"):
            assert key in extras, f"extras key '{key}' missing / extras 键 '{key}' 缺失"

    def test_runtime_dependencies_declared(self) -> None:
        data = tomllib.loads((ROOT / "pyproject.toml").read_text(encoding="utf-8"))
        deps = " ".join(data["project"]["dependencies"])
        for dist in ("pydantic", "python-dateutil", "croniter"):
            assert dist in deps
