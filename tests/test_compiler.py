"""Tests for the render function compiler."""

from types import SimpleNamespace

import pytest

from tplgen.lib.compiler import RenderCompiler
from tplgen.lib.config import TplgenConfig
from tplgen.lib.errors import PluginNotFoundError


def _load(source, name="render"):
    namespace = {}
    exec(source, namespace)
    return namespace[name]


def _template(**scope):
    return SimpleNamespace(scope=scope, charset="UTF-8")


class TestRenderCompiler:
    def test_compile_empty(self, utf8):
        """Empty compiler should produce a valid function."""
        source = RenderCompiler(utf8).compile()

        assert source.startswith("def render(self):")
        assert _load(source)(_template()) == ""

    def test_text_only(self, utf8):
        compiler = RenderCompiler(utf8)
        compiler.add_text("Hello 'world'\n")
        assert _load(compiler.compile())(_template()) == "Hello 'world'\n"

    def test_add_call_returns_expression(self, utf8):
        compiler = RenderCompiler(utf8)
        code = compiler.add_call("array", [("", "1")])
        assert code == "[1]"
        assert code in compiler.compile()

    def test_render_with_default(self, utf8):
        """Spliced default calls work inside the generated function."""
        compiler = RenderCompiler(utf8)
        compiler.add_text("Hello ")
        compiler.add_call("default", [(None, "self.scope.get('name')"), (None, "'world'")])
        render = _load(compiler.compile())

        assert render(_template()) == "Hello world"
        assert render(_template(name="Ann")) == "Hello Ann"

    def test_imports_are_collected_once(self, utf8):
        """Imports appear once, only for plugins that need them."""
        compiler = RenderCompiler(utf8)
        compiler.add_call("whitespace", [(None, "self.scope['a']")])
        compiler.add_call("whitespace", [(None, "self.scope['b']"), ("with", "'_'")])
        source = compiler.compile()

        assert source.count("import re") == 1
        render = _load(source)
        assert render(_template(a="x   y", b="p \t q")) == "x yp_q"

    def test_no_imports_without_whitespace(self, utf8):
        compiler = RenderCompiler(utf8)
        compiler.add_call("default", [(None, "1")])
        assert "import" not in compiler.compile()

    def test_custom_function_name(self, latin1):
        compiler = RenderCompiler(latin1, function_name="render_page")
        compiler.add_call("whitespace", [(None, "'a \\xa0b'")])
        source = compiler.compile()

        assert "def render_page(self):" in source
        assert "re.ASCII" in source
        assert _load(source, "render_page")(_template()) == "a \xa0b"

    def test_all_plugins_together(self, utf8):
        compiler = RenderCompiler(utf8)
        compiler.add_call("array", [("a", "self.scope['x']"), ("b", "5")])
        compiler.add_text(" ")
        compiler.add_call("default", [(None, "''"), (None, "'empty'")])
        render = _load(compiler.compile())

        assert render(_template(x="foo")) == "{'a': 'foo', 'b': 5} empty"

    def test_unknown_plugin(self, utf8):
        with pytest.raises(PluginNotFoundError):
            RenderCompiler(utf8).add_call("nope")


class TestRenderCompilerFromConfig:
    def test_uses_configured_function_name_and_charset(self):
        config = TplgenConfig(charset="ISO-8859-1", function_name="render_body")
        compiler = RenderCompiler.from_config(config)
        compiler.add_call("whitespace", [(None, "self.scope['t']")])
        source = compiler.compile()

        assert compiler.context.charset == "ISO-8859-1"
        assert "def render_body(self):" in source
        assert "re.ASCII" in source
        assert _load(source, "render_body")(_template(t="a   b")) == "a b"
