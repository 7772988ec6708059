"""Tests for the default value generator."""

import pytest

from tplgen.lib.generators import compile_default


class TestCompileDefault:
    def test_value_is_returned(self, utf8, evaluate):
        """A present value is yielded as-is."""
        assert evaluate(compile_default(utf8, "5")) == 5

    def test_empty_string_falls_back_to_empty_default(self, utf8, evaluate):
        """'' with no default yields the '' default."""
        assert evaluate(compile_default(utf8, "''")) == ""

    def test_none_falls_back_to_default(self, utf8, evaluate):
        """None yields the default expression."""
        assert evaluate(compile_default(utf8, "None", "'fallback'")) == "fallback"

    def test_empty_string_falls_back_to_default(self, utf8, evaluate):
        """'' yields the default expression."""
        assert evaluate(compile_default(utf8, "''", "'fallback'")) == "fallback"

    @pytest.mark.parametrize("value", ["0", "False", "[]", "' '"])
    def test_other_falsy_values_are_kept(self, utf8, evaluate, value):
        """Only None and '' trigger the fallback."""
        code = compile_default(utf8, value, "'fallback'")
        assert evaluate(code) == eval(value)

    def test_omitted_default_is_empty_string_literal(self, utf8):
        """The omitted default compiles to '' in the generated code."""
        code = compile_default(utf8, "x")
        assert code.endswith("else (''))")

    def test_scope_lookup(self, utf8, evaluate):
        """Works on scope lookups spliced in by the compiler."""
        code = compile_default(utf8, "self.scope.get('name')", "'anonymous'")
        assert evaluate(code, scope={"name": "Ann"}) == "Ann"
        assert evaluate(code, scope={}) == "anonymous"
        assert evaluate(code, scope={"name": ""}) == "anonymous"


class TestDefaultEvaluatesValueOnce:
    @pytest.mark.parametrize("result", ["value", "", None])
    def test_value_expression_runs_once(self, utf8, evaluate, result):
        """The value expression runs exactly once on every branch."""
        calls = []

        def fetch():
            calls.append(1)
            return result

        code = compile_default(utf8, "fetch()", "'fallback'")
        rendered = evaluate(code, fetch=fetch)

        assert len(calls) == 1
        assert rendered == (result if result else "fallback")

    def test_default_not_evaluated_when_value_present(self, utf8, evaluate):
        """The default expression only runs on fallback."""

        def explode():
            raise AssertionError("default should not be evaluated")

        code = compile_default(utf8, "'present'", "explode()")
        assert evaluate(code, explode=explode) == "present"

    def test_nested_defaults(self, utf8, evaluate):
        """Generated expressions can be nested in each other."""
        inner = compile_default(utf8, "None", "''")
        outer = compile_default(utf8, inner, compile_default(utf8, "None", "'last'"))
        assert evaluate(outer) == "last"


class TestDefaultIsPure:
    def test_identical_output(self, utf8):
        """Repeated calls give byte-identical code."""
        assert compile_default(utf8, "a", "b") == compile_default(utf8, "a", "b")

    def test_charset_does_not_matter(self, utf8, latin1):
        """The default generator ignores the charset."""
        assert compile_default(utf8, "a") == compile_default(latin1, "a")
