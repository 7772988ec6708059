"""Shared fixtures for tplgen tests."""

import re
from types import SimpleNamespace

import pytest

from tplgen.lib.context import CompileContext


@pytest.fixture
def utf8():
    return CompileContext(charset="UTF-8")


@pytest.fixture
def latin1():
    return CompileContext(charset="ISO-8859-1")


@pytest.fixture
def evaluate():
    """Evaluate generated code the way a rendering function would see it."""

    def _evaluate(code, scope=None, **names):
        template = SimpleNamespace(scope=scope or {}, charset="UTF-8")
        namespace = {"re": re, "self": template, **names}
        return eval(code, namespace)

    return _evaluate
