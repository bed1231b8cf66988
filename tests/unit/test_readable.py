import functools
import importlib

import pytest

from middleman import readable


class Sample:
    def method(self) -> None:
        pass

    @classmethod
    def build(cls) -> "Sample":
        return cls()


class ProcessingSample:
    def process(self, request, handler):
        return None


class CallableSample:
    def __call__(self, request, handler):
        return None


def sample_function(request, handler):
    return None


def _qualified(obj) -> str:
    return f"{obj.__module__}.{obj.__qualname__}"


def test_typeof_builtins() -> None:
    assert readable.typeof(1) == "int"
    assert readable.typeof("x") == "str"
    assert readable.typeof(None) == "NoneType"
    assert readable.typeof(Sample) == "type"


def test_typeof_user_class() -> None:
    assert readable.typeof(Sample()) == _qualified(Sample)


def test_value_scalars() -> None:
    assert readable.value(123) == "123"
    assert readable.value("abc") == "'abc'"
    assert readable.value(None) == "None"


def test_value_truncates_long_strings() -> None:
    rendered = readable.value("x" * 1000)

    assert "..." in rendered
    assert len(rendered) <= readable.MAX_STRING + 2


def test_value_truncates_long_containers() -> None:
    rendered = readable.value(list(range(1000)))

    assert "..." in rendered


def test_value_renders_callables_by_name() -> None:
    assert readable.value(Sample) == _qualified(Sample)
    assert readable.value(sample_function) == _qualified(sample_function)


def test_callback_function() -> None:
    assert readable.callback(sample_function) == _qualified(sample_function)


def test_callback_lambda() -> None:
    assert readable.callback(lambda request, handler: None).endswith("<lambda>")


def test_callback_builtin() -> None:
    assert readable.callback(len) == "len"


def test_callback_methods() -> None:
    assert readable.callback(Sample().method) == f"{_qualified(Sample)}.method"
    assert readable.callback(Sample.build) == f"{_qualified(Sample)}.build"


def test_callback_middleware_object() -> None:
    assert readable.callback(ProcessingSample()) == f"{_qualified(ProcessingSample)}::process"


def test_callback_callable_object() -> None:
    assert readable.callback(CallableSample()) == f"{_qualified(CallableSample)}::__call__"


def test_callback_partial() -> None:
    partial = functools.partial(sample_function, handler=None)

    assert readable.callback(partial) == f"partial({_qualified(sample_function)})"


def test_callback_non_callable_falls_back_to_value() -> None:
    assert readable.callback(42) == "42"


@pytest.fixture
def reload_readable(monkeypatch):
    yield monkeypatch
    monkeypatch.undo()
    importlib.reload(readable)


def test_max_string_from_environment(reload_readable) -> None:
    reload_readable.setenv("MIDDLEMAN_READABLE_MAX_STRING", "40")
    importlib.reload(readable)

    rendered = readable.value("x" * 1000)

    assert readable.MAX_STRING == 40
    assert len(rendered) == 40
    assert "..." in rendered


@pytest.mark.parametrize("raw", ["many", "0", "-5"])
def test_invalid_max_string_falls_back_to_default(reload_readable, raw) -> None:
    reload_readable.setenv("MIDDLEMAN_READABLE_MAX_STRING", raw)
    importlib.reload(readable)

    assert readable.MAX_STRING == readable.DEFAULT_MAX_STRING
