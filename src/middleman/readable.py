"""
Human-readable rendering of arbitrary values for error messages.

The dispatcher reports misconfigured stacks with the type and a short
rendering of the offending value, and with the name of the middleware that
returned an unexpected result. Long strings and containers are truncated;
the limit is read from ``MIDDLEMAN_READABLE_MAX_STRING``.
"""

import functools
import inspect
import logging
import os
import reprlib
import typing

import dotenv

logger = logging.getLogger("middleman")

dotenv.load_dotenv()

DEFAULT_MAX_STRING = 120


def _max_string() -> int:
    raw = os.getenv("MIDDLEMAN_READABLE_MAX_STRING")
    if raw is None:
        return DEFAULT_MAX_STRING
    try:
        limit = int(raw)
    except ValueError:
        limit = 0
    if limit <= 0:
        logger.warning(
            "Ignoring MIDDLEMAN_READABLE_MAX_STRING=%r, expected a positive integer",
            raw,
        )
        return DEFAULT_MAX_STRING
    return limit


MAX_STRING = _max_string()

_repr = reprlib.Repr()
_repr.maxstring = MAX_STRING
_repr.maxother = MAX_STRING


def _name(cls: type) -> str:
    if cls.__module__ == "builtins":
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"


def typeof(obj: typing.Any) -> str:
    """Name of the runtime type of ``obj``, e.g. ``int`` or ``app.mw.Auth``."""
    return _name(type(obj))


def value(obj: typing.Any) -> str:
    """Bounded rendering of ``obj``; callables and classes render by name."""
    if isinstance(obj, type):
        return _name(obj)
    if inspect.isroutine(obj) or isinstance(obj, functools.partial):
        return callback(obj)
    return _repr.repr(obj)


def callback(obj: typing.Any) -> str:
    """Name of a middleware as it would be invoked by the dispatcher."""
    if isinstance(obj, type):
        return _name(obj)
    if isinstance(obj, functools.partial):
        return f"partial({callback(obj.func)})"
    if inspect.ismethod(obj):
        owner = obj.__self__ if isinstance(obj.__self__, type) else type(obj.__self__)
        return f"{_name(owner)}.{obj.__name__}"
    if inspect.isfunction(obj) or inspect.isbuiltin(obj):
        module = getattr(obj, "__module__", None)
        if module in (None, "builtins"):
            return obj.__qualname__
        return f"{module}.{obj.__qualname__}"
    if callable(getattr(obj, "process", None)):
        return f"{_name(type(obj))}::process"
    if callable(obj):
        return f"{_name(type(obj))}::__call__"
    return value(obj)
