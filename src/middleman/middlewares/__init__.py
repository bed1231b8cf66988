from middleman.middlewares.base import (
    classify,
    Middleware,
    MiddlewareFunction,
    MiddlewareKind,
)

__all__ = (
    "Middleware",
    "MiddlewareFunction",
    "MiddlewareKind",
    "classify",
)
