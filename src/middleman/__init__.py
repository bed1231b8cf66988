from middleman.container import Container, ContainerResolver, DIContainer
from middleman.dispatcher import Dispatcher, Resolver
from middleman.exceptions import (
    InvalidConfiguration,
    MiddlewareError,
    StackExhausted,
    UnexpectedResult,
    UnsupportedMiddlewareType,
)
from middleman.handler import Delegate, Handler
from middleman.middlewares import Middleware, MiddlewareFunction
from middleman.request import Request
from middleman.response import Response

__all__ = (
    "Dispatcher",
    "Resolver",
    "Handler",
    "Delegate",
    "Middleware",
    "MiddlewareFunction",
    "Request",
    "Response",
    "MiddlewareError",
    "InvalidConfiguration",
    "UnsupportedMiddlewareType",
    "UnexpectedResult",
    "StackExhausted",
    "Container",
    "ContainerResolver",
    "DIContainer",
)
