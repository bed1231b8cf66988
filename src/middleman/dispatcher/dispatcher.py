import logging
import typing

from middleman import exceptions, readable
from middleman import handler as h
from middleman.middlewares import base
from middleman.response import Response

logger = logging.getLogger("middleman")

Resolver = typing.Callable[[typing.Any], typing.Any]


class Dispatcher:
    """
    Middleware dispatcher.

    Runs a request through an ordered stack of middleware. Each entry of the
    stack is a middleware object (anything with ``process(request, handler)``),
    a function ``(request, handler) -> response``, or any value the optional
    ``resolver`` turns into one of those. Entries are resolved lazily, each
    time their position is reached.

    A dispatcher is itself a handler (it can end a chain) and a middleware
    (it can be an entry of another dispatcher's stack)::

      api = Dispatcher([auth, ratelimit])
      app = Dispatcher([logging_mw, api, router])
      response = app.handle(request)

    Instances hold no per-call state and can be shared between threads.
    """

    def __init__(
        self,
        stack: typing.Iterable[typing.Any],
        resolver: Resolver | None = None,
        response_type: type | tuple[type, ...] = Response,
    ) -> None:
        self._stack = tuple(stack)
        if not self._stack:
            raise exceptions.InvalidConfiguration("an empty middleware stack was given")
        self._resolver = resolver
        self._response_type = response_type

    @property
    def stack(self) -> tuple[typing.Any, ...]:
        return self._stack

    def handle(self, request: typing.Any) -> typing.Any:
        """Dispatch the stack and return the resulting response."""
        return self._resolve(0, h.EXHAUSTED).handle(request)

    def process(self, request: typing.Any, handler: h.Handler) -> typing.Any:
        """
        Dispatch the stack as one step of an outer chain.

        When every middleware of this stack delegates, the request continues
        with ``handler``, the rest of the outer chain. The stack itself is
        left untouched.
        """
        logger.debug("Nested dispatch continues with %r", handler)
        return self._resolve(0, handler).handle(request)

    def _resolve(self, index: int, tail: h.Handler) -> h.Handler:
        if index >= len(self._stack):
            return tail

        def dispatch(request: typing.Any) -> typing.Any:
            descriptor = self._stack[index]
            middleware = self._resolver(descriptor) if self._resolver is not None else descriptor
            logger.debug(
                "Dispatch middleware %d: %s",
                index,
                readable.callback(middleware),
            )

            kind = base.classify(middleware)
            if kind is base.MiddlewareKind.OBJECT:
                result = middleware.process(request, self._resolve(index + 1, tail))
            elif kind is base.MiddlewareKind.FUNCTION:
                result = middleware(request, self._resolve(index + 1, tail))
            else:
                raise exceptions.UnsupportedMiddlewareType(
                    f"unsupported middleware type: {readable.typeof(middleware)} "
                    f"({readable.value(middleware)})",
                    middleware,
                )

            if not isinstance(result, self._response_type):
                raise exceptions.UnexpectedResult(
                    f"unexpected middleware result: {readable.value(result)} "
                    f"returned by: {readable.callback(middleware)}",
                    result,
                    middleware,
                )

            return result

        return h.Delegate(dispatch)
