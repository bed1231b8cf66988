import typing

from middleman import exceptions
from middleman.request import Request
from middleman.response import Response

_Req = typing.TypeVar("_Req", bound=Request, contravariant=True)
_Res = typing.TypeVar("_Res", bound=Response, covariant=True)


@typing.runtime_checkable
class Handler(typing.Protocol[_Req, _Res]):
    """
    The request handler interface.

    A handler turns a request into a response. The handler passed to a
    middleware as ``next`` stands for the remainder of the stack.
    """

    def handle(self, request: _Req) -> _Res:
        raise NotImplementedError


class Delegate:
    """Handler backed by a plain ``request -> response`` function."""

    def __init__(self, callback: typing.Callable[[typing.Any], typing.Any]) -> None:
        self._callback = callback

    def handle(self, request: typing.Any) -> typing.Any:
        return self._callback(request)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._callback!r})"


def _exhausted(request: typing.Any) -> typing.NoReturn:
    raise exceptions.StackExhausted(
        "unresolved request: middleware stack exhausted with no result",
    )


EXHAUSTED = Delegate(_exhausted)
