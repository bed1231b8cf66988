import enum
import inspect
import typing

from middleman import handler as h
from middleman.request import Request
from middleman.response import Response

_Req = typing.TypeVar("_Req", bound=Request, contravariant=True)
_Res = typing.TypeVar("_Res", bound=Response, covariant=True)

MiddlewareFunction = typing.Callable[[typing.Any, h.Handler], typing.Any]


@typing.runtime_checkable
class Middleware(typing.Protocol[_Req, _Res]):
    """
    The middleware interface.

    A middleware either answers the request itself or delegates to
    ``handler``, which represents the rest of the stack::

      class AuthMiddleware:
          def process(self, request: HttpRequest, handler: Handler) -> HttpResponse:
              if not request.token:
                  return HttpResponse(status=401)
              return handler.handle(request)
    """

    def process(self, request: _Req, handler: h.Handler) -> _Res:
        raise NotImplementedError


class MiddlewareKind(enum.Enum):
    OBJECT = "object"
    FUNCTION = "function"
    UNSUPPORTED = "unsupported"


def classify(middleware: typing.Any) -> MiddlewareKind:
    """
    Tell how a resolved stack entry is invoked.

    Instances with a callable ``process`` win over plain callables, so an
    object that has both is always called through ``process``. A
    non-callable ``process`` attribute is ignored. Classes are never
    middleware by themselves; a resolver has to instantiate them.
    """
    if inspect.isclass(middleware):
        return MiddlewareKind.UNSUPPORTED
    if callable(getattr(middleware, "process", None)):
        return MiddlewareKind.OBJECT
    if callable(middleware):
        return MiddlewareKind.FUNCTION
    return MiddlewareKind.UNSUPPORTED
