"""
Example: Nested Middleware Dispatchers

This example composes two dispatchers. The inner one groups the API
middleware (authentication and timing); the outer one puts request logging in
front of it and a router behind it.

================================================================================
HOW TO RUN THIS EXAMPLE
================================================================================

Run the example:
   python examples/nested_dispatchers.py

The example will:
- Dispatch an authorized request through logging, auth, timing and the router
- Dispatch an anonymous request that auth answers with 401 without going further

================================================================================
WHAT THIS EXAMPLE DEMONSTRATES
================================================================================

1. Middleware shapes:
   - Objects with a process(request, handler) method
   - Plain functions (request, handler) -> response

2. Short-circuiting:
   - AuthMiddleware returns a response without calling the next handler

3. Nesting:
   - The API dispatcher is one entry of the application stack
   - When all of its middleware delegate, the request continues with the router

================================================================================
REQUIREMENTS
================================================================================

Make sure you have installed:
   - middleman (this package)

================================================================================
"""

import logging
import time

import middleman

logging.basicConfig(level=logging.DEBUG)
logger = logging.getLogger(__name__)


class HttpRequest(middleman.Request):
    path: str
    token: str | None = None


class HttpResponse(middleman.Response):
    status: int = 200
    body: str = ""


class AuthMiddleware:
    def process(self, request: HttpRequest, handler: middleman.Handler) -> HttpResponse:
        if request.token != "secret":
            return HttpResponse(status=401, body="unauthorized")
        return handler.handle(request)


def timing(request: HttpRequest, handler: middleman.Handler) -> HttpResponse:
    started = time.perf_counter()
    response = handler.handle(request)
    logger.info("%s took %.6fs", request.path, time.perf_counter() - started)
    return response


def access_log(request: HttpRequest, handler: middleman.Handler) -> HttpResponse:
    response = handler.handle(request)
    logger.info("%s -> %d", request.path, response.status)
    return response


def router(request: HttpRequest, handler: middleman.Handler) -> HttpResponse:
    return HttpResponse(body=f"you asked for {request.path}")


def main() -> None:
    api = middleman.Dispatcher([AuthMiddleware(), timing])
    app = middleman.Dispatcher([access_log, api, router])

    response = app.handle(HttpRequest(path="/reports", token="secret"))
    assert response.status == 200
    assert response.body == "you asked for /reports"

    response = app.handle(HttpRequest(path="/reports"))
    assert response.status == 401


if __name__ == "__main__":
    main()
