import typing


class MiddlewareError(Exception):
    """Base class for dispatcher errors."""


class InvalidConfiguration(MiddlewareError, ValueError):
    pass


class UnsupportedMiddlewareType(MiddlewareError, TypeError):
    def __init__(self, message: str, middleware: typing.Any) -> None:
        super().__init__(message)
        self.middleware = middleware
        self.middleware_type = type(middleware)


class UnexpectedResult(MiddlewareError, TypeError):
    def __init__(self, message: str, result: typing.Any, middleware: typing.Any) -> None:
        super().__init__(message)
        self.result = result
        self.middleware = middleware


class StackExhausted(MiddlewareError, LookupError):
    pass
