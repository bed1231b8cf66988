import pydantic


class Request(pydantic.BaseModel, frozen=True):
    """
    Base class for request-type objects.

    The request is the input of the middleware stack. It is immutable:
    a middleware that needs a different request builds a new one
    (e.g. with ``request.model_copy(update=...)``) and passes that down.
    """
