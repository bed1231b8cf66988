import pydantic


class Response(pydantic.BaseModel):
    """
    Base class for response type objects.

    The response is the result of the dispatch. Every middleware and
    terminal handler must return an instance of it (or of the response type
    the dispatcher was configured with).
    """
