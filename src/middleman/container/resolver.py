import inspect
import logging
import typing

from middleman.container import protocol

logger = logging.getLogger("middleman")


class ContainerResolver:
    """
    Resolver that builds class entries of a middleware stack through a container.

    Anything that is not a class is passed through unchanged, so classes,
    middleware instances and functions can be mixed in one stack::

      dispatcher = Dispatcher(
          [LoggingMiddleware, auth_middleware, router],
          resolver=ContainerResolver(DIContainer()),
      )
    """

    def __init__(self, container: protocol.Container) -> None:
        self._container = container

    def __call__(self, descriptor: typing.Any) -> typing.Any:
        if not inspect.isclass(descriptor):
            return descriptor
        logger.debug("Resolve middleware %s", descriptor.__name__)
        return self._container.resolve(descriptor)
