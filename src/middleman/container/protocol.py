import typing

T = typing.TypeVar("T")
C = typing.TypeVar("C")


class Container(typing.Protocol[C]):
    """
    Builds middleware instances from their classes.

    A stack may list middleware classes instead of instances; the
    :class:`~middleman.container.resolver.ContainerResolver` hands each class
    to ``resolve`` every time its position is dispatched, so the container
    decides the lifetime of the middleware and of its dependencies.
    ``resolve`` runs inside the dispatch and must be synchronous.

    ``C`` is the type of the wrapped third-party container (e.g. ``di.Container``).
    """

    @property
    def external_container(self) -> C:
        """The third-party container the middleware classes are built with."""
        raise NotImplementedError

    def attach_external_container(self, container: C) -> None:
        raise NotImplementedError

    def resolve(self, type_: typing.Type[T]) -> T:
        """Build a ready-to-use instance of the middleware class ``type_``."""
        raise NotImplementedError
