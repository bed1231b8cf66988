from middleman.container.di import DIContainer
from middleman.container.protocol import Container
from middleman.container.resolver import ContainerResolver

__all__ = (
    "Container",
    "ContainerResolver",
    "DIContainer",
)
