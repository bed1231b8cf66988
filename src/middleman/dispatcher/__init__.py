from middleman.dispatcher.dispatcher import Dispatcher, Resolver

__all__ = (
    "Dispatcher",
    "Resolver",
)
