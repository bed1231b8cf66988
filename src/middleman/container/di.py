import typing

import di
from di import dependent, executors

from middleman.container import protocol

T = typing.TypeVar("T")


class DIContainer(protocol.Container[di.Container]):
    def __init__(self, container: di.Container | None = None) -> None:
        self._external_container = container or di.Container()

    @property
    def external_container(self) -> di.Container:
        return self._external_container

    def attach_external_container(self, container: di.Container) -> None:
        self._external_container = container

    def resolve(self, type_: typing.Type[T]) -> T:
        executor = executors.SyncExecutor()
        solved = self._external_container.solve(
            dependent.Dependent(type_, scope="request"),
            scopes=["request"],
        )
        with self._external_container.enter_scope("request") as state:
            return solved.execute_sync(executor=executor, state=state)
