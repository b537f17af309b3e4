"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.service.room.driven_adapter.repo.room_repo_in_memory_impl import RoomRepoInMemoryImpl


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Repositories (process-local state, one instance per container)
    room_repo = providers.Singleton(RoomRepoInMemoryImpl)


container = Container()


def setup() -> None:
    container.config_service()
    container.room_repo()


def cleanup() -> None:
    container.reset_singletons()
