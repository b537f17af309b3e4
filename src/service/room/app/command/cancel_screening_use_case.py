from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.room.app.interface.i_room_repo import IRoomRepo
from src.service.room.app.room_lookup import get_room_or_fail
from src.service.room.domain.aggregate.room_aggregate import Room


class CancelScreeningUseCase:
    def __init__(self, *, room_repo: IRoomRepo) -> None:
        self.room_repo = room_repo

    @classmethod
    @inject
    def depends(cls, room_repo: IRoomRepo = Depends(Provide[Container.room_repo])) -> Self:
        return cls(room_repo=room_repo)

    @Logger.io
    async def execute(self, *, room_id: int, screening_uid: str) -> Room:
        room = await get_room_or_fail(self.room_repo, room_id)
        room.remove_screening(screening_uid).unwrap()
        saved = await self.room_repo.remove_screening(
            room_id=room_id, screening_uid=screening_uid
        )
        Logger.base.info(f'[ROOM] Cancelled screening {screening_uid} in room {room_id}')
        return saved
