from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.platform.result.failure import FailureCode
from src.platform.result.result import fail
from src.service.room.app.interface.i_room_repo import IRoomRepo
from src.service.room.app.room_lookup import get_room_or_fail


class DeleteRoomUseCase:
    def __init__(self, *, room_repo: IRoomRepo) -> None:
        self.room_repo = room_repo

    @classmethod
    @inject
    def depends(cls, room_repo: IRoomRepo = Depends(Provide[Container.room_repo])) -> Self:
        return cls(room_repo=room_repo)

    @Logger.io
    async def execute(self, *, room_id: int) -> None:
        room = await get_room_or_fail(self.room_repo, room_id)
        if room.has_future_bookings():
            fail(FailureCode.ROOM_HAS_FUTURE_BOOKINGS, room_id=room_id).unwrap()

        await self.room_repo.delete(room_id=room_id, forbid_future_bookings=True)
        Logger.base.info(f'[ROOM] Deleted room {room_id}')
