from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.room.app.interface.i_room_repo import IRoomRepo
from src.service.room.app.room_lookup import get_room_or_fail
from src.service.room.domain.value_object.seat import Seat


class GetRoomSeatsUseCase:
    def __init__(self, *, room_repo: IRoomRepo) -> None:
        self.room_repo = room_repo

    @classmethod
    @inject
    def depends(cls, room_repo: IRoomRepo = Depends(Provide[Container.room_repo])) -> Self:
        return cls(room_repo=room_repo)

    @Logger.io
    async def list_seats(self, *, room_id: int) -> List[List[Seat]]:
        room = await get_room_or_fail(self.room_repo, room_id)
        return room.get_all_seats()

    @Logger.io
    async def get_seat(self, *, room_id: int, row: int, column: str) -> Seat:
        room = await get_room_or_fail(self.room_repo, room_id)
        return room.get_seat(column, row).unwrap()
