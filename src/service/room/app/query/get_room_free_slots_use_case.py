from datetime import date
from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.room.app.interface.i_room_repo import IRoomRepo
from src.service.room.app.room_lookup import get_room_or_fail
from src.service.room.domain.value_object.room_schedule import FreeSlot


class GetRoomFreeSlotsUseCase:
    def __init__(self, *, room_repo: IRoomRepo) -> None:
        self.room_repo = room_repo

    @classmethod
    @inject
    def depends(cls, room_repo: IRoomRepo = Depends(Provide[Container.room_repo])) -> Self:
        return cls(room_repo=room_repo)

    @Logger.io
    async def execute(self, *, room_id: int, day: date, min_minutes: int) -> List[FreeSlot]:
        room = await get_room_or_fail(self.room_repo, room_id)
        bookings = room.get_all_bookings()
        # Operating hours are read in the timezone the bookings were stored with
        tz = bookings[0].start_time.tzinfo if bookings else None
        return room.get_free_slots_for_date(day, min_minutes, tz=tz)
