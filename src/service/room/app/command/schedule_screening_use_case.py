from datetime import datetime
from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.room.app.interface.i_room_repo import IRoomRepo
from src.service.room.app.room_lookup import get_room_or_fail
from src.service.room.domain.value_object.booking_slot import BookingSlot


class ScheduleScreeningUseCase:
    """
    Book a screening (entry, screening, exit, cleaning) in a room.

    Slots are persisted one by one; if the repository rejects one because a
    concurrent writer took the period, the slots already written for this
    screening are removed again before the error propagates.
    """

    def __init__(self, *, room_repo: IRoomRepo) -> None:
        self.room_repo = room_repo

    @classmethod
    @inject
    def depends(cls, room_repo: IRoomRepo = Depends(Provide[Container.room_repo])) -> Self:
        return cls(room_repo=room_repo)

    @Logger.io
    async def execute(
        self, *, room_id: int, screening_uid: str, start_time: datetime, duration_minutes: float
    ) -> List[BookingSlot]:
        room = await get_room_or_fail(self.room_repo, room_id)
        updated_room = room.add_screening(screening_uid, start_time, duration_minutes).unwrap()
        new_slots = updated_room.new_bookings_since(room)

        written: List[BookingSlot] = []
        try:
            for slot in new_slots:
                await self.room_repo.add_booking(room_id=room_id, booking=slot)
                written.append(slot)
        except Exception:
            for slot in written:
                await self.room_repo.delete_booking(room_id=room_id, booking_uid=slot.booking_uid)
            raise

        Logger.base.info(
            f'[ROOM] Screening {screening_uid} booked in room {room_id} '
            f'({len(new_slots)} slots from {start_time.isoformat()})'
        )
        return new_slots
