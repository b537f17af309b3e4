from datetime import datetime
from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.platform.result.failure import FailureCode
from src.platform.result.result import fail
from src.service.room.app.interface.i_room_repo import IRoomRepo
from src.service.room.app.room_lookup import get_room_or_fail
from src.service.room.domain.enum.booking_type import MANUAL_BOOKING_TYPES, BookingType
from src.service.room.domain.value_object.booking_slot import BookingSlot


class ScheduleRoomActivityUseCase:
    """
    Schedule a cleaning or a maintenance window in a room.

    Flow:
    1. Reject a start in the past
    2. Load the room (RESOURCE_NOT_FOUND if missing)
    3. Only CLEANING / MAINTENANCE may be scheduled here; screening-related
       slots are written by ScheduleScreeningUseCase
    4. Run the pure Room operation (conflict check on the loaded schedule)
    5. Persist the new slot; the repository re-checks for overlap atomically
    """

    def __init__(self, *, room_repo: IRoomRepo) -> None:
        self.room_repo = room_repo

    @classmethod
    @inject
    def depends(cls, room_repo: IRoomRepo = Depends(Provide[Container.room_repo])) -> Self:
        return cls(room_repo=room_repo)

    @Logger.io
    async def execute(
        self, *, room_id: int, activity_type: str, start_in: datetime, duration_minutes: float
    ) -> BookingSlot:
        if start_in < datetime.now(start_in.tzinfo):
            fail(
                FailureCode.DATE_CANNOT_BE_PAST, field='start_in', value=start_in.isoformat()
            ).unwrap()

        room = await get_room_or_fail(self.room_repo, room_id)

        normalized = activity_type.strip().upper()
        if normalized == BookingType.CLEANING:
            result = room.schedule_cleaning(start_in, duration_minutes)
        elif normalized == BookingType.MAINTENANCE:
            result = room.schedule_maintenance(start_in, duration_minutes)
        elif normalized in BookingType.__members__:
            fail(
                FailureCode.INVALID_BOOKING_TYPE_FOR_SCHEDULING,
                type=activity_type,
                allowed_types=sorted(t.value for t in MANUAL_BOOKING_TYPES),
            ).unwrap()
        else:
            fail(
                FailureCode.BOOKING_WITH_INVALID_ACTIVITY_TYPE,
                type=activity_type,
                allowed_types=sorted(t.value for t in MANUAL_BOOKING_TYPES),
            ).unwrap()

        updated_room = result.unwrap()
        (booking,) = updated_room.new_bookings_since(room)
        await self.room_repo.add_booking(room_id=room_id, booking=booking)

        Logger.base.info(
            f'[ROOM] Scheduled {booking.type.value} in room {room_id}: '
            f'{booking.start_time.isoformat()} -> {booking.end_time.isoformat()}'
        )
        return booking
