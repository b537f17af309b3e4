from datetime import date
from typing import List

from fastapi import APIRouter, Depends, Query, status

from src.platform.logging.loguru_io import Logger
from src.service.room.app.command.cancel_screening_use_case import CancelScreeningUseCase
from src.service.room.app.command.change_room_status_use_case import ChangeRoomStatusUseCase
from src.service.room.app.command.create_room_use_case import CreateRoomUseCase
from src.service.room.app.command.delete_room_use_case import DeleteRoomUseCase
from src.service.room.app.command.remove_scheduled_activity_use_case import (
    RemoveScheduledActivityUseCase,
)
from src.service.room.app.command.schedule_room_activity_use_case import (
    ScheduleRoomActivityUseCase,
)
from src.service.room.app.command.schedule_screening_use_case import ScheduleScreeningUseCase
from src.service.room.app.query.get_room_free_slots_use_case import GetRoomFreeSlotsUseCase
from src.service.room.app.query.get_room_seats_use_case import GetRoomSeatsUseCase
from src.service.room.app.query.get_room_use_case import GetRoomUseCase
from src.service.room.driving_adapter.schema.room_schema import (
    BookingResponse,
    FreeSlotResponse,
    RoomCreateRequest,
    RoomResponse,
    RoomStatusUpdateRequest,
    ScheduleActivityRequest,
    ScheduleScreeningRequest,
    SeatResponse,
)


router = APIRouter()


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_room(
    request: RoomCreateRequest,
    use_case: CreateRoomUseCase = Depends(CreateRoomUseCase.depends),
) -> RoomResponse:
    room = await use_case.execute(
        identifier=request.identifier,
        seat_config=[row.model_dump() for row in request.seat_config],
        screen=request.screen.model_dump(),
        status=request.status,
    )
    return RoomResponse.from_room(room)


@router.get('', status_code=status.HTTP_200_OK)
@Logger.io
async def list_rooms(
    use_case: GetRoomUseCase = Depends(GetRoomUseCase.depends),
) -> List[RoomResponse]:
    return [RoomResponse.from_room(room) for room in await use_case.list_all()]


@router.get('/{room_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def get_room(
    room_id: int,
    use_case: GetRoomUseCase = Depends(GetRoomUseCase.depends),
) -> RoomResponse:
    room = await use_case.get_by_id(room_id=room_id)
    return RoomResponse.from_room(room)


@router.delete('/{room_id}', status_code=status.HTTP_204_NO_CONTENT)
@Logger.io
async def delete_room(
    room_id: int,
    use_case: DeleteRoomUseCase = Depends(DeleteRoomUseCase.depends),
) -> None:
    await use_case.execute(room_id=room_id)


@router.patch('/{room_id}/status', status_code=status.HTTP_200_OK)
@Logger.io
async def change_room_status(
    room_id: int,
    request: RoomStatusUpdateRequest,
    use_case: ChangeRoomStatusUseCase = Depends(ChangeRoomStatusUseCase.depends),
) -> RoomResponse:
    room = await use_case.execute(room_id=room_id, status=request.status)
    return RoomResponse.from_room(room)


# ============================ Seat Endpoints ============================


@router.get('/{room_id}/seats', status_code=status.HTTP_200_OK)
@Logger.io
async def list_room_seats(
    room_id: int,
    use_case: GetRoomSeatsUseCase = Depends(GetRoomSeatsUseCase.depends),
) -> List[List[SeatResponse]]:
    seats = await use_case.list_seats(room_id=room_id)
    return [
        [
            SeatResponse(column=seat.column, row=seat.row, is_preferential=seat.is_preferential)
            for seat in row
        ]
        for row in seats
    ]


@router.get('/{room_id}/seats/{row}/{column}', status_code=status.HTTP_200_OK)
@Logger.io
async def get_room_seat(
    room_id: int,
    row: int,
    column: str,
    use_case: GetRoomSeatsUseCase = Depends(GetRoomSeatsUseCase.depends),
) -> SeatResponse:
    seat = await use_case.get_seat(room_id=room_id, row=row, column=column)
    return SeatResponse(column=seat.column, row=seat.row, is_preferential=seat.is_preferential)


# ============================ Schedule Endpoints ============================


@router.post('/{room_id}/schedule', status_code=status.HTTP_201_CREATED)
@Logger.io
async def schedule_activity(
    room_id: int,
    request: ScheduleActivityRequest,
    use_case: ScheduleRoomActivityUseCase = Depends(ScheduleRoomActivityUseCase.depends),
) -> BookingResponse:
    booking = await use_case.execute(
        room_id=room_id,
        activity_type=request.activity_type,
        start_in=request.start_in,
        duration_minutes=request.duration_minutes,
    )
    return BookingResponse.from_slot(booking)


@router.delete('/{room_id}/schedule/{booking_uid}', status_code=status.HTTP_204_NO_CONTENT)
@Logger.io
async def remove_scheduled_activity(
    room_id: int,
    booking_uid: str,
    use_case: RemoveScheduledActivityUseCase = Depends(RemoveScheduledActivityUseCase.depends),
) -> None:
    await use_case.execute(room_id=room_id, booking_uid=booking_uid)


@router.post('/{room_id}/screening', status_code=status.HTTP_201_CREATED)
@Logger.io
async def schedule_screening(
    room_id: int,
    request: ScheduleScreeningRequest,
    use_case: ScheduleScreeningUseCase = Depends(ScheduleScreeningUseCase.depends),
) -> List[BookingResponse]:
    slots = await use_case.execute(
        room_id=room_id,
        screening_uid=request.screening_uid,
        start_time=request.start_time,
        duration_minutes=request.duration_minutes,
    )
    return [BookingResponse.from_slot(slot) for slot in slots]


@router.delete('/{room_id}/screening/{screening_uid}', status_code=status.HTTP_204_NO_CONTENT)
@Logger.io
async def cancel_screening(
    room_id: int,
    screening_uid: str,
    use_case: CancelScreeningUseCase = Depends(CancelScreeningUseCase.depends),
) -> None:
    await use_case.execute(room_id=room_id, screening_uid=screening_uid)


@router.get('/{room_id}/free-slots', status_code=status.HTTP_200_OK)
@Logger.io
async def get_free_slots(
    room_id: int,
    day: date = Query(alias='date'),
    min_minutes: int = Query(default=30, gt=0),
    use_case: GetRoomFreeSlotsUseCase = Depends(GetRoomFreeSlotsUseCase.depends),
) -> List[FreeSlotResponse]:
    slots = await use_case.execute(room_id=room_id, day=day, min_minutes=min_minutes)
    return [
        FreeSlotResponse(
            start_time=slot.start_time,
            end_time=slot.end_time,
            duration_minutes=slot.duration_in_minutes,
        )
        for slot in slots
    ]
