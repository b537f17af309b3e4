from datetime import datetime
from typing import List, Optional

from pydantic import AwareDatetime, BaseModel, Field

from src.service.room.domain.aggregate.room_aggregate import Room
from src.service.room.domain.value_object.booking_slot import BookingSlot


class SeatRowConfigRequest(BaseModel):
    row_id: int
    last_column_letter: str
    preferential_letters: List[str] = Field(default_factory=list)


class ScreenRequest(BaseModel):
    size: int
    type: str


class RoomCreateRequest(BaseModel):
    identifier: int
    seat_config: List[SeatRowConfigRequest]
    screen: ScreenRequest
    status: Optional[str] = None

    class Config:
        json_schema_extra = {
            'example': {
                'identifier': 1,
                'seat_config': [
                    {'row_id': 1, 'last_column_letter': 'E', 'preferential_letters': ['A', 'B']},
                    {'row_id': 2, 'last_column_letter': 'F', 'preferential_letters': ['C']},
                    {'row_id': 3, 'last_column_letter': 'G', 'preferential_letters': []},
                    {'row_id': 4, 'last_column_letter': 'H', 'preferential_letters': []},
                ],
                'screen': {'size': 20, 'type': '2D_3D'},
                'status': 'AVAILABLE',
            }
        }


class RoomStatusUpdateRequest(BaseModel):
    status: str

    class Config:
        json_schema_extra = {'example': {'status': 'MAINTENANCE'}}


class ScheduleActivityRequest(BaseModel):
    activity_type: str
    start_in: AwareDatetime
    duration_minutes: int

    class Config:
        json_schema_extra = {
            'example': {
                'activity_type': 'CLEANING',
                'start_in': '2030-01-15T14:00:00+00:00',
                'duration_minutes': 45,
            }
        }


class ScheduleScreeningRequest(BaseModel):
    screening_uid: str
    start_time: AwareDatetime
    duration_minutes: int

    class Config:
        json_schema_extra = {
            'example': {
                'screening_uid': 'SCREENING_0190f1a2-7c3e-7b1a-9c55-1f2e3d4c5b6a',
                'start_time': '2030-01-15T18:00:00+00:00',
                'duration_minutes': 120,
            }
        }


class BookingResponse(BaseModel):
    booking_uid: str
    screening_uid: Optional[str] = None
    type: str
    start_time: datetime
    end_time: datetime

    @classmethod
    def from_slot(cls, slot: BookingSlot) -> 'BookingResponse':
        return cls(
            booking_uid=slot.booking_uid,
            screening_uid=slot.screening_uid,
            type=slot.type.value,
            start_time=slot.start_time,
            end_time=slot.end_time,
        )


class RowInfoResponse(BaseModel):
    row_number: int
    seats: int
    preferential_seats: List[str]


class SeatLayoutResponse(BaseModel):
    rows: int
    total_seats: int
    preferential_seats: int
    rows_info: List[RowInfoResponse]


class RoomResponse(BaseModel):
    room_uid: str
    identifier: int
    status: str
    screen_size: int
    screen_type: str
    total_seats_capacity: int
    preferential_seats_count: int
    seat_layout: SeatLayoutResponse
    bookings: List[BookingResponse]

    class Config:
        json_schema_extra = {
            'example': {
                'room_uid': 'ROOM_0190f1a2-7c3e-7b1a-9c55-1f2e3d4c5b6a',
                'identifier': 1,
                'status': 'AVAILABLE',
                'screen_size': 20,
                'screen_type': '2D_3D',
                'total_seats_capacity': 26,
                'preferential_seats_count': 3,
                'seat_layout': {
                    'rows': 4,
                    'total_seats': 26,
                    'preferential_seats': 3,
                    'rows_info': [
                        {'row_number': 1, 'seats': 5, 'preferential_seats': ['A', 'B']},
                    ],
                },
                'bookings': [],
            }
        }

    @classmethod
    def from_room(cls, room: Room) -> 'RoomResponse':
        return cls(
            room_uid=room.room_uid,
            identifier=room.identifier,
            status=room.status.value,
            screen_size=room.screen_size,
            screen_type=room.screen_type,
            total_seats_capacity=room.total_seats_capacity,
            preferential_seats_count=room.preferential_seats_count,
            seat_layout=SeatLayoutResponse(**room.seat_layout_info),
            bookings=[BookingResponse.from_slot(slot) for slot in room.get_all_bookings()],
        )


class SeatResponse(BaseModel):
    column: str
    row: int
    is_preferential: bool


class FreeSlotResponse(BaseModel):
    start_time: datetime
    end_time: datetime
    duration_minutes: float
