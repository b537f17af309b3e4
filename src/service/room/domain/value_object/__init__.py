"""Room Domain Value Objects"""

from src.service.room.domain.value_object.booking_slot import BookingSlot
from src.service.room.domain.value_object.room_schedule import FreeSlot, RoomSchedule
from src.service.room.domain.value_object.screen import Screen
from src.service.room.domain.value_object.seat import Seat
from src.service.room.domain.value_object.seat_layout import SeatLayout, SeatRowConfig
from src.service.room.domain.value_object.seat_row import SeatRow

__all__ = [
    'BookingSlot',
    'FreeSlot',
    'RoomSchedule',
    'Screen',
    'Seat',
    'SeatLayout',
    'SeatRow',
    'SeatRowConfig',
]
