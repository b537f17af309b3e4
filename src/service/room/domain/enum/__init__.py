"""Room Domain Enums"""

from src.service.room.domain.enum.booking_type import BookingType
from src.service.room.domain.enum.room_status import RoomStatus
from src.service.room.domain.enum.screen_type import ScreenType

__all__ = ['BookingType', 'RoomStatus', 'ScreenType']
