"""
Room Repository Interface

Persistence boundary for the Room aggregate. Domain objects never call it;
use cases load a Room, run a pure operation on it and write the outcome back.
"""

from abc import ABC, abstractmethod
from typing import List

from src.service.room.domain.aggregate.room_aggregate import Room
from src.service.room.domain.enum.room_status import RoomStatus
from src.service.room.domain.value_object.booking_slot import BookingSlot


class IRoomRepo(ABC):
    """
    Repository interface for rooms.

    Every write acts on the stored room inside one atomic step. ``add_booking``
    re-checks overlap there, so two writers that validated against the same
    stale snapshot cannot both succeed, and no write replaces the schedule
    with a caller's copy.
    """

    @abstractmethod
    async def room_exists(self, *, room_id: int) -> bool:
        pass

    @abstractmethod
    async def find_by_id(self, *, room_id: int) -> Room | None:
        """
        Args:
            room_id: Room identifier (1-100)

        Returns:
            Room aggregate or None if not found
        """
        pass

    @abstractmethod
    async def list_all(self) -> List[Room]:
        pass

    @abstractmethod
    async def create(self, *, room: Room) -> Room:
        pass

    @abstractmethod
    async def update(
        self, *, room_id: int, status: RoomStatus, forbid_future_bookings: bool = False
    ) -> Room:
        """
        Write the status of a stored room; its schedule is left as stored.

        Raises:
            NotFoundError: room does not exist
            DomainFailureError: ROOM_HAS_FUTURE_BOOKINGS when
                ``forbid_future_bookings`` is set and the stored schedule
                still has bookings ending after now
        """
        pass

    @abstractmethod
    async def delete(self, *, room_id: int, forbid_future_bookings: bool = False) -> bool:
        """Same future-bookings guard as ``update``, checked against the stored room."""
        pass

    @abstractmethod
    async def remove_screening(self, *, room_id: int, screening_uid: str) -> Room:
        """
        Drop every slot of a screening from the stored schedule in one write.

        Raises:
            NotFoundError: room does not exist
            DomainFailureError: BOOKING_NOT_FOUND_FOR_SCREENING
        """
        pass

    @abstractmethod
    async def add_booking(self, *, room_id: int, booking: BookingSlot) -> Room:
        """
        Append one booking to the stored schedule.

        Raises:
            NotFoundError: room does not exist
            ConflictError: booking overlaps the stored schedule
        """
        pass

    @abstractmethod
    async def delete_booking(self, *, room_id: int, booking_uid: str) -> Room:
        pass
