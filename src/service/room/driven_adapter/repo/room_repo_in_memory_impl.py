"""
In-memory Room Repository Implementation

Process-local storage for Room aggregates.

Concurrency:
- Rooms are immutable values, a write swaps the stored value
- Every write runs under one anyio.Lock
- add_booking re-checks the stored schedule inside the lock, so two requests
  that validated against the same snapshot cannot both be written
- update, delete and remove_screening act on the stored room, never on the
  caller's snapshot, so bookings written in between are kept
"""

from typing import Dict, List

import anyio
import attrs

from src.platform.exception.exceptions import ConflictError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.platform.result.failure import FailureCode
from src.platform.result.result import fail
from src.service.room.app.interface.i_room_repo import IRoomRepo
from src.service.room.domain.aggregate.room_aggregate import Room
from src.service.room.domain.enum.room_status import RoomStatus
from src.service.room.domain.value_object.booking_slot import BookingSlot


class RoomRepoInMemoryImpl(IRoomRepo):
    def __init__(self) -> None:
        self._rooms: Dict[int, Room] = {}
        self._lock = anyio.Lock()

    def _get_or_raise(self, room_id: int) -> Room:
        room = self._rooms.get(room_id)
        if room is None:
            raise NotFoundError(f'Room not found: {room_id}')
        return room

    @Logger.io
    async def room_exists(self, *, room_id: int) -> bool:
        return room_id in self._rooms

    @Logger.io
    async def find_by_id(self, *, room_id: int) -> Room | None:
        return self._rooms.get(room_id)

    @Logger.io
    async def list_all(self) -> List[Room]:
        return [self._rooms[room_id] for room_id in sorted(self._rooms)]

    @Logger.io
    async def create(self, *, room: Room) -> Room:
        async with self._lock:
            if room.identifier in self._rooms:
                raise ConflictError(f'Room already exists: {room.identifier}')
            self._rooms[room.identifier] = room
        Logger.base.info(f'[ROOM-REPO] Created room {room.identifier} ({room.room_uid})')
        return room

    @staticmethod
    def _ensure_no_future_bookings(room_id: int, stored: Room) -> None:
        if stored.has_future_bookings():
            fail(FailureCode.ROOM_HAS_FUTURE_BOOKINGS, room_id=room_id).unwrap()

    @Logger.io
    async def update(
        self, *, room_id: int, status: RoomStatus, forbid_future_bookings: bool = False
    ) -> Room:
        async with self._lock:
            stored = self._get_or_raise(room_id)
            if forbid_future_bookings:
                self._ensure_no_future_bookings(room_id, stored)
            updated = attrs.evolve(stored, status=status)
            self._rooms[room_id] = updated
        return updated

    @Logger.io
    async def delete(self, *, room_id: int, forbid_future_bookings: bool = False) -> bool:
        async with self._lock:
            stored = self._rooms.get(room_id)
            if stored is None:
                return False
            if forbid_future_bookings:
                self._ensure_no_future_bookings(room_id, stored)
            del self._rooms[room_id]
        return True

    @Logger.io
    async def remove_screening(self, *, room_id: int, screening_uid: str) -> Room:
        async with self._lock:
            stored = self._get_or_raise(room_id)
            updated = stored.remove_screening(screening_uid).unwrap()
            self._rooms[room_id] = updated
        return updated

    @Logger.io
    async def add_booking(self, *, room_id: int, booking: BookingSlot) -> Room:
        async with self._lock:
            stored = self._get_or_raise(room_id)
            result = stored.schedule.add_slot(booking)
            if result.is_failure():
                raise ConflictError(
                    f'Booking {booking.booking_uid} overlaps the schedule of room {room_id}'
                )
            updated = attrs.evolve(stored, schedule=result.value)
            self._rooms[room_id] = updated
        Logger.base.info(
            f'[ROOM-REPO] Room {room_id} booked {booking.type.value} '
            f'{booking.start_time.isoformat()} -> {booking.end_time.isoformat()}'
        )
        return updated

    @Logger.io
    async def delete_booking(self, *, room_id: int, booking_uid: str) -> Room:
        async with self._lock:
            stored = self._get_or_raise(room_id)
            result = stored.remove_booking_by_uid(booking_uid)
            if result.is_failure():
                raise NotFoundError(f'Booking not found in room {room_id}: {booking_uid}')
            self._rooms[room_id] = result.value
        return result.value
