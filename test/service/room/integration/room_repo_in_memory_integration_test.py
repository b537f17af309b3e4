"""
Integration tests for RoomRepoInMemoryImpl

The repository closes the stale-snapshot races: two writers that validated
against the same schedule cannot both persist overlapping bookings, and a
status change, screening cancellation or deletion never drops a booking that
was stored after the use case read the room.
"""

from datetime import datetime, timedelta
from functools import partial
from typing import Any

import anyio
import pytest

from src.platform.exception.exceptions import ConflictError, DomainFailureError, NotFoundError
from src.platform.result.failure import FailureCode
from src.service.room.app.command.cancel_screening_use_case import CancelScreeningUseCase
from src.service.room.app.command.change_room_status_use_case import ChangeRoomStatusUseCase
from src.service.room.app.command.delete_room_use_case import DeleteRoomUseCase
from src.service.room.app.command.schedule_room_activity_use_case import (
    ScheduleRoomActivityUseCase,
)
from src.service.room.domain.aggregate.room_aggregate import Room
from src.service.room.domain.enum.room_status import RoomStatus
from src.service.room.domain.value_object.booking_slot import BookingSlot
from src.service.room.driven_adapter.repo.room_repo_in_memory_impl import RoomRepoInMemoryImpl


pytestmark = pytest.mark.integration


class TestRoomRepoInMemory:
    @pytest.mark.asyncio
    async def test_create_and_find(self, room_repo: RoomRepoInMemoryImpl, room: Room) -> None:
        await room_repo.create(room=room)

        assert await room_repo.room_exists(room_id=1)
        assert await room_repo.find_by_id(room_id=1) == room
        assert await room_repo.find_by_id(room_id=2) is None
        assert await room_repo.list_all() == [room]

    @pytest.mark.asyncio
    async def test_create_twice(self, room_repo: RoomRepoInMemoryImpl, room: Room) -> None:
        await room_repo.create(room=room)

        with pytest.raises(ConflictError):
            await room_repo.create(room=room)

    @pytest.mark.asyncio
    async def test_update_writes_status_only(
        self, room_repo: RoomRepoInMemoryImpl, room: Room, future_start: datetime
    ) -> None:
        await room_repo.create(room=room.schedule_cleaning(future_start, 30).unwrap())

        updated = await room_repo.update(room_id=1, status=RoomStatus.CLEANING)

        assert updated.status == RoomStatus.CLEANING
        assert updated.layout == room.layout
        assert len(updated.get_all_bookings()) == 1

    @pytest.mark.asyncio
    async def test_update_unknown_room(self, room_repo: RoomRepoInMemoryImpl) -> None:
        with pytest.raises(NotFoundError):
            await room_repo.update(room_id=1, status=RoomStatus.CLOSED)

    @pytest.mark.asyncio
    async def test_update_refuses_close_with_stored_future_bookings(
        self, room_repo: RoomRepoInMemoryImpl, room: Room, future_start: datetime
    ) -> None:
        await room_repo.create(room=room.schedule_cleaning(future_start, 30).unwrap())

        with pytest.raises(DomainFailureError) as exc_info:
            await room_repo.update(
                room_id=1, status=RoomStatus.CLOSED, forbid_future_bookings=True
            )

        assert exc_info.value.failures[0].code == FailureCode.ROOM_HAS_FUTURE_BOOKINGS
        stored = await room_repo.find_by_id(room_id=1)
        assert stored is not None
        assert stored.status == RoomStatus.AVAILABLE

    @pytest.mark.asyncio
    async def test_delete(self, room_repo: RoomRepoInMemoryImpl, room: Room) -> None:
        await room_repo.create(room=room)

        assert await room_repo.delete(room_id=1, forbid_future_bookings=True) is True
        assert await room_repo.delete(room_id=1) is False

    @pytest.mark.asyncio
    async def test_delete_refuses_room_with_stored_future_bookings(
        self, room_repo: RoomRepoInMemoryImpl, room: Room, future_start: datetime
    ) -> None:
        await room_repo.create(room=room.schedule_cleaning(future_start, 30).unwrap())

        with pytest.raises(DomainFailureError):
            await room_repo.delete(room_id=1, forbid_future_bookings=True)

        assert await room_repo.room_exists(room_id=1)

    @pytest.mark.asyncio
    async def test_remove_screening(
        self, room_repo: RoomRepoInMemoryImpl, room: Room, future_start: datetime
    ) -> None:
        await room_repo.create(room=room.add_screening('scr-1', future_start, 90).unwrap())

        emptied = await room_repo.remove_screening(room_id=1, screening_uid='scr-1')

        assert emptied.get_all_bookings() == []
        with pytest.raises(DomainFailureError):
            await room_repo.remove_screening(room_id=1, screening_uid='scr-1')

    @pytest.mark.asyncio
    async def test_add_and_delete_booking(
        self, room_repo: RoomRepoInMemoryImpl, room: Room, future_start: datetime
    ) -> None:
        await room_repo.create(room=room)
        (booking,) = room.schedule_cleaning(future_start, 30).unwrap().get_all_bookings()

        stored = await room_repo.add_booking(room_id=1, booking=booking)
        assert stored.get_all_bookings() == [booking]

        emptied = await room_repo.delete_booking(room_id=1, booking_uid=booking.booking_uid)
        assert emptied.get_all_bookings() == []

        with pytest.raises(NotFoundError):
            await room_repo.delete_booking(room_id=1, booking_uid=booking.booking_uid)

    @pytest.mark.asyncio
    async def test_stale_snapshots_cannot_both_be_written(
        self, room_repo: RoomRepoInMemoryImpl, room: Room, future_start: datetime
    ) -> None:
        # Given: two writers validated overlapping activities against the same empty room
        await room_repo.create(room=room)
        snapshot = await room_repo.find_by_id(room_id=1)
        assert snapshot is not None
        (cleaning,) = snapshot.schedule_cleaning(future_start, 60).unwrap().get_all_bookings()
        (maintenance,) = (
            snapshot.schedule_maintenance(future_start + timedelta(minutes=30), 60)
            .unwrap()
            .get_all_bookings()
        )

        outcomes: list[str] = []

        async def write(booking_slot: BookingSlot) -> None:
            try:
                await room_repo.add_booking(room_id=1, booking=booking_slot)
                outcomes.append('ok')
            except ConflictError:
                outcomes.append('conflict')

        # When: both writes race
        async with anyio.create_task_group() as tg:
            tg.start_soon(write, cleaning)
            tg.start_soon(write, maintenance)

        # Then: exactly one wins
        assert sorted(outcomes) == ['conflict', 'ok']
        stored = await room_repo.find_by_id(room_id=1)
        assert stored is not None
        assert len(stored.get_all_bookings()) == 1


class SlowFirstReadRoomRepo(RoomRepoInMemoryImpl):
    """The first read yields to other tasks after taking its snapshot, like a storage round trip."""

    def __init__(self) -> None:
        super().__init__()
        self._reads = 0

    async def find_by_id(self, *, room_id: int) -> Room | None:
        self._reads += 1
        room = await super().find_by_id(room_id=room_id)
        if self._reads == 1:
            await anyio.sleep(0.05)
        return room


class TestWritesAfterStaleRead:
    def setup_method(self) -> None:
        self.room_repo = SlowFirstReadRoomRepo()
        self.schedule_activity = ScheduleRoomActivityUseCase(room_repo=self.room_repo)
        self.failures: list[FailureCode] = []

    async def _schedule_cleaning(self, start: datetime) -> None:
        await self.schedule_activity.execute(
            room_id=1, activity_type='CLEANING', start_in=start, duration_minutes=30
        )

    async def _capture_failure(self, call: Any) -> None:
        try:
            await call()
        except DomainFailureError as e:
            self.failures.extend(item.code for item in e.failures)

    async def _stored(self) -> Room:
        stored = await self.room_repo.find_by_id(room_id=1)
        assert stored is not None
        return stored

    @pytest.mark.asyncio
    async def test_status_change_keeps_booking_written_meanwhile(
        self, room: Room, future_start: datetime
    ) -> None:
        # Given: the status change reads the empty room first and stalls
        await self.room_repo.create(room=room)
        change_status = ChangeRoomStatusUseCase(room_repo=self.room_repo)

        # When: a cleaning is booked while the status change is in flight
        async with anyio.create_task_group() as tg:
            tg.start_soon(partial(change_status.execute, room_id=1, status='MAINTENANCE'))
            tg.start_soon(self._schedule_cleaning, future_start)

        # Then: both writes are kept
        stored = await self._stored()
        assert stored.status == RoomStatus.MAINTENANCE
        assert len(stored.get_all_bookings()) == 1

    @pytest.mark.asyncio
    async def test_close_is_refused_when_booking_lands_after_check(
        self, room: Room, future_start: datetime
    ) -> None:
        await self.room_repo.create(room=room)
        change_status = ChangeRoomStatusUseCase(room_repo=self.room_repo)

        async with anyio.create_task_group() as tg:
            tg.start_soon(
                self._capture_failure, partial(change_status.execute, room_id=1, status='CLOSED')
            )
            tg.start_soon(self._schedule_cleaning, future_start)

        assert self.failures == [FailureCode.ROOM_HAS_FUTURE_BOOKINGS]
        stored = await self._stored()
        assert stored.status == RoomStatus.AVAILABLE
        assert len(stored.get_all_bookings()) == 1

    @pytest.mark.asyncio
    async def test_cancel_screening_keeps_booking_written_meanwhile(
        self, room: Room, future_start: datetime
    ) -> None:
        await self.room_repo.create(room=room.add_screening('scr-1', future_start, 90).unwrap())
        cancel = CancelScreeningUseCase(room_repo=self.room_repo)
        later = future_start + timedelta(hours=5)

        async with anyio.create_task_group() as tg:
            tg.start_soon(partial(cancel.execute, room_id=1, screening_uid='scr-1'))
            tg.start_soon(self._schedule_cleaning, later)

        (kept,) = (await self._stored()).get_all_bookings()
        assert kept.start_time == later
        assert kept.screening_uid is None

    @pytest.mark.asyncio
    async def test_delete_is_refused_when_booking_lands_after_check(
        self, room: Room, future_start: datetime
    ) -> None:
        await self.room_repo.create(room=room)
        delete_room = DeleteRoomUseCase(room_repo=self.room_repo)

        async with anyio.create_task_group() as tg:
            tg.start_soon(self._capture_failure, partial(delete_room.execute, room_id=1))
            tg.start_soon(self._schedule_cleaning, future_start)

        assert self.failures == [FailureCode.ROOM_HAS_FUTURE_BOOKINGS]
        assert len((await self._stored()).get_all_bookings()) == 1
