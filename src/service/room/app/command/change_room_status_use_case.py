from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.platform.result.failure import FailureCode
from src.platform.result.result import fail
from src.service.room.app.interface.i_room_repo import IRoomRepo
from src.service.room.app.room_lookup import get_room_or_fail
from src.service.room.domain.aggregate.room_aggregate import Room
from src.service.room.domain.enum.room_status import RoomStatus


class ChangeRoomStatusUseCase:
    """
    Change the administrative status of a room.

    A room that still has bookings ending in the future cannot be CLOSED;
    the aggregate itself allows every transition.
    """

    def __init__(self, *, room_repo: IRoomRepo) -> None:
        self.room_repo = room_repo

    @classmethod
    @inject
    def depends(cls, room_repo: IRoomRepo = Depends(Provide[Container.room_repo])) -> Self:
        return cls(room_repo=room_repo)

    @Logger.io
    async def execute(self, *, room_id: int, status: str) -> Room:
        room = await get_room_or_fail(self.room_repo, room_id)
        updated_room = room.change_status(status).unwrap()

        if updated_room is room:
            return room

        if updated_room.status == RoomStatus.CLOSED and room.has_future_bookings():
            fail(
                FailureCode.ROOM_HAS_FUTURE_BOOKINGS,
                room_id=room_id,
                status=updated_room.status.value,
            ).unwrap()

        # re-checked by the repository against the stored schedule
        saved = await self.room_repo.update(
            room_id=room_id,
            status=updated_room.status,
            forbid_future_bookings=updated_room.status == RoomStatus.CLOSED,
        )
        Logger.base.info(
            f'[ROOM] Room {room_id} status {room.status.value} -> {saved.status.value}'
        )
        return saved
