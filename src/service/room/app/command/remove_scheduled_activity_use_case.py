from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.room.app.interface.i_room_repo import IRoomRepo
from src.service.room.app.room_lookup import get_room_or_fail
from src.service.room.domain.aggregate.room_aggregate import Room


class RemoveScheduledActivityUseCase:
    """Remove a future cleaning or maintenance slot that no screening depends on."""

    def __init__(self, *, room_repo: IRoomRepo) -> None:
        self.room_repo = room_repo

    @classmethod
    @inject
    def depends(cls, room_repo: IRoomRepo = Depends(Provide[Container.room_repo])) -> Self:
        return cls(room_repo=room_repo)

    @Logger.io
    async def execute(self, *, room_id: int, booking_uid: str) -> Room:
        room = await get_room_or_fail(self.room_repo, room_id)

        # Validates the removal rules; the write itself goes through the repository
        room.remove_scheduled_activity(booking_uid).unwrap()
        updated = await self.room_repo.delete_booking(room_id=room_id, booking_uid=booking_uid)

        Logger.base.info(f'[ROOM] Removed booking {booking_uid} from room {room_id}')
        return updated
