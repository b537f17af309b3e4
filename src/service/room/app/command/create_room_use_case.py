from typing import Any, Mapping, Optional, Self, Sequence

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.platform.result.failure import FailureCode
from src.platform.result.result import fail
from src.service.room.app.interface.i_room_repo import IRoomRepo
from src.service.room.domain.aggregate.room_aggregate import Room


class CreateRoomUseCase:
    def __init__(self, *, room_repo: IRoomRepo) -> None:
        self.room_repo = room_repo

    @classmethod
    @inject
    def depends(cls, room_repo: IRoomRepo = Depends(Provide[Container.room_repo])) -> Self:
        return cls(room_repo=room_repo)

    @Logger.io
    async def execute(
        self,
        *,
        identifier: int,
        seat_config: Sequence[Mapping[str, Any]],
        screen: Mapping[str, Any],
        status: Optional[str] = None,
    ) -> Room:
        if await self.room_repo.room_exists(room_id=identifier):
            fail(FailureCode.RESOURCE_ALREADY_EXISTS, resource='room', id=identifier).unwrap()

        room = Room.create(
            identifier=identifier,
            seat_config=seat_config,
            screen=screen,
            status=status,
        ).unwrap()

        created = await self.room_repo.create(room=room)
        Logger.base.info(
            f'[ROOM] Created room {created.identifier} '
            f'({created.total_seats_capacity} seats, screen {created.screen_type})'
        )
        return created
