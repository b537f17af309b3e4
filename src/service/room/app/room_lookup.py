from src.platform.result.failure import FailureCode
from src.platform.result.result import fail
from src.service.room.app.interface.i_room_repo import IRoomRepo
from src.service.room.domain.aggregate.room_aggregate import Room


async def get_room_or_fail(room_repo: IRoomRepo, room_id: int) -> Room:
    """Load a room; a missing room raises DomainFailureError(RESOURCE_NOT_FOUND)."""
    room = await room_repo.find_by_id(room_id=room_id)
    if room is None:
        fail(FailureCode.RESOURCE_NOT_FOUND, resource='room', id=room_id).unwrap()
    return room
