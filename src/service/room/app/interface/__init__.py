"""Application layer interfaces (Ports)"""

from src.service.room.app.interface.i_room_repo import IRoomRepo

__all__ = ['IRoomRepo']
