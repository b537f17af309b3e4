"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.room.app.command import (
    cancel_screening_use_case,
    change_room_status_use_case,
    create_room_use_case,
    delete_room_use_case,
    remove_scheduled_activity_use_case,
    schedule_room_activity_use_case,
    schedule_screening_use_case,
)
from src.service.room.app.query import (
    get_room_free_slots_use_case,
    get_room_seats_use_case,
    get_room_use_case,
)
from src.service.room.driving_adapter.http_controller import room_controller


WIRE_MODULES: list[ModuleType] = [
    create_room_use_case,
    change_room_status_use_case,
    delete_room_use_case,
    schedule_room_activity_use_case,
    remove_scheduled_activity_use_case,
    schedule_screening_use_case,
    cancel_screening_use_case,
    get_room_use_case,
    get_room_seats_use_case,
    get_room_free_slots_use_case,
    room_controller,
]
