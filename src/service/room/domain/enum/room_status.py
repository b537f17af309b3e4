"""
Room Status Enum - Domain Value Object

Administrative lifecycle state of a room. Any status may move to any other;
rules about when a move is allowed live in the application layer.
"""

from enum import StrEnum


class RoomStatus(StrEnum):
    AVAILABLE = 'AVAILABLE'
    RESERVED = 'RESERVED'
    CLOSED = 'CLOSED'
    MAINTENANCE = 'MAINTENANCE'
    CLEANING = 'CLEANING'
