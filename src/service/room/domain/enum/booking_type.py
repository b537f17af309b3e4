"""
Booking Type Enum - Domain Value Object

Kinds of activity a room schedule can hold.
"""

from enum import StrEnum


class BookingType(StrEnum):
    SCREENING = 'SCREENING'
    CLEANING = 'CLEANING'
    MAINTENANCE = 'MAINTENANCE'
    ENTRY_TIME = 'ENTRY_TIME'
    EXIT_TIME = 'EXIT_TIME'


# Only these can be scheduled or removed directly; the others belong to a screening
MANUAL_BOOKING_TYPES: frozenset[BookingType] = frozenset(
    {BookingType.CLEANING, BookingType.MAINTENANCE}
)

# A slot of these types cannot exist without the screening it serves
SCREENING_BOUND_BOOKING_TYPES: frozenset[BookingType] = frozenset(
    {BookingType.SCREENING, BookingType.ENTRY_TIME, BookingType.EXIT_TIME}
)
