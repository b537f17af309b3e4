"""Business limits for rooms, seat layouts and schedules."""

from typing import Final


class SeatRowLimits:
    """Seats per row are addressed by the letters A-Z."""

    MIN_SEATS: Final[int] = 4
    MAX_SEATS: Final[int] = 26
    MAX_PREFERENTIAL_SEATS: Final[int] = 4


class SeatLayoutLimits:
    MIN_ROWS: Final[int] = 4
    MAX_ROWS: Final[int] = 20
    MIN_CAPACITY: Final[int] = 20
    MAX_CAPACITY: Final[int] = 250
    MIN_PREFERENTIAL_PERCENTAGE: Final[int] = 5
    MAX_PREFERENTIAL_PERCENTAGE: Final[int] = 20


class SeatLimits:
    MIN_ROW: Final[int] = 1
    MAX_ROW: Final[int] = 250


class RoomIdentifierLimits:
    MIN: Final[int] = 1
    MAX: Final[int] = 100


class ScreenLimits:
    """Screen size in meters."""

    MIN_SIZE: Final[int] = 10
    MAX_SIZE: Final[int] = 50


class ScreeningTimeDefaults:
    """Fixed slots written around every screening, in minutes."""

    ENTRY_TIME_MINUTES: Final[int] = 15
    EXIT_TIME_MINUTES: Final[int] = 15
    CLEANING_TIME_MINUTES: Final[int] = 30


class BookingDurationLimits:
    """Accepted requested durations per activity, in minutes."""

    SCREENING_MIN: Final[int] = 30
    SCREENING_MAX: Final[int] = 360
    CLEANING_MAX: Final[int] = 120
    MAINTENANCE_MAX: Final[int] = 3 * 24 * 60
