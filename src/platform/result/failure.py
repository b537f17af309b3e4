from enum import StrEnum
from typing import Any, Iterable

import attrs


class FailureCode(StrEnum):
    # Generic input
    MISSING_REQUIRED_DATA = 'MISSING_REQUIRED_DATA'
    VALUE_NOT_INTEGER = 'VALUE_NOT_INTEGER'
    VALUE_OUT_OF_RANGE = 'VALUE_OUT_OF_RANGE'
    INVALID_ENUM_VALUE = 'INVALID_ENUM_VALUE'
    ARRAY_LENGTH_OUT_OF_RANGE = 'ARRAY_LENGTH_OUT_OF_RANGE'
    DATE_CANNOT_BE_PAST = 'DATE_CANNOT_BE_PAST'
    DATE_WITH_INVALID_SEQUENCE = 'DATE_WITH_INVALID_SEQUENCE'
    INVALID_DURATION = 'INVALID_DURATION'

    # Resources
    RESOURCE_NOT_FOUND = 'RESOURCE_NOT_FOUND'
    RESOURCE_ALREADY_EXISTS = 'RESOURCE_ALREADY_EXISTS'

    # Seat layout
    INVALID_SEAT_COLUMN = 'INVALID_SEAT_COLUMN'
    INVALID_SEAT_ROW = 'INVALID_SEAT_ROW'
    SEAT_COLUMN_OUT_OF_RANGE = 'SEAT_COLUMN_OUT_OF_RANGE'
    PREFERENTIAL_SEATS_LIMIT_EXCEEDED = 'PREFERENTIAL_SEATS_LIMIT_EXCEEDED'
    PREFERENTIAL_SEAT_NOT_IN_ROW = 'PREFERENTIAL_SEAT_NOT_IN_ROW'
    DUPLICATE_PREFERENTIAL_SEAT = 'DUPLICATE_PREFERENTIAL_SEAT'
    DUPLICATE_SEAT_ROW = 'DUPLICATE_SEAT_ROW'
    INVALID_SEAT_ROW_SEQUENCE = 'INVALID_SEAT_ROW_SEQUENCE'
    INVALID_ROOM_CAPACITY = 'INVALID_ROOM_CAPACITY'
    INVALID_NUMBER_OF_PREFERENTIAL_SEATS = 'INVALID_NUMBER_OF_PREFERENTIAL_SEATS'

    # Schedule
    ROOM_NOT_AVAILABLE_FOR_PERIOD = 'ROOM_NOT_AVAILABLE_FOR_PERIOD'
    ROOM_HAS_FUTURE_BOOKINGS = 'ROOM_HAS_FUTURE_BOOKINGS'
    INVALID_SCREENING_DURATION = 'INVALID_SCREENING_DURATION'
    INVALID_CLEANING_DURATION = 'INVALID_CLEANING_DURATION'
    INVALID_MAINTENANCE_DURATION = 'INVALID_MAINTENANCE_DURATION'
    BOOKING_NOT_FOUND_IN_ROOM = 'BOOKING_NOT_FOUND_IN_ROOM'
    BOOKING_NOT_FOUND_FOR_SCREENING = 'BOOKING_NOT_FOUND_FOR_SCREENING'
    BOOKING_NOT_FOUND_IN_FUTURE_SCHEDULE = 'BOOKING_NOT_FOUND_IN_FUTURE_SCHEDULE'
    BOOKING_ALREADY_STARTED = 'BOOKING_ALREADY_STARTED'
    INVALID_BOOKING_TYPE_FOR_REMOVAL = 'INVALID_BOOKING_TYPE_FOR_REMOVAL'
    INVALID_BOOKING_TYPE_FOR_SCHEDULING = 'INVALID_BOOKING_TYPE_FOR_SCHEDULING'
    BOOKING_WITH_INVALID_ACTIVITY_TYPE = 'BOOKING_WITH_INVALID_ACTIVITY_TYPE'
    CLEANING_ASSOCIATED_WITH_SCREENING = 'CLEANING_ASSOCIATED_WITH_SCREENING'


# HTTP status for a failed Result, decided by its first failure code
FAILURE_STATUS_CODES: dict[FailureCode, int] = {
    FailureCode.RESOURCE_NOT_FOUND: 404,
    FailureCode.RESOURCE_ALREADY_EXISTS: 409,
    FailureCode.ROOM_NOT_AVAILABLE_FOR_PERIOD: 409,
    FailureCode.ROOM_HAS_FUTURE_BOOKINGS: 409,
}


@attrs.define(frozen=True)
class SimpleFailure:
    code: FailureCode
    details: dict[str, Any] = attrs.field(factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {'code': self.code.value, 'details': self.details}


def status_code_for(failures: Iterable[SimpleFailure]) -> int:
    for item in failures:
        return FAILURE_STATUS_CODES.get(item.code, 400)
    return 400
