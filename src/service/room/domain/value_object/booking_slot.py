from datetime import datetime
from typing import Any, Optional

import attrs
import uuid_utils

from src.platform.exception.exceptions import TechnicalError
from src.platform.result.failure import FailureCode, SimpleFailure
from src.platform.result.result import Result, failure, success
from src.service.room.domain.enum.booking_type import (
    SCREENING_BOUND_BOOKING_TYPES,
    BookingType,
)
from src.shared.domain.validators import RequiredValidators


def new_booking_uid() -> str:
    return str(uuid_utils.uuid7())


@attrs.define(frozen=True)
class BookingSlot:
    """
    A single occupation of a room over the half-open range ``[start_time, end_time)``.

    ``screening_uid`` is set for every slot written as part of a screening
    (entry, screening, exit, and the cleaning that follows).
    """

    booking_uid: str
    type: BookingType
    start_time: datetime
    end_time: datetime
    screening_uid: Optional[str] = None

    @classmethod
    def create(
        cls,
        screening_uid: Optional[str],
        start_time: datetime,
        end_time: datetime,
        type: BookingType,
    ) -> Result['BookingSlot']:
        failures = RequiredValidators.ensure_not_none(
            {'start_time': start_time, 'end_time': end_time, 'type': type}
        )
        if failures:
            return failure(failures)

        if end_time <= start_time:
            failures.append(
                SimpleFailure(
                    code=FailureCode.DATE_WITH_INVALID_SEQUENCE,
                    details={
                        'start_time': start_time.isoformat(),
                        'end_time': end_time.isoformat(),
                    },
                )
            )
        if type in SCREENING_BOUND_BOOKING_TYPES and not screening_uid:
            failures.extend(RequiredValidators.ensure_not_none({'screening_uid': None}))

        if failures:
            return failure(failures)
        return success(
            cls(
                booking_uid=new_booking_uid(),
                type=type,
                start_time=start_time,
                end_time=end_time,
                screening_uid=screening_uid,
            )
        )

    @classmethod
    def hydrate(
        cls,
        *,
        booking_uid: str,
        screening_uid: Optional[str],
        start_time: datetime,
        end_time: datetime,
        type: BookingType | str,
    ) -> 'BookingSlot':
        TechnicalError.validate_required_fields(
            {
                'booking_uid': booking_uid,
                'start_time': start_time,
                'end_time': end_time,
                'type': type,
            }
        )
        return cls(
            booking_uid=booking_uid,
            type=BookingType(type),
            start_time=start_time,
            end_time=end_time,
            screening_uid=screening_uid,
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'BookingSlot':
        return cls.hydrate(
            booking_uid=data.get('booking_uid'),  # type: ignore[arg-type]
            screening_uid=data.get('screening_uid'),
            start_time=data.get('start_time'),  # type: ignore[arg-type]
            end_time=data.get('end_time'),  # type: ignore[arg-type]
            type=data.get('type'),  # type: ignore[arg-type]
        )

    @property
    def duration_in_minutes(self) -> float:
        return (self.end_time - self.start_time).total_seconds() / 60

    def overlaps(self, start_time: datetime, end_time: datetime) -> bool:
        # touching ranges (end == start) do not overlap
        return start_time < self.end_time and self.start_time < end_time

    def to_dict(self) -> dict[str, Any]:
        return {
            'booking_uid': self.booking_uid,
            'screening_uid': self.screening_uid,
            'start_time': self.start_time,
            'end_time': self.end_time,
            'type': self.type.value,
        }
