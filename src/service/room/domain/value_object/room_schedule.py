from datetime import date, datetime, time, timedelta, tzinfo
from typing import Any, Iterable, Mapping, Optional

import attrs

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import TechnicalError
from src.platform.result.failure import FailureCode, SimpleFailure
from src.platform.result.result import Result, failure, success
from src.service.room.domain.enum.booking_type import MANUAL_BOOKING_TYPES, BookingType
from src.service.room.domain.value_object.booking_slot import BookingSlot
from src.shared.domain.validators import RequiredValidators


def _sorted_by_start(bookings: Iterable[BookingSlot]) -> tuple[BookingSlot, ...]:
    return tuple(sorted(bookings, key=lambda booking: booking.start_time))


def _align(moment: datetime, step: timedelta, *, up: bool) -> datetime:
    """Snap ``moment`` onto the ``step`` grid counted from its own midnight."""
    midnight = moment.replace(hour=0, minute=0, second=0, microsecond=0)
    steps = -((midnight - moment) // step) if up else (moment - midnight) // step
    return midnight + steps * step


@attrs.define(frozen=True)
class FreeSlot:
    start_time: datetime
    end_time: datetime

    @property
    def duration_in_minutes(self) -> float:
        return (self.end_time - self.start_time).total_seconds() / 60


@attrs.define(frozen=True)
class RoomSchedule:
    """
    All bookings of one room, ordered by start time.

    No two bookings overlap; a booking may start exactly when another ends.
    Every operation returns a new schedule.
    """

    bookings: tuple[BookingSlot, ...] = attrs.field(default=(), converter=_sorted_by_start)

    @classmethod
    def create(cls) -> 'RoomSchedule':
        return cls()

    @classmethod
    def hydrate(
        cls, bookings_data: Optional[Iterable[BookingSlot | Mapping[str, Any]]]
    ) -> 'RoomSchedule':
        TechnicalError.validate_required_fields({'bookings_data': bookings_data})
        return cls(
            bookings=[
                data if isinstance(data, BookingSlot) else BookingSlot.from_dict(dict(data))
                for data in bookings_data or ()
            ]
        )

    def is_available(self, start_time: datetime, end_time: datetime) -> Result[bool]:
        failures = self._validate_period(start_time, end_time)
        if failures:
            return failure(failures)

        for booking in self.bookings:
            if booking.overlaps(start_time, end_time):
                return failure(
                    SimpleFailure(
                        code=FailureCode.ROOM_NOT_AVAILABLE_FOR_PERIOD,
                        details={
                            'start_time': start_time.isoformat(),
                            'end_time': end_time.isoformat(),
                            'conflicting_booking_uid': booking.booking_uid,
                        },
                    )
                )
        return success(True)

    def add_booking(
        self,
        screening_uid: Optional[str],
        start_time: datetime,
        end_time: datetime,
        type: BookingType,
    ) -> Result['RoomSchedule']:
        return BookingSlot.create(screening_uid, start_time, end_time, type).flat_map(
            self.add_slot
        )

    def add_slot(self, slot: BookingSlot) -> Result['RoomSchedule']:
        """Add an already built slot; the schedule is unchanged on conflict."""
        return self.is_available(slot.start_time, slot.end_time).map(
            lambda _: RoomSchedule(bookings=(*self.bookings, slot))
        )

    def remove_booking_by_uid(self, booking_uid: str) -> Result['RoomSchedule']:
        remaining = [b for b in self.bookings if b.booking_uid != booking_uid]
        if len(remaining) == len(self.bookings):
            return failure(
                SimpleFailure(
                    code=FailureCode.BOOKING_NOT_FOUND_IN_ROOM,
                    details={'booking_uid': booking_uid},
                )
            )
        return success(RoomSchedule(bookings=remaining))

    def remove_screening(self, screening_uid: str) -> Result['RoomSchedule']:
        remaining = [b for b in self.bookings if b.screening_uid != screening_uid]
        if len(remaining) == len(self.bookings):
            return failure(
                SimpleFailure(
                    code=FailureCode.BOOKING_NOT_FOUND_FOR_SCREENING,
                    details={'screening_uid': screening_uid},
                )
            )
        return success(RoomSchedule(bookings=remaining))

    def check_removable(
        self, booking_uid: str, *, now: Optional[datetime] = None
    ) -> Result[BookingSlot]:
        """
        Rules for removing a single activity, checked in order:

        1. the booking exists
        2. it has not started yet
        3. it is a manual activity (cleaning or maintenance)
        4. a cleaning is not tied to a screening
        """
        booking = self.find_booking_data_by_uid(booking_uid)
        if booking is None:
            return failure(
                SimpleFailure(
                    code=FailureCode.BOOKING_NOT_FOUND_IN_FUTURE_SCHEDULE,
                    details={'booking_uid': booking_uid},
                )
            )

        now = now or datetime.now(booking.start_time.tzinfo)
        if booking.start_time <= now:
            return failure(
                SimpleFailure(
                    code=FailureCode.BOOKING_ALREADY_STARTED,
                    details={
                        'booking_uid': booking_uid,
                        'start_time': booking.start_time.isoformat(),
                    },
                )
            )

        if booking.type not in MANUAL_BOOKING_TYPES:
            return failure(
                SimpleFailure(
                    code=FailureCode.INVALID_BOOKING_TYPE_FOR_REMOVAL,
                    details={
                        'type': booking.type.value,
                        'allowed_types': sorted(t.value for t in MANUAL_BOOKING_TYPES),
                    },
                )
            )

        if booking.type == BookingType.CLEANING and booking.screening_uid:
            return failure(
                SimpleFailure(
                    code=FailureCode.CLEANING_ASSOCIATED_WITH_SCREENING,
                    details={
                        'booking_uid': booking_uid,
                        'screening_uid': booking.screening_uid,
                    },
                )
            )

        return success(booking)

    def remove_scheduled_activity(
        self, booking_uid: str, *, now: Optional[datetime] = None
    ) -> Result['RoomSchedule']:
        return self.check_removable(booking_uid, now=now).flat_map(
            lambda booking: self.remove_booking_by_uid(booking.booking_uid)
        )

    def find_booking_data_by_uid(self, booking_uid: str) -> Optional[BookingSlot]:
        return next((b for b in self.bookings if b.booking_uid == booking_uid), None)

    def find_screening_data(self, screening_uid: str) -> Optional[BookingSlot]:
        """The SCREENING slot of a screening, or its first slot if that one is gone."""
        related = [b for b in self.bookings if b.screening_uid == screening_uid]
        return next((b for b in related if b.type == BookingType.SCREENING), None) or next(
            iter(related), None
        )

    def get_all_bookings_data(self) -> list[BookingSlot]:
        return list(self.bookings)

    def has_bookings_after(self, moment: datetime) -> bool:
        return any(booking.end_time > moment for booking in self.bookings)

    def get_free_slots_for_date(
        self, day: date | datetime, min_minutes: float, *, tz: Optional[tzinfo] = None
    ) -> list[FreeSlot]:
        """
        Free windows inside the operating hours of ``day``.

        Busy ranges are clipped to the operating window and merged; each gap
        is shrunk onto the minute grid and kept when it lasts at least
        ``min_minutes``.
        """
        if min_minutes is None or min_minutes <= 0:
            return []

        if isinstance(day, datetime):
            tz = tz or day.tzinfo
            day = day.date()
        midnight = datetime.combine(day, time(0), tzinfo=tz)
        day_start = midnight + timedelta(hours=settings.ROOM_OPERATING_START_HOUR)
        day_end = midnight + timedelta(hours=settings.ROOM_OPERATING_END_HOUR)

        merged: list[list[datetime]] = []
        for booking in self.bookings:
            start = max(booking.start_time, day_start)
            end = min(booking.end_time, day_end)
            if start >= end:
                continue
            if merged and start <= merged[-1][1]:
                merged[-1][1] = max(merged[-1][1], end)
            else:
                merged.append([start, end])

        free_slots: list[FreeSlot] = []
        previous_end = day_start
        for start, end in [*merged, [day_end, day_end]]:
            if previous_end < start:
                slot = self._aligned_slot(previous_end, start, min_minutes)
                if slot is not None:
                    free_slots.append(slot)
            previous_end = max(previous_end, end)
        return free_slots

    @staticmethod
    def _aligned_slot(
        gap_start: datetime, gap_end: datetime, min_minutes: float
    ) -> Optional[FreeSlot]:
        step = timedelta(minutes=settings.ROOM_SLOT_MINUTE_STEP)
        start = _align(gap_start, step, up=True)
        end = _align(gap_end, step, up=False)
        if start >= end or (end - start) < timedelta(minutes=min_minutes):
            return None
        return FreeSlot(start_time=start, end_time=end)

    @staticmethod
    def _validate_period(start_time: datetime, end_time: datetime) -> list[SimpleFailure]:
        failures = RequiredValidators.ensure_not_none(
            {'start_time': start_time, 'end_time': end_time}
        )
        if failures:
            return failures
        if end_time <= start_time:
            return [
                SimpleFailure(
                    code=FailureCode.DATE_WITH_INVALID_SEQUENCE,
                    details={
                        'start_time': start_time.isoformat(),
                        'end_time': end_time.isoformat(),
                    },
                )
            ]
        return []
