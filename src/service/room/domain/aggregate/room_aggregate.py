"""
Room Aggregate - Aggregate Root

A cinema room: its seat layout, its screen, its activity schedule and its
administrative status.

Design:
- Pure value: every mutation returns a new Room (attrs.evolve) or a Failure
- Seat questions go to SeatLayout, time questions go to RoomSchedule
- Validation problems come back as Result failures, never exceptions
- hydrate() trusts persisted data and only rejects missing fields
"""

from datetime import date, datetime, timedelta, tzinfo
from typing import Any, Iterable, Mapping, Optional, Sequence

import attrs
import uuid_utils

from src.platform.config.business_config import (
    BookingDurationLimits,
    RoomIdentifierLimits,
    ScreeningTimeDefaults,
)
from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import TechnicalError
from src.platform.logging.loguru_io import Logger
from src.platform.result.failure import FailureCode, SimpleFailure
from src.platform.result.result import Result, failure, success
from src.service.room.domain.enum.booking_type import BookingType
from src.service.room.domain.enum.room_status import RoomStatus
from src.service.room.domain.value_object.booking_slot import BookingSlot
from src.service.room.domain.value_object.room_schedule import FreeSlot, RoomSchedule
from src.service.room.domain.value_object.screen import Screen
from src.service.room.domain.value_object.seat import Seat
from src.service.room.domain.value_object.seat_layout import SeatLayout, SeatRowConfig
from src.service.room.domain.value_object.seat_row import SeatRow
from src.shared.domain.validators import EnumValidators, NumericValidators, RequiredValidators


def new_room_uid() -> str:
    return f'ROOM_{uuid_utils.uuid7()}'


def activity_buffer() -> timedelta:
    """Gap kept free after a cleaning or maintenance slot."""
    return timedelta(seconds=settings.ROOM_ACTIVITY_BUFFER_SECONDS)


@attrs.define(frozen=True)
class Room:
    room_uid: str
    identifier: int
    layout: SeatLayout
    screen: Screen
    schedule: RoomSchedule = attrs.field(factory=RoomSchedule.create)
    status: RoomStatus = RoomStatus.AVAILABLE

    @classmethod
    @Logger.io
    def create(
        cls,
        *,
        identifier: Any,
        seat_config: Optional[Sequence[SeatRowConfig | Mapping[str, Any]]],
        screen: Optional[Mapping[str, Any]],
        status: Optional[str] = None,
    ) -> Result['Room']:
        """Validate every field and report all problems together."""
        failures: list[SimpleFailure] = NumericValidators.validate_integer_in_range(
            identifier, 'identifier', RoomIdentifierLimits.MIN, RoomIdentifierLimits.MAX
        )

        room_status, status_failures = EnumValidators.parse(
            RoomStatus, RoomStatus.AVAILABLE if status is None else status, 'status'
        )
        failures.extend(status_failures)

        layout_result = SeatLayout.create(seat_config)
        failures.extend(layout_result.failures)

        if screen is None:
            failures.extend(RequiredValidators.ensure_not_none({'screen': None}))
            screen_result = None
        else:
            screen_result = Screen.create(screen.get('size'), screen.get('type'))
            failures.extend(screen_result.failures)

        if failures:
            return failure(failures)

        return success(
            cls(
                room_uid=new_room_uid(),
                identifier=identifier,
                layout=layout_result.value,  # type: ignore[union-attr]
                screen=screen_result.value,  # type: ignore[union-attr]
                schedule=RoomSchedule.create(),
                status=room_status,  # type: ignore[arg-type]
            )
        )

    @classmethod
    def hydrate(
        cls,
        *,
        room_uid: str,
        identifier: int,
        layout: SeatLayout | Mapping[int, SeatRow] | Iterable[SeatRow],
        screen: Screen | Mapping[str, Any],
        schedule: RoomSchedule | Iterable[BookingSlot | Mapping[str, Any]],
        status: RoomStatus | str,
    ) -> 'Room':
        TechnicalError.validate_required_fields(
            {
                'room_uid': room_uid,
                'identifier': identifier,
                'layout': layout,
                'screen': screen,
                'schedule': schedule,
                'status': status,
            }
        )
        return cls(
            room_uid=room_uid,
            identifier=identifier,
            layout=layout if isinstance(layout, SeatLayout) else SeatLayout.hydrate(layout),
            screen=screen
            if isinstance(screen, Screen)
            else Screen.hydrate(screen.get('size'), screen.get('type')),  # type: ignore[arg-type]
            schedule=schedule
            if isinstance(schedule, RoomSchedule)
            else RoomSchedule.hydrate(schedule),
            status=RoomStatus(status),
        )

    # ============================ Seats ============================

    def get_seat(self, column: str, row: int) -> Result[Seat]:
        if self.layout.get_row(row) is None:
            return failure(
                SimpleFailure(
                    code=FailureCode.INVALID_SEAT_ROW,
                    details={'value': row, 'min': 1, 'max': self.layout.row_count},
                )
            )
        if not self.layout.has_seat(row, column):
            return failure(
                SimpleFailure(
                    code=FailureCode.INVALID_SEAT_COLUMN,
                    details={'row': row, 'value': column},
                )
            )
        return Seat.create(column, row, self.layout.is_preferential_seat(row, column))

    def get_all_seats(self) -> list[list[Seat]]:
        return [
            [
                Seat(column=column, row=row_id, is_preferential=row.is_preferential_seat(column))
                for column in row.columns
            ]
            for row_id, row in enumerate(self.layout.seat_rows, start=1)
        ]

    def has_seat(self, row_id: int, column: str) -> bool:
        return self.layout.has_seat(row_id, column)

    def is_preferential_seat(self, row_id: int, column: str) -> bool:
        return self.layout.is_preferential_seat(row_id, column)

    # ============================ Status ============================

    @Logger.io
    def change_status(self, new_status: str | RoomStatus) -> Result['Room']:
        status, failures = EnumValidators.parse(RoomStatus, new_status, 'status')
        if failures or status is None:
            return failure(failures)
        if status == self.status:
            return success(self)
        return success(attrs.evolve(self, status=status))

    # ============================ Schedule ============================

    @Logger.io
    def schedule_cleaning(
        self, start_in: datetime, duration_minutes: float, *, now: Optional[datetime] = None
    ) -> Result['Room']:
        return self._schedule_activity(
            BookingType.CLEANING,
            start_in,
            duration_minutes,
            max_minutes=BookingDurationLimits.CLEANING_MAX,
            limit_code=FailureCode.INVALID_CLEANING_DURATION,
            now=now,
        )

    @Logger.io
    def schedule_maintenance(
        self, start_in: datetime, duration_minutes: float, *, now: Optional[datetime] = None
    ) -> Result['Room']:
        return self._schedule_activity(
            BookingType.MAINTENANCE,
            start_in,
            duration_minutes,
            max_minutes=BookingDurationLimits.MAINTENANCE_MAX,
            limit_code=FailureCode.INVALID_MAINTENANCE_DURATION,
            now=now,
        )

    @Logger.io
    def add_screening(
        self,
        screening_uid: str,
        start_time: datetime,
        duration_minutes: float,
        *,
        now: Optional[datetime] = None,
    ) -> Result['Room']:
        """
        Book a screening as four touching slots:
        entry -> screening -> exit -> cleaning (+ buffer).

        Either the whole chain is written or nothing is.
        """
        failures = RequiredValidators.ensure_not_none(
            {
                'screening_uid': screening_uid,
                'start_time': start_time,
                'duration_minutes': duration_minutes,
            }
        )
        if failures:
            return failure(failures)

        failures.extend(self._validate_not_past(start_time, now))
        if not NumericValidators.is_number(duration_minutes) or not (
            BookingDurationLimits.SCREENING_MIN
            <= duration_minutes
            <= BookingDurationLimits.SCREENING_MAX
        ):
            failures.append(
                SimpleFailure(
                    code=FailureCode.INVALID_SCREENING_DURATION,
                    details={
                        'duration_minutes': duration_minutes,
                        'min': BookingDurationLimits.SCREENING_MIN,
                        'max': BookingDurationLimits.SCREENING_MAX,
                    },
                )
            )
        if failures:
            return failure(failures)

        availability = self.is_period_available(start_time, duration_minutes)
        if availability.is_failure():
            return availability

        entry_end = start_time + timedelta(minutes=ScreeningTimeDefaults.ENTRY_TIME_MINUTES)
        show_end = entry_end + timedelta(minutes=duration_minutes)
        exit_end = show_end + timedelta(minutes=ScreeningTimeDefaults.EXIT_TIME_MINUTES)
        cleaning_end = (
            exit_end
            + timedelta(minutes=ScreeningTimeDefaults.CLEANING_TIME_MINUTES)
            + activity_buffer()
        )

        result: Result[RoomSchedule] = success(self.schedule)
        for booking_type, slot_start, slot_end in (
            (BookingType.ENTRY_TIME, start_time, entry_end),
            (BookingType.SCREENING, entry_end, show_end),
            (BookingType.EXIT_TIME, show_end, exit_end),
            (BookingType.CLEANING, exit_end, cleaning_end),
        ):
            result = result.flat_map(
                lambda schedule, t=booking_type, s=slot_start, e=slot_end: schedule.add_booking(
                    screening_uid, s, e, t
                )
            )
        return result.map(lambda schedule: attrs.evolve(self, schedule=schedule))

    def is_period_available(self, start_time: datetime, duration_minutes: float) -> Result[bool]:
        """Whether a screening of ``duration_minutes`` fits, counting its fixed slots."""
        failures = RequiredValidators.ensure_not_none(
            {'start_time': start_time, 'duration_minutes': duration_minutes}
        )
        if failures:
            return failure(failures)
        if not NumericValidators.is_number(duration_minutes) or duration_minutes <= 0:
            return failure(
                SimpleFailure(
                    code=FailureCode.INVALID_DURATION,
                    details={'duration_minutes': duration_minutes},
                )
            )
        total = timedelta(minutes=self.calculate_total_screening_time(duration_minutes))
        return self.schedule.is_available(start_time, start_time + total + activity_buffer())

    @staticmethod
    def calculate_total_screening_time(duration_minutes: float) -> float:
        return (
            duration_minutes
            + ScreeningTimeDefaults.ENTRY_TIME_MINUTES
            + ScreeningTimeDefaults.EXIT_TIME_MINUTES
            + ScreeningTimeDefaults.CLEANING_TIME_MINUTES
        )

    def remove_booking_by_uid(self, booking_uid: str) -> Result['Room']:
        return self.schedule.remove_booking_by_uid(booking_uid).map(self._with_schedule)

    @Logger.io
    def remove_screening(self, screening_uid: str) -> Result['Room']:
        return self.schedule.remove_screening(screening_uid).map(self._with_schedule)

    @Logger.io
    def remove_scheduled_activity(
        self, booking_uid: str, *, now: Optional[datetime] = None
    ) -> Result['Room']:
        return self.schedule.remove_scheduled_activity(booking_uid, now=now).map(
            self._with_schedule
        )

    def find_booking_data_by_uid(self, booking_uid: str) -> Optional[BookingSlot]:
        return self.schedule.find_booking_data_by_uid(booking_uid)

    def find_screening_data(self, screening_uid: str) -> Optional[BookingSlot]:
        return self.schedule.find_screening_data(screening_uid)

    def get_all_bookings(self) -> list[BookingSlot]:
        return self.schedule.get_all_bookings_data()

    def get_free_slots_for_date(
        self, day: date | datetime, min_minutes: float, *, tz: Optional[tzinfo] = None
    ) -> list[FreeSlot]:
        return self.schedule.get_free_slots_for_date(day, min_minutes, tz=tz)

    def has_future_bookings(self, *, now: Optional[datetime] = None) -> bool:
        if not self.schedule.bookings:
            return False
        now = now or datetime.now(self.schedule.bookings[0].start_time.tzinfo)
        return self.schedule.has_bookings_after(now)

    def new_bookings_since(self, previous: 'Room') -> list[BookingSlot]:
        """Bookings present here but not in ``previous`` (used to persist a change)."""
        known = {booking.booking_uid for booking in previous.get_all_bookings()}
        return [booking for booking in self.get_all_bookings() if booking.booking_uid not in known]

    # ============================ Read models ============================

    @property
    def screen_size(self) -> int:
        return self.screen.size

    @property
    def screen_type(self) -> str:
        return self.screen.type.value

    @property
    def total_seats_capacity(self) -> int:
        return self.layout.total_capacity

    @property
    def preferential_seats_count(self) -> int:
        return self.layout.preferential_seats_count

    @property
    def seat_layout_info(self) -> dict[str, Any]:
        return {
            'rows': self.layout.row_count,
            'total_seats': self.layout.total_capacity,
            'preferential_seats': self.layout.preferential_seats_count,
            'rows_info': [
                {
                    'row_number': row_id,
                    'seats': row.capacity,
                    'preferential_seats': list(row.preferential_seats),
                }
                for row_id, row in enumerate(self.layout.seat_rows, start=1)
            ],
        }

    # ============================ Internals ============================

    def _with_schedule(self, schedule: RoomSchedule) -> 'Room':
        return attrs.evolve(self, schedule=schedule)

    def _schedule_activity(
        self,
        booking_type: BookingType,
        start_in: datetime,
        duration_minutes: float,
        *,
        max_minutes: int,
        limit_code: FailureCode,
        now: Optional[datetime],
    ) -> Result['Room']:
        failures = RequiredValidators.ensure_not_none(
            {'start_in': start_in, 'duration_minutes': duration_minutes}
        )
        if failures:
            return failure(failures)

        failures.extend(self._validate_not_past(start_in, now))
        if not NumericValidators.is_number(duration_minutes) or duration_minutes <= 0:
            failures.append(
                SimpleFailure(
                    code=FailureCode.INVALID_DURATION,
                    details={'duration_minutes': duration_minutes},
                )
            )
        elif duration_minutes > max_minutes:
            failures.append(
                SimpleFailure(
                    code=limit_code,
                    details={'duration_minutes': duration_minutes, 'max': max_minutes},
                )
            )
        if failures:
            return failure(failures)

        end_time = start_in + timedelta(minutes=duration_minutes) + activity_buffer()
        return self.schedule.add_booking(None, start_in, end_time, booking_type).map(
            self._with_schedule
        )

    @staticmethod
    def _validate_not_past(start: datetime, now: Optional[datetime]) -> list[SimpleFailure]:
        now = now or datetime.now(start.tzinfo)
        if start < now:
            return [
                SimpleFailure(
                    code=FailureCode.DATE_CANNOT_BE_PAST,
                    details={'field': 'start_time', 'value': start.isoformat()},
                )
            ]
        return []
