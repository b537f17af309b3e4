from collections import Counter
from typing import Any, Iterable, Mapping, Optional, Sequence

import attrs

from src.platform.config.business_config import SeatLayoutLimits
from src.platform.exception.exceptions import TechnicalError
from src.platform.logging.loguru_io import Logger
from src.platform.result.failure import FailureCode, SimpleFailure
from src.platform.result.result import Result, failure, success
from src.service.room.domain.value_object.seat_row import SeatRow
from src.shared.domain.validators import NumericValidators, RequiredValidators


@attrs.define(frozen=True)
class SeatRowConfig:
    """Requested configuration of one row, as received from the caller."""

    row_id: Any
    last_column_letter: Any
    preferential_letters: tuple[Any, ...] = attrs.field(
        default=(), converter=lambda value: tuple(value or ())
    )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'SeatRowConfig':
        return cls(
            row_id=data.get('row_id'),
            last_column_letter=data.get('last_column_letter'),
            preferential_letters=data.get('preferential_letters'),
        )


def min_preferential_seats(capacity: int) -> int:
    # ceil(capacity * 5%) in integer arithmetic
    return -(-capacity * SeatLayoutLimits.MIN_PREFERENTIAL_PERCENTAGE // 100)


def max_preferential_seats(capacity: int) -> int:
    return capacity * SeatLayoutLimits.MAX_PREFERENTIAL_PERCENTAGE // 100


@attrs.define(frozen=True)
class SeatLayout:
    """
    Seating of a whole room.

    Rows are numbered 1..N; ``seat_rows[n - 1]`` is row ``n``.
    ``preferential_seats_by_row`` only lists rows holding at least one
    preferential seat.
    """

    seat_rows: tuple[SeatRow, ...] = attrs.field(converter=tuple)
    preferential_seats_by_row: dict[int, tuple[str, ...]] = attrs.field(init=False)
    total_capacity: int = attrs.field(init=False)

    def __attrs_post_init__(self) -> None:
        # frozen: derived fields go through object.__setattr__
        object.__setattr__(
            self,
            'preferential_seats_by_row',
            {
                row_id: row.preferential_seats
                for row_id, row in enumerate(self.seat_rows, start=1)
                if row.preferential_seats
            },
        )
        object.__setattr__(self, 'total_capacity', sum(row.capacity for row in self.seat_rows))

    @classmethod
    @Logger.io
    def create(
        cls, row_configs: Optional[Sequence[SeatRowConfig | Mapping[str, Any]]]
    ) -> Result['SeatLayout']:
        row_count = len(row_configs) if row_configs is not None else 0
        if not SeatLayoutLimits.MIN_ROWS <= row_count <= SeatLayoutLimits.MAX_ROWS:
            return failure(
                SimpleFailure(
                    code=FailureCode.ARRAY_LENGTH_OUT_OF_RANGE,
                    details={
                        'field': 'seat_config',
                        'length': row_count,
                        'min': SeatLayoutLimits.MIN_ROWS,
                        'max': SeatLayoutLimits.MAX_ROWS,
                    },
                )
            )

        configs = [
            config if isinstance(config, SeatRowConfig) else SeatRowConfig.from_dict(config)
            for config in row_configs or ()
        ]
        failures = cls._validate_row_ids(configs)

        rows: dict[Any, SeatRow] = {}
        total_capacity = 0
        total_preferential = 0
        for config in configs:
            row_result = SeatRow.create(
                config.row_id, config.last_column_letter, config.preferential_letters
            )
            if row_result.is_failure():
                failures.extend(row_result.failures)
                continue
            row = row_result.value
            rows[config.row_id] = row
            total_capacity += row.capacity
            total_preferential += len(row.preferential_seats)

        failures.extend(cls._validate_capacity(total_capacity))
        if total_capacity > 0:
            failures.extend(cls._validate_preferential_ratio(total_capacity, total_preferential))

        if failures:
            return failure(failures)
        return success(cls(seat_rows=[rows[row_id] for row_id in sorted(rows)]))

    @classmethod
    def hydrate(cls, seat_rows: Mapping[int, SeatRow] | Iterable[SeatRow]) -> 'SeatLayout':
        TechnicalError.validate_required_fields({'seat_rows': seat_rows})
        if isinstance(seat_rows, Mapping):
            row_ids = sorted(seat_rows)
            if row_ids != list(range(1, len(row_ids) + 1)):
                raise TechnicalError('INVALID_SEAT_ROW_SEQUENCE', {'row_ids': row_ids})
            return cls(seat_rows=[seat_rows[row_id] for row_id in row_ids])
        return cls(seat_rows=seat_rows)

    @staticmethod
    def _validate_row_ids(configs: list[SeatRowConfig]) -> list[SimpleFailure]:
        failures: list[SimpleFailure] = []
        for config in configs:
            if config.row_id is None:
                failures.extend(RequiredValidators.ensure_not_none({'row_id': None}))
            elif not NumericValidators.is_integer(config.row_id):
                failures.append(
                    SimpleFailure(
                        code=FailureCode.VALUE_NOT_INTEGER,
                        details={'field': 'row_id', 'value': config.row_id},
                    )
                )
        if failures:
            return failures

        row_ids = [config.row_id for config in configs]
        duplicates = sorted(row_id for row_id, count in Counter(row_ids).items() if count > 1)
        for row_id in duplicates:
            failures.append(
                SimpleFailure(code=FailureCode.DUPLICATE_SEAT_ROW, details={'row': row_id})
            )
        expected = list(range(1, len(row_ids) + 1))
        if not duplicates and sorted(row_ids) != expected:
            failures.append(
                SimpleFailure(
                    code=FailureCode.INVALID_SEAT_ROW_SEQUENCE,
                    details={'expected': expected, 'actual': sorted(row_ids)},
                )
            )
        return failures

    @staticmethod
    def _validate_capacity(total_capacity: int) -> list[SimpleFailure]:
        if SeatLayoutLimits.MIN_CAPACITY <= total_capacity <= SeatLayoutLimits.MAX_CAPACITY:
            return []
        return [
            SimpleFailure(
                code=FailureCode.INVALID_ROOM_CAPACITY,
                details={
                    'actual': total_capacity,
                    'min': SeatLayoutLimits.MIN_CAPACITY,
                    'max': SeatLayoutLimits.MAX_CAPACITY,
                },
            )
        ]

    @staticmethod
    def _validate_preferential_ratio(
        total_capacity: int, total_preferential: int
    ) -> list[SimpleFailure]:
        min_count = min_preferential_seats(total_capacity)
        max_count = max_preferential_seats(total_capacity)
        if min_count <= total_preferential <= max_count:
            return []
        return [
            SimpleFailure(
                code=FailureCode.INVALID_NUMBER_OF_PREFERENTIAL_SEATS,
                details={
                    'actual': total_preferential,
                    'min': min_count,
                    'max': max_count,
                    'actual_percentage': round(total_preferential * 100 / total_capacity, 2),
                    'min_percentage': SeatLayoutLimits.MIN_PREFERENTIAL_PERCENTAGE,
                    'max_percentage': SeatLayoutLimits.MAX_PREFERENTIAL_PERCENTAGE,
                },
            )
        ]

    @property
    def row_count(self) -> int:
        return len(self.seat_rows)

    @property
    def preferential_seats_count(self) -> int:
        return sum(len(letters) for letters in self.preferential_seats_by_row.values())

    def get_row(self, row_id: int) -> Optional[SeatRow]:
        if not NumericValidators.is_integer(row_id) or not 1 <= row_id <= self.row_count:
            return None
        return self.seat_rows[row_id - 1]

    def has_seat(self, row_id: int, column: str) -> bool:
        row = self.get_row(row_id)
        return row is not None and row.has_seat(column)

    def is_preferential_seat(self, row_id: int, column: str) -> bool:
        row = self.get_row(row_id)
        return row is not None and row.is_preferential_seat(column)
