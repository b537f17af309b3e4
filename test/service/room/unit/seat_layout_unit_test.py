"""
Unit tests for SeatLayout

Capacity bounds, preferential ratio, row numbering and failure accumulation.
"""

from typing import Any

import pytest

from src.platform.exception.exceptions import TechnicalError
from src.platform.result.failure import FailureCode
from src.service.room.domain.value_object.seat_layout import (
    SeatLayout,
    SeatRowConfig,
    max_preferential_seats,
    min_preferential_seats,
)
from src.service.room.domain.value_object.seat_row import SeatRow


def _rows(letters: list[str], preferential: dict[int, list[str]] | None = None) -> list[dict]:
    preferential = preferential or {}
    return [
        {
            'row_id': row_id,
            'last_column_letter': letter,
            'preferential_letters': preferential.get(row_id, []),
        }
        for row_id, letter in enumerate(letters, start=1)
    ]


@pytest.mark.unit
class TestSeatLayoutCreate:
    def test_reference_layout(self, seat_config: list[dict[str, Any]]) -> None:
        layout = SeatLayout.create(seat_config).unwrap()

        assert [row.capacity for row in layout.seat_rows] == [5, 6, 7, 8]
        assert layout.total_capacity == 26
        assert layout.preferential_seats_by_row == {1: ('A', 'B'), 2: ('C',)}
        assert layout.preferential_seats_count == 3
        assert layout.row_count == 4

    def test_accepts_row_config_objects(self) -> None:
        configs = [
            SeatRowConfig(
                row_id=row_id,
                last_column_letter='E',
                preferential_letters=['A'] if row_id == 1 else [],
            )
            for row_id in range(1, 5)
        ]

        layout = SeatLayout.create(configs).unwrap()

        assert layout.total_capacity == 20
        assert layout.preferential_seats_count == 1

    def test_rows_are_ordered_by_row_id(self) -> None:
        config = _rows(['E', 'F', 'G', 'H'], {1: ['A', 'B']})
        config.reverse()

        layout = SeatLayout.create(config).unwrap()

        assert [row.last_column for row in layout.seat_rows] == ['E', 'F', 'G', 'H']

    @pytest.mark.parametrize('count', [0, 3, 21])
    def test_row_count_out_of_range(self, count: int) -> None:
        result = SeatLayout.create(_rows(['Z'] * count))

        assert result.codes == [FailureCode.ARRAY_LENGTH_OUT_OF_RANGE]

    def test_missing_config(self) -> None:
        assert SeatLayout.create(None).codes == [FailureCode.ARRAY_LENGTH_OUT_OF_RANGE]

    def test_capacity_too_high(self) -> None:
        # 20 rows of 15 seats = 300
        result = SeatLayout.create(_rows(['O'] * 20, {1: ['A', 'B', 'C', 'D']}))

        assert FailureCode.INVALID_ROOM_CAPACITY in result.codes
        capacity_failure = next(
            f for f in result.failures if f.code == FailureCode.INVALID_ROOM_CAPACITY
        )
        assert capacity_failure.details['actual'] == 300

    def test_capacity_too_low(self) -> None:
        # 4 rows of 4 seats = 16
        result = SeatLayout.create(_rows(['D'] * 4, {1: ['A']}))

        assert result.codes == [FailureCode.INVALID_ROOM_CAPACITY]

    def test_too_few_preferential_seats(self) -> None:
        result = SeatLayout.create(_rows(['E', 'F', 'G', 'H'], {1: ['A']}))

        assert result.codes == [FailureCode.INVALID_NUMBER_OF_PREFERENTIAL_SEATS]
        details = result.failures[0].details
        assert (details['actual'], details['min'], details['max']) == (1, 2, 5)

    def test_too_many_preferential_seats(self) -> None:
        result = SeatLayout.create(
            _rows(['E', 'F', 'G', 'H'], {1: ['A', 'B', 'C'], 2: ['A', 'B', 'C']})
        )

        assert result.codes == [FailureCode.INVALID_NUMBER_OF_PREFERENTIAL_SEATS]

    def test_failures_of_every_row_are_reported(self) -> None:
        config = _rows(['B', 'E', '?', 'H'], {1: ['A', 'B']})

        result = SeatLayout.create(config)

        assert FailureCode.SEAT_COLUMN_OUT_OF_RANGE in result.codes
        assert FailureCode.INVALID_SEAT_COLUMN in result.codes
        rows = {f.details.get('row') for f in result.failures if 'row' in f.details}
        assert rows == {1, 3}

    def test_duplicate_row_id(self) -> None:
        config = _rows(['E', 'F', 'G', 'H'], {1: ['A', 'B']})
        config[3]['row_id'] = 2

        result = SeatLayout.create(config)

        assert result.codes == [FailureCode.DUPLICATE_SEAT_ROW]
        assert result.failures[0].details == {'row': 2}

    def test_row_ids_must_be_contiguous_from_one(self) -> None:
        config = _rows(['E', 'F', 'G', 'H'], {1: ['A', 'B']})
        config[3]['row_id'] = 7

        result = SeatLayout.create(config)

        assert result.codes == [FailureCode.INVALID_SEAT_ROW_SEQUENCE]

    def test_non_integer_row_id(self) -> None:
        config = _rows(['E', 'F', 'G', 'H'], {1: ['A', 'B']})
        config[0]['row_id'] = '1'

        result = SeatLayout.create(config)

        assert result.codes == [FailureCode.VALUE_NOT_INTEGER]


@pytest.mark.unit
class TestPreferentialBounds:
    @pytest.mark.parametrize(
        'capacity, expected_min, expected_max',
        [(20, 1, 4), (26, 2, 5), (100, 5, 20), (101, 6, 20), (250, 13, 50)],
    )
    def test_bounds(self, capacity: int, expected_min: int, expected_max: int) -> None:
        assert min_preferential_seats(capacity) == expected_min
        assert max_preferential_seats(capacity) == expected_max


@pytest.mark.unit
class TestSeatLayoutLookups:
    @pytest.fixture
    def layout(self, seat_config: list[dict[str, Any]]) -> SeatLayout:
        return SeatLayout.create(seat_config).unwrap()

    def test_has_seat(self, layout: SeatLayout) -> None:
        assert layout.has_seat(1, 'E')
        assert not layout.has_seat(1, 'F')
        assert layout.has_seat(4, 'h')

    @pytest.mark.parametrize('row_id', [0, 5, -1])
    def test_has_seat_unknown_row(self, layout: SeatLayout, row_id: int) -> None:
        assert not layout.has_seat(row_id, 'A')
        assert layout.get_row(row_id) is None

    def test_is_preferential_seat(self, layout: SeatLayout) -> None:
        assert layout.is_preferential_seat(2, 'C')
        assert not layout.is_preferential_seat(3, 'C')

    def test_hydrate_from_mapping(self, layout: SeatLayout) -> None:
        rows = {2: SeatRow.hydrate('F', ['C']), 1: SeatRow.hydrate('E', ['A', 'B'])}

        hydrated = SeatLayout.hydrate(rows)

        assert hydrated.seat_rows == layout.seat_rows[:2]
        assert hydrated.preferential_seats_by_row == {1: ('A', 'B'), 2: ('C',)}

    def test_hydrate_requires_rows(self) -> None:
        with pytest.raises(TechnicalError) as exc_info:
            SeatLayout.hydrate(None)  # type: ignore[arg-type]

        assert exc_info.value.code == 'NULL_ARGUMENT'
        assert exc_info.value.details == {'fields': ['seat_rows']}

    def test_hydrate_rejects_gaps_in_stored_rows(self) -> None:
        rows = {1: SeatRow.hydrate('E', ['A']), 3: SeatRow.hydrate('F', ['C'])}

        with pytest.raises(TechnicalError) as exc_info:
            SeatLayout.hydrate(rows)

        assert exc_info.value.code == 'INVALID_SEAT_ROW_SEQUENCE'
        assert exc_info.value.details == {'row_ids': [1, 3]}
