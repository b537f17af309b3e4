"""
Unit tests for SeatRow

Row span, preferential seat rules and seat lookups.
"""

import pytest

from src.platform.exception.exceptions import TechnicalError
from src.platform.result.failure import FailureCode
from src.service.room.domain.value_object.seat_row import SeatRow, column_position


@pytest.mark.unit
class TestSeatRowCreate:
    def test_valid_row(self) -> None:
        row = SeatRow.create(1, 'e', ['a', 'B']).unwrap()

        assert row.last_column == 'E'
        assert row.capacity == 5
        assert row.preferential_seats == ('A', 'B')
        assert row.columns == ['A', 'B', 'C', 'D', 'E']

    def test_row_without_preferential_seats(self) -> None:
        row = SeatRow.create(2, 'Z').unwrap()

        assert row.capacity == 26
        assert row.preferential_seats == ()

    def test_preferential_order_is_kept(self) -> None:
        row = SeatRow.create(1, 'J', ['D', 'A', 'C']).unwrap()

        assert row.preferential_seats == ('D', 'A', 'C')

    @pytest.mark.parametrize('letter', ['', 'AB', '1', None, 'Ñ'])
    def test_invalid_last_column_letter(self, letter: object) -> None:
        result = SeatRow.create(1, letter, [])  # type: ignore[arg-type]

        assert result.is_failure()
        assert result.codes == [FailureCode.INVALID_SEAT_COLUMN]

    @pytest.mark.parametrize('letter', ['A', 'B', 'C'])
    def test_row_shorter_than_four_seats(self, letter: str) -> None:
        result = SeatRow.create(3, letter, [])

        assert result.codes == [FailureCode.SEAT_COLUMN_OUT_OF_RANGE]
        assert result.failures[0].details['row'] == 3

    def test_more_than_four_preferential_seats(self) -> None:
        result = SeatRow.create(1, 'J', ['A', 'B', 'C', 'D', 'E'])

        assert result.codes == [FailureCode.PREFERENTIAL_SEATS_LIMIT_EXCEEDED]

    def test_preferential_problems_are_accumulated(self) -> None:
        # Given: one seat beyond the row, one duplicate, one garbage letter
        result = SeatRow.create(1, 'E', ['F', 'A', 'A', '?'])

        # Then: every problem is reported
        assert result.codes == [
            FailureCode.PREFERENTIAL_SEAT_NOT_IN_ROW,
            FailureCode.DUPLICATE_PREFERENTIAL_SEAT,
            FailureCode.INVALID_SEAT_COLUMN,
        ]

    def test_bad_last_column_short_circuits_preferential_checks(self) -> None:
        result = SeatRow.create(1, 'B', ['X', 'X', 'X'])

        assert result.codes == [FailureCode.SEAT_COLUMN_OUT_OF_RANGE]


@pytest.mark.unit
class TestSeatRowLookups:
    @pytest.fixture
    def row(self) -> SeatRow:
        return SeatRow.create(1, 'F', ['B']).unwrap()

    @pytest.mark.parametrize('column', ['A', 'f', ' c '])
    def test_has_seat_inside_row(self, row: SeatRow, column: str) -> None:
        assert row.has_seat(column)

    @pytest.mark.parametrize('column', ['G', 'Z', '', 'AA'])
    def test_has_seat_outside_row(self, row: SeatRow, column: str) -> None:
        assert not row.has_seat(column)

    def test_is_preferential_seat(self, row: SeatRow) -> None:
        assert row.is_preferential_seat('b')
        assert not row.is_preferential_seat('A')

    def test_hydrate_trusts_data(self) -> None:
        row = SeatRow.hydrate('h', ['a'])

        assert row == SeatRow(last_column='H', preferential_seats=('A',))

    def test_hydrate_requires_last_column(self) -> None:
        with pytest.raises(TechnicalError) as exc_info:
            SeatRow.hydrate(None)  # type: ignore[arg-type]

        assert exc_info.value.code == 'NULL_ARGUMENT'
        assert exc_info.value.details == {'fields': ['last_column']}

    def test_column_position(self) -> None:
        assert column_position('A') == 1
        assert column_position('Z') == 26
