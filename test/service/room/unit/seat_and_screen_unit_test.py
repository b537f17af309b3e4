import pytest

from src.platform.result.failure import FailureCode
from src.service.room.domain.enum.screen_type import ScreenType
from src.service.room.domain.value_object.screen import Screen
from src.service.room.domain.value_object.seat import Seat


@pytest.mark.unit
class TestSeat:
    def test_create(self) -> None:
        seat = Seat.create('c', 4, True).unwrap()

        assert seat == Seat(column='C', row=4, is_preferential=True)
        assert seat.label == 'C4'

    def test_invalid_column_and_row_are_both_reported(self) -> None:
        result = Seat.create('3', 0)

        assert result.codes == [FailureCode.INVALID_SEAT_COLUMN, FailureCode.INVALID_SEAT_ROW]


@pytest.mark.unit
class TestScreen:
    @pytest.mark.parametrize('screen_type', ['2D', '3d', '2D_3D'])
    def test_create(self, screen_type: str) -> None:
        screen = Screen.create(30, screen_type).unwrap()

        assert screen.size == 30
        assert screen.type == ScreenType(screen_type.upper())

    @pytest.mark.parametrize(
        'size, screen_type, expected',
        [
            (9, '2D', [FailureCode.VALUE_OUT_OF_RANGE]),
            (51, '2D', [FailureCode.VALUE_OUT_OF_RANGE]),
            (20, 'IMAX', [FailureCode.INVALID_ENUM_VALUE]),
            (None, None, [FailureCode.MISSING_REQUIRED_DATA, FailureCode.INVALID_ENUM_VALUE]),
        ],
    )
    def test_invalid(self, size: object, screen_type: object, expected: list) -> None:
        assert Screen.create(size, screen_type).codes == expected

    def test_hydrate(self) -> None:
        assert Screen.hydrate(20, '3D') == Screen(size=20, type=ScreenType.THREE_D)
