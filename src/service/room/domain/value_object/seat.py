import attrs

from src.platform.config.business_config import SeatLimits
from src.platform.result.failure import FailureCode, SimpleFailure
from src.platform.result.result import Result, failure, success
from src.shared.domain.validators import LetterValidators, NumericValidators


@attrs.define(frozen=True)
class Seat:
    column: str
    row: int
    is_preferential: bool = False

    @classmethod
    def create(cls, column: str, row: int, is_preferential: bool = False) -> Result['Seat']:
        failures: list[SimpleFailure] = []

        letter = LetterValidators.normalize_letter(column)
        if letter is None:
            failures.append(
                SimpleFailure(code=FailureCode.INVALID_SEAT_COLUMN, details={'value': column})
            )

        row_in_range = NumericValidators.is_integer(row) and (
            SeatLimits.MIN_ROW <= row <= SeatLimits.MAX_ROW
        )
        if not row_in_range:
            failures.append(
                SimpleFailure(
                    code=FailureCode.INVALID_SEAT_ROW,
                    details={'value': row, 'min': SeatLimits.MIN_ROW, 'max': SeatLimits.MAX_ROW},
                )
            )

        if failures:
            return failure(failures)
        return success(cls(column=letter, row=row, is_preferential=bool(is_preferential)))

    @property
    def label(self) -> str:
        return f'{self.column}{self.row}'
