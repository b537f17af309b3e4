from string import ascii_uppercase
from typing import Iterable, Optional

import attrs

from src.platform.config.business_config import SeatRowLimits
from src.platform.exception.exceptions import TechnicalError
from src.platform.result.failure import FailureCode, SimpleFailure
from src.platform.result.result import Result, failure, success
from src.shared.domain.validators import LetterValidators


def column_position(letter: str) -> int:
    """1-indexed alphabet position of an uppercase column letter (A=1 ... Z=26)."""
    return ascii_uppercase.index(letter) + 1


@attrs.define(frozen=True)
class SeatRow:
    """
    One row of seats, spanning columns A up to ``last_column``.

    ``preferential_seats`` keeps the order in which the letters were given.
    """

    last_column: str
    preferential_seats: tuple[str, ...] = attrs.field(default=(), converter=tuple)

    @classmethod
    def create(
        cls,
        row_id: int,
        last_column_letter: str,
        preferential_letters: Optional[Iterable[str]] = None,
    ) -> Result['SeatRow']:
        last_column = LetterValidators.normalize_letter(last_column_letter)
        if last_column is None:
            return failure(
                SimpleFailure(
                    code=FailureCode.INVALID_SEAT_COLUMN,
                    details={'row': row_id, 'value': last_column_letter},
                )
            )

        capacity = column_position(last_column)
        if not SeatRowLimits.MIN_SEATS <= capacity <= SeatRowLimits.MAX_SEATS:
            return failure(
                SimpleFailure(
                    code=FailureCode.SEAT_COLUMN_OUT_OF_RANGE,
                    details={
                        'row': row_id,
                        'value': last_column,
                        'seats': capacity,
                        'min': SeatRowLimits.MIN_SEATS,
                        'max': SeatRowLimits.MAX_SEATS,
                    },
                )
            )

        requested = list(preferential_letters or [])
        if len(requested) > SeatRowLimits.MAX_PREFERENTIAL_SEATS:
            return failure(
                SimpleFailure(
                    code=FailureCode.PREFERENTIAL_SEATS_LIMIT_EXCEEDED,
                    details={
                        'row': row_id,
                        'count': len(requested),
                        'max': SeatRowLimits.MAX_PREFERENTIAL_SEATS,
                    },
                )
            )

        failures: list[SimpleFailure] = []
        preferential: list[str] = []
        for raw in requested:
            letter = LetterValidators.normalize_letter(raw)
            if letter is None:
                failures.append(
                    SimpleFailure(
                        code=FailureCode.INVALID_SEAT_COLUMN,
                        details={'row': row_id, 'value': raw},
                    )
                )
            elif column_position(letter) > capacity:
                failures.append(
                    SimpleFailure(
                        code=FailureCode.PREFERENTIAL_SEAT_NOT_IN_ROW,
                        details={'row': row_id, 'seat': letter, 'last_column': last_column},
                    )
                )
            elif letter in preferential:
                failures.append(
                    SimpleFailure(
                        code=FailureCode.DUPLICATE_PREFERENTIAL_SEAT,
                        details={'row': row_id, 'seat': letter},
                    )
                )
            else:
                preferential.append(letter)

        if failures:
            return failure(failures)
        return success(cls(last_column=last_column, preferential_seats=tuple(preferential)))

    @classmethod
    def hydrate(
        cls, last_column: str, preferential_seats: Optional[Iterable[str]] = None
    ) -> 'SeatRow':
        TechnicalError.validate_required_fields({'last_column': last_column})
        return cls(
            last_column=last_column.upper(),
            preferential_seats=tuple(letter.upper() for letter in preferential_seats or ()),
        )

    @property
    def capacity(self) -> int:
        return column_position(self.last_column)

    @property
    def columns(self) -> list[str]:
        return list(ascii_uppercase[: self.capacity])

    def has_seat(self, column: str) -> bool:
        letter = LetterValidators.normalize_letter(column)
        return letter is not None and column_position(letter) <= self.capacity

    def is_preferential_seat(self, column: str) -> bool:
        letter = LetterValidators.normalize_letter(column)
        return letter is not None and letter in self.preferential_seats
