"""Shared domain validation utilities.

Each validator returns a list of ``SimpleFailure`` (empty when the value is
valid) so callers can accumulate independent checks into one ``Failure``.
"""

from enum import Enum
import math
from string import ascii_uppercase
from typing import Any, TypeVar

from src.platform.result.failure import FailureCode, SimpleFailure


_E = TypeVar('_E', bound=Enum)


class RequiredValidators:
    @staticmethod
    def ensure_not_none(fields: dict[str, Any]) -> list[SimpleFailure]:
        """One MISSING_REQUIRED_DATA failure per field whose value is None."""
        return [
            SimpleFailure(code=FailureCode.MISSING_REQUIRED_DATA, details={'field': name})
            for name, value in fields.items()
            if value is None
        ]


class NumericValidators:
    @staticmethod
    def is_integer(value: Any) -> bool:
        # bool is an int subclass but never a valid quantity
        return isinstance(value, int) and not isinstance(value, bool)

    @staticmethod
    def is_number(value: Any) -> bool:
        # NaN passes every range comparison unnoticed
        return (
            isinstance(value, int | float)
            and not isinstance(value, bool)
            and math.isfinite(value)
        )

    @staticmethod
    def validate_integer_in_range(
        value: Any, field_name: str, min_value: int, max_value: int
    ) -> list[SimpleFailure]:
        if value is None:
            return RequiredValidators.ensure_not_none({field_name: value})
        if not NumericValidators.is_integer(value):
            return [
                SimpleFailure(
                    code=FailureCode.VALUE_NOT_INTEGER,
                    details={'field': field_name, 'value': value},
                )
            ]
        if not min_value <= value <= max_value:
            return [
                SimpleFailure(
                    code=FailureCode.VALUE_OUT_OF_RANGE,
                    details={
                        'field': field_name,
                        'value': value,
                        'min': min_value,
                        'max': max_value,
                    },
                )
            ]
        return []


class EnumValidators:
    @staticmethod
    def parse(
        enum_cls: type[_E], value: Any, field_name: str
    ) -> tuple[_E | None, list[SimpleFailure]]:
        """Case-insensitive lookup by value; surrounding whitespace is ignored."""
        if isinstance(value, enum_cls):
            return value, []
        if isinstance(value, str):
            normalized = value.strip().upper()
            for member in enum_cls:
                if str(member.value).upper() == normalized:
                    return member, []
        return None, [
            SimpleFailure(
                code=FailureCode.INVALID_ENUM_VALUE,
                details={
                    'field': field_name,
                    'value': value,
                    'allowed_values': [member.value for member in enum_cls],
                },
            )
        ]


class LetterValidators:
    @staticmethod
    def normalize_letter(value: Any) -> str | None:
        """Uppercase single letter A-Z, or None when the value is not one."""
        if not isinstance(value, str):
            return None
        letter = value.strip().upper()
        if len(letter) != 1 or letter not in ascii_uppercase:
            return None
        return letter
