"""
Result type for domain operations.

Every fallible domain operation returns either ``Success(value)`` or
``Failure(failures)`` instead of raising. ``Failure`` always carries at least
one ``SimpleFailure``; independent checks append to the same list so a caller
sees every problem at once.

Example:
    ```python
    result = SeatLayout.create(row_configs)
    if result.is_failure():
        return result
    layout = result.value
    ```
"""

from typing import Any, Callable, Generic, Iterable, NoReturn, TypeVar

import attrs

from src.platform.exception.exceptions import DomainFailureError
from src.platform.result.failure import FailureCode, SimpleFailure, status_code_for


T = TypeVar('T')
U = TypeVar('U')


@attrs.define(frozen=True)
class Success(Generic[T]):
    value: T

    def is_success(self) -> bool:
        return True

    def is_failure(self) -> bool:
        return False

    @property
    def failures(self) -> tuple[SimpleFailure, ...]:
        return ()

    def map(self, func: Callable[[T], U]) -> 'Success[U]':
        return Success(func(self.value))

    def flat_map(self, func: Callable[[T], 'Result[U]']) -> 'Result[U]':
        return func(self.value)

    def unwrap(self) -> T:
        return self.value


@attrs.define(frozen=True)
class Failure:
    failures: tuple[SimpleFailure, ...] = attrs.field(converter=tuple)

    @failures.validator
    def _check_not_empty(self, attribute: Any, value: tuple[SimpleFailure, ...]) -> None:
        if not value:
            raise ValueError('Failure requires at least one SimpleFailure')

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return True

    @property
    def value(self) -> NoReturn:
        raise AttributeError('Failure has no value')

    @property
    def codes(self) -> list[FailureCode]:
        return [f.code for f in self.failures]

    def map(self, func: Callable[[Any], Any]) -> 'Failure':
        return self

    def flat_map(self, func: Callable[[Any], Any]) -> 'Failure':
        return self

    def unwrap(self) -> NoReturn:
        raise DomainFailureError(self.failures, status_code=status_code_for(self.failures))


Result = Success[T] | Failure


def success(value: T) -> Success[T]:
    return Success(value)


def failure(failures: SimpleFailure | Iterable[SimpleFailure]) -> Failure:
    if isinstance(failures, SimpleFailure):
        return Failure((failures,))
    return Failure(tuple(failures))


def fail(code: FailureCode, **details: Any) -> Failure:
    """Shorthand for a single-failure Result."""
    return Failure((SimpleFailure(code=code, details=details),))
