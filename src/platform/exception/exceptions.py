from typing import TYPE_CHECKING, Any, Sequence


if TYPE_CHECKING:
    from src.platform.result.failure import SimpleFailure


class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(self, message: str, status_code: int) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class DomainError(CustomBaseError):
    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code)


class NotFoundError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 404)


class ConflictError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 409)


class DomainFailureError(DomainError):
    """Raised at the application boundary for a failed domain Result."""

    def __init__(self, failures: Sequence['SimpleFailure'], status_code: int = 400) -> None:
        self.failures = tuple(failures)
        codes = ', '.join(str(f.code) for f in self.failures)
        super().__init__(f'Domain validation failed: {codes}', status_code)


class TechnicalError(Exception):
    """Corrupted persisted state or programmer error; never a user input problem."""

    def __init__(self, code: str, details: dict[str, Any] | None = None) -> None:
        self.code = code
        self.details = details or {}
        super().__init__(f'{code}: {self.details}' if self.details else code)

    @classmethod
    def validate_required_fields(cls, fields: dict[str, Any]) -> None:
        missing = [name for name, value in fields.items() if value is None]
        if missing:
            raise cls('NULL_ARGUMENT', {'fields': missing})
