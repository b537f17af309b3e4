from typing import Any

import attrs

from src.platform.config.business_config import ScreenLimits
from src.platform.exception.exceptions import TechnicalError
from src.platform.result.failure import SimpleFailure
from src.platform.result.result import Result, failure, success
from src.service.room.domain.enum.screen_type import ScreenType
from src.shared.domain.validators import EnumValidators, NumericValidators


@attrs.define(frozen=True)
class Screen:
    size: int
    type: ScreenType

    @classmethod
    def create(cls, size: Any, type: Any) -> Result['Screen']:
        failures: list[SimpleFailure] = NumericValidators.validate_integer_in_range(
            size, 'screen.size', ScreenLimits.MIN_SIZE, ScreenLimits.MAX_SIZE
        )
        screen_type, type_failures = EnumValidators.parse(ScreenType, type, 'screen.type')
        failures.extend(type_failures)

        if failures or screen_type is None:
            return failure(failures)
        return success(cls(size=size, type=screen_type))

    @classmethod
    def hydrate(cls, size: int, type: str) -> 'Screen':
        TechnicalError.validate_required_fields({'size': size, 'type': type})
        return cls(size=size, type=ScreenType(type))
