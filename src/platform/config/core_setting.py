from pathlib import Path
from typing import List

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Cinema Room Service'
    VERSION: str = '0.1.0'
    DEBUG: bool = True  # Set to False in production
    LOG_TO_FILE: bool = False
    LOG_DIR: Path = _PROJECT_ROOT / 'logs'

    # CORS
    BACKEND_CORS_ORIGINS: List[str] = []  # add your frontend URL here

    @field_validator('BACKEND_CORS_ORIGINS', mode='before')
    @classmethod
    def assemble_cors_origins(cls, v: str | List[str]) -> List[str]:
        if isinstance(v, str) and not v.startswith('['):
            return [i.strip() for i in v.split(',') if i.strip()]
        elif isinstance(v, list):
            return v
        return []

    # Room schedule
    ROOM_ACTIVITY_BUFFER_SECONDS: int = 60  # appended after cleaning/maintenance slots
    ROOM_OPERATING_START_HOUR: int = 10
    ROOM_OPERATING_END_HOUR: int = 22
    ROOM_SLOT_MINUTE_STEP: int = 5  # free slots are aligned to this grid

    @field_validator('ROOM_OPERATING_END_HOUR')
    @classmethod
    def validate_operating_end_hour(cls, v: int) -> int:
        if not 1 <= v <= 24:
            raise ValueError('ROOM_OPERATING_END_HOUR must be between 1 and 24')
        return v


settings = Settings()  # type: ignore
