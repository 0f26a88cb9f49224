from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

PROJECT_ROOT = Path(__file__).parent.parent
API_VERSION = "1.0.0"


class Settings(BaseSettings):
    jwt_secret: str
    token_expire_minutes: int = 360

    # Storage backend
    storage: Literal["memory", "sqlite"] = "memory"
    database_path: Path = PROJECT_ROOT / "data" / "eventbook.db"

    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False

    model_config = SettingsConfigDict(
        env_prefix="EVENTBOOK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )
