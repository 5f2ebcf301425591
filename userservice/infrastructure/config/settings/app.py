from pydantic import Field
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict

from userservice import BASE_DIR
from userservice.infrastructure.types import LogHandler
from userservice.infrastructure.types import LogLevel


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="USERSERVICE_",
        env_file=[BASE_DIR / ".env"],
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    DEBUG: bool = False

    # Sent in the "Server" header of read endpoints.
    SERVER_NAME: str = "User Service"

    HOST: str = "0.0.0.0"
    PORT: int = Field(default=8080, ge=1, le=65535)

    LOG_LEVEL_API: LogLevel = "INFO"
    LOG_HANDLERS_API: list[LogHandler] = ["console", "file"]

    LOG_LEVEL_CLI: LogLevel = "INFO"
    LOG_HANDLERS_CLI: list[LogHandler] = ["cli"]

    LOG_FILE: str = "log.txt"


app_settings = AppSettings()
