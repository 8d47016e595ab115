"""Application configuration."""

from os import getenv

from pydantic import BaseModel


class Settings(BaseModel):
    """Runtime settings for the worktime service."""

    app_name: str = "worktime API"
    app_env: str = getenv("APP_ENV", "dev")
    debug: bool = getenv("DEBUG", "0") == "1"
    log_level: str = getenv("LOG_LEVEL", "INFO")
    default_timezone: str = getenv("WORKTIME_DEFAULT_TIMEZONE", "Etc/GMT+0")
    cache_maxsize: int = int(getenv("WORKTIME_CACHE_MAXSIZE", "1024"))
    strict_breaks: bool = getenv("WORKTIME_STRICT_BREAKS", "0") == "1"


settings: Settings = Settings()
