from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # App
    app_name: str = "apixu-weather"
    log_level: str = "INFO"

    # Provider
    apixu_api_key: str
    apixu_base_url: str = "http://api.apixu.com/v1/current.json"
    request_timeout_seconds: Optional[float] = 5.0


settings = Settings()
