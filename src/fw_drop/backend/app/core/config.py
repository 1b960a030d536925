from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file='.env', case_sensitive=True, extra='ignore')
    HOST: str = '0.0.0.0'
    PORT: int = 3000
    UPLOAD_DIR: str = 'uploads'
    PUBLIC_BASE_URL: Optional[str] = None
    MAX_UPLOAD_BYTES: Optional[int] = None
    LOG_LEVEL: str = 'info'


settings = Settings()
