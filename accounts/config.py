import os
from functools import lru_cache
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseModel):
    NAME: str = "User Accounts"
    VERSION: str = "0.1.0"
    MODE: str = "DEV"
    JOIN_DATE_FORMAT: str = "%m-%d-%Y"


class AuthSettings(BaseModel):
    # log2 of the bcrypt rounds; bcrypt itself accepts 4..31
    BCRYPT_COST: int = Field(13, ge=4, le=31)
    PASSWORD_MIN_LENGTH: int = Field(6, ge=1)


class LoggingSettings(BaseModel):
    LEVEL: str = "INFO"
    FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class Settings(BaseSettings):
    app: AppSettings = AppSettings()
    auth: AuthSettings = AuthSettings()
    logging: LoggingSettings = LoggingSettings()

    model_config = SettingsConfigDict(
        env_file=os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_nested_delimiter="__",
        env_prefix=""
    )


# Кешируем настройки, чтобы читать окружение один раз
@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
