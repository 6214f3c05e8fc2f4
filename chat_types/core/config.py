from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="CHAT_TYPES_",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = "INFO"
    redact_message_content: bool = True
    skip_malformed_messages: bool = False


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
