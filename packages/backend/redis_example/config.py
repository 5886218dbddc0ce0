from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="", case_sensitive=False)

    redis_url: str = "redis://localhost:6379/0"


def get_settings() -> Settings:
    return Settings()
