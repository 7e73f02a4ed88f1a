from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    DATABASE_URL: str = "sqlite+aiosqlite:///./filmes.db"
    DATABASE_ECHO: bool = False


class OmdbSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", env_prefix="OMDB_", extra="ignore")

    api_url: str = "https://www.omdbapi.com/"
    api_key: str = ""
    timeout: float = 10.0


class SeedSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", env_prefix="SEED_", extra="ignore")

    target_total: int = Field(default=1000, ge=0)
    max_api_calls: int = Field(default=1000, ge=0)
    on_startup: bool = True
