from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


def choose_env_file() -> str:
    return ".env.local" if Path(".env.local").exists() else ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=choose_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # tolerate unrelated env vars
    )

    # Storage
    POSTS_DIR: Path = Path("posts")
    LIST_WORKERS: int = 8

    # Admin token guarding create/update/delete; empty means open mode
    BLOG_ADMIN_TOKEN: str = ""

    # "production" or "development"
    MODE: str = "development"

    # HTTP
    API_PREFIX: str = "/api"
    HOST: str = "127.0.0.1"
    PORT: int = 8000

    # Logging
    LOG_LEVEL: str = "INFO"

    @property
    def requires_auth(self) -> bool:
        return bool(self.BLOG_ADMIN_TOKEN)

    @property
    def mode(self) -> str:
        return "production" if self.MODE.lower() == "production" else "development"


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()
