from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    host: str = "0.0.0.0"
    port: int = 3000

    db_host: str = "localhost"
    db_port: int = 5432
    db_database: str = "sinvoz"
    db_username: str = "sinvoz"
    db_password: str = "secret"
    db_pool_max_size: int = 10
    db_connect_timeout_seconds: float = 10.0

    media_root: Path = Path(".")
    cors_allow_origins: list[str] = ["*"]

    @property
    def db_conninfo(self) -> str:
        return (
            f"host={self.db_host} "
            f"port={self.db_port} "
            f"dbname={self.db_database} "
            f"user={self.db_username} "
            f"password={self.db_password}"
        )

    @property
    def images_dir(self) -> Path:
        return self.media_root / "imagenes"

    @property
    def videos_dir(self) -> Path:
        return self.media_root / "videos"
