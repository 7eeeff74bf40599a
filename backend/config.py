"""
Configuration management for Job Role Recommender.
"""

from pydantic_settings import BaseSettings
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    """Application settings from environment variables."""

    # LLM
    deepseek_api_key: str = ""
    deepseek_model: str = "deepseek-chat"
    suggest_temperature: float = 0.2
    detail_temperature: float = 0.7

    # Database
    database_url: str = ""  # Overrides the DB_* parts when set
    db_driver: str = "postgresql+psycopg"
    db_host: str = "localhost"
    db_port: int | None = None
    db_user: str = "postgres"
    db_password: str = ""
    db_name: str = "job_recommender"
    db_pool_size: int = 10

    # Server
    host: str = "0.0.0.0"
    port: int = 10000
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"  # Ignore extra env vars

    def sqlalchemy_url(self) -> str | URL:
        """Full database URL, built from the DB_* parts unless DATABASE_URL is set."""
        if self.database_url:
            return self.database_url
        return URL.create(
            self.db_driver,
            username=self.db_user,
            password=self.db_password or None,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        )


settings = Settings()
