"""Application settings and configuration management."""

from functools import lru_cache
from typing import Optional

from pydantic import Field, ConfigDict
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings with environment variable support."""
    
    # Application
    app_name: str = Field(default="Web Dictionary")
    app_version: str = Field(default="1.0.0")
    debug: bool = Field(default=False)
    
    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)
    workers: int = Field(default=1)
    
    # Word store
    store_backend: str = Field(default="postgres")  # "postgres" or "memory"
    seed_csv: Optional[str] = Field(default=None)  # loaded into the memory backend at startup
    
    # Database Configuration
    db_host: str = Field(default="localhost")
    db_port: int = Field(default=5432)
    db_name: str = Field(default="dictionary_db")
    db_user: str = Field(default="postgres")
    db_password: str = Field(default="")
    db_connect_timeout: int = Field(default=5)
    
    # Search Configuration
    max_query_length: int = Field(default=100)
    
    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="json")  # "json" or "console"
    
    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"  # Ignore extra environment variables
    )

    @property
    def db_config(self) -> dict:
        """Keyword arguments for psycopg2.connect()."""
        return {
            "host": self.db_host,
            "port": self.db_port,
            "dbname": self.db_name,
            "user": self.db_user,
            "password": self.db_password,
            "connect_timeout": self.db_connect_timeout,
        }


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
