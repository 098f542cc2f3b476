"""Application configuration settings."""
import os
from pathlib import Path
from pydantic_settings import BaseSettings
from functools import lru_cache


DEFAULT_DATA_FILE = os.path.join(Path.home(), ".pgdesk", "data.json")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    app_name: str = "pgdesk server"
    app_version: str = "1.0.0"
    debug: bool = False
    environment: str = "development"
    log_level: str = "INFO"

    # Server
    host: str = "127.0.0.1"
    port: int = 4000
    slow_request_ms: int = 5000

    # CORS (comma-separated)
    cors_origins: str = "*"

    # PostgreSQL sessions
    pg_connect_timeout: int = 10
    pg_statement_timeout_ms: int = 30000

    # Table browser / query runner limits
    table_page_size: int = 500
    table_max_rows: int = 5000
    query_max_rows: int = 5000

    # Saved connection data (what the desktop shell remembers between runs)
    data_file: str = DEFAULT_DATA_FILE

    class Config:
        # Look for .env in the project root (parent of server_py)
        env_file = os.path.join(Path(__file__).parent.parent.parent, ".env")
        case_sensitive = False
        extra = "ignore"

    @classmethod
    def from_env(cls) -> "Settings":
        """Load settings from environment variables."""
        return cls(
            app_name=os.getenv("APP_NAME", "pgdesk server"),
            app_version=os.getenv("APP_VERSION", "1.0.0"),
            environment=os.getenv("ENVIRONMENT", "development"),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            host=os.getenv("HOST", "127.0.0.1"),
            port=int(os.getenv("PORT", "4000")),
            cors_origins=os.getenv("CORS_ORIGINS", "*"),
            pg_connect_timeout=int(os.getenv("PG_CONNECT_TIMEOUT", "10")),
            pg_statement_timeout_ms=int(os.getenv("PG_STATEMENT_TIMEOUT_MS", "30000")),
            slow_request_ms=int(os.getenv("SLOW_REQUEST_MS", "5000")),
            table_page_size=int(os.getenv("TABLE_PAGE_SIZE", "500")),
            table_max_rows=int(os.getenv("TABLE_MAX_ROWS", "5000")),
            query_max_rows=int(os.getenv("QUERY_MAX_ROWS", "5000")),
            data_file=os.path.expanduser(os.getenv("PGDESK_DATA_FILE", DEFAULT_DATA_FILE)),
        )

    @property
    def cors_origin_list(self) -> list[str]:
        origins = [o.strip() for o in self.cors_origins.split(",") if o.strip()]
        return origins or ["*"]


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings.from_env()
