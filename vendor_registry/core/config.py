
from pydantic import Field
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    """Application configuration loaded from environment variables / .env file."""

    app_name: str = "Vendor Registry"
    app_env: str = "development"
    app_host: str = "127.0.0.1"
    app_port: int = 8000
    frontend_url: str = "http://localhost:5173"
    api_prefix: str = Field(default="/api", alias="API_PREFIX")

    # None -> DEBUG in development, INFO elsewhere
    log_level: str | None = Field(default=None, alias="LOG_LEVEL")

    # Database (SQLite via aiosqlite for local dev)
    database_url: str = Field(
        default="sqlite+aiosqlite:///./vendors.db",
        alias="DATABASE_URL",
    )
    database_echo: bool = Field(default=False, alias="DATABASE_ECHO")
    auto_create_tables: bool = Field(default=True, alias="AUTO_CREATE_TABLES")

    # Client side: where the vendor API is served from
    api_base_url: str = Field(
        default="http://127.0.0.1:8000", alias="VENDOR_API_URL",
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "populate_by_name": True,
        "extra": "ignore",
    }

    @property
    def is_development(self) -> bool:
        return self.app_env == "development"

    @property
    def vendors_url(self) -> str:
        """Absolute URL of the vendors resource, used by the HTTP client."""
        return f"{self.api_base_url.rstrip('/')}{self.api_prefix}/vendors"

settings = Settings()
