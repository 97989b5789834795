"""Application configuration."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables or a .env file."""

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    cors_origins: str = "http://localhost:3000,http://localhost:5173"

    # Database
    database_url: str = "sqlite+aiosqlite:///./data/portfolio.db"
    database_echo: bool = False

    # API key guards
    protected_path_prefixes: list[str] = ["/api/v1", "/api/admin"]
    domain_check_exempt_prefixes: list[str] = ["/api/admin"]
    domain_check_exempt_paths: list[str] = ["/api/v1/keys/verify"]
    api_key_prefix: str = "pk_"
    max_request_body_bytes: int = 1_048_576

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def cors_origins_list(self) -> list[str]:
        """CORS origins as a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


settings = Settings()
