"""
Configuration management for the job board backend
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="JOBBOARD_",
        case_sensitive=False,
        extra="allow",
    )

    # Database
    database_url: str = "sqlite:///./jobboard.db"
    database_pool_size: int = 10
    database_max_overflow: int = 20
    sql_echo: bool = False

    # Auth
    auth_provider: str = "none"  # 'none', 'jwt'
    auth_config: dict = {}
    jwt_secret: str | None = None
    jwt_algorithm: str = "HS256"
    jwt_issuer: str | None = None
    jwt_audience: str | None = None

    # API Settings
    api_host: str = "0.0.0.0"
    api_port: int = 9000
    api_reload: bool = False
    cors_origins: list[str] = ["http://localhost:3000"]

    # Client
    graphql_url: str = "http://localhost:9000/graphql"

    # Environment
    environment: str = "development"  # 'development', 'staging', 'production'
    debug: bool = True
    log_level: str = "INFO"


# Global settings instance
settings = Settings()
