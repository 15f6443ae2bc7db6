"""
Configuration management for the Roster API
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API Settings
    api_host: str = "0.0.0.0"
    api_port: int = 4000
    api_reload: bool = False
    cors_origins: list[str] = ["http://localhost:3000"]
    graphiql: bool = True  # Serve the GraphiQL IDE on GET /graphql

    # Environment
    environment: str = "development"  # 'development', 'staging', 'production'
    debug: bool = True
    log_level: str = "INFO"

    # User store
    seed_users: bool = True  # Start with the two demo users
    require_user_fields: bool = False  # Reject addUser without name and email

    class Config:
        env_file = ".env"
        env_prefix = "ROSTER_"
        case_sensitive = False


# Global settings instance
settings = Settings()

# Debug: Log settings initialization (only in debug mode)
if settings.debug:
    from .logging import get_logger

    _logger = get_logger(__name__)
    _logger.debug(
        "Settings initialized",
        environment=settings.environment,
        seed_users=settings.seed_users,
        require_user_fields=settings.require_user_fields,
    )
