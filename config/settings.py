"""
Application settings and environment configuration.

Purpose:
- Centralize the user directory config (API endpoint, timeouts, logging)
- Load from environment variables / .env so a deployment can point at another backend
- Provide sensible defaults for local development
"""
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    # UI
    APP_TITLE: str = "User Management"
    APP_SUBTITLE: str = "Simple CRUD Application"

    # Users collection endpoint; per-id endpoints are "{API_URL}/{id}"
    # Example: http://localhost:5000/api/users
    API_URL: str = "http://localhost:5000/api/users"

    # Seconds before an outstanding request is abandoned.
    # None leaves it to the transport (requests waits indefinitely).
    REQUEST_TIMEOUT: float | None = None

    # Logging: DEBUG, INFO, WARNING, ERROR, CRITICAL
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"  # Load from .env file if present
        extra = "ignore"

# Global settings instance
settings = Settings()
