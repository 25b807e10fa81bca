from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_EXPIRES_MINUTES = 60

class Settings(BaseSettings):
    PROJECT_NAME: str = "SafeScribe"
    DATABASE_URL: str = "sqlite:///./data/safescribe.db"
    LOG_LEVEL: str = "INFO"

    # Auth Config
    JWT_ISSUER: str = "SafeScribeAPI"
    JWT_AUDIENCE: str = "SafeScribeClients"
    JWT_SECRET: str
    JWT_EXPIRES_MINUTES: int = DEFAULT_EXPIRES_MINUTES
    JWT_ALGORITHM: str = "HS256"

    # Password hashing
    PASSWORD_PEPPER: str = ""
    ARGON2_TIME_COST: int = 2
    ARGON2_MEMORY_COST: int = 102400
    ARGON2_PARALLELISM: int = 8

    # Seeded on startup when a password is provided
    ADMIN_USERNAME: str = "admin"
    ADMIN_PASSWORD: str | None = None

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @field_validator("JWT_SECRET")
    @classmethod
    def secret_must_not_be_blank(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("JWT_SECRET must be configured")
        return value

    @field_validator("JWT_EXPIRES_MINUTES", mode="before")
    @classmethod
    def expires_minutes_or_default(cls, value):
        try:
            minutes = int(value)
        except (TypeError, ValueError):
            return DEFAULT_EXPIRES_MINUTES
        return minutes if minutes > 0 else DEFAULT_EXPIRES_MINUTES

settings = Settings()
