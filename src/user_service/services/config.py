from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    @field_validator("USER_SERVICE_URL_PREFIX", mode="before")
    @classmethod
    def normalize_prefix(cls, value: str | None) -> str:
        if not value:
            return ""
        cleaned = str(value).strip().rstrip("/")
        if cleaned and not cleaned.startswith("/"):
            cleaned = f"/{cleaned}"
        return cleaned

    @field_validator("USER_SERVICE_LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        return str(value).strip().upper()

    USER_SERVICE_AUTH_TOKEN: str = Field(default="valid-token", description="Shared token expected in the auth header")
    USER_SERVICE_AUTH_HEADER: str = Field(default="Authorization", description="Header carrying the token")
    USER_SERVICE_URL_PREFIX: str = Field(default="", description="API URL prefix")
    USER_SERVICE_HOST: str = Field(default="0.0.0.0", description="Bind host")
    USER_SERVICE_PORT: int = Field(default=8000, description="Bind port")
    USER_SERVICE_LOG_LEVEL: str = Field(default="INFO", description="Root log level")
    DEBUG: int = Field(default=0, description="Debug mode flag, exposes the OpenAPI docs")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"


settings = Settings()
