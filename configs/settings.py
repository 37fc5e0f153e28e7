from pydantic_settings import BaseSettings
from pydantic import Field, field_validator
from typing import Literal
from functools import lru_cache


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    api_host: str = Field(default="0.0.0.0")
    api_port: int = Field(default=8000)
    api_url: str = Field(
        default="http://localhost:8000",
        description="Base URL of a running API, used by the client script"
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Root logging level"
    )
    langchain_tracing_v2: bool = Field(
        default=False,
        description="Enable Langsmith tracing"
    )
    langchain_api_key: str = Field(
        default="",
        description="Langsmith API key"
    )
    langchain_project: str = Field(
        default="cultural-cuisine",
        description="Langsmith project name"
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
