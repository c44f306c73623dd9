"""Application configuration using pydantic settings with structured sections."""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServerSettings(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False


class ShopifySettings(BaseModel):
    shop_domain: str = "example.myshopify.com"
    access_token: str = ""
    api_version: str = "2024-01"
    request_timeout: float = Field(default=15.0, gt=0)


class DuplicationSettings(BaseModel):
    suffix_length: int = Field(default=10, ge=1)
    # None keeps the collision loop unbounded
    max_attempts: Optional[int] = Field(default=None, ge=1)


class LoggingSettings(BaseModel):
    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"


class Settings(BaseSettings):
    """Top-level application settings with nested sections."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_nested_delimiter="__",
        extra="ignore",
        case_sensitive=False,
    )

    environment: Literal["development", "staging", "production", "test"] = "development"
    debug: bool = False
    project_name: str = "Theme Template Duplicator"
    api_prefix: str = "/api"

    server: ServerSettings = ServerSettings()
    shopify: ShopifySettings = ShopifySettings()
    duplication: DuplicationSettings = DuplicationSettings()
    logging: LoggingSettings = LoggingSettings()

    @property
    def host(self) -> str:
        return self.server.host

    @property
    def port(self) -> int:
        return self.server.port

    @property
    def shop_domain(self) -> str:
        return self.shopify.shop_domain

    @property
    def suffix_length(self) -> int:
        return self.duplication.suffix_length

    @property
    def max_attempts(self) -> Optional[int]:
        return self.duplication.max_attempts


@lru_cache()
def get_settings() -> Settings:
    return Settings()
