from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = Field(default="product-errors", alias="APP_NAME")

    # Router mount point; empty serves /products/{id} at the root
    api_prefix: str = Field(default="", alias="API_PREFIX")

    # Logging
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Server bind when run as a module
    host: str = Field(default="127.0.0.1", alias="HOST")
    port: int = Field(default=8000, alias="PORT")

    # Frontend URL allowed through CORS
    frontend_url: str | None = Field(default=None, alias="FRONTEND_URL")

    @field_validator("frontend_url", mode="before")
    @classmethod
    def empty_str_to_none(cls, v: str | None) -> str | None:
        """Convert empty strings to None for optional string fields."""
        if v == "":
            return None
        return v

    @field_validator("api_prefix", mode="before")
    @classmethod
    def normalize_prefix(cls, v: str | None) -> str:
        """Strip trailing slashes and ensure a leading one, keeping "" as root."""
        if not v:
            return ""
        v = v.strip().rstrip("/")
        if v and not v.startswith("/"):
            v = f"/{v}"
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, v: str | None) -> str:
        if not v:
            return "INFO"
        return v.upper()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )


settings = Settings()
