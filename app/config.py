"""
Application configuration with Pydantic Settings for validation and type safety.
Connection parameters are loaded from environment variables or a .env file;
backend identifiers are fixed for the deployed Appwrite project.
"""

from typing import Optional
from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.exceptions import ConfigurationError


# Fixed identifiers of the Appwrite project
PLATFORM = "com.jsm.foodordering"
DATABASE_ID = "6990dd04000f4642748e"
BUCKET_ID = "6994e12b001fccabcf44"
USER_COLLECTION_ID = "user"
CATEGORIES_COLLECTION_ID = "categories"
MENU_COLLECTION_ID = "menu"
CUSTOMIZATIONS_COLLECTION_ID = "customizations"
MENU_CUSTOMIZATIONS_COLLECTION_ID = "menu_customizations"


class Settings(BaseSettings):
    """
    Application settings with validation.
    Settings are loaded from environment variables or .env file.
    """

    # Appwrite connection (required)
    appwrite_endpoint: str = Field(..., description="Appwrite API endpoint URL")
    appwrite_project_id: str = Field(..., min_length=1, description="Appwrite project id")
    appwrite_api_key: Optional[str] = Field(
        default=None, description="Server API key, used by the seeding script"
    )

    # Seeding
    image_fetch_timeout: float = Field(
        default=30.0, gt=0, description="Timeout in seconds for fetching seed images"
    )
    seed_delete_workers: int = Field(
        default=8, ge=1, le=64, description="Parallel deletions during the wipe phase"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(
        default="%(asctime)s %(levelname)s %(name)s: %(message)s",
        description="Log format string",
    )

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    @field_validator("appwrite_endpoint")
    @classmethod
    def validate_endpoint(cls, v: str) -> str:
        """Require an http(s) URL and drop the trailing slash"""
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError("appwrite_endpoint must be an http(s) URL")
        return v.rstrip("/")


class AppwriteConfig(BaseModel):
    """Static record of backend connection parameters shared by all operations."""

    endpoint: str
    project_id: str
    api_key: Optional[str] = None
    platform: str = PLATFORM
    database_id: str = DATABASE_ID
    bucket_id: str = BUCKET_ID
    user_collection_id: str = USER_COLLECTION_ID
    categories_collection_id: str = CATEGORIES_COLLECTION_ID
    menu_collection_id: str = MENU_COLLECTION_ID
    customizations_collection_id: str = CUSTOMIZATIONS_COLLECTION_ID
    menu_customizations_collection_id: str = MENU_CUSTOMIZATIONS_COLLECTION_ID

    model_config = {"frozen": True}

    @classmethod
    def from_settings(cls, settings: Settings) -> "AppwriteConfig":
        return cls(
            endpoint=settings.appwrite_endpoint,
            project_id=settings.appwrite_project_id,
            api_key=settings.appwrite_api_key,
        )


def load_settings(**overrides) -> Settings:
    """Load settings, turning a missing or invalid parameter into a startup fault."""
    try:
        return Settings(**overrides)
    except ValidationError as exc:
        fields = [".".join(str(p) for p in err["loc"]) for err in exc.errors()]
        raise ConfigurationError(
            f"Invalid backend configuration: {', '.join(fields)}",
            details={"fields": fields},
            code="invalid_configuration",
        ) from exc


# Global settings instance
settings = load_settings()

appwrite_config = AppwriteConfig.from_settings(settings)
