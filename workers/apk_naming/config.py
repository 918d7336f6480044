"""
Resolver configuration
"""
from pydantic_settings import BaseSettings, SettingsConfigDict

from apk_naming.core import naming


class Settings(BaseSettings):
    """Resolver settings sourced from APK_NAMING_* environment variables"""

    # File naming
    PRODUCT_PREFIX: str = naming.PRODUCT_PREFIX
    ARTIFACT_EXTENSION: str = naming.ARTIFACT_EXTENSION
    TERMINAL_VERSION_NAME: str = naming.TERMINAL_VERSION_NAME

    # Toolchain probe
    ASSUMED_TOOLCHAIN_VERSION: str = "8.0.0"  # used when the probe fails
    MODERN_MIN_MAJOR: int = 8

    PROFILE_ID: str = "apk-naming-v0"

    model_config = SettingsConfigDict(
        env_prefix="APK_NAMING_",
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


settings = Settings()
