"""
Profile — frozen configuration for apk_naming.

A profile captures every constant that affects the computed file names
and the API shape decision.  The ``v0()`` classmethod returns the locked
default profile; ``from_settings()`` builds one from the environment.

Contract: core functions read constants from the profile only, never
from ambient project configuration.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Tuple

from apk_naming.core.naming import (
    ARTIFACT_EXTENSION,
    PRODUCT_PREFIX,
    TERMINAL_VERSION_NAME,
)

if TYPE_CHECKING:
    from apk_naming.config import Settings


@dataclass(frozen=True)
class NamingProfile:
    """Immutable naming configuration."""

    # ── File naming ──────────────────────────────────────────────────
    product_prefix: str = PRODUCT_PREFIX
    artifact_extension: str = ARTIFACT_EXTENSION
    terminal_version_name: str = TERMINAL_VERSION_NAME

    # ── API shape selection ──────────────────────────────────────────
    assumed_toolchain_version: str = "8.0.0"
    modern_min_major: int = 8

    # ── Packaging defaults ───────────────────────────────────────────
    application_id: str = "com.example.finance_app"
    namespace: str = "com.example.finance_app"
    jvm_target: str = "11"
    abi_filters: Tuple[str, ...] = ("armeabi-v7a", "arm64-v8a")
    split_abi_enabled: bool = False
    split_abi_include: Tuple[str, ...] = ("armeabi-v7a", "arm64-v8a")
    universal_apk: bool = True

    # ── Identity ─────────────────────────────────────────────────────
    profile_id: str = "apk-naming-v0"

    @classmethod
    def v0(cls) -> NamingProfile:
        """Return the canonical v0 profile (all defaults)."""
        return cls()

    @classmethod
    def from_settings(cls, settings: Settings) -> NamingProfile:
        """Build a profile from environment-driven settings."""
        return cls(
            product_prefix=settings.PRODUCT_PREFIX,
            artifact_extension=settings.ARTIFACT_EXTENSION,
            terminal_version_name=settings.TERMINAL_VERSION_NAME,
            assumed_toolchain_version=settings.ASSUMED_TOOLCHAIN_VERSION,
            modern_min_major=settings.MODERN_MIN_MAJOR,
            profile_id=settings.PROFILE_ID,
        )
