"""
Naming — pure file-name computation and version-name coalescing.

Both API-shape adapters call these two functions and nothing else to
decide a name, so the result per output never depends on the shape.

No sanitization is applied: path-hostile characters in the version or
build type pass through unchanged.
"""
from __future__ import annotations

from typing import Optional

PRODUCT_PREFIX = "Uchet_finansov"
ARTIFACT_EXTENSION = ".apk"
TERMINAL_VERSION_NAME = "0.0.0"


def compute_file_name(
    version_name: str,
    build_type_name: str,
    prefix: str = PRODUCT_PREFIX,
    extension: str = ARTIFACT_EXTENSION,
) -> str:
    """
    Return ``<prefix>-<version_name>-<build_type_name><extension>``.

    Total over all strings: empty inputs give a degenerate name such as
    ``Uchet_finansov--debug.apk`` rather than an error.
    """
    return f"{prefix}-{version_name}-{build_type_name}{extension}"


def _present(value: Optional[str]) -> bool:
    return value is not None and value != ""


def resolve_version_name(
    per_variant: Optional[str],
    fallback: Optional[str],
    terminal: str = TERMINAL_VERSION_NAME,
) -> str:
    """
    Coalesce per-variant → project default → terminal literal.

    ``None`` and ``""`` both count as absent, so the result is never empty
    as long as *terminal* is not.
    """
    if _present(per_variant):
        return per_variant
    if _present(fallback):
        return fallback
    return terminal
