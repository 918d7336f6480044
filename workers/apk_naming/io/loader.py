"""
Loader — read and validate a build description JSON file.

Validates schema_version constraints:
  - build description ≥ 0.1
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Tuple

from apk_naming.io.schema import BuildDescription

logger = logging.getLogger(__name__)

# Minimum schema version required.
_DESCRIPTION_MIN_SCHEMA = (0, 1)


def _parse_version(v: str) -> Tuple[int, ...]:
    try:
        return tuple(int(p) for p in v.split("."))
    except ValueError:
        raise ValueError(f"malformed schema_version {v!r}") from None


def _check_version(
    data: dict,
    label: str,
    min_version: Tuple[int, ...],
) -> None:
    sv = str(data.get("schema_version", "0.0"))
    parsed = _parse_version(sv)
    if parsed < min_version:
        min_str = ".".join(str(p) for p in min_version)
        raise ValueError(
            f"{label} schema_version {sv} < required {min_str}"
        )


def parse_build_description(data: dict) -> BuildDescription:
    """
    Validate an already decoded build description.

    Raises ValueError on a schema_version below 0.1 or on structural
    errors (pydantic ValidationError is a ValueError).
    """
    if not isinstance(data, dict):
        raise ValueError("build description must be a JSON object")
    _check_version(data, "build description", _DESCRIPTION_MIN_SCHEMA)
    return BuildDescription.model_validate(data)


def load_build_description(path: Path) -> BuildDescription:
    """
    Load and validate a build description from *path*.

    Raises ValueError if the file is not valid JSON or fails validation.
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"{path}: invalid JSON: {exc}") from exc

    description = parse_build_description(data)
    logger.info(
        "loaded build description %s (%d variants)", path, len(description.variants)
    )
    return description
