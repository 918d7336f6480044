"""
Probe — read the toolchain version and pick the integration API shape.

The legacy and modern toolchain surfaces are mutually incompatible, so
exactly one shape is chosen per run.  A failed or malformed probe never
raises: the profile's assumed version is substituted and the same
leading-numeral test is applied to it.  With the v0 profile that means
any probe failure resolves to MODERN.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum, unique
from typing import Callable, NamedTuple, Optional, Tuple

from apk_naming.policy.profile import NamingProfile

logger = logging.getLogger(__name__)

_LEADING_MAJOR = re.compile(r"^\s*(\d+)")


@unique
class ApiShape(str, Enum):
    MODERN = "MODERN"
    LEGACY = "LEGACY"


@dataclass(frozen=True)
class VersionProbe:
    """Outcome of one version read: Detected(value) or Unavailable(error)."""
    value: Optional[str] = None
    error: Optional[str] = None

    @property
    def detected(self) -> bool:
        return self.error is None and self.value is not None


def probe_version(read_version: Callable[[], str]) -> VersionProbe:
    """Call *read_version* once, converting any exception into Unavailable."""
    try:
        value = read_version()
    except Exception as exc:
        return VersionProbe(error=f"{type(exc).__name__}: {exc}")

    if not isinstance(value, str):
        return VersionProbe(error=f"non-string version: {value!r}")
    return VersionProbe(value=value)


def leading_major(value: Optional[str]) -> Optional[int]:
    """Return the leading numeral of a version string, or None if malformed."""
    if not isinstance(value, str):
        return None
    m = _LEADING_MAJOR.match(value)
    if m is None:
        return None
    return int(m.group(1))


def select_api_shape(
    probe: VersionProbe,
    profile: NamingProfile,
) -> Tuple[ApiShape, str]:
    """
    Decide the shape from a probe result.

    Returns (ApiShape, effective_version) where effective_version is the
    probed value, or the profile's assumed version when the probe failed
    or the value has no leading numeral.
    """
    effective = probe.value if probe.detected else None
    major = leading_major(effective)

    if major is None:
        reason = probe.error or f"malformed version {probe.value!r}"
        logger.warning(
            "toolchain version probe failed (%s); assuming %s",
            reason,
            profile.assumed_toolchain_version,
        )
        effective = profile.assumed_toolchain_version
        major = leading_major(effective)

    # An unparseable assumed version still resolves to the modern path.
    if major is None or major >= profile.modern_min_major:
        return ApiShape.MODERN, effective
    return ApiShape.LEGACY, effective


class ShapeDecision(NamedTuple):
    shape: ApiShape
    probe: VersionProbe
    effective_version: str


def detect_api_shape(
    read_version: Callable[[], str],
    profile: NamingProfile | None = None,
) -> ShapeDecision:
    """Probe once and keep the probe result alongside the chosen shape."""
    if profile is None:
        profile = NamingProfile.v0()

    probe = probe_version(read_version)
    shape, effective = select_api_shape(probe, profile)
    logger.info("toolchain version %s → %s API", effective, shape.value)
    return ShapeDecision(shape, probe, effective)


def resolve_environment_api_shape(
    read_version: Callable[[], str],
    profile: NamingProfile | None = None,
) -> ApiShape:
    """Probe the toolchain through *read_version* and return the API shape."""
    return detect_api_shape(read_version, profile).shape
