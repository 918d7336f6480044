"""
Schema — Pydantic models for apk_naming input and output.

Input:
  build_description.json — toolchain version, project defaults, variants.

Output:
  naming_report.json — probe result, selected API shape, one entry per
  named output, and any file-name collisions.

Runtime contract fields (present in every output):
  package_name, resolver_version, profile_id, schema_version.
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from apk_naming import PACKAGE_NAME, RESOLVER_VERSION, SCHEMA_VERSION
from apk_naming.core.outputs import OutputKind


# ── Input: build description ─────────────────────────────────────────────────

class SplitsModel(BaseModel):
    """ABI split configuration of the packaging step."""
    enabled: bool = False
    include: List[str] = Field(default_factory=list)
    universal_apk: bool = True


class OutputModel(BaseModel):
    kind: OutputKind = OutputKind.APK
    abi: Optional[str] = None
    universal: bool = False

    @field_validator("kind", mode="before")
    @classmethod
    def upper_kind(cls, v):
        return v.upper() if isinstance(v, str) else v


class VariantModel(BaseModel):
    name: str
    build_type: Optional[str] = None          # defaults to name
    version_name: Optional[str] = None
    architectures: List[str] = Field(default_factory=list)

    # Explicit outputs override the split plan.
    outputs: Optional[List[OutputModel]] = None


class ProjectModel(BaseModel):
    application_id: Optional[str] = None
    namespace: Optional[str] = None
    version_name: Optional[str] = None
    version_code: Optional[int] = None
    min_sdk: Optional[int] = None
    target_sdk: Optional[int] = None
    compile_sdk: Optional[int] = None
    jvm_target: Optional[str] = None


class BuildDescription(BaseModel):
    """Wrapper for build_description.json."""

    schema_version: str = SCHEMA_VERSION

    # None means the toolchain does not report a version.
    toolchain_version: Optional[str] = None

    project: ProjectModel = Field(default_factory=ProjectModel)
    splits: Optional[SplitsModel] = None
    variants: List[VariantModel] = Field(default_factory=list)


# ── Output: naming report ────────────────────────────────────────────────────

class NamedOutputEntry(BaseModel):
    variant: str
    build_type: str
    output_id: str
    version_name: str
    file_name: str


class NamingCounts(BaseModel):
    variants: int = 0
    outputs: int = 0
    named: int = 0
    skipped: int = 0


class NamingReport(BaseModel):
    """Run summary — naming_report.json."""

    package_name: str = PACKAGE_NAME
    resolver_version: str = RESOLVER_VERSION
    schema_version: str = SCHEMA_VERSION
    profile_id: str

    probed_version: Optional[str] = None
    probe_error: Optional[str] = None
    effective_version: str
    api_shape: str               # MODERN | LEGACY

    outputs: List[NamedOutputEntry] = Field(default_factory=list)
    counts: NamingCounts = Field(default_factory=NamingCounts)

    # File names shared by more than one output.
    collisions: List[str] = Field(default_factory=list)

    timestamp: str = Field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )
