"""
Adapters — write computed names back through the selected API surface.

One adapter per ApiShape.  They differ only in how variants, version
names and outputs are located on the toolchain; both call the same
``resolve_version_name`` / ``compute_file_name`` pair, so the name set on
each output is identical whichever shape was selected.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from apk_naming.core.naming import compute_file_name, resolve_version_name
from apk_naming.core.probe import ApiShape
from apk_naming.core.toolchain import (
    ApkVariantOutput,
    ApkVariantOutputImpl,
    ApplicationVariant,
    BaseVariantOutput,
    ModernVariant,
    ToolchainHost,
)
from apk_naming.policy.profile import NamingProfile

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NamedOutput:
    variant: str
    build_type: str
    output_id: str
    version_name: str
    file_name: str


def _name_for(version_name: str, build_type: str, profile: NamingProfile) -> str:
    return compute_file_name(
        version_name,
        build_type,
        prefix=profile.product_prefix,
        extension=profile.artifact_extension,
    )


# ── MODERN ───────────────────────────────────────────────────────────────────

def _apply_modern(
    host: ToolchainHost,
    default_version_name: Optional[str],
    profile: NamingProfile,
) -> List[NamedOutput]:
    named: List[NamedOutput] = []

    def on_variant(variant: ModernVariant) -> None:
        per_variant = variant.outputs[0].version_name.or_none() if variant.outputs else None
        version = resolve_version_name(
            per_variant, default_version_name, profile.terminal_version_name
        )
        file_name = _name_for(version, variant.build_type, profile)

        for out in variant.outputs:
            if not isinstance(out, ApkVariantOutput):
                logger.debug("skip non-APK output %s/%s", variant.name, out.output_id)
                continue
            out.output_file_name.set(file_name)
            named.append(NamedOutput(
                variant=variant.name,
                build_type=variant.build_type,
                output_id=out.output_id,
                version_name=version,
                file_name=file_name,
            ))

    host.android_components.on_variants(on_variant)
    return named


# ── LEGACY ───────────────────────────────────────────────────────────────────

def _apply_legacy(
    host: ToolchainHost,
    default_version_name: Optional[str],
    profile: NamingProfile,
) -> List[NamedOutput]:
    named: List[NamedOutput] = []

    def on_variant(variant: ApplicationVariant) -> None:
        version = resolve_version_name(
            variant.version_name, default_version_name, profile.terminal_version_name
        )
        build_type = variant.build_type.name
        file_name = _name_for(version, build_type, profile)

        def on_output(out: BaseVariantOutput) -> None:
            if not isinstance(out, ApkVariantOutputImpl):
                logger.debug("skip non-APK output %s/%s", variant.name, out.output_id)
                return
            out.output_file_name = file_name
            named.append(NamedOutput(
                variant=variant.name,
                build_type=build_type,
                output_id=out.output_id,
                version_name=version,
                file_name=file_name,
            ))

        variant.outputs.all(on_output)

    host.application_variants.all(on_variant)
    return named


_ADAPTERS: Dict[ApiShape, Callable[..., List[NamedOutput]]] = {
    ApiShape.MODERN: _apply_modern,
    ApiShape.LEGACY: _apply_legacy,
}


def apply_naming_to_variants(
    shape: ApiShape,
    host: ToolchainHost,
    *,
    default_version_name: Optional[str] = None,
    profile: NamingProfile | None = None,
) -> List[NamedOutput]:
    """
    Name every APK output of every variant on *host* through *shape*'s surface.

    Parameters
    ----------
    shape : ApiShape
        Surface selected by ``resolve_environment_api_shape``.
    host : ToolchainHost
        Toolchain collaborator; its output slots are written in place.
    default_version_name : str, optional
        Project-wide fallback version name.
    profile : NamingProfile, optional
        Defaults to NamingProfile.v0().

    Returns
    -------
    List[NamedOutput], one entry per named output in variant order.
    """
    if profile is None:
        profile = NamingProfile.v0()

    named = _ADAPTERS[shape](host, default_version_name, profile)
    logger.info("named %d outputs via %s API", len(named), shape.value)
    return named
