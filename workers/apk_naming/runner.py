"""
Runner — top-level naming orchestration: build description → report.

Ties together the toolchain model, the version probe, the shape
adapters, and the writer.  Called from a build step or from the CLI.
"""
from __future__ import annotations

import argparse
import logging
import sys
from collections import Counter
from pathlib import Path
from typing import List, Optional

from apk_naming.config import Settings
from apk_naming.core.adapters import apply_naming_to_variants
from apk_naming.core.outputs import OutputSpec, SplitConfig, declare_outputs
from apk_naming.core.probe import detect_api_shape
from apk_naming.core.toolchain import (
    BuildVariant,
    DeclaredOutput,
    ProjectDefaults,
    ToolchainHost,
)
from apk_naming.io.loader import load_build_description
from apk_naming.io.schema import (
    BuildDescription,
    NamedOutputEntry,
    NamingCounts,
    NamingReport,
    OutputModel,
)
from apk_naming.io.writer import write_report
from apk_naming.policy.profile import NamingProfile

logger = logging.getLogger(__name__)


# ── Host construction ────────────────────────────────────────────────────────

def _split_config(description: BuildDescription, profile: NamingProfile) -> SplitConfig:
    if description.splits is None:
        return SplitConfig(
            enabled=profile.split_abi_enabled,
            include=profile.split_abi_include,
            universal_apk=profile.universal_apk,
        )
    return SplitConfig(
        enabled=description.splits.enabled,
        include=tuple(description.splits.include),
        universal_apk=description.splits.universal_apk,
    )


def _output_spec(model: OutputModel) -> OutputSpec:
    return OutputSpec(
        kind=model.kind,
        abi=model.abi,
        universal=model.universal,
    )


def build_host(
    description: BuildDescription,
    profile: NamingProfile | None = None,
) -> ToolchainHost:
    """Materialize the toolchain collaborator described by *description*."""
    if profile is None:
        profile = NamingProfile.v0()

    p = description.project
    defaults = ProjectDefaults(
        application_id=p.application_id or profile.application_id,
        namespace=p.namespace or profile.namespace,
        version_name=p.version_name,
        version_code=p.version_code,
        min_sdk=p.min_sdk,
        target_sdk=p.target_sdk,
        compile_sdk=p.compile_sdk,
        jvm_target=p.jvm_target or profile.jvm_target,
    )

    planned = declare_outputs(_split_config(description, profile))

    variants: List[BuildVariant] = []
    for vm in description.variants:
        specs = (
            [_output_spec(o) for o in vm.outputs]
            if vm.outputs is not None
            else planned
        )
        variants.append(BuildVariant(
            name=vm.name,
            build_type=vm.build_type or vm.name,
            version_name=vm.version_name,
            architectures=tuple(vm.architectures) or profile.abi_filters,
            outputs=[DeclaredOutput(spec=s, version_name=vm.version_name) for s in specs],
        ))

    return ToolchainHost(
        plugin_version=description.toolchain_version,
        defaults=defaults,
        variants=variants,
    )


# ── Orchestration ────────────────────────────────────────────────────────────

def run_naming(
    host: ToolchainHost,
    profile: NamingProfile | None = None,
    output_dir: Optional[Path] = None,
) -> NamingReport:
    """
    Probe *host*, name all of its APK outputs in place, and report.

    Parameters
    ----------
    host : ToolchainHost
        Toolchain collaborator.  Output slots are written in place.
    profile : NamingProfile, optional
        Defaults to NamingProfile.v0().
    output_dir : Path, optional
        Directory to write naming_report.json.  If None, nothing is
        written to disk.

    Returns
    -------
    NamingReport
    """
    if profile is None:
        profile = NamingProfile.v0()

    # ── 1. Probe + shape ─────────────────────────────────────────────
    shape, probe, effective = detect_api_shape(host.read_plugin_version, profile)

    # ── 2. Name outputs ──────────────────────────────────────────────
    named = apply_naming_to_variants(
        shape,
        host,
        default_version_name=host.defaults.version_name,
        profile=profile,
    )

    # ── 3. Collisions ────────────────────────────────────────────────
    name_counts = Counter(n.file_name for n in named)
    collisions = sorted(name for name, c in name_counts.items() if c > 1)
    for name in collisions:
        logger.warning("%d outputs share file name %s", name_counts[name], name)

    total_outputs = sum(len(v.outputs) for v in host.variants)
    report = NamingReport(
        profile_id=profile.profile_id,
        probed_version=probe.value,
        probe_error=probe.error,
        effective_version=effective,
        api_shape=shape.value,
        outputs=[
            NamedOutputEntry(
                variant=n.variant,
                build_type=n.build_type,
                output_id=n.output_id,
                version_name=n.version_name,
                file_name=n.file_name,
            )
            for n in named
        ],
        counts=NamingCounts(
            variants=len(host.variants),
            outputs=total_outputs,
            named=len(named),
            skipped=total_outputs - len(named),
        ),
        collisions=collisions,
    )

    # ── 4. Write outputs ─────────────────────────────────────────────
    if output_dir:
        path = write_report(report, output_dir)
        logger.info("naming report written to %s", path)

    return report


def run_naming_from_path(
    description_path: Path,
    profile: Optional[NamingProfile] = None,
    output_dir: Optional[Path] = None,
) -> NamingReport:
    """Load a build description from disk and run the resolver on it."""
    description = load_build_description(description_path)
    return run_naming(build_host(description, profile), profile, output_dir)


# ── CLI ──────────────────────────────────────────────────────────────────────

def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point for apk_naming."""
    parser = argparse.ArgumentParser(
        description="apk_naming — deterministic APK output file naming",
    )
    parser.add_argument(
        "description",
        help="Path to build_description.json",
    )
    parser.add_argument(
        "-o", "--output-dir",
        type=Path,
        default=None,
        help="Directory to write naming_report.json",
    )
    parser.add_argument(
        "--from-env",
        action="store_true",
        help="Build the profile from APK_NAMING_* settings instead of v0",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    description_path = Path(args.description)
    if not description_path.exists():
        logger.error("File not found: %s", description_path)
        return 1

    profile = NamingProfile.v0()
    if args.from_env:
        profile = NamingProfile.from_settings(Settings())

    try:
        report = run_naming_from_path(description_path, profile, args.output_dir)
    except ValueError as exc:
        logger.error("invalid build description: %s", exc)
        return 1

    # Print summary
    print(f"API shape: {report.api_shape} (toolchain {report.effective_version})")
    for entry in report.outputs:
        print(f"  {entry.variant}/{entry.output_id}: {entry.file_name}")
    print(f"Outputs: {report.counts.outputs} "
          f"(named={report.counts.named}, skipped={report.counts.skipped})")
    if report.collisions:
        print(f"Collisions: {', '.join(report.collisions)}")

    if args.output_dir:
        print(f"Report written to: {args.output_dir}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
