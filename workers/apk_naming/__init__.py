"""
apk_naming — Deterministic output file naming for Android packaging.

Probes the hosting toolchain version, picks the matching integration
surface, and names every APK output ``<prefix>-<version>-<buildType>.apk``.
No compiling, no signing, no build-system invocation.
"""

__version__ = "0.1.0"
RESOLVER_VERSION = "v0"
PACKAGE_NAME = "apk_naming"
SCHEMA_VERSION = "0.1"
