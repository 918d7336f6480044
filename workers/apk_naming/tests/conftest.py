"""
Shared pytest fixtures for apk_naming tests.

All fixtures are pure-Python — no Android toolchain, no Gradle.
The resolver operates on an in-memory ToolchainHost built from
build-description dicts.
"""
import json

import pytest

from apk_naming.io.loader import parse_build_description
from apk_naming.policy.profile import NamingProfile
from apk_naming.runner import build_host


# ── Build descriptions ───────────────────────────────────────────────────────

DEBUG_RELEASE = {
    "schema_version": "0.1",
    "toolchain_version": "8.1.0",
    "project": {
        "application_id": "com.example.finance_app",
        "version_name": "1.0.0",
        "version_code": 1,
        "min_sdk": 21,
        "target_sdk": 34,
    },
    "variants": [
        {"name": "debug"},
        {"name": "release", "version_name": "2.3.0"},
    ],
}

# Splits enabled + an extra bundle output on release.
SPLIT_WITH_BUNDLE = {
    "schema_version": "0.1",
    "toolchain_version": "7.4.2",
    "project": {"version_name": "3.0.0"},
    "splits": {
        "enabled": True,
        "include": ["armeabi-v7a", "arm64-v8a"],
        "universal_apk": True,
    },
    "variants": [
        {"name": "debug"},
        {
            "name": "release",
            "outputs": [
                {"kind": "APK"},
                {"kind": "BUNDLE"},
            ],
        },
    ],
}


@pytest.fixture
def profile():
    return NamingProfile.v0()


@pytest.fixture
def make_host(profile):
    """Factory: build-description dict → fresh ToolchainHost."""
    def _make(data):
        return build_host(parse_build_description(data), profile)
    return _make


@pytest.fixture
def debug_release_host(make_host):
    return make_host(DEBUG_RELEASE)


@pytest.fixture
def split_host(make_host):
    return make_host(SPLIT_WITH_BUNDLE)


@pytest.fixture
def write_description(tmp_path):
    """Factory: dict → path of a build_description.json under tmp_path."""
    def _write(data, name="build_description.json"):
        p = tmp_path / name
        p.write_text(json.dumps(data), encoding="utf-8")
        return p
    return _write
