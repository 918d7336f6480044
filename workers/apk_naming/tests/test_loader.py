"""
Tests for apk_naming.io.loader — version validation and file loading.
"""
import pytest

from apk_naming.core.outputs import OutputKind
from apk_naming.io.loader import load_build_description, parse_build_description
from apk_naming.tests.conftest import DEBUG_RELEASE


class TestDescriptionVersionValidation:
    """load_build_description() rejects schema versions below 0.1."""

    def test_valid_version_loads(self, write_description):
        desc = load_build_description(write_description(DEBUG_RELEASE))
        assert desc.schema_version == "0.1"
        assert [v.name for v in desc.variants] == ["debug", "release"]

    def test_higher_version_loads(self, write_description):
        desc = load_build_description(write_description({**DEBUG_RELEASE, "schema_version": "0.3"}))
        assert desc.schema_version == "0.3"

    def test_below_minimum_raises(self, write_description):
        path = write_description({**DEBUG_RELEASE, "schema_version": "0.0"})
        with pytest.raises(ValueError, match="schema_version 0.0"):
            load_build_description(path)

    def test_missing_version_raises(self, write_description):
        data = {k: v for k, v in DEBUG_RELEASE.items() if k != "schema_version"}
        with pytest.raises(ValueError, match="schema_version"):
            load_build_description(write_description(data))

    def test_malformed_version_raises(self):
        with pytest.raises(ValueError, match="malformed"):
            parse_build_description({"schema_version": "one"})


class TestDescriptionStructure:

    def test_invalid_json_raises(self, tmp_path):
        p = tmp_path / "broken.json"
        p.write_text("{not json", encoding="utf-8")
        with pytest.raises(ValueError, match="invalid JSON"):
            load_build_description(p)

    def test_non_object_raises(self):
        with pytest.raises(ValueError, match="JSON object"):
            parse_build_description(["schema_version", "0.1"])

    def test_variant_without_name_raises(self):
        with pytest.raises(ValueError):
            parse_build_description({"schema_version": "0.1", "variants": [{}]})

    def test_optional_fields_default(self):
        desc = parse_build_description({"schema_version": "0.1"})
        assert desc.toolchain_version is None
        assert desc.project.version_name is None
        assert desc.splits is None
        assert desc.variants == []

    def test_unknown_output_kind_raises(self):
        data = {
            "schema_version": "0.1",
            "variants": [{"name": "release", "outputs": [{"kind": "AAB"}]}],
        }
        with pytest.raises(ValueError, match="kind"):
            parse_build_description(data)

    def test_output_kind_case_insensitive(self):
        desc = parse_build_description({
            "schema_version": "0.1",
            "variants": [{"name": "release", "outputs": [{"kind": "bundle"}, {}]}],
        })
        assert [o.kind for o in desc.variants[0].outputs] == [
            OutputKind.BUNDLE,
            OutputKind.APK,
        ]
