"""
Tests for apk_naming.core.outputs — ABI split planning.
"""
from apk_naming.core.outputs import OutputKind, OutputSpec, SplitConfig, declare_outputs


class TestDeclareOutputs:

    def test_splits_disabled_single_output(self):
        outputs = declare_outputs(SplitConfig(enabled=False, include=("arm64-v8a",)))
        assert outputs == [OutputSpec()]
        assert outputs[0].output_id == "main"

    def test_per_abi_plus_universal(self):
        outputs = declare_outputs(SplitConfig(
            enabled=True,
            include=("armeabi-v7a", "arm64-v8a"),
            universal_apk=True,
        ))
        assert [o.output_id for o in outputs] == ["armeabi-v7a", "arm64-v8a", "universal"]
        assert all(o.kind == OutputKind.APK for o in outputs)

    def test_without_universal(self):
        outputs = declare_outputs(SplitConfig(
            enabled=True, include=("x86_64",), universal_apk=False,
        ))
        assert [o.output_id for o in outputs] == ["x86_64"]

    def test_duplicate_abis_dropped(self):
        outputs = declare_outputs(SplitConfig(
            enabled=True, include=("arm64-v8a", "arm64-v8a"), universal_apk=False,
        ))
        assert len(outputs) == 1

    def test_bundle_output_id(self):
        assert OutputSpec(kind=OutputKind.BUNDLE).output_id == "bundle"
