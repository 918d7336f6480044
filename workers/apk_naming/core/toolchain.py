"""
Toolchain — in-memory model of the hosting build toolchain.

The host exposes two incompatible integration surfaces over the same
variant and output records:

  - ``android_components`` (modern): ``on_variants(callback)``; outputs
    carry Property-style ``version_name`` / ``output_file_name``.
  - ``application_variants`` (legacy): ``all(callback)``; variants carry
    ``build_type.name`` and outputs a plain ``output_file_name`` attribute.

Names written through either surface land on the shared DeclaredOutput
records and are read back with ``ToolchainHost.output_file_names()``.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Generic, List, Optional, Sequence, TypeVar

from apk_naming.core.outputs import OutputKind, OutputSpec

T = TypeVar("T")


class ToolchainVersionUnavailable(RuntimeError):
    """The toolchain does not expose its own version."""


# ── Shared records ───────────────────────────────────────────────────────────

@dataclass
class ProjectDefaults:
    """Project-wide configuration, passed explicitly instead of read globally."""
    application_id: str = "com.example.finance_app"
    namespace: str = "com.example.finance_app"
    version_name: Optional[str] = None
    version_code: Optional[int] = None
    min_sdk: Optional[int] = None
    target_sdk: Optional[int] = None
    compile_sdk: Optional[int] = None
    jvm_target: str = "11"


@dataclass
class DeclaredOutput:
    """One package produced by a variant; ``file_name`` is the naming slot."""
    spec: OutputSpec
    version_name: Optional[str] = None
    file_name: Optional[str] = None

    @property
    def output_id(self) -> str:
        return self.spec.output_id

    @property
    def is_apk(self) -> bool:
        return self.spec.kind == OutputKind.APK


@dataclass
class BuildVariant:
    name: str
    build_type: str = ""
    version_name: Optional[str] = None
    architectures: Sequence[str] = ()
    outputs: List[DeclaredOutput] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.build_type:
            self.build_type = self.name


# ── Modern surface ───────────────────────────────────────────────────────────

class Property(Generic[T]):
    """Lazy-property view over one attribute of a record."""

    def __init__(self, owner: object, attr: str):
        self._owner = owner
        self._attr = attr

    def or_none(self) -> Optional[T]:
        return getattr(self._owner, self._attr)

    def set(self, value: T) -> None:
        setattr(self._owner, self._attr, value)


class VariantOutput:
    """Base modern output; only ApkVariantOutput accepts a file name."""

    def __init__(self, record: DeclaredOutput):
        self._record = record
        self.version_name: Property[str] = Property(record, "version_name")

    @property
    def output_id(self) -> str:
        return self._record.output_id


class ApkVariantOutput(VariantOutput):
    def __init__(self, record: DeclaredOutput):
        super().__init__(record)
        self.output_file_name: Property[str] = Property(record, "file_name")


class ModernVariant:
    def __init__(self, record: BuildVariant):
        self.name = record.name
        self.build_type = record.build_type
        self.outputs: List[VariantOutput] = [
            ApkVariantOutput(o) if o.is_apk else VariantOutput(o)
            for o in record.outputs
        ]


class AndroidComponents:
    def __init__(self, variants: List[BuildVariant]):
        self._variants = variants

    def on_variants(self, callback: Callable[[ModernVariant], None]) -> None:
        for v in self._variants:
            callback(ModernVariant(v))


# ── Legacy surface ───────────────────────────────────────────────────────────

@dataclass(frozen=True)
class BuildType:
    name: str


class BaseVariantOutput:
    """Base legacy output; only ApkVariantOutputImpl accepts a file name."""

    def __init__(self, record: DeclaredOutput):
        self._record = record

    @property
    def output_id(self) -> str:
        return self._record.output_id


class ApkVariantOutputImpl(BaseVariantOutput):
    @property
    def output_file_name(self) -> Optional[str]:
        return self._record.file_name

    @output_file_name.setter
    def output_file_name(self, value: str) -> None:
        self._record.file_name = value


class OutputCollection:
    def __init__(self, outputs: List[BaseVariantOutput]):
        self._outputs = outputs

    def all(self, callback: Callable[[BaseVariantOutput], None]) -> None:
        for o in self._outputs:
            callback(o)


class ApplicationVariant:
    def __init__(self, record: BuildVariant):
        self.name = record.name
        self.version_name = record.version_name
        self.build_type = BuildType(record.build_type)
        self.outputs = OutputCollection([
            ApkVariantOutputImpl(o) if o.is_apk else BaseVariantOutput(o)
            for o in record.outputs
        ])


class ApplicationVariants:
    def __init__(self, variants: List[BuildVariant]):
        self._variants = variants

    def all(self, callback: Callable[[ApplicationVariant], None]) -> None:
        for v in self._variants:
            callback(ApplicationVariant(v))


# ── Host ─────────────────────────────────────────────────────────────────────

@dataclass
class ToolchainHost:
    """The build toolchain as seen by the resolver."""
    plugin_version: Optional[str] = None
    defaults: ProjectDefaults = field(default_factory=ProjectDefaults)
    variants: List[BuildVariant] = field(default_factory=list)

    def read_plugin_version(self) -> str:
        if self.plugin_version is None:
            raise ToolchainVersionUnavailable("toolchain does not report its version")
        return self.plugin_version

    @property
    def android_components(self) -> AndroidComponents:
        return AndroidComponents(self.variants)

    @property
    def application_variants(self) -> ApplicationVariants:
        return ApplicationVariants(self.variants)

    def output_file_names(self) -> Dict[str, Dict[str, Optional[str]]]:
        """Return ``{variant_name: {output_id: file_name}}``."""
        return {
            v.name: {o.output_id: o.file_name for o in v.outputs}
            for v in self.variants
        }
