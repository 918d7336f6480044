"""
Outputs — plan which packages a variant declares.

With ABI splitting disabled a variant produces a single APK.  With it
enabled it produces one APK per included ABI, plus a universal APK when
requested.  Architecture lists never influence naming.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, unique
from typing import List, Optional, Sequence


@unique
class OutputKind(str, Enum):
    APK = "APK"
    BUNDLE = "BUNDLE"


@dataclass(frozen=True)
class SplitConfig:
    enabled: bool = False
    include: Sequence[str] = ()
    universal_apk: bool = True


@dataclass(frozen=True)
class OutputSpec:
    """One declared output before naming."""
    kind: OutputKind = OutputKind.APK
    abi: Optional[str] = None
    universal: bool = False

    @property
    def output_id(self) -> str:
        if self.universal:
            return "universal"
        if self.abi:
            return self.abi
        return "main" if self.kind == OutputKind.APK else self.kind.value.lower()


def declare_outputs(splits: SplitConfig) -> List[OutputSpec]:
    """Return the APK outputs a variant declares under *splits*."""
    if not splits.enabled:
        return [OutputSpec()]

    outputs: List[OutputSpec] = []
    seen = set()
    for abi in splits.include:
        if abi in seen:
            continue
        seen.add(abi)
        outputs.append(OutputSpec(abi=abi))

    if splits.universal_apk:
        outputs.append(OutputSpec(universal=True))
    return outputs
