"""Output variants

The set of generated files is closed: one enum member per output file,
each carrying its framework, language mode and path relative to the
output directory.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import PurePosixPath


class Framework(Enum):
    """Target framework of a generated file"""
    REACT = "react"
    VUE = "vue"
    SVELTE = "svelte"
    ANGULAR = "angular"
    VANILLA = "vanilla"
    VANILLA_ES5 = "vanilla-es5"


class LanguageMode(Enum):
    """Script language of a generated file"""
    JAVASCRIPT = "javascript"
    TYPESCRIPT = "typescript"


@dataclass(frozen=True)
class VariantInfo:
    framework: Framework
    language: LanguageMode
    path: PurePosixPath

    @property
    def is_typescript(self) -> bool:
        return self.language == LanguageMode.TYPESCRIPT


ANGULAR_DIR = "angular_folder"


class OutputVariant(Enum):
    """Every file produced by one run, in write order"""
    REACT_JSX = VariantInfo(Framework.REACT, LanguageMode.JAVASCRIPT, PurePosixPath("file.jsx"))
    REACT_TSX = VariantInfo(Framework.REACT, LanguageMode.TYPESCRIPT, PurePosixPath("file.tsx"))
    VUE_JS = VariantInfo(Framework.VUE, LanguageMode.JAVASCRIPT, PurePosixPath("file.vue"))
    VUE_TS = VariantInfo(Framework.VUE, LanguageMode.TYPESCRIPT, PurePosixPath("file.ts.vue"))
    SVELTE_JS = VariantInfo(Framework.SVELTE, LanguageMode.JAVASCRIPT, PurePosixPath("file.svelte"))
    SVELTE_TS = VariantInfo(Framework.SVELTE, LanguageMode.TYPESCRIPT, PurePosixPath("file.ts.svelte"))
    ANGULAR_TS = VariantInfo(
        Framework.ANGULAR,
        LanguageMode.TYPESCRIPT,
        PurePosixPath(ANGULAR_DIR) / "my-component.component.ts",
    )
    VANILLA_JS = VariantInfo(Framework.VANILLA, LanguageMode.JAVASCRIPT, PurePosixPath("file.js"))
    VANILLA_ES5 = VariantInfo(Framework.VANILLA_ES5, LanguageMode.JAVASCRIPT, PurePosixPath("file.es5.js"))
    VANILLA_TS = VariantInfo(Framework.VANILLA, LanguageMode.TYPESCRIPT, PurePosixPath("file.ts"))

    @property
    def framework(self) -> Framework:
        return self.value.framework

    @property
    def language(self) -> LanguageMode:
        return self.value.language

    @property
    def path(self) -> PurePosixPath:
        return self.value.path

    @property
    def is_typescript(self) -> bool:
        return self.value.is_typescript
