"""Template renderer

Maps every output variant to its framework generator. Rendering is pure:
the global code block is treated as opaque text and no I/O happens here.
"""

from typing import Dict, Iterable, List, Tuple

from multitranspile.generators.angular_generator import AngularGenerator
from multitranspile.generators.react_generator import ReactGenerator
from multitranspile.generators.svelte_generator import SvelteGenerator
from multitranspile.generators.vanilla_generator import VanillaES5Generator, VanillaGenerator
from multitranspile.generators.variants import Framework, OutputVariant
from multitranspile.generators.vue_generator import VueGenerator

_GENERATORS: Dict[Framework, object] = {
    Framework.REACT: ReactGenerator(),
    Framework.VUE: VueGenerator(),
    Framework.SVELTE: SvelteGenerator(),
    Framework.ANGULAR: AngularGenerator(),
    Framework.VANILLA: VanillaGenerator(),
    Framework.VANILLA_ES5: VanillaES5Generator(),
}


def render(variant: OutputVariant, global_code: str) -> str:
    """Render one output variant

    Args:
        variant: Output variant to produce
        global_code: Global code block

    Returns:
        Generated file contents
    """
    generator = _GENERATORS[variant.framework]
    return generator.generate(global_code, variant.is_typescript)


def render_all(
    global_code: str,
    variants: Iterable[OutputVariant] = OutputVariant,
) -> List[Tuple[OutputVariant, str]]:
    """Render several variants, in the given order

    Args:
        global_code: Global code block
        variants: Variants to render (all of them by default)

    Returns:
        (variant, contents) pairs
    """
    return [(variant, render(variant, global_code)) for variant in variants]
