"""Framework generators and the output variant table"""

from multitranspile.generators.variants import Framework, LanguageMode, OutputVariant
from multitranspile.generators.renderer import render, render_all
from multitranspile.generators.component_emitter import ComponentEmitter

__all__ = [
    'Framework',
    'LanguageMode',
    'OutputVariant',
    'render',
    'render_all',
    'ComponentEmitter',
]
