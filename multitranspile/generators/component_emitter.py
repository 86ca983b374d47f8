"""Component emitter

Writes every rendered output variant below an output directory. All
variants are rendered before the first file is written.
"""

from pathlib import Path
from typing import List, Union

from multitranspile.generators.renderer import render_all


class ComponentEmitter:
    """Emits the full output file set for one global code block"""

    def __init__(self, output_dir: Union[str, Path]) -> None:
        """Initialize component emitter

        Args:
            output_dir: Directory receiving the files (created if absent)
        """
        self.output_dir = Path(output_dir)

    def emit(self, global_code: str) -> List[Path]:
        """Render and write all output variants

        Args:
            global_code: Global code block

        Returns:
            Written file paths, in variant order
        """
        rendered = render_all(global_code)

        self.output_dir.mkdir(parents=True, exist_ok=True)
        written = []
        for variant, contents in rendered:
            target = self.output_dir.joinpath(*variant.path.parts)
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(contents, encoding="utf-8")
            written.append(target)
        return written
