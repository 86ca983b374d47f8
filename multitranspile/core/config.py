"""Run configuration for the transpiler

Holds the identifier set treated as browser globals and the output location.
Built once from command-line arguments and never mutated afterwards.
"""

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import FrozenSet, Iterable

DEFAULT_GLOBAL_IDENTIFIERS: FrozenSet[str] = frozenset(
    {"window", "document", "localStorage"}
)

DEFAULT_OUTPUT_DIR = Path("./transpiled-components")


@dataclass(frozen=True)
class TranspilerConfig:
    """Immutable settings for one transpiler run

    Attributes:
        global_identifiers: Names considered browser-provided globals
        output_dir: Directory receiving the generated components
        verbose: Print the extraction summary after a run
    """
    global_identifiers: FrozenSet[str] = DEFAULT_GLOBAL_IDENTIFIERS
    output_dir: Path = field(default=DEFAULT_OUTPUT_DIR)
    verbose: bool = False

    def with_globals(self, names: Iterable[str]) -> "TranspilerConfig":
        """Return a copy whose identifier set also contains ``names``

        Args:
            names: Extra global identifier names

        Returns:
            New configuration
        """
        extra = frozenset(name for name in names if name)
        return replace(self, global_identifiers=self.global_identifiers | extra)

    @classmethod
    def from_args(cls, args) -> "TranspilerConfig":
        """Build configuration from parsed argparse namespace

        Args:
            args: Namespace with ``output_dir``, ``globals`` and ``verbose``

        Returns:
            Configuration for this run
        """
        config = cls(
            output_dir=Path(args.output_dir),
            verbose=bool(getattr(args, "verbose", False)),
        )
        return config.with_globals(getattr(args, "globals", None) or [])
