"""Script parser shared by every front-end

One tree-sitter parser configured with the TSX grammar handles plain
JavaScript, JSX and TypeScript annotations, so no front-end needs its own
parser configuration.
"""

from dataclasses import dataclass
from typing import Any, Optional

try:
    import tree_sitter_typescript
    from tree_sitter import Language, Parser, Tree
except ImportError:
    raise ImportError(
        "tree-sitter is required. Install with: "
        "pip install tree-sitter tree-sitter-typescript"
    )

from multitranspile.core.errors import ScriptParseError

TSX_LANGUAGE = Language(tree_sitter_typescript.language_tsx())


@dataclass
class ParsedScript:
    """A script body together with the tree parsed from it

    Attributes:
        source: UTF-8 bytes handed to the parser
        tree: tree-sitter syntax tree of ``source``
    """
    source: bytes
    tree: Tree

    @property
    def root(self) -> Any:
        return self.tree.root_node

    @property
    def text(self) -> str:
        return self.source.decode("utf-8")


class ScriptParser:
    """Parses script text as a module-scoped TSX program"""

    def __init__(self) -> None:
        self._parser = Parser(TSX_LANGUAGE)

    def parse(self, script: str) -> ParsedScript:
        """Parse script text

        Args:
            script: JavaScript/TypeScript/JSX source

        Returns:
            Parsed script

        Raises:
            ScriptParseError: If the text contains a syntax error
        """
        source = script.encode("utf-8")
        tree = self._parser.parse(source)
        if tree.root_node.has_error:
            error_node = find_error_node(tree.root_node)
            if error_node is None:
                raise ScriptParseError("Unexpected syntax")
            row, column = error_node.start_point
            if error_node.is_missing:
                message = f'Missing "{error_node.type}"'
            else:
                message = "Unexpected token"
            raise ScriptParseError(message, row + 1, column + 1)
        return ParsedScript(source, tree)


def find_error_node(node: Any) -> Optional[Any]:
    """Find the first ERROR or MISSING node in source order

    Args:
        node: Subtree root

    Returns:
        Offending node, or None if the subtree is clean
    """
    if node.is_error or node.is_missing:
        return node
    if not node.has_error:
        return None
    for child in node.children:
        found = find_error_node(child)
        if found is not None:
            return found
    return None
