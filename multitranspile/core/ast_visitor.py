"""AST visitor base class for tree-sitter syntax trees

Provides a visitor pattern over the nodes produced by the TSX grammar.
Dispatch is on ``node.type``; only named nodes are visited.
"""

from abc import ABC
from typing import Any, Optional

# Node types that introduce a function scope
FUNCTION_NODE_TYPES = frozenset({
    "function_declaration",
    "function_expression",
    "function",
    "generator_function_declaration",
    "generator_function",
    "arrow_function",
    "method_definition",
})


class ASTVisitor(ABC):
    """Base visitor for tree-sitter traversal

    Override visit_<node_type> methods to handle specific node types.
    Call self.generic_visit(node) to continue into children.
    """

    def visit(self, node: Any) -> Any:
        """Visit a node using double-dispatch on its type

        Args:
            node: tree-sitter Node

        Returns:
            Result from visit method (often None)
        """
        method = getattr(self, f"visit_{node.type}", self.generic_visit)
        return method(node)

    def generic_visit(self, node: Any) -> None:
        """Default visitor - visit all named child nodes in source order

        Args:
            node: tree-sitter Node
        """
        for child in node.named_children:
            self.visit(child)

    def visit_comment(self, node: Any) -> None:
        pass  # Comments never hold references


def node_text(node: Any, source: bytes) -> str:
    """Get the source text covered by a node

    Args:
        node: tree-sitter Node
        source: Bytes the tree was parsed from

    Returns:
        Decoded text of the node
    """
    return source[node.start_byte:node.end_byte].decode("utf-8")


def node_line(node: Any) -> int:
    """Get 1-based line number where a node starts"""
    return node.start_point[0] + 1


def field_child(node: Any, field_name: str) -> Optional[Any]:
    """Shorthand for ``node.child_by_field_name`` tolerant of None nodes"""
    if node is None:
        return None
    return node.child_by_field_name(field_name)
