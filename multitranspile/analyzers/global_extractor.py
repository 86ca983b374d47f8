"""Global-reference extractor

AST visitor that finds every free reference to a browser-global identifier
(``window``, ``document``, ``localStorage`` by default) and collects the
statement containing it. The collected statements, de-duplicated by their
printed text and kept in order of first appearance, form the global code
block handed to every template.

Usage:
    parsed = ScriptParser().parse(source)
    code = extract_global_code(parsed)
"""

from typing import TYPE_CHECKING, Any, Dict, FrozenSet, Iterable, Optional

from multitranspile.analyzers.scope_resolver import ScopeTable, build_scope_table
from multitranspile.core.ast_visitor import ASTVisitor, field_child, node_line, node_text
from multitranspile.core.config import DEFAULT_GLOBAL_IDENTIFIERS
from multitranspile.core.extraction_logger import ExtractionLogger

if TYPE_CHECKING:
    from multitranspile.frontends.parser import ParsedScript

# Containers whose direct children are statements in a statement list
_STATEMENT_LIST_PARENTS = frozenset({"program", "statement_block"})
_SWITCH_CLAUSES = frozenset({"switch_case", "switch_default"})

# Statements ending in a semicolon (possibly inserted automatically)
_TERMINATED_STATEMENTS = frozenset({
    "expression_statement",
    "variable_declaration",
    "lexical_declaration",
    "return_statement",
    "throw_statement",
    "break_statement",
    "continue_statement",
    "debugger_statement",
    "do_statement",
    "import_statement",
    "type_alias_declaration",
})

_JSX_ELEMENTS = frozenset({
    "jsx_opening_element",
    "jsx_closing_element",
    "jsx_self_closing_element",
})


def enclosing_statement(node: Any) -> Any:
    """Find the statement holding a node

    The statement is the nearest ancestor sitting directly in a statement
    list: the program body, a block or function body, or a switch clause
    body (a case label expression is not a statement).

    Args:
        node: Any node below the program

    Returns:
        Statement node (the node itself when it already is one)
    """
    current = node
    while current.parent is not None:
        parent = current.parent
        if parent.type in _STATEMENT_LIST_PARENTS and current.type != "comment":
            return current
        if parent.type in _SWITCH_CLAUSES and current != field_child(parent, "value"):
            return current
        current = parent
    return current


def print_statement(statement: Any, source: bytes) -> str:
    """Get the printed text of a statement

    The text is the statement's own source slice, without trailing comments
    the grammar attaches to it. Statements that rely on automatic semicolon
    insertion get an explicit ``;``.

    Args:
        statement: Statement node
        source: Bytes the tree was parsed from

    Returns:
        Statement source text
    """
    end = statement.end_byte
    for child in reversed(statement.children):
        if child.type != "comment":
            end = child.end_byte
            break
    text = source[statement.start_byte:end].decode("utf-8").rstrip()
    if _needs_terminator(statement) and not text.endswith(";"):
        text += ";"
    return text


def _needs_terminator(statement: Any) -> bool:
    if statement.type in _TERMINATED_STATEMENTS:
        return True
    if statement.type == "export_statement":
        return field_child(statement, "declaration") is None
    return False


class GlobalExtractor(ASTVisitor):
    """Collects statements that reference free global identifiers"""

    def __init__(
        self,
        source: bytes,
        scope_table: ScopeTable,
        global_identifiers: Iterable[str] = DEFAULT_GLOBAL_IDENTIFIERS,
        logger: Optional[ExtractionLogger] = None,
    ) -> None:
        """Initialize global extractor

        Args:
            source: Bytes the tree was parsed from
            scope_table: Scope table built from the same tree
            global_identifiers: Names treated as browser globals
            logger: Optional logger receiving kept/shadowed references
        """
        super().__init__()
        self.source = source
        self.scope_table = scope_table
        self.global_identifiers: FrozenSet[str] = frozenset(global_identifiers)
        self.logger = logger
        # Printed statement text -> None; dict keeps first-seen order
        self._statements: Dict[str, None] = {}

    def extract(self, root: Any) -> str:
        """Walk a tree and return its global code block

        Args:
            root: Root node of the tree

        Returns:
            Newline-joined statements, empty string when none qualify
        """
        self._statements.clear()
        self.visit(root)
        return "\n".join(self._statements)

    @property
    def statements(self) -> list:
        return list(self._statements)

    def visit_identifier(self, node: Any) -> None:
        self._check_reference(node)

    def visit_shorthand_property_identifier(self, node: Any) -> None:
        """Visit ``{ window }`` object shorthand (a read of ``window``)"""
        self._check_reference(node)

    def visit_import_statement(self, node: Any) -> None:
        pass  # Import specifiers name exports, they never read a global

    def visit_export_specifier(self, node: Any) -> None:
        # Only the local side of ``export { a as b }`` is a reference
        name = field_child(node, "name")
        if name is not None:
            self.visit(name)

    def _check_reference(self, node: Any) -> None:
        name = node_text(node, self.source)
        if name not in self.global_identifiers:
            return
        if self._is_jsx_tag_name(node):
            return

        symbol = self.scope_table.resolve(name, node)
        if symbol is not None:
            if self.logger is not None:
                self.logger.log_shadowed(name, node_line(node), symbol.kind.value, symbol.line)
            return

        statement = enclosing_statement(node)
        text = print_statement(statement, self.source)
        self._statements.setdefault(text, None)
        if self.logger is not None:
            self.logger.log_reference(name, node_line(node), node.start_point[1] + 1, text)

    @staticmethod
    def _is_jsx_tag_name(node: Any) -> bool:
        """Check if an identifier is (part of) a JSX element name"""
        current = node
        parent = current.parent
        while parent is not None and parent.type in (
            "member_expression", "nested_identifier", "jsx_namespace_name"
        ):
            current = parent
            parent = current.parent
        if parent is None or parent.type not in _JSX_ELEMENTS:
            return False
        return current == field_child(parent, "name")


def extract_global_code(
    parsed: Optional["ParsedScript"],
    global_identifiers: Iterable[str] = DEFAULT_GLOBAL_IDENTIFIERS,
    logger: Optional[ExtractionLogger] = None,
) -> str:
    """Extract the global code block from a parsed script

    Args:
        parsed: Parsed script, or None when the input had no script
        global_identifiers: Names treated as browser globals
        logger: Optional extraction logger

    Returns:
        Global code block (empty string if nothing qualifies)
    """
    if parsed is None:
        return ""
    root = parsed.tree.root_node
    scope_table = build_scope_table(root, parsed.source)
    extractor = GlobalExtractor(parsed.source, scope_table, global_identifiers, logger)
    return extractor.extract(root)
