"""Scope resolution over tree-sitter syntax trees

Builds a scope table in one pass over the tree, then answers
"is name X free at node N" for any node of that tree. The extractor
resolves each candidate through ``ScopeTable.resolve``: no symbol means the
name is free, a symbol is the binding that shadows it.
"""

from typing import Any, Dict, Iterator, List, Optional

from multitranspile.core.ast_visitor import (
    ASTVisitor,
    FUNCTION_NODE_TYPES,
    field_child,
    node_line,
    node_text,
)
from multitranspile.core.scope import BindingKind, Scope, ScopeManager, Symbol

# Function-like declarations whose name binds in the enclosing scope
_DECLARATION_FUNCTIONS = frozenset({
    "function_declaration",
    "generator_function_declaration",
})

# Function-like expressions whose name binds only inside themselves
_EXPRESSION_FUNCTIONS = frozenset({
    "function_expression",
    "function",
    "generator_function",
})


class ScopeTable:
    """Scopes of one syntax tree, keyed by the node that opened them"""

    def __init__(self, scopes: Dict[int, Scope], global_scope: Scope) -> None:
        """Initialize scope table

        Args:
            scopes: Mapping of scope-opening node id to its scope
            global_scope: Program scope
        """
        self._scopes = scopes
        self._global_scope = global_scope

    @property
    def global_scope(self) -> Scope:
        return self._global_scope

    def __len__(self) -> int:
        return len(self._scopes)

    def scope_for(self, node: Any) -> Scope:
        """Get the innermost scope containing a node

        Args:
            node: Any node of the tree the table was built from

        Returns:
            Enclosing scope (program scope if none is nearer)
        """
        current = node
        while current is not None:
            scope = self._scopes.get(current.id)
            if scope is not None:
                return scope
            current = current.parent
        return self._global_scope

    def resolve(self, name: str, node: Any) -> Optional[Symbol]:
        """Resolve a name as seen from a node

        Args:
            name: Identifier name
            node: Node where the name is used

        Returns:
            Binding symbol, or None when the name is free
        """
        return self.scope_for(node).lookup(name)

    def is_bound(self, name: str, node: Any) -> bool:
        return self.resolve(name, node) is not None

    def is_free(self, name: str, node: Any) -> bool:
        """Check whether no enclosing declaration binds ``name`` at ``node``"""
        return self.resolve(name, node) is None


def pattern_names(pattern: Any, source: bytes) -> Iterator[Any]:
    """Yield the identifier nodes bound by a binding pattern

    Handles plain identifiers, object/array destructuring, defaults, rest
    elements and TypeScript parameter wrappers. Default-value expressions
    are not bindings and are skipped.

    Args:
        pattern: Pattern node (may be None)
        source: Source bytes of the tree

    Yields:
        Nodes whose text is a bound name
    """
    if pattern is None:
        return
    kind = pattern.type
    if kind in ("identifier", "shorthand_property_identifier_pattern"):
        yield pattern
    elif kind in ("required_parameter", "optional_parameter"):
        yield from pattern_names(field_child(pattern, "pattern"), source)
    elif kind in ("assignment_pattern", "object_assignment_pattern"):
        yield from pattern_names(field_child(pattern, "left"), source)
    elif kind == "pair_pattern":
        yield from pattern_names(field_child(pattern, "value"), source)
    elif kind in ("object_pattern", "array_pattern", "rest_pattern", "formal_parameters"):
        for child in pattern.named_children:
            yield from pattern_names(child, source)


class ScopeBuilder(ASTVisitor):
    """Visitor that records every binding of a tree into scopes"""

    def __init__(self, source: bytes) -> None:
        """Initialize scope builder

        Args:
            source: Bytes the tree was parsed from
        """
        super().__init__()
        self.source = source
        self.scope_manager = ScopeManager()
        self._scopes: Dict[int, Scope] = {}

    def build(self, root: Any) -> ScopeTable:
        """Walk a tree and return its scope table

        Args:
            root: Root node (``program``)

        Returns:
            Scope table for the tree
        """
        self._scopes[root.id] = self.scope_manager.global_scope
        self.generic_visit(root)
        return ScopeTable(self._scopes, self.scope_manager.global_scope)

    def _text(self, node: Any) -> str:
        return node_text(node, self.source)

    def _open_scope(self, node: Any, is_function: bool = False) -> Scope:
        scope = self.scope_manager.push_scope(node.type, is_function)
        self._scopes[node.id] = scope
        return scope

    def _bind_pattern(self, pattern: Any, kind: BindingKind) -> None:
        for name_node in pattern_names(pattern, self.source):
            name = self._text(name_node)
            if kind == BindingKind.VAR:
                self.scope_manager.define_var(name, node_line(name_node))
            else:
                self.scope_manager.define_lexical(name, kind, node_line(name_node))

    def _bind_name(self, node: Optional[Any], kind: BindingKind) -> None:
        if node is not None and node.type in ("identifier", "type_identifier"):
            self.scope_manager.define_lexical(self._text(node), kind, node_line(node))

    # Functions

    def _visit_function(self, node: Any) -> None:
        name = field_child(node, "name")
        if node.type in _DECLARATION_FUNCTIONS:
            self._bind_name(name, BindingKind.FUNCTION)

        self._open_scope(node, is_function=True)
        if node.type in _EXPRESSION_FUNCTIONS:
            self._bind_name(name, BindingKind.FUNCTION)

        single = field_child(node, "parameter")
        if single is not None:
            self._bind_pattern(single, BindingKind.PARAM)
        self._bind_pattern(field_child(node, "parameters"), BindingKind.PARAM)

        self.generic_visit(node)
        self.scope_manager.pop_scope()

    visit_function_declaration = _visit_function
    visit_generator_function_declaration = _visit_function
    visit_function_expression = _visit_function
    visit_function = _visit_function
    visit_generator_function = _visit_function
    visit_arrow_function = _visit_function
    visit_method_definition = _visit_function

    def visit_function_signature(self, node: Any) -> None:
        """Visit ``declare function f(): T`` (no body, binds the name only)"""
        self._bind_name(field_child(node, "name"), BindingKind.FUNCTION)

    def visit_class_static_block(self, node: Any) -> None:
        self._open_scope(node, is_function=True)
        self.generic_visit(node)
        self.scope_manager.pop_scope()

    # Classes

    def _visit_class_declaration(self, node: Any) -> None:
        self._bind_name(field_child(node, "name"), BindingKind.CLASS)
        self._open_scope(node)
        self.generic_visit(node)
        self.scope_manager.pop_scope()

    visit_class_declaration = _visit_class_declaration
    visit_abstract_class_declaration = _visit_class_declaration

    def visit_class(self, node: Any) -> None:
        """Visit class expression (its name is only visible inside)"""
        self._open_scope(node)
        self._bind_name(field_child(node, "name"), BindingKind.CLASS)
        self.generic_visit(node)
        self.scope_manager.pop_scope()

    # Blocks

    def visit_statement_block(self, node: Any) -> None:
        parent = node.parent
        if parent is not None and (
            parent.type in FUNCTION_NODE_TYPES or parent.type == "class_static_block"
        ):
            # Function bodies share the function's scope
            self.generic_visit(node)
            return
        self._open_scope(node)
        self.generic_visit(node)
        self.scope_manager.pop_scope()

    def visit_for_statement(self, node: Any) -> None:
        self._open_scope(node)
        self.generic_visit(node)
        self.scope_manager.pop_scope()

    def visit_for_in_statement(self, node: Any) -> None:
        self._open_scope(node)
        kind = field_child(node, "kind")
        if kind is not None:
            keyword = self._text(kind)
            if keyword == "var":
                binding = BindingKind.VAR
            elif keyword == "const":
                binding = BindingKind.CONST
            else:
                binding = BindingKind.LET
            self._bind_pattern(field_child(node, "left"), binding)
        self.generic_visit(node)
        self.scope_manager.pop_scope()

    def visit_switch_body(self, node: Any) -> None:
        self._open_scope(node)
        self.generic_visit(node)
        self.scope_manager.pop_scope()

    def visit_catch_clause(self, node: Any) -> None:
        self._open_scope(node)
        self._bind_pattern(field_child(node, "parameter"), BindingKind.CATCH)
        self.generic_visit(node)
        self.scope_manager.pop_scope()

    # Declarations

    def visit_variable_declaration(self, node: Any) -> None:
        for declarator in node.named_children:
            if declarator.type == "variable_declarator":
                self._bind_pattern(field_child(declarator, "name"), BindingKind.VAR)
        self.generic_visit(node)

    def visit_lexical_declaration(self, node: Any) -> None:
        kind = field_child(node, "kind")
        keyword = self._text(kind) if kind is not None else self._text(node.children[0])
        binding = BindingKind.CONST if keyword == "const" else BindingKind.LET
        for declarator in node.named_children:
            if declarator.type == "variable_declarator":
                self._bind_pattern(field_child(declarator, "name"), binding)
        self.generic_visit(node)

    def visit_import_statement(self, node: Any) -> None:
        for name_node in self._import_bindings(node):
            self.scope_manager.define_lexical(
                self._text(name_node), BindingKind.IMPORT, node_line(name_node)
            )

    def _import_bindings(self, node: Any) -> List[Any]:
        bindings = []
        for child in node.named_children:
            if child.type == "import_clause":
                for part in child.named_children:
                    if part.type == "identifier":
                        bindings.append(part)
                    elif part.type == "namespace_import":
                        bindings.extend(
                            c for c in part.named_children if c.type == "identifier"
                        )
                    elif part.type == "named_imports":
                        for spec in part.named_children:
                            if spec.type != "import_specifier":
                                continue
                            local = field_child(spec, "alias") or field_child(spec, "name")
                            if local is not None and local.type == "identifier":
                                bindings.append(local)
            elif child.type == "import_require_clause":
                bindings.extend(
                    c for c in child.named_children[:1] if c.type == "identifier"
                )
        return bindings

    def visit_import_alias(self, node: Any) -> None:
        """Visit TypeScript ``import x = A.B``"""
        for child in node.named_children[:1]:
            self._bind_name(child, BindingKind.IMPORT)

    def visit_enum_declaration(self, node: Any) -> None:
        self._bind_name(field_child(node, "name"), BindingKind.ENUM)
        self.generic_visit(node)

    def _visit_namespace(self, node: Any) -> None:
        self._bind_name(field_child(node, "name"), BindingKind.NAMESPACE)
        self._open_scope(node)
        self.generic_visit(node)
        self.scope_manager.pop_scope()

    visit_internal_module = _visit_namespace
    visit_module = _visit_namespace


def build_scope_table(root: Any, source: bytes) -> ScopeTable:
    """Build the scope table of a parsed tree

    Args:
        root: Root node of the tree
        source: Bytes the tree was parsed from

    Returns:
        Scope table answering free/bound queries for nodes of ``root``
    """
    return ScopeBuilder(source).build(root)
