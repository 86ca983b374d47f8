"""Scope management for the global-reference extractor

Models JavaScript/TypeScript lexical scoping:
- Function-like nodes and the program own a function scope (``var`` target)
- Blocks, loop headers, catch clauses and switch bodies own block scopes
- Bindings are visible in their whole scope, regardless of declaration order
- A name is free at a node when no scope on the chain binds it
"""

from enum import Enum
from typing import Dict, List, Optional


class BindingKind(Enum):
    """How a symbol was introduced"""
    VAR = "var"
    LET = "let"
    CONST = "const"
    PARAM = "param"
    FUNCTION = "function"
    CLASS = "class"
    IMPORT = "import"
    CATCH = "catch"
    ENUM = "enum"
    NAMESPACE = "namespace"


class Symbol:
    """Represents one binding of a name"""

    def __init__(
        self,
        name: str,
        scope_id: int,
        kind: BindingKind,
        line: int = 0,
    ) -> None:
        """Initialize symbol

        Args:
            name: Bound name
            scope_id: Scope where the symbol is defined
            kind: Declaration form that introduced the binding
            line: 1-based source line of the declaration (0 if unknown)
        """
        self.name = name
        self.scope_id = scope_id
        self.kind = kind
        self.line = line

    def __repr__(self) -> str:
        return (
            f"Symbol(name={self.name!r}, scope_id={self.scope_id}, "
            f"kind={self.kind.value}, line={self.line})"
        )


class Scope:
    """Represents a lexical scope"""

    def __init__(
        self,
        parent: Optional["Scope"] = None,
        node_type: str = "program",
        is_function: bool = False,
    ) -> None:
        """Initialize scope

        Args:
            parent: Enclosing scope (None for the program scope)
            node_type: Syntax node type that opened the scope
            is_function: True if ``var`` declarations land here
        """
        self.parent = parent
        self.node_type = node_type
        self.is_function = is_function or parent is None
        self.symbols: Dict[str, Symbol] = {}

    def define(self, name: str, kind: BindingKind, line: int = 0) -> Symbol:
        """Define a symbol in this scope

        Redeclarations keep the first binding; JavaScript allows ``var``
        and function redeclaration and the name stays bound either way.

        Args:
            name: Symbol name
            kind: Binding kind
            line: Declaration line

        Returns:
            The symbol bound to ``name`` in this scope
        """
        existing = self.symbols.get(name)
        if existing is not None:
            return existing
        symbol = Symbol(name, id(self), kind, line)
        self.symbols[name] = symbol
        return symbol

    def lookup(self, name: str) -> Optional[Symbol]:
        """Look up a symbol, checking parent scopes

        Args:
            name: Symbol name

        Returns:
            Symbol if found, None otherwise
        """
        scope: Optional[Scope] = self
        while scope is not None:
            symbol = scope.symbols.get(name)
            if symbol is not None:
                return symbol
            scope = scope.parent
        return None

    def lookup_local(self, name: str) -> Optional[Symbol]:
        """Look up a symbol only in this scope"""
        return self.symbols.get(name)

    def has(self, name: str) -> bool:
        return name in self.symbols

    def function_scope(self) -> "Scope":
        """Get the nearest scope receiving ``var`` declarations"""
        scope = self
        while not scope.is_function and scope.parent is not None:
            scope = scope.parent
        return scope

    def get_depth(self) -> int:
        """Get nesting depth of this scope

        Returns:
            Depth (0 for program scope)
        """
        depth = 0
        current = self
        while current.parent:
            depth += 1
            current = current.parent
        return depth

    def is_global(self) -> bool:
        return self.parent is None


class ScopeManager:
    """Tracks the current scope while a tree is walked"""

    def __init__(self) -> None:
        """Initialize scope manager with the program scope"""
        self._global_scope = Scope()
        self._current_scope: Scope = self._global_scope
        self._scope_stack: List[Scope] = [self._global_scope]

    @property
    def current_scope(self) -> Scope:
        """Get current scope"""
        return self._current_scope

    @property
    def global_scope(self) -> Scope:
        """Get program scope"""
        return self._global_scope

    def push_scope(self, node_type: str, is_function: bool = False) -> Scope:
        """Push a new scope

        Args:
            node_type: Syntax node type opening the scope
            is_function: True for function-like scopes

        Returns:
            New scope
        """
        new_scope = Scope(self._current_scope, node_type, is_function)
        self._scope_stack.append(new_scope)
        self._current_scope = new_scope
        return new_scope

    def pop_scope(self) -> Scope:
        """Pop current scope

        Returns:
            Popped scope

        Raises:
            RuntimeError: If trying to pop the program scope
        """
        if len(self._scope_stack) == 1:
            raise RuntimeError("Cannot pop global scope")
        popped = self._scope_stack.pop()
        self._current_scope = self._scope_stack[-1]
        return popped

    def define_lexical(self, name: str, kind: BindingKind, line: int = 0) -> Symbol:
        """Bind a block-scoped name (let, const, class, import, ...)"""
        return self._current_scope.define(name, kind, line)

    def define_var(self, name: str, line: int = 0) -> Symbol:
        """Bind a ``var`` name in the nearest function scope"""
        return self._current_scope.function_scope().define(name, BindingKind.VAR, line)

    def lookup(self, name: str) -> Optional[Symbol]:
        return self._current_scope.lookup(name)

    def current_depth(self) -> int:
        """Get current nesting depth

        Returns:
            Nesting depth (0 for program scope)
        """
        return self._current_scope.get_depth()
