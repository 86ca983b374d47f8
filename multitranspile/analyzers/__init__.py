"""Analyzers run over parsed scripts

Modules:
- scope_resolver: builds the scope table answering free/bound queries
- global_extractor: collects statements with free browser-global references
"""

from multitranspile.analyzers.scope_resolver import (
    ScopeBuilder, ScopeTable, build_scope_table, pattern_names
)
from multitranspile.analyzers.global_extractor import (
    GlobalExtractor, enclosing_statement, extract_global_code, print_statement
)

__all__ = [
    'ScopeBuilder',
    'ScopeTable',
    'build_scope_table',
    'pattern_names',
    'GlobalExtractor',
    'enclosing_statement',
    'extract_global_code',
    'print_statement',
]
