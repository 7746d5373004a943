"""Infrastructure adapters implementing domain ports."""

from injectgen.infrastructure.adapters.ast_source import ASTDeclarationSource
from injectgen.infrastructure.adapters.cached_source import CachedDeclarationSource
from injectgen.infrastructure.adapters.sinks import DirectorySink, InMemorySink
from injectgen.infrastructure.adapters.symbol_table_resolver import SymbolTableResolver

__all__ = [
    "ASTDeclarationSource",
    "CachedDeclarationSource",
    "DirectorySink",
    "InMemorySink",
    "SymbolTableResolver",
]
