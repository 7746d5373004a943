"""Domain ports (interfaces)."""

from injectgen.domain.ports.declaration_source import DeclarationSourcePort
from injectgen.domain.ports.emission_sink import EmissionSinkPort
from injectgen.domain.ports.symbol_resolver import SymbolResolverPort

__all__ = [
    "DeclarationSourcePort",
    "EmissionSinkPort",
    "SymbolResolverPort",
]
