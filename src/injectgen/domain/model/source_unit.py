"""Parsed source unit: declarations plus their resolution context."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from injectgen.domain.model.type_declaration import TypeDeclaration
    from injectgen.domain.ports.symbol_resolver import SymbolResolverPort


@dataclass(frozen=True, slots=True)
class SourceUnit:
    """Type declarations of one source file.

    Attributes:
        path: Declaring file
        module_name: Fully qualified module name
        declarations: Candidate type declarations, in source order
        resolver: Symbol resolution context for marker occurrences in this file
    """

    path: Path
    module_name: str
    declarations: tuple[TypeDeclaration, ...]
    resolver: SymbolResolverPort

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.path is None:
            raise TypeError("path must not be None")
        if not self.module_name:
            raise ValueError("module_name must not be empty")
        if self.resolver is None:
            raise TypeError("resolver must not be None")
