"""Symbol resolver backed by a module symbol table."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING

from injectgen.domain.ports.symbol_resolver import SymbolResolverPort

if TYPE_CHECKING:
    from injectgen.domain.model.marker import MarkerOccurrence
    from injectgen.domain.model.symbol_table import SymbolTable


class SymbolTableResolver(SymbolResolverPort):
    """Resolves marker occurrences through a module's bound names.

    Re-export paths listed in `aliases` are mapped to the canonical name of
    the declaration they re-export, so `from injectgen import Inject` and
    `from injectgen.markers import Inject` resolve identically.

    Immutable after construction; safe to share across threads once the
    symbol table is fully built.
    """

    def __init__(
        self,
        symbol_table: SymbolTable,
        aliases: Mapping[str, str] | None = None,
    ) -> None:
        """Initialize resolver.

        Args:
            symbol_table: Names bound in the module
            aliases: Re-export path → canonical fully qualified name

        Raises:
            TypeError: If symbol_table is None (FAIL-FIRST)
        """
        if symbol_table is None:
            raise TypeError("symbol_table must not be None")

        self._symbol_table = symbol_table
        self._aliases = MappingProxyType(dict(aliases or {}))

    def resolve_declaration(self, occurrence: MarkerOccurrence) -> str | None:
        """Resolve occurrence to the fully qualified name it refers to.

        Returns:
            Canonical fully qualified name, None if the reference is not a
            plain name or is not bound in the module (a star import is
            never guessed)
        """
        if occurrence.reference is None:
            return None

        resolved = self._symbol_table.resolve(occurrence.reference)
        if resolved is None:
            return None
        return self._aliases.get(resolved, resolved)
