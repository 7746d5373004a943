"""Marker resolver: identity-based marker classification."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from injectgen.domain.model.marker import MarkerOccurrence
    from injectgen.domain.ports.symbol_resolver import SymbolResolverPort


class MarkerResolver:
    """Decides whether a marker occurrence denotes a given marker.

    Compares fully qualified names produced by the symbol model, never the
    text of the occurrence: an unrelated `Inject` from another library
    does not match.

    Stateless - pure function of its inputs.
    """

    def resolves(
        self,
        occurrence: MarkerOccurrence,
        expected: str,
        resolver: SymbolResolverPort,
    ) -> bool:
        """Check if occurrence refers to the expected marker.

        Args:
            occurrence: Marker occurrence as written
            expected: Fully qualified name of the marker
            resolver: Symbol resolution context of the occurrence

        Returns:
            True iff the occurrence resolves to exactly `expected`.
            False if it does not resolve at all.

        Raises:
            ValueError: If expected is empty (FAIL-FIRST)
        """
        if not expected:
            raise ValueError("expected marker name must not be empty")

        resolved = resolver.resolve_declaration(occurrence)
        if resolved is None:
            return False
        return resolved == expected

    def any_resolves(
        self,
        occurrences: Iterable[MarkerOccurrence],
        expected: str,
        resolver: SymbolResolverPort,
    ) -> bool:
        """Check if at least one occurrence refers to the expected marker."""
        return any(self.resolves(occurrence, expected, resolver) for occurrence in occurrences)
