"""Member collector: injected members of a type, in source order."""

from __future__ import annotations

from typing import TYPE_CHECKING

from injectgen.application.services.marker_resolver import MarkerResolver
from injectgen.domain.model.marker import INJECT_MARKER
from injectgen.domain.model.member import QualifyingMember

if TYPE_CHECKING:
    from injectgen.domain.model.type_declaration import TypeDeclaration
    from injectgen.domain.ports.symbol_resolver import SymbolResolverPort


class MemberCollector:
    """Collects members carrying the inject marker.

    Stateless between collect() calls.
    """

    def __init__(
        self,
        marker_resolver: MarkerResolver | None = None,
        inject_marker: str = INJECT_MARKER,
    ) -> None:
        """Initialize collector.

        Args:
            marker_resolver: Marker classifier. New instance if None.
            inject_marker: Fully qualified name of the inject marker

        Raises:
            ValueError: If inject_marker is empty
        """
        if not inject_marker:
            raise ValueError("inject_marker must not be empty")

        self._marker_resolver = marker_resolver or MarkerResolver()
        self._inject_marker = inject_marker

    def collect(
        self,
        declaration: TypeDeclaration,
        resolver: SymbolResolverPort,
    ) -> tuple[QualifyingMember, ...]:
        """Collect qualifying members in declaration order.

        Fields and properties are already one sequence ordered by position;
        a single pass keeps that order.

        Args:
            declaration: Type to scan
            resolver: Symbol resolution context

        Returns:
            Qualifying members. Empty means the type is not a candidate.
        """
        return tuple(
            QualifyingMember(name=member.name, declared_type=member.declared_type)
            for member in declaration.members
            if self._marker_resolver.any_resolves(member.markers, self._inject_marker, resolver)
        )
