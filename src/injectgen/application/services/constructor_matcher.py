"""Constructor matcher: selects the partial constructor to merge."""

from __future__ import annotations

from typing import TYPE_CHECKING

from injectgen.application.services.marker_resolver import MarkerResolver
from injectgen.domain.model.marker import PARTIAL_CONSTRUCTOR_MARKER

if TYPE_CHECKING:
    from collections.abc import Set

    from injectgen.domain.model.constructor_stub import ConstructorStub
    from injectgen.domain.model.type_declaration import TypeDeclaration
    from injectgen.domain.ports.symbol_resolver import SymbolResolverPort


class ConstructorMatcher:
    """Matches partial constructors against the injected member names.

    A stub matches when it carries the partial-constructor marker and every
    one of its parameter names is an injected member. It may take fewer
    parameters than there are members, never a name outside them.

    Stateless between calls.
    """

    def __init__(
        self,
        marker_resolver: MarkerResolver | None = None,
        partial_constructor_marker: str = PARTIAL_CONSTRUCTOR_MARKER,
    ) -> None:
        """Initialize matcher.

        Args:
            marker_resolver: Marker classifier. New instance if None.
            partial_constructor_marker: Fully qualified name of the marker

        Raises:
            ValueError: If partial_constructor_marker is empty
        """
        if not partial_constructor_marker:
            raise ValueError("partial_constructor_marker must not be empty")

        self._marker_resolver = marker_resolver or MarkerResolver()
        self._marker = partial_constructor_marker

    def matching_stubs(
        self,
        declaration: TypeDeclaration,
        member_names: Set[str],
        resolver: SymbolResolverPort,
    ) -> tuple[ConstructorStub, ...]:
        """All matching stubs, in declaration order.

        Args:
            declaration: Type whose stubs are examined
            member_names: Names of the qualifying members
            resolver: Symbol resolution context

        Returns:
            Matching stubs (usually zero or one)
        """
        return tuple(
            stub
            for stub in declaration.constructor_stubs
            if self._marker_resolver.any_resolves(stub.markers, self._marker, resolver)
            and set(stub.parameters) <= member_names
        )

    def find_stub(
        self,
        declaration: TypeDeclaration,
        member_names: Set[str],
        resolver: SymbolResolverPort,
    ) -> ConstructorStub | None:
        """First matching stub in declaration order.

        Args:
            declaration: Type whose stubs are examined
            member_names: Names of the qualifying members
            resolver: Symbol resolution context

        Returns:
            Matching stub, None if there is none
        """
        matches = self.matching_stubs(declaration, member_names, resolver)
        return matches[0] if matches else None
