"""Symbol resolver port (interface)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from injectgen.domain.model.marker import MarkerOccurrence


class SymbolResolverPort(ABC):
    """Port for resolving marker occurrences to declarations.

    The core depends only on this interface, never on a concrete
    parser or symbol model. Infrastructure provides implementations,
    tests provide fakes.
    """

    @abstractmethod
    def resolve_declaration(self, occurrence: MarkerOccurrence) -> str | None:
        """Resolve occurrence to the fully qualified name it refers to.

        Args:
            occurrence: Marker occurrence as written

        Returns:
            Fully qualified name of the referenced declaration,
            None if unresolved or ambiguous
        """
        ...
