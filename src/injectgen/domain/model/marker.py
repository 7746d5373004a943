"""Marker occurrence value object and marker identities."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from injectgen.domain.model.location import Location

# Stable marker identities. Renaming either is a breaking change.
INJECT_MARKER = "injectgen.markers.Inject"
PARTIAL_CONSTRUCTOR_MARKER = "injectgen.markers.partial_constructor"


@dataclass(frozen=True, slots=True)
class MarkerOccurrence:
    """One marker reference attached to a member or constructor stub.

    Carries the reference exactly as written. Whether it denotes a known
    marker is decided by symbol resolution, never by comparing this text.

    Attributes:
        expression: Full expression as written (e.g. "markers.Inject()")
        reference: Dotted name being referenced, call stripped
            (e.g. "markers.Inject"). None when the expression is not a
            plain name reference and so cannot be resolved.
        location: Source location, None for synthetic occurrences
    """

    expression: str
    reference: str | None = None
    location: Location | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.expression:
            raise ValueError("marker expression must not be empty")
        if self.reference == "":
            raise ValueError("marker reference must be non-empty string or None")
