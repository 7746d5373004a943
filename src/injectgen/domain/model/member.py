"""Data member entities."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from injectgen.domain.model.enums import MemberKind

if TYPE_CHECKING:
    from injectgen.domain.model.location import Location
    from injectgen.domain.model.marker import MarkerOccurrence


@dataclass(frozen=True, slots=True)
class Member:
    """Data member of a type declaration (field or property).

    Attributes:
        name: Identifier as written
        declared_type: Declared type as source text (e.g. "list[int]")
        markers: Raw marker occurrences, in source order
        kind: FIELD or PROPERTY
        location: Source location
    """

    name: str
    declared_type: str
    markers: tuple[MarkerOccurrence, ...] = ()
    kind: MemberKind = MemberKind.FIELD
    location: Location | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("member name must not be empty")
        if not self.name.isidentifier():
            raise ValueError(f"member name '{self.name}' is not a valid identifier")
        if not self.declared_type:
            raise ValueError(f"member '{self.name}' must have a declared type")


@dataclass(frozen=True, slots=True)
class QualifyingMember:
    """Member carrying a resolved inject marker.

    Attributes:
        name: Member name, reused verbatim as the constructor parameter name
        declared_type: Parameter annotation
    """

    name: str
    declared_type: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("member name must not be empty")
        if not self.declared_type:
            raise ValueError("declared_type must not be empty")
