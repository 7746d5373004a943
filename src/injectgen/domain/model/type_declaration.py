"""Type declaration entity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from injectgen.domain.model.enums import TypeKind, Visibility

if TYPE_CHECKING:
    from injectgen.domain.model.constructor_stub import ConstructorStub
    from injectgen.domain.model.location import Location
    from injectgen.domain.model.member import Member


@dataclass(frozen=True, slots=True)
class TypeDeclaration:
    """Immutable snapshot of one class declaration.

    Attributes:
        name: Simple class name
        namespace: Enclosing module name, None when unknown
        containing_types: Enclosing class names, outermost first
        kind: Declaration kind
        members: Data members in source order (fields and properties merged)
        constructor_stubs: Constructor stubs in source order
        location: Source location
    """

    name: str
    namespace: str | None = None
    containing_types: tuple[str, ...] = ()
    kind: TypeKind = TypeKind.CLASS
    members: tuple[Member, ...] = ()
    constructor_stubs: tuple[ConstructorStub, ...] = ()
    location: Location | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("type name must not be empty")

        if not self.name.isidentifier():
            raise ValueError(f"type name '{self.name}' is not a valid identifier")

        if self.namespace == "":
            raise ValueError("namespace must be non-empty string or None")

        for outer in self.containing_types:
            if not outer.isidentifier():
                raise ValueError(f"containing type '{outer}' is not a valid identifier")

        names = [member.name for member in self.members]
        if len(set(names)) != len(names):
            raise ValueError(f"type '{self.name}' declares duplicate member names")

    @property
    def visibility(self) -> Visibility:
        """Access level, spelled by the simple name.

        Python has no access modifier keyword: the leading underscores of
        the name are the modifier. The extension reuses the name verbatim,
        which is how it mirrors the declared type's access level.
        """
        return Visibility.from_name(self.name)

    @property
    def nested_name(self) -> str:
        """Name relative to the namespace (Outer.Inner)."""
        return ".".join((*self.containing_types, self.name))

    @property
    def qualified_name(self) -> str:
        """Fully qualified name (namespace.Outer.Inner)."""
        if self.namespace is None:
            return self.nested_name
        return f"{self.namespace}.{self.nested_name}"
