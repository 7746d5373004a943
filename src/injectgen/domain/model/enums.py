"""Domain enumerations."""

from __future__ import annotations

from enum import Enum, auto


class Visibility(Enum):
    """Access level by Python naming convention."""

    PUBLIC = auto()  # no underscore
    PROTECTED = auto()  # _name
    PRIVATE = auto()  # __name

    @classmethod
    def from_name(cls, name: str) -> Visibility:
        """Visibility spelled by a name.

        Rules:
            __name__ (dunder) → PUBLIC
            __name (not __name__) → PRIVATE (mangled)
            _name → PROTECTED
            name → PUBLIC
        """
        if name.startswith("__") and name.endswith("__"):
            return cls.PUBLIC
        if name.startswith("__"):
            return cls.PRIVATE
        if name.startswith("_"):
            return cls.PROTECTED
        return cls.PUBLIC


class TypeKind(Enum):
    """Kind of type declaration.

    Python spells every kind with the `class` keyword; the kind is kept
    so the extension mirrors what was declared.
    """

    CLASS = auto()
    DATACLASS = auto()

    @property
    def keyword(self) -> str:
        """Keyword that opens a declaration of this kind."""
        return "class"


class MemberKind(Enum):
    """Data member flavour. Both are collected into one ordered sequence."""

    FIELD = auto()  # name: Annotated[T, ...]
    PROPERTY = auto()  # @property def name(self) -> Annotated[T, ...]


class StubPolicy(Enum):
    """What to do when several partial constructors match one type."""

    FIRST = auto()  # first in declaration order wins, rest ignored
    ERROR = auto()  # raise AmbiguousConstructorStubError
