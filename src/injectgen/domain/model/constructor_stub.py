"""Hand-written constructor stub entity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from injectgen.domain.model.location import Location
    from injectgen.domain.model.marker import MarkerOccurrence


@dataclass(frozen=True, slots=True)
class ConstructorStub:
    """Constructor declaration whose body is merged into the generated one.

    Exactly one body form is present: a statement block or a single
    expression (lambda form).

    Attributes:
        name: Name the stub is bound to in the class body
        parameters: Declared parameter names, receiver excluded
        markers: Raw marker occurrences, in source order
        statements: Body statements as source text
        expression: Body expression as source text
        location: Source location
        receiver: Name the stub gives the instance (its first parameter).
            The generated constructor reuses it so the body keeps working.
    """

    name: str
    parameters: tuple[str, ...]
    markers: tuple[MarkerOccurrence, ...] = ()
    statements: tuple[str, ...] = ()
    expression: str | None = None
    location: Location | None = None
    receiver: str = "self"

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("constructor stub name must not be empty")

        if not self.statements and self.expression is None:
            raise ValueError(f"constructor stub '{self.name}' has neither body nor expression")

        if self.statements and self.expression is not None:
            raise ValueError(f"constructor stub '{self.name}' has both body and expression")

        if self.expression == "":
            raise ValueError("expression must be non-empty string or None")

        if len(set(self.parameters)) != len(self.parameters):
            raise ValueError(f"constructor stub '{self.name}' has duplicate parameter names")

        if not self.receiver.isidentifier():
            raise ValueError(f"receiver '{self.receiver}' is not a valid identifier")

        if self.receiver in self.parameters:
            raise ValueError(f"receiver '{self.receiver}' is also a parameter of '{self.name}'")

    @property
    def is_expression_form(self) -> bool:
        """Check if body is a single expression."""
        return self.expression is not None

    def body_statements(self) -> tuple[str, ...]:
        """Body as a statement sequence.

        An expression body becomes one expression statement.
        """
        if self.expression is not None:
            return (self.expression,)
        return self.statements
