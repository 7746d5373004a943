"""Generation run report."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from injectgen.domain.model.synthesis import GeneratedSource


@dataclass(frozen=True, slots=True)
class GenerationReport:
    """Outcome of a generation run over many type declarations.

    Attributes:
        generated: Emitted sources, in input order
        skipped: Qualified names of types with no injected members
    """

    generated: tuple[GeneratedSource, ...] = ()
    skipped: tuple[str, ...] = ()

    @property
    def total(self) -> int:
        """Number of type declarations examined."""
        return len(self.generated) + len(self.skipped)

    @property
    def generated_count(self) -> int:
        """Number of generated sources."""
        return len(self.generated)
