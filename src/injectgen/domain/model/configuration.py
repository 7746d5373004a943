"""Generator configuration."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from injectgen.domain.model.enums import StubPolicy
from injectgen.domain.model.marker import INJECT_MARKER, PARTIAL_CONSTRUCTOR_MARKER

# Public re-exports of the marker types, canonicalized before comparison.
DEFAULT_MARKER_ALIASES: Mapping[str, str] = MappingProxyType(
    {
        "injectgen.Inject": INJECT_MARKER,
        "injectgen.partial_constructor": PARTIAL_CONSTRUCTOR_MARKER,
    }
)


@dataclass(frozen=True, slots=True)
class GeneratorConfig:
    """Constructor generator configuration.

    Immutable configuration object with FAIL-FIRST validation.
    All fields have defaults.

    Attributes:
        inject_marker: Fully qualified name of the inject marker
        partial_constructor_marker: Fully qualified name of the
            partial-constructor marker
        marker_aliases: Re-export path → canonical fully qualified name
        ambiguous_stub_policy: Behaviour when several stubs match
        file_suffix: Appended to the type name to form the output file name
        emit_header: Emit the "generated" comment and namespace header
        indent_width: Spaces per indentation level in generated code
        max_workers: Worker threads for multi-type runs. None = sequential.
    """

    inject_marker: str = INJECT_MARKER
    partial_constructor_marker: str = PARTIAL_CONSTRUCTOR_MARKER
    marker_aliases: Mapping[str, str] = field(default_factory=lambda: DEFAULT_MARKER_ALIASES)
    ambiguous_stub_policy: StubPolicy = StubPolicy.FIRST
    file_suffix: str = ".g.py"
    emit_header: bool = True
    indent_width: int = 4
    max_workers: int | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.inject_marker:
            raise ValueError("inject_marker must not be empty")

        if not self.partial_constructor_marker:
            raise ValueError("partial_constructor_marker must not be empty")

        if self.inject_marker == self.partial_constructor_marker:
            raise ValueError("inject_marker and partial_constructor_marker must differ")

        if not isinstance(self.ambiguous_stub_policy, StubPolicy):
            raise TypeError(
                f"ambiguous_stub_policy must be StubPolicy, "
                f"got {type(self.ambiguous_stub_policy).__name__}"
            )

        if not self.file_suffix.endswith(".py"):
            raise ValueError(f"file_suffix must end with '.py', got '{self.file_suffix}'")

        if self.indent_width < 1:
            raise ValueError(f"indent_width must be >= 1, got {self.indent_width}")

        if self.max_workers is not None and self.max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {self.max_workers}")

        for alias, canonical in self.marker_aliases.items():
            if not alias or not canonical:
                raise ValueError("marker_aliases must map non-empty names")
