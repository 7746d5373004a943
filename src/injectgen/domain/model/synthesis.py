"""Synthesis output value objects."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class ConstructorParameter:
    """Generated constructor parameter.

    Attributes:
        declared_type: Annotation source text
        name: Parameter name, equal to the member it initializes
    """

    declared_type: str
    name: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("parameter name must not be empty")
        if not self.declared_type:
            raise ValueError("declared_type must not be empty")

    def __str__(self) -> str:
        """Format as parameter declaration."""
        return f"{self.name}: {self.declared_type}"


@dataclass(frozen=True, slots=True)
class SynthesisResult:
    """Constructor synthesized for one type.

    Attributes:
        qualified_name: Type identity
        parameters: Parameters in member order
        assignments: One "<receiver>.x = x" per parameter, same order
        trailing_body: Merged stub statements, empty when no stub matched
        receiver: Instance parameter name, taken from the merged stub
    """

    qualified_name: str
    parameters: tuple[ConstructorParameter, ...]
    assignments: tuple[str, ...]
    trailing_body: tuple[str, ...] = ()
    receiver: str = "self"

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.qualified_name:
            raise ValueError("qualified_name must not be empty")

        if not self.parameters:
            raise ValueError("synthesis requires at least one parameter")

        if self.receiver in self.parameter_names:
            raise ValueError(
                f"receiver '{self.receiver}' collides with a parameter of {self.qualified_name}"
            )

        if len(self.parameters) != len(self.assignments):
            raise ValueError(
                f"parameters ({len(self.parameters)}) and assignments "
                f"({len(self.assignments)}) must have the same length"
            )

        for parameter, assignment in zip(self.parameters, self.assignments, strict=True):
            expected = f"{self.receiver}.{parameter.name} = {parameter.name}"
            if assignment != expected:
                raise ValueError(f"assignment '{assignment}' must be '{expected}'")

    @property
    def parameter_names(self) -> tuple[str, ...]:
        """Parameter names in order."""
        return tuple(parameter.name for parameter in self.parameters)


@dataclass(frozen=True, slots=True)
class GeneratedSource:
    """Generated source artifact handed to an emission sink.

    Attributes:
        file_name: Suggested file name derived from the type's simple name
        text: Generated source text
        declaring_file: File of the original declaration, None if unknown
    """

    file_name: str
    text: str
    declaring_file: Path | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.file_name:
            raise ValueError("file_name must not be empty")
        if "/" in self.file_name or "\\" in self.file_name:
            raise ValueError(f"file_name '{self.file_name}' must not contain path separators")
        if not self.text:
            raise ValueError("text must not be empty")
