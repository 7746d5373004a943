"""Synthesis and emission exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from injectgen.domain.exceptions.base import InjectGenError

if TYPE_CHECKING:
    from pathlib import Path


class AmbiguousConstructorStubError(InjectGenError):
    """More than one partial constructor matches the injected members.

    Only raised when the generator runs with StubPolicy.ERROR.

    Attributes:
        qualified_name: Type with the ambiguous stubs
        stub_names: Names of all matching stubs, in declaration order
    """

    def __init__(self, qualified_name: str, stub_names: tuple[str, ...]) -> None:
        if not qualified_name:
            raise ValueError("qualified_name must be non-empty string")
        if len(stub_names) < 2:
            raise ValueError(f"ambiguity needs at least 2 stubs, got {len(stub_names)}")

        self.qualified_name = qualified_name
        self.stub_names = stub_names
        super().__init__(
            f"{qualified_name}: multiple partial constructors match: {', '.join(stub_names)}"
        )


class EmissionError(InjectGenError):
    """Generated source could not be emitted.

    Attributes:
        path: Target path of the generated file
        reason: Why emission failed
    """

    def __init__(self, path: Path, reason: str) -> None:
        if path is None:
            raise TypeError("path must not be None")
        if not reason:
            raise ValueError("reason must be non-empty string")

        self.path = path
        self.reason = reason
        super().__init__(f"Failed to emit {path}: {reason}")


class GenerationCancelledError(InjectGenError):
    """Generation run was cancelled between type declarations.

    Attributes:
        completed: Number of type declarations processed before cancellation
    """

    def __init__(self, completed: int) -> None:
        if completed < 0:
            raise ValueError(f"completed must be >= 0, got {completed}")

        self.completed = completed
        super().__init__(f"Generation cancelled after {completed} type declaration(s)")
