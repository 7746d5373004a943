"""Parsing exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from injectgen.domain.exceptions.base import InjectGenError

if TYPE_CHECKING:
    from pathlib import Path


class ParsingError(InjectGenError):
    """Declarations could not be read from a source file.

    Raised before any synthesis happens, so no output exists for the file.

    Attributes:
        path: File that failed to parse
        reason: Why parsing failed
        module_name: Module the file was read as, None if not yet known
        line: 1-based line of the failure, None if not tied to a line
    """

    def __init__(
        self,
        path: Path,
        reason: str,
        *,
        module_name: str | None = None,
        line: int | None = None,
    ) -> None:
        # FAIL-FIRST: validate required parameters
        if path is None:
            raise TypeError("path must not be None")
        if not reason:
            raise ValueError("reason must be non-empty string")
        if line is not None and line < 1:
            raise ValueError(f"line must be >= 1, got {line}")

        self.path = path
        self.reason = reason
        self.module_name = module_name
        self.line = line

        where = f"{path}:{line}" if line is not None else str(path)
        if module_name is not None:
            where = f"{where} (module {module_name})"
        super().__init__(f"Failed to parse {where}: {reason}")
