"""Declaration source port (interface)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from injectgen.domain.model.source_unit import SourceUnit


class DeclarationSourcePort(ABC):
    """Port for turning source files into type declarations.

    Infrastructure layer must provide implementation.
    """

    @abstractmethod
    def parse_file(self, path: Path) -> SourceUnit:
        """Parse single source file.

        Args:
            path: Path to source file

        Returns:
            SourceUnit with candidate declarations

        Raises:
            ParsingError: If file cannot be parsed
        """
        ...

    @abstractmethod
    def parse_directory(self, path: Path) -> tuple[SourceUnit, ...]:
        """Parse directory recursively.

        Args:
            path: Root directory path

        Returns:
            SourceUnits in stable path order

        Raises:
            ParsingError: If any file cannot be parsed
        """
        ...
