"""Emission sink port (interface)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from injectgen.domain.model.synthesis import GeneratedSource


class EmissionSinkPort(ABC):
    """Port receiving generated sources.

    Feeding the text back into the build is the sink's concern.
    """

    @abstractmethod
    def add_source(self, source: GeneratedSource) -> None:
        """Accept one generated source.

        Args:
            source: File name, text and declaring file

        Raises:
            EmissionError: If the source cannot be stored
        """
        ...
