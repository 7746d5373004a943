"""Emission sink adapters."""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import TYPE_CHECKING

from injectgen.domain.exceptions.synthesis import EmissionError
from injectgen.domain.ports.emission_sink import EmissionSinkPort

if TYPE_CHECKING:
    from collections.abc import Mapping

    from injectgen.domain.model.synthesis import GeneratedSource

logger = logging.getLogger(__name__)


class InMemorySink(EmissionSinkPort):
    """Collects generated sources by file name.

    Thread-safe. Two sources with the same file name are an error.
    """

    def __init__(self) -> None:
        self._sources: dict[str, GeneratedSource] = {}
        self._lock = threading.Lock()

    def add_source(self, source: GeneratedSource) -> None:
        """Store source under its file name.

        Raises:
            EmissionError: If a source with the same file name was added
        """
        with self._lock:
            if source.file_name in self._sources:
                raise EmissionError(Path(source.file_name), "duplicate generated file name")
            self._sources[source.file_name] = source

    @property
    def sources(self) -> Mapping[str, GeneratedSource]:
        """File name → source, in insertion order."""
        with self._lock:
            return dict(self._sources)

    def text(self, file_name: str) -> str:
        """Generated text for a file name.

        Raises:
            KeyError: If nothing was emitted under that name
        """
        with self._lock:
            return self._sources[file_name].text


class DirectorySink(EmissionSinkPort):
    """Writes generated sources to disk.

    Files go next to their declaring file, or into `output_dir` when set.
    A file whose content is already identical is left untouched so that
    file watchers and build caches do not see a change.

    Thread-safe. One instance tracks the paths it wrote during its
    lifetime; writing the same path twice is an error. A path whose write
    failed is released and may be written again.
    """

    def __init__(self, output_dir: Path | None = None, encoding: str = "utf-8") -> None:
        """Initialize sink.

        Args:
            output_dir: Target directory. None = beside each declaring file.
            encoding: Text encoding of written files
        """
        self._output_dir = output_dir
        self._encoding = encoding
        self._written: list[Path] = []
        self._unchanged: list[Path] = []
        self._seen: set[Path] = set()
        self._lock = threading.Lock()

    def add_source(self, source: GeneratedSource) -> None:
        """Write source to its target path.

        Raises:
            EmissionError: If no target directory is known, the path was
                already emitted, or the file cannot be written
        """
        target = self.target_path(source)

        with self._lock:
            if target in self._seen:
                raise EmissionError(target, "generated twice in one run")
            self._seen.add(target)

        try:
            if target.is_file() and target.read_text(encoding=self._encoding) == source.text:
                logger.debug("%s: unchanged", target)
                with self._lock:
                    self._unchanged.append(target)
                return

            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(source.text, encoding=self._encoding)
        except OSError as e:
            # A failed write does not count as emitted; a retry may claim it again
            with self._lock:
                self._seen.discard(target)
            raise EmissionError(target, e.strerror or str(e)) from e

        logger.debug("%s: written", target)
        with self._lock:
            self._written.append(target)

    def target_path(self, source: GeneratedSource) -> Path:
        """Path the source is written to.

        Raises:
            EmissionError: If neither output_dir nor declaring_file is set
        """
        if self._output_dir is not None:
            return self._output_dir / source.file_name
        if source.declaring_file is None:
            raise EmissionError(
                Path(source.file_name), "no output directory and no declaring file"
            )
        return source.declaring_file.parent / source.file_name

    @property
    def written(self) -> tuple[Path, ...]:
        """Paths written (new or changed content)."""
        with self._lock:
            return tuple(self._written)

    @property
    def unchanged(self) -> tuple[Path, ...]:
        """Paths skipped because content was identical."""
        with self._lock:
            return tuple(self._unchanged)
