"""Cached declaration source adapter.

Decorator pattern: wraps an AST declaration source with content-hash based
caching, so unchanged files are not re-analyzed between runs of a
long-lived process (watch mode, editor integration).
"""

from __future__ import annotations

import hashlib
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from injectgen.domain.exceptions.parsing import ParsingError
from injectgen.domain.ports.declaration_source import DeclarationSourcePort

if TYPE_CHECKING:
    from injectgen.domain.model.source_unit import SourceUnit
    from injectgen.infrastructure.adapters.ast_source import ASTDeclarationSource


@dataclass
class CachedDeclarationSource(DeclarationSourcePort):
    """Declaration source with content-hash based caching.

    Uses SHA-256 of file content for invalidation. A unit is reused only
    for the root it was parsed under, since the root decides its module name. In-memory only - no
    persistence between processes. Lives outside the synthesis pipeline:
    the pipeline itself never caches.

    Attributes:
        _inner: Wrapped source
        _cache: Path → (content_hash, root_path, SourceUnit) mapping
    """

    _inner: ASTDeclarationSource
    _cache: dict[Path, tuple[str, Path | None, SourceUnit]] = field(default_factory=dict)
    _lock: threading.Lock = field(default_factory=threading.Lock)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self._inner is None:
            raise TypeError("_inner source must not be None")

    def parse_file(self, path: Path, inner: ASTDeclarationSource | None = None) -> SourceUnit:
        """Parse with cache lookup.

        Cache hit: return cached SourceUnit if content hash and root match.
        Cache miss: parse with inner source, cache result.

        Raises:
            ParsingError: If file cannot be read or parsed
        """
        try:
            content = path.read_bytes()
        except OSError as e:
            raise ParsingError(path, f"cannot read: {e.strerror or e}") from e
        content_hash = hashlib.sha256(content).hexdigest()

        source = inner or self._inner

        with self._lock:
            cached = self._cache.get(path)
        if cached is not None and cached[:2] == (content_hash, source.root_path):
            return cached[2]

        unit = source.parse_file(path)
        with self._lock:
            self._cache[path] = (content_hash, source.root_path, unit)
        return unit

    def parse_directory(self, path: Path) -> tuple[SourceUnit, ...]:
        """Parse directory, reusing cached units for unchanged files."""
        if not path.is_dir():
            raise ParsingError(path, "not a directory")

        inner = self._inner if self._inner.root_path is not None else self._inner.with_root(path)
        return tuple(self.parse_file(file, inner) for file in self._inner.python_files(path))

    def invalidate(self, path: Path | None = None) -> None:
        """Drop one cached file, or everything when path is None."""
        with self._lock:
            if path is None:
                self._cache.clear()
            else:
                self._cache.pop(path, None)

    @property
    def size(self) -> int:
        """Number of cached files."""
        return len(self._cache)
