"""Structured builder for Python source text.

Code is composed as an ordered list of (depth, text) lines and rendered
to text only at the end. Blocks are opened and closed by a context
manager, so indentation is always balanced and no block is left empty.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator


class SourceBuilder:
    """Accumulates lines and indented blocks of Python source.

    Mutable - one builder per rendered artifact.

    Example:
        builder = SourceBuilder()
        with builder.block("class Widget:"):
            with builder.block("def __init__(self, name: str) -> None:"):
                builder.line("self.name = name")
        text = builder.render()
    """

    def __init__(self, indent_width: int = 4) -> None:
        """Initialize empty builder.

        Args:
            indent_width: Spaces per indentation level

        Raises:
            ValueError: If indent_width < 1 (FAIL-FIRST)
        """
        if indent_width < 1:
            raise ValueError(f"indent_width must be >= 1, got {indent_width}")

        self._indent = " " * indent_width
        self._lines: list[tuple[int, str]] = []
        self._depth = 0

    @property
    def depth(self) -> int:
        """Current block nesting depth."""
        return self._depth

    def line(self, text: str) -> SourceBuilder:
        """Append a statement at the current depth.

        Multi-line text keeps its own relative indentation; every line
        is shifted to the current depth.

        Args:
            text: Statement source, possibly spanning several lines

        Returns:
            self, for chaining

        Raises:
            ValueError: If text is empty or whitespace (FAIL-FIRST)
        """
        if not text or text.isspace():
            raise ValueError("line text must not be empty; use blank() for empty lines")

        for part in text.splitlines():
            self._lines.append((self._depth, part.rstrip()))
        return self

    def lines(self, texts: tuple[str, ...] | list[str]) -> SourceBuilder:
        """Append several statements at the current depth."""
        for text in texts:
            self.line(text)
        return self

    def blank(self, count: int = 1) -> SourceBuilder:
        """Append empty lines."""
        for _ in range(count):
            self._lines.append((0, ""))
        return self

    @contextmanager
    def block(self, header: str) -> Iterator[SourceBuilder]:
        """Open an indented block under a compound statement header.

        A block that receives no statements gets `pass`.

        Args:
            header: Compound statement header ending with ':'

        Raises:
            ValueError: If header does not end with ':' (FAIL-FIRST)
        """
        if not header.rstrip().endswith(":"):
            raise ValueError(f"block header must end with ':', got {header!r}")

        self.line(header)
        start = len(self._lines)
        self._depth += 1
        try:
            yield self
        finally:
            if not any(text for _, text in self._lines[start:]):
                self._lines.append((self._depth, "pass"))
            self._depth -= 1

    def render(self) -> str:
        """Render accumulated lines to text ending with a single newline.

        Raises:
            RuntimeError: If a block is still open
        """
        if self._depth != 0:
            raise RuntimeError(f"cannot render with {self._depth} open block(s)")

        rendered = [f"{self._indent * depth}{text}" if text else "" for depth, text in self._lines]
        return "\n".join(rendered).rstrip("\n") + "\n"
