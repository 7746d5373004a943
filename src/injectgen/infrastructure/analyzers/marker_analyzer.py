"""Marker occurrence analyzer."""

from __future__ import annotations

import ast
from typing import TYPE_CHECKING

from injectgen.domain.model.marker import MarkerOccurrence
from injectgen.infrastructure.analyzers.base import dotted_name, make_location

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path


class MarkerAnalyzer:
    """Turns decorator and `Annotated` metadata expressions into marker occurrences.

    Records what is written; classification happens later by resolution.
    Stateless analyzer - no state between analyze() calls.
    """

    def analyze(
        self,
        expressions: Iterable[ast.expr],
        path: Path,
        anchor: ast.stmt | ast.expr | None = None,
    ) -> tuple[MarkerOccurrence, ...]:
        """Extract occurrences from marker expressions.

        Args:
            expressions: Decorator list or Annotated metadata elements
            path: Source file path
            anchor: Node whose location is used instead of each
                expression's own (for annotations parsed from strings)

        Returns:
            Tuple of MarkerOccurrence objects in source order

        Raises:
            TypeError: If path is None (FAIL-FIRST)
        """
        if path is None:
            raise TypeError("path must not be None")

        return tuple(self._analyze_marker(node, path, anchor) for node in expressions)

    def _analyze_marker(
        self,
        node: ast.expr,
        path: Path,
        anchor: ast.stmt | ast.expr | None,
    ) -> MarkerOccurrence:
        reference: str | None
        match node:
            case ast.Call(func=func):
                # @marker(...) / Annotated[T, Marker()]
                reference = dotted_name(func)
            case _:
                # @marker / Annotated[T, Marker] / anything unresolvable
                reference = dotted_name(node)

        return MarkerOccurrence(
            expression=ast.unparse(node),
            reference=reference,
            location=make_location(anchor if anchor is not None else node, path),
        )
