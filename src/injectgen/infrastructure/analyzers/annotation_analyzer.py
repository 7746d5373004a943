"""Annotation analyzer: splits `Annotated[T, ...]` into type and metadata."""

from __future__ import annotations

import ast
from typing import TYPE_CHECKING

from injectgen.infrastructure.analyzers.base import dotted_name

if TYPE_CHECKING:
    from injectgen.domain.model.symbol_table import SymbolTable

ANNOTATED_NAMES = frozenset({"typing.Annotated", "typing_extensions.Annotated"})


class AnnotationAnalyzer:
    """Reads declared types and metadata out of annotations.

    `Annotated` is recognized by what it resolves to, so an aliased
    import works and an unrelated `Annotated` does not.

    Stateless analyzer - no state between split() calls.
    """

    def split(
        self,
        annotation: ast.expr,
        symbol_table: SymbolTable,
    ) -> tuple[str, tuple[ast.expr, ...]]:
        """Split annotation into declared type text and metadata expressions.

        String annotations are parsed first. Nested `Annotated` forms are
        flattened, outer metadata last, as `typing` does.

        Args:
            annotation: Annotation expression
            symbol_table: Names bound in the module

        Returns:
            (declared type source, metadata expressions). Metadata is empty
            for annotations that are not `Annotated`.
        """
        node = self._parse_string(annotation)
        if node is None:
            # Unparseable forward reference: keep it as written
            return ast.unparse(annotation), ()

        elements = self._annotated_elements(node, symbol_table)
        if elements is None:
            return ast.unparse(node), ()

        inner, *metadata = elements
        declared_type, inner_metadata = self.split(inner, symbol_table)
        return declared_type, (*inner_metadata, *metadata)

    def _parse_string(self, annotation: ast.expr) -> ast.expr | None:
        match annotation:
            case ast.Constant(value=str(text)):
                try:
                    return ast.parse(text.strip(), mode="eval").body
                except SyntaxError:
                    return None
        return annotation

    def _annotated_elements(
        self,
        node: ast.expr,
        symbol_table: SymbolTable,
    ) -> list[ast.expr] | None:
        match node:
            case ast.Subscript(value=value, slice=ast.Tuple(elts=elts)) if len(elts) >= 2:
                name = dotted_name(value)
                if name is not None and symbol_table.resolve(name) in ANNOTATED_NAMES:
                    return elts
        return None
