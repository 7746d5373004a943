"""Data member analyzer: fields and properties of a class body."""

from __future__ import annotations

import ast
from typing import TYPE_CHECKING

from injectgen.domain.model.enums import MemberKind
from injectgen.domain.model.member import Member
from injectgen.infrastructure.analyzers.annotation_analyzer import AnnotationAnalyzer
from injectgen.infrastructure.analyzers.base import dotted_name, make_location
from injectgen.infrastructure.analyzers.marker_analyzer import MarkerAnalyzer

if TYPE_CHECKING:
    from pathlib import Path

    from injectgen.domain.model.symbol_table import SymbolTable

PROPERTY_NAMES = frozenset({"builtins.property", "functools.cached_property"})


class MemberAnalyzer:
    """Extracts data members from a class body.

    Fields are annotated class-level names. Properties are `@property`
    methods with a return annotation. Both come back as one sequence in
    the order they appear in the class body.

    Stateless analyzer - no state between analyze() calls.
    """

    def __init__(self) -> None:
        self._annotation_analyzer = AnnotationAnalyzer()
        self._marker_analyzer = MarkerAnalyzer()

    def analyze(
        self,
        node: ast.ClassDef,
        path: Path,
        symbol_table: SymbolTable,
    ) -> tuple[Member, ...]:
        """Extract members in source order.

        A name annotated twice keeps its last annotation, as at runtime.

        Args:
            node: ClassDef AST node
            path: Source file path
            symbol_table: Names bound in the module

        Returns:
            Tuple of Member objects
        """
        by_name: dict[str, Member] = {}

        for item in node.body:
            member: Member | None = None
            match item:
                case ast.AnnAssign(target=ast.Name(id=name), annotation=annotation):
                    member = self._member(
                        name, annotation, item, MemberKind.FIELD, path, symbol_table
                    )
                case ast.FunctionDef(name=name, returns=returns) if returns is not None:
                    if self._is_property(item, symbol_table):
                        member = self._member(
                            name, returns, item, MemberKind.PROPERTY, path, symbol_table
                        )

            if member is not None:
                by_name.pop(member.name, None)
                by_name[member.name] = member

        return tuple(by_name.values())

    def _member(
        self,
        name: str,
        annotation: ast.expr,
        statement: ast.stmt,
        kind: MemberKind,
        path: Path,
        symbol_table: SymbolTable,
    ) -> Member:
        declared_type, metadata = self._annotation_analyzer.split(annotation, symbol_table)
        # Metadata parsed out of a string has no real position of its own
        anchor = annotation if isinstance(annotation, ast.Constant) else None
        return Member(
            name=name,
            declared_type=declared_type,
            markers=self._marker_analyzer.analyze(metadata, path, anchor),
            kind=kind,
            location=make_location(statement, path),
        )

    def _is_property(self, node: ast.FunctionDef, symbol_table: SymbolTable) -> bool:
        for decorator in node.decorator_list:
            name = dotted_name(decorator)
            if name is None:
                continue
            # Builtins are never imported; an unbound "property" is the builtin
            resolved = symbol_table.resolve(name) or f"builtins.{name}"
            if resolved in PROPERTY_NAMES:
                return True
        return False
