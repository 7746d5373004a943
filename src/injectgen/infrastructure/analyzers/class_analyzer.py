"""Class analyzer: ClassDef → TypeDeclaration snapshots."""

from __future__ import annotations

import ast
from typing import TYPE_CHECKING

from injectgen.domain.model.enums import MemberKind, TypeKind
from injectgen.domain.model.type_declaration import TypeDeclaration
from injectgen.infrastructure.analyzers.base import (
    dotted_name,
    make_location,
)
from injectgen.infrastructure.analyzers.constructor_analyzer import ConstructorStubAnalyzer
from injectgen.infrastructure.analyzers.member_analyzer import MemberAnalyzer

if TYPE_CHECKING:
    from pathlib import Path

    from injectgen.domain.model.symbol_table import SymbolTable

DATACLASS_NAMES = frozenset({"dataclasses.dataclass"})


def is_candidate(node: ast.ClassDef) -> bool:
    """Cheap syntactic pre-filter run before any resolution.

    A class can only yield a constructor when some member could carry an
    `Annotated` form: a class-level annotation that is a subscript or a
    string, or a decorated method with a return annotation. Stubs alone
    never make a class a candidate.

    Args:
        node: ClassDef AST node

    Returns:
        True if the class may carry injected members
    """
    for item in node.body:
        match item:
            case ast.AnnAssign(annotation=ast.Subscript() | ast.Constant(value=str())):
                return True
            case ast.FunctionDef(decorator_list=decorators, returns=returns) if (
                decorators and returns is not None
            ):
                return True
    return False


class ClassAnalyzer:
    """Builds TypeDeclaration snapshots from class definitions.

    Nested classes are analyzed as declarations of their own with their
    enclosing class names recorded.

    Stateless analyzer - no state between analyze() calls.
    """

    def __init__(self) -> None:
        self._member_analyzer = MemberAnalyzer()
        self._stub_analyzer = ConstructorStubAnalyzer()

    def analyze(
        self,
        node: ast.ClassDef,
        path: Path,
        module_name: str,
        symbol_table: SymbolTable,
        containing_types: tuple[str, ...] = (),
    ) -> tuple[TypeDeclaration, ...]:
        """Analyze class and its nested classes.

        Args:
            node: ClassDef AST node
            path: Source file path
            module_name: Fully qualified module name
            symbol_table: Names bound in the module
            containing_types: Enclosing class names, outermost first

        Returns:
            Declarations that pass is_candidate(), outer class first

        Raises:
            TypeError: If required parameters are None (FAIL-FIRST)
            ValueError: If module_name is empty (FAIL-FIRST)
        """
        if node is None:
            raise TypeError("node must not be None")
        if path is None:
            raise TypeError("path must not be None")
        if not module_name:
            raise ValueError("module_name must be non-empty string")

        declarations: list[TypeDeclaration] = []

        if is_candidate(node):
            declarations.append(
                self._declaration(node, path, module_name, symbol_table, containing_types)
            )

        for item in node.body:
            if isinstance(item, ast.ClassDef):
                declarations.extend(
                    self.analyze(
                        item,
                        path,
                        module_name,
                        symbol_table,
                        (*containing_types, node.name),
                    )
                )

        return tuple(declarations)

    def _declaration(
        self,
        node: ast.ClassDef,
        path: Path,
        module_name: str,
        symbol_table: SymbolTable,
        containing_types: tuple[str, ...],
    ) -> TypeDeclaration:
        members = self._member_analyzer.analyze(node, path, symbol_table)
        properties = frozenset(m.name for m in members if m.kind is MemberKind.PROPERTY)

        return TypeDeclaration(
            name=node.name,
            namespace=module_name,
            containing_types=containing_types,
            kind=self._kind(node, symbol_table),
            members=members,
            constructor_stubs=self._stub_analyzer.analyze(node, path, properties),
            location=make_location(node, path),
        )

    def _kind(self, node: ast.ClassDef, symbol_table: SymbolTable) -> TypeKind:
        for decorator in node.decorator_list:
            target = decorator.func if isinstance(decorator, ast.Call) else decorator
            name = dotted_name(target)
            if name is not None and symbol_table.resolve(name) in DATACLASS_NAMES:
                return TypeKind.DATACLASS
        return TypeKind.CLASS
