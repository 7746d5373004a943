"""Import statement analyzer."""

from __future__ import annotations

import ast
from typing import TYPE_CHECKING

from injectgen.domain.model.import_ import Import
from injectgen.infrastructure.analyzers.base import make_location, resolve_relative_import
from injectgen.infrastructure.analyzers.context import AnalysisContext, ContextType

if TYPE_CHECKING:
    from pathlib import Path


class ImportAnalyzer:
    """Extracts module-scope imports from Python AST.

    Imports inside functions and class bodies do not bind module names
    and are left out. TYPE_CHECKING imports are kept: annotations and
    markers may be imported only for the type checker.

    Stateless analyzer - no state between analyze() calls.
    """

    def analyze(
        self,
        tree: ast.Module,
        path: Path,
        module_name: str,
        *,
        is_package: bool = False,
    ) -> tuple[Import, ...]:
        """Extract module-scope imports.

        Args:
            tree: Parsed AST module
            path: Source file path
            module_name: Fully qualified module name
            is_package: Module is a package __init__

        Returns:
            Tuple of Import objects in source order
        """
        visitor = _ImportVisitor(path, module_name, is_package)
        visitor.visit(tree)
        return tuple(visitor.imports)


class _ImportVisitor(ast.NodeVisitor):
    """Collects imports with scope tracking."""

    def __init__(self, path: Path, module_name: str, is_package: bool) -> None:
        # FAIL-FIRST: validate required parameters
        if path is None:
            raise TypeError("path must not be None")
        if not module_name:
            raise ValueError("module_name must be non-empty string")

        self.path = path
        self.module_name = module_name
        self.is_package = is_package
        self.imports: list[Import] = []
        self.context = AnalysisContext()

    def visit_Module(self, node: ast.Module) -> None:
        self.context.push(ContextType.MODULE)
        self.generic_visit(node)
        self.context.pop()

    def visit_Import(self, node: ast.Import) -> None:
        """Handle: import X, import X as Y."""
        if not self.context.in_module_scope:
            return

        for alias in node.names:
            self.imports.append(
                Import(
                    module=alias.name,
                    name=None,
                    alias=alias.asname,
                    location=make_location(node, self.path),
                    level=0,
                    is_type_checking=self.context.in_type_checking,
                )
            )

    def visit_ImportFrom(self, node: ast.ImportFrom) -> None:
        """Handle: from X import Y, from . import Y."""
        if not self.context.in_module_scope:
            return

        try:
            resolved_module = resolve_relative_import(
                node.module,
                node.level,
                self.module_name,
                is_package=self.is_package,
            )
        except ValueError:
            # Relative import beyond the analyzed root: binds nothing we can name
            return

        for alias in node.names:
            self.imports.append(
                Import(
                    module=resolved_module,
                    name=alias.name,
                    alias=alias.asname,
                    location=make_location(node, self.path),
                    level=node.level,
                    is_type_checking=self.context.in_type_checking,
                )
            )

    def visit_If(self, node: ast.If) -> None:
        """Track TYPE_CHECKING and conditional blocks."""
        if self._is_type_checking_block(node):
            self.context.push(ContextType.TYPE_CHECKING)
        else:
            self.context.push(ContextType.CONDITIONAL)

        self.generic_visit(node)
        self.context.pop()

    def visit_Try(self, node: ast.Try) -> None:
        """Track try blocks as conditional."""
        self.context.push(ContextType.CONDITIONAL)
        self.generic_visit(node)
        self.context.pop()

    def visit_FunctionDef(self, node: ast.FunctionDef) -> None:
        self.context.push(ContextType.FUNCTION)
        self.generic_visit(node)
        self.context.pop()

    def visit_AsyncFunctionDef(self, node: ast.AsyncFunctionDef) -> None:
        self.context.push(ContextType.FUNCTION)
        self.generic_visit(node)
        self.context.pop()

    def visit_ClassDef(self, node: ast.ClassDef) -> None:
        self.context.push(ContextType.CLASS)
        self.generic_visit(node)
        self.context.pop()

    def _is_type_checking_block(self, node: ast.If) -> bool:
        """Check if if-statement is TYPE_CHECKING guard."""
        test = node.test

        # if TYPE_CHECKING:
        if isinstance(test, ast.Name) and test.id == "TYPE_CHECKING":
            return True

        # if typing.TYPE_CHECKING:
        if (
            isinstance(test, ast.Attribute)
            and test.attr == "TYPE_CHECKING"
            and isinstance(test.value, ast.Name)
            and test.value.id == "typing"
        ):
            return True

        return False
