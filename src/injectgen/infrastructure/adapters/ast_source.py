"""AST-based declaration source adapter.

Implements DeclarationSourcePort using Python AST.
Builds one SourceUnit per file: candidate type declarations plus the
module's symbol resolution context.
"""

from __future__ import annotations

import ast
import logging
from pathlib import Path
from typing import TYPE_CHECKING

from injectgen.domain.exceptions.parsing import ParsingError
from injectgen.domain.model.configuration import GeneratorConfig
from injectgen.domain.model.source_unit import SourceUnit
from injectgen.domain.model.symbol_table import SymbolTable
from injectgen.domain.ports.declaration_source import DeclarationSourcePort
from injectgen.infrastructure.adapters.symbol_table_resolver import SymbolTableResolver
from injectgen.infrastructure.analyzers.base import compute_module_name
from injectgen.infrastructure.analyzers.class_analyzer import ClassAnalyzer
from injectgen.infrastructure.analyzers.import_analyzer import ImportAnalyzer

if TYPE_CHECKING:
    from injectgen.domain.model.import_ import Import

logger = logging.getLogger(__name__)

# Default directories to exclude from parsing
DEFAULT_EXCLUDES = frozenset(
    {
        "__pycache__",
        ".venv",
        ".git",
        ".mypy_cache",
        ".pytest_cache",
        ".ruff_cache",
        ".tox",
        ".nox",
        "build",
        "dist",
        ".eggs",
    },
)


class ASTDeclarationSource(DeclarationSourcePort):
    """Declaration source using Python AST.

    Stateless between parse_file() calls.
    Never imports or executes the analyzed code.

    FAIL-FIRST: raises ParsingError on any parsing issue.
    """

    def __init__(
        self,
        root_path: Path | None = None,
        config: GeneratorConfig | None = None,
        exclude: frozenset[str] = DEFAULT_EXCLUDES,
    ) -> None:
        """Initialize source.

        Args:
            root_path: Import root for computing module names.
                None = each file's own directory.
            config: Generator configuration (marker aliases, output suffix)
            exclude: Directory names skipped by parse_directory()
        """
        self._root_path = root_path
        self._config = config or GeneratorConfig()
        self._exclude = exclude
        self._import_analyzer = ImportAnalyzer()
        self._class_analyzer = ClassAnalyzer()

    def parse_file(self, path: Path) -> SourceUnit:
        """Parse single Python file.

        Args:
            path: Path to .py file

        Returns:
            SourceUnit for the file

        Raises:
            ParsingError: If file cannot be read or parsed
        """
        try:
            source = path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise ParsingError(path, "file not found") from e
        except PermissionError as e:
            raise ParsingError(path, "permission denied") from e
        except UnicodeDecodeError as e:
            raise ParsingError(path, f"encoding error: {e}") from e

        root = self._root_path if self._root_path is not None else path.parent
        return self.parse_source(
            source,
            compute_module_name(path, root),
            path,
            is_package=path.name == "__init__.py",
        )

    def parse_source(
        self,
        source: str,
        module_name: str,
        path: Path = Path("<string>"),
        *,
        is_package: bool = False,
    ) -> SourceUnit:
        """Parse module source text.

        Args:
            source: Python source
            module_name: Fully qualified module name
            path: File the source came from
            is_package: Source is a package __init__

        Returns:
            SourceUnit with candidate declarations in source order

        Raises:
            ParsingError: On syntax errors
        """
        if not module_name:
            raise ValueError("module_name must be non-empty string")

        try:
            tree = ast.parse(source, filename=str(path))
        except SyntaxError as e:
            raise ParsingError(
                path, f"syntax error: {e.msg}", module_name=module_name, line=e.lineno or None
            ) from e

        symbol_table = self._build_symbol_table(tree, path, module_name, is_package)
        resolver = SymbolTableResolver(symbol_table, self._config.marker_aliases)

        declarations = tuple(
            declaration
            for node in tree.body
            if isinstance(node, ast.ClassDef)
            for declaration in self._class_analyzer.analyze(node, path, module_name, symbol_table)
        )
        logger.debug("%s: %d candidate type(s)", module_name, len(declarations))

        return SourceUnit(
            path=path,
            module_name=module_name,
            declarations=declarations,
            resolver=resolver,
        )

    def parse_directory(self, path: Path) -> tuple[SourceUnit, ...]:
        """Parse directory recursively.

        Module names are computed relative to the configured root, or to
        `path` itself when no root was given. Generated files are skipped.

        Args:
            path: Root directory path

        Returns:
            SourceUnits in sorted path order

        Raises:
            ParsingError: If any file cannot be parsed
        """
        if not path.is_dir():
            raise ParsingError(path, "not a directory")

        inner = self if self._root_path is not None else self.with_root(path)

        units = tuple(inner.parse_file(file) for file in self.python_files(path))
        logger.info("Parsed %d file(s) under %s", len(units), path)
        return units

    @property
    def root_path(self) -> Path | None:
        """Import root, None if each file is its own root."""
        return self._root_path

    def with_root(self, root_path: Path) -> ASTDeclarationSource:
        """Same source with a different import root."""
        return ASTDeclarationSource(root_path, self._config, self._exclude)

    def python_files(self, root: Path) -> list[Path]:
        """Python files under root in sorted order, excluding generated files."""
        files: list[Path] = []
        for file in sorted(root.rglob("*.py")):
            relative_parts = file.relative_to(root).parts[:-1]
            if any(part in self._exclude for part in relative_parts):
                continue
            if file.name.endswith(self._config.file_suffix):
                continue
            files.append(file)
        return files

    def _build_symbol_table(
        self,
        tree: ast.Module,
        path: Path,
        module_name: str,
        is_package: bool,
    ) -> SymbolTable:
        """Bind imports and module-level definitions in source order."""
        imports = self._import_analyzer.analyze(tree, path, module_name, is_package=is_package)

        bindings: list[tuple[int, int, Import | str]] = [
            (imp.location.line, imp.location.column, imp) for imp in imports
        ]
        for node in tree.body:
            for name in _defined_names(node):
                bindings.append((node.lineno, node.col_offset, name))

        symbol_table = SymbolTable()
        for _, _, binding in sorted(bindings, key=lambda b: (b[0], b[1])):
            if isinstance(binding, str):
                symbol_table.add_definition(binding, module_name)
            else:
                symbol_table.add_import(binding)
        return symbol_table


def _defined_names(node: ast.stmt) -> tuple[str, ...]:
    """Names a module-level statement binds (imports excluded)."""
    match node:
        case ast.ClassDef(name=name) | ast.FunctionDef(name=name) | ast.AsyncFunctionDef(name=name):
            return (name,)
        case ast.Assign(targets=targets):
            return tuple(target.id for target in targets if isinstance(target, ast.Name))
        case ast.AnnAssign(target=ast.Name(id=name), value=value) if value is not None:
            return (name,)
    return ()
