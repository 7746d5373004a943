"""Base utilities for AST analyzers."""

from __future__ import annotations

import ast
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from injectgen.domain.model.location import Location


def make_location(node: ast.stmt | ast.expr, path: Path) -> Location:
    """Create Location from AST node.

    Args:
        node: AST node with position info (statement or expression)
        path: Source file path

    Returns:
        Location pointing to node
    """
    from injectgen.domain.model.location import Location

    return Location(file=path, line=node.lineno, column=node.col_offset)


def compute_module_name(file_path: Path, root_path: Path) -> str:
    """Compute fully qualified module name from file path.

    Examples:
        /src/app/utils.py, /src → app.utils
        /src/app/__init__.py, /src → app

    Raises:
        ParsingError: If path is invalid (FAIL-FIRST)
    """
    from injectgen.domain.exceptions.parsing import ParsingError

    try:
        relative = file_path.relative_to(root_path)
    except ValueError as e:
        raise ParsingError(file_path, f"not under {root_path}") from e

    parts = list(relative.with_suffix("").parts)

    if parts and parts[-1] == "__init__":
        parts = parts[:-1]

    for part in parts:
        if not part.isidentifier():
            raise ParsingError(file_path, f"'{part}' is not valid Python identifier")

    if not parts:
        raise ParsingError(file_path, "cannot determine module name (empty)")

    return ".".join(parts)


def resolve_relative_import(
    node_module: str | None,
    node_level: int,
    current_module: str,
    *,
    is_package: bool = False,
) -> str:
    """Resolve relative import to absolute module path.

    Args:
        node_module: Module part of import (after dots)
        node_level: Number of dots (0=absolute, 1=., 2=..)
        current_module: Current module's fully qualified name
        is_package: Current module is a package __init__

    Returns:
        Absolute module path

    Raises:
        ValueError: If relative import escapes package (FAIL-FIRST)
    """
    if node_level == 0:
        if node_module is None:
            raise ValueError("absolute import must have module")
        return node_module

    parts = current_module.split(".")
    # In a package __init__, "." is the package itself
    strip = node_level - 1 if is_package else node_level

    if strip >= len(parts):
        raise ValueError(
            f"relative import level {node_level} exceeds package depth of module '{current_module}'"
        )

    base_parts = parts[: len(parts) - strip]

    if node_module:
        return ".".join([*base_parts, node_module])

    return ".".join(base_parts)


def dotted_name(node: ast.expr) -> str | None:
    """Dotted name of a Name/Attribute chain.

    Returns:
        "a.b.c" for `a.b.c`, None for anything else (calls, subscripts)
    """
    match node:
        case ast.Name(id=name):
            return name
        case ast.Attribute(value=value, attr=attr):
            base = dotted_name(value)
            return f"{base}.{attr}" if base is not None else None
    return None


def strip_docstring(body: list[ast.stmt]) -> list[ast.stmt]:
    """Body without a leading docstring."""
    match body:
        case [ast.Expr(value=ast.Constant(value=str())), *rest]:
            return rest
    return body


def parameter_names(args: ast.arguments) -> tuple[str, ...]:
    """All parameter names of a signature, in order.

    Includes *args, keyword-only and **kwargs names.
    """
    names = [arg.arg for arg in (*args.posonlyargs, *args.args)]
    if args.vararg is not None:
        names.append(args.vararg.arg)
    names.extend(arg.arg for arg in args.kwonlyargs)
    if args.kwarg is not None:
        names.append(args.kwarg.arg)
    return tuple(names)
