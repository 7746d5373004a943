"""Constructor stub analyzer."""

from __future__ import annotations

import ast
from typing import TYPE_CHECKING, Any

from injectgen.domain.model.constructor_stub import ConstructorStub
from injectgen.infrastructure.analyzers.base import (
    make_location,
    parameter_names,
    strip_docstring,
)
from injectgen.infrastructure.analyzers.marker_analyzer import MarkerAnalyzer

if TYPE_CHECKING:
    from pathlib import Path


class ConstructorStubAnalyzer:
    """Extracts constructor stub candidates from a class body.

    Two forms are recognized:

        @partial_constructor
        def _init(self, a):
            log(a)

        _init = partial_constructor(lambda self, a: log(a))

    Every decorated method and every single-lambda call assignment is a
    candidate; whether the decorator or callee is the partial-constructor
    marker is decided later by resolution. The first parameter (the
    instance) is not part of the stub's parameter list; its name is kept
    as the stub's receiver, whatever it is called.

    Stateless analyzer - no state between analyze() calls.
    """

    def __init__(self) -> None:
        self._marker_analyzer = MarkerAnalyzer()

    def analyze(
        self,
        node: ast.ClassDef,
        path: Path,
        excluded: frozenset[str] = frozenset(),
    ) -> tuple[ConstructorStub, ...]:
        """Extract stub candidates in source order.

        Args:
            node: ClassDef AST node
            path: Source file path
            excluded: Method names already taken as data members (properties)

        Returns:
            Tuple of ConstructorStub objects
        """
        stubs: list[ConstructorStub] = []

        for item in node.body:
            match item:
                case ast.FunctionDef(name=name, decorator_list=decorators) if (
                    decorators and name not in excluded
                ):
                    stubs.append(self._statement_stub(item, path))
                case ast.Assign(
                    targets=[ast.Name(id=name)],
                    value=ast.Call(func=func, args=[ast.Lambda() as lam], keywords=[]),
                ):
                    stubs.append(self._expression_stub(name, func, lam, item, path))

        return tuple(stubs)

    def _statement_stub(self, node: ast.FunctionDef, path: Path) -> ConstructorStub:
        body = strip_docstring(node.body)
        return ConstructorStub(
            name=node.name,
            **_split_receiver(node.args),
            markers=self._marker_analyzer.analyze(node.decorator_list, path),
            # A docstring-only body merges as a no-op
            statements=tuple(ast.unparse(statement) for statement in body) or ("pass",),
            location=make_location(node, path),
        )

    def _expression_stub(
        self,
        name: str,
        func: ast.expr,
        lam: ast.Lambda,
        statement: ast.Assign,
        path: Path,
    ) -> ConstructorStub:
        return ConstructorStub(
            name=name,
            **_split_receiver(lam.args),
            markers=self._marker_analyzer.analyze((func,), path),
            expression=ast.unparse(lam.body),
            location=make_location(statement, path),
        )


def _split_receiver(args: ast.arguments) -> dict[str, Any]:
    """Receiver and remaining parameters as ConstructorStub keyword arguments."""
    names = parameter_names(args)
    if not names:
        return {"parameters": ()}
    return {"receiver": names[0], "parameters": names[1:]}
