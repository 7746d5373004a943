"""Marker types recognized by the constructor generator.

Both markers are inert at runtime; the generator finds them by resolving
names in source, never by importing user code.

Example:
    from typing import Annotated

    from injectgen.markers import Inject, partial_constructor


    class Service:
        repository: Annotated[Repository, Inject()]
        clock: Annotated[Clock, Inject]

        @partial_constructor
        def _init(self, clock):
            self.started = clock.now()
"""

from __future__ import annotations

import inspect
from typing import TypeVar

F = TypeVar("F")


class Inject:
    """Marks a data member as a constructor parameter.

    Place it in `typing.Annotated` metadata of a class-level annotation or
    of a property's return annotation. Data members only.
    """

    __slots__ = ()

    def __repr__(self) -> str:
        return "Inject()"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Inject)

    def __hash__(self) -> int:
        return hash(Inject)


def partial_constructor(func: F) -> F:
    """Marks a method (or lambda) whose body is appended to the generated constructor.

    Its parameters, after the instance, must all be names of injected
    members. Constructors only: anything but a plain function is rejected.

    Args:
        func: Function or lambda taking the instance first

    Returns:
        func, unchanged

    Raises:
        TypeError: If func is not a plain function (FAIL-FIRST)
    """
    if not inspect.isfunction(func):
        raise TypeError(f"partial_constructor applies to functions, got {type(func).__name__}")
    return func
