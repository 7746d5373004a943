"""Stack-based scope tracking for import analysis."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto


class ContextType(Enum):
    """AST scopes that change what an import binds."""

    MODULE = auto()
    CLASS = auto()
    FUNCTION = auto()
    TYPE_CHECKING = auto()
    CONDITIONAL = auto()


@dataclass(slots=True)
class AnalysisContext:
    """Stack of enclosing scopes during traversal.

    Mutable - push/pop during traversal.

    Attributes:
        _stack: Context stack
        _type_checking_depth: Nesting depth in TYPE_CHECKING blocks
        _local_depth: Nesting depth in function and class bodies
    """

    _stack: list[ContextType] = field(default_factory=list)
    _type_checking_depth: int = 0
    _local_depth: int = 0

    def push(self, ctx_type: ContextType) -> None:
        """Enter new context.

        Raises:
            TypeError: If ctx_type is not a ContextType (FAIL-FIRST)
        """
        if not isinstance(ctx_type, ContextType):
            raise TypeError(f"ctx_type must be ContextType, got {type(ctx_type).__name__}")

        self._stack.append(ctx_type)

        match ctx_type:
            case ContextType.TYPE_CHECKING:
                self._type_checking_depth += 1
            case ContextType.FUNCTION | ContextType.CLASS:
                self._local_depth += 1
            case ContextType.MODULE | ContextType.CONDITIONAL:
                pass

    def pop(self) -> ContextType:
        """Exit current context.

        Raises:
            IndexError: If stack is empty
        """
        if not self._stack:
            raise IndexError("cannot pop from empty context stack")

        ctx_type = self._stack.pop()

        match ctx_type:
            case ContextType.TYPE_CHECKING:
                self._type_checking_depth -= 1
            case ContextType.FUNCTION | ContextType.CLASS:
                self._local_depth -= 1
            case ContextType.MODULE | ContextType.CONDITIONAL:
                pass

        return ctx_type

    @property
    def in_type_checking(self) -> bool:
        """Check if inside TYPE_CHECKING block."""
        return self._type_checking_depth > 0

    @property
    def in_module_scope(self) -> bool:
        """Check if names bound here are module globals."""
        return self._local_depth == 0

    @property
    def depth(self) -> int:
        """Current nesting depth (stack size)."""
        return len(self._stack)
