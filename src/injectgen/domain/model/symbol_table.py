"""Symbol table for name resolution."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from injectgen.domain.model.import_ import Import


@dataclass(slots=True)
class SymbolTable:
    """Module-scope names and the fully qualified names they denote.

    Mutable - filled while a module is parsed.

    Handles:
    - import X / import X.Y (binds X)
    - import X as Y
    - from X import Y [as Z]
    - module-level definitions (class, def, assignment)
    - from X import * (tracked, never guessed)

    A later binding of the same name replaces the earlier one, as at runtime.

    Attributes:
        _direct: Local name → fully qualified name mapping
        _star_modules: Modules from which * was imported
    """

    _direct: dict[str, str] = field(default_factory=dict)
    _star_modules: list[str] = field(default_factory=list)

    def add_import(self, imp: Import) -> None:
        """Register import in symbol table.

        Args:
            imp: Import to register

        Raises:
            ValueError: If imp.name is empty string (not None)
        """
        if imp.name == "*":
            self._star_modules.append(imp.module)
            return

        # FAIL-FIRST: empty name string is invalid (None is ok)
        if imp.name is not None and imp.name == "":
            raise ValueError("import name must be non-empty string or None")

        self._direct[imp.imported_name] = imp.target

    def add_definition(self, name: str, module_name: str) -> None:
        """Register a name defined at module level.

        Args:
            name: Defined name
            module_name: Fully qualified name of the defining module

        Raises:
            ValueError: If name or module_name is empty
        """
        if not name:
            raise ValueError("name must not be empty")
        if not module_name:
            raise ValueError("module_name must not be empty")

        self._direct[name] = f"{module_name}.{name}"

    def resolve(self, name: str) -> str | None:
        """Resolve local name to fully qualified name.

        Args:
            name: Local name to resolve (may include dots for attr access)

        Returns:
            Fully qualified name if bound in this module.
            None if unresolved OR if name might come from star import.
        """
        # FAIL-FIRST: empty name
        if not name:
            raise ValueError("name must not be empty")

        if name in self._direct:
            return self._direct[name]

        # Attribute chain: resolve first part, append rest
        # e.g., "markers.Inject" → resolve("markers") + ".Inject"
        if "." in name:
            first, rest = name.split(".", 1)
            if first in self._direct:
                return f"{self._direct[first]}.{rest}"

        return None

    def has_star_imports(self) -> bool:
        """Check if module has star imports."""
        return len(self._star_modules) > 0

    @property
    def star_import_modules(self) -> tuple[str, ...]:
        """Modules with star imports."""
        return tuple(self._star_modules)

    def all_names(self) -> frozenset[str]:
        """Get all locally bound names (excluding star imports)."""
        return frozenset(self._direct.keys())

    @property
    def size(self) -> int:
        """Total number of bound names."""
        return len(self._direct)
