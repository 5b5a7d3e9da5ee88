"""Registration and lookup of named modules."""

import logging
import threading
from typing import Iterable, Iterator, Optional

from bindery.domain import validate_name
from bindery.errors import DependencyError
from bindery.module import Module

__all__ = ["ModuleRegistry"]

logger = logging.getLogger(__name__)


class ModuleRegistry:
    """Registry of modules keyed by name, last registration wins.

    Creating a module under a name that is already registered replaces the
    registry entry. The previous instance is left untouched, so wrappers built
    from it keep resolving against its own bindings.

    Example:
        >>> registry = ModuleRegistry()
        >>> base = registry.module("base")
        >>> app = registry.module("app", ["base"])
        >>> [m.name for m in app.closure()]
        ['app', 'base']
    """

    def __init__(self):
        self._modules: dict[str, Module] = {}
        self._lock = threading.RLock()

    def module(self, name: str, requires: Iterable[str] = ()) -> Module:
        """Create a module and register it, replacing any module of the same name.

        Args:
            name: The module name.
            requires: Names of the modules whose bindings the new module can
                see. They need not be registered yet, or ever.

        Returns:
            The newly created :class:`Module`.

        Raises:
            DependencyError: If a name is not a non-empty string, or if
                ``requires`` is given as a single string.
        """
        validate_name(name, "module")
        if isinstance(requires, str):
            raise DependencyError(
                f"Module {name!r} requires must be a sequence of names, not the string {requires!r}"
            )
        required_names = [validate_name(r, "module") for r in requires]

        created = Module(name, required_names, self)
        with self._lock:
            if name in self._modules:
                logger.debug("Replacing module %r", name)
            else:
                logger.debug("Registering module %r requiring %s", name, required_names)
            self._modules[name] = created
        return created

    def get(self, name: str) -> Optional[Module]:
        """Return the module currently registered under ``name``, or None."""
        return self._modules.get(name)

    def __getitem__(self, name: str) -> Module:
        return self._modules[name]

    def __contains__(self, name: str) -> bool:
        return name in self._modules

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._modules))

    def __len__(self) -> int:
        return len(self._modules)
