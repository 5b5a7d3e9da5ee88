"""High level entry points backed by a process-wide registry."""

from typing import Iterable, Optional

from bindery.module import Module
from bindery.registry import ModuleRegistry

__all__ = ["default_registry", "module", "get_module"]

default_registry = ModuleRegistry()
"""Registry used by :func:`module` and :func:`get_module`.

Applications needing isolation, tests in particular, should create their own
:class:`ModuleRegistry` instead.
"""


def module(name: str, requires: Iterable[str] = ()) -> Module:
    """Create and register a module in the process-wide registry.

    Args:
        name: The module name. An existing module of the same name is replaced.
        requires: Names of the modules whose bindings the new module can see.

    Returns:
        The newly created :class:`Module`.

    Example:
        >>> app = module("app")
        >>> app.register("sum", lambda a, b: a + b)
        >>> app.inject(lambda sum: sum(1, 2))()
        3
    """
    return default_registry.module(name, requires)


def get_module(name: str) -> Optional[Module]:
    """Return the module registered under ``name`` in the process-wide registry."""
    return default_registry.get(name)
