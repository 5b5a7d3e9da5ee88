"""Traversal of the graph formed by modules and the modules they require.

A module sees its own bindings first, then those of each required module in
declaration order, recursively. Requirements may form cycles: every module is
visited at most once, so mutual requirements terminate and contribute each
module's bindings a single time.
"""

import logging
from collections import deque
from typing import TYPE_CHECKING, Iterator

if TYPE_CHECKING:
    from bindery.module import Module
    from bindery.registry import ModuleRegistry

__all__ = ["ModuleGraph"]

logger = logging.getLogger(__name__)


class ModuleGraph:
    """
    Depth-first view of the requires graph held by a :class:`ModuleRegistry`.

    Required modules are looked up by name at traversal time, so the graph
    always reflects the registry's current entries: a required module created
    or replaced after its dependant was created is picked up.
    """

    def __init__(self, registry: "ModuleRegistry"):
        self._registry = registry

    def traverse(self, root: "Module") -> Iterator["Module"]:
        """
        Yield the require closure of ``root``, starting with ``root`` itself.

        The root is the given instance, even when the registry holds a newer
        module under the same name. Names that are not registered are skipped.

        Yields:
            Modules in depth-first, declaration order, each at most once.
        """
        visited: set[str] = set()
        pending = deque([root])

        while len(pending) > 0:
            next_module = pending.pop()
            if next_module.name in visited:
                continue
            visited.add(next_module.name)
            yield next_module

            self._push_required(next_module, visited, pending)

    def closure(self, root: "Module") -> list["Module"]:
        """Return the require closure of ``root`` as a list."""
        return list(self.traverse(root))

    def _push_required(self, module, visited, pending):
        """
        Queue the registered, not yet visited modules required by ``module``.

        Args:
            module: The module whose requirements are being expanded.
            visited: Names of modules already yielded.
            pending: Stack of modules awaiting a visit; popped from the right.
        """
        for required_name in reversed(module.requires):
            if required_name in visited:
                continue
            required = self._registry.get(required_name)
            if required is None:
                logger.debug(
                    "Module %r requires unregistered module %r; skipping",
                    module.name,
                    required_name,
                )
                continue
            pending.append(required)
