"""Named modules owning local bindings and the names of the modules they require."""

import logging
import threading
from typing import TYPE_CHECKING, Any, Callable, Iterable, Optional

from bindery.domain import validate_name
from bindery.injector import Injector
from bindery.module_graph import ModuleGraph

if TYPE_CHECKING:
    from bindery.registry import ModuleRegistry

__all__ = ["Module"]

logger = logging.getLogger(__name__)

_MISSING = object()


class Module:
    """A named set of bindings that can see the bindings of the modules it requires.

    Lookups search the module itself first, so its own bindings shadow those of
    required modules, then each required module's closure in declaration order.
    Lookups are late-bound: they reflect the bindings present at call time.

    Attributes:
        name: The key of the module in its registry.
        requires: Names of required modules, in declaration order.
        bindings: The module's own binding names and values.

    Example:
        >>> core = registry.module("core")
        >>> core.register("greeting", "Hello")
        >>> app = registry.module("app", ["core"])
        >>> app.inject(lambda greeting: greeting + "!")()
        'Hello!'
    """

    def __init__(self, name: str, requires: Iterable[str], registry: "ModuleRegistry"):
        self.name = name
        self.requires: tuple[str, ...] = tuple(requires)
        self.bindings: dict[str, Any] = {}
        self._graph = ModuleGraph(registry)
        self._lock = threading.RLock()

    def register(self, name: str, value: Any) -> None:
        """Bind ``value`` to ``name`` in this module, replacing any previous value."""
        validate_name(name, "binding")
        with self._lock:
            if name in self.bindings:
                logger.debug("Overwriting binding %r in module %r", name, self.name)
            self.bindings[name] = value

    def provides(self, name: Optional[str] = None) -> Callable:
        """Decorator registering the decorated object as a binding.

        Args:
            name: Optional binding name; defaults to the object's ``__name__``.

        Returns:
            A decorator that registers its argument and returns it unchanged.

        Example:
            @app.provides()
            def User():
                return "User Service invoked"
        """

        def decorator(obj):
            self.register(name or obj.__name__, obj)
            return obj

        return decorator

    def inject(self, target: Callable, names: Optional[Iterable[str]] = None) -> Callable[[], Any]:
        """Wrap ``target`` so its parameters are resolved from this module when called.

        Args:
            target: The callable whose parameters name its dependencies.
            names: Optional explicit binding names to use instead of the
                target's parameter names.

        Returns:
            A zero-argument callable returning the result of ``target``.

        Raises:
            NotInjectableError: If ``target`` is not callable or its signature
                cannot be read.
        """
        return Injector(self).inject(target, names)

    def injectable(self, target: Callable) -> Callable[[], Any]:
        """Decorator form of :meth:`inject`."""
        return self.inject(target)

    def closure(self) -> list["Module"]:
        """Return the modules consulted by :meth:`resolve`, in lookup order."""
        return self._graph.closure(self)

    def resolve(self, name: str, default: Any = None) -> Any:
        """Look up ``name`` in this module and its required modules.

        Args:
            name: The binding name to look up.
            default: Value returned when no module in the closure binds ``name``.

        Returns:
            The value bound by the first module in the closure defining ``name``,
            or ``default``.
        """
        value = self._lookup(name)
        if value is _MISSING:
            logger.debug("No binding for %r visible from module %r", name, self.name)
            return default
        return value

    def _lookup(self, name):
        for module in self._graph.traverse(self):
            if name in module.bindings:
                return module.bindings[name]
        return _MISSING

    def __contains__(self, name: str) -> bool:
        return self._lookup(name) is not _MISSING

    def __repr__(self) -> str:
        return f"Module(name={self.name!r}, requires={list(self.requires)!r})"
