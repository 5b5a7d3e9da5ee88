"""Construction of injected wrappers.

This module provides the Injector class, which turns a target callable into a
zero-argument wrapper. The target's dependencies are read once, when the
wrapper is built; their values are looked up in the owning module every time
the wrapper is called, so bindings registered in between are seen.
"""

import functools
import inspect
from typing import TYPE_CHECKING, Any, Callable, Iterable, Optional

from bindery.signature import get_dependencies

if TYPE_CHECKING:
    from bindery.module import Module

__all__ = ["Injector"]


class Injector:
    """Build wrappers whose dependencies are resolved from a :class:`Module`."""

    def __init__(self, module: "Module"):
        self._module = module

    def inject(self, target: Callable, names: Optional[Iterable[str]] = None) -> Callable[[], Any]:
        """Wrap a target so that calling the wrapper calls the target with its dependencies.

        Args:
            target: The callable to wrap.
            names: Optional explicit binding names, passed positionally.

        Returns:
            A callable taking no arguments. Unresolved dependencies are passed
            as ``None`` rather than omitted.

        Raises:
            NotInjectableError: If the target's parameters cannot be read.
        """
        dependencies = get_dependencies(target, names)
        module = self._module

        def injected():
            positional = [
                module.resolve(dependency.binding_name)
                for dependency in dependencies
                if not dependency.keyword_only
            ]
            keyword = {
                dependency.parameter_name: module.resolve(dependency.binding_name)
                for dependency in dependencies
                if dependency.keyword_only
            }
            return target(*positional, **keyword)

        return _describe(injected, target)


def _describe(wrapper: Callable, target: Callable) -> Callable:
    """Copy the target's name and docstring onto the wrapper.

    The wrapper keeps an empty signature, so a wrapper registered as a binding
    and injected again is itself treated as taking no arguments. The target's
    ``__dict__`` is not copied, which keeps any ``__inject__`` names off the
    wrapper.
    """
    functools.update_wrapper(wrapper, target, updated=())
    wrapper.__signature__ = inspect.Signature()
    return wrapper
