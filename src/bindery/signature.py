"""Extraction of dependency names from the signatures of injection targets.

Only the target's own declared parameters are considered: ``inspect.signature``
reads the compiled signature rather than the source text, so parameters of
functions nested inside the target's body never show up as dependencies.
"""

import inspect
from typing import (
    Annotated,
    Any,
    Callable,
    Iterable,
    Optional,
    get_args,
    get_origin,
    get_type_hints,
)

from bindery.domain import Dependency, validate_name
from bindery.errors import NotInjectableError

__all__ = ["depends_on", "get_dependencies", "parameter_names"]

_REST_KINDS = (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)


def depends_on(*names: str) -> Callable:
    """Decorator declaring a target's binding names explicitly.

    The names replace signature introspection and are passed positionally, in
    the order given. The target must accept attributes, so bound methods and
    builtins are rejected; pass explicit names to ``inject`` for those.

    Raises:
        NotInjectableError: If the names cannot be attached to the target.

    Example:
        @depends_on("User", "Auth")
        def controller(user_service, auth_service):
            ...
    """
    for name in names:
        validate_name(name, "binding")

    def decorator(target: Any) -> Any:
        try:
            target.__inject__ = list(names)
        except AttributeError as e:
            raise NotInjectableError(
                f"Cannot attach dependency names to {target!r}; "
                "pass them to inject() instead"
            ) from e
        return target

    return decorator


def get_dependencies(
    target: Callable, names: Optional[Iterable[str]] = None
) -> list[Dependency]:
    """Extract the dependencies of an injection target in declared order.

    Args:
        target: The function, class or other callable to analyse.
        names: Optional explicit binding names, overriding both introspection
            and any names declared with :func:`depends_on`.

    Returns:
        List of Dependency objects, one per declared parameter. ``*args`` and
        ``**kwargs`` are skipped; parameters with defaults are still included.

    Raises:
        NotInjectableError: If the target is not callable or its signature
            cannot be read.

    Example:
        >>> def controller(User, auth: Annotated[Auth, "Auth"], *, debug=False):
        ...     def nested(a, b):
        ...         pass
        >>> get_dependencies(controller)
        >>> # Returns:
        >>> # [Dependency("User", "User", False),
        >>> #  Dependency("auth", "Auth", False),
        >>> #  Dependency("debug", "debug", True)]
    """
    if not callable(target):
        raise NotInjectableError(f"{target!r} is not callable")

    if names is None:
        names = getattr(target, "__inject__", None)
    if names is not None:
        return [Dependency(name, validate_name(name, "binding")) for name in names]

    try:
        sig = inspect.signature(target)
    except (TypeError, ValueError) as e:
        raise NotInjectableError(f"Cannot read the signature of {target!r}") from e

    hints = _type_hints(target)
    return [
        _make_dependency(parameter, _annotation_of(parameter, hints))
        for parameter in sig.parameters.values()
        if parameter.kind not in _REST_KINDS
    ]


def parameter_names(target: Callable) -> list[str]:
    """Return the binding names a target depends on, in declared order."""
    return [dependency.binding_name for dependency in get_dependencies(target)]


def _type_hints(target: Callable) -> dict[str, Any]:
    """Resolve the target's annotations, including string and postponed ones.

    Returns an empty mapping when the annotations cannot be evaluated or the
    target does not support them, leaving the raw annotations in use.
    """
    annotated = target.__init__ if inspect.isclass(target) else target
    try:
        return get_type_hints(annotated, include_extras=True)
    except (NameError, TypeError):
        return {}


def _annotation_of(parameter: inspect.Parameter, hints: dict[str, Any]) -> Any:
    if isinstance(parameter.annotation, str):
        return hints.get(parameter.name, parameter.annotation)
    return parameter.annotation


def _make_dependency(parameter: inspect.Parameter, annotation: Any) -> Dependency:
    keyword_only = parameter.kind is inspect.Parameter.KEYWORD_ONLY

    if get_origin(annotation) is Annotated:
        _, *metadata = get_args(annotation)
        binding_name = next((m for m in metadata if isinstance(m, str)), parameter.name)
        return Dependency(parameter.name, binding_name, keyword_only)

    return Dependency(parameter.name, parameter.name, keyword_only)
