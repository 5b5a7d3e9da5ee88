"""Domain models used throughout the framework."""

from dataclasses import dataclass

from bindery.errors import DependencyError

__all__ = ["Dependency", "validate_name"]


@dataclass(frozen=True)
class Dependency:
    """Represents a dependency declared by an injection target.

    Attributes:
        parameter_name: The parameter name in the target's signature.
        binding_name: The name looked up in the module's require closure.
        keyword_only: Whether the resolved value must be passed by keyword.
    """

    parameter_name: str
    binding_name: str
    keyword_only: bool = False


def validate_name(name: str, kind: str) -> str:
    """Check that a module or binding name is a non-empty string.

    Args:
        name: The name to check.
        kind: What the name identifies, used in the error message.

    Returns:
        The name, unchanged.

    Raises:
        DependencyError: If the name is not a string or is empty.
    """
    if not isinstance(name, str) or not name:
        raise DependencyError(f"Invalid {kind} name {name!r}: expected a non-empty string")
    return name
