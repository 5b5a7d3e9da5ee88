__all__ = ["DependencyError", "NotInjectableError"]


class DependencyError(Exception):
    """Raised when a module, binding or injection target is misdeclared."""

    pass


class NotInjectableError(DependencyError, TypeError):
    """Raised when ``inject`` is given something whose parameters cannot be read."""

    pass
