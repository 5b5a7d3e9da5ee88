"""Bindery name-based dependency injection.

Bindery binds the parameters of a function to values registered under the
same names. Values are registered in named modules; a module can require other
modules, and sees their bindings after its own. Calling ``inject`` on a module
returns a zero-argument wrapper that looks every parameter up at call time.

Key Features:
    - Parameter names taken from the function's own signature
    - Modules requiring modules, transitively, with cycles tolerated
    - Own bindings shadow those of required modules
    - Late-bound lookups: bindings registered after ``inject`` are seen
    - Unresolved names are passed as None instead of raising

Basic Usage:
    >>> from bindery.registry import ModuleRegistry
    >>>
    >>> registry = ModuleRegistry()
    >>> app = registry.module("app", [])
    >>> app.register("Auth", lambda: "Auth service")
    >>> app.register("sum", lambda a, b: a + b)
    >>>
    >>> injected = app.inject(lambda Auth, sum: f"{Auth()}, {sum(1, 2)}")
    >>> injected()
    'Auth service, 3'

The framework consists of several core modules:
    - registry: Module registration and replacement
    - module: Modules, their bindings and name resolution
    - module_graph: Require-closure traversal
    - signature: Extraction of dependency names from callables
    - injector: Construction of injected wrappers
    - builders: Entry points over a process-wide registry
    - domain: Core domain models (Dependency)
    - errors: Framework-specific exceptions
"""
