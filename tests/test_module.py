import pytest

from bindery.errors import DependencyError
from bindery.registry import ModuleRegistry


@pytest.fixture
def registry():
    return ModuleRegistry()


def a_func():
    return "Hello from A"


def b_func():
    return "Hello from B"


def c_func():
    return "Hello from C"


def test_register_and_resolve(registry):
    module = registry.module("module")
    module.register("aFunc", a_func)

    assert module.resolve("aFunc") is a_func
    assert module.bindings == {"aFunc": a_func}


def test_later_registration_overwrites(registry):
    module = registry.module("module")
    module.register("value", 1)
    module.register("value", 2)

    assert module.resolve("value") == 2


def test_unresolved_name_gives_default(registry):
    module = registry.module("module")

    assert module.resolve("nonExistingVar") is None
    assert module.resolve("nonExistingVar", "fallback") == "fallback"


def test_none_binding_is_distinguishable_from_missing(registry):
    module = registry.module("module")
    module.register("nothing", None)

    assert "nothing" in module
    assert "missing" not in module


def test_modules_do_not_see_unrequired_modules(registry):
    module_a = registry.module("moduleA", [])
    module_b = registry.module("moduleB", [])
    module_a.register("aFunc", a_func)
    module_b.register("bFunc", b_func)

    assert module_a.resolve("bFunc") is None
    assert module_b.resolve("aFunc") is None


def test_required_module_bindings_are_visible(registry):
    module_a = registry.module("moduleA", [])
    module_b = registry.module("moduleB", ["moduleA"])
    module_a.register("aFunc", a_func)
    module_b.register("bFunc", b_func)

    assert module_b.resolve("aFunc") is a_func
    assert module_b.resolve("bFunc") is b_func
    assert module_a.resolve("bFunc") is None


def test_transitively_required_bindings_are_visible(registry):
    module_a = registry.module("moduleA", [])
    registry.module("moduleB", ["moduleA"])
    module_c = registry.module("moduleC", ["moduleB"])
    module_a.register("aFunc", a_func)

    assert module_c.resolve("aFunc") is a_func


@pytest.mark.parametrize("requires", [["lib1", "lib2"], ["lib2", "lib1"]])
def test_own_bindings_shadow_required_bindings(registry, requires):
    registry.module("lib1").register("greeting", "lib1")
    registry.module("lib2").register("greeting", "lib2")
    app = registry.module("app", requires)
    app.register("greeting", "app")

    assert app.resolve("greeting") == "app"


def test_first_required_module_wins_between_required_modules(registry):
    registry.module("lib1").register("greeting", "lib1")
    registry.module("lib2").register("greeting", "lib2")

    assert registry.module("app", ["lib2", "lib1"]).resolve("greeting") == "lib2"


def test_mutually_required_modules_resolve_each_others_bindings(registry):
    module_a = registry.module("moduleA", ["moduleB"])
    module_b = registry.module("moduleB", ["moduleA"])
    module_a.register("aFunc", a_func)
    module_b.register("bFunc", b_func)

    assert module_a.resolve("aFunc") is a_func
    assert module_a.resolve("bFunc") is b_func
    assert module_b.resolve("aFunc") is a_func
    assert module_b.resolve("missing") is None


def test_required_module_replacement_is_seen(registry):
    registry.module("lib").register("version", 1)
    app = registry.module("app", ["lib"])
    registry.module("lib").register("version", 2)

    assert app.resolve("version") == 2


def test_provides_registers_under_function_name(registry):
    app = registry.module("app")

    @app.provides()
    def User():
        return "User Service invoked"

    assert app.resolve("User") is User


def test_provides_with_explicit_name(registry):
    app = registry.module("app")

    @app.provides("cFunc")
    def make_c():
        return "Hello from C"

    assert app.resolve("cFunc")() == "Hello from C"


def test_invalid_binding_name_raises(registry):
    with pytest.raises(DependencyError, match="Invalid binding name"):
        registry.module("app").register("", c_func)


def test_repr(registry):
    assert repr(registry.module("app", ["core"])) == "Module(name='app', requires=['core'])"
