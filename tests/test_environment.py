import pytest

from cinder.types.environment import Environment
from cinder.types.errors import CinderInvalidSymbol
from cinder.types.nil import Nil
from cinder.types.symbol import Symbol

x = Symbol("x")
y = Symbol("y")


def test_define_and_lookup():
    env = Environment()
    env.define(x, 1)
    assert env.lookup(x) == 1
    assert env.find(x) is env


def test_lookup_miss_returns_none():
    env = Environment(Environment())
    assert env.lookup(x) is None
    assert env.find(x) is None


def test_nil_binding_is_not_a_miss():
    env = Environment()
    env.define(x, Nil)
    assert env.lookup(x) is Nil


def test_lookup_walks_outward_and_nearest_wins():
    root = Environment()
    root.define(x, "root")
    root.define(y, "root-y")
    child = Environment(root)
    child.define(x, "child")
    grandchild = Environment(child)

    assert grandchild.lookup(x) == "child"
    assert grandchild.lookup(y) == "root-y"
    assert grandchild.find(y) is root


def test_define_only_touches_current_frame():
    root = Environment()
    root.define(x, 1)
    child = Environment(root)
    child.define(x, 2)
    assert root.lookup(x) == 1
    assert child.lookup(x) == 2


def test_define_overwrites():
    env = Environment()
    env.define(x, 1)
    env.define(x, 2)
    assert env.lookup(x) == 2


def test_define_rejects_non_symbols():
    with pytest.raises(CinderInvalidSymbol):
        Environment().define("x", 1)


def test_update_and_str():
    env = Environment()
    env.update({x: 1, y: 2})
    assert env.lookup(y) == 2
    assert str(env) == "{x: 1, y: 2}"
    assert str(Environment(env)) == "{} -> ..."
    assert repr(Environment(env)) == "<Environment chain: {} -> {x: 1, y: 2}>"
