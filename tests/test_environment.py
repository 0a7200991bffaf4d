import pytest

from samlisp.errors import UnknownSymbol
from samlisp.types.environment import Environment
from samlisp.types.symbol import Symbol


def test_define_and_lookup():
    env = Environment()
    env.define(Symbol("x"), 42)
    assert env.lookup(Symbol("x")) == 42


def test_insert_is_define():
    env = Environment()
    env.insert(Symbol("x"), 1)
    assert env.lookup(Symbol("x")) == 1


def test_define_overwrites_in_same_frame():
    env = Environment()
    env.define(Symbol("x"), 1)
    env.define(Symbol("x"), 2)
    assert env.lookup(Symbol("x")) == 2
    assert len(env.vars) == 1


def test_lookup_missing_raises_unknown_symbol():
    env = Environment()
    with pytest.raises(UnknownSymbol) as info:
        env.lookup(Symbol("nope"))
    assert info.value.name == "nope"


def test_child_falls_back_to_outer():
    root = Environment()
    root.define(Symbol("x"), 1)
    child = Environment.child_of(root)
    assert child.outer is root
    assert child.vars == {}
    assert child.lookup(Symbol("x")) == 1


def test_child_define_shadows_without_touching_outer():
    root = Environment()
    root.define(Symbol("x"), 1)
    child = root.child()
    child.define(Symbol("x"), 2)
    assert child.lookup(Symbol("x")) == 2
    assert root.lookup(Symbol("x")) == 1


def test_outer_mutation_visible_to_children():
    root = Environment()
    child = root.child()
    root.define(Symbol("late"), 7)
    assert child.lookup(Symbol("late")) == 7


def test_siblings_share_outer():
    root = Environment()
    a, b = root.child(), root.child()
    a.define(Symbol("x"), 1)
    assert Symbol("x") not in b
    assert Symbol("x") in a
    assert a.outer is b.outer is root


def test_find_returns_binding_frame():
    root = Environment()
    root.define(Symbol("x"), 1)
    mid = root.child()
    leaf = mid.child()
    assert leaf.find(Symbol("x")) is root
    assert leaf.find(Symbol("y")) is None


def test_update_bulk_defines():
    env = Environment()
    env.update({Symbol("a"): 1, Symbol("b"): 2})
    assert env.lookup(Symbol("a")) == 1
    assert env.lookup(Symbol("b")) == 2


def test_str_and_repr():
    root = Environment()
    root.define(Symbol("x"), 1)
    child = root.child()
    child.define(Symbol("y"), 2)
    assert str(root) == "{x: 1}"
    assert str(child) == "{y: 2} -> ..."
    assert repr(child) == "<Environment chain: {y: 2} -> {x: 1}>"
