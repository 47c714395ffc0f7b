import pytest

from miischeme.environment import Environment
from miischeme.excs import UndefinedVariable
from miischeme.globals import Builtin


def test_define_lookup():
    env = Environment.new()
    env.define('x', 10)
    assert env.lookup('x') == 10

    env.define('x', 11)
    assert env.lookup('x') == 11


def test_child_sees_parent():
    parent = Environment.new()
    parent.define('x', 1)
    child = Environment.child_of(parent)

    assert child.lookup('x') == 1
    assert child.parent is parent


def test_shadowing():
    parent = Environment.new()
    parent.define('x', 1)
    child = Environment.child_of(parent)
    child.define('x', 2)

    assert child.lookup('x') == 2
    assert parent.lookup('x') == 1


def test_siblings_share_parent():
    parent = Environment.new()
    first, second = Environment.child_of(parent), Environment.child_of(parent)
    parent.define('y', 3)
    first.define('y', 4)

    assert first.lookup('y') == 4
    assert second.lookup('y') == 3


def test_undefined():
    env = Environment.child_of(Environment.new())
    with pytest.raises(UndefinedVariable) as exc:
        env.lookup('undefined_name')
    assert exc.value.name == 'undefined_name'


def test_remove_is_local():
    parent = Environment.new()
    parent.define('x', 1)
    parent.define('y', 2)
    child = Environment.child_of(parent)
    child.define('x', 10)

    child.remove('x')
    child.remove('y')
    child.remove('never_bound')

    assert 'x' not in child.bindings
    assert child.lookup('x') == 1
    assert parent.lookup('y') == 2


def test_builtins_fallback():
    env = Environment.new()
    assert isinstance(env.lookup('+'), Builtin)
    assert env.lookup('true') is True
    assert env.lookup('nil') is None

    env.define('+', 5)
    assert env.lookup('+') == 5
    assert isinstance(Environment.new().lookup('+'), Builtin)


def test_mapping_protocol():
    env = Environment.new()
    env['x'] = 1
    assert env['x'] == 1
    assert 'x' in env
    assert 'y' not in env
    assert env.get('y', 3) == 3

    del env['x']
    assert 'x' not in env
