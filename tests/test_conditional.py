import pytest

from hofkit.conditional import IfAdaptor, if_, if_c
from hofkit.first_of import first_of
from hofkit.invocable import NotInvocableError, is_invocable


def sum_f(x, y):
    return first_of(
        if_(isinstance(x, int))(lambda a, b: a + b),
        lambda a, b: 0,
    )(x, y)


def test_documented_sum_example():
    assert sum_f(1, 2) == 3
    assert sum_f("", "") == 0


def decrement_kindof(value):
    return first_of(
        if_(isinstance(value, str))(lambda v: v[:-1]),
        lambda v: v - 1,
    )(value)


def test_static_if_example():
    assert decrement_kindof("hello!") == "hello"
    assert decrement_kindof(4) == 3


def test_true_condition_calls_function():
    f = if_(True)(lambda x: x * 2)
    assert f(4) == 8


def test_false_condition_raises():
    f = if_(False)(lambda x: x)
    with pytest.raises(NotInvocableError):
        f(1)


def test_is_invocable_follows_condition():
    assert is_invocable(if_c(True, lambda x: x), 1) is True
    assert is_invocable(if_c(False, lambda x: x), 1) is False
    assert is_invocable(if_c(True, lambda x: x), 1, 2) is False


def test_if_c_keeps_truth_value():
    adaptor = if_c(0, lambda: None)
    assert isinstance(adaptor, IfAdaptor)
    assert adaptor.condition is False


def test_rejects_non_callable():
    with pytest.raises(TypeError):
        if_(True)(5)