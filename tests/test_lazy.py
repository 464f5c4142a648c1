import pytest

from hofkit.invocable import NotInvocableError, is_invocable
from hofkit.lazy import (
    LazyAdaptor,
    LazyInvoker,
    Placeholder,
    is_bind_expression,
    lazy,
)


def identity(x):
    return x


def add(x, y):
    return x + y


def test_documented_increment_example():
    increment = lazy(add)(Placeholder(1), 1)
    assert increment(5) == 6


def test_bound_values_call_directly():
    assert lazy(add)(1, 2)() == add(1, 2)


def test_nullary_call_ignores_arguments():
    assert lazy(lambda: "done")()(1, 2, 3) == "done"


@pytest.mark.parametrize("count", range(1, 10))
def test_each_placeholder_selects_its_argument(count):
    args = tuple(range(count))
    for index in range(1, count + 1):
        assert lazy(identity)(Placeholder(index))(*args) == args[index - 1]


def test_placeholder_returns_same_object():
    items = [object() for _ in range(4)]
    assert lazy(identity)(Placeholder(3))(*items) is items[2]


def test_nested_bind_expression_is_evaluated():
    def outer(s):
        return s + "!"

    def inner(s):
        return s.upper()

    expr = lazy(outer)(lazy(inner)(Placeholder(1)))
    assert expr("hi") == outer(inner("hi"))


def test_placeholders_can_be_reordered():
    swapped = lazy(lambda a, b: (a, b))(Placeholder(2), Placeholder(1))
    assert swapped("x", "y") == ("y", "x")


def test_missing_argument_raises():
    with pytest.raises(NotInvocableError):
        lazy(identity)(Placeholder(2))(0)


def test_is_invocable_respects_placeholder_arity():
    expr = lazy(add)(Placeholder(1), Placeholder(2))
    assert is_invocable(expr, 1, 2)
    assert not is_invocable(expr, 1)


@pytest.mark.parametrize("bad", [0, -1])
def test_placeholder_index_must_be_positive(bad):
    with pytest.raises(ValueError):
        Placeholder(bad)


def test_placeholder_index_must_be_int():
    with pytest.raises(TypeError):
        Placeholder("1")


def test_is_bind_expression():
    assert is_bind_expression(lazy(identity)(1))
    assert is_bind_expression(lazy(identity)())
    assert not is_bind_expression(identity)
    assert not is_bind_expression(Placeholder(1))


def test_invoker_keeps_function_and_bound_arguments():
    invoker = lazy(add)(1, Placeholder(1))
    assert isinstance(invoker, LazyInvoker)
    assert invoker.f is add
    assert invoker.bound == (1, Placeholder(1))


def test_base_function_and_rejects_non_callable():
    adaptor = lazy(add)
    assert isinstance(adaptor, LazyAdaptor)
    assert adaptor.base_function() is add
    with pytest.raises(TypeError):
        lazy(3)