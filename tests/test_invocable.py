import functools
import sys

import pytest

from hofkit.invocable import NotInvocableError, function_param_limit, is_invocable


def test_plain_function_arity():
    def add(x, y):
        return x + y

    assert is_invocable(add, 1, 2) is True
    assert is_invocable(add, 1) is False
    assert is_invocable(add, 1, 2, 3) is False


def test_keyword_arguments():
    def f(x, *, flag=False):
        return x

    assert is_invocable(f, 1, flag=True) is True
    assert is_invocable(f, 1, other=True) is False


def test_annotations_are_checked():
    def for_ints(x: int) -> str:
        return "Int"

    assert is_invocable(for_ints, 3) is True
    assert is_invocable(for_ints, "three") is False


def test_var_positional_annotations():
    def total(*xs: int):
        return sum(xs)

    assert is_invocable(total, 1, 2, 3) is True
    assert is_invocable(total, 1, "2") is False


def test_non_callable_is_not_invocable():
    assert is_invocable(42) is False
    assert is_invocable("text", 1) is False


def test_callable_object():
    class IsInvocableClass:
        def __call__(self, x: int) -> None:
            return None

    assert is_invocable(IsInvocableClass(), 1) is True
    assert is_invocable(IsInvocableClass()) is False


def test_class_constructor_arity():
    class Point:
        def __init__(self, x, y=0):
            self.x = x
            self.y = y

    assert is_invocable(Point, 1) is True
    assert is_invocable(Point, 1, 2) is True
    assert is_invocable(Point) is False


def test_partial_arguments_count():
    def add(x, y):
        return x + y

    inc = functools.partial(add, 1)
    assert is_invocable(inc, 2) is True
    assert is_invocable(inc, 2, 3) is False


def test_hook_overrides_signature():
    class Picky:
        def __call__(self, *args):
            return args

        def is_invocable_with(self, *args, **kwargs):
            return len(args) == 2

    assert is_invocable(Picky(), 1, 2) is True
    assert is_invocable(Picky(), 1) is False


def test_param_limit_default_and_attribute():
    def f(*xs):
        return xs

    assert function_param_limit(f) == sys.maxsize
    f.param_limit = 2
    assert function_param_limit(f) == 2
    assert is_invocable(f, 1, 2) is True
    assert is_invocable(f, 1, 2, 3) is False


def test_not_invocable_error_is_caught_as_type_error():
    err = NotInvocableError("cannot call")
    assert err.args == ("cannot call",)
    assert str(err) == "cannot call"
    with pytest.raises(TypeError, match="^cannot call$"):
        raise err