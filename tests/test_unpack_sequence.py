from collections import namedtuple
from dataclasses import dataclass

import pytest

from hofkit.unpack_sequence import (
    is_unpackable,
    register_unpack_sequence,
    unpack_sequence,
)


def test_tuple_is_unpackable_by_default():
    assert is_unpackable((1, 2)) is True
    assert unpack_sequence(lambda a, b: (b, a), (1, 2)) == (2, 1)


def test_tuple_subclass_is_unpackable():
    Pair = namedtuple("Pair", "x y")
    assert is_unpackable(Pair(1, 2)) is True
    assert unpack_sequence(lambda x, y: [x, y], Pair(3, 4)) == [3, 4]


def test_unregistered_type_raises():
    class Opaque:
        pass

    assert is_unpackable(Opaque()) is False
    with pytest.raises(TypeError):
        unpack_sequence(print, Opaque())


def test_register_custom_sequence():
    @dataclass
    class MySequence:
        x: int
        y: int

    register_unpack_sequence(MySequence, lambda f, s: f(s.x, s.y))
    assert is_unpackable(MySequence(1, 2)) is True
    assert unpack_sequence(lambda a, b: (a, b), MySequence(5, 6)) == (5, 6)


def test_register_returns_apply():
    class Box:
        def __init__(self, items):
            self.items = items

    def apply(f, box):
        return f(*box.items)

    assert register_unpack_sequence(Box, apply) is apply
    assert unpack_sequence(lambda *xs: list(xs), Box(["a", "b"])) == ["a", "b"]


def test_register_rejects_bad_arguments():
    with pytest.raises(TypeError):
        register_unpack_sequence("tuple", lambda f, s: f(*s))
    with pytest.raises(TypeError):
        register_unpack_sequence(list, None)