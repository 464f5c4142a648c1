"""Call a function with arguments that are evaluated lazily, left to right."""

from __future__ import annotations

from typing import Any, Callable

__all__ = ["evaluate", "apply_eval"]


def evaluate(x: Callable[[], Any]) -> Any:
    """Evaluate a nullary function object and return its result."""
    if not callable(x):
        raise TypeError(f"{x!r} cannot be evaluated")
    return x()


def apply_eval(f: Callable[..., Any], *args: Callable[[], Any]) -> Any:
    """Call ``f`` with ``evaluate(arg)`` for each argument.

    The arguments are always evaluated in order, from left to right.
    """
    if not callable(f):
        raise TypeError(f"{f!r} is not callable")
    values = [evaluate(x) for x in args]
    return f(*values)