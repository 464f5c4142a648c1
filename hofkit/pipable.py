"""Let a function's first argument be piped in with the ``|`` operator."""

from __future__ import annotations

from typing import Any, Callable

from hofkit.invocable import NotInvocableError, function_param_limit, is_invocable

__all__ = ["PipableAdaptor", "PipeClosure", "pipable"]


class PipeClosure:
    """Remaining arguments of a call, waiting for the first one via ``|``."""

    def __init__(self, f: Callable[..., Any], args: tuple[Any, ...]) -> None:
        self.f = f
        self.args = tuple(args)

    def __call__(self, value: Any) -> Any:
        return self.f(value, *self.args)

    def __ror__(self, value: Any) -> Any:
        return self(value)

    def is_invocable_with(self, *args: Any, **kwargs: Any) -> bool:
        if kwargs or len(args) != 1:
            return False
        return is_invocable(self.f, args[0], *self.args)

    def __repr__(self) -> str:
        return f"PipeClosure({self.f!r}, {self.args!r})"


class PipableAdaptor:
    """Call ``f`` directly when possible, else wait for a piped first argument.

    ``x | pipable(f)(*ys)`` is ``f(x, *ys)``, and ``x | pipable(f)`` is ``f(x)``.
    """

    def __init__(self, f: Callable[..., Any]) -> None:
        if not callable(f):
            raise TypeError(f"{f!r} is not callable")
        self.f = f

    def base_function(self) -> Callable[..., Any]:
        """Return the wrapped function."""
        return self.f

    def __call__(self, *args: Any) -> Any:
        if is_invocable(self.f, *args):
            return self.f(*args)
        if len(args) < function_param_limit(self.f):
            return PipeClosure(self.f, args)
        raise NotInvocableError(
            "the function can neither be called nor piped with these arguments"
        )

    def __ror__(self, value: Any) -> Any:
        return self(value)

    def is_invocable_with(self, *args: Any, **kwargs: Any) -> bool:
        if kwargs:
            return is_invocable(self.f, *args, **kwargs)
        return is_invocable(self.f, *args) or len(args) < function_param_limit(self.f)

    def __repr__(self) -> str:
        return f"PipableAdaptor({self.f!r})"


def pipable(f: Callable[..., Any]) -> PipableAdaptor:
    """Wrap ``f`` so its first argument can be piped in with ``|``."""
    return PipableAdaptor(f)