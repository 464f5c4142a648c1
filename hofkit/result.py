"""Fix the type of what a function returns."""

from __future__ import annotations

from typing import Any, Callable

from hofkit.invocable import NotInvocableError, is_invocable

__all__ = ["ResultAdaptor", "result"]


class ResultAdaptor:
    """Call ``f`` and convert its return value to ``result_type``.

    A ``result_type`` of ``None`` discards the value and returns ``None``.
    """

    def __init__(self, result_type: Any, f: Callable[..., Any]) -> None:
        if not callable(f):
            raise TypeError(f"{f!r} is not callable")
        if result_type is not None and not callable(result_type):
            raise TypeError(f"{result_type!r} cannot be used as a result type")
        self.result_type = result_type
        self.f = f

    def base_function(self) -> Callable[..., Any]:
        """Return the wrapped function."""
        return self.f

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        if not is_invocable(self.f, *args, **kwargs):
            raise NotInvocableError("the function cannot be called with these arguments")
        value = self.f(*args, **kwargs)
        if self.result_type is None:
            return None
        return self.result_type(value)

    def is_invocable_with(self, *args: Any, **kwargs: Any) -> bool:
        return is_invocable(self.f, *args, **kwargs)

    def __repr__(self) -> str:
        return f"ResultAdaptor({self.result_type!r}, {self.f!r})"


def result(result_type: Any, f: Callable[..., Any]) -> ResultAdaptor:
    """Wrap ``f`` so its return value is converted to ``result_type``."""
    return ResultAdaptor(result_type, f)