"""Function objects built once, on first use, and shared."""

from __future__ import annotations

from typing import Any, Callable, ClassVar

from hofkit.invocable import is_invocable

__all__ = ["Static"]


class Static:
    """Call a default-constructed instance of ``factory``, built on first use.

    All ``Static`` wrappers around the same factory share one instance.
    """

    _instances: ClassVar[dict[Any, Any]] = {}

    def __init__(self, factory: Callable[[], Any]) -> None:
        self.factory = factory

    def base_function(self) -> Any:
        """Return the shared function object, building it if needed."""
        try:
            return self._instances[self.factory]
        except KeyError:
            f = self._instances[self.factory] = self.factory()
            return f

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        return self.base_function()(*args, **kwargs)

    def is_invocable_with(self, *args: Any, **kwargs: Any) -> bool:
        return is_invocable(self.base_function(), *args, **kwargs)

    def __repr__(self) -> str:
        return f"Static({self.factory!r})"