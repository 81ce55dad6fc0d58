"""Helpers for values that may be missing, represented by ``None``."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any


def recursive_get_value(value: Any) -> Any:
    """Return the held value; raise if the value is missing."""
    if value is None:
        raise ValueError("cannot take the value of a missing value")
    return value


def recursive_is_initialized(value: Any) -> bool:
    """Tell whether a value is present."""
    return value is not None


class OptionalFilteredFunction:
    """Wraps a function so that any missing argument yields a missing result."""

    def __init__(self, func: Callable[..., Any]) -> None:
        self.func = func

    def __call__(self, *args: Any) -> Any:
        if not all(recursive_is_initialized(arg) for arg in args):
            return None
        return self.func(*(recursive_get_value(arg) for arg in args))


def optionalize_function(func: Callable[..., Any]) -> OptionalFilteredFunction:
    """Return ``func`` wrapped so that missing arguments propagate."""
    return OptionalFilteredFunction(func)