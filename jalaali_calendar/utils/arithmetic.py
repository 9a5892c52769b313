from __future__ import annotations


def div(a: int, b: int) -> int:
    """Integer division rounded toward negative infinity."""
    return a // b


def mod(a: int, b: int) -> int:
    """Remainder matching `div`, so that `a == div(a, b) * b + mod(a, b)`."""
    return a - div(a, b) * b


__all__ = ("div", "mod")
