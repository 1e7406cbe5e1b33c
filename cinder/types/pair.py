"""Cons cells and the list conventions built on them.

A proper list is a right-leaning chain of Pairs ending in Nil. Any other
terminator makes the chain an improper (dotted) list. Pairs are never
mutated after construction and compare by identity, so sharing a node
between several values is safe.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from cinder import LispValue
from cinder.types.nil import Nil


class Pair:
    """A two-slot cons cell."""

    __slots__ = ("car", "cdr")

    def __init__(self, car: LispValue, cdr: LispValue):
        self.car: LispValue = car
        self.cdr: LispValue = cdr

    def __iter__(self) -> Iterator[LispValue]:
        return iter_list(self)

    def __repr__(self) -> str:
        return f"Pair({self.car!r}, {self.cdr!r})"

    def __str__(self) -> str:
        from cinder.printer import to_string
        return to_string(self)


def iter_list(value: LispValue) -> Iterator[LispValue]:
    """Yield the elements of a list, stopping at the first non-Pair tail.

    For an improper list the dotted tail is not yielded; use `split_list`
    when the tail matters.
    """
    while isinstance(value, Pair):
        yield value.car
        value = value.cdr


def split_list(value: LispValue) -> tuple[list[LispValue], LispValue]:
    """Return (elements, tail). The tail is Nil for a proper list."""
    items: list[LispValue] = []
    while isinstance(value, Pair):
        items.append(value.car)
        value = value.cdr
    return items, value


def from_iterable(items: Iterable[LispValue], tail: LispValue = Nil) -> LispValue:
    """Build a list from Python items, terminated by `tail`."""
    result = tail
    for item in reversed(list(items)):
        result = Pair(item, result)
    return result


def make_list(*items: LispValue) -> LispValue:
    return from_iterable(items)
