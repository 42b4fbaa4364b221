"""Predicates handy when working with zones."""

from __future__ import annotations

from typing import Protocol


class _Named(Protocol):
    name: str


class NameEquals:
    """Matches zones of the given name."""

    def __init__(self, name: str) -> None:
        if name is None:
            raise ValueError("name must be defined")
        self.name = name

    def __call__(self, zone: _Named) -> bool:
        return self.name == zone.name

    def __eq__(self, other: object) -> bool:
        return isinstance(other, NameEquals) and other.name == self.name

    def __hash__(self) -> int:
        return hash(("nameEquals", self.name))

    def __repr__(self) -> str:
        return f"nameEquals({self.name})"

    __str__ = __repr__


def name_equals(name: str) -> NameEquals:
    return NameEquals(name)


class ZonePredicates:
    """Namespace mirroring the predicate factories above."""

    name_equals = staticmethod(name_equals)
