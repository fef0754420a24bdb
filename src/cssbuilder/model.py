"""Selector model: Category, Combinator, and Fragment types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, StrEnum


class Category(IntEnum):
    """Kinds of compound-selector fragments, in rendering order.

    The integer value is the position of the category inside a selector:
    a fragment may only be added while no category with a greater value
    is present.
    """

    ELEMENT = 0
    ID = 1
    CLASS = 2
    ATTRIBUTE = 3
    PSEUDO_CLASS = 4
    PSEUDO_ELEMENT = 5

    @property
    def prefix(self) -> str:
        return _PREFIXES[self]

    @property
    def suffix(self) -> str:
        return "]" if self is Category.ATTRIBUTE else ""

    @property
    def repeatable(self) -> bool:
        """Whether the category accumulates several values."""
        return self in _REPEATABLE

    @property
    def label(self) -> str:
        return self.name.lower().replace("_", "-")

    def format(self, value: str) -> str:
        """Render a raw value as fragment text, e.g. ``main`` -> ``#main``."""
        return f"{self.prefix}{value}{self.suffix}"


_PREFIXES: dict[Category, str] = {
    Category.ELEMENT: "",
    Category.ID: "#",
    Category.CLASS: ".",
    Category.ATTRIBUTE: "[",
    Category.PSEUDO_CLASS: ":",
    Category.PSEUDO_ELEMENT: "::",
}

_REPEATABLE = frozenset({Category.CLASS, Category.ATTRIBUTE, Category.PSEUDO_CLASS})


class Combinator(StrEnum):
    """The four CSS combinators joining two selectors."""

    DESCENDANT = " "
    CHILD = ">"
    SIBLING = "~"
    ADJACENT = "+"


@dataclass(frozen=True)
class Fragment:
    """All values recorded for one category of a compound selector."""

    category: Category
    values: tuple[str, ...]  # raw values, insertion order

    def render(self) -> str:
        return "".join(self.category.format(value) for value in self.values)
