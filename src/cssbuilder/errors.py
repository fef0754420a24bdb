"""Selector builder error types."""

from __future__ import annotations

from cssbuilder.model import Category

DUPLICATE_MESSAGE = (
    "Element, id and pseudo-element should not occur more then one time "
    "inside the selector"
)
ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: element, id, "
    "class, attribute, pseudo-class, pseudo-element"
)


class SelectorError(Exception):
    """Base error for all cssbuilder errors."""

    def __init__(self, message: str, *, category: Category | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.category = category


class DuplicateError(SelectorError):
    """A single-valued category (element, id, pseudo-element) was set twice."""

    def __init__(self, category: Category, message: str = DUPLICATE_MESSAGE) -> None:
        super().__init__(message, category=category)


class OrderError(SelectorError):
    """A category was added after a later-ordered category was already present."""

    def __init__(
        self,
        category: Category,
        conflicting: Category,
        message: str = ORDER_MESSAGE,
    ) -> None:
        super().__init__(message, category=category)
        self.conflicting = conflicting


class StateError(SelectorError):
    """Compound fragments and combined selectors were mixed on one builder."""


class SpecError(SelectorError):
    """A selector document could not be turned into a builder."""
