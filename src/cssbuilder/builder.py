"""SelectorBuilder: accumulates selector fragments and renders them."""

from __future__ import annotations

import logging

from cssbuilder.config import BuilderConfig
from cssbuilder.errors import DuplicateError, OrderError, StateError
from cssbuilder.model import Category, Combinator, Fragment

log = logging.getLogger("cssbuilder.builder")

_COMBINATORS = frozenset(c.value for c in Combinator)


class SelectorBuilder:
    """Builds one CSS selector expression through chained calls.

    A builder is either *compound* (element, id, classes, attributes,
    pseudo-classes and a pseudo-element, added in that order) or
    *combined* (a sequence of ``left combinator right`` strings produced
    by :meth:`combine`). Mixing the two raises :class:`StateError`.

    Every mutating method returns the builder itself; a failing call
    leaves the recorded state unchanged.
    """

    def __init__(self, config: BuilderConfig | None = None) -> None:
        self._config = config or BuilderConfig()
        self._fragments: dict[Category, list[str]] = {}
        self._combined: list[str] = []

    # --- compound fragments ----------------------------------------------

    def element(self, name: str) -> SelectorBuilder:
        return self._add(Category.ELEMENT, name)

    def id(self, name: str) -> SelectorBuilder:
        return self._add(Category.ID, name)

    def class_(self, name: str) -> SelectorBuilder:
        return self._add(Category.CLASS, name)

    def attr(self, spec: str) -> SelectorBuilder:
        return self._add(Category.ATTRIBUTE, spec)

    def pseudo_class(self, name: str) -> SelectorBuilder:
        return self._add(Category.PSEUDO_CLASS, name)

    def pseudo_element(self, name: str) -> SelectorBuilder:
        return self._add(Category.PSEUDO_ELEMENT, name)

    def _add(self, category: Category, value: str) -> SelectorBuilder:
        if self._combined:
            raise StateError(
                f"Cannot add {category.label} to a combined selector",
                category=category,
            )
        if not category.repeatable and category in self._fragments:
            raise DuplicateError(category)
        later = [c for c in self._fragments if c > category]
        if later:
            raise OrderError(category, conflicting=max(later))

        self._fragments.setdefault(category, []).append(value)
        log.debug("Added %s fragment %r", category.label, value)
        return self

    # --- combination -------------------------------------------------------

    def combine(
        self,
        left: SelectorBuilder,
        combinator: str,
        right: SelectorBuilder,
    ) -> SelectorBuilder:
        """Append ``"<left> <combinator> <right>"`` to this builder.

        Both operands are rendered immediately and are not modified.
        """
        if self._fragments:
            raise StateError("Cannot combine into a builder that holds fragments")
        if self._config.strict_combinators and combinator not in _COMBINATORS:
            raise ValueError(f"Unknown combinator: {combinator!r}")

        joined = f"{left.render()} {combinator} {right.render()}"
        self._combined.append(joined)
        log.debug("Combined selector %r", joined)
        return self

    # --- output --------------------------------------------------------------

    @property
    def is_combined(self) -> bool:
        return bool(self._combined)

    def fragments(self) -> tuple[Fragment, ...]:
        """Return the recorded fragments in rendering order."""
        return tuple(
            Fragment(category=category, values=tuple(self._fragments[category]))
            for category in sorted(self._fragments)
        )

    def render(self) -> str:
        if self._combined:
            return "".join(self._combined)
        return "".join(fragment.render() for fragment in self.fragments())

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"SelectorBuilder({self.render()!r})"
