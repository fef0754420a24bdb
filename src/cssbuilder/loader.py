"""Build selectors from JSON-style documents.

Document examples:
    {"element": "a", "attr": ['href$=".png"'], "pseudo_class": "focus"}
    {"combine": [{"element": "div", "id": "main"}, "+", {"element": "span"}]}
    {"combine": [[{"element": "p"}, ">", {"class": "note"}],
                 [{"element": "em"}, "~", {"element": "b"}]]}
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

from cssbuilder.builder import SelectorBuilder
from cssbuilder.config import BuilderConfig
from cssbuilder.errors import SpecError
from cssbuilder.model import Category

__all__ = ["build_selector", "load_selector"]

log = logging.getLogger("cssbuilder.loader")

# Document keys in rendering order.
_KEYS: dict[str, Category] = {
    "element": Category.ELEMENT,
    "id": Category.ID,
    "class": Category.CLASS,
    "attr": Category.ATTRIBUTE,
    "pseudo_class": Category.PSEUDO_CLASS,
    "pseudo_element": Category.PSEUDO_ELEMENT,
}

_METHODS: dict[Category, str] = {
    Category.ELEMENT: "element",
    Category.ID: "id",
    Category.CLASS: "class_",
    Category.ATTRIBUTE: "attr",
    Category.PSEUDO_CLASS: "pseudo_class",
    Category.PSEUDO_ELEMENT: "pseudo_element",
}


def _values(key: str, category: Category, raw: Any) -> list[str]:
    """Normalize a document value into a list of strings."""
    if isinstance(raw, str):
        return [raw]
    if category.repeatable and isinstance(raw, list) and all(
        isinstance(item, str) for item in raw
    ):
        return raw
    expected = "a string or list of strings" if category.repeatable else "a string"
    raise SpecError(f"Value of {key!r} must be {expected}", category=category)


def _build_compound(data: Mapping[str, Any], builder: SelectorBuilder) -> None:
    unknown = sorted(set(data) - set(_KEYS))
    if unknown:
        raise SpecError(f"Unknown selector keys: {', '.join(unknown)}")
    for key, category in _KEYS.items():
        if key not in data:
            continue
        add = getattr(builder, _METHODS[category])
        for value in _values(key, category, data[key]):
            add(value)


def _triples(raw: Any) -> list[list[Any]]:
    if not isinstance(raw, list) or not raw:
        raise SpecError("'combine' must be a non-empty list")
    if all(isinstance(item, list) for item in raw):
        triples = raw
    else:
        triples = [raw]
    for triple in triples:
        if len(triple) != 3 or not isinstance(triple[1], str):
            raise SpecError("Each combination must be [left, combinator, right]")
    return triples


def build_selector(
    data: Mapping[str, Any], config: BuilderConfig | None = None
) -> SelectorBuilder:
    """Turn a selector document into a SelectorBuilder.

    Compound keys are applied in rendering order regardless of their order
    in the document. Raises SpecError for malformed documents; builder
    errors (DuplicateError, StateError, ...) propagate unchanged.
    """
    if not isinstance(data, Mapping):
        raise SpecError(f"Selector document must be an object, got {type(data).__name__}")

    builder = SelectorBuilder(config)
    if "combine" in data:
        if len(data) > 1:
            raise SpecError("'combine' cannot be mixed with other selector keys")
        for left, combinator, right in _triples(data["combine"]):
            builder.combine(
                build_selector(left, config),
                combinator,
                build_selector(right, config),
            )
    else:
        _build_compound(data, builder)

    log.debug("Built selector %r", builder.render())
    return builder


def load_selector(text: str, config: BuilderConfig | None = None) -> SelectorBuilder:
    """Parse JSON text and build the selector it describes."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SpecError(f"Invalid JSON: {exc}") from exc
    except RecursionError as exc:
        raise SpecError("Selector document is nested too deeply") from exc
    try:
        return build_selector(data, config)
    except RecursionError as exc:
        raise SpecError("Selector document is nested too deeply") from exc
