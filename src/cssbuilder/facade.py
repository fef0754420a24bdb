"""Entry points that start a fresh SelectorBuilder per expression.

Callers never construct :class:`SelectorBuilder` directly::

    element("a").attr('href$=".png"').pseudo_class("focus").render()
    # 'a[href$=".png"]:focus'

    combine(element("div").id("main"), "+", element("span")).render()
    # 'div#main + span'
"""

from __future__ import annotations

from types import SimpleNamespace

from cssbuilder.builder import SelectorBuilder

__all__ = [
    "element",
    "id",
    "class_",
    "attr",
    "pseudo_class",
    "pseudo_element",
    "combine",
    "css_selector_builder",
]


def element(name: str) -> SelectorBuilder:
    return SelectorBuilder().element(name)


def id(name: str) -> SelectorBuilder:  # noqa: A001
    return SelectorBuilder().id(name)


def class_(name: str) -> SelectorBuilder:
    return SelectorBuilder().class_(name)


def attr(spec: str) -> SelectorBuilder:
    return SelectorBuilder().attr(spec)


def pseudo_class(name: str) -> SelectorBuilder:
    return SelectorBuilder().pseudo_class(name)


def pseudo_element(name: str) -> SelectorBuilder:
    return SelectorBuilder().pseudo_element(name)


def combine(
    left: SelectorBuilder, combinator: str, right: SelectorBuilder
) -> SelectorBuilder:
    return SelectorBuilder().combine(left, combinator, right)


# Object-style access: css_selector_builder.element("div").render()
css_selector_builder = SimpleNamespace(
    element=element,
    id=id,
    class_=class_,
    attr=attr,
    pseudo_class=pseudo_class,
    pseudo_element=pseudo_element,
    combine=combine,
)
