"""cssbuilder: chainable builder for CSS selector strings."""
from __future__ import annotations

__version__ = "0.1.0"

from cssbuilder.builder import SelectorBuilder
from cssbuilder.config import BuilderConfig
from cssbuilder.errors import (
    DuplicateError,
    OrderError,
    SelectorError,
    SpecError,
    StateError,
)
from cssbuilder.facade import (
    attr,
    class_,
    combine,
    css_selector_builder,
    element,
    id,
    pseudo_class,
    pseudo_element,
)
from cssbuilder.loader import build_selector, load_selector
from cssbuilder.model import Category, Combinator, Fragment

__all__ = [
    "__version__",
    # Builder
    "SelectorBuilder",
    "BuilderConfig",
    # Model
    "Category",
    "Combinator",
    "Fragment",
    # Errors
    "SelectorError",
    "DuplicateError",
    "OrderError",
    "StateError",
    "SpecError",
    # Facade
    # `id` stays importable by name but out of `import *` (builtin)
    "element",
    "class_",
    "attr",
    "pseudo_class",
    "pseudo_element",
    "combine",
    "css_selector_builder",
    # Documents
    "build_selector",
    "load_selector",
]
