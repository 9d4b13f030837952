"""
Declaration model: types, members and block tags.
"""

from .elements import (
    AccessLevel,
    Element,
    ElementKind,
    Tag,
    TypeElement,
    VariableElement,
)
from .loader import load_type, load_types, load_types_file

__all__ = [
    "AccessLevel",
    "Element",
    "ElementKind",
    "Tag",
    "TypeElement",
    "VariableElement",
    "load_type",
    "load_types",
    "load_types_file",
]
