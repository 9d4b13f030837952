"""
Declaration model documented by memberdoc.

Elements are plain immutable values. Comments and tags arrive already split
(body text plus ordered block tags); nothing here parses doc comments.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum


class AccessLevel(IntEnum):
    """Access levels, ordered from most to least visible."""

    PUBLIC = 0
    PROTECTED = 1
    PACKAGE = 2
    PRIVATE = 3

    @classmethod
    def parse(cls, value: str | AccessLevel) -> AccessLevel:
        """Parse an access level name ("public", "protected", ...)."""
        if isinstance(value, AccessLevel):
            return value
        try:
            return cls[value.strip().upper()]
        except KeyError:
            raise ValueError(f"Invalid access level '{value}'") from None

    @property
    def keyword(self) -> str:
        """Modifier keyword for signatures ("" for package access)."""
        return "" if self is AccessLevel.PACKAGE else self.name.lower()


class ElementKind(str, Enum):
    """Kinds of declarations."""

    CLASS = "class"
    INTERFACE = "interface"
    ENUM = "enum"
    RECORD = "record"
    ANNOTATION_TYPE = "annotation_type"
    ENUM_CONSTANT = "enum_constant"
    FIELD = "field"
    CONSTRUCTOR = "constructor"
    METHOD = "method"

    @property
    def is_type(self) -> bool:
        return self in _TYPE_KINDS


_TYPE_KINDS = frozenset(
    {
        ElementKind.CLASS,
        ElementKind.INTERFACE,
        ElementKind.ENUM,
        ElementKind.RECORD,
        ElementKind.ANNOTATION_TYPE,
    }
)


@dataclass(frozen=True)
class Tag:
    """A block tag such as ``since`` or ``see``; name is given without '@'."""

    name: str
    text: str = ""


@dataclass(frozen=True)
class Element:
    """
    Common attributes of every documented declaration.

    Attributes:
        name: Simple name
        kind: Declaration kind
        access: Access level
        modifiers: Extra modifiers in declaration order (static, final, ...)
        comment: Descriptive comment body
        tags: Block tags in source order
        deprecated: Whether the element is deprecated
        for_removal: Whether deprecation is for removal
        deprecation_comment: Text accompanying the deprecation
        preview: Whether the element is a preview API
        hidden: Whether the element is excluded from documentation
    """

    name: str
    kind: ElementKind
    access: AccessLevel = AccessLevel.PUBLIC
    modifiers: tuple[str, ...] = ()
    comment: str = ""
    tags: tuple[Tag, ...] = ()
    deprecated: bool = False
    for_removal: bool = False
    deprecation_comment: str = ""
    preview: bool = False
    hidden: bool = False

    @property
    def is_hidden(self) -> bool:
        """True if hidden by flag or by a ``hidden`` tag."""
        return self.hidden or any(t.name == "hidden" for t in self.tags)

    def tags_named(self, name: str) -> list[Tag]:
        """Return the block tags with the given name, in order."""
        return [t for t in self.tags if t.name == name]


@dataclass(frozen=True)
class VariableElement(Element):
    """
    A field or enum constant.

    Attributes:
        type_name: Declared type; for enum constants, the enclosing enum
        owner: Qualified name of the enclosing type
    """

    type_name: str = ""
    owner: str = ""

    @property
    def is_enum_constant(self) -> bool:
        return self.kind is ElementKind.ENUM_CONSTANT


@dataclass(frozen=True)
class TypeElement(Element):
    """
    A type declaration and its members in declaration order.

    Attributes:
        qualified_name: Fully qualified name (package.Name)
        members: Member elements in declaration order
    """

    qualified_name: str = ""
    members: tuple[Element, ...] = field(default=())

    @property
    def package(self) -> str:
        """Package part of the qualified name ("" for the unnamed package)."""
        head, _, _ = self.qualified_name.rpartition(".")
        return head

    @property
    def is_enum(self) -> bool:
        return self.kind is ElementKind.ENUM
