"""
Writer capability sets consumed by builders.

Builders depend only on these protocols; any renderer that provides the
methods can be substituted.
"""

from typing import Protocol, runtime_checkable

from ..content import Content
from ..model.elements import Element, TypeElement


@runtime_checkable
class EnumConstantWriter(Protocol):
    """Fragment-producing operations for the enum constant details section."""

    def get_enum_constants_details_header(
        self, type_element: TypeElement, target: Content
    ) -> Content:
        """Return the section header for the enum constants of a type."""
        ...

    def get_member_list(self) -> Content:
        """Return an empty list accumulating per-constant entries."""
        ...

    def get_enum_constants_header(self, element: Element, member_list: Content) -> Content:
        """Return a fresh per-constant container starting with its header."""
        ...

    def get_signature(self, element: Element) -> Content:
        """Return the signature of a constant."""
        ...

    def add_deprecated(self, element: Element, target: Content) -> None:
        """Add the deprecation marker, if any, to target."""
        ...

    def add_preview(self, element: Element, target: Content) -> None:
        """Add the preview marker, if any, to target."""
        ...

    def add_comments(self, element: Element, target: Content) -> None:
        """Add the descriptive comment to target."""
        ...

    def add_tags(self, element: Element, target: Content) -> None:
        """Add the block tags to target."""
        ...

    def get_member_list_item(self, content: Content) -> Content:
        """Wrap a per-constant container as a list item."""
        ...

    def get_enum_constants_details(
        self, header: Content, member_list: Content
    ) -> Content:
        """Combine the section header and the member list."""
        ...


@runtime_checkable
class TypeWriter(Protocol):
    """Fragment-producing operations for the top of a type page."""

    def get_header(self, type_element: TypeElement) -> Content:
        """Return the page title for a type."""
        ...

    def add_description(self, type_element: TypeElement, target: Content) -> None:
        """Add the type's deprecation marker, comment and tags to target."""
        ...


class WriterFactory(Protocol):
    """Creates the writers for one output format."""

    def get_type_writer(self, type_element: TypeElement) -> TypeWriter: ...

    def get_enum_constant_writer(self, type_element: TypeElement) -> EnumConstantWriter: ...
