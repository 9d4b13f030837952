"""
Builder for the enum constant details section of a type.
"""

from __future__ import annotations

from ..content import Content
from ..members import Kind
from ..model.elements import Element, TypeElement
from ..writers.protocol import EnumConstantWriter
from .base import AbstractMemberBuilder
from .context import BuildContext


class EnumConstantBuilder(AbstractMemberBuilder):
    """
    Builds the documentation for the enum constants of one type.

    The visible constants are resolved once, at construction. ``build``
    asks the writer for the section header and an empty member list, then
    for every constant, in order: its header, signature, deprecation
    marker, preview marker, comments (unless ``no_comment``) and tags.
    Each constant becomes one list item; header and list are combined into
    one details fragment appended to the target.

    Example:
        builder = EnumConstantBuilder(context, color_type, writer)
        if builder.has_members_to_document():
            builder.build(page)
    """

    def __init__(
        self,
        context: BuildContext,
        type_element: TypeElement,
        writer: EnumConstantWriter,
    ):
        """
        Initialize the builder.

        Args:
            context: Build context
            type_element: Type whose enum constants are documented
            writer: Writer producing the fragments

        Raises:
            ValueError: If writer is None
        """
        if writer is None:
            raise ValueError("Writer cannot be None")
        super().__init__(context, type_element)
        self.writer = writer
        self.enum_constants: tuple[Element, ...] = tuple(
            self.get_visible_members(Kind.ENUM_CONSTANTS)
        )

    @classmethod
    def get_instance(
        cls,
        context: BuildContext,
        type_element: TypeElement,
        writer: EnumConstantWriter,
    ) -> EnumConstantBuilder:
        """Construct a new EnumConstantBuilder."""
        return cls(context, type_element, writer)

    def get_writer(self) -> EnumConstantWriter:
        return self.writer

    def has_members_to_document(self) -> bool:
        return bool(self.enum_constants)

    def build(self, target: Content) -> None:
        """
        Append the enum constant details to target.

        Does nothing when the type has no visible enum constants.
        """
        if not self.has_members_to_document():
            return

        header = self.writer.get_enum_constants_details_header(self.type_element, target)
        member_list = self.writer.get_member_list()

        for element in self.enum_constants:
            self._lg.trace(
                "building enum constant",
                extra={"type": self.type_element.qualified_name, "constant": element.name},
            )
            constant = self.writer.get_enum_constants_header(element, member_list)
            self.build_signature(element, constant)
            self.build_deprecation_info(element, constant)
            self.build_preview_info(element, constant)
            self.build_enum_constant_comments(element, constant)
            self.build_tag_info(element, constant)
            member_list.add(self.writer.get_member_list_item(constant))

        target.add(self.writer.get_enum_constants_details(header, member_list))
        self._lg.debug(
            "built enum constant details",
            extra={"type": self.type_element.qualified_name, "count": len(self.enum_constants)},
        )

    def build_signature(self, element: Element, target: Content) -> None:
        target.add(self.writer.get_signature(element))

    def build_deprecation_info(self, element: Element, target: Content) -> None:
        self.writer.add_deprecated(element, target)

    def build_preview_info(self, element: Element, target: Content) -> None:
        self.writer.add_preview(element, target)

    def build_enum_constant_comments(self, element: Element, target: Content) -> None:
        """Add the constant's comments unless comments are suppressed."""
        if not self.options.no_comment:
            self.writer.add_comments(element, target)

    def build_tag_info(self, element: Element, target: Content) -> None:
        self.writer.add_tags(element, target)
