"""
Builder for a complete type page.
"""

from __future__ import annotations

from ..content import Content, ContentBuilder
from ..model.elements import TypeElement
from ..writers.protocol import WriterFactory
from .base import AbstractBuilder
from .context import BuildContext
from .enum_constants import EnumConstantBuilder


class TypePageBuilder(AbstractBuilder):
    """
    Builds the documentation page of one type.

    The page holds the type header, its description and, for types with
    visible enum constants, the enum constant details section.
    """

    def __init__(
        self,
        context: BuildContext,
        type_element: TypeElement,
        writer_factory: WriterFactory,
    ):
        if writer_factory is None:
            raise ValueError("Writer factory cannot be None")
        super().__init__(context)
        self.type_element = type_element
        self.writer_factory = writer_factory

    def build(self, target: Content) -> None:
        type_writer = self.writer_factory.get_type_writer(self.type_element)
        target.add(type_writer.get_header(self.type_element))
        type_writer.add_description(self.type_element, target)

        enum_builder = EnumConstantBuilder.get_instance(
            self.context,
            self.type_element,
            self.writer_factory.get_enum_constant_writer(self.type_element),
        )
        if enum_builder.has_members_to_document():
            enum_builder.build(target)

    def build_page(self) -> ContentBuilder:
        """Build the page into a new content node and return it."""
        page = ContentBuilder()
        self.build(page)
        self._lg.debug("built page", extra={"type": self.type_element.qualified_name})
        return page
