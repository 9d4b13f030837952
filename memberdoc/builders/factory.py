"""
Factory creating builders bound to one build context.
"""

from __future__ import annotations

from ..model.elements import TypeElement
from ..writers.protocol import EnumConstantWriter, WriterFactory
from .context import BuildContext
from .enum_constants import EnumConstantBuilder
from .page import TypePageBuilder


class BuilderFactory:
    """
    Creates builders sharing one context and writer factory.

    Example:
        factory = BuilderFactory(context, MarkdownWriterFactory(context.options))
        page = factory.get_type_page_builder(color_type).build_page()
    """

    def __init__(self, context: BuildContext, writer_factory: WriterFactory):
        self.context = context
        self.writer_factory = writer_factory

    def get_enum_constant_builder(
        self,
        type_element: TypeElement,
        writer: EnumConstantWriter | None = None,
    ) -> EnumConstantBuilder:
        """
        Return a builder for the enum constants of type_element.

        Args:
            type_element: Documented type
            writer: Writer to use; defaults to the factory's writer for the type
        """
        if writer is None:
            writer = self.writer_factory.get_enum_constant_writer(type_element)
        return EnumConstantBuilder.get_instance(self.context, type_element, writer)

    def get_type_page_builder(self, type_element: TypeElement) -> TypePageBuilder:
        return TypePageBuilder(self.context, type_element, self.writer_factory)
