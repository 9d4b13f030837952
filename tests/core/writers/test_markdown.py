"""Tests for memberdoc.writers.markdown module."""

import pytest

from memberdoc.builders import EnumConstantBuilder
from memberdoc.config import BuildOptions
from memberdoc.content import ContentBuilder, ListItem, MemberList, Section
from memberdoc.exceptions import BuildError, WriterError
from memberdoc.model import AccessLevel, Element, ElementKind, Tag
from memberdoc.writers import (
    EnumConstantWriter,
    MarkdownEnumConstantWriter,
    MarkdownTypeWriter,
    MarkdownWriterFactory,
    TypeWriter,
    tag_label,
)
from tests.fixtures.models import make_constant, make_enum


@pytest.fixture
def writer(options, color_type) -> MarkdownEnumConstantWriter:
    return MarkdownEnumConstantWriter(options, color_type)


def _rendered(add, element) -> str:
    target = ContentBuilder()
    add(element, target)
    return target.render()


class TestProtocols:
    """Test the Markdown writers satisfy the writer capability sets."""

    def test_enum_constant_writer(self, writer):
        assert isinstance(writer, EnumConstantWriter)

    def test_type_writer(self, options):
        assert isinstance(MarkdownTypeWriter(options), TypeWriter)

    def test_factory(self, options, color_type):
        factory = MarkdownWriterFactory(options)

        assert isinstance(factory.get_type_writer(color_type), MarkdownTypeWriter)
        enum_writer = factory.get_enum_constant_writer(color_type)
        assert isinstance(enum_writer, MarkdownEnumConstantWriter)
        assert enum_writer.type_element is color_type
        assert enum_writer.options is options


class TestContainers:
    """Test section, list and item containers."""

    def test_details_header(self, writer, color_type):
        header = writer.get_enum_constants_details_header(color_type, ContentBuilder())

        assert isinstance(header, Section)
        assert header.is_empty()

    def test_member_list_is_empty(self, writer):
        member_list = writer.get_member_list()

        assert isinstance(member_list, MemberList)
        assert member_list.items == []

    def test_constant_header_is_fresh(self, writer):
        member_list = writer.get_member_list()
        red = make_constant("RED")

        first = writer.get_enum_constants_header(red, member_list)
        second = writer.get_enum_constants_header(red, member_list)

        assert first is not second
        assert member_list.items == []

    def test_member_list_item(self, writer):
        item = writer.get_member_list_item(ContentBuilder("x"))
        assert isinstance(item, ListItem)

    def test_details_combines_header_and_list(self, writer, color_type):
        header = writer.get_enum_constants_details_header(color_type, ContentBuilder())
        member_list = writer.get_member_list()

        details = writer.get_enum_constants_details(header, member_list)

        assert details.children == [member_list]


class TestSignature:
    """Test get_signature."""

    def test_public_constant(self, writer):
        assert writer.get_signature(make_constant("RED")).code == (
            "public static final Color RED"
        )

    def test_package_access_has_no_keyword(self, writer):
        red = make_constant("RED", access=AccessLevel.PACKAGE)
        assert writer.get_signature(red).code == "static final Color RED"

    def test_rejects_non_constant(self, writer):
        method = Element(name="values", kind=ElementKind.METHOD)

        with pytest.raises(WriterError, match="Not an enum constant") as exc_info:
            writer.get_signature(method)
        assert isinstance(exc_info.value, BuildError)
        assert exc_info.value.context["kind"] == "method"


class TestMarkers:
    """Test deprecation and preview markers."""

    def test_not_deprecated_adds_nothing(self, writer):
        assert _rendered(writer.add_deprecated, make_constant("RED")) == ""

    def test_deprecated(self, writer):
        green = make_constant("GREEN", deprecated=True, deprecation_comment="Use LIME.")
        assert _rendered(writer.add_deprecated, green) == "**Deprecated.** Use LIME.\n"

    def test_deprecated_for_removal(self, writer):
        green = make_constant("GREEN", deprecated=True, for_removal=True)
        assert "Deprecated, for removal" in _rendered(writer.add_deprecated, green)

    def test_deprecated_text_from_tag(self, writer):
        green = make_constant(
            "GREEN", deprecated=True, tags=(Tag("deprecated", "Use LIME."),)
        )
        assert _rendered(writer.add_deprecated, green) == "**Deprecated.** Use LIME.\n"

    def test_preview(self, writer):
        blue = make_constant("BLUE", preview=True)
        assert _rendered(writer.add_preview, blue).startswith(
            "**Preview.** `BLUE` is a preview API"
        )

    def test_not_preview_adds_nothing(self, writer):
        assert _rendered(writer.add_preview, make_constant("BLUE")) == ""


class TestCommentsAndTags:
    """Test add_comments and add_tags."""

    def test_comment(self, writer):
        red = make_constant("RED", comment="The color red.")
        assert _rendered(writer.add_comments, red) == "The color red.\n"

    def test_empty_comment_adds_nothing(self, writer):
        assert _rendered(writer.add_comments, make_constant("RED")) == ""

    def test_tags_grouped_in_first_appearance_order(self, writer):
        red = make_constant(
            "RED",
            tags=(
                Tag("see", "GREEN"),
                Tag("since", "1.0"),
                Tag("see", "BLUE"),
                Tag("hidden"),
                Tag("deprecated", "x"),
            ),
        )
        assert _rendered(writer.add_tags, red) == (
            "**See Also:** GREEN, BLUE\n\n**Since:** 1.0\n"
        )

    def test_no_since(self, color_type):
        writer = MarkdownEnumConstantWriter(BuildOptions(no_since=True), color_type)
        red = make_constant("RED", tags=(Tag("since", "1.0"), Tag("author", "ann")))

        assert _rendered(writer.add_tags, red) == "**Author:** ann\n"

    @pytest.mark.parametrize(
        "name,label",
        [("since", "Since"), ("see", "See Also"), ("apiNote", "API Note"), ("custom", "Custom")],
    )
    def test_tag_label(self, name, label):
        assert tag_label(name) == label


class TestTypeWriter:
    """Test MarkdownTypeWriter."""

    def test_header_with_package(self, options, color_type):
        header = MarkdownTypeWriter(options).get_header(color_type)
        assert header.render() == "# Enum Color\n\nPackage `com.example`\n"

    def test_description_order(self, options):
        enum = make_enum(
            "com.example.Old",
            comment="Legacy values.",
            deprecated=True,
            tags=(Tag("since", "0.9"),),
        )
        target = ContentBuilder()
        MarkdownTypeWriter(options).add_description(enum, target)

        assert target.render() == "**Deprecated.**\n\nLegacy values.\n\n**Since:** 0.9\n"


@pytest.mark.integration
class TestRenderedSection:
    """Test the full enum constant section rendered through the builder."""

    def test_color_section(self, context, color_type, writer):
        target = ContentBuilder()
        EnumConstantBuilder(context, color_type, writer).build(target)

        assert target.render() == (
            '<a id="enum-constant-detail"></a>\n\n'
            "## Enum Constant Details\n\n"
            '<a id="RED"></a>\n\n'
            "### RED\n\n"
            "```\npublic static final Color RED\n```\n\n"
            "The color red.\n\n"
            "**Since:** 1.0\n\n"
            "---\n\n"
            '<a id="GREEN"></a>\n\n'
            "### GREEN\n\n"
            "```\npublic static final Color GREEN\n```\n\n"
            "The color green.\n\n"
            "---\n\n"
            '<a id="BLUE"></a>\n\n'
            "### BLUE\n\n"
            "```\npublic static final Color BLUE\n```\n\n"
            "The color blue.\n"
        )
