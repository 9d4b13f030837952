"""
Markdown writers.

Produces pages shaped like:

    # Enum Color

    Package `com.example`

    Primary colors.

    ## Enum Constant Details

    ### RED

    ```
    public static final Color RED
    ```

    The color red.

    **Since:** 1.0
"""

from __future__ import annotations

from ..config.schemas import BuildOptions
from ..content import (
    CodeBlock,
    Content,
    ContentBuilder,
    Heading,
    ListItem,
    MemberList,
    Paragraph,
    Section,
)
from ..exceptions import WriterError
from ..model.elements import Element, ElementKind, Tag, TypeElement, VariableElement

# Tags rendered elsewhere (deprecation marker) or never rendered
_SKIPPED_TAGS = frozenset({"deprecated", "hidden"})

_TAG_LABELS = {
    "since": "Since",
    "see": "See Also",
    "author": "Author",
    "version": "Version",
    "serial": "Serial",
    "apiNote": "API Note",
    "implSpec": "Implementation Requirements",
    "implNote": "Implementation Note",
}

_TYPE_TITLES = {
    ElementKind.CLASS: "Class",
    ElementKind.INTERFACE: "Interface",
    ElementKind.ENUM: "Enum",
    ElementKind.RECORD: "Record",
    ElementKind.ANNOTATION_TYPE: "Annotation Interface",
}

REMOVAL_WARNING = "This API element is subject to removal in a future version."


def tag_label(name: str) -> str:
    """Display label for a block tag name."""
    return _TAG_LABELS.get(name, name[:1].upper() + name[1:])


class MarkdownWriter:
    """Rendering shared by the Markdown writers: markers, comments and tags."""

    def __init__(self, options: BuildOptions):
        self.options = options

    def _deprecation_text(self, element: Element) -> str:
        if element.for_removal:
            marker = f"**Deprecated, for removal: {REMOVAL_WARNING}**"
        else:
            marker = "**Deprecated.**"
        detail = element.deprecation_comment
        if not detail:
            tags = element.tags_named("deprecated")
            detail = tags[0].text if tags else ""
        return f"{marker} {detail}" if detail else marker

    def add_deprecated(self, element: Element, target: Content) -> None:
        """Add the deprecation marker when the element is deprecated."""
        if element.deprecated:
            target.add(Paragraph(self._deprecation_text(element)))

    def add_preview(self, element: Element, target: Content) -> None:
        """Add the preview marker when the element is a preview API."""
        if element.preview:
            target.add(
                Paragraph(
                    f"**Preview.** `{element.name}` is a preview API and may be "
                    "changed or removed in a future release."
                )
            )

    def add_comments(self, element: Element, target: Content) -> None:
        """Add the comment body when there is one."""
        if element.comment:
            target.add(Paragraph(element.comment))

    def _group_tags(self, tags: tuple[Tag, ...]) -> dict[str, list[str]]:
        groups: dict[str, list[str]] = {}
        for tag in tags:
            if tag.name in _SKIPPED_TAGS:
                continue
            if tag.name == "since" and self.options.no_since:
                continue
            groups.setdefault(tag.name, [])
            if tag.text:
                groups[tag.name].append(tag.text)
        return groups

    def add_tags(self, element: Element, target: Content) -> None:
        """Add block tags grouped by name in first-appearance order."""
        for name, texts in self._group_tags(element.tags).items():
            label = f"**{tag_label(name)}:**"
            target.add(Paragraph(f"{label} {', '.join(texts)}" if texts else label))


class MarkdownEnumConstantWriter(MarkdownWriter):
    """
    Markdown renderer for the enum constant details section of one type.

    Example:
        writer = MarkdownEnumConstantWriter(BuildOptions(), color_type)
        builder = EnumConstantBuilder(context, color_type, writer)
    """

    def __init__(self, options: BuildOptions, type_element: TypeElement):
        super().__init__(options)
        self.type_element = type_element

    def get_enum_constants_details_header(
        self, type_element: TypeElement, target: Content
    ) -> Content:
        return Section(
            Heading(2, "Enum Constant Details"), anchor="enum-constant-detail"
        )

    def get_member_list(self) -> Content:
        return MemberList()

    def get_enum_constants_header(self, element: Element, member_list: Content) -> Content:
        return Section(Heading(3, element.name), anchor=element.name)

    def get_signature(self, element: Element) -> Content:
        """
        Return the declaration of a constant as a code block.

        Raises:
            WriterError: If element is not an enum constant
        """
        if not isinstance(element, VariableElement) or not element.is_enum_constant:
            raise WriterError(
                "Not an enum constant",
                element=element.name,
                kind=element.kind.value,
            )
        words = [element.access.keyword, *element.modifiers, element.type_name, element.name]
        return CodeBlock(" ".join(w for w in words if w))

    def get_member_list_item(self, content: Content) -> Content:
        return ListItem(content)

    def get_enum_constants_details(
        self, header: Content, member_list: Content
    ) -> Content:
        return header.add(member_list)


class MarkdownTypeWriter(MarkdownWriter):
    """Markdown renderer for the title and description of a type page."""

    def get_header(self, type_element: TypeElement) -> Content:
        title = _TYPE_TITLES.get(type_element.kind, type_element.kind.value.title())
        header = ContentBuilder(Heading(1, f"{title} {type_element.name}"))
        if type_element.package:
            header.add(Paragraph(f"Package `{type_element.package}`"))
        return header

    def add_description(self, type_element: TypeElement, target: Content) -> None:
        self.add_deprecated(type_element, target)
        self.add_preview(type_element, target)
        if not self.options.no_comment:
            self.add_comments(type_element, target)
        self.add_tags(type_element, target)


class MarkdownWriterFactory:
    """Creates Markdown writers sharing one set of build options."""

    def __init__(self, options: BuildOptions):
        self.options = options

    def get_type_writer(self, type_element: TypeElement) -> MarkdownTypeWriter:
        return MarkdownTypeWriter(self.options)

    def get_enum_constant_writer(
        self, type_element: TypeElement
    ) -> MarkdownEnumConstantWriter:
        return MarkdownEnumConstantWriter(self.options, type_element)
