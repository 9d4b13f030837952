"""
Content tree for generated documentation.

Example:
    from memberdoc.content import ContentBuilder, Heading, Paragraph

    page = ContentBuilder()
    page.add(Heading(1, "Enum Color")).add(Paragraph("Primary colors."))
    print(page.render())
"""

from .content import (
    CodeBlock,
    Content,
    ContentBuilder,
    ContentLike,
    Heading,
    ListItem,
    MemberList,
    Paragraph,
    Section,
    Text,
)

__all__ = [
    "CodeBlock",
    "Content",
    "ContentBuilder",
    "ContentLike",
    "Heading",
    "ListItem",
    "MemberList",
    "Paragraph",
    "Section",
    "Text",
]
