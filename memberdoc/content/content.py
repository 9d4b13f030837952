"""
Composable documentation content.

Writers produce Content nodes and builders append them to one another.
Builders never inspect nodes; only writers and tests look inside. Every
node renders itself as Markdown through ``write(out)``.
"""

from __future__ import annotations

from io import StringIO
from typing import Self, TextIO, Union

ContentLike = Union["Content", str]


class Content:
    """
    Base class of all content nodes.

    Containers keep their children in insertion order; empty children are
    kept in the tree but skipped when writing.
    """

    def __init__(self, *items: ContentLike):
        self.children: list[Content] = []
        for item in items:
            self.add(item)

    def add(self, item: ContentLike) -> Self:
        """
        Append a child node; strings are wrapped in Text.

        Returns:
            Self for method chaining
        """
        node = Text(item) if isinstance(item, str) else item
        if not isinstance(node, Content):
            raise TypeError(f"Cannot add {type(item).__name__} to content")
        self.children.append(node)
        return self

    def is_empty(self) -> bool:
        return all(child.is_empty() for child in self.children)

    def write(self, out: TextIO) -> None:
        """Write this node as Markdown."""
        for child in self.children:
            if not child.is_empty():
                child.write(out)

    def render(self) -> str:
        """Render to a Markdown string with a single trailing newline."""
        output = StringIO()
        self.write(output)
        text = output.getvalue().strip()
        return text + "\n" if text else ""

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self.children)} children)"


class ContentBuilder(Content):
    """Plain ordered sequence of content, used for pages and accumulators."""

    pass


class Text(Content):
    """Inline text, written verbatim."""

    def __init__(self, text: str = ""):
        super().__init__()
        self.text = text

    def add(self, item: ContentLike) -> Self:
        if isinstance(item, str):
            self.text += item
            return self
        return super().add(item)

    def is_empty(self) -> bool:
        return not self.text and super().is_empty()

    def write(self, out: TextIO) -> None:
        out.write(self.text)
        super().write(out)

    def __repr__(self) -> str:
        return f"Text({self.text!r})"


class Heading(Content):
    """A Markdown heading; level 1 to 6."""

    def __init__(self, level: int, *items: ContentLike):
        if not 1 <= level <= 6:
            raise ValueError(f"Heading level must be 1-6, got: {level}")
        super().__init__(*items)
        self.level = level

    def write(self, out: TextIO) -> None:
        out.write("#" * self.level + " ")
        super().write(out)
        out.write("\n\n")


class Paragraph(Content):
    """A block of inline content followed by a blank line."""

    def write(self, out: TextIO) -> None:
        super().write(out)
        out.write("\n\n")


class CodeBlock(Content):
    """A fenced code block."""

    def __init__(self, code: str, language: str = ""):
        super().__init__()
        self.code = code
        self.language = language

    def is_empty(self) -> bool:
        return not self.code

    def write(self, out: TextIO) -> None:
        out.write(f"```{self.language}\n{self.code}\n```\n\n")

    def __repr__(self) -> str:
        return f"CodeBlock({self.code!r})"


class Section(Content):
    """
    A titled block.

    The heading is written first, then the body. A section whose body is
    empty is itself empty, so headings never appear without content.
    """

    def __init__(self, heading: Heading | None = None, *items: ContentLike, anchor: str = ""):
        super().__init__(*items)
        self.heading = heading
        self.anchor = anchor

    def write(self, out: TextIO) -> None:
        if self.anchor:
            out.write(f'<a id="{self.anchor}"></a>\n\n')
        if self.heading is not None:
            self.heading.write(out)
        super().write(out)


class ListItem(Content):
    """One entry of a MemberList."""

    pass


class MemberList(Content):
    """Member entries, separated by horizontal rules."""

    def add(self, item: ContentLike) -> Self:
        node = item if isinstance(item, ListItem) else ListItem(item)
        return super().add(node)

    @property
    def items(self) -> list[ListItem]:
        return [c for c in self.children if isinstance(c, ListItem)]

    def write(self, out: TextIO) -> None:
        first = True
        for child in self.children:
            if child.is_empty():
                continue
            if not first:
                out.write("---\n\n")
            child.write(out)
            first = False
