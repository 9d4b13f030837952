"""
Writers turning documented elements into content fragments.
"""

from .markdown import (
    MarkdownEnumConstantWriter,
    MarkdownTypeWriter,
    MarkdownWriter,
    MarkdownWriterFactory,
    tag_label,
)
from .protocol import EnumConstantWriter, TypeWriter, WriterFactory

__all__ = [
    "EnumConstantWriter",
    "MarkdownEnumConstantWriter",
    "MarkdownTypeWriter",
    "MarkdownWriter",
    "MarkdownWriterFactory",
    "TypeWriter",
    "WriterFactory",
    "tag_label",
]
