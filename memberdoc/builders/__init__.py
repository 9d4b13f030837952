"""
Documentation builders.

Builders sequence calls between the member resolution service and a writer;
all rendering happens in the writer.
"""

from .base import AbstractBuilder, AbstractMemberBuilder
from .context import BuildContext
from .enum_constants import EnumConstantBuilder
from .factory import BuilderFactory
from .page import TypePageBuilder

__all__ = [
    "AbstractBuilder",
    "AbstractMemberBuilder",
    "BuildContext",
    "BuilderFactory",
    "EnumConstantBuilder",
    "TypePageBuilder",
]
