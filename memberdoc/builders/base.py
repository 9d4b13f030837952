"""
Base classes for documentation builders.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..content import Content
from ..log import Logger, LoggerFactory
from ..members import Kind, VisibleMemberTable
from ..model.elements import Element, TypeElement
from .context import BuildContext


class AbstractBuilder(ABC):
    """
    Base class for builders.

    A builder appends the documentation it is responsible for to a target
    content node. Builders hold the context's options explicitly.
    """

    def __init__(self, context: BuildContext):
        self.context = context
        self.options = context.options
        self._lg: Logger = LoggerFactory.create_child(context.lg, "builder")

    @abstractmethod
    def build(self, target: Content) -> None:
        """
        Append this builder's documentation to target.

        Raises:
            BuildError: Propagated from member resolution or writers
        """


class AbstractMemberBuilder(AbstractBuilder):
    """Base class for builders documenting one group of members of a type."""

    def __init__(self, context: BuildContext, type_element: TypeElement):
        super().__init__(context)
        self.type_element = type_element
        self._member_table: VisibleMemberTable = (
            context.member_cache.get_visible_member_table(type_element)
        )

    def get_visible_members(self, kind: Kind) -> list[Element]:
        """Return the visible members of the documented type for kind."""
        return self._member_table.get_visible_members(kind)

    @abstractmethod
    def has_members_to_document(self) -> bool:
        """Return whether there are members to document."""
