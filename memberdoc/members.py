"""
Visible member computation.

A VisibleMemberTable answers "which members of kind K does type T document,
and in which order". Members come back in declaration order with duplicate
names dropped, filtered by the configured access level, hidden elements and,
optionally, deprecated elements. Each kind is computed once per table.
"""

from __future__ import annotations

from enum import Enum

from .config.schemas import BuildOptions
from .exceptions import ResolutionError
from .model.elements import Element, ElementKind, TypeElement


class Kind(Enum):
    """Member groups a builder can ask for."""

    ENUM_CONSTANTS = (ElementKind.ENUM_CONSTANT,)
    FIELDS = (ElementKind.FIELD,)
    CONSTRUCTORS = (ElementKind.CONSTRUCTOR,)
    METHODS = (ElementKind.METHOD,)

    @property
    def element_kinds(self) -> tuple[ElementKind, ...]:
        return self.value


class VisibleMemberTable:
    """
    Visible members of one type, per Kind.

    Example:
        table = VisibleMemberTable(color_type, options)
        constants = table.get_visible_members(Kind.ENUM_CONSTANTS)
    """

    def __init__(self, type_element: TypeElement, options: BuildOptions):
        """
        Initialize the table.

        Args:
            type_element: Type whose members are resolved
            options: Build options (show_access, no_deprecated)
        """
        self._type = type_element
        self._options = options
        self._by_kind: dict[Kind, tuple[Element, ...]] = {}

    @property
    def type_element(self) -> TypeElement:
        return self._type

    def _is_visible(self, element: Element) -> bool:
        if element.is_hidden:
            return False
        if element.access > self._options.access_level:
            return False
        if self._options.no_deprecated and element.deprecated:
            return False
        return True

    def _compute(self, kind: Kind) -> tuple[Element, ...]:
        seen: set[str] = set()
        visible = []
        for member in self._type.members:
            if member.kind not in kind.element_kinds or member.name in seen:
                continue
            seen.add(member.name)
            if self._is_visible(member):
                visible.append(member)
        return tuple(visible)

    def get_visible_members(self, kind: Kind) -> list[Element]:
        """
        Return the visible members of the given kind, in declaration order.

        Raises:
            ResolutionError: If kind is not a Kind
        """
        if not isinstance(kind, Kind):
            raise ResolutionError(
                "Unknown member kind", kind=kind, type=self._type.qualified_name
            )
        if kind not in self._by_kind:
            self._by_kind[kind] = self._compute(kind)
        return list(self._by_kind[kind])

    def has_visible_members(self, kind: Kind) -> bool:
        return bool(self.get_visible_members(kind))


class VisibleMemberCache:
    """Hands out one VisibleMemberTable per type, keyed by qualified name."""

    def __init__(self, options: BuildOptions):
        self._options = options
        self._tables: dict[str, VisibleMemberTable] = {}

    def get_visible_member_table(self, type_element: TypeElement) -> VisibleMemberTable:
        key = type_element.qualified_name or type_element.name
        table = self._tables.get(key)
        if table is None:
            table = VisibleMemberTable(type_element, self._options)
            self._tables[key] = table
        return table

    def __len__(self) -> int:
        return len(self._tables)
