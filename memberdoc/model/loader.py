"""
Load the declaration model from YAML documents.

Document shape:

    types:
      - name: com.example.Color
        kind: enum
        comment: Primary colors.
        members:
          - name: RED
            comment: The color red.
            tags:
              - since: "1.0"
          - name: GREEN
            deprecated: true
            deprecation_comment: Use LIME.

Members of an enum default to kind ``enum_constant`` with the enum as their
type and ``public static final`` modifiers; other members must name a kind.
"""

from pathlib import Path
from typing import Any

import yaml

from ..exceptions import ModelError
from .elements import AccessLevel, Element, ElementKind, Tag, TypeElement, VariableElement

_ENUM_CONSTANT_MODIFIERS = ("static", "final")


def _parse_kind(value: Any, where: str) -> ElementKind:
    try:
        return ElementKind(str(value).lower())
    except ValueError:
        raise ModelError("Unknown element kind", kind=value, element=where) from None


def _parse_access(value: Any, where: str) -> AccessLevel:
    try:
        return AccessLevel.parse(str(value))
    except ValueError:
        raise ModelError("Unknown access level", access=value, element=where) from None


def _parse_tags(raw: Any, where: str) -> tuple[Tag, ...]:
    """Parse tags given as a list of single-key mappings or "name text" strings."""
    if raw is None:
        return ()
    if not isinstance(raw, list):
        raise ModelError("Tags must be a list", element=where)
    tags = []
    for item in raw:
        if isinstance(item, dict) and len(item) == 1:
            ((name, text),) = item.items()
            tags.append(Tag(str(name).lstrip("@"), "" if text is None else str(text)))
        elif isinstance(item, str) and item.strip():
            name, _, text = item.strip().partition(" ")
            tags.append(Tag(name.lstrip("@"), text.strip()))
        else:
            raise ModelError("Malformed tag", tag=item, element=where)
    return tuple(tags)


def _parse_modifiers(value: Any, where: str) -> tuple[str, ...]:
    """Parse modifiers given as a list of words or one space separated string."""
    if value is None:
        return ()
    if isinstance(value, str):
        return tuple(value.split())
    if isinstance(value, (list, tuple)) and all(isinstance(m, str) for m in value):
        return tuple(value)
    raise ModelError("Modifiers must be a list", modifiers=value, element=where)


def _common_fields(raw: dict[str, Any], where: str) -> dict[str, Any]:
    return {
        "access": _parse_access(raw.get("access", "public"), where),
        "comment": str(raw.get("comment") or "").strip(),
        "tags": _parse_tags(raw.get("tags"), where),
        "deprecated": bool(raw.get("deprecated", False)),
        "for_removal": bool(raw.get("for_removal", False)),
        "deprecation_comment": str(raw.get("deprecation_comment") or "").strip(),
        "preview": bool(raw.get("preview", False)),
        "hidden": bool(raw.get("hidden", False)),
    }


def _load_member(raw: Any, owner: str, simple_owner: str, owner_kind: ElementKind) -> Element:
    if isinstance(raw, str):
        raw = {"name": raw}
    if not isinstance(raw, dict) or not raw.get("name"):
        raise ModelError("Member must be a mapping with a name", owner=owner)
    name = str(raw["name"])
    where = f"{owner}.{name}"
    default_kind = "enum_constant" if owner_kind is ElementKind.ENUM else None
    kind_value = raw.get("kind", default_kind)
    if kind_value is None:
        raise ModelError("Member kind is required", element=where)
    kind = _parse_kind(kind_value, where)
    if kind.is_type:
        raise ModelError("Nested types are not supported", element=where)

    fields = _common_fields(raw, where)
    if kind is ElementKind.ENUM_CONSTANT:
        modifiers = _parse_modifiers(raw.get("modifiers", _ENUM_CONSTANT_MODIFIERS), where)
        type_name = str(raw.get("type", simple_owner))
    else:
        modifiers = _parse_modifiers(raw.get("modifiers"), where)
        type_name = str(raw.get("type", ""))
    if kind in (ElementKind.ENUM_CONSTANT, ElementKind.FIELD):
        return VariableElement(
            name=name,
            kind=kind,
            modifiers=modifiers,
            type_name=type_name,
            owner=owner,
            **fields,
        )
    return Element(name=name, kind=kind, modifiers=modifiers, **fields)


def load_type(raw: Any) -> TypeElement:
    """
    Load a single type declaration.

    Raises:
        ModelError: If the declaration is malformed
    """
    if not isinstance(raw, dict) or not raw.get("name"):
        raise ModelError("Type must be a mapping with a name")
    qualified = str(raw["name"])
    simple = qualified.rpartition(".")[2]
    kind = _parse_kind(raw.get("kind", "class"), qualified)
    if not kind.is_type:
        raise ModelError("Not a type kind", kind=kind.value, element=qualified)
    members_raw = raw.get("members") or []
    if not isinstance(members_raw, list):
        raise ModelError("Members must be a list", element=qualified)
    members = tuple(_load_member(m, qualified, simple, kind) for m in members_raw)
    return TypeElement(
        name=simple,
        kind=kind,
        modifiers=_parse_modifiers(raw.get("modifiers"), qualified),
        qualified_name=qualified,
        members=members,
        **_common_fields(raw, qualified),
    )


def load_types(data: Any) -> list[TypeElement]:
    """
    Load all type declarations from a parsed model document.

    Args:
        data: Mapping with a ``types`` list

    Returns:
        Types in document order

    Raises:
        ModelError: If a declaration is malformed or a type is declared twice
    """
    if not isinstance(data, dict) or not isinstance(data.get("types"), list):
        raise ModelError("Model document must contain a 'types' list")
    types = [load_type(t) for t in data["types"]]
    seen: set[str] = set()
    for t in types:
        if t.qualified_name in seen:
            raise ModelError("Duplicate type", element=t.qualified_name)
        seen.add(t.qualified_name)
    return types


def load_types_file(path: str | Path) -> list[TypeElement]:
    """Load type declarations from a YAML model file."""
    path = Path(path)
    if not path.is_file():
        raise ModelError("Model file not found", path=path)
    with open(path) as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ModelError(f"Invalid YAML: {e}", path=path) from e
    return load_types(data)
