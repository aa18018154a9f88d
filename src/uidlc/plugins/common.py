"""
Helpers shared by the reference plugins.
"""

from __future__ import annotations

import re

from ..core.ir import (
    ComponentUIDL,
    DependencyRecord,
    ReferenceType,
    UIDLDynamicReference,
    UIDLElement,
    UIDLElementNode,
    UIDLStaticValue,
)
from ..core.pipeline import ComponentStructure

# Attributes holding asset paths, rewritten with the assets prefix
ASSET_ATTRIBUTES = frozenset({"src", "poster"})

_UPPER = re.compile(r"(?<!^)(?=[A-Z])")


def style_key_to_css(key: str) -> str:
    """``backgroundColor`` -> ``background-color``."""
    return _UPPER.sub("-", key).lower()


def default_value(uidl: ComponentUIDL, reference: UIDLDynamicReference) -> str | None:
    """Static fallback for a dynamic reference: the prop/state default value."""
    content = reference.content
    if content.reference_type == ReferenceType.PROP:
        definition = uidl.prop_definitions.get(content.id)
    elif content.reference_type == ReferenceType.STATE:
        definition = uidl.state_definitions.get(content.id)
    else:
        return None
    if definition is None or definition.default_value is None:
        return None
    return str(definition.default_value)


def static_to_str(value: UIDLStaticValue) -> str:
    if isinstance(value.content, bool):
        return "true" if value.content else "false"
    return str(value.content)


def inline_style(uidl: ComponentUIDL, element: UIDLElement) -> str:
    declarations = []
    for key, value in element.style.items():
        if isinstance(value, UIDLStaticValue):
            resolved: str | None = static_to_str(value)
        else:
            resolved = default_value(uidl, value)
        if resolved is not None:
            declarations.append(f"{style_key_to_css(key)}: {resolved};")
    return " ".join(declarations)


def iter_elements(node: UIDLElementNode):
    """Depth-first walk over every element of a tree."""
    yield node.content
    for child in node.content.children:
        if isinstance(child, UIDLElementNode):
            yield from iter_elements(child)


def register_element_dependencies(structure: ComponentStructure) -> None:
    """Merge the dependency of every element into the aggregator, keyed by element type."""
    for element in iter_elements(structure.uidl.node):
        if element.dependency is not None:
            structure.dependencies.merge(
                element.element_type, DependencyRecord.from_uidl(element.dependency)
            )
