"""
Mapping resolution: substitute semantic elements with target primitives.

Resolution runs once per component tree, before any plugin, so plugins only
ever see concrete element kinds. It is idempotent: a resolved element keeps
its ``semantic_type`` and is never mapped a second time.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping as MappingABC

from .ir import (
    DependencyKind,
    GeneratorOptions,
    Mapping,
    ReferenceType,
    UIDLDependency,
    UIDLDynamicReference,
    UIDLElement,
    UIDLElementNode,
)
from .strings import camel_case_to_dash_case

logger = logging.getLogger(__name__)

NAVLINK = "navlink"


def merge_mappings(mappings: Iterable[Mapping | None]) -> Mapping:
    """Fold mappings left to right; later tables win per key."""
    merged = Mapping()
    for mapping in mappings:
        merged = merged.merge(mapping)
    return merged


def resolve_attributes(mapped_attrs: MappingABC, attrs: MappingABC) -> dict:
    """
    Combine a mapping's attribute bindings with the element's own attributes.

    A binding ``{"type": "dynamic", "content": {"referenceType": "attr", "id": X}}``
    takes the value of the element's attribute ``X``, which is then dropped.
    Bindings to attributes the element does not have are skipped.
    """
    resolved: dict = {}
    consumed: set[str] = set()
    for key, value in mapped_attrs.items():
        if isinstance(value, UIDLDynamicReference) and (
            value.content.reference_type == ReferenceType.ATTR
        ):
            referenced = value.content.id
            if referenced in attrs:
                resolved[key] = attrs[referenced]
                consumed.add(referenced)
            continue
        resolved[key] = value

    for key, value in attrs.items():
        if key not in consumed and key not in resolved:
            resolved[key] = value
    return resolved


def _resolve_local_dependency(
    dependency: UIDLDependency, element_type: str, prefix: str
) -> UIDLDependency:
    path = dependency.path or camel_case_to_dash_case(element_type)
    if not path.startswith((".", "/")):
        path = f"{prefix.rstrip('/')}/{path}"
    return dependency.model_copy(update={"path": path})


def resolve_element(
    element: UIDLElement,
    mapping: Mapping,
    options: GeneratorOptions | None = None,
) -> UIDLElement:
    """
    Resolve one element (and its subtree) against a mapping.

    Returns a new element; the input is left untouched. Calling it on an
    already resolved tree, or a tree without mapped elements, changes nothing.
    """
    options = options or GeneratorOptions()
    update: dict = {}

    element_mapping = mapping.elements.get(element.element_type)
    skip = options.skip_navlink_resolver and element.element_type == NAVLINK
    if element_mapping is not None and element.semantic_type is None and not skip:
        logger.debug(
            "Mapping element '%s' to '%s'", element.element_type, element_mapping.element_type
        )
        update["semantic_type"] = element.element_type
        update["element_type"] = element_mapping.element_type
        update["attrs"] = resolve_attributes(element_mapping.attrs, element.attrs)
        if element.dependency is None and element_mapping.dependency is not None:
            update["dependency"] = element_mapping.dependency

    attrs = update.get("attrs", element.attrs)
    if mapping.attributes:
        update["attrs"] = {mapping.attributes.get(key, key): value for key, value in attrs.items()}
    if mapping.events and element.events:
        update["events"] = {
            mapping.events.get(key, key): handlers for key, handlers in element.events.items()
        }

    dependency = update.get("dependency", element.dependency)
    if dependency is not None and dependency.type == DependencyKind.LOCAL:
        update["dependency"] = _resolve_local_dependency(
            dependency,
            update.get("element_type", element.element_type),
            options.local_dependencies_prefix,
        )

    children = []
    for child in element.children:
        if isinstance(child, UIDLElementNode):
            child = child.model_copy(
                update={"content": resolve_element(child.content, mapping, options)}
            )
        children.append(child)
    update["children"] = children

    return element.model_copy(update=update)


def resolve_node(
    node: UIDLElementNode,
    mapping: Mapping,
    options: GeneratorOptions | None = None,
) -> UIDLElementNode:
    return node.model_copy(update={"content": resolve_element(node.content, mapping, options)})
