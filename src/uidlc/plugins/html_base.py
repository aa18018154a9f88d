"""
HTML base plugin.

Builds the ``html-template`` markup chunk from the component tree. Props and
state resolve to their default values, since a static document has no
runtime. Element dependencies are registered with the aggregator; a project
stylesheet marked ``import_file`` becomes a path-only dependency for the
import statements plugin to turn into a ``<link>``.
"""

from __future__ import annotations

from ..core.ir import (
    ChunkDefinition,
    ChunkType,
    DependencyKind,
    DependencyRecord,
    FileType,
    HastElement,
    ImportKind,
    UIDLDynamicReference,
    UIDLElement,
    UIDLElementNode,
    UIDLRawValue,
    UIDLStaticValue,
    add_attribute_to_node,
    add_boolean_attribute_to_node,
    add_child_node,
    add_raw_node,
    add_text_node,
    create_html_node,
)
from ..core.paths import prefix_assets_path
from ..core.pipeline import ComponentStructure
from .common import (
    ASSET_ATTRIBUTES,
    default_value,
    inline_style,
    register_element_dependencies,
    static_to_str,
)

HTML_TEMPLATE_CHUNK = "html-template"
DOCTYPE_CHUNK = "doctype"
PROJECT_STYLE_SHEET_DEPENDENCY = "project-style-sheet"


def _build_element(structure: ComponentStructure, element: UIDLElement) -> HastElement:
    uidl = structure.uidl
    node = create_html_node(element.element_type)

    for key, value in element.attrs.items():
        if isinstance(value, UIDLStaticValue):
            if value.content is True:
                add_boolean_attribute_to_node(node, key)
            elif value.content is not False:
                text = static_to_str(value)
                if key in ASSET_ATTRIBUTES:
                    text = prefix_assets_path(structure.options.assets_prefix, text)
                add_attribute_to_node(node, key, text)
        else:
            resolved = default_value(uidl, value)
            if resolved is not None:
                add_attribute_to_node(node, key, resolved)

    style = inline_style(uidl, element)
    if style:
        add_attribute_to_node(node, "style", style)

    for child in element.children:
        if isinstance(child, UIDLElementNode):
            add_child_node(node, _build_element(structure, child.content))
        elif isinstance(child, UIDLStaticValue):
            add_text_node(node, static_to_str(child))
        elif isinstance(child, UIDLRawValue):
            add_raw_node(node, child.content)
        elif isinstance(child, UIDLDynamicReference):
            resolved = default_value(uidl, child)
            if resolved is not None:
                add_text_node(node, resolved)

    return node


def create_html_base_plugin(add_doctype: bool = True):
    """Create the HTML base plugin."""

    def html_base(structure: ComponentStructure) -> ComponentStructure:
        body = create_html_node("body")
        add_child_node(body, _build_element(structure, structure.uidl.node.content))
        html = create_html_node("html", [body])

        register_element_dependencies(structure)

        style_set = structure.options.project_style_set
        if style_set is not None and style_set.import_file:
            structure.dependencies.merge(
                PROJECT_STYLE_SHEET_DEPENDENCY,
                DependencyRecord(
                    source=f"{style_set.path}/{style_set.file_name}.css",
                    import_kind=ImportKind.SIDE_EFFECT,
                    kind=DependencyKind.LOCAL,
                ),
            )

        link_after: list[str] = []
        if add_doctype:
            structure.chunks.add_or_replace(
                ChunkDefinition(
                    name=DOCTYPE_CHUNK,
                    type=ChunkType.STRING,
                    file_type=FileType.HTML,
                    content="<!DOCTYPE html>",
                )
            )
            link_after.append(DOCTYPE_CHUNK)

        structure.chunks.add_or_replace(
            ChunkDefinition(
                name=HTML_TEMPLATE_CHUNK,
                type=ChunkType.HAST,
                file_type=FileType.HTML,
                content=html,
                link_after=link_after,
            )
        )
        return structure

    html_base.__name__ = "html-base"
    return html_base
