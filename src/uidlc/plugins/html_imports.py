"""
HTML import statements plugin.

Prepends a ``<head>`` to the ``html-template`` chunk holding a reference for
every path-only dependency (``<link rel="stylesheet">`` for CSS,
``<script src>`` otherwise) plus the component's SEO title, meta tags and
canonical link.
"""

from __future__ import annotations

from ..core.errors import RepresentationError
from ..core.ir import (
    ChunkType,
    FileType,
    HastElement,
    ImportKind,
    add_attribute_to_node,
    add_child_node,
    add_text_node,
    create_html_node,
)
from ..core.pipeline import ComponentStructure
from .html_base import HTML_TEMPLATE_CHUNK

PLUGIN_NAME = "html-imports"


def _append_seo(head: HastElement, structure: ComponentStructure) -> None:
    seo = structure.uidl.seo
    if seo is None:
        return

    if seo.title:
        title = create_html_node("title")
        add_text_node(title, seo.title)
        add_child_node(head, title)

    for meta in seo.meta_tags:
        meta_tag = create_html_node("meta")
        for key, value in meta.items():
            add_attribute_to_node(meta_tag, key, value)
        add_child_node(head, meta_tag)

    for asset in seo.assets:
        if asset.type == "canonical" and asset.path:
            link = create_html_node("link")
            add_attribute_to_node(link, "rel", "canonical")
            add_attribute_to_node(link, "href", asset.path)
            add_child_node(head, link)


def create_html_imports_plugin():
    """Create the HTML import statements plugin."""

    def html_imports(structure: ComponentStructure) -> ComponentStructure:
        chunk = structure.chunks.require(
            HTML_TEMPLATE_CHUNK,
            file_type=FileType.HTML,
            chunk_type=ChunkType.HAST,
            requested_by=PLUGIN_NAME,
        )
        html = chunk.content
        if not isinstance(html, HastElement):
            raise RepresentationError(chunk.name, chunk.type.value, type(html).__name__)

        head = create_html_node("head")
        for record in structure.dependencies.all().values():
            if record.import_kind != ImportKind.SIDE_EFFECT:
                continue
            if record.source.endswith("css"):
                link = create_html_node("link")
                add_attribute_to_node(link, "href", record.source)
                add_attribute_to_node(link, "rel", "stylesheet")
                add_child_node(head, link)
            else:
                script = create_html_node("script")
                add_attribute_to_node(script, "type", "text/javascript")
                add_attribute_to_node(script, "src", record.source)
                add_child_node(head, script)

        _append_seo(head, structure)

        if head.children:
            html.children.insert(0, head)
        return structure

    html_imports.__name__ = PLUGIN_NAME
    return html_imports
