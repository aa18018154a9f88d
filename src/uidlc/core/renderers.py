"""
Chunk renderers: one pure function per chunk representation.

- ``string``: emitted verbatim
- ``hast``: markup tree serialized to HTML
- ``ast``: code tree serialized to ECMAScript/JSX

Renderers are only invoked by the linker. A payload that does not match the
representation raises :class:`RepresentationError`; nothing is coerced.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping

from markupsafe import escape

from .errors import ConfigurationError, RepresentationError
from .ir import (
    ChunkContent,
    ChunkType,
    ExportDefault,
    FunctionDeclaration,
    HastElement,
    HastRaw,
    HastText,
    ImportDeclaration,
    JSXElement,
    JSXExpression,
    JSXText,
    Program,
    RawCode,
    ReturnStatement,
)

Renderer = Callable[[ChunkContent], str]

INDENT = "  "

# Elements that never have a closing tag
VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "source",
        "track",
        "wbr",
    }
)

# Elements whose text content is not escaped
RAW_TEXT_ELEMENTS = frozenset({"script", "style"})


class _PayloadMismatch(Exception):
    def __init__(self, found: object):
        self.found = type(found).__name__


# =============================================================================
# Plain text
# =============================================================================


def render_string(content: ChunkContent) -> str:
    if not isinstance(content, str):
        raise _PayloadMismatch(content)
    return content


# =============================================================================
# Markup tree
# =============================================================================


def _render_properties(properties: Mapping[str, str | bool]) -> str:
    parts = []
    for key, value in properties.items():
        if value is True:
            parts.append(f" {key}")
        elif value is False:
            continue
        else:
            parts.append(f' {key}="{escape(value)}"')
    return "".join(parts)


def _render_hast_node(node: object, raw_text: bool = False) -> str:
    if isinstance(node, HastText):
        return node.value if raw_text else str(escape(node.value))
    if isinstance(node, HastRaw):
        return node.value
    if not isinstance(node, HastElement):
        raise _PayloadMismatch(node)

    open_tag = f"<{node.tag_name}{_render_properties(node.properties)}>"
    if node.tag_name in VOID_ELEMENTS:
        return open_tag

    inner_raw = node.tag_name in RAW_TEXT_ELEMENTS
    inner = "".join(_render_hast_node(child, inner_raw) for child in node.children)
    return f"{open_tag}{inner}</{node.tag_name}>"


def render_hast(content: ChunkContent) -> str:
    if not isinstance(content, HastElement):
        raise _PayloadMismatch(content)
    return _render_hast_node(content)


# =============================================================================
# Code tree
# =============================================================================


def _render_import(node: ImportDeclaration) -> str:
    specifiers = []
    if node.default:
        specifiers.append(node.default)
    if node.namespace:
        specifiers.append(f"* as {node.namespace}")
    if node.named:
        named = ", ".join(
            spec.imported if not spec.local or spec.local == spec.imported
            else f"{spec.imported} as {spec.local}"
            for spec in node.named
        )
        specifiers.append(f"{{ {named} }}")

    if not specifiers:
        return f"import '{node.source}'"
    return f"import {', '.join(specifiers)} from '{node.source}'"


def _render_jsx_text(value: str) -> str:
    return str(escape(value)).replace("{", "&#123;").replace("}", "&#125;")


def _render_jsx_attributes(attributes: Mapping[str, str | bool | JSXExpression]) -> str:
    parts = []
    for key, value in attributes.items():
        if isinstance(value, JSXExpression):
            parts.append(f" {key}={{{value.expression}}}")
        elif value is True:
            parts.append(f" {key}")
        elif value is False:
            continue
        else:
            parts.append(f' {key}="{escape(value)}"')
    return "".join(parts)


def _render_jsx(node: object, depth: int) -> str:
    pad = INDENT * depth
    if isinstance(node, JSXText):
        return pad + _render_jsx_text(node.value)
    if isinstance(node, JSXExpression):
        return f"{pad}{{{node.expression}}}"
    if not isinstance(node, JSXElement):
        raise _PayloadMismatch(node)

    attributes = _render_jsx_attributes(node.attributes)
    if not node.children:
        return f"{pad}<{node.tag_name}{attributes} />"

    lines = [f"{pad}<{node.tag_name}{attributes}>"]
    lines.extend(_render_jsx(child, depth + 1) for child in node.children)
    lines.append(f"{pad}</{node.tag_name}>")
    return "\n".join(lines)


def _render_statement(node: object, depth: int = 0) -> str:
    pad = INDENT * depth
    if isinstance(node, ImportDeclaration):
        return pad + _render_import(node)
    if isinstance(node, RawCode):
        return "\n".join(pad + line if line else line for line in node.code.split("\n"))
    if isinstance(node, ReturnStatement):
        if isinstance(node.argument, JSXElement):
            jsx = _render_jsx(node.argument, depth + 1)
            return f"{pad}return (\n{jsx}\n{pad})"
        return f"{pad}return {node.argument.code}"
    if isinstance(node, FunctionDeclaration):
        body = "\n".join(_render_statement(statement, depth + 1) for statement in node.body)
        return f"{pad}function {node.name}({', '.join(node.params)}) {{\n{body}\n{pad}}}"
    if isinstance(node, ExportDefault):
        return f"{pad}export default {_render_statement(node.declaration).lstrip()}"
    raise _PayloadMismatch(node)


def render_ast(content: ChunkContent) -> str:
    if not isinstance(content, Program):
        raise _PayloadMismatch(content)

    rendered: list[str] = []
    previous: object | None = None
    for statement in content.body:
        text = _render_statement(statement)
        if rendered:
            both_imports = isinstance(previous, ImportDeclaration) and isinstance(
                statement, ImportDeclaration
            )
            rendered.append("\n" if both_imports else "\n\n")
        rendered.append(text)
        previous = statement
    return "".join(rendered)


DEFAULT_RENDERERS: Mapping[ChunkType, Renderer] = {
    ChunkType.STRING: render_string,
    ChunkType.HAST: render_hast,
    ChunkType.AST: render_ast,
}


def render_content(
    chunk_name: str,
    chunk_type: ChunkType,
    content: ChunkContent,
    renderers: Mapping[ChunkType, Renderer] = DEFAULT_RENDERERS,
) -> str:
    """Render one chunk payload with the renderer registered for its representation."""
    renderer = renderers.get(chunk_type)
    if renderer is None:
        raise ConfigurationError(f"No renderer registered for '{chunk_type.value}' chunks")
    try:
        return renderer(content)
    except _PayloadMismatch as e:
        raise RepresentationError(chunk_name, chunk_type.value, e.found) from None
