"""
Project stylesheet plugin.

Emits the ``style-sheet`` CSS chunk: design tokens as ``:root`` custom
properties, then one class per reusable style set.
"""

from __future__ import annotations

from ..core.ir import ChunkDefinition, ChunkType, FileType, UIDLStyleSetDefinition
from ..core.pipeline import ComponentStructure
from ..core.strings import camel_case_to_dash_case
from .common import style_key_to_css

STYLE_SHEET_CHUNK = "style-sheet"


def _rule(selector: str, declarations: list[str]) -> str:
    body = "\n".join(f"  {declaration}" for declaration in declarations)
    return f"{selector} {{\n{body}\n}}"


def build_style_sheet(
    tokens: dict[str, str | int | float],
    style_sets: dict[str, UIDLStyleSetDefinition],
) -> str:
    """
    Render tokens and style sets as CSS.

    Examples:
        >>> print(build_style_sheet({"primaryColor": "#123"}, {}))
        :root {
          --primary-color: #123;
        }
    """
    rules = []
    if tokens:
        rules.append(
            _rule(
                ":root",
                [f"--{camel_case_to_dash_case(key)}: {value};" for key, value in tokens.items()],
            )
        )
    for name, style_set in style_sets.items():
        if not style_set.content:
            continue
        rules.append(
            _rule(
                f".{camel_case_to_dash_case(name)}",
                [f"{style_key_to_css(key)}: {value};" for key, value in style_set.content.items()],
            )
        )
    return "\n\n".join(rules)


def create_style_sheet_plugin(file_type: FileType = FileType.CSS):
    """Create the project stylesheet plugin."""

    def style_sheet(structure: ComponentStructure) -> ComponentStructure:
        options = structure.options
        uidl = structure.uidl

        design_language = options.design_language or uidl.design_language
        tokens = design_language.tokens if design_language else {}
        style_sets = dict(uidl.style_set_definitions)
        if options.project_style_set is not None:
            style_sets.update(options.project_style_set.style_set_definitions)

        structure.chunks.add_or_replace(
            ChunkDefinition(
                name=STYLE_SHEET_CHUNK,
                type=ChunkType.STRING,
                file_type=file_type,
                content=build_style_sheet(tokens, style_sets),
            )
        )
        return structure

    style_sheet.__name__ = "style-sheet"
    return style_sheet
