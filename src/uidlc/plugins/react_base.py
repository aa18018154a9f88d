"""
React base plugin.

Builds the ``jsx-component`` code tree: a default-exported function
component returning the JSX for the component tree. Props are read from
``props``, state entries become ``useState`` hooks, inline styles become
style objects. The chunk links after the import statement chunks, so the
import statements plugin must run later in the same pipeline.
"""

from __future__ import annotations

import json

from ..core.ir import (
    ChunkDefinition,
    ChunkType,
    ComponentUIDL,
    DependencyRecord,
    ExportDefault,
    FileType,
    FunctionDeclaration,
    ImportKind,
    JSXChild,
    JSXElement,
    JSXExpression,
    JSXText,
    Program,
    RawCode,
    ReferenceType,
    ReturnStatement,
    UIDLDynamicReference,
    UIDLElement,
    UIDLElementNode,
    UIDLRawValue,
    UIDLStaticValue,
)
from ..core.paths import prefix_assets_path
from ..core.pipeline import ComponentStructure
from ..core.strings import dash_case_to_upper_camel_case
from .common import ASSET_ATTRIBUTES, register_element_dependencies, static_to_str
from .import_statements import IMPORT_CHUNKS

JSX_COMPONENT_CHUNK = "jsx-component"
REACT_VERSION = "^18.2.0"


def component_class_name(uidl: ComponentUIDL) -> str:
    return uidl.output_options.component_class_name or dash_case_to_upper_camel_case(uidl.name)


def _reference_expression(reference: UIDLDynamicReference) -> str:
    content = reference.content
    if content.reference_type == ReferenceType.PROP:
        return f"props.{content.id}"
    return content.id


def _value_expression(value: UIDLStaticValue | UIDLDynamicReference) -> str:
    if isinstance(value, UIDLDynamicReference):
        return _reference_expression(value)
    return json.dumps(value.content)


def _attribute(
    key: str, value: UIDLStaticValue | UIDLDynamicReference, assets_prefix: str
) -> str | bool | JSXExpression:
    if isinstance(value, UIDLDynamicReference):
        return JSXExpression(_reference_expression(value))
    if isinstance(value.content, bool):
        return value.content
    if isinstance(value.content, str):
        if key in ASSET_ATTRIBUTES:
            return prefix_assets_path(assets_prefix, value.content)
        return value.content
    return JSXExpression(static_to_str(value))


def _build_jsx(element: UIDLElement, assets_prefix: str = "") -> JSXElement:
    attributes: dict[str, str | bool | JSXExpression] = {
        key: _attribute(key, value, assets_prefix) for key, value in element.attrs.items()
    }
    if element.style:
        entries = ", ".join(
            f"{key}: {_value_expression(value)}" for key, value in element.style.items()
        )
        attributes["style"] = JSXExpression(f"{{ {entries} }}")

    children: list[JSXChild] = []
    for child in element.children:
        if isinstance(child, UIDLElementNode):
            children.append(_build_jsx(child.content, assets_prefix))
        elif isinstance(child, UIDLStaticValue):
            children.append(JSXText(static_to_str(child)))
        elif isinstance(child, UIDLRawValue):
            children.append(JSXText(child.content))
        elif isinstance(child, UIDLDynamicReference):
            children.append(JSXExpression(_reference_expression(child)))

    return JSXElement(tag_name=element.element_type, attributes=attributes, children=children)


def _state_hooks(uidl: ComponentUIDL) -> list[RawCode]:
    hooks = []
    for key, definition in uidl.state_definitions.items():
        setter = f"set{key[:1].upper()}{key[1:]}"
        hooks.append(
            RawCode(f"const [{key}, {setter}] = useState({json.dumps(definition.default_value)})")
        )
    return hooks


def create_react_base_plugin(file_type: FileType = FileType.JS):
    """Create the React base plugin."""

    def react_base(structure: ComponentStructure) -> ComponentStructure:
        uidl = structure.uidl
        dependencies = structure.dependencies

        dependencies.merge("React", DependencyRecord(source="react", version=REACT_VERSION))
        hooks = _state_hooks(uidl)
        if hooks:
            dependencies.merge(
                "useState",
                DependencyRecord(
                    source="react", import_kind=ImportKind.NAMED, version=REACT_VERSION
                ),
            )
        register_element_dependencies(structure)

        params = ["props"] if uidl.prop_definitions else []
        jsx = _build_jsx(uidl.node.content, structure.options.assets_prefix)
        body = [*hooks, ReturnStatement(argument=jsx)]
        component = FunctionDeclaration(name=component_class_name(uidl), params=params, body=body)

        structure.chunks.add_or_replace(
            ChunkDefinition(
                name=JSX_COMPONENT_CHUNK,
                type=ChunkType.AST,
                file_type=file_type,
                content=Program(body=[ExportDefault(declaration=component)]),
                link_after=list(IMPORT_CHUNKS),
            )
        )
        return structure

    react_base.__name__ = "react-base"
    return react_base
