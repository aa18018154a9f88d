"""
uidlc Intermediate Representation (IR) types.

Input UIDL models, chunk and dependency types, renderer payload trees,
generator options and generated output, re-exported from one place.
"""

from .chunks import (
    ChunkContent,
    ChunkDefinition,
    ChunkFlag,
    ChunkType,
    FileType,
    parse_chunk_flags,
)
from .code import (
    ExportDefault,
    FunctionDeclaration,
    ImportDeclaration,
    ImportSpecifier,
    JSXChild,
    JSXElement,
    JSXExpression,
    JSXText,
    Program,
    RawCode,
    ReturnStatement,
)
from .dependencies import DependencyRecord, ImportKind
from .files import FileEncoding, FileLocation, GeneratedFile, GeneratedFolder
from .mapping import ElementMapping, Mapping
from .markup import (
    HastElement,
    HastRaw,
    HastText,
    add_attribute_to_node,
    add_boolean_attribute_to_node,
    add_child_node,
    add_raw_node,
    add_text_node,
    create_html_node,
)
from .options import (
    GeneratorOptions,
    ProjectRoute,
    ProjectStyleSet,
    validate_generator_options,
)
from .uidl import (
    ComponentUIDL,
    DependencyKind,
    ProjectUIDL,
    ReferenceType,
    UIDLAssetOptions,
    UIDLCustomCode,
    UIDLDependency,
    UIDLDependencyMeta,
    UIDLDesignTokens,
    UIDLDynamicReference,
    UIDLElement,
    UIDLElementNode,
    UIDLGlobalAsset,
    UIDLGlobals,
    UIDLGlobalSettings,
    UIDLOutputOptions,
    UIDLPageOptions,
    UIDLRawValue,
    UIDLReference,
    UIDLSeo,
    UIDLStaticValue,
    UIDLStyleSetDefinition,
    WebManifest,
)

__all__ = [
    # Chunks
    "ChunkContent",
    "ChunkDefinition",
    "ChunkFlag",
    "ChunkType",
    "FileType",
    "parse_chunk_flags",
    # Code tree
    "ExportDefault",
    "FunctionDeclaration",
    "ImportDeclaration",
    "ImportSpecifier",
    "JSXChild",
    "JSXElement",
    "JSXExpression",
    "JSXText",
    "Program",
    "RawCode",
    "ReturnStatement",
    # Dependencies
    "DependencyRecord",
    "ImportKind",
    # Output
    "FileEncoding",
    "FileLocation",
    "GeneratedFile",
    "GeneratedFolder",
    # Mapping
    "ElementMapping",
    "Mapping",
    # Markup tree
    "HastElement",
    "HastRaw",
    "HastText",
    "add_attribute_to_node",
    "add_boolean_attribute_to_node",
    "add_child_node",
    "add_raw_node",
    "add_text_node",
    "create_html_node",
    # Options
    "GeneratorOptions",
    "ProjectRoute",
    "ProjectStyleSet",
    "validate_generator_options",
    # UIDL
    "ComponentUIDL",
    "DependencyKind",
    "ProjectUIDL",
    "ReferenceType",
    "UIDLAssetOptions",
    "UIDLCustomCode",
    "UIDLDependency",
    "UIDLDependencyMeta",
    "UIDLDesignTokens",
    "UIDLDynamicReference",
    "UIDLElement",
    "UIDLElementNode",
    "UIDLGlobalAsset",
    "UIDLGlobals",
    "UIDLGlobalSettings",
    "UIDLOutputOptions",
    "UIDLPageOptions",
    "UIDLRawValue",
    "UIDLReference",
    "UIDLSeo",
    "UIDLStaticValue",
    "UIDLStyleSetDefinition",
    "WebManifest",
]
