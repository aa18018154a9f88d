"""
UIDL input types for uidlc IR.

The UIDL is the framework-agnostic description of a component or a whole
project. It arrives as JSON with camelCase keys; every model accepts both
the camelCase alias and the snake_case field name.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class UIDLModel(BaseModel):
    """Base for all UIDL models (camelCase aliases, snake_case attributes)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ReferenceType(str, Enum):
    """What a dynamic value points at."""

    PROP = "prop"
    STATE = "state"
    ATTR = "attr"
    LOCAL = "local"


class DependencyKind(str, Enum):
    """Where a dependency comes from."""

    LIBRARY = "library"
    PACKAGE = "package"
    LOCAL = "local"


# =============================================================================
# Values and nodes
# =============================================================================


class UIDLStaticValue(UIDLModel):
    """Literal text, number or boolean."""

    type: Literal["static"] = "static"
    content: str | int | float | bool


class UIDLReference(UIDLModel):
    reference_type: ReferenceType
    id: str


class UIDLDynamicReference(UIDLModel):
    """Reference to a prop, state entry, sibling attribute or local variable."""

    type: Literal["dynamic"] = "dynamic"
    content: UIDLReference


class UIDLRawValue(UIDLModel):
    """Verbatim markup emitted without escaping."""

    type: Literal["raw"] = "raw"
    content: str


UIDLAttributeValue = Annotated[
    Union[UIDLStaticValue, UIDLDynamicReference],
    Field(discriminator="type"),
]


class UIDLDependencyMeta(UIDLModel):
    named_import: bool = False
    original_name: str | None = None
    import_just_path: bool = False
    import_alias: str | None = None


class UIDLDependency(UIDLModel):
    """A library, package or local component an element needs."""

    type: DependencyKind = DependencyKind.LIBRARY
    path: str = ""
    version: str | None = None
    meta: UIDLDependencyMeta = Field(default_factory=UIDLDependencyMeta)


class UIDLEventHandler(UIDLModel):
    type: str
    modifies: str | None = None
    new_state: Any = None
    args: list[Any] = Field(default_factory=list)


class UIDLElement(UIDLModel):
    """
    An element in the component tree.

    ``semantic_type`` is filled in by mapping resolution with the element kind
    the author wrote (e.g. ``navlink``) once ``element_type`` has been replaced
    by the concrete target primitive (e.g. ``Link``).
    """

    element_type: str
    name: str | None = None
    key: str | None = None
    attrs: dict[str, UIDLAttributeValue] = Field(default_factory=dict)
    style: dict[str, UIDLAttributeValue] = Field(default_factory=dict)
    events: dict[str, list[UIDLEventHandler]] = Field(default_factory=dict)
    children: list[UIDLNode] = Field(default_factory=list)
    dependency: UIDLDependency | None = None
    semantic_type: str | None = None


class UIDLElementNode(UIDLModel):
    type: Literal["element"] = "element"
    content: UIDLElement


UIDLNode = Annotated[
    Union[UIDLElementNode, UIDLStaticValue, UIDLDynamicReference, UIDLRawValue],
    Field(discriminator="type"),
]

UIDLElement.model_rebuild()
UIDLElementNode.model_rebuild()


# =============================================================================
# Component
# =============================================================================


class UIDLPropDefinition(UIDLModel):
    type: str
    default_value: Any = None


class UIDLStateValueDetail(UIDLModel):
    value: str
    page_options: UIDLPageOptions | None = None


class UIDLStateDefinition(UIDLModel):
    type: str
    default_value: Any = None
    values: list[UIDLStateValueDetail] = Field(default_factory=list)


class UIDLPageOptions(UIDLModel):
    """Navigation details of a page inside a project."""

    nav_link: str | None = None
    file_name: str | None = None
    component_name: str | None = None
    default: bool = False


UIDLStateValueDetail.model_rebuild()


class UIDLOutputOptions(UIDLModel):
    file_name: str | None = None
    folder_path: list[str] = Field(default_factory=list)
    component_class_name: str | None = None
    style_file_name: str | None = None
    template_file_name: str | None = None
    module_name: str | None = None


class UIDLSeoAsset(UIDLModel):
    type: str
    path: str | None = None


class UIDLSeo(UIDLModel):
    title: str | None = None
    meta_tags: list[dict[str, str]] = Field(default_factory=list)
    assets: list[UIDLSeoAsset] = Field(default_factory=list)


class UIDLStyleSetDefinition(UIDLModel):
    """A named, reusable style set (rendered as a CSS class)."""

    type: str = "reusable-project-style-map"
    content: dict[str, str | int | float] = Field(default_factory=dict)


class UIDLDesignTokens(UIDLModel):
    tokens: dict[str, str | int | float] = Field(default_factory=dict)


class ComponentUIDL(UIDLModel):
    """A single component or page."""

    name: str
    node: UIDLElementNode
    prop_definitions: dict[str, UIDLPropDefinition] = Field(default_factory=dict)
    state_definitions: dict[str, UIDLStateDefinition] = Field(default_factory=dict)
    output_options: UIDLOutputOptions = Field(default_factory=UIDLOutputOptions)
    seo: UIDLSeo | None = None
    style_set_definitions: dict[str, UIDLStyleSetDefinition] = Field(default_factory=dict)
    design_language: UIDLDesignTokens | None = None
    page_options: UIDLPageOptions | None = None


# =============================================================================
# Project
# =============================================================================


class UIDLAssetOptions(UIDLModel):
    target: Literal["head", "body"] | None = None
    defer: bool = False
    async_: bool = Field(default=False, alias="async")
    icon_type: str | None = None
    icon_sizes: str | None = None


class UIDLGlobalAsset(UIDLModel):
    """A global asset referenced from the entry document."""

    type: Literal["style", "script", "font", "icon", "canonical"]
    path: str | None = None
    content: str | None = None
    options: UIDLAssetOptions | None = None


class UIDLManifestIcon(UIDLModel):
    model_config = ConfigDict(extra="allow")

    src: str
    type: str | None = None
    sizes: str | None = None


class WebManifest(UIDLModel):
    model_config = ConfigDict(extra="allow")

    short_name: str | None = None
    name: str | None = None
    icons: list[UIDLManifestIcon] = Field(default_factory=list)
    background_color: str | None = None
    display: str | None = None
    orientation: str | None = None
    scope: str | None = None
    start_url: str | None = None
    theme_color: str | None = None


class UIDLGlobalSettings(UIDLModel):
    title: str | None = None
    language: str | None = None


class UIDLCustomCode(UIDLModel):
    head: str | None = None
    body: str | None = None


class UIDLGlobals(UIDLModel):
    settings: UIDLGlobalSettings = Field(default_factory=UIDLGlobalSettings)
    meta: list[dict[str, str]] = Field(default_factory=list)
    assets: list[UIDLGlobalAsset] = Field(default_factory=list)
    manifest: WebManifest | None = None
    custom_code: UIDLCustomCode | None = None


class ProjectUIDL(UIDLModel):
    """
    A whole project.

    ``root`` is the application shell (router, project style sets and design
    tokens). ``pages`` maps a route value to the page component rendered for
    it; ``components`` holds the shared components pages may reference.
    """

    name: str
    globals: UIDLGlobals = Field(default_factory=UIDLGlobals)
    root: ComponentUIDL
    pages: dict[str, ComponentUIDL] = Field(default_factory=dict)
    components: dict[str, ComponentUIDL] = Field(default_factory=dict)
