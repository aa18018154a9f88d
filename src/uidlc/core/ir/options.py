"""
Generator options for uidlc IR.

Options are built and validated by the project orchestrator (or the caller
of a single component generation) and are read-only for plugins.

Fields:
    local_dependencies_prefix: Relative path from the file being generated to
        the folder holding shared components (``.`` when they coincide)
    assets_prefix: Prefix applied to absolute asset paths (``/static``)
    mapping: Mapping applied after the generator's own mappings
    is_root_component: The component is the application root (router)
    skip_navlink_resolver: Leave ``navlink`` elements untouched
    project_routes: Pages known to the project, for router generation
    module_components: Shared components, for module-file generation
    project_style_set: Location and content of the project stylesheet
    design_language: Design tokens emitted as CSS custom properties
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..errors import InvalidOptionsError
from .mapping import Mapping
from .uidl import ComponentUIDL, UIDLDesignTokens, UIDLStyleSetDefinition


class ProjectRoute(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    value: str
    component_name: str
    file_name: str
    nav_link: str
    folder_path: tuple[str, ...] = ()
    default: bool = False


class ProjectStyleSet(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    style_set_definitions: dict[str, UIDLStyleSetDefinition] = Field(default_factory=dict)
    file_name: str
    path: str
    import_file: bool = False


class GeneratorOptions(BaseModel):
    """Structured options threaded through one generation call."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    local_dependencies_prefix: str = "."
    assets_prefix: str = ""
    mapping: Mapping | None = None
    is_root_component: bool = False
    skip_navlink_resolver: bool = False
    project_routes: tuple[ProjectRoute, ...] = ()
    module_components: dict[str, ComponentUIDL] = Field(default_factory=dict)
    project_style_set: ProjectStyleSet | None = None
    design_language: UIDLDesignTokens | None = None


def validate_generator_options(options: GeneratorOptions | dict | None) -> GeneratorOptions:
    """
    Coerce caller-supplied options into a validated :class:`GeneratorOptions`.

    Raises:
        InvalidOptionsError: If unknown fields or wrongly typed values are given
    """
    if options is None:
        return GeneratorOptions()
    if isinstance(options, GeneratorOptions):
        return options
    try:
        return GeneratorOptions.model_validate(options)
    except ValidationError as e:
        raise InvalidOptionsError(f"Invalid generator options: {e}") from e
