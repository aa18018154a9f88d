"""
Project orchestration: strategies, file handlers and the project generator.
"""

from .file_handlers import (
    create_entry_file,
    create_html_entry_file_chunks,
    create_manifest_json_file,
    handle_package_json,
)
from .folders import get_folder_at_path, inject_files_to_path
from .generator import (
    ProjectGenerator,
    ProjectPlugin,
    ProjectPluginStructure,
    build_project_route,
    files_by_path,
)
from .strategy import (
    Attribute,
    ComponentFileOptions,
    ComponentsSection,
    ConfigGeneratorResult,
    CustomTag,
    EntryFileOptions,
    EntrySection,
    FrameworkConfigOptions,
    FrameworkConfigSection,
    FrameworkReplaceSection,
    FrameworkSection,
    GeneratorConfig,
    GlobalStylesOptions,
    PagesSection,
    ProjectStrategy,
    ProjectStyleSheetSection,
    RouterSection,
    StaticSection,
)

__all__ = [
    # Generator
    "ProjectGenerator",
    "ProjectPlugin",
    "ProjectPluginStructure",
    "build_project_route",
    "files_by_path",
    # File handlers
    "create_entry_file",
    "create_html_entry_file_chunks",
    "create_manifest_json_file",
    "handle_package_json",
    "get_folder_at_path",
    "inject_files_to_path",
    # Strategy
    "Attribute",
    "ComponentFileOptions",
    "ComponentsSection",
    "ConfigGeneratorResult",
    "CustomTag",
    "EntryFileOptions",
    "EntrySection",
    "FrameworkConfigOptions",
    "FrameworkConfigSection",
    "FrameworkReplaceSection",
    "FrameworkSection",
    "GeneratorConfig",
    "GlobalStylesOptions",
    "PagesSection",
    "ProjectStrategy",
    "ProjectStyleSheetSection",
    "RouterSection",
    "StaticSection",
]
