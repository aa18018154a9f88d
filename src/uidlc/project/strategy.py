"""
Project strategy: the static plan for generating a whole project.

A strategy names, for each logical output (shared components, pages, router,
entry document, project stylesheet, framework files), the generator factory
to use, the plugins, mappings and post-processors handed to it, and where
the output lands. Strategies are frozen values; the orchestrator only reads
them.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from ..core.errors import UndefinedGeneratorError
from ..core.ir import (
    ChunkDefinition,
    FileType,
    GeneratedFile,
    GeneratedFolder,
    Mapping,
    ProjectUIDL,
)
from ..core.pipeline import ComponentPlugin
from ..generators import ComponentGenerator, GeneratorFactory, PostProcessor

Segments = tuple[str, ...]
NameFunction = Callable[[str], str]


@dataclass(frozen=True)
class GeneratorConfig:
    """Generator factory plus the plugins, mappings and post-processors it is built with."""

    generator: GeneratorFactory | None = None
    plugins: tuple[ComponentPlugin, ...] = ()
    mappings: tuple[Mapping, ...] = ()
    postprocessors: tuple[PostProcessor, ...] = ()

    def build(self, section: str, extra_mappings: tuple[Mapping, ...] = ()) -> ComponentGenerator:
        """
        Instantiate the section's generator.

        Raises:
            UndefinedGeneratorError: If the section has no generator factory
        """
        if self.generator is None:
            raise UndefinedGeneratorError(section)
        return self.generator(
            plugins=self.plugins,
            mappings=(*self.mappings, *extra_mappings),
            postprocessors=self.postprocessors,
        )


@dataclass(frozen=True)
class ComponentFileOptions:
    """
    File layout of components and pages.

    With ``create_folder_for_each_component`` every component gets its own
    folder, named after the component; the name functions then pick the file
    names inside it.
    """

    create_folder_for_each_component: bool = False
    custom_component_file_name: NameFunction | None = None
    custom_style_file_name: NameFunction | None = None
    custom_template_file_name: NameFunction | None = None


@dataclass(frozen=True)
class ComponentsSection:
    config: GeneratorConfig = field(default_factory=GeneratorConfig)
    path: Segments = ()
    options: ComponentFileOptions = field(default_factory=ComponentFileOptions)
    module: GeneratorConfig | None = None


@dataclass(frozen=True)
class PagesSection:
    config: GeneratorConfig = field(default_factory=GeneratorConfig)
    path: Segments = ()
    options: ComponentFileOptions = field(default_factory=ComponentFileOptions)
    module: GeneratorConfig | None = None


@dataclass(frozen=True)
class RouterSection:
    config: GeneratorConfig = field(default_factory=GeneratorConfig)
    path: Segments = ()
    file_name: str = "index"


@dataclass(frozen=True)
class Attribute:
    attribute_key: str
    attribute_value: str | None = None


@dataclass(frozen=True)
class CustomTag:
    """An extra tag injected into the entry document's head or body."""

    tag_name: str
    target_tag: str = "head"
    content: str | None = None
    attributes: tuple[Attribute, ...] = ()


@dataclass(frozen=True)
class EntryFileOptions:
    """
    Options of the entry document.

    Attributes:
        assets_prefix: Prefix for absolute asset paths
        app_root_override: Markup replacing the default ``<div id="app">``
        custom_tags: Extra head/body tags
        custom_head_content: Markup appended to the head verbatim
    """

    assets_prefix: str = ""
    app_root_override: str | None = None
    custom_tags: tuple[CustomTag, ...] = ()
    custom_head_content: str | None = None

    def merged_over(self, base: EntryFileOptions) -> EntryFileOptions:
        """These options, falling back to ``base`` for every unset field."""
        return EntryFileOptions(
            assets_prefix=self.assets_prefix or base.assets_prefix,
            app_root_override=self.app_root_override or base.app_root_override,
            custom_tags=self.custom_tags or base.custom_tags,
            custom_head_content=self.custom_head_content or base.custom_head_content,
        )


ChunkGenerationFunction = Callable[
    [ProjectUIDL, EntryFileOptions], dict[FileType, list[ChunkDefinition]]
]


@dataclass(frozen=True)
class EntrySection:
    config: GeneratorConfig = field(default_factory=GeneratorConfig)
    path: Segments = ()
    file_name: str = "index"
    chunk_generation_function: ChunkGenerationFunction | None = None
    options: EntryFileOptions = field(default_factory=EntryFileOptions)


@dataclass(frozen=True)
class ProjectStyleSheetSection:
    config: GeneratorConfig = field(default_factory=GeneratorConfig)
    path: Segments = ()
    file_name: str = "style"
    import_file: bool = False


@dataclass(frozen=True)
class StaticSection:
    prefix: str = ""
    path: Segments = ()


@dataclass(frozen=True)
class GlobalStylesOptions:
    path: str
    sheet_name: str
    is_global_styles_dependent: bool = False


@dataclass(frozen=True)
class FrameworkConfigOptions:
    """Input of a framework config content generator."""

    file_name: str
    file_type: str
    dependencies: dict[str, str]
    global_styles: GlobalStylesOptions | None = None


@dataclass
class ConfigGeneratorResult:
    chunks: dict[FileType, list[ChunkDefinition]]
    dependencies: dict[str, str] = field(default_factory=dict)


ConfigContentGenerator = Callable[[FrameworkConfigOptions], ConfigGeneratorResult]


@dataclass(frozen=True)
class FrameworkConfigSection:
    file_name: str
    file_type: str
    path: Segments = ()
    config: GeneratorConfig = field(default_factory=GeneratorConfig)
    config_content_generator: ConfigContentGenerator | None = None
    is_global_styles_dependent: bool = False


ReplaceFileFunction = Callable[
    [GeneratedFolder, dict[str, str], str, str, GlobalStylesOptions | None],
    tuple[GeneratedFile, dict[str, str]],
]


@dataclass(frozen=True)
class FrameworkReplaceSection:
    """
    Rewrites a template file.

    ``replace_file(folder, dependencies, file_name, file_type, global_styles)``
    returns the new file and the dependency map to continue with.
    ``global_styles`` is only given when ``is_global_styles_dependent`` is set
    and the strategy has a project stylesheet.
    """

    file_name: str
    file_type: str
    replace_file: ReplaceFileFunction
    path: Segments = ()
    is_global_styles_dependent: bool = False


@dataclass(frozen=True)
class FrameworkSection:
    config: FrameworkConfigSection | None = None
    replace: FrameworkReplaceSection | None = None


@dataclass(frozen=True)
class ProjectStrategy:
    """
    Static plan for one project generation.

    Only ``components`` and ``pages`` are mandatory. Sections left as
    ``None`` are skipped.
    """

    id: str
    components: ComponentsSection
    pages: PagesSection
    static: StaticSection = field(default_factory=StaticSection)
    router: RouterSection | None = None
    entry: EntrySection | None = None
    project_style_sheet: ProjectStyleSheetSection | None = None
    framework: FrameworkSection | None = None
    create_package_json: bool = True
