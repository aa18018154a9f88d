"""
Project generator: drives component generation across a whole project.

Sections are produced in a fixed order:

1. Shared components (and the components module)
2. Pages (and page modules)
3. Router
4. Entry document
5. Project stylesheet
6. Framework config and replace files
7. Web manifest
8. Package manifest

Components and pages are generated concurrently; each generation owns its
own component structure. Their results are folded into the folder tree and
the dependency map afterwards, one at a time, in declaration order. The
generator is the only writer of the folder tree. Each generated path is
written once per run; a second output for it raises FileCollisionError,
while template files are replaced in place.
"""

from __future__ import annotations

import asyncio
import copy
import logging
from collections.abc import Coroutine, Sequence
from dataclasses import dataclass, field, replace
from typing import Any, TypeVar

from ..core.ir import (
    ComponentUIDL,
    DependencyKind,
    GeneratedFile,
    GeneratedFolder,
    GeneratorOptions,
    Mapping,
    ProjectRoute,
    ProjectUIDL,
    validate_generator_options,
)
from ..core.paths import generate_local_dependencies_prefix
from ..core.strings import camel_case_to_dash_case, dash_case_to_upper_camel_case, slugify
from ..generators import CompiledComponent
from ..plugins.common import iter_elements
from .file_handlers import (
    build_project_style_set,
    create_component,
    create_component_module,
    create_entry_file,
    create_manifest_json_file,
    create_page,
    create_page_module,
    create_router_file,
    handle_package_json,
    with_output_options,
)
from .folders import inject_files_to_path
from .strategy import (
    ComponentFileOptions,
    EntryFileOptions,
    FrameworkConfigOptions,
    FrameworkSection,
    GlobalStylesOptions,
    ProjectStrategy,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class ProjectPluginStructure:
    """
    State handed to project plugins before and after generation.

    Attributes:
        uidl: Project being generated
        template: Folder the output starts from
        strategy: Strategy in use; plugins may return a different one from run_before
        dependencies: Package dependencies collected so far
        dev_dependencies: Package dev dependencies
        root_folder: Output folder tree
    """

    uidl: ProjectUIDL
    template: GeneratedFolder
    strategy: ProjectStrategy
    dependencies: dict[str, str] = field(default_factory=dict)
    dev_dependencies: dict[str, str] = field(default_factory=dict)
    root_folder: GeneratedFolder = field(default_factory=lambda: GeneratedFolder(name=""))


class ProjectPlugin:
    """
    Hook around project generation.

    ``run_before`` runs before any section is generated and may replace the
    UIDL, template or strategy. ``run_after`` runs once every section has
    been placed, before the package manifest is written. Both default to
    passing the structure through.

    Example:
        class AddLicense(ProjectPlugin):
            name = "add-license"

            async def run_after(self, structure):
                structure.root_folder.files.append(GeneratedFile("LICENSE", "MIT"))
                return structure
    """

    name: str = "unnamed-project-plugin"

    async def run_before(self, structure: ProjectPluginStructure) -> ProjectPluginStructure:
        return structure

    async def run_after(self, structure: ProjectPluginStructure) -> ProjectPluginStructure:
        return structure


async def _run_concurrently(coroutines: list[Coroutine[Any, Any, T]]) -> list[T]:
    """
    Run independent generations concurrently, results in input order.

    The first failure cancels the remaining generations and propagates
    unchanged rather than wrapped in an ExceptionGroup.
    """
    try:
        async with asyncio.TaskGroup() as group:
            tasks = [group.create_task(coroutine) for coroutine in coroutines]
    except ExceptionGroup as errors:
        raise errors.exceptions[0] from None
    return [task.result() for task in tasks]


@dataclass(frozen=True)
class PreparedComponent:
    """A component or page ready for generation, with where its files go."""

    uidl: ComponentUIDL
    path: tuple[str, ...]
    options: GeneratorOptions
    route: ProjectRoute | None = None


def _apply_file_options(
    uidl: ComponentUIDL, file_options: ComponentFileOptions
) -> tuple[ComponentUIDL, tuple[str, ...]]:
    """Apply folder-per-component naming; returns the uidl and its extra folder."""
    if not file_options.create_folder_for_each_component:
        return uidl, ()

    folder = uidl.output_options.file_name or camel_case_to_dash_case(uidl.name)
    updates: dict[str, Any] = {"file_name": folder}
    if file_options.custom_component_file_name:
        updates["file_name"] = file_options.custom_component_file_name(folder)
    if file_options.custom_style_file_name:
        updates["style_file_name"] = file_options.custom_style_file_name(folder)
    if file_options.custom_template_file_name:
        updates["template_file_name"] = file_options.custom_template_file_name(folder)
    return with_output_options(uidl, **updates), (folder,)


def _component_file_name(uidl: ComponentUIDL) -> str:
    return uidl.output_options.file_name or camel_case_to_dash_case(uidl.name)


def _assign_component_paths(uidl: ComponentUIDL, component_paths: dict[str, str]) -> None:
    """Point local dependencies on shared components at their file inside the components folder."""
    for element in iter_elements(uidl.node):
        dependency = element.dependency
        if dependency is None or dependency.type != DependencyKind.LOCAL or dependency.path:
            continue
        path = component_paths.get(element.element_type)
        if path is not None:
            element.dependency = dependency.model_copy(update={"path": path})


def build_project_route(
    route: str, page: ComponentUIDL, folder: tuple[str, ...] = ()
) -> ProjectRoute:
    """Navigation details of one page."""
    page_options = page.page_options
    default = bool(page_options and page_options.default)
    file_name = (page_options and page_options.file_name) or _component_file_name(page)
    component_name = (page_options and page_options.component_name) or (
        dash_case_to_upper_camel_case(page.name)
    )
    nav_link = (page_options and page_options.nav_link) or (
        "/" if default else f"/{camel_case_to_dash_case(route)}"
    )
    return ProjectRoute(
        value=route,
        component_name=component_name,
        file_name=file_name,
        nav_link=nav_link,
        folder_path=(*page.output_options.folder_path, *folder),
        default=default,
    )


@dataclass(frozen=True)
class ProjectGenerator:
    """
    Generates a whole project according to a strategy.

    A generator is a value: ``with_plugin`` and ``with_mapping`` return new
    generators. ``mappings`` are applied to every section generator after the
    strategy's own mappings.
    """

    strategy: ProjectStrategy
    plugins: tuple[ProjectPlugin, ...] = ()
    mappings: tuple[Mapping, ...] = ()
    dev_dependencies: dict[str, str] = field(default_factory=dict)

    def with_plugin(self, plugin: ProjectPlugin) -> ProjectGenerator:
        return replace(self, plugins=self.plugins + (plugin,))

    def with_mapping(self, mapping: Mapping | dict[str, Any]) -> ProjectGenerator:
        if not isinstance(mapping, Mapping):
            mapping = Mapping.model_validate(mapping)
        return replace(self, mappings=self.mappings + (mapping,))

    @property
    def assets_path(self) -> tuple[str, ...]:
        """Folder where static assets (and the web manifest) are placed."""
        return self.strategy.static.path

    def generate_project(
        self,
        uidl: ProjectUIDL | dict[str, Any],
        template: GeneratedFolder | None = None,
        mapping: Mapping | None = None,
    ) -> GeneratedFolder:
        """Blocking variant of :meth:`agenerate_project` for non-async callers."""
        return asyncio.run(self.agenerate_project(uidl, template, mapping))

    async def agenerate_project(
        self,
        uidl: ProjectUIDL | dict[str, Any],
        template: GeneratedFolder | None = None,
        mapping: Mapping | None = None,
    ) -> GeneratedFolder:
        """
        Generate every section of a project into one folder tree.

        Args:
            uidl: Project UIDL (model or parsed JSON)
            template: Folder to start from; it is copied, never modified
            mapping: Mapping applied last to every generated component

        Returns:
            The output folder tree

        Raises:
            ConfigurationError: Misconfigured strategy, plugins or dependencies
            RepresentationError: A chunk payload does not match its type
            PluginError: A plugin precondition failed
        """
        if not isinstance(uidl, ProjectUIDL):
            uidl = ProjectUIDL.model_validate(uidl)
        uidl = uidl.model_copy(deep=True)
        template = copy.deepcopy(template) if template is not None else (
            GeneratedFolder(name=slugify(uidl.name))
        )

        structure = ProjectPluginStructure(
            uidl=uidl,
            template=template,
            strategy=self.strategy,
            dev_dependencies=dict(self.dev_dependencies),
            root_folder=template,
        )
        for plugin in self.plugins:
            logger.debug("Running project plugin %s (before)", plugin.name)
            structure = await plugin.run_before(structure)

        uidl = structure.uidl
        strategy = structure.strategy
        root = structure.root_folder
        dependencies = structure.dependencies
        generated: set[str] = set()

        components = self._prepare_components(uidl, strategy, mapping)
        pages = self._prepare_pages(uidl, strategy, mapping)

        # Shared components and pages
        component_generator = strategy.components.config.build("components", self.mappings)
        page_generator = strategy.pages.config.build("pages", self.mappings)
        results = await _run_concurrently(
            [
                *(create_component(c.uidl, component_generator, c.options) for c in components),
                *(create_page(p.uidl, page_generator, p.options) for p in pages),
            ]
        )
        for item, result in zip([*components, *pages], results):
            self._fold(root, dependencies, item.path, result, generated)
        logger.info("Generated %d component(s) and %d page(s)", len(components), len(pages))

        if strategy.components.module is not None:
            module_generator = strategy.components.module.build("components.module", self.mappings)
            result = await create_component_module(uidl, strategy, module_generator)
            self._fold(root, dependencies, strategy.components.path, result, generated)

        if strategy.pages.module is not None:
            module_generator = strategy.pages.module.build("pages.module", self.mappings)
            module_results = await _run_concurrently(
                [create_page_module(item.uidl, module_generator, item.options) for item in pages]
            )
            for item, result in zip(pages, module_results):
                self._fold(root, dependencies, item.path, result, generated)

        # Router
        if strategy.router is not None:
            router_generator = strategy.router.config.build("router", self.mappings)
            routes = [item.route for item in pages if item.route is not None]
            result = await create_router_file(
                uidl.root, strategy, router_generator, routes, mapping
            )
            self._fold(root, dependencies, strategy.router.path, result, generated)
            logger.info("Generated router with %d route(s)", len(routes))

        # Entry document
        if strategy.entry is not None:
            entry_generator = strategy.entry.config.build("entry", self.mappings)
            files = create_entry_file(
                uidl,
                strategy,
                entry_generator,
                EntryFileOptions(assets_prefix=strategy.static.prefix),
            )
            inject_files_to_path(root, strategy.entry.path, files, generated)
            logger.info("Generated entry document")

        # Project stylesheet
        style_sheet = strategy.project_style_sheet
        if style_sheet is not None:
            style_generator = style_sheet.config.build("project_style_sheet", self.mappings)
            options = validate_generator_options(
                {
                    "assets_prefix": strategy.static.prefix,
                    "design_language": uidl.root.design_language,
                    "project_style_set": build_project_style_set(
                        strategy, style_sheet.path, uidl.root
                    ),
                }
            )
            style_root = with_output_options(
                uidl.root, file_name=style_sheet.file_name, style_file_name=style_sheet.file_name
            )
            result = await style_generator.generate_component(style_root, options)
            self._fold(root, dependencies, style_sheet.path, result, generated)

        # Framework files
        if strategy.framework is not None:
            self._generate_framework_files(
                root, dependencies, strategy, strategy.framework, generated
            )

        # Web manifest
        if uidl.globals.manifest is not None:
            manifest = create_manifest_json_file(uidl, strategy.static.prefix)
            inject_files_to_path(root, strategy.static.path, [manifest], generated)

        for plugin in self.plugins:
            logger.debug("Running project plugin %s (after)", plugin.name)
            structure = await plugin.run_after(structure)

        # Package manifest
        if strategy.create_package_json:
            handle_package_json(
                structure.root_folder,
                uidl,
                structure.dependencies,
                structure.dev_dependencies,
            )

        return structure.root_folder

    # -------------------------------------------------------------------------
    # Preparation
    # -------------------------------------------------------------------------

    def _component_paths(self, uidl: ProjectUIDL, strategy: ProjectStrategy) -> dict[str, str]:
        """File path of every shared component inside the components folder, by element type."""
        paths: dict[str, str] = {}
        for key, component in uidl.components.items():
            prepared, folder = _apply_file_options(component, strategy.components.options)
            path = "/".join(
                [*prepared.output_options.folder_path, *folder, _component_file_name(prepared)]
            )
            names = (key, component.name, dash_case_to_upper_camel_case(component.name))
            for element_type in names:
                paths.setdefault(element_type, path)
        return paths

    def _options_for(
        self,
        strategy: ProjectStrategy,
        uidl: ProjectUIDL,
        location: Sequence[str],
        mapping: Mapping | None,
    ) -> GeneratorOptions:
        return validate_generator_options(
            {
                "local_dependencies_prefix": generate_local_dependencies_prefix(
                    location, strategy.components.path
                ),
                "assets_prefix": strategy.static.prefix,
                "mapping": mapping,
                "design_language": uidl.root.design_language,
                "project_style_set": build_project_style_set(strategy, location, uidl.root),
            }
        )

    def _prepare_components(
        self, uidl: ProjectUIDL, strategy: ProjectStrategy, mapping: Mapping | None
    ) -> list[PreparedComponent]:
        section = strategy.components
        component_paths = self._component_paths(uidl, strategy)
        prepared = []
        for component in uidl.components.values():
            component, folder = _apply_file_options(component, section.options)
            _assign_component_paths(component, component_paths)
            path = (*section.path, *component.output_options.folder_path, *folder)
            prepared.append(
                PreparedComponent(
                    uidl=component,
                    path=path,
                    options=self._options_for(strategy, uidl, path, mapping),
                )
            )
        return prepared

    def _prepare_pages(
        self, uidl: ProjectUIDL, strategy: ProjectStrategy, mapping: Mapping | None
    ) -> list[PreparedComponent]:
        section = strategy.pages
        component_paths = self._component_paths(uidl, strategy)
        prepared = []
        for route, page in uidl.pages.items():
            page, folder = _apply_file_options(page, section.options)
            project_route = build_project_route(route, page, folder)
            page = with_output_options(
                page,
                file_name=project_route.file_name,
                component_class_name=(
                    page.output_options.component_class_name or project_route.component_name
                ),
            )
            _assign_component_paths(page, component_paths)
            path = (*section.path, *project_route.folder_path)
            prepared.append(
                PreparedComponent(
                    uidl=page,
                    path=path,
                    options=self._options_for(strategy, uidl, path, mapping),
                    route=project_route,
                )
            )
        return prepared

    # -------------------------------------------------------------------------
    # Folding
    # -------------------------------------------------------------------------

    def _fold(
        self,
        root: GeneratedFolder,
        dependencies: dict[str, str],
        path: Sequence[str],
        result: CompiledComponent,
        generated: set[str],
    ) -> None:
        inject_files_to_path(root, path, result.files, generated)
        dependencies.update(result.package_dependencies)

    def _generate_framework_files(
        self,
        root: GeneratedFolder,
        dependencies: dict[str, str],
        strategy: ProjectStrategy,
        framework: FrameworkSection,
        generated: set[str],
    ) -> None:
        style_sheet = strategy.project_style_sheet

        def global_styles(from_path: Sequence[str], dependent: bool) -> GlobalStylesOptions | None:
            if style_sheet is None or not dependent:
                return None
            return GlobalStylesOptions(
                path=generate_local_dependencies_prefix(from_path, style_sheet.path),
                sheet_name=style_sheet.file_name,
                is_global_styles_dependent=True,
            )

        config = framework.config
        if config is not None and config.config_content_generator is not None:
            generator = config.config.build("framework.config", self.mappings)
            result = config.config_content_generator(
                FrameworkConfigOptions(
                    file_name=config.file_name,
                    file_type=config.file_type,
                    dependencies=dict(dependencies),
                    global_styles=global_styles(config.path, config.is_global_styles_dependent),
                )
            )
            files = generator.link_code_chunks(result.chunks, config.file_name)
            inject_files_to_path(root, config.path, files, generated)
            dependencies.update(result.dependencies)
            logger.info("Generated framework config %s.%s", config.file_name, config.file_type)

        replace_section = framework.replace
        if replace_section is not None:
            file, updated = replace_section.replace_file(
                root,
                dict(dependencies),
                replace_section.file_name,
                replace_section.file_type,
                global_styles(replace_section.path, replace_section.is_global_styles_dependent),
            )
            inject_files_to_path(root, replace_section.path, [file])
            dependencies.clear()
            dependencies.update(updated)
            logger.info(
                "Replaced framework file %s.%s",
                replace_section.file_name,
                replace_section.file_type,
            )


def files_by_path(folder: GeneratedFolder) -> dict[str, GeneratedFile]:
    """Flatten a folder tree to ``{"src/views/home.js": file}``."""
    return {"/".join([*path, file.full_name]): file for path, file in folder.walk()}
