"""
Component generator: turns one component tree into compiled files.

A generator is a value binding a mapping table, a plugin list, post-processors
and renderers. It holds no per-call state, so one instance can serve any
number of generations, including concurrent ones.

Generation steps:
1. Validate the UIDL and options
2. Resolve mapped elements on a private copy of the tree
3. Run the plugins over a fresh component structure
4. Link chunks into one text per file type
5. Run post-processors over the texts, in registration order
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Iterable, Mapping as MappingABC
from dataclasses import dataclass, field, replace
from typing import Any

from ..core.dependencies import DependencyAggregator
from ..core.ir import (
    ChunkDefinition,
    ChunkType,
    ComponentUIDL,
    DependencyRecord,
    FileType,
    GeneratedFile,
    GeneratorOptions,
    Mapping,
    UIDLElement,
    validate_generator_options,
)
from ..core.linker import link_code_chunks
from ..core.mapping import merge_mappings, resolve_element, resolve_node
from ..core.pipeline import ComponentPlugin, ComponentStructure, run_plugins
from ..core.renderers import DEFAULT_RENDERERS, Renderer
from ..core.strings import camel_case_to_dash_case

logger = logging.getLogger(__name__)

PostProcessor = Callable[[dict[str, str]], dict[str, str]]


@dataclass
class CompiledComponent:
    """
    Result of one component generation.

    Attributes:
        files: One file per produced file type
        dependencies: Final dependency snapshot, keyed by import identifier
    """

    files: list[GeneratedFile] = field(default_factory=list)
    dependencies: dict[str, DependencyRecord] = field(default_factory=dict)

    @property
    def package_dependencies(self) -> dict[str, str]:
        """Published packages and versions, in package manifest shape."""
        return DependencyAggregator(self.dependencies).package_versions()


def component_file_name(uidl: ComponentUIDL, file_type: FileType | str | None = None) -> str:
    """
    File name (without extension) for one output of a component.

    Stylesheets and templates may carry their own names; everything else
    uses ``outputOptions.fileName`` or the dash-cased component name.
    """
    output = uidl.output_options
    base = output.file_name or camel_case_to_dash_case(uidl.name)
    if file_type == FileType.CSS and output.style_file_name:
        return output.style_file_name
    if file_type == FileType.HTML and output.template_file_name:
        return output.template_file_name
    return base


@dataclass(frozen=True)
class ComponentGenerator:
    plugins: tuple[ComponentPlugin, ...] = ()
    mappings: tuple[Mapping, ...] = ()
    postprocessors: tuple[PostProcessor, ...] = ()
    renderers: MappingABC[ChunkType, Renderer] = field(default_factory=lambda: DEFAULT_RENDERERS)

    def with_plugin(self, plugin: ComponentPlugin) -> ComponentGenerator:
        return replace(self, plugins=self.plugins + (plugin,))

    def with_mapping(self, mapping: Mapping | dict[str, Any]) -> ComponentGenerator:
        if not isinstance(mapping, Mapping):
            mapping = Mapping.model_validate(mapping)
        return replace(self, mappings=self.mappings + (mapping,))

    def with_postprocessor(self, postprocessor: PostProcessor) -> ComponentGenerator:
        return replace(self, postprocessors=self.postprocessors + (postprocessor,))

    def mapping_for(self, options: GeneratorOptions) -> Mapping:
        """The generator's mappings with the options-level mapping applied last."""
        return merge_mappings([*self.mappings, options.mapping])

    def resolve_element(
        self, element: UIDLElement, options: GeneratorOptions | dict | None = None
    ) -> UIDLElement:
        options = validate_generator_options(options)
        return resolve_element(element, self.mapping_for(options), options)

    async def generate_component(
        self,
        uidl: ComponentUIDL | dict[str, Any],
        options: GeneratorOptions | dict | None = None,
    ) -> CompiledComponent:
        """
        Generate the files of one component.

        Raises:
            ConfigurationError: Misconfigured plugins, chunks or dependencies
            RepresentationError: A chunk payload does not match its type
            PluginError: A plugin precondition failed
        """
        if not isinstance(uidl, ComponentUIDL):
            uidl = ComponentUIDL.model_validate(uidl)
        options = validate_generator_options(options)

        working = uidl.model_copy(deep=True)
        working.node = resolve_node(working.node, self.mapping_for(options), options)

        structure = ComponentStructure(uidl=working, options=options)
        structure = await run_plugins(structure, self.plugins)

        files = self._link(list(structure.chunks), structure.uidl, structure.dependencies)
        logger.debug(
            "Generated %s: %s", uidl.name, ", ".join(file.full_name for file in files)
        )
        return CompiledComponent(files=files, dependencies=structure.dependencies.all())

    def generate_component_sync(
        self,
        uidl: ComponentUIDL | dict[str, Any],
        options: GeneratorOptions | dict | None = None,
    ) -> CompiledComponent:
        """Blocking variant of :meth:`generate_component` for non-async callers."""
        return asyncio.run(self.generate_component(uidl, options))

    def link_code_chunks(
        self,
        chunks: MappingABC[Any, Iterable[ChunkDefinition]] | Iterable[ChunkDefinition],
        file_name: str,
        dependencies: DependencyAggregator | None = None,
    ) -> list[GeneratedFile]:
        """
        Link chunks produced outside a plugin pipeline into files named ``file_name``.

        Accepts either a flat chunk iterable or chunks grouped by file type.
        """
        if isinstance(chunks, MappingABC):
            flat = [chunk for group in chunks.values() for chunk in group]
        else:
            flat = list(chunks)
        texts = link_code_chunks(flat, dependencies, self.renderers)
        outputs = self._postprocess({file_type.value: text for file_type, text in texts.items()})
        return [
            GeneratedFile(name=file_name, content=content, file_type=file_type)
            for file_type, content in outputs.items()
        ]

    def _link(
        self,
        chunks: list[ChunkDefinition],
        uidl: ComponentUIDL,
        dependencies: DependencyAggregator,
    ) -> list[GeneratedFile]:
        texts = link_code_chunks(chunks, dependencies, self.renderers)
        outputs = self._postprocess({file_type.value: text for file_type, text in texts.items()})
        return [
            GeneratedFile(
                name=component_file_name(uidl, file_type),
                content=content,
                file_type=file_type,
            )
            for file_type, content in outputs.items()
        ]

    def _postprocess(self, outputs: dict[str, str]) -> dict[str, str]:
        for postprocessor in self.postprocessors:
            outputs = postprocessor(outputs)
        return outputs


GeneratorFactory = Callable[..., ComponentGenerator]


def create_component_generator(
    plugins: Iterable[ComponentPlugin] = (),
    mappings: Iterable[Mapping] = (),
    postprocessors: Iterable[PostProcessor] = (),
    renderers: MappingABC[ChunkType, Renderer] | None = None,
) -> ComponentGenerator:
    """Build a generator value; the default factory used by strategies."""
    return ComponentGenerator(
        plugins=tuple(plugins),
        mappings=tuple(mappings),
        postprocessors=tuple(postprocessors),
        renderers=renderers if renderers is not None else DEFAULT_RENDERERS,
    )
