"""
Per-section file handlers used by the project generator.

Each handler produces the files of one strategy section: it derives the
options for the section (relative prefixes, root flag, stylesheet location),
runs the section's generator and hands the result back to the orchestrator,
which alone places it in the folder tree.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from typing import Any

from ..core.errors import ConfigurationError
from ..core.ir import (
    ChunkDefinition,
    ChunkType,
    ComponentUIDL,
    FileType,
    GeneratedFile,
    GeneratedFolder,
    GeneratorOptions,
    HastElement,
    Mapping,
    ProjectRoute,
    ProjectStyleSet,
    ProjectUIDL,
    add_attribute_to_node,
    add_boolean_attribute_to_node,
    add_child_node,
    add_raw_node,
    add_text_node,
    create_html_node,
    validate_generator_options,
)
from ..core.paths import generate_local_dependencies_prefix, prefix_assets_path
from ..core.strings import camel_case_to_dash_case, dash_case_to_upper_camel_case, slugify
from ..generators import CompiledComponent, ComponentGenerator
from .strategy import CustomTag, EntryFileOptions, ProjectStrategy

logger = logging.getLogger(__name__)

MODULE_FILE_SUFFIX = ".module"
COMPONENTS_MODULE_FILE_NAME = f"components{MODULE_FILE_SUFFIX}"
ENTRY_DOCTYPE_CHUNK = "doctype"
ENTRY_DOCUMENT_CHUNK = "html-node"
MANIFEST_FILE_NAME = "manifest"
PACKAGE_JSON_FILE_NAME = "package"

DEFAULT_PACKAGE_JSON: dict[str, Any] = {
    "name": "uidlc-project",
    "version": "1.0.0",
    "description": "Project generated from a UIDL document",
}


def with_output_options(uidl: ComponentUIDL, **updates: Any) -> ComponentUIDL:
    """Copy of ``uidl`` with some output options replaced."""
    return uidl.model_copy(
        update={"output_options": uidl.output_options.model_copy(update=updates)}
    )


def build_project_style_set(
    strategy: ProjectStrategy, from_path: Sequence[str], root: ComponentUIDL
) -> ProjectStyleSet | None:
    """Location of the project stylesheet as seen from the folder ``from_path``."""
    style_sheet = strategy.project_style_sheet
    if style_sheet is None:
        return None
    return ProjectStyleSet(
        style_set_definitions=root.style_set_definitions,
        file_name=style_sheet.file_name,
        path=generate_local_dependencies_prefix(from_path, style_sheet.path),
        import_file=style_sheet.import_file,
    )


# =============================================================================
# Components and pages
# =============================================================================


async def create_component(
    uidl: ComponentUIDL, generator: ComponentGenerator, options: GeneratorOptions
) -> CompiledComponent:
    return await generator.generate_component(uidl, options)


async def create_page(
    uidl: ComponentUIDL, generator: ComponentGenerator, options: GeneratorOptions
) -> CompiledComponent:
    return await generator.generate_component(uidl, options)


async def create_component_module(
    uidl: ProjectUIDL, strategy: ProjectStrategy, generator: ComponentGenerator
) -> CompiledComponent:
    """Generate the module declaring every shared component, from the project root."""
    path = strategy.components.path
    options = validate_generator_options(
        {
            "local_dependencies_prefix": generate_local_dependencies_prefix(path, path),
            "module_components": uidl.components,
        }
    )
    root = with_output_options(uidl.root, file_name=COMPONENTS_MODULE_FILE_NAME)
    return await generator.generate_component(root, options)


async def create_page_module(
    uidl: ComponentUIDL, generator: ComponentGenerator, options: GeneratorOptions
) -> CompiledComponent:
    """
    Generate the module wrapping one page.

    The module is named after the page's first folder (``blog`` becomes
    ``BlogModule``), or after the page file when it has no folder. Its file
    sits next to the page as ``<page file>.module``.
    """
    output = uidl.output_options
    file_name = output.file_name or camel_case_to_dash_case(uidl.name)
    segment = output.folder_path[0] if output.folder_path else file_name
    page = with_output_options(
        uidl,
        file_name=f"{file_name}{MODULE_FILE_SUFFIX}",
        module_name=f"{dash_case_to_upper_camel_case(segment)}Module",
    )
    return await generator.generate_component(page, options)


# =============================================================================
# Router
# =============================================================================


async def create_router_file(
    root: ComponentUIDL,
    strategy: ProjectStrategy,
    generator: ComponentGenerator,
    project_routes: Sequence[ProjectRoute] = (),
    mapping: Mapping | None = None,
) -> CompiledComponent:
    """Generate the application root holding the router, next to the pages it imports."""
    router = strategy.router
    if router is None:
        raise ConfigurationError(f"Strategy '{strategy.id}' has no router section")
    options = validate_generator_options(
        {
            "local_dependencies_prefix": generate_local_dependencies_prefix(
                router.path, strategy.pages.path
            ),
            "assets_prefix": strategy.static.prefix,
            "mapping": mapping,
            "is_root_component": True,
            "project_routes": tuple(project_routes),
            "design_language": root.design_language,
            "project_style_set": build_project_style_set(strategy, router.path, root),
        }
    )
    uidl = with_output_options(root, file_name=router.file_name)
    return await generator.generate_component(uidl, options)


# =============================================================================
# Entry document
# =============================================================================


def _add_custom_tag(head: HastElement, body: HastElement, tag: CustomTag) -> None:
    node = create_html_node(tag.tag_name)
    if tag.content:
        add_text_node(node, tag.content)
    for attribute in tag.attributes:
        if attribute.attribute_value:
            add_attribute_to_node(node, attribute.attribute_key, attribute.attribute_value)
        else:
            add_boolean_attribute_to_node(node, attribute.attribute_key)
    add_child_node(head if tag.target_tag == "head" else body, node)


def create_html_entry_file_chunks(
    uidl: ProjectUIDL, options: EntryFileOptions
) -> dict[FileType, list[ChunkDefinition]]:
    """
    Build the entry document from the project globals.

    Produces two chunks: the doctype text and the document tree linked after
    it. The tree holds the title, custom tags, manifest link, meta tags,
    global assets and custom code; the body holds the application root.
    """
    assets_prefix = options.assets_prefix
    globals_ = uidl.globals
    settings = globals_.settings

    html = create_html_node("html")
    head = create_html_node("head")
    body = create_html_node("body")
    add_child_node(html, head)
    add_child_node(html, body)

    if options.app_root_override:
        add_raw_node(body, options.app_root_override)
    else:
        app_root = create_html_node("div")
        add_attribute_to_node(app_root, "id", "app")
        add_child_node(body, app_root)

    if settings.language:
        add_attribute_to_node(html, "lang", settings.language)

    if settings.title:
        title = create_html_node("title")
        add_text_node(title, settings.title)
        add_child_node(head, title)

    for tag in options.custom_tags:
        _add_custom_tag(head, body, tag)

    if globals_.manifest is not None:
        link = create_html_node("link")
        add_attribute_to_node(link, "rel", "manifest")
        add_attribute_to_node(link, "href", f"{assets_prefix.rstrip('/')}/manifest.json")
        add_child_node(head, link)

    for meta in globals_.meta:
        meta_tag = create_html_node("meta")
        for key, value in meta.items():
            add_attribute_to_node(meta_tag, key, prefix_assets_path(assets_prefix, value))
        add_child_node(head, meta_tag)

    for asset in globals_.assets:
        asset_path = prefix_assets_path(assets_prefix, asset.path) if asset.path else None
        asset_options = asset.options

        if asset.type == "canonical" and asset_path:
            link = create_html_node("link")
            add_attribute_to_node(link, "rel", "canonical")
            add_attribute_to_node(link, "href", asset_path)
            add_child_node(head, link)

        if asset.type in ("style", "font") and asset_path:
            link = create_html_node("link")
            add_attribute_to_node(link, "rel", "stylesheet")
            add_attribute_to_node(link, "href", asset_path)
            add_child_node(head, link)

        if asset.type == "style" and asset.content:
            style = create_html_node("style")
            add_text_node(style, asset.content)
            add_child_node(head, style)

        if asset.type == "script":
            script = create_html_node("script")
            add_attribute_to_node(script, "type", "text/javascript")
            if asset_path:
                add_attribute_to_node(script, "src", asset_path)
                if asset_options and asset_options.defer:
                    add_boolean_attribute_to_node(script, "defer")
                if asset_options and asset_options.async_:
                    add_boolean_attribute_to_node(script, "async")
            elif asset.content:
                add_text_node(script, asset.content)
            in_body = asset_options is not None and asset_options.target == "body"
            add_child_node(body if in_body else head, script)

        if asset.type == "icon" and asset_path:
            icon = create_html_node("link")
            add_attribute_to_node(icon, "rel", "shortcut icon")
            add_attribute_to_node(icon, "href", asset_path)
            if asset_options and asset_options.icon_type:
                add_attribute_to_node(icon, "type", asset_options.icon_type)
            if asset_options and asset_options.icon_sizes:
                add_attribute_to_node(icon, "sizes", asset_options.icon_sizes)
            add_child_node(head, icon)

    if options.custom_head_content:
        add_raw_node(head, options.custom_head_content)

    custom_code = globals_.custom_code
    if custom_code is not None and custom_code.head:
        add_raw_node(head, custom_code.head)
    if custom_code is not None and custom_code.body:
        add_raw_node(body, custom_code.body)

    return {
        FileType.HTML: [
            ChunkDefinition(
                name=ENTRY_DOCTYPE_CHUNK,
                type=ChunkType.STRING,
                file_type=FileType.HTML,
                content="<!DOCTYPE html>",
            ),
            ChunkDefinition(
                name=ENTRY_DOCUMENT_CHUNK,
                type=ChunkType.HAST,
                file_type=FileType.HTML,
                content=html,
                link_after=[ENTRY_DOCTYPE_CHUNK],
            ),
        ]
    }


def create_entry_file(
    uidl: ProjectUIDL,
    strategy: ProjectStrategy,
    generator: ComponentGenerator,
    options: EntryFileOptions | None = None,
) -> list[GeneratedFile]:
    """
    Generate the entry document.

    Chunks come from the strategy's chunk generation function (the HTML
    document builder by default) and go straight to the linker; no plugin
    pipeline runs. Call options take precedence over strategy options.
    """
    entry = strategy.entry
    if entry is None:
        raise ConfigurationError(f"Strategy '{strategy.id}' has no entry section")
    merged = (options or EntryFileOptions()).merged_over(entry.options)
    chunk_generation_function = entry.chunk_generation_function or create_html_entry_file_chunks
    chunks = chunk_generation_function(uidl, merged)
    return generator.link_code_chunks(chunks, entry.file_name)


# =============================================================================
# Manifests
# =============================================================================


def create_manifest_json_file(uidl: ProjectUIDL, assets_prefix: str = "") -> GeneratedFile:
    """
    Web app manifest: UIDL fields over defaults, icon paths asset-prefixed.
    """
    manifest = uidl.globals.manifest
    defaults: dict[str, Any] = {
        "short_name": uidl.name,
        "name": uidl.name,
        "display": "standalone",
        "start_url": "/",
    }
    declared = manifest.model_dump(exclude_none=True) if manifest is not None else {}
    icons = [
        {**icon, "src": prefix_assets_path(assets_prefix, icon["src"])}
        for icon in declared.pop("icons", [])
    ]
    content = {**defaults, **declared, "icons": icons}
    return GeneratedFile(
        name=MANIFEST_FILE_NAME,
        content=json.dumps(content, indent=2),
        file_type=FileType.JSON.value,
    )


def handle_package_json(
    template: GeneratedFolder,
    uidl: ProjectUIDL,
    dependencies: dict[str, str],
    dev_dependencies: dict[str, str] | None = None,
) -> None:
    """
    Write the package manifest into ``template``.

    An existing ``package.json`` keeps its content; its name is replaced by
    the project slug and the dependency maps are merged, new entries winning.
    Otherwise a default manifest is created.
    """
    existing = template.find_file(PACKAGE_JSON_FILE_NAME, FileType.JSON.value)
    name = slugify(uidl.name)

    if existing is not None:
        try:
            content = json.loads(existing.content)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid package.json in template: {e}") from e
        if not isinstance(content, dict):
            raise ConfigurationError("Invalid package.json in template: expected a JSON object")
        content["name"] = name
        content["dependencies"] = {**content.get("dependencies", {}), **dependencies}
        content["devDependencies"] = {
            **content.get("devDependencies", {}),
            **(dev_dependencies or {}),
        }
        existing.content = json.dumps(content, indent=2)
        logger.debug("Updated package.json of the template")
        return

    content = {**DEFAULT_PACKAGE_JSON, "name": name, "dependencies": dependencies}
    if dev_dependencies:
        content["devDependencies"] = dev_dependencies
    template.files.append(
        GeneratedFile(
            name=PACKAGE_JSON_FILE_NAME,
            content=json.dumps(content, indent=2),
            file_type=FileType.JSON.value,
        )
    )
