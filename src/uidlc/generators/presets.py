"""
Generators preloaded with the reference plugin lists.

Extra plugins run between the base plugin, which builds the component tree
chunk, and the import plugin, which must observe every dependency the
others registered.
"""

from __future__ import annotations

from collections.abc import Iterable

from ..core.ir import Mapping
from ..core.pipeline import ComponentPlugin
from ..mappings import HTML_MAPPING, REACT_MAPPING
from ..plugins import (
    create_html_base_plugin,
    create_html_imports_plugin,
    create_import_plugin,
    create_react_base_plugin,
)
from .component import ComponentGenerator, PostProcessor, create_component_generator


def create_html_component_generator(
    plugins: Iterable[ComponentPlugin] = (),
    mappings: Iterable[Mapping] = (),
    postprocessors: Iterable[PostProcessor] = (),
) -> ComponentGenerator:
    return create_component_generator(
        plugins=[create_html_base_plugin(), *plugins, create_html_imports_plugin()],
        mappings=[HTML_MAPPING, *mappings],
        postprocessors=postprocessors,
    )


def create_react_component_generator(
    plugins: Iterable[ComponentPlugin] = (),
    mappings: Iterable[Mapping] = (),
    postprocessors: Iterable[PostProcessor] = (),
) -> ComponentGenerator:
    return create_component_generator(
        plugins=[create_react_base_plugin(), *plugins, create_import_plugin()],
        mappings=[REACT_MAPPING, *mappings],
        postprocessors=postprocessors,
    )
