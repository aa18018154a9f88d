"""
Plugin pipeline for component generation.

Plugins run strictly one after another: each sees the chunks and
dependencies left by its predecessors. The pipeline only sequences calls;
the first exception aborts the run and propagates unchanged.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass, field
from typing import Union

from .chunks import ChunkStore
from .dependencies import DependencyAggregator
from .errors import PluginError
from .ir import ComponentUIDL, GeneratorOptions

logger = logging.getLogger(__name__)


@dataclass
class ComponentStructure:
    """
    Working state of one component generation.

    Created fresh per call and owned by a single pipeline run.
    """

    uidl: ComponentUIDL
    options: GeneratorOptions = field(default_factory=GeneratorOptions)
    chunks: ChunkStore = field(default_factory=ChunkStore)
    dependencies: DependencyAggregator = field(default_factory=DependencyAggregator)


PluginResult = Union[ComponentStructure, Awaitable[ComponentStructure]]
ComponentPlugin = Callable[[ComponentStructure], PluginResult]


def plugin_name(plugin: ComponentPlugin) -> str:
    return getattr(plugin, "__name__", type(plugin).__name__)


async def run_plugins(
    structure: ComponentStructure, plugins: Sequence[ComponentPlugin]
) -> ComponentStructure:
    """
    Run plugins in order over a component structure.

    Plugins may be plain functions or coroutines.

    Raises:
        PluginError: If a plugin does not hand back a component structure
        Exception: Whatever a plugin raised, unchanged
    """
    for plugin in plugins:
        name = plugin_name(plugin)
        logger.debug("Running plugin %s on %s", name, structure.uidl.name)

        result = plugin(structure)
        if inspect.isawaitable(result):
            result = await result

        if not isinstance(result, ComponentStructure):
            raise PluginError(
                name, f"returned {type(result).__name__} instead of a ComponentStructure"
            )
        structure = result

    return structure
