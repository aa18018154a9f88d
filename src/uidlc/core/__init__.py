"""
uidlc core: IR types, chunk store, linker, dependency aggregation,
plugin pipeline and mapping resolution.
"""

from .chunks import ChunkStore
from .dependencies import DependencyAggregator, package_name
from .errors import (
    ChunkCycleError,
    ConfigurationError,
    DependencyConflictError,
    FileCollisionError,
    InvalidOptionsError,
    MissingChunkError,
    PluginError,
    RepresentationError,
    UidlcError,
    UndefinedGeneratorError,
    UnknownChunkFlagError,
    UnresolvedChunkReferenceError,
)
from .linker import link_chunks, link_code_chunks, order_chunks
from .mapping import merge_mappings, resolve_element, resolve_node
from .pipeline import ComponentPlugin, ComponentStructure, run_plugins

__all__ = [
    "ChunkStore",
    "DependencyAggregator",
    "package_name",
    "ComponentPlugin",
    "ComponentStructure",
    "run_plugins",
    "link_chunks",
    "link_code_chunks",
    "order_chunks",
    "merge_mappings",
    "resolve_element",
    "resolve_node",
    # Errors
    "UidlcError",
    "ConfigurationError",
    "MissingChunkError",
    "UnresolvedChunkReferenceError",
    "ChunkCycleError",
    "DependencyConflictError",
    "FileCollisionError",
    "UndefinedGeneratorError",
    "UnknownChunkFlagError",
    "InvalidOptionsError",
    "RepresentationError",
    "PluginError",
]
