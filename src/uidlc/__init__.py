"""
uidlc - UIDL to source code compiler.

Turns framework-agnostic component trees into framework source files:
plugins emit named chunks, a linker orders and renders them, and a project
generator lays the results out in a folder tree.
"""

from ._version import get_version
from .core.errors import (
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
from .generators import (
    CompiledComponent,
    ComponentGenerator,
    create_component_generator,
    create_html_component_generator,
    create_react_component_generator,
)
from .project import ProjectGenerator, ProjectPlugin
from .stacks import create_project_generator, get_strategy, register_stack

__version__ = get_version()

__all__ = [
    "__version__",
    "CompiledComponent",
    "ComponentGenerator",
    "ProjectGenerator",
    "ProjectPlugin",
    "create_component_generator",
    "create_html_component_generator",
    "create_react_component_generator",
    "create_project_generator",
    "get_strategy",
    "register_stack",
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
