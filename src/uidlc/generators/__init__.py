"""
Component generators.

- ComponentGenerator: plugins + mappings + post-processors as one value
- create_component_generator: default factory used by project strategies
- create_html_component_generator / create_react_component_generator:
  generators preloaded with the reference plugin lists
"""

from .component import (
    CompiledComponent,
    ComponentGenerator,
    GeneratorFactory,
    PostProcessor,
    component_file_name,
    create_component_generator,
)
from .presets import create_html_component_generator, create_react_component_generator

__all__ = [
    "CompiledComponent",
    "ComponentGenerator",
    "GeneratorFactory",
    "PostProcessor",
    "component_file_name",
    "create_component_generator",
    "create_html_component_generator",
    "create_react_component_generator",
]
