"""
React single-page application stack.

Layout::

    public/index.html        entry document (+ manifest.json)
    src/index.js             router, mounts the app
    src/style.css            project stylesheet
    src/views/*.js           pages
    src/components/*.js      shared components
    package.json
"""

from ..generators import create_component_generator, create_react_component_generator
from ..mappings import REACT_PROJECT_MAPPING
from ..plugins import create_import_plugin, create_react_router_plugin, create_style_sheet_plugin
from ..project import (
    ComponentsSection,
    EntrySection,
    GeneratorConfig,
    PagesSection,
    ProjectStrategy,
    ProjectStyleSheetSection,
    RouterSection,
    StaticSection,
)


def create_react_strategy() -> ProjectStrategy:
    component_config = GeneratorConfig(
        generator=create_react_component_generator,
        mappings=(REACT_PROJECT_MAPPING,),
    )
    return ProjectStrategy(
        id="react",
        components=ComponentsSection(config=component_config, path=("src", "components")),
        pages=PagesSection(config=component_config, path=("src", "views")),
        router=RouterSection(
            config=GeneratorConfig(
                generator=create_component_generator,
                plugins=(create_react_router_plugin(), create_import_plugin()),
            ),
            path=("src",),
            file_name="index",
        ),
        entry=EntrySection(
            config=GeneratorConfig(generator=create_component_generator),
            path=("public",),
            file_name="index",
        ),
        project_style_sheet=ProjectStyleSheetSection(
            config=GeneratorConfig(
                generator=create_component_generator,
                plugins=(create_style_sheet_plugin(),),
            ),
            path=("src",),
            file_name="style",
            import_file=True,
        ),
        static=StaticSection(prefix="", path=("public",)),
    )
