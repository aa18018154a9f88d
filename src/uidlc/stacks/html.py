"""
Static HTML stack.

Every page is a complete document linking the project stylesheet; there is
no router, entry document or package manifest.

Layout::

    index.html, about.html   pages
    style.css                project stylesheet
    components/*.html        shared components
    public/manifest.json
"""

from ..generators import create_component_generator, create_html_component_generator
from ..plugins import create_style_sheet_plugin
from ..project import (
    ComponentsSection,
    GeneratorConfig,
    PagesSection,
    ProjectStrategy,
    ProjectStyleSheetSection,
    StaticSection,
)


def create_html_strategy() -> ProjectStrategy:
    component_config = GeneratorConfig(generator=create_html_component_generator)
    return ProjectStrategy(
        id="html",
        components=ComponentsSection(config=component_config, path=("components",)),
        pages=PagesSection(config=component_config, path=()),
        project_style_sheet=ProjectStyleSheetSection(
            config=GeneratorConfig(
                generator=create_component_generator,
                plugins=(create_style_sheet_plugin(),),
            ),
            path=(),
            file_name="style",
            import_file=True,
        ),
        static=StaticSection(prefix="", path=("public",)),
        create_package_json=False,
    )
