"""
React router plugin.

Generates the application entry module for the root component: one
``<Route>`` per project page, wrapped in react-router's ``BrowserRouter``,
mounted on ``#app``. Page imports use the local dependencies prefix, which
the orchestrator sets to the path from the router file to the pages folder.
"""

from __future__ import annotations

import logging

from ..core.errors import PluginError
from ..core.ir import (
    ChunkDefinition,
    ChunkType,
    DependencyKind,
    DependencyRecord,
    FileType,
    FunctionDeclaration,
    ImportKind,
    JSXElement,
    JSXExpression,
    Program,
    ProjectRoute,
    RawCode,
    ReturnStatement,
)
from ..core.pipeline import ComponentStructure
from .html_base import PROJECT_STYLE_SHEET_DEPENDENCY
from .import_statements import IMPORT_CHUNKS
from .react_base import REACT_VERSION

logger = logging.getLogger(__name__)

APP_ROUTER_CHUNK = "app-router"
PLUGIN_NAME = "react-router"
REACT_ROUTER_VERSION = "^6.22.0"
APP_ROOT_ID = "app"

# identifier -> exported name
ROUTER_IMPORTS = (("Router", "BrowserRouter"), ("Routes", None), ("Route", None))


def _route_element(route: ProjectRoute, path: str) -> JSXElement:
    return JSXElement(
        tag_name="Route",
        attributes={"path": path, "element": JSXExpression(f"<{route.component_name} />")},
    )


def _page_source(prefix: str, route: ProjectRoute) -> str:
    return "/".join([prefix.rstrip("/"), *route.folder_path, route.file_name])


def create_react_router_plugin(file_type: FileType = FileType.JS):
    """Create the router plugin for the application root."""

    def react_router(structure: ComponentStructure) -> ComponentStructure:
        options = structure.options
        if not options.is_root_component:
            raise PluginError(PLUGIN_NAME, "only the root component can hold the router")

        dependencies = structure.dependencies
        dependencies.merge("React", DependencyRecord(source="react", version=REACT_VERSION))
        dependencies.merge(
            "createRoot",
            DependencyRecord(
                source="react-dom/client", import_kind=ImportKind.NAMED, version=REACT_VERSION
            ),
        )
        for identifier, original in ROUTER_IMPORTS:
            dependencies.merge(
                identifier,
                DependencyRecord(
                    source="react-router-dom",
                    import_kind=ImportKind.NAMED,
                    version=REACT_ROUTER_VERSION,
                    original_name=original,
                ),
            )

        style_set = options.project_style_set
        if style_set is not None and style_set.import_file:
            dependencies.merge(
                PROJECT_STYLE_SHEET_DEPENDENCY,
                DependencyRecord(
                    source=f"{style_set.path}/{style_set.file_name}.css",
                    import_kind=ImportKind.SIDE_EFFECT,
                    kind=DependencyKind.LOCAL,
                ),
            )

        routes: list[JSXElement] = []
        fallback: JSXElement | None = None
        for route in options.project_routes:
            dependencies.merge(
                route.component_name,
                DependencyRecord(
                    source=_page_source(options.local_dependencies_prefix, route),
                    kind=DependencyKind.LOCAL,
                ),
            )
            routes.append(_route_element(route, route.nav_link))
            if route.default:
                fallback = _route_element(route, "*")
        if fallback is not None:
            routes.append(fallback)
        logger.debug("Router with %d route(s)", len(routes))

        router = JSXElement(
            tag_name="Router",
            children=[JSXElement(tag_name="Routes", children=list(routes))],
        )
        program = Program(
            body=[
                FunctionDeclaration(name="App", body=[ReturnStatement(argument=router)]),
                RawCode(
                    f"createRoot(document.getElementById('{APP_ROOT_ID}')).render(<App />)"
                ),
            ]
        )
        structure.chunks.add_or_replace(
            ChunkDefinition(
                name=APP_ROUTER_CHUNK,
                type=ChunkType.AST,
                file_type=file_type,
                content=program,
                link_after=list(IMPORT_CHUNKS),
            )
        )
        return structure

    react_router.__name__ = PLUGIN_NAME
    return react_router
