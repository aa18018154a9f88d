"""
Reference component plugins.

Each factory returns a plugin: a callable taking and returning the
component structure. Plugins that need a chunk produced by an earlier plugin
fail with MissingChunkError when it is absent.
"""

from .html_base import create_html_base_plugin
from .html_imports import create_html_imports_plugin
from .import_statements import create_import_plugin
from .react_base import create_react_base_plugin
from .router import create_react_router_plugin
from .style_sheet import create_style_sheet_plugin

__all__ = [
    "create_html_base_plugin",
    "create_html_imports_plugin",
    "create_import_plugin",
    "create_react_base_plugin",
    "create_react_router_plugin",
    "create_style_sheet_plugin",
]
