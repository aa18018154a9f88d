"""
Mapping tables for the built-in stacks.

Semantic element kinds (``container``, ``text``, ``navlink`` ...) resolve to
concrete primitives of the target. Project mappings add routing-aware
navigation links on top of the component mappings.
"""

from __future__ import annotations

from .core.ir import Mapping
from .plugins.router import REACT_ROUTER_VERSION


def _bind_attr(attribute: str) -> dict:
    return {"type": "dynamic", "content": {"referenceType": "attr", "id": attribute}}


_SEMANTIC_ELEMENTS = {
    "container": {"elementType": "div"},
    "text": {"elementType": "span"},
    "image": {"elementType": "img"},
    "textinput": {
        "elementType": "input",
        "attrs": {"type": {"type": "static", "content": "text"}},
    },
    "list": {"elementType": "ul"},
    "list-item": {"elementType": "li"},
    "link": {"elementType": "a", "attrs": {"href": _bind_attr("url")}},
}

HTML_MAPPING = Mapping.model_validate(
    {
        "elements": {
            **_SEMANTIC_ELEMENTS,
            "navlink": {"elementType": "a", "attrs": {"href": _bind_attr("transitionTo")}},
        },
    }
)

REACT_MAPPING = Mapping.model_validate(
    {
        "elements": _SEMANTIC_ELEMENTS,
        "events": {
            "click": "onClick",
            "change": "onChange",
            "submit": "onSubmit",
            "focus": "onFocus",
            "blur": "onBlur",
            "mouseover": "onMouseOver",
            "mouseout": "onMouseOut",
            "keydown": "onKeyDown",
        },
        "attributes": {"class": "className", "for": "htmlFor", "tabindex": "tabIndex"},
    }
)

REACT_PROJECT_MAPPING = Mapping.model_validate(
    {
        "elements": {
            "navlink": {
                "elementType": "Link",
                "dependency": {
                    "type": "library",
                    "path": "react-router-dom",
                    "version": REACT_ROUTER_VERSION,
                    "meta": {"namedImport": True},
                },
                "attrs": {"to": _bind_attr("transitionTo")},
            },
        },
    }
)
