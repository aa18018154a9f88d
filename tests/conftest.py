"""Shared pytest fixtures for uidlc tests."""

from __future__ import annotations

from typing import Any

import pytest


def element(element_type: str, *children: dict, **fields: Any) -> dict:
    """Build an element node in UIDL JSON shape."""
    return {
        "type": "element",
        "content": {"elementType": element_type, "children": list(children), **fields},
    }


def static(content: Any) -> dict:
    return {"type": "static", "content": content}


@pytest.fixture
def greeting_uidl() -> dict:
    """Return a component with one container holding a text."""
    return {"name": "Greeting", "node": element("container", static("Hello"))}


@pytest.fixture
def navigation_uidl() -> dict:
    """Return a component with a single navigation link."""
    return {
        "name": "Navigation",
        "node": element(
            "container",
            element("navlink", static("About"), attrs={"transitionTo": static("/about")}),
        ),
    }


@pytest.fixture
def shop_project() -> dict:
    """
    Return a project with two pages sharing one component.

    ``home`` is the default page; ``sale`` sits one folder deeper.
    """
    product_card = element("ProductCard", dependency={"type": "local"})
    return {
        "name": "Shop",
        "root": {
            "name": "App",
            "node": element("container"),
            "styleSetDefinitions": {
                "primaryButton": {"content": {"backgroundColor": "red"}},
            },
            "designLanguage": {"tokens": {"primaryColor": "#336699"}},
        },
        "pages": {
            "home": {
                "name": "Home",
                "pageOptions": {"default": True},
                "node": element("container", product_card),
            },
            "sale": {
                "name": "Sale",
                "outputOptions": {"folderPath": ["deals"]},
                "node": element("container", product_card),
            },
        },
        "components": {
            "ProductCard": {
                "name": "ProductCard",
                "node": element("container", static("Card")),
            },
        },
    }
