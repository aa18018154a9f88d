"""
Markup tree nodes (HTML-like abstract syntax tree) used by ``hast`` chunks.

The builders mirror the handful of operations plugins need: create a node,
append children, attach text and set attributes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass
class HastText:
    """Text content; escaped when rendered."""

    value: str


@dataclass
class HastRaw:
    """Markup emitted verbatim (custom head/body code)."""

    value: str


@dataclass
class HastElement:
    tag_name: str
    properties: dict[str, str | bool] = field(default_factory=dict)
    children: list[HastChild] = field(default_factory=list)


HastChild = Union[HastElement, HastText, HastRaw]


def create_html_node(tag_name: str, children: list[HastChild] | None = None) -> HastElement:
    return HastElement(tag_name=tag_name, children=list(children or []))


def add_child_node(node: HastElement, child: HastChild) -> None:
    node.children.append(child)


def add_text_node(node: HastElement, text: str) -> None:
    node.children.append(HastText(value=text))


def add_raw_node(node: HastElement, markup: str) -> None:
    node.children.append(HastRaw(value=markup))


def add_attribute_to_node(node: HastElement, key: str, value: str) -> None:
    node.properties[key] = value


def add_boolean_attribute_to_node(node: HastElement, key: str) -> None:
    node.properties[key] = True
