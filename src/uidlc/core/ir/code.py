"""
Structured code tree nodes used by ``ast`` chunks.

A deliberately small ECMAScript/JSX subset: enough for import declarations,
a component function returning JSX, and verbatim statements for everything
else.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass
class ImportSpecifier:
    imported: str
    local: str | None = None


@dataclass
class ImportDeclaration:
    """
    ``import`` statement.

    With no default, namespace or named specifiers it renders as a
    side-effect import (``import './styles.css'``).
    """

    source: str
    default: str | None = None
    namespace: str | None = None
    named: list[ImportSpecifier] = field(default_factory=list)


@dataclass
class RawCode:
    code: str


@dataclass
class JSXText:
    value: str


@dataclass
class JSXExpression:
    """``{expression}`` inside JSX, or an attribute value bound to an expression."""

    expression: str


@dataclass
class JSXElement:
    tag_name: str
    attributes: dict[str, str | bool | JSXExpression] = field(default_factory=dict)
    children: list[JSXChild] = field(default_factory=list)


JSXChild = Union[JSXElement, JSXText, JSXExpression]


@dataclass
class ReturnStatement:
    argument: JSXElement | RawCode


@dataclass
class FunctionDeclaration:
    name: str
    params: list[str] = field(default_factory=list)
    body: list[Statement] = field(default_factory=list)


@dataclass
class ExportDefault:
    declaration: FunctionDeclaration | RawCode


Statement = Union[ImportDeclaration, FunctionDeclaration, ExportDefault, ReturnStatement, RawCode]


@dataclass
class Program:
    body: list[Statement] = field(default_factory=list)
