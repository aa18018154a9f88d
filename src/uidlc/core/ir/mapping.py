"""
Mapping table types for uidlc IR.

A mapping substitutes semantic element kinds with concrete target
primitives, optionally pulling in a library dependency and binding
attributes (e.g. ``navlink`` becomes react-router's ``Link`` with
``to`` bound to the original ``transitionTo`` attribute).
"""

from __future__ import annotations

from pydantic import Field

from .uidl import UIDLAttributeValue, UIDLDependency, UIDLModel


class ElementMapping(UIDLModel):
    element_type: str
    dependency: UIDLDependency | None = None
    attrs: dict[str, UIDLAttributeValue] = Field(default_factory=dict)


class Mapping(UIDLModel):
    """
    Element, event and attribute substitution rules.

    ``events`` and ``attributes`` rename event and attribute keys
    (``click`` -> ``onClick``, ``class`` -> ``className``).
    """

    elements: dict[str, ElementMapping] = Field(default_factory=dict)
    events: dict[str, str] = Field(default_factory=dict)
    attributes: dict[str, str] = Field(default_factory=dict)

    def merge(self, other: Mapping | None) -> Mapping:
        """Return a new mapping with ``other`` taking precedence per key."""
        if other is None:
            return self
        return Mapping(
            elements={**self.elements, **other.elements},
            events={**self.events, **other.events},
            attributes={**self.attributes, **other.attributes},
        )
