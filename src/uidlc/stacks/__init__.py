"""
Stack registry for uidlc.

A stack is a named project strategy. Built-in stacks (``html``, ``react``)
are registered on first access to the global registry; more can be added
with :func:`register_stack`.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from ..core.errors import ConfigurationError
from ..project import ProjectGenerator, ProjectStrategy

StrategyFactory = Callable[[], ProjectStrategy]


@dataclass(frozen=True)
class StackInfo:
    """
    Describes a registered stack.

    Used for introspection and CLI help text.
    """

    name: str
    description: str
    factory: StrategyFactory


class StackRegistry:
    """
    Registry of project strategies by stack name.

    Supports:
    - Manual registration via register()
    - Lookup by name
    """

    def __init__(self) -> None:
        self._stacks: dict[str, StackInfo] = {}

    def register(self, name: str, factory: StrategyFactory, description: str = "") -> None:
        """
        Register a strategy factory.

        Raises:
            ConfigurationError: If the name is already registered
        """
        if name in self._stacks:
            raise ConfigurationError(f"Stack '{name}' is already registered")
        self._stacks[name] = StackInfo(name=name, description=description, factory=factory)

    def get(self, name: str) -> ProjectStrategy:
        """
        Build the strategy of a stack.

        Raises:
            ConfigurationError: If the stack is not registered
        """
        if name not in self._stacks:
            available = ", ".join(self._stacks) or "none"
            raise ConfigurationError(f"Stack '{name}' not found. Available stacks: {available}")
        return self._stacks[name].factory()

    def list_stacks(self) -> list[StackInfo]:
        return list(self._stacks.values())

    def __contains__(self, name: object) -> bool:
        return name in self._stacks


def _register_builtin_stacks(registry: StackRegistry) -> None:
    from .html import create_html_strategy
    from .react import create_react_strategy

    registry.register("html", create_html_strategy, "Static HTML pages with a shared stylesheet")
    registry.register("react", create_react_strategy, "React single-page app with react-router")


# Global registry instance
_registry: StackRegistry | None = None


def get_registry() -> StackRegistry:
    """Get the global stack registry, registering the built-in stacks on first call."""
    global _registry
    if _registry is None:
        _registry = StackRegistry()
        _register_builtin_stacks(_registry)
    return _registry


def register_stack(name: str, factory: StrategyFactory, description: str = "") -> None:
    get_registry().register(name, factory, description)


def get_strategy(name: str) -> ProjectStrategy:
    return get_registry().get(name)


def create_project_generator(stack: str, **kwargs) -> ProjectGenerator:
    """Project generator for a registered stack."""
    return ProjectGenerator(strategy=get_strategy(stack), **kwargs)


__all__ = [
    "StackInfo",
    "StackRegistry",
    "create_project_generator",
    "get_registry",
    "get_strategy",
    "register_stack",
]
