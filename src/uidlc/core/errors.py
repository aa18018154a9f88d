"""
Error types for uidlc chunk linking, plugin execution and project generation.

Every fault is terminal for the generation call that raised it. Nothing in the
core catches these to patch around an inconsistency.
"""

from __future__ import annotations

from collections.abc import Iterable


class UidlcError(Exception):
    """Base exception for all uidlc errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ConfigurationError(UidlcError):
    """
    Raised when a generator, strategy or plugin list is misconfigured.

    Examples:
    - A plugin expects a chunk that no earlier plugin produced
    - Chunks declare a cyclic ``link_after`` relation
    - Two dependencies share an identifier but point at different sources
    - A strategy section has no generator
    """

    pass


class MissingChunkError(ConfigurationError):
    """Raised when a required chunk is absent from the chunk store."""

    def __init__(self, chunk_name: str, requested_by: str | None = None):
        self.chunk_name = chunk_name
        self.requested_by = requested_by
        where = f" (required by '{requested_by}')" if requested_by else ""
        super().__init__(f"Chunk '{chunk_name}' is missing{where}")


class UnresolvedChunkReferenceError(ConfigurationError):
    """Raised when ``link_after`` names a chunk outside the file-type scope."""

    def __init__(self, chunk_name: str, missing: Iterable[str]):
        self.chunk_name = chunk_name
        self.missing = sorted(missing)
        super().__init__(
            f"Chunk '{chunk_name}' must link after unknown chunk(s): {', '.join(self.missing)}"
        )


class ChunkCycleError(ConfigurationError):
    """Raised when chunks declare a circular ``link_after`` relation."""

    def __init__(self, chunk_names: Iterable[str]):
        self.chunk_names = list(chunk_names)
        super().__init__(
            f"Circular link_after relation between chunks: {', '.join(self.chunk_names)}"
        )


class DependencyConflictError(ConfigurationError):
    """Raised when one import identifier is bound to two different sources."""

    def __init__(self, identifier: str, existing_source: str, incoming_source: str):
        self.identifier = identifier
        self.existing_source = existing_source
        self.incoming_source = incoming_source
        super().__init__(
            f"Ambiguous import '{identifier}': already bound to '{existing_source}', "
            f"cannot rebind to '{incoming_source}'"
        )


class FileCollisionError(ConfigurationError):
    """Raised when two generated outputs would be written to the same path."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Generated file '{path}' would overwrite a file generated earlier")


class UndefinedGeneratorError(ConfigurationError):
    """Raised when a strategy section is used without a generator."""

    def __init__(self, section: str):
        self.section = section
        super().__init__(f"Strategy section '{section}' does not define a generator")


class UnknownChunkFlagError(ConfigurationError):
    """Raised when a chunk carries a meta flag the linker does not know."""

    def __init__(self, flag: str, chunk_name: str | None = None):
        self.flag = flag
        self.chunk_name = chunk_name
        where = f" on chunk '{chunk_name}'" if chunk_name else ""
        super().__init__(f"Unknown chunk flag '{flag}'{where}")


class InvalidOptionsError(ConfigurationError):
    """Raised when generator options fail validation at the orchestrator boundary."""

    pass


class RepresentationError(UidlcError):
    """Raised when a chunk's content does not match its declared representation."""

    def __init__(self, chunk_name: str, representation: str, found: str):
        self.chunk_name = chunk_name
        self.representation = representation
        super().__init__(
            f"Chunk '{chunk_name}' is declared as '{representation}' but holds {found}"
        )


class PluginError(UidlcError):
    """
    Raised by a plugin when its own precondition fails.

    The pipeline propagates it unchanged.
    """

    def __init__(self, plugin_name: str, message: str):
        self.plugin_name = plugin_name
        super().__init__(f"{plugin_name}: {message}")
