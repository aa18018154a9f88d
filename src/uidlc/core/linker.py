"""
Chunk linker: turns a finished chunk set into file text.

For each file type:
1. Check every ``link_after`` reference resolves inside the same file type
2. Order chunks with a topological sort, ties broken by insertion order
3. Fail on cycles, naming the chunks involved
4. Contribute import-only chunks to the dependency aggregator
5. Render the remaining chunks and concatenate them with newlines
"""

from __future__ import annotations

import heapq
import logging
from collections.abc import Iterable, Mapping, Sequence

from .dependencies import DependencyAggregator
from .errors import ChunkCycleError, ConfigurationError, UnresolvedChunkReferenceError
from .ir import ChunkDefinition, ChunkType, FileType
from .renderers import DEFAULT_RENDERERS, Renderer, render_content

logger = logging.getLogger(__name__)

CHUNK_SEPARATOR = "\n"


def order_chunks(chunks: Sequence[ChunkDefinition]) -> list[ChunkDefinition]:
    """
    Resolve ``link_after`` constraints of one file type into a total order.

    Uses Kahn's algorithm with a min-heap on insertion index, so chunks
    without a relation to each other keep the order they were added in.

    Raises:
        ConfigurationError: On duplicate names in the set
        UnresolvedChunkReferenceError: If a constraint names an unknown chunk
        ChunkCycleError: If constraints are circular
    """
    index_of: dict[str, int] = {}
    for index, chunk in enumerate(chunks):
        if chunk.name in index_of:
            raise ConfigurationError(
                f"Duplicate chunk name '{chunk.name}' for file type '{chunk.file_type.value}'"
            )
        index_of[chunk.name] = index

    # dependents[X] = chunks that must come after X
    dependents: dict[str, list[str]] = {chunk.name: [] for chunk in chunks}
    in_degree: dict[str, int] = {}
    for chunk in chunks:
        predecessors = set(chunk.link_after)
        missing = predecessors - index_of.keys()
        if missing:
            raise UnresolvedChunkReferenceError(chunk.name, missing)
        in_degree[chunk.name] = len(predecessors)
        for predecessor in predecessors:
            dependents[predecessor].append(chunk.name)

    ready = [index_of[name] for name, degree in in_degree.items() if degree == 0]
    heapq.heapify(ready)
    ordered: list[ChunkDefinition] = []

    while ready:
        chunk = chunks[heapq.heappop(ready)]
        ordered.append(chunk)
        for dependent in dependents[chunk.name]:
            in_degree[dependent] -= 1
            if in_degree[dependent] == 0:
                heapq.heappush(ready, index_of[dependent])

    if len(ordered) != len(chunks):
        placed = {chunk.name for chunk in ordered}
        unprocessed = [chunk.name for chunk in chunks if chunk.name not in placed]
        raise ChunkCycleError(unprocessed)

    return ordered


def _render_file(
    chunks: Sequence[ChunkDefinition], renderers: Mapping[ChunkType, Renderer]
) -> tuple[str, list[ChunkDefinition]]:
    """Render one file type; returns the text and its import-only chunks, unmerged."""
    file_types = {chunk.file_type for chunk in chunks}
    if len(file_types) > 1:
        raise ConfigurationError(
            "Cannot link chunks of different file types together: "
            + ", ".join(sorted(file_type.value for file_type in file_types))
        )

    ordered = order_chunks(chunks)
    logger.debug("Linked order: %s", [chunk.name for chunk in ordered])

    parts: list[str] = []
    import_only: list[ChunkDefinition] = []
    for chunk in ordered:
        if chunk.import_only:
            import_only.append(chunk)
            continue
        if not chunk.emits_text:
            continue
        parts.append(render_content(chunk.name, chunk.type, chunk.content, renderers))

    return CHUNK_SEPARATOR.join(parts), import_only


def _merge_imports(
    dependencies: DependencyAggregator | None, import_only: Iterable[ChunkDefinition]
) -> None:
    if dependencies is None:
        return
    for chunk in import_only:
        dependencies.merge_all(chunk.dependencies)


def link_chunks(
    chunks: Sequence[ChunkDefinition],
    dependencies: DependencyAggregator | None = None,
    renderers: Mapping[ChunkType, Renderer] = DEFAULT_RENDERERS,
) -> str:
    """
    Link the chunks of a single file type into text.

    The whole set is ordered and rendered before anything is returned or
    merged into ``dependencies``, so a fault never yields partial output.
    """
    text, import_only = _render_file(chunks, renderers)
    _merge_imports(dependencies, import_only)
    return text


def link_code_chunks(
    chunks: Iterable[ChunkDefinition],
    dependencies: DependencyAggregator | None = None,
    renderers: Mapping[ChunkType, Renderer] = DEFAULT_RENDERERS,
) -> dict[FileType, str]:
    """
    Link a mixed chunk set into one text per file type.

    Every file type is rendered before import-only records are merged.
    """
    grouped: dict[FileType, list[ChunkDefinition]] = {}
    for chunk in chunks:
        grouped.setdefault(chunk.file_type, []).append(chunk)

    linked: dict[FileType, str] = {}
    import_only: list[ChunkDefinition] = []
    for file_type, file_chunks in grouped.items():
        linked[file_type], file_imports = _render_file(file_chunks, renderers)
        import_only.extend(file_imports)
    _merge_imports(dependencies, import_only)
    return linked
