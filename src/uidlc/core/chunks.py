"""
Chunk store: the ordered set of chunks one component generation builds up.

Chunk names are unique per file type. Replacing a chunk keeps its original
insertion position so that linking stays stable for the same plugin list.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping

from .dependencies import DependencyAggregator
from .errors import MissingChunkError
from .ir import ChunkDefinition, ChunkType, FileType
from .linker import link_chunks
from .renderers import DEFAULT_RENDERERS, Renderer

logger = logging.getLogger(__name__)


class ChunkStore:
    def __init__(self, chunks: Iterable[ChunkDefinition] = ()):
        self._chunks: list[ChunkDefinition] = []
        for chunk in chunks:
            self.add_or_replace(chunk)

    def _index_of(self, name: str, file_type: FileType) -> int | None:
        for index, chunk in enumerate(self._chunks):
            if chunk.name == name and chunk.file_type == file_type:
                return index
        return None

    def add_or_replace(self, chunk: ChunkDefinition) -> None:
        index = self._index_of(chunk.name, chunk.file_type)
        if index is None:
            self._chunks.append(chunk)
        else:
            logger.debug("Replacing chunk '%s' (%s)", chunk.name, chunk.file_type.value)
            self._chunks[index] = chunk

    def remove(self, name: str, file_type: FileType | None = None) -> None:
        """
        Remove a chunk by name.

        Without ``file_type`` every chunk with that name is removed.

        Raises:
            MissingChunkError: If no chunk matches
        """
        remaining = [
            chunk
            for chunk in self._chunks
            if not (chunk.name == name and (file_type is None or chunk.file_type == file_type))
        ]
        if len(remaining) == len(self._chunks):
            raise MissingChunkError(name)
        self._chunks = remaining

    def get(
        self,
        name: str,
        file_type: FileType | None = None,
        chunk_type: ChunkType | None = None,
    ) -> ChunkDefinition | None:
        for chunk in self._chunks:
            if chunk.name != name:
                continue
            if file_type is not None and chunk.file_type != file_type:
                continue
            if chunk_type is not None and chunk.type != chunk_type:
                continue
            return chunk
        return None

    def require(
        self,
        name: str,
        file_type: FileType | None = None,
        chunk_type: ChunkType | None = None,
        requested_by: str | None = None,
    ) -> ChunkDefinition:
        """
        Get a chunk a plugin depends on.

        Raises:
            MissingChunkError: If the chunk is absent, naming the requester
        """
        chunk = self.get(name, file_type, chunk_type)
        if chunk is None:
            raise MissingChunkError(name, requested_by)
        return chunk

    def file_types(self) -> list[FileType]:
        """File types in order of first appearance."""
        seen: list[FileType] = []
        for chunk in self._chunks:
            if chunk.file_type not in seen:
                seen.append(chunk.file_type)
        return seen

    def for_file_type(self, file_type: FileType) -> list[ChunkDefinition]:
        return [chunk for chunk in self._chunks if chunk.file_type == file_type]

    def grouped(self) -> dict[FileType, list[ChunkDefinition]]:
        return {file_type: self.for_file_type(file_type) for file_type in self.file_types()}

    def __iter__(self) -> Iterator[ChunkDefinition]:
        return iter(list(self._chunks))

    def __len__(self) -> int:
        return len(self._chunks)

    def __contains__(self, name: object) -> bool:
        return any(chunk.name == name for chunk in self._chunks)

    def link_and_serialize(
        self,
        file_type: FileType,
        dependencies: DependencyAggregator | None = None,
        renderers: Mapping[ChunkType, Renderer] = DEFAULT_RENDERERS,
    ) -> str:
        """Order and render the chunks of one file type into text."""
        return link_chunks(self.for_file_type(file_type), dependencies, renderers)
