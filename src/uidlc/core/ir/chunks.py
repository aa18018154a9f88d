"""
Chunk types for uidlc IR.

A chunk is one named, typed unit of partial output for one file. React
components usually have a single ``js`` chunk set; Vue-style components have
a template (``html``), a script (``js``) and a style (``css``) chunk set.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from ..errors import UnknownChunkFlagError
from .code import Program
from .dependencies import DependencyRecord
from .markup import HastElement


class FileType(str, Enum):
    """Target file kinds a chunk can contribute to."""

    CSS = "css"
    HTML = "html"
    JS = "js"
    JSON = "json"
    VUE = "vue"
    TS = "ts"
    TSX = "tsx"


class ChunkType(str, Enum):
    """Representation of a chunk's content."""

    STRING = "string"
    AST = "ast"
    HAST = "hast"


class ChunkFlag(str, Enum):
    """
    Recognised chunk annotations.

    IMPORT_ONLY: the chunk contributes its dependencies and emits no text
    LINKED_BUT_HIDDEN: the chunk takes part in ordering and emits no text
    """

    IMPORT_ONLY = "import-only"
    LINKED_BUT_HIDDEN = "linked-but-hidden"


ChunkContent = Union[str, Program, HastElement]


def parse_chunk_flags(
    flags: Iterable[ChunkFlag | str], chunk_name: str | None = None
) -> frozenset[ChunkFlag]:
    """Validate raw flag values, rejecting anything outside :class:`ChunkFlag`."""
    parsed: set[ChunkFlag] = set()
    for flag in flags:
        try:
            parsed.add(ChunkFlag(flag))
        except ValueError:
            raise UnknownChunkFlagError(str(flag), chunk_name) from None
    return frozenset(parsed)


@dataclass
class ChunkDefinition:
    """
    A named unit of generated output.

    Attributes:
        name: Unique within one file type of one file
        type: Representation of ``content``
        file_type: File kind this chunk is linked into
        content: Text, code tree or markup tree depending on ``type``
        link_after: Names of chunks that must precede this one
        meta: Recognised flags (see :class:`ChunkFlag`)
        dependencies: Records an import-only chunk contributes when linked
    """

    name: str
    type: ChunkType
    file_type: FileType
    content: ChunkContent
    link_after: list[str] = field(default_factory=list)
    meta: frozenset[ChunkFlag] = field(default_factory=frozenset)
    dependencies: dict[str, DependencyRecord] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.type = ChunkType(self.type)
        self.file_type = FileType(self.file_type)
        self.meta = parse_chunk_flags(self.meta, self.name)

    @property
    def emits_text(self) -> bool:
        return not (self.meta & {ChunkFlag.IMPORT_ONLY, ChunkFlag.LINKED_BUT_HIDDEN})

    @property
    def import_only(self) -> bool:
        return ChunkFlag.IMPORT_ONLY in self.meta
