"""
Import statements plugin.

Turns the aggregated dependencies into three ``ast`` chunks, linked in
order: ``import-lib`` (libraries), ``import-pack`` (packages) and
``import-local`` (project files). Identifiers imported from the same source
share one declaration. A group with nothing to import is still added, marked
``linked-but-hidden``, so other chunks can always link after it.
"""

from __future__ import annotations

import logging

from ..core.ir import (
    ChunkDefinition,
    ChunkFlag,
    ChunkType,
    DependencyKind,
    DependencyRecord,
    FileType,
    ImportDeclaration,
    ImportKind,
    ImportSpecifier,
    Program,
)
from ..core.pipeline import ComponentStructure

logger = logging.getLogger(__name__)

IMPORT_LIB_CHUNK = "import-lib"
IMPORT_PACK_CHUNK = "import-pack"
IMPORT_LOCAL_CHUNK = "import-local"
IMPORT_CHUNKS = (IMPORT_LIB_CHUNK, IMPORT_PACK_CHUNK, IMPORT_LOCAL_CHUNK)

HIDDEN = frozenset({ChunkFlag.LINKED_BUT_HIDDEN})

_CHUNK_FOR_KIND = {
    DependencyKind.LIBRARY: IMPORT_LIB_CHUNK,
    DependencyKind.PACKAGE: IMPORT_PACK_CHUNK,
    DependencyKind.LOCAL: IMPORT_LOCAL_CHUNK,
}


def build_import_declarations(records: dict[str, DependencyRecord]) -> list[ImportDeclaration]:
    """Group records by source into import declarations, in first-seen order."""
    declarations: dict[str, ImportDeclaration] = {}
    for identifier, record in records.items():
        declaration = declarations.setdefault(
            record.source, ImportDeclaration(source=record.source)
        )
        if record.import_kind == ImportKind.DEFAULT:
            declaration.default = identifier
        elif record.import_kind == ImportKind.NAMESPACE:
            declaration.namespace = identifier
        elif record.import_kind == ImportKind.NAMED:
            declaration.named.append(
                ImportSpecifier(imported=record.original_name or identifier, local=identifier)
            )
    return list(declarations.values())


def create_import_plugin(file_type: FileType = FileType.JS):
    """Create the import statements plugin for script files of ``file_type``."""

    def import_statements(structure: ComponentStructure) -> ComponentStructure:
        grouped: dict[str, dict[str, DependencyRecord]] = {name: {} for name in IMPORT_CHUNKS}
        for identifier, record in structure.dependencies.all().items():
            grouped[_CHUNK_FOR_KIND[record.kind]][identifier] = record

        previous: str | None = None
        for chunk_name in IMPORT_CHUNKS:
            declarations = build_import_declarations(grouped[chunk_name])
            logger.debug("%s: %d import declaration(s)", chunk_name, len(declarations))
            structure.chunks.add_or_replace(
                ChunkDefinition(
                    name=chunk_name,
                    type=ChunkType.AST,
                    file_type=file_type,
                    content=Program(body=list(declarations)),
                    link_after=[previous] if previous else [],
                    meta=frozenset() if declarations else HIDDEN,
                )
            )
            previous = chunk_name
        return structure

    import_statements.__name__ = "import-statements"
    return import_statements
