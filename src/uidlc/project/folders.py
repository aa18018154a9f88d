"""
Folder tree assembly for project generation.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from ..core.errors import FileCollisionError
from ..core.ir import GeneratedFile, GeneratedFolder

logger = logging.getLogger(__name__)


def get_folder_at_path(root: GeneratedFolder, path: Sequence[str]) -> GeneratedFolder:
    """Return the folder at ``path`` below ``root``, creating missing folders."""
    folder = root
    for segment in path:
        if segment:
            folder = folder.get_or_create_sub_folder(segment)
    return folder


def inject_files_to_path(
    root: GeneratedFolder,
    path: Sequence[str],
    files: Iterable[GeneratedFile],
    generated: set[str] | None = None,
) -> None:
    """
    Place files in the folder at ``path``.

    A file with the same name and type as an existing one (e.g. from the
    template) replaces it in place. When ``generated`` is given it holds the
    paths already produced in this run: landing on one of them raises
    FileCollisionError, and every placed path is added to it.
    """
    folder = get_folder_at_path(root, path)
    for file in files:
        location = "/".join([*(segment for segment in path if segment), file.full_name])
        if generated is not None:
            if location in generated:
                raise FileCollisionError(location)
            generated.add(location)
        existing = folder.find_file(file.name, file.file_type)
        if existing is None:
            folder.files.append(file)
        else:
            folder.files[folder.files.index(existing)] = file
        logger.debug("Placed %s", location)
