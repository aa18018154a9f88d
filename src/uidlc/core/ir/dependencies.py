"""
Dependency record types for uidlc IR.

A dependency record describes one import a plugin wants to reference in
emitted code. Records are keyed by the local identifier they bind.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .uidl import DependencyKind, UIDLDependency


class ImportKind(str, Enum):
    """Shape of the import statement a record produces."""

    DEFAULT = "default"
    NAMED = "named"
    NAMESPACE = "namespace"
    SIDE_EFFECT = "side-effect"


@dataclass(frozen=True)
class DependencyRecord:
    """
    A resolved import/package reference.

    Attributes:
        source: Package name or relative path
        import_kind: Default, named, namespace or side-effect (path only)
        version: Version constraint, only meaningful for published packages
        original_name: Exported name when it differs from the local identifier
        kind: Library, package or local file
    """

    source: str
    import_kind: ImportKind = ImportKind.DEFAULT
    version: str | None = None
    original_name: str | None = None
    kind: DependencyKind = DependencyKind.LIBRARY

    @property
    def is_published(self) -> bool:
        """Whether the record contributes to the package manifest."""
        return self.kind != DependencyKind.LOCAL and self.version is not None

    @classmethod
    def from_uidl(cls, dependency: UIDLDependency) -> DependencyRecord:
        """Build a record from a UIDL element dependency."""
        meta = dependency.meta
        if meta.import_just_path:
            import_kind = ImportKind.SIDE_EFFECT
        elif meta.named_import:
            import_kind = ImportKind.NAMED
        else:
            import_kind = ImportKind.DEFAULT

        return cls(
            source=dependency.path,
            import_kind=import_kind,
            version=dependency.version,
            original_name=meta.original_name,
            kind=dependency.type,
        )
