"""
Dependency aggregation for one generation call.

Records are keyed by the identifier emitted code refers to, so two plugins
that need the same import produce one import statement. The aggregator has
no notion of which plugin contributed an entry.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping

from .errors import DependencyConflictError
from .ir import DependencyRecord

logger = logging.getLogger(__name__)


def package_name(source: str) -> str:
    """
    Package a module specifier belongs to.

    Examples:
        >>> package_name("react-dom/client")
        'react-dom'
        >>> package_name("@scope/ui/button")
        '@scope/ui'
    """
    parts = source.split("/")
    if source.startswith("@"):
        return "/".join(parts[:2])
    return parts[0]


class DependencyAggregator:
    """
    Keyed, merge-on-write map of dependency records.

    - Merging an identical record is a no-op
    - Merging a record with the same source replaces the previous one
      (a version bump wins)
    - Merging a record whose source differs from the existing one raises
      :class:`DependencyConflictError`
    """

    def __init__(self, records: Mapping[str, DependencyRecord] | None = None):
        self._records: dict[str, DependencyRecord] = {}
        for identifier, record in (records or {}).items():
            self.merge(identifier, record)

    def merge(self, identifier: str, record: DependencyRecord) -> None:
        existing = self._records.get(identifier)
        if existing is not None:
            if existing.source != record.source:
                raise DependencyConflictError(identifier, existing.source, record.source)
            if existing == record:
                return
            logger.debug(
                "Dependency '%s' updated: %s -> %s", identifier, existing.version, record.version
            )
        self._records[identifier] = record

    def merge_all(self, records: Mapping[str, DependencyRecord]) -> None:
        for identifier, record in records.items():
            self.merge(identifier, record)

    def get(self, identifier: str) -> DependencyRecord | None:
        return self._records.get(identifier)

    def all(self) -> dict[str, DependencyRecord]:
        """Snapshot of the aggregated records."""
        return dict(self._records)

    def package_versions(self) -> dict[str, str]:
        """Published packages and their version constraints (package manifest shape)."""
        versions: dict[str, str] = {}
        for record in self._records.values():
            if record.is_published and record.version is not None:
                versions[package_name(record.source)] = record.version
        return versions

    def copy(self) -> DependencyAggregator:
        return DependencyAggregator(self._records)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._records

    def __iter__(self) -> Iterator[str]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DependencyAggregator):
            return NotImplemented
        return self._records == other._records

    def __repr__(self) -> str:
        return f"DependencyAggregator({self._records!r})"
