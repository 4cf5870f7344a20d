"""
In-memory lookup cache.

Translates between (lookup_type, value) pairs and the numeric lookup ids
stored as foreign keys by orders, quotes and users, without a database
round trip per request.

The cache holds a single immutable LookupSnapshot. initialize()/refresh()
build a complete new snapshot from the backing store and then swap the
reference, so a reader sees either the old or the new data, never a mix.
Reads grab the reference once and never lock.

clear_cache() drops the snapshot. The next read reloads it lazily from the
backing store (once, under the writer lock); if that reload fails the read
raises BackingStoreUnavailable. Reads before the first initialize() take
the same path.
"""
import logging
import threading
from dataclasses import dataclass
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Callable, Dict, Iterable, List, Mapping, Optional, Tuple

from .exceptions import LookupNotFound

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LookupHeaderRecord:
    id: int
    lookup_type: str
    description: str = ''


@dataclass(frozen=True)
class LookupEntry:
    id: int
    header_id: int
    lookup_type: str
    value: str
    display_order: int = 0


@dataclass(frozen=True)
class LookupEntryRecord:
    """Row shape returned by a loader; the type is resolved from header_id."""
    id: int
    header_id: int
    value: str
    display_order: int = 0


LoaderResult = Tuple[Iterable[LookupHeaderRecord], Iterable[LookupEntryRecord]]


@dataclass(frozen=True)
class LookupSnapshot:
    headers: Mapping[str, LookupHeaderRecord]
    headers_by_id: Mapping[int, LookupHeaderRecord]
    entries_by_type: Mapping[str, Tuple[LookupEntry, ...]]
    entries_by_id: Mapping[int, LookupEntry]
    ids_by_type_value: Mapping[Tuple[str, str], int]
    loaded_at: datetime

    @classmethod
    def build(cls, headers, entries) -> 'LookupSnapshot':
        """
        Build a snapshot from header and entry records.

        Entries of unknown (or inactive, hence not loaded) headers are dropped.
        Within a type, entries are ordered by display_order; ties keep the
        order the loader returned them in.
        """
        headers_by_type: Dict[str, LookupHeaderRecord] = {}
        headers_by_id: Dict[int, LookupHeaderRecord] = {}
        for header in headers:
            headers_by_type[header.lookup_type] = header
            headers_by_id[header.id] = header

        grouped: Dict[str, List[LookupEntry]] = {key: [] for key in headers_by_type}
        entries_by_id: Dict[int, LookupEntry] = {}
        ids_by_type_value: Dict[Tuple[str, str], int] = {}

        for record in entries:
            header = headers_by_id.get(record.header_id)
            if header is None:
                continue

            key = (header.lookup_type, record.value)
            if key in ids_by_type_value:
                logger.warning(
                    f"Duplicate lookup value {header.lookup_type}:{record.value} "
                    f"(ids {ids_by_type_value[key]} and {record.id}), keeping the first"
                )
                continue

            entry = LookupEntry(
                id=record.id,
                header_id=header.id,
                lookup_type=header.lookup_type,
                value=record.value,
                display_order=record.display_order,
            )
            grouped[header.lookup_type].append(entry)
            entries_by_id[entry.id] = entry
            ids_by_type_value[key] = entry.id

        entries_by_type = {
            lookup_type: tuple(sorted(values, key=lambda e: e.display_order))
            for lookup_type, values in grouped.items()
        }

        return cls(
            headers=MappingProxyType(headers_by_type),
            headers_by_id=MappingProxyType(headers_by_id),
            entries_by_type=MappingProxyType(entries_by_type),
            entries_by_id=MappingProxyType(entries_by_id),
            ids_by_type_value=MappingProxyType(ids_by_type_value),
            loaded_at=datetime.now(timezone.utc),
        )

    @property
    def entry_count(self) -> int:
        return len(self.entries_by_id)


class LookupCache:
    """
    Process-wide lookup translation table.

    Args:
        loader: callable returning ``(headers, entries)`` records from the
            backing store. It may raise BackingStoreUnavailable; the cache
            does not retry.
    """

    def __init__(self, loader: Callable[[], LoaderResult]):
        self._loader = loader
        self._snapshot: Optional[LookupSnapshot] = None
        self._write_lock = threading.Lock()

    def __deepcopy__(self, memo):
        # Serializer fields are deep-copied per serializer instance; they must share the cache
        return self

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def initialize(self) -> None:
        """Load all active headers and entries. Errors propagate to the caller."""
        logger.info("Initializing lookup cache...")
        snapshot = self._reload()
        logger.info(
            f"Lookup cache ready: {len(snapshot.headers)} types, "
            f"{snapshot.entry_count} values"
        )

    def refresh(self) -> None:
        """
        Re-read the backing store and swap in the new snapshot.

        On failure the previous snapshot stays in place and the error is raised.
        """
        snapshot = self._reload()
        logger.info(f"Lookup cache refreshed with {snapshot.entry_count} values")

    def clear_cache(self) -> None:
        """Drop the snapshot; the next read reloads it."""
        with self._write_lock:
            self._snapshot = None
        logger.info("Lookup cache cleared")

    def _reload(self) -> LookupSnapshot:
        with self._write_lock:
            try:
                headers, entries = self._loader()
            except Exception as e:
                logger.error(f"Failed to load lookups: {e}")
                raise
            snapshot = LookupSnapshot.build(headers, entries)
            self._snapshot = snapshot
            return snapshot

    def _current(self) -> LookupSnapshot:
        snapshot = self._snapshot
        if snapshot is not None:
            return snapshot

        with self._write_lock:
            # Another thread may have loaded while we waited
            if self._snapshot is None:
                logger.info("Lookup cache empty, loading from database")
                headers, entries = self._loader()
                self._snapshot = LookupSnapshot.build(headers, entries)
            return self._snapshot

    @property
    def is_initialized(self) -> bool:
        return self._snapshot is not None

    @property
    def last_refreshed(self) -> Optional[datetime]:
        snapshot = self._snapshot
        return snapshot.loaded_at if snapshot else None

    def stats(self) -> dict:
        """Counts for the admin status endpoint. Does not trigger a reload."""
        snapshot = self._snapshot
        if snapshot is None:
            return {'initialized': False, 'types': 0, 'values': 0, 'last_refreshed': None}
        return {
            'initialized': True,
            'types': len(snapshot.headers),
            'values': snapshot.entry_count,
            'last_refreshed': snapshot.loaded_at.isoformat(),
        }

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def get_lookup_id(self, lookup_type: str, value: str) -> int:
        """
        Get the lookup id for a type and value.

        Raises:
            LookupNotFound: the pair is not cached
        """
        lookup_id = self._current().ids_by_type_value.get((lookup_type, value))
        if lookup_id is None:
            raise LookupNotFound(
                f"Lookup not found: {lookup_type}:{value}",
                lookup_type=lookup_type,
                value=value,
            )
        return lookup_id

    def get_lookup_value(self, lookup_id: int) -> str:
        """
        Get the value string for a lookup id.

        Raises:
            LookupNotFound: the id is not cached
        """
        return self.get_entry(lookup_id).value

    def get_entry(self, lookup_id: int) -> LookupEntry:
        entry = self._current().entries_by_id.get(lookup_id)
        if entry is None:
            raise LookupNotFound(f"Lookup id not found: {lookup_id}", lookup_id=lookup_id)
        return entry

    def get_entries(self, lookup_type: str) -> Tuple[LookupEntry, ...]:
        return self._current().entries_by_type.get(lookup_type, ())

    def get_lookup_values(self, lookup_type: str) -> List[str]:
        """Values of a type in display order; empty for an unknown type."""
        return [entry.value for entry in self.get_entries(lookup_type)]

    def get_lookup_ids(self, lookup_type: str) -> List[Tuple[str, int]]:
        """(value, id) pairs of a type in display order."""
        return [(entry.value, entry.id) for entry in self.get_entries(lookup_type)]

    def is_valid_lookup(self, lookup_type: str, value: str) -> bool:
        """Membership test. Never raises; a failed reload counts as invalid."""
        try:
            snapshot = self._current()
        except Exception as e:
            logger.error(f"Lookup validation for {lookup_type}:{value} failed: {e}")
            return False
        return (lookup_type, value) in snapshot.ids_by_type_value

    def get_lookup_types(self) -> frozenset:
        return frozenset(self._current().headers)

    def get_header(self, lookup_type: str) -> Optional[LookupHeaderRecord]:
        return self._current().headers.get(lookup_type)

    def get_header_by_id(self, header_id: int) -> Optional[LookupHeaderRecord]:
        return self._current().headers_by_id.get(header_id)

    def get_headers(self) -> List[LookupHeaderRecord]:
        """Headers ordered by type key."""
        headers = self._current().headers
        return [headers[key] for key in sorted(headers)]

    def resolve_lookup_id(self, lookup_type: str, value: str, fallback_type: Optional[str] = None) -> int:
        """
        Resolve a value against a primary type, then an optional fallback type.

        Quotes accept legacy order_type values where service_type is expected.
        """
        snapshot = self._current()
        lookup_id = snapshot.ids_by_type_value.get((lookup_type, value))
        if lookup_id is None and fallback_type:
            lookup_id = snapshot.ids_by_type_value.get((fallback_type, value))
        if lookup_id is None:
            types = f"{lookup_type}/{fallback_type}" if fallback_type else lookup_type
            raise LookupNotFound(
                f"Lookup not found: {types}:{value}",
                lookup_type=lookup_type,
                value=value,
            )
        return lookup_id

    def resolve_lookup_ids(self, lookup_type: str, values: Iterable[str]) -> List[int]:
        """Translate several values of one type, preserving their order."""
        snapshot = self._current()
        ids = []
        for value in values:
            lookup_id = snapshot.ids_by_type_value.get((lookup_type, value))
            if lookup_id is None:
                raise LookupNotFound(
                    f"Lookup not found: {lookup_type}:{value}",
                    lookup_type=lookup_type,
                    value=value,
                )
            ids.append(lookup_id)
        return ids
