"""
Async in-memory repository base. One instance per resource, owned by the app.
Production: swap for a MongoDB-backed implementation with the same method names.
"""

import asyncio
import copy
import itertools
import os
import time
from collections.abc import Callable
from typing import Any, ClassVar

from core.exceptions import ConflictException, IdNotFoundException
from models.schemas import Pagination
from utils.validators import SortSpec

Record = dict[str, Any]

_PROCESS_TOKEN = os.urandom(5)
_counter = itertools.count(int.from_bytes(os.urandom(3), "big"))


def new_object_id() -> str:
    """
    24-hex id: 4-byte creation time, 5 bytes unique to this process, 3-byte counter.
    Ids created later sort after earlier ones within a second's resolution.
    """
    timestamp = int(time.time()).to_bytes(4, "big")
    counter = (next(_counter) & 0xFFFFFF).to_bytes(3, "big")
    return (timestamp + _PROCESS_TOKEN + counter).hex()


def _sort_value(value: Any) -> Any:
    # strings compare case-insensitively
    return value.casefold() if isinstance(value, str) else value


class InMemoryRepository:
    """
    Dict-of-records store guarded by an asyncio.Lock.
    Every read returns deep copies so callers can't mutate stored state.
    """

    resource_name: ClassVar[str] = "Record"
    unique_fields: ClassVar[tuple[str, ...]] = ()
    sort_keys: ClassVar[dict[str, Callable[[Record], Any]]] = {}

    def __init__(self) -> None:
        self._records: dict[str, Record] = {}
        self._lock = asyncio.Lock()

    @classmethod
    def sortable_fields(cls) -> frozenset[str]:
        return frozenset(cls.sort_keys)

    def _sorted(self, records: list[Record], sort: SortSpec) -> list[Record]:
        """Order by the sort field; records missing that field go last in both directions."""
        key = self.sort_keys[sort.field]
        present = [r for r in records if key(r) is not None]
        missing = [r for r in records if key(r) is None]
        present.sort(key=lambda r: _sort_value(key(r)), reverse=sort.descending)
        return present + missing

    def _not_found(self, record_id: str) -> IdNotFoundException:
        return IdNotFoundException(f"{self.resource_name} with id {record_id} not found")

    def _check_unique(self, data: Record, exclude_id: str | None = None) -> None:
        for field in self.unique_fields:
            value = data.get(field)
            if value is None:
                continue
            for record_id, record in self._records.items():
                if record_id != exclude_id and record.get(field) == value:
                    raise ConflictException(f"{self.resource_name} with {field} {value!r} already exists")

    async def insert(self, data: Record) -> Record:
        async with self._lock:
            self._check_unique(data)
            record = {**copy.deepcopy(data), "id": new_object_id()}
            self._records[record["id"]] = record
            return copy.deepcopy(record)

    async def get(self, record_id: str) -> Record:
        async with self._lock:
            record = self._records.get(record_id)
            if record is None:
                raise self._not_found(record_id)
            return copy.deepcopy(record)

    async def find_one(self, **criteria: Any) -> Record | None:
        async with self._lock:
            for record in self._records.values():
                if all(record.get(k) == v for k, v in criteria.items()):
                    return copy.deepcopy(record)
            return None

    async def find_all(self, pagination: Pagination, sort: SortSpec | None = None) -> list[Record]:
        async with self._lock:
            records = list(self._records.values())
            if sort is not None:
                records = self._sorted(records, sort)
            window = records[pagination.offset : pagination.offset + pagination.size]
            return copy.deepcopy(window)

    async def update(self, record_id: str, changes: Record) -> Record:
        """Merge changes into the stored record. The id is never overwritten."""
        changes = {k: v for k, v in changes.items() if k != "id"}
        async with self._lock:
            record = self._records.get(record_id)
            if record is None:
                raise self._not_found(record_id)
            self._check_unique(changes, exclude_id=record_id)
            record.update(copy.deepcopy(changes))
            return copy.deepcopy(record)

    async def apply(self, record_id: str, mutate: Callable[[Record], None]) -> Record:
        """Run mutate on the stored record in place, under the lock."""
        async with self._lock:
            record = self._records.get(record_id)
            if record is None:
                raise self._not_found(record_id)
            mutate(record)
            return copy.deepcopy(record)

    async def delete(self, record_id: str) -> None:
        async with self._lock:
            if self._records.pop(record_id, None) is None:
                raise self._not_found(record_id)

    async def count(self) -> int:
        async with self._lock:
            return len(self._records)
