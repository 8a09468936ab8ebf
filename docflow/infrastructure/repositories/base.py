"""
Base repository — CRUD tipado sobre uma coleção do Record Store.
"""

import uuid
from typing import Callable, Generic, TypeVar

from docflow.core.exceptions import NotFound
from docflow.core.interfaces.record_store import IRecordStore, Record

E = TypeVar("E")


def new_id() -> str:
    return str(uuid.uuid4())


class EntityRepository(Generic[E]):
    """Common plumbing: load entities, append one, patch one by id."""

    collection: str = ""
    entity_name: str = ""

    def __init__(self, store: IRecordStore):
        self._store = store

    def _to_entity(self, record: Record) -> E:
        raise NotImplementedError

    async def _all(self) -> list[E]:
        return [self._to_entity(r) for r in await self._store.read(self.collection)]

    async def _find(self, predicate: Callable[[E], bool]) -> E | None:
        return next((e for e in await self._all() if predicate(e)), None)

    async def _append(self, entity: E, check: Callable[[list[E]], None] | None = None) -> E:
        """Append a record; `check` sees the current entities and may raise to abort."""
        def mutate(records: list[Record]):
            if check is not None:
                check([self._to_entity(r) for r in records])
            records.append(entity.to_record())
            return records, entity

        return await self._store.update(self.collection, mutate)

    async def _patch(self, entity_id: str, apply: Callable[[E], None]) -> E:
        """Load the entity with `entity_id`, mutate it with `apply` and store it back."""
        def mutate(records: list[Record]):
            index = next((i for i, r in enumerate(records) if r.get("id") == entity_id), None)
            if index is None:
                raise NotFound(self.entity_name, entity_id)
            entity = self._to_entity(records[index])
            apply(entity)
            records[index] = entity.to_record()
            return records, entity

        return await self._store.update(self.collection, mutate)

    async def _remove(self, entity_id: str) -> None:
        """Drop the record with `entity_id`; raises NotFound if absent."""
        def mutate(records: list[Record]):
            kept = [r for r in records if r.get("id") != entity_id]
            if len(kept) == len(records):
                raise NotFound(self.entity_name, entity_id)
            return kept, None

        await self._store.update(self.collection, mutate)
