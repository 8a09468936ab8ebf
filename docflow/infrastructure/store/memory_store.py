"""
Adapter: In-Memory Record Store

Backing em memória para demo e testes. Perde tudo ao encerrar o processo.
"""

from docflow.core.interfaces.record_store import Record
from docflow.infrastructure.store.base import BaseRecordStore


class InMemoryRecordStore(BaseRecordStore):
    """Coleções guardadas num dict de listas."""

    def __init__(self, latency_ms: int = 0, seed: dict[str, list[Record]] | None = None):
        super().__init__(latency_ms=latency_ms, seed=seed)
        self._collections: dict[str, list[Record]] = {}

    def _load(self, collection: str) -> list[Record] | None:
        return self._collections.get(collection)

    def _save(self, collection: str, records: list[Record]) -> None:
        self._collections[collection] = records
