"""
Adapter: SQL Record Store

Record Store sobre SQLAlchemy. Cada escrita apaga e regrava as linhas
da coleção numa única transação, então nunca fica meio aplicada.
As chamadas ao banco rodam numa thread (`asyncio.to_thread`), uma por vez.
"""

import asyncio
import logging
import threading
from typing import Callable

from sqlalchemy import delete, select

from docflow.core.interfaces.record_store import Record, T
from docflow.infrastructure.db.database import (
    create_db_engine,
    create_session_factory,
    init_db,
    session_scope,
)
from docflow.infrastructure.db.models import RecordRow
from docflow.infrastructure.store.base import BaseRecordStore

logger = logging.getLogger(__name__)


class SqlRecordStore(BaseRecordStore):
    """Collections persisted as rows of the `records` table."""

    def __init__(
        self,
        database_url: str = "sqlite:///docflow.db",
        latency_ms: int = 0,
        seed: dict[str, list[Record]] | None = None,
    ):
        super().__init__(latency_ms=latency_ms, seed=seed)
        self._engine = create_db_engine(database_url)
        init_db(self._engine)
        self._factory = create_session_factory(self._engine)
        # sqlite em memória compartilha uma única conexão (StaticPool)
        self._db_lock = threading.Lock()

    async def _run(self, fn: Callable[..., T], *args) -> T:
        return await asyncio.to_thread(self._locked, fn, *args)

    def _locked(self, fn: Callable[..., T], *args) -> T:
        with self._db_lock:
            return fn(*args)

    def _load(self, collection: str) -> list[Record] | None:
        with session_scope(self._factory) as db:
            rows = db.scalars(
                select(RecordRow)
                .filter_by(collection=collection)
                .order_by(RecordRow.position)
            ).all()
            if not rows:
                return None
            return [row.payload for row in rows]

    def _save(self, collection: str, records: list[Record]) -> None:
        with session_scope(self._factory) as db:
            db.execute(delete(RecordRow).where(RecordRow.collection == collection))
            db.add_all(
                RecordRow(
                    collection=collection,
                    position=i,
                    record_id=record.get("id"),
                    payload=record,
                )
                for i, record in enumerate(records)
            )

    def dispose(self) -> None:
        self._engine.dispose()
