"""
Base Record Store — latência simulada, lock por coleção e seed inicial.

Subclasses só implementam `_load` / `_save` (sem latência, sem lock).
Backings bloqueantes sobrescrevem `_run` para sair do event loop.
"""

import asyncio
import copy
import logging
from abc import abstractmethod
from typing import Callable

from docflow.core.interfaces.record_store import Collections, IRecordStore, Record, T

logger = logging.getLogger(__name__)


class BaseRecordStore(IRecordStore):
    """
    Implementação comum a todos os backings.

    Args:
        latency_ms: Atraso simulado de escrita. Leituras levam metade.
            0 desliga o atraso (builds de produção, testes).
        seed: Registros usados no primeiro acesso se a coleção de
            usuários estiver ausente/vazia. Todas as coleções do seed
            são gravadas.
    """

    def __init__(self, latency_ms: int = 0, seed: dict[str, list[Record]] | None = None):
        self._write_delay = max(latency_ms, 0) / 1000
        self._read_delay = self._write_delay / 2
        self._seed = seed or {}
        self._seeded = False
        self._seed_lock = asyncio.Lock()
        self._locks: dict[str, asyncio.Lock] = {}

    # ── Backing ──

    @abstractmethod
    def _load(self, collection: str) -> list[Record] | None:
        """Lê a coleção do backing; None se nunca foi gravada."""
        ...

    @abstractmethod
    def _save(self, collection: str, records: list[Record]) -> None:
        """Grava a coleção inteira no backing."""
        ...

    # ── Contract ──

    async def read(self, collection: str) -> list[Record]:
        await self._ensure_seeded()
        await self._delay(self._read_delay)
        async with self._lock(collection):
            records = await self._run(self._load, collection) or []
        logger.debug(f"read {collection}: {len(records)} records")
        return copy.deepcopy(records)

    async def write(self, collection: str, records: list[Record]) -> None:
        await self._ensure_seeded()
        await self._delay(self._write_delay)
        async with self._lock(collection):
            await self._run(self._save, collection, copy.deepcopy(records))
        logger.debug(f"wrote {collection}: {len(records)} records")

    async def update(
        self,
        collection: str,
        mutate: Callable[[list[Record]], tuple[list[Record], T]],
    ) -> T:
        await self._ensure_seeded()
        await self._delay(self._write_delay)
        async with self._lock(collection):
            current = copy.deepcopy(await self._run(self._load, collection) or [])
            records, result = mutate(current)
            await self._run(self._save, collection, copy.deepcopy(records))
        logger.debug(f"updated {collection}: {len(records)} records")
        return result

    # ── Internals ──

    def _lock(self, collection: str) -> asyncio.Lock:
        if collection not in self._locks:
            self._locks[collection] = asyncio.Lock()
        return self._locks[collection]

    async def _run(self, fn: Callable[..., T], *args) -> T:
        """Executa uma chamada do backing; por padrão, no próprio loop."""
        return fn(*args)

    @staticmethod
    async def _delay(seconds: float) -> None:
        if seconds > 0:
            await asyncio.sleep(seconds)

    async def _ensure_seeded(self) -> None:
        if self._seeded:
            return
        async with self._seed_lock:
            if self._seeded:
                return
            if not await self._run(self._load, Collections.USERS) and self._seed:
                for collection, records in self._seed.items():
                    await self._run(self._save, collection, copy.deepcopy(records))
                logger.info(f"Record store seeded: {', '.join(self._seed)}")
            self._seeded = True
