"""
Record Store factory — escolhe o backing a partir das Settings.
"""

import logging

from docflow.config.settings import Settings
from docflow.core.entities.user import User, UserRole
from docflow.core.interfaces.record_store import Collections, IRecordStore, Record
from docflow.infrastructure.store.json_store import JsonFileRecordStore
from docflow.infrastructure.store.memory_store import InMemoryRecordStore

logger = logging.getLogger(__name__)

BACKENDS = ("memory", "json", "sql")


def build_seed(settings: Settings) -> dict[str, list[Record]]:
    """Admin único + coleções vazias."""
    admin = User(
        id=settings.admin_id,
        name=settings.admin_name,
        email=settings.admin_email,
        role=UserRole.ADMIN,
    )
    return {
        Collections.USERS: [admin.to_record()],
        Collections.COMPANIES: [],
        Collections.DOCUMENTS: [],
        Collections.MODERATION_LOG: [],
    }


def create_record_store(settings: Settings) -> IRecordStore:
    """Instancia o Record Store configurado em `settings.store_backend`."""
    backend = settings.store_backend.lower()
    seed = build_seed(settings)
    latency = settings.store_latency_ms

    if backend == "memory":
        store = InMemoryRecordStore(latency_ms=latency, seed=seed)
    elif backend == "json":
        store = JsonFileRecordStore(settings.data_dir, latency_ms=latency, seed=seed)
    elif backend == "sql":
        # só importa SQLAlchemy quando o backing SQL é pedido
        from docflow.infrastructure.db.record_store import SqlRecordStore
        store = SqlRecordStore(settings.database_url, latency_ms=latency, seed=seed)
    else:
        raise ValueError(f"Unknown store backend '{settings.store_backend}' (expected one of {BACKENDS})")

    logger.info(f"Record store: {backend} (latency={latency}ms)")
    return store
