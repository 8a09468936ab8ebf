"""
Moderation Log Repository (append-only).
"""

import logging

from docflow.core.entities.moderation import ModerationRecord, ModerationTarget
from docflow.core.interfaces.record_store import Collections, Record
from docflow.infrastructure.repositories.base import EntityRepository, new_id

logger = logging.getLogger(__name__)


class ModerationLogRepository(EntityRepository[ModerationRecord]):
    """Every moderation decision, in the order it was taken."""

    collection = Collections.MODERATION_LOG
    entity_name = "ModerationRecord"

    def _to_entity(self, record: Record) -> ModerationRecord:
        return ModerationRecord.from_record(record)

    async def append(
        self,
        target_type: ModerationTarget,
        target_id: str,
        status: str,
        reason: str | None = None,
        decided_by: str | None = None,
    ) -> ModerationRecord:
        entry = ModerationRecord(
            id=new_id(),
            target_type=target_type,
            target_id=target_id,
            status=status,
            reason=reason,
            decided_by=decided_by,
        )
        await self._append(entry)
        logger.debug(f"Logged {target_type.value} {target_id} -> {status}")
        return entry

    async def list_for(self, target_id: str) -> list[ModerationRecord]:
        return [e for e in await self._all() if e.target_id == target_id]
