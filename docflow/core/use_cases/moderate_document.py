"""
Use Case: Moderate Document

Aprovar é permitido a partir de qualquer status (idempotente).
Reprovar exige motivo não vazio, validado antes de tocar no store.
"""

import logging

from docflow.core.entities.document import Document, DocumentStatus
from docflow.core.entities.moderation import ModerationDecision, ModerationTarget
from docflow.core.entities.user import User, ensure_capability
from docflow.core.exceptions import ValidationError
from docflow.core.schemas import parse_enum
from docflow.infrastructure.repositories.document_repository import DocumentRepository
from docflow.infrastructure.repositories.moderation_log_repository import ModerationLogRepository

logger = logging.getLogger(__name__)

_DECISION_STATUS = {
    ModerationDecision.APPROVE: DocumentStatus.APPROVED,
    ModerationDecision.REJECT: DocumentStatus.REJECTED,
}


class ModerateDocumentUseCase:
    """Use Case: decisão do administrador sobre um documento."""

    def __init__(self, documents: DocumentRepository, log: ModerationLogRepository):
        self._documents = documents
        self._log = log

    async def execute(
        self,
        document_id: str,
        decision: ModerationDecision,
        reason: str | None = None,
        actor: User | None = None,
    ) -> Document:
        """
        Raises:
            Forbidden: `actor` informado e sem permissão de moderar.
            ValidationError: decisão desconhecida ou REJECT com motivo vazio.
            NotFound: documento inexistente.
        """
        if actor is not None:
            ensure_capability(actor, "can_moderate", "moderate documents")

        decision = parse_enum(ModerationDecision, decision, "decision")
        if decision == ModerationDecision.REJECT:
            if reason is None or not reason.strip():
                raise ValidationError("A rejection reason is required", ["reason"])
        else:
            reason = None

        status = _DECISION_STATUS[decision]
        document = await self._documents.update_status(document_id, status, reason)
        await self._log.append(
            ModerationTarget.DOCUMENT,
            document_id,
            status.value,
            reason=reason,
            decided_by=actor.id if actor else None,
        )
        logger.info(f"Document {document_id} moderated: {decision.value}")
        return document
