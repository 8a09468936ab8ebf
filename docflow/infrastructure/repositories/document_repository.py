"""
Document Repository.

Listagens sempre ordenadas por uploadedAt, mais recente primeiro.
rejectionReason existe se e somente se status == REJECTED.
"""

import logging

from docflow.core.entities.company import utcnow
from docflow.core.entities.document import Document, DocumentStatus, FileType
from docflow.core.exceptions import ValidationError
from docflow.core.interfaces.record_store import Collections, Record
from docflow.infrastructure.repositories.base import EntityRepository, new_id

logger = logging.getLogger(__name__)


def _newest_first(documents: list[Document]) -> list[Document]:
    return sorted(documents, key=lambda d: d.uploaded_at, reverse=True)


class DocumentRepository(EntityRepository[Document]):
    """Repository for compliance documents."""

    collection = Collections.DOCUMENTS
    entity_name = "Document"

    def _to_entity(self, record: Record) -> Document:
        return Document.from_record(record)

    async def create(
        self,
        user_id: str,
        company_id: str,
        name: str,
        file_type: FileType,
        file_url: str,
    ) -> Document:
        """Create a PENDING document stamped with the current time."""
        document = Document(
            id=new_id(),
            user_id=user_id,
            company_id=company_id,
            name=name,
            file_type=file_type,
            file_url=file_url,
            status=DocumentStatus.PENDING,
            uploaded_at=utcnow(),
            rejection_reason=None,
        )
        await self._append(document)
        logger.info(f"Created document {document.id} for company {company_id}")
        return document

    async def find_by_id(self, document_id: str) -> Document | None:
        return await self._find(lambda d: d.id == document_id)

    async def list_by_company(self, company_id: str) -> list[Document]:
        return _newest_first([d for d in await self._all() if d.company_id == company_id])

    async def list_by_user(self, user_id: str) -> list[Document]:
        return _newest_first([d for d in await self._all() if d.user_id == user_id])

    async def list_all(self) -> list[Document]:
        return _newest_first(await self._all())

    async def update_status(
        self,
        document_id: str,
        status: DocumentStatus,
        reason: str | None = None,
    ) -> Document:
        """
        Set status and rejection reason.

        The reason is required and kept only for REJECTED; for any other
        status it is discarded even if supplied.

        Raises:
            NotFound: no document with this id.
            ValidationError: REJECTED without a reason.
        """
        if status == DocumentStatus.REJECTED and reason is None:
            raise ValidationError("A rejection reason is required", ["rejectionReason"])

        def apply(document: Document) -> None:
            document.status = status
            document.rejection_reason = reason if status == DocumentStatus.REJECTED else None

        document = await self._patch(document_id, apply)
        logger.info(f"Document {document_id} -> {status.value}")
        return document
