"""
Use Case: Submit Document

Fornecedor envia um documento; ele nasce PENDING, ligado ao
usuário e à empresa do usuário.
"""

import logging

from docflow.core.entities.document import Document, FileRef, FileType
from docflow.core.entities.user import User, ensure_capability
from docflow.core.exceptions import NotFound, ValidationError
from docflow.infrastructure.repositories.company_repository import CompanyRepository
from docflow.infrastructure.repositories.document_repository import DocumentRepository
from docflow.infrastructure.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class SubmitDocumentUseCase:
    """Use Case: upload de documento de conformidade."""

    def __init__(
        self,
        users: UserRepository,
        companies: CompanyRepository,
        documents: DocumentRepository,
    ):
        self._users = users
        self._companies = companies
        self._documents = documents

    async def execute(self, actor: User, file_ref: FileRef, name: str) -> Document:
        """
        Raises:
            Forbidden: o ator não pode enviar documentos (não é SUPPLIER).
            ValidationError: nome do documento vazio.
            NotFound: o ator ou a empresa dele não existem no store.
        """
        ensure_capability(actor, "can_submit", "submit documents")
        if not name or not name.strip():
            raise ValidationError("Document name is required", ["name"])

        stored = await self._users.find_by_id(actor.id)
        if stored is None:
            raise NotFound("User", actor.id)
        if await self._companies.find_by_id(stored.company_id) is None:
            raise NotFound("Company", stored.company_id)

        file_type = FileType.from_filename(file_ref.filename)
        document = await self._documents.create(
            user_id=stored.id,
            company_id=stored.company_id,
            name=name,
            file_type=file_type,
            file_url=file_ref.url,
        )
        logger.info(f"Document {document.id} '{name}' ({file_type.value}) submitted by {stored.id}")
        return document
