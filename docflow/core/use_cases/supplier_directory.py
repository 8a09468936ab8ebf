"""
Use Case: Supplier Directory (read models)

Visões derivadas para os painéis. Nada aqui altera o store.
"""

from dataclasses import dataclass

from docflow.core.entities.company import Company
from docflow.core.entities.document import Document, DocumentStatus
from docflow.core.entities.user import User, UserRole
from docflow.infrastructure.repositories.company_repository import CompanyRepository
from docflow.infrastructure.repositories.document_repository import DocumentRepository
from docflow.infrastructure.repositories.user_repository import UserRepository


@dataclass
class SupplierStats:
    total: int = 0
    pending: int = 0

    @property
    def has_pending(self) -> bool:
        return self.pending > 0


@dataclass
class SupplierEntry:
    """Uma empresa com seu responsável e contadores de documentos."""
    company: Company
    responsible: User | None
    stats: SupplierStats


def compute_stats(documents: list[Document]) -> SupplierStats:
    pending = sum(1 for d in documents if d.status == DocumentStatus.PENDING)
    return SupplierStats(total=len(documents), pending=pending)


def matches(entry: SupplierEntry, term: str) -> bool:
    """Busca por nome fantasia, CNPJ ou nome do responsável."""
    term = term.strip().lower()
    if not term:
        return True
    responsible = entry.responsible.name.lower() if entry.responsible else ""
    return (
        term in entry.company.fantasy_name.lower()
        or term in entry.company.cnpj
        or term in responsible
    )


class SupplierDirectoryUseCase:
    """Consultas do administrador e do fornecedor sobre empresas e documentos."""

    def __init__(
        self,
        users: UserRepository,
        companies: CompanyRepository,
        documents: DocumentRepository,
        unknown_user_label: str = "Desconhecido",
    ):
        self._users = users
        self._companies = companies
        self._documents = documents
        self._unknown = unknown_user_label

    async def list_suppliers(self, search: str = "") -> list[SupplierEntry]:
        companies = await self._companies.list_all()
        users = await self._users.list_all()
        documents = await self._documents.list_all()

        entries = []
        for company in companies:
            responsible = next(
                (u for u in users if u.role == UserRole.SUPPLIER and u.company_id == company.id),
                None,
            )
            stats = compute_stats([d for d in documents if d.company_id == company.id])
            entries.append(SupplierEntry(company=company, responsible=responsible, stats=stats))

        return [e for e in entries if matches(e, search)]

    async def company_stats(self, company_id: str) -> SupplierStats:
        return compute_stats(await self._documents.list_by_company(company_id))

    async def supplier_stats(self, user_id: str) -> SupplierStats:
        return compute_stats(await self._documents.list_by_user(user_id))

    async def supplier_documents(self, user_id: str) -> list[Document]:
        return await self._documents.list_by_user(user_id)

    async def supplier_company(self, user_id: str) -> Company | None:
        user = await self._users.find_by_id(user_id)
        if user is None or not user.company_id:
            return None
        return await self._companies.find_by_id(user.company_id)

    async def supplier_name(self, user_id: str) -> str:
        user = await self._users.find_by_id(user_id)
        return user.name if user else self._unknown
