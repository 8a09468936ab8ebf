"""
DocFlow application — composition root + estado de sessão.

Monta Record Store → repositórios → use cases e guarda a sessão atual
e as visões derivadas (documentos e fornecedores) consumidas pela
camada de apresentação. As visões são recalculadas a cada mutação.
"""

import logging

from docflow.config.settings import Settings, get_settings
from docflow.core.entities.company import Company, CompanyStatus
from docflow.core.entities.document import Document, FileRef
from docflow.core.entities.moderation import ModerationDecision, ModerationRecord
from docflow.core.entities.session import Session
from docflow.core.entities.user import User, UserRole
from docflow.core.interfaces.record_store import IRecordStore
from docflow.core.schemas import CompanyDraft, UserDraft
from docflow.core.use_cases.login import LoginUseCase
from docflow.core.use_cases.moderate_company import SetCompanyStatusUseCase
from docflow.core.use_cases.moderate_document import ModerateDocumentUseCase
from docflow.core.use_cases.register_supplier import RegisterSupplierUseCase
from docflow.core.use_cases.submit_document import SubmitDocumentUseCase
from docflow.core.use_cases.supplier_directory import (
    SupplierDirectoryUseCase,
    SupplierEntry,
    SupplierStats,
)
from docflow.infrastructure.repositories.company_repository import CompanyRepository
from docflow.infrastructure.repositories.document_repository import DocumentRepository
from docflow.infrastructure.repositories.moderation_log_repository import ModerationLogRepository
from docflow.infrastructure.repositories.user_repository import UserRepository
from docflow.infrastructure.store.factory import create_record_store

logger = logging.getLogger(__name__)


class DocflowApp:
    """
    Fachada do workflow para a camada de apresentação.

    Dependency Injection: o Record Store vem pelo construtor; use
    `build_app()` para montar a partir das Settings.
    """

    def __init__(self, store: IRecordStore, settings: Settings | None = None):
        settings = settings or get_settings()
        self.store = store

        # ── Repositories ──
        self.users = UserRepository(store)
        self.companies = CompanyRepository(store)
        self.documents_repo = DocumentRepository(store)
        self.moderation_log = ModerationLogRepository(store)

        # ── Use cases ──
        self._login = LoginUseCase(self.users, self.companies)
        self._register = RegisterSupplierUseCase(self.users, self.companies)
        self._submit = SubmitDocumentUseCase(self.users, self.companies, self.documents_repo)
        self._moderate = ModerateDocumentUseCase(self.documents_repo, self.moderation_log)
        self._set_company_status = SetCompanyStatusUseCase(self.companies, self.moderation_log)
        self.directory = SupplierDirectoryUseCase(
            self.users, self.companies, self.documents_repo, settings.unknown_user_label
        )

        # ── Session / view state ──
        self.session = Session()
        self.documents: list[Document] = []
        self.suppliers: list[SupplierEntry] = []

    @property
    def current_user(self) -> User | None:
        return self.session.user

    # ── Auth ──

    async def login(self, email: str, role: UserRole) -> Session:
        user = await self._login.execute(email, role)
        self.session = Session(user=user)
        await self.refresh()
        return self.session

    async def register_supplier(self, company: CompanyDraft | dict, user: UserDraft | dict) -> Session:
        """Register a supplier; the new user becomes the session's actor."""
        new_user = await self._register.execute(company, user)
        self.session = Session(user=new_user)
        await self.refresh()
        return self.session

    def logout(self) -> None:
        if self.session.user is not None:
            logger.info(f"User {self.session.user.id} logged out")
        self.session = Session()
        self.documents = []
        self.suppliers = []

    # ── Mutations ──

    async def upload_document(self, file_ref: FileRef, name: str) -> Document:
        document = await self._submit.execute(self.session.require_user(), file_ref, name)
        await self.refresh()
        return document

    async def moderate_document(
        self,
        document_id: str,
        decision: ModerationDecision,
        reason: str | None = None,
    ) -> Document:
        document = await self._moderate.execute(
            document_id, decision, reason, actor=self.session.require_user()
        )
        await self.refresh()
        return document

    async def set_company_status(self, company_id: str, status: CompanyStatus) -> Company:
        company = await self._set_company_status.execute(
            company_id, status, actor=self.session.require_user()
        )
        await self.refresh()
        return company

    # ── Read models ──

    async def refresh(self) -> None:
        """Recompute the views for the current actor."""
        user = self.session.user
        if user is None:
            self.documents, self.suppliers = [], []
        elif user.capabilities.can_moderate:
            self.documents = await self.documents_repo.list_all()
            self.suppliers = await self.directory.list_suppliers()
        else:
            self.documents = await self.directory.supplier_documents(user.id)
            self.suppliers = []

    async def search_suppliers(self, term: str) -> list[SupplierEntry]:
        return await self.directory.list_suppliers(term)

    async def company_stats(self, company_id: str) -> SupplierStats:
        return await self.directory.company_stats(company_id)

    async def supplier_stats(self, user_id: str) -> SupplierStats:
        return await self.directory.supplier_stats(user_id)

    async def supplier_company(self, user_id: str) -> Company | None:
        return await self.directory.supplier_company(user_id)

    async def supplier_name(self, user_id: str) -> str:
        return await self.directory.supplier_name(user_id)

    async def moderation_history(self, target_id: str) -> list[ModerationRecord]:
        return await self.moderation_log.list_for(target_id)


def build_app(settings: Settings | None = None) -> DocflowApp:
    """Monta a aplicação com o Record Store configurado."""
    settings = settings or get_settings()
    return DocflowApp(create_record_store(settings), settings)
