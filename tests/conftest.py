"""Pytest fixtures for the DocFlow workflow.

Provides:
- Zero-latency settings and an in-memory Record Store seeded with the admin
- Repositories and the application facade wired to that store
- Registration drafts for the "Acme" supplier
- Helpers that drive a supplier through registration and approval

Usage:
    @pytest.mark.asyncio
    async def test_something(app, approved_supplier):
        supplier = await approved_supplier()
"""

import pytest

from docflow.app import DocflowApp
from docflow.config.settings import Settings
from docflow.core.entities.company import CompanyStatus
from docflow.core.entities.user import UserRole
from docflow.infrastructure.repositories.company_repository import CompanyRepository
from docflow.infrastructure.repositories.document_repository import DocumentRepository
from docflow.infrastructure.repositories.moderation_log_repository import ModerationLogRepository
from docflow.infrastructure.repositories.user_repository import UserRepository
from docflow.infrastructure.store.factory import build_seed
from docflow.infrastructure.store.memory_store import InMemoryRecordStore


@pytest.fixture
def settings():
    """Settings with the simulated latency disabled."""
    return Settings(_env_file=None, store_backend="memory", store_latency_ms=0)


@pytest.fixture
def store(settings):
    return InMemoryRecordStore(latency_ms=0, seed=build_seed(settings))


@pytest.fixture
def users(store):
    return UserRepository(store)


@pytest.fixture
def companies(store):
    return CompanyRepository(store)


@pytest.fixture
def documents(store):
    return DocumentRepository(store)


@pytest.fixture
def moderation_log(store):
    return ModerationLogRepository(store)


@pytest.fixture
def app(store, settings):
    return DocflowApp(store, settings)


@pytest.fixture
def company_draft():
    return {
        "cnpj": "11.111.111/0001-11",
        "fantasyName": "Acme",
        "socialReason": "Acme Indústria e Comércio Ltda",
        "zipCode": "01310-100",
        "address": "Rua Augusta",
        "number": "500",
        "neighborhood": "Consolação",
        "city": "São Paulo",
        "state": "SP",
        "phone": "(11) 3333-4444",
    }


@pytest.fixture
def user_draft():
    return {"name": "Ana", "email": "ana@acme.com"}


@pytest.fixture
def approved_supplier(app, settings, company_draft, user_draft):
    """Register Acme/Ana, approve the company as admin and log Ana in."""
    async def _make():
        session = await app.register_supplier(company_draft, user_draft)
        supplier = session.require_user()
        await app.login(settings.admin_email, UserRole.ADMIN)
        await app.set_company_status(supplier.company_id, CompanyStatus.APPROVED)
        await app.login(user_draft["email"], UserRole.SUPPLIER)
        return supplier

    return _make
