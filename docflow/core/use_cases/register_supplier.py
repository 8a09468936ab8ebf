"""
Use Case: Register Supplier

Cria a empresa (PENDING) e o usuário SUPPLIER ligado a ela.
Toda validação acontece antes da primeira escrita.
"""

import logging
from typing import Any

from pydantic import ValidationError as DraftValidationError

from docflow.core.entities.user import User, UserRole
from docflow.core.exceptions import ValidationError
from docflow.core.schemas import CompanyDraft, UserDraft
from docflow.infrastructure.repositories.company_repository import CompanyRepository
from docflow.infrastructure.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


def parse_draft(model: type, data: Any):
    """Validate a draft (model instance or mapping) into `model`."""
    if isinstance(data, model):
        return data
    try:
        return model.model_validate(data)
    except DraftValidationError as e:
        fields = [".".join(str(p) for p in err["loc"]) for err in e.errors()]
        raise ValidationError(
            f"Invalid {model.__name__}: {', '.join(fields)}", fields
        ) from e


class RegisterSupplierUseCase:
    """
    Use Case: cadastro de fornecedor.

    E-mail duplicado é recusado; CNPJ duplicado é aceito e só gera aviso.
    """

    def __init__(self, users: UserRepository, companies: CompanyRepository):
        self._users = users
        self._companies = companies

    async def execute(self, company_draft: CompanyDraft | dict, user_draft: UserDraft | dict) -> User:
        company_data = parse_draft(CompanyDraft, company_draft)
        user_data = parse_draft(UserDraft, user_draft)

        if await self._users.find_by_email(user_data.email) is not None:
            raise ValidationError(f"E-mail {user_data.email} is already registered", ["email"])

        if await self._companies.find_by_cnpj(company_data.cnpj):
            logger.warning(f"CNPJ {company_data.cnpj} already registered, creating another company")

        company = await self._companies.create(company_data.model_dump())
        try:
            user = await self._users.create(
                name=user_data.name,
                email=user_data.email,
                role=UserRole.SUPPLIER,
                company_id=company.id,
            )
        except Exception:
            # e-mail tomado entre a checagem e a escrita: desfaz a empresa
            await self._companies.discard(company.id)
            raise
        logger.info(f"Supplier registered: user {user.id} / company {company.id} [PENDING]")
        return user
