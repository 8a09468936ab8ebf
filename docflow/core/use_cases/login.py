"""
Use Case: Login

Busca por (email, papel). Admin entra direto; fornecedor passa
pelo portão de cadastro da empresa.
"""

import logging

from docflow.core.entities.company import CompanyStatus
from docflow.core.entities.user import User, UserRole
from docflow.core.exceptions import AuthError, AuthFailure
from docflow.core.schemas import parse_enum
from docflow.infrastructure.repositories.company_repository import CompanyRepository
from docflow.infrastructure.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)

_BLOCKED = {
    CompanyStatus.PENDING: AuthFailure.COMPANY_PENDING,
    CompanyStatus.REJECTED: AuthFailure.COMPANY_REJECTED,
}


class LoginUseCase:
    """Use Case: autentica por e-mail + papel (sem credenciais)."""

    def __init__(self, users: UserRepository, companies: CompanyRepository):
        self._users = users
        self._companies = companies

    async def execute(self, email: str, role: UserRole) -> User:
        """
        Returns:
            O usuário autenticado.

        Raises:
            ValidationError: papel desconhecido.
            AuthError: USER_NOT_FOUND, COMPANY_PENDING ou COMPANY_REJECTED.
        """
        role = parse_enum(UserRole, role, "role")
        user = await self._users.find_by_email_and_role(email, role)
        if user is None:
            logger.info(f"Login refused for {email} [{role.value}]: user not found")
            raise AuthError(AuthFailure.USER_NOT_FOUND)

        if user.role == UserRole.ADMIN:
            logger.info(f"Admin {user.id} logged in")
            return user

        company = await self._companies.find_by_id(user.company_id) if user.company_id else None
        if company is None:
            logger.warning(f"Supplier {user.id} has no company record, allowing login")
        elif company.status in _BLOCKED:
            logger.info(f"Login refused for {email}: company {company.id} is {company.status.value}")
            raise AuthError(_BLOCKED[company.status])

        logger.info(f"Supplier {user.id} logged in")
        return user
