"""
User Repository.

Papel e companyId são definidos na criação e nunca reatribuídos.
"""

import logging

from docflow.core.entities.user import User, UserRole
from docflow.core.exceptions import ValidationError
from docflow.core.interfaces.record_store import Collections, Record
from docflow.infrastructure.repositories.base import EntityRepository, new_id

logger = logging.getLogger(__name__)


class UserRepository(EntityRepository[User]):
    """Repository for users."""

    collection = Collections.USERS
    entity_name = "User"

    def _to_entity(self, record: Record) -> User:
        return User.from_record(record)

    async def find_by_email_and_role(self, email: str, role: UserRole) -> User | None:
        return await self._find(lambda u: u.email == email and u.role == role)

    async def find_by_email(self, email: str) -> User | None:
        return await self._find(lambda u: u.email == email)

    async def find_by_id(self, user_id: str) -> User | None:
        return await self._find(lambda u: u.id == user_id)

    async def list_all(self) -> list[User]:
        return await self._all()

    async def create(self, name: str, email: str, role: UserRole, company_id: str | None = None) -> User:
        """Create a user. SUPPLIER requires a companyId, ADMIN must not have one."""
        if role == UserRole.SUPPLIER and not company_id:
            raise ValidationError("Supplier users must belong to a company", ["companyId"])
        if role == UserRole.ADMIN and company_id:
            raise ValidationError("Admin users cannot belong to a company", ["companyId"])

        user = User(id=new_id(), name=name, email=email, role=role, company_id=company_id)

        def unique_email(users: list[User]) -> None:
            if any(u.email == email for u in users):
                raise ValidationError(f"E-mail {email} is already registered", ["email"])

        await self._append(user, check=unique_email)
        logger.info(f"Created user {user.id} [{role.value}]")
        return user
