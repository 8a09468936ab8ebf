"""
Company Repository.

Toda empresa nasce PENDING com createdAt = agora, independente do que
o chamador mandar.
"""

import dataclasses
import logging
from typing import Any

from docflow.core.entities.company import Company, CompanyStatus, utcnow
from docflow.core.exceptions import ValidationError
from docflow.core.interfaces.record_store import Collections, Record
from docflow.infrastructure.repositories.base import EntityRepository, new_id

logger = logging.getLogger(__name__)

# campos que o chamador nunca define
_MANAGED_FIELDS = {"id", "status", "created_at"}
_DRAFT_FIELDS = {f.name for f in dataclasses.fields(Company)} - _MANAGED_FIELDS


class CompanyRepository(EntityRepository[Company]):
    """Repository for supplier companies."""

    collection = Collections.COMPANIES
    entity_name = "Company"

    def _to_entity(self, record: Record) -> Company:
        return Company.from_record(record)

    async def create(self, data: dict[str, Any]) -> Company:
        """Create a company from snake_case draft fields; status is always PENDING."""
        fields = {k: v for k, v in data.items() if k in _DRAFT_FIELDS}
        company = Company(
            id=new_id(),
            status=CompanyStatus.PENDING,
            created_at=utcnow(),
            **fields,
        )
        await self._append(company)
        logger.info(f"Created company {company.id} ({company.fantasy_name})")
        return company

    async def find_by_id(self, company_id: str) -> Company | None:
        return await self._find(lambda c: c.id == company_id)

    async def find_by_cnpj(self, cnpj: str) -> list[Company]:
        return [c for c in await self._all() if c.cnpj == cnpj]

    async def list_all(self) -> list[Company]:
        """All companies, in insertion order."""
        return await self._all()

    async def update_status(self, company_id: str, status: CompanyStatus) -> Company:
        """
        Move the company to `status`.

        Raises:
            NotFound: empresa inexistente.
            ValidationError: transição não permitida (ex.: APPROVED -> REJECTED
                sem reabrir a análise). Nada é gravado.
        """
        def apply(company: Company) -> None:
            if not company.can_transition_to(status):
                raise ValidationError(
                    f"Company {company_id} cannot move from {company.status.value} to {status.value}",
                    ["status"],
                )
            company.status = status

        company = await self._patch(company_id, apply)
        logger.info(f"Company {company_id} -> {status.value}")
        return company

    async def discard(self, company_id: str) -> None:
        """Undo a `create` whose registration failed afterwards."""
        await self._remove(company_id)
        logger.warning(f"Discarded company {company_id} from an incomplete registration")
