"""
Use Case: Set Company Status

Muda o status do cadastro (PENDING -> APPROVED|REJECTED, ou de volta
para PENDING para reabrir a análise). Não propaga para documentos
nem usuários da empresa.
"""

import logging

from docflow.core.entities.company import Company, CompanyStatus
from docflow.core.entities.moderation import ModerationTarget
from docflow.core.entities.user import User, ensure_capability
from docflow.core.schemas import parse_enum
from docflow.infrastructure.repositories.company_repository import CompanyRepository
from docflow.infrastructure.repositories.moderation_log_repository import ModerationLogRepository

logger = logging.getLogger(__name__)


class SetCompanyStatusUseCase:
    """Use Case: moderação do cadastro de uma empresa."""

    def __init__(self, companies: CompanyRepository, log: ModerationLogRepository):
        self._companies = companies
        self._log = log

    async def execute(
        self,
        company_id: str,
        status: CompanyStatus,
        actor: User | None = None,
    ) -> Company:
        """
        Raises:
            Forbidden: `actor` informado e sem permissão de moderar.
            ValidationError: status desconhecido ou transição não permitida.
            NotFound: empresa inexistente.
        """
        if actor is not None:
            ensure_capability(actor, "can_moderate", "moderate companies")

        status = parse_enum(CompanyStatus, status, "status")
        company = await self._companies.update_status(company_id, status)
        await self._log.append(
            ModerationTarget.COMPANY,
            company_id,
            status.value,
            decided_by=actor.id if actor else None,
        )
        logger.info(f"Company {company_id} set to {status.value}")
        return company
