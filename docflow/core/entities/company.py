"""
Entity: Company

Empresa fornecedora aguardando (ou já com) aprovação de cadastro.
Nasce PENDING; só a moderação de empresa muda o status.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class CompanyStatus(str, Enum):
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


# nova análise sempre volta por PENDING
ALLOWED_TRANSITIONS = {
    CompanyStatus.PENDING: {CompanyStatus.APPROVED, CompanyStatus.REJECTED},
    CompanyStatus.APPROVED: {CompanyStatus.PENDING},
    CompanyStatus.REJECTED: {CompanyStatus.PENDING},
}


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Company:
    """Entidade de domínio: Empresa."""
    id: str
    cnpj: str
    fantasy_name: str
    social_reason: str
    zip_code: str
    address: str
    number: str
    neighborhood: str
    city: str
    state: str
    phone: str
    complement: str | None = None
    status: CompanyStatus = CompanyStatus.PENDING
    created_at: datetime = field(default_factory=utcnow)

    def can_transition_to(self, status: CompanyStatus) -> bool:
        return status in ALLOWED_TRANSITIONS[self.status]

    def to_record(self) -> dict:
        record = {
            "id": self.id,
            "cnpj": self.cnpj,
            "fantasyName": self.fantasy_name,
            "socialReason": self.social_reason,
            "zipCode": self.zip_code,
            "address": self.address,
            "number": self.number,
            "neighborhood": self.neighborhood,
            "city": self.city,
            "state": self.state,
            "phone": self.phone,
            "status": self.status.value,
            "createdAt": self.created_at.isoformat(),
        }
        if self.complement is not None:
            record["complement"] = self.complement
        return record

    @classmethod
    def from_record(cls, record: dict) -> "Company":
        return cls(
            id=record["id"],
            cnpj=record["cnpj"],
            fantasy_name=record["fantasyName"],
            social_reason=record["socialReason"],
            zip_code=record["zipCode"],
            address=record["address"],
            number=record["number"],
            neighborhood=record["neighborhood"],
            city=record["city"],
            state=record["state"],
            phone=record["phone"],
            complement=record.get("complement"),
            status=CompanyStatus(record.get("status", CompanyStatus.PENDING.value)),
            created_at=datetime.fromisoformat(record["createdAt"]),
        )
