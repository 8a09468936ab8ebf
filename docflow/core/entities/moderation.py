"""
Entity: ModerationRecord

Histórico append-only das decisões do administrador.
Re-moderar sobrescreve o status do alvo, mas a decisão anterior fica aqui.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from docflow.core.entities.company import utcnow


class ModerationTarget(str, Enum):
    DOCUMENT = "DOCUMENT"
    COMPANY = "COMPANY"


@dataclass
class ModerationRecord:
    """Uma decisão de moderação (documento ou empresa)."""
    id: str
    target_type: ModerationTarget
    target_id: str
    status: str                          # valor de DocumentStatus / CompanyStatus
    reason: str | None = None
    decided_by: str | None = None        # id do admin, quando conhecido
    decided_at: datetime = field(default_factory=utcnow)

    def to_record(self) -> dict:
        record = {
            "id": self.id,
            "targetType": self.target_type.value,
            "targetId": self.target_id,
            "status": self.status,
            "decidedAt": self.decided_at.isoformat(),
        }
        if self.reason is not None:
            record["reason"] = self.reason
        if self.decided_by is not None:
            record["decidedBy"] = self.decided_by
        return record

    @classmethod
    def from_record(cls, record: dict) -> "ModerationRecord":
        return cls(
            id=record["id"],
            target_type=ModerationTarget(record["targetType"]),
            target_id=record["targetId"],
            status=record["status"],
            reason=record.get("reason"),
            decided_by=record.get("decidedBy"),
            decided_at=datetime.fromisoformat(record["decidedAt"]),
        )


class ModerationDecision(str, Enum):
    APPROVE = "APPROVE"
    REJECT = "REJECT"
