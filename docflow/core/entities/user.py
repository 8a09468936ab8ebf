"""
Entity: User

Identidade com papel (ADMIN ou SUPPLIER).
Fornecedores ficam presos a exatamente uma empresa.
"""

from dataclasses import dataclass
from enum import Enum

from docflow.core.exceptions import Forbidden


@dataclass(frozen=True)
class Capabilities:
    """O que um papel pode fazer no workflow."""
    can_moderate: bool = False
    can_submit: bool = False


class UserRole(str, Enum):
    ADMIN = "ADMIN"
    SUPPLIER = "SUPPLIER"

    @property
    def capabilities(self) -> Capabilities:
        return _ROLE_CAPABILITIES[self]


_ROLE_CAPABILITIES = {
    UserRole.ADMIN: Capabilities(can_moderate=True),
    UserRole.SUPPLIER: Capabilities(can_submit=True),
}


@dataclass
class User:
    """Entidade de domínio: Usuário."""
    id: str
    name: str
    email: str
    role: UserRole
    company_id: str | None = None      # presente sse role == SUPPLIER

    @property
    def capabilities(self) -> Capabilities:
        return self.role.capabilities

    def to_record(self) -> dict:
        record = {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "role": self.role.value,
        }
        if self.company_id is not None:
            record["companyId"] = self.company_id
        return record

    @classmethod
    def from_record(cls, record: dict) -> "User":
        return cls(
            id=record["id"],
            name=record["name"],
            email=record["email"],
            role=UserRole(record["role"]),
            company_id=record.get("companyId"),
        )


def ensure_capability(actor: User, capability: str, action: str) -> None:
    """Raise Forbidden unless the actor's role grants `capability`."""
    if not getattr(actor.capabilities, capability):
        raise Forbidden(action, actor.role.value)
