"""
Entity: Session

Sessão explícita com no máximo um usuário autenticado.
"""

from dataclasses import dataclass, field
from datetime import datetime

from docflow.core.entities.company import utcnow
from docflow.core.entities.user import User
from docflow.core.exceptions import AuthError, AuthFailure


@dataclass
class Session:
    user: User | None = None
    started_at: datetime = field(default_factory=utcnow)

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    def require_user(self) -> User:
        if self.user is None:
            raise AuthError(AuthFailure.NOT_AUTHENTICATED)
        return self.user
