"""
Domain exceptions.

Todas são recuperáveis na fronteira do workflow: a operação falha,
nenhuma entidade fica parcialmente alterada.
"""

from enum import Enum


class DocflowError(Exception):
    """Base exception for the docflow domain."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFound(DocflowError):
    """Raised when a referenced id is absent from a repository."""

    def __init__(self, entity: str, entity_id: str):
        super().__init__(f"{entity} {entity_id} not found")
        self.entity = entity
        self.entity_id = entity_id


class AuthFailure(str, Enum):
    USER_NOT_FOUND = "USER_NOT_FOUND"
    COMPANY_PENDING = "COMPANY_PENDING"
    COMPANY_REJECTED = "COMPANY_REJECTED"
    NOT_AUTHENTICATED = "NOT_AUTHENTICATED"


AUTH_MESSAGES = {
    AuthFailure.USER_NOT_FOUND: "Usuário não encontrado.",
    AuthFailure.COMPANY_PENDING: "Seu cadastro está em análise. Aguarde a liberação do administrador.",
    AuthFailure.COMPANY_REJECTED: "Seu cadastro foi recusado. Entre em contato com o suporte.",
    AuthFailure.NOT_AUTHENTICATED: "Nenhum usuário autenticado.",
}


class AuthError(DocflowError):
    """Raised when login fails (user unknown or blocked by its company) or no one is logged in."""

    def __init__(self, reason: AuthFailure, message: str | None = None):
        super().__init__(message or AUTH_MESSAGES[reason])
        self.reason = reason


class Forbidden(DocflowError):
    """Raised when the actor's role lacks the capability for an operation."""

    def __init__(self, action: str, role: str):
        super().__init__(f"Role {role} is not allowed to {action}")
        self.action = action
        self.role = role


class ValidationError(DocflowError):
    """Raised when operation input is invalid (empty reason, missing fields...)."""

    def __init__(self, message: str, errors: list[str] | None = None):
        super().__init__(message)
        self.errors = errors or []
