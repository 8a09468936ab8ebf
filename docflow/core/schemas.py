"""
Pydantic schemas — drafts de cadastro recebidos da camada de apresentação.

Aceitam tanto snake_case quanto camelCase (o formato do store).
"""

from enum import Enum
from typing import TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from docflow.core.exceptions import ValidationError


class _Draft(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
        extra="ignore",
    )


class CompanyDraft(_Draft):
    cnpj: str = Field(min_length=1)
    fantasy_name: str = Field(min_length=1)
    social_reason: str = Field(min_length=1)
    zip_code: str = Field(min_length=1)
    address: str = Field(min_length=1)
    number: str = Field(min_length=1)
    complement: str | None = None
    neighborhood: str = Field(min_length=1)
    city: str = Field(min_length=1)
    state: str = Field(min_length=1)
    phone: str = Field(min_length=1)

    @field_validator("complement")
    @classmethod
    def _blank_complement_is_absent(cls, v: str | None) -> str | None:
        return v or None


class UserDraft(_Draft):
    name: str = Field(min_length=1)
    email: str = Field(min_length=3, pattern=r"^[^@\s]+@[^@\s]+$")


E = TypeVar("E", bound=Enum)


def parse_enum(enum_cls: type[E], value, field: str) -> E:
    """Converte `value` no enum ou levanta ValidationError apontando `field`."""
    try:
        return enum_cls(value)
    except ValueError as e:
        allowed = ", ".join(m.value for m in enum_cls)
        raise ValidationError(
            f"Invalid {field} {value!r}; expected one of {allowed}", [field]
        ) from e
