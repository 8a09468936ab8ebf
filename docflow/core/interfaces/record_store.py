"""
Contract: Record Store

Coleções chaveadas de registros (dicts serializáveis), com contrato
assíncrono compatível com um banco remoto. Qualquer backing
(memória, arquivos JSON, SQL) deve respeitar este contrato.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, TypeVar

Record = dict[str, Any]
T = TypeVar("T")


class Collections:
    """Nomes das coleções persistidas."""
    USERS = "users"
    COMPANIES = "companies"
    DOCUMENTS = "documents"
    MODERATION_LOG = "moderation_log"

    ALL = (USERS, COMPANIES, DOCUMENTS, MODERATION_LOG)


class IRecordStore(ABC):
    """
    Port: Record Store

    Toda operação completa depois de um atraso simulado limitado;
    escritas demoram o dobro das leituras.
    """

    @abstractmethod
    async def read(self, collection: str) -> list[Record]:
        """
        Retorna todos os registros da coleção, na ordem de inserção.

        Nunca falha; coleção inexistente retorna lista vazia.
        """
        ...

    @abstractmethod
    async def write(self, collection: str, records: list[Record]) -> None:
        """Substitui o conjunto inteiro da coleção, atomicamente."""
        ...

    @abstractmethod
    async def update(
        self,
        collection: str,
        mutate: Callable[[list[Record]], tuple[list[Record], T]],
    ) -> T:
        """
        Read-modify-write atômico.

        Args:
            collection: Nome da coleção.
            mutate: Recebe uma cópia dos registros e devolve
                (novos_registros, resultado). Se levantar exceção,
                nada é gravado.

        Returns:
            O resultado devolvido por `mutate`.
        """
        ...
