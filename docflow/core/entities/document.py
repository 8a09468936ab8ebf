"""
Entity: Document

Representa um documento de conformidade enviado por um fornecedor.
Modelo puro — sem dependência de framework ou banco.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from docflow.core.entities.company import utcnow


class DocumentStatus(str, Enum):
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class FileType(str, Enum):
    PDF = "pdf"
    JPG = "jpg"
    PNG = "png"

    @classmethod
    def from_filename(cls, filename: str) -> "FileType":
        """Extensão após o último '.', em minúsculas; desconhecida vira pdf."""
        if "." not in filename:
            return cls.PDF
        ext = filename.rsplit(".", 1)[-1].lower()
        try:
            return cls(ext)
        except ValueError:
            return cls.PDF


@dataclass(frozen=True)
class FileRef:
    """Referência opaca ao arquivo enviado (o conteúdo fica fora do core)."""
    filename: str
    url: str


@dataclass
class Document:
    """Entidade de domínio: Documento."""
    id: str
    user_id: str
    company_id: str
    name: str
    file_url: str
    file_type: FileType = FileType.PDF
    status: DocumentStatus = DocumentStatus.PENDING
    uploaded_at: datetime = field(default_factory=utcnow)
    rejection_reason: str | None = None   # presente sse status == REJECTED

    def to_record(self) -> dict:
        record = {
            "id": self.id,
            "userId": self.user_id,
            "companyId": self.company_id,
            "name": self.name,
            "fileType": self.file_type.value,
            "fileUrl": self.file_url,
            "uploadedAt": self.uploaded_at.isoformat(),
            "status": self.status.value,
        }
        if self.rejection_reason is not None:
            record["rejectionReason"] = self.rejection_reason
        return record

    @classmethod
    def from_record(cls, record: dict) -> "Document":
        return cls(
            id=record["id"],
            user_id=record["userId"],
            company_id=record["companyId"],
            name=record["name"],
            file_url=record["fileUrl"],
            file_type=FileType(record.get("fileType", FileType.PDF.value)),
            status=DocumentStatus(record["status"]),
            uploaded_at=datetime.fromisoformat(record["uploadedAt"]),
            rejection_reason=record.get("rejectionReason"),
        )
