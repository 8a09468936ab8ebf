"""Unit tests for domain entities: file types, record shapes, roles and sessions."""

from datetime import datetime, timezone

import pytest

from docflow.core.entities.company import Company, CompanyStatus
from docflow.core.entities.document import Document, DocumentStatus, FileType
from docflow.core.entities.moderation import ModerationRecord, ModerationTarget
from docflow.core.entities.session import Session
from docflow.core.entities.user import User, UserRole, ensure_capability
from docflow.core.exceptions import AuthError, AuthFailure, Forbidden


class TestFileType:
    """File type is the lower-cased extension, defaulting to pdf."""

    @pytest.mark.parametrize(
        "filename,expected",
        [
            ("contrato.PDF", FileType.PDF),
            ("foto.jpg", FileType.JPG),
            ("scan.final.PNG", FileType.PNG),
            ("foto.jpeg", FileType.PDF),
            ("planilha.xlsx", FileType.PDF),
            ("sem_extensao", FileType.PDF),
            ("terminado_em_ponto.", FileType.PDF),
        ],
    )
    def test_from_filename(self, filename, expected):
        assert FileType.from_filename(filename) == expected


class TestRecordShapes:
    """Records use the camelCase store layout and omit unset optional fields."""

    def test_company_without_complement_omits_key(self):
        company = Company(
            id="c1", cnpj="12.345.678/0001-99", fantasy_name="Tech", social_reason="Tech Ltda",
            zip_code="01001-000", address="Av. Paulista", number="1000",
            neighborhood="Bela Vista", city="São Paulo", state="SP", phone="(11) 99999-9999",
        )
        record = company.to_record()

        assert "complement" not in record
        assert record["fantasyName"] == "Tech"
        assert record["status"] == "PENDING"
        assert Company.from_record(record) == company

    def test_pending_document_omits_rejection_reason(self):
        doc = Document(id="d1", user_id="u1", company_id="c1", name="Contrato", file_url="#")
        record = doc.to_record()

        assert "rejectionReason" not in record
        assert record["fileType"] == "pdf"
        assert Document.from_record(record) == doc

    def test_rejected_document_keeps_reason(self):
        uploaded = datetime(2024, 5, 1, 12, 30, 15, 123456, tzinfo=timezone.utc)
        doc = Document(
            id="d1", user_id="u1", company_id="c1", name="Contrato", file_url="#",
            status=DocumentStatus.REJECTED, uploaded_at=uploaded,
            rejection_reason="Documento ilegível",
        )
        restored = Document.from_record(doc.to_record())

        assert restored.rejection_reason == "Documento ilegível"
        assert restored.uploaded_at == uploaded

    def test_admin_has_no_company_id_key(self):
        admin = User(id="admin-uuid", name="Admin Master", email="admin@docflow.com", role=UserRole.ADMIN)
        assert admin.to_record() == {
            "id": "admin-uuid",
            "name": "Admin Master",
            "email": "admin@docflow.com",
            "role": "ADMIN",
        }

    def test_moderation_record_roundtrip(self):
        entry = ModerationRecord(
            id="m1", target_type=ModerationTarget.COMPANY, target_id="c1",
            status=CompanyStatus.APPROVED.value,
        )
        record = entry.to_record()

        assert "reason" not in record
        assert "decidedBy" not in record
        assert ModerationRecord.from_record(record) == entry


class TestCapabilities:
    """Each role carries exactly one capability."""

    def test_admin_can_moderate_only(self):
        caps = UserRole.ADMIN.capabilities
        assert caps.can_moderate is True
        assert caps.can_submit is False

    def test_supplier_can_submit_only(self):
        caps = UserRole.SUPPLIER.capabilities
        assert caps.can_submit is True
        assert caps.can_moderate is False

    def test_ensure_capability_raises_forbidden(self):
        supplier = User(id="u1", name="Ana", email="ana@acme.com", role=UserRole.SUPPLIER, company_id="c1")
        with pytest.raises(Forbidden) as exc:
            ensure_capability(supplier, "can_moderate", "moderate documents")
        assert exc.value.role == "SUPPLIER"


class TestSession:
    def test_empty_session(self):
        session = Session()
        assert session.is_authenticated is False
        with pytest.raises(AuthError) as exc:
            session.require_user()
        assert exc.value.reason == AuthFailure.NOT_AUTHENTICATED
        assert exc.value.message == "Nenhum usuário autenticado."

    def test_authenticated_session(self):
        user = User(id="u1", name="Ana", email="ana@acme.com", role=UserRole.SUPPLIER, company_id="c1")
        session = Session(user=user)
        assert session.is_authenticated is True
        assert session.require_user() is user
