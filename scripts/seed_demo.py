"""
Demo Seeder — carrega a empresa/fornecedor/documentos de demonstração.

Usa o próprio workflow (cadastro → aprovação → envio → moderação),
então o store resultante respeita todas as invariantes.

Usage:
    python -m scripts.seed_demo [--backend json] [--data-dir data] [--list]
"""
import argparse
import asyncio
import logging
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from docflow.app import DocflowApp, build_app
from docflow.config.settings import get_settings
from docflow.core.entities.company import CompanyStatus
from docflow.core.entities.document import FileRef
from docflow.core.entities.moderation import ModerationDecision
from docflow.core.entities.user import UserRole

logger = logging.getLogger("seed_demo")

DEMO_COMPANY = {
    "cnpj": "12.345.678/0001-99",
    "fantasyName": "Tech Supplies Ltda",
    "socialReason": "Tech Supplies Comércio de Eletrônicos",
    "zipCode": "01001-000",
    "address": "Av. Paulista",
    "number": "1000",
    "neighborhood": "Bela Vista",
    "city": "São Paulo",
    "state": "SP",
    "phone": "(11) 99999-9999",
}

DEMO_USER = {"name": "João Fornecedor", "email": "joao@tech.com"}

DEMO_DOCUMENTS = [
    ("contrato_social.pdf", "Contrato Social", ModerationDecision.APPROVE),
    ("certidao_negativa.pdf", "Certidão Negativa", None),
]


async def seed(app: DocflowApp) -> bool:
    """Seed the demo supplier. Returns False when companies already exist."""
    existing = await app.companies.list_all()
    if existing:
        logger.info(f"Store already has {len(existing)} companies, skipping demo load")
        return False

    settings = get_settings()
    session = await app.register_supplier(DEMO_COMPANY, DEMO_USER)
    supplier = session.require_user()

    await app.login(settings.admin_email, UserRole.ADMIN)
    await app.set_company_status(supplier.company_id, CompanyStatus.APPROVED)

    await app.login(DEMO_USER["email"], UserRole.SUPPLIER)
    uploaded = []
    for filename, name, decision in DEMO_DOCUMENTS:
        doc = await app.upload_document(FileRef(filename=filename, url=f"demo://{filename}"), name)
        uploaded.append((doc, decision))

    await app.login(settings.admin_email, UserRole.ADMIN)
    for doc, decision in uploaded:
        if decision is not None:
            await app.moderate_document(doc.id, decision)

    app.logout()
    logger.info(f"Loaded demo supplier {supplier.email} with {len(uploaded)} documents")
    return True


async def print_directory(app: DocflowApp) -> None:
    print(f"\n{'Empresa':<30} {'CNPJ':<20} {'Status':<10} {'Responsável':<20} Docs (pend.)")
    print("-" * 100)
    for entry in await app.search_suppliers(""):
        responsible = entry.responsible.name if entry.responsible else get_settings().unknown_user_label
        print(
            f"{entry.company.fantasy_name:<30} {entry.company.cnpj:<20} "
            f"{entry.company.status.value:<10} {responsible:<20} "
            f"{entry.stats.total} ({entry.stats.pending})"
        )


async def main_async(args: argparse.Namespace) -> None:
    app = build_app()
    await seed(app)
    if args.list:
        await print_directory(app)


def main():
    parser = argparse.ArgumentParser(description="Seed DocFlow demo data")
    parser.add_argument("--backend", choices=["memory", "json", "sql"], help="Record store backing")
    parser.add_argument("--data-dir", help="Directory for the JSON backing")
    parser.add_argument("--database-url", help="SQLAlchemy URL for the SQL backing")
    parser.add_argument("--list", action="store_true", help="Print the supplier directory")
    args = parser.parse_args()

    if args.backend:
        os.environ["DOCFLOW_STORE_BACKEND"] = args.backend
    if args.data_dir:
        os.environ["DOCFLOW_DATA_DIR"] = args.data_dir
    if args.database_url:
        os.environ["DOCFLOW_DATABASE_URL"] = args.database_url
    get_settings.cache_clear()

    logging.basicConfig(
        level=get_settings().log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    asyncio.run(main_async(args))


if __name__ == "__main__":
    main()
