"""
Application Settings.

Centraliza toda configuração via .env / variáveis de ambiente.
"""

from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Configurações carregadas de variáveis de ambiente."""

    # --- App ---
    log_level: str = "INFO"

    # --- Record Store ---
    store_backend: str = "memory"          # "memory", "json", "sql"
    data_dir: str = "data"
    database_url: str = "sqlite:///docflow.db"
    store_latency_ms: int = 600            # escrita; leitura leva metade. 0 desliga

    # --- Seed (admin único) ---
    admin_id: str = "admin-uuid"
    admin_name: str = "Admin Master"
    admin_email: str = "admin@docflow.com"

    # --- Read models ---
    unknown_user_label: str = "Desconhecido"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "DOCFLOW_",
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> Settings:
    """Singleton de settings."""
    return Settings()
