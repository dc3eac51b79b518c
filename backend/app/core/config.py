from functools import lru_cache
from typing import List, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Configurações globais do cadastro de portadores.
    Lê automaticamente variáveis do arquivo .env.
    """

    # Configuração base
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Projeto
    project_name: str = "Holder Registry API"
    api_v1_str: str = "/api/v1"
    debug: bool = False

    # Banco de dados
    database_url: str = "sqlite:///./holders.db"

    # CORS
    allowed_origins: List[str] = [
        "http://localhost:5173",
        "http://127.0.0.1:5173",
        "http://localhost:8000",
        "http://127.0.0.1:8000",
    ]

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None


@lru_cache
def get_settings() -> Settings:
    """Retorna a instância de configurações globais (cacheada)."""
    return Settings()


settings = get_settings()
