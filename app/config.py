"""Configuração via variáveis de ambiente (carregadas do .env)."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Carrega variáveis do .env (APP_TITLE, ORDERS_DATA_PATH, LOG_LEVEL)
load_dotenv()


@dataclass(frozen=True)
class Settings:
    app_title: str
    orders_data_path: Path | None
    log_level: str


def get_settings() -> Settings:
    """Lê o ambiente a cada chamada; ORDERS_DATA_PATH vazio desativa o seed e LOG_LEVEL desconhecido vira INFO."""
    data_path = os.getenv("ORDERS_DATA_PATH")
    log_level = os.getenv("LOG_LEVEL", "INFO").upper()
    # getLevelName devolve int só para níveis conhecidos
    if not isinstance(logging.getLevelName(log_level), int):
        log_level = "INFO"
    return Settings(
        app_title=os.getenv("APP_TITLE", "Pedidos Entregas"),
        orders_data_path=Path(data_path) if data_path else None,
        log_level=log_level,
    )
