# tests/integration/conftest.py
from __future__ import annotations

import os
from collections.abc import Generator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from gabinete.infrastructure.anexos import ArmazenamentoAnexos
from gabinete.infrastructure.duckdb_store import DuckDBStore

# Desabilitar rate limit em testes
os.environ["API_RATE_LIMIT_PER_MINUTE"] = "0"


@pytest.fixture()
def store() -> DuckDBStore:
    """DuckDB in-memory novo por teste: nenhum estado vaza entre testes."""
    return DuckDBStore(":memory:")


@pytest.fixture()
def uploads_dir(tmp_path: Path) -> Path:
    return tmp_path / "uploads"


@pytest.fixture()
def client(store: DuckDBStore, uploads_dir: Path) -> Generator[TestClient, None, None]:
    """TestClient com banco in-memory e diretorio de uploads temporario."""
    from gabinete.infrastructure.config import get_settings
    get_settings.cache_clear()

    from gabinete.interfaces.api.main import create_app
    app = create_app(store=store, anexos=ArmazenamentoAnexos(uploads_dir))
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def documento_payload() -> dict[str, str]:
    return {
        "numero": "001",
        "ano": "2025",
        "autor": "Ver. Ana Souza",
        "assunto": "Iluminacao da Rua das Flores",
        "conteudo": "Solicita a troca das lampadas queimadas.",
        "tipo": "Indicação",
    }


@pytest.fixture()
def evento_payload() -> dict[str, object]:
    return {
        "titulo": "Sessao ordinaria",
        "dataEvento": "2026-03-10T19:00:00",
        "horaInicio": "19:00",
        "horaFim": "21:00",
        "local": "Plenario",
        "tipo": "Sessão Ordinária",
        "participantes": ["Ana", "Bruno"],
    }


@pytest.fixture()
def eleitor_payload() -> dict[str, str]:
    return {
        "nome": "Joao da Silva",
        "dataNascimento": "1980-05-01",
        "endereco": "Rua A, 100",
        "bairro": "Centro",
        "telefone": "(11) 5555-0000",
    }
