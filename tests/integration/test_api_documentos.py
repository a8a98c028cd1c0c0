# tests/integration/test_api_documentos.py
from pathlib import Path

import duckdb
from fastapi import Depends
from fastapi.testclient import TestClient

from gabinete.domain.documento.entities import DocumentoLegislativo
from gabinete.domain.erros import FalhaArmazenamento
from gabinete.infrastructure.repositories.duckdb_documento_repo import DuckDBDocumentoRepo
from gabinete.interfaces.api.dependencies import get_conexao, get_documento_repo


def _criar(client: TestClient, payload: dict[str, str], **extra: str) -> dict[str, object]:
    response = client.post("/api/documentos", data={**payload, **extra})
    assert response.status_code == 201, response.text
    return response.json()  # type: ignore[no-any-return]


def test_criar_documento_retorna_201_com_id(
    client: TestClient, documento_payload: dict[str, str],
) -> None:
    response = client.post("/api/documentos", data=documento_payload)
    assert response.status_code == 201
    data = response.json()
    assert data["_id"]
    assert data["numero"] == "001"
    assert data["ano"] == 2025
    assert data["situacao"] == "Em Tramitação"
    assert data["anexos"] == []
    assert data["observacoes"] is None
    assert "dataApresentacao" in data


def test_criar_documento_sem_numero_retorna_400(
    client: TestClient, documento_payload: dict[str, str],
) -> None:
    payload = {k: v for k, v in documento_payload.items() if k != "numero"}
    response = client.post("/api/documentos", data=payload)
    assert response.status_code == 400
    assert "numero" in response.json()["error"]


def test_criar_documento_numero_vazio_retorna_400(
    client: TestClient, documento_payload: dict[str, str],
) -> None:
    response = client.post("/api/documentos", data={**documento_payload, "numero": ""})
    assert response.status_code == 400
    assert "error" in response.json()


def test_criar_documento_tipo_invalido_retorna_400(
    client: TestClient, documento_payload: dict[str, str],
) -> None:
    response = client.post("/api/documentos", data={**documento_payload, "tipo": "Decreto"})
    assert response.status_code == 400


def test_criar_documento_aceita_json(
    client: TestClient, documento_payload: dict[str, str],
) -> None:
    response = client.post("/api/documentos", json={**documento_payload, "ano": 2024})
    assert response.status_code == 201
    assert response.json()["ano"] == 2024


def test_criar_documento_com_anexos_servidos_em_uploads(
    client: TestClient, documento_payload: dict[str, str], uploads_dir: Path,
) -> None:
    response = client.post(
        "/api/documentos",
        data=documento_payload,
        files=[
            ("anexos", ("oficio.pdf", b"%PDF-1.4 conteudo", "application/pdf")),
            ("anexos", ("foto.png", b"\x89PNG", "image/png")),
        ],
    )
    assert response.status_code == 201
    anexos = response.json()["anexos"]
    assert len(anexos) == 2
    assert anexos[0].startswith("/uploads/") and anexos[0].endswith("-oficio.pdf")
    assert anexos[1].endswith("-foto.png")
    assert len(list(uploads_dir.iterdir())) == 2

    servido = client.get(anexos[0])
    assert servido.status_code == 200
    assert servido.content == b"%PDF-1.4 conteudo"


def test_criar_documento_invalido_nao_grava_anexo(
    client: TestClient, documento_payload: dict[str, str], uploads_dir: Path,
) -> None:
    payload = {k: v for k, v in documento_payload.items() if k != "autor"}
    response = client.post(
        "/api/documentos",
        data=payload,
        files=[("anexos", ("oficio.pdf", b"x", "application/pdf"))],
    )
    assert response.status_code == 400
    assert list(uploads_dir.iterdir()) == []


def test_obter_documento(client: TestClient, documento_payload: dict[str, str]) -> None:
    criado = _criar(client, documento_payload)
    response = client.get(f"/api/documentos/{criado['_id']}")
    assert response.status_code == 200
    assert response.json() == criado


def test_obter_documento_inexistente_retorna_404(client: TestClient) -> None:
    response = client.get("/api/documentos/naoexiste")
    assert response.status_code == 404
    assert response.json() == {"error": "Documento não encontrado"}


def test_listar_documentos_ordem_decrescente_de_apresentacao(
    client: TestClient, documento_payload: dict[str, str],
) -> None:
    _criar(client, documento_payload, numero="A", dataApresentacao="2025-01-10T10:00:00")
    _criar(client, documento_payload, numero="B", dataApresentacao="2025-03-10T10:00:00")
    _criar(client, documento_payload, numero="C", dataApresentacao="2025-02-10T10:00:00")
    numeros = [d["numero"] for d in client.get("/api/documentos").json()]
    assert numeros == ["B", "C", "A"]


def test_listar_documentos_filtros_por_igualdade(
    client: TestClient, documento_payload: dict[str, str],
) -> None:
    _criar(client, documento_payload, numero="1", tipo="Moção", autor="Ana", ano="2024")
    _criar(client, documento_payload, numero="2", tipo="Moção", autor="Bruno", ano="2025")
    _criar(client, documento_payload, numero="3", tipo="Ofício", autor="Ana", ano="2025",
           situacao="Aprovado")

    def numeros(**params: str) -> set[str]:
        response = client.get("/api/documentos", params=params)
        assert response.status_code == 200
        return {d["numero"] for d in response.json()}

    assert numeros() == {"1", "2", "3"}
    assert numeros(tipo="Moção") == {"1", "2"}
    assert numeros(autor="Ana") == {"1", "3"}
    assert numeros(ano="2025") == {"2", "3"}
    assert numeros(tipo="Moção", ano="2025") == {"2"}
    assert numeros(situacao="Aprovado") == {"3"}
    assert numeros(situacao="Em Tramitação", autor="Ana") == {"1"}
    assert numeros(autor="Ninguem") == set()


def test_listar_documentos_ano_com_sufixo_usa_prefixo_numerico(
    client: TestClient, documento_payload: dict[str, str],
) -> None:
    _criar(client, documento_payload, numero="1", ano="2024")
    response = client.get("/api/documentos", params={"ano": "2024abc"})
    assert [d["numero"] for d in response.json()] == ["1"]


def test_listar_documentos_ano_nao_numerico_nao_retorna_nada(
    client: TestClient, documento_payload: dict[str, str],
) -> None:
    _criar(client, documento_payload)
    response = client.get("/api/documentos", params={"ano": "abc"})
    assert response.status_code == 200
    assert response.json() == []


def test_substituir_documento_troca_todos_os_campos(
    client: TestClient, documento_payload: dict[str, str],
) -> None:
    criado = _criar(client, {**documento_payload, "observacoes": "urgente"},
                    situacao="Aprovado")
    novo = {**documento_payload, "numero": "002", "assunto": "Novo assunto"}
    response = client.put(f"/api/documentos/{criado['_id']}", data=novo)
    assert response.status_code == 200
    data = response.json()
    assert data["_id"] == criado["_id"]
    assert data["numero"] == "002"
    assert data["assunto"] == "Novo assunto"
    # substituicao: opcional omitido some, situacao volta ao padrao
    assert data["observacoes"] is None
    assert data["situacao"] == "Em Tramitação"
    assert data["dataApresentacao"] == criado["dataApresentacao"]
    assert client.get(f"/api/documentos/{criado['_id']}").json() == data


def test_substituir_documento_sem_campo_obrigatorio_retorna_400(
    client: TestClient, documento_payload: dict[str, str],
) -> None:
    criado = _criar(client, documento_payload)
    response = client.put(f"/api/documentos/{criado['_id']}", data={"numero": "9"})
    assert response.status_code == 400
    assert "error" in response.json()


def test_substituir_documento_mantem_anexos_sem_novos_arquivos(
    client: TestClient, documento_payload: dict[str, str],
) -> None:
    criado = client.post(
        "/api/documentos",
        data=documento_payload,
        files=[("anexos", ("a.txt", b"a", "text/plain"))],
    ).json()
    response = client.put(f"/api/documentos/{criado['_id']}", data=documento_payload)
    assert response.json()["anexos"] == criado["anexos"]


def test_substituir_documento_novos_arquivos_substituem_anexos(
    client: TestClient, documento_payload: dict[str, str],
) -> None:
    criado = client.post(
        "/api/documentos",
        data=documento_payload,
        files=[("anexos", ("a.txt", b"a", "text/plain"))],
    ).json()
    response = client.put(
        f"/api/documentos/{criado['_id']}",
        data=documento_payload,
        files=[
            ("anexos", ("b.txt", b"b", "text/plain")),
            ("anexos", ("c.txt", b"c", "text/plain")),
        ],
    )
    anexos = response.json()["anexos"]
    assert len(anexos) == 2
    assert anexos[0].endswith("-b.txt")
    assert anexos[1].endswith("-c.txt")


def test_substituir_documento_inexistente_retorna_404(
    client: TestClient, documento_payload: dict[str, str],
) -> None:
    response = client.put("/api/documentos/naoexiste", data=documento_payload)
    assert response.status_code == 404
    assert response.json() == {"error": "Documento não encontrado"}


class _RepoSemEscrita(DuckDBDocumentoRepo):
    def inserir(self, documento: DocumentoLegislativo) -> DocumentoLegislativo:
        raise FalhaArmazenamento("disco cheio")

    def substituir(
        self, documento_id: str, documento: DocumentoLegislativo,
    ) -> DocumentoLegislativo | None:
        raise FalhaArmazenamento("disco cheio")


class _RepoSomeNaEscrita(DuckDBDocumentoRepo):
    """Documento removido entre a leitura e a substituicao."""

    def substituir(
        self, documento_id: str, documento: DocumentoLegislativo,
    ) -> DocumentoLegislativo | None:
        return None


def _usar_repo(client: TestClient, repo_cls: type[DuckDBDocumentoRepo]) -> None:
    def _repo(conn: duckdb.DuckDBPyConnection = Depends(get_conexao)) -> DuckDBDocumentoRepo:  # noqa: B008
        return repo_cls(conn)

    client.app.dependency_overrides[get_documento_repo] = _repo  # type: ignore[attr-defined]


def test_criar_documento_falha_no_banco_apaga_anexos(
    client: TestClient, documento_payload: dict[str, str], uploads_dir: Path,
) -> None:
    _usar_repo(client, _RepoSemEscrita)
    response = client.post(
        "/api/documentos",
        data=documento_payload,
        files=[
            ("anexos", ("a.txt", b"a", "text/plain")),
            ("anexos", ("b.txt", b"b", "text/plain")),
        ],
    )
    client.app.dependency_overrides.clear()  # type: ignore[attr-defined]
    assert response.status_code == 400
    assert response.json() == {"error": "disco cheio"}
    assert list(uploads_dir.iterdir()) == []


def test_substituir_documento_falha_no_banco_mantem_anexos_antigos(
    client: TestClient, documento_payload: dict[str, str], uploads_dir: Path,
) -> None:
    criado = client.post(
        "/api/documentos",
        data=documento_payload,
        files=[("anexos", ("a.txt", b"a", "text/plain"))],
    ).json()
    antes = sorted(uploads_dir.iterdir())

    _usar_repo(client, _RepoSemEscrita)
    response = client.put(
        f"/api/documentos/{criado['_id']}",
        data=documento_payload,
        files=[("anexos", ("b.txt", b"b", "text/plain"))],
    )
    client.app.dependency_overrides.clear()  # type: ignore[attr-defined]
    assert response.status_code == 400
    assert sorted(uploads_dir.iterdir()) == antes
    assert client.get(f"/api/documentos/{criado['_id']}").json()["anexos"] == criado["anexos"]


def test_substituir_documento_removido_durante_escrita_apaga_anexos_novos(
    client: TestClient, documento_payload: dict[str, str], uploads_dir: Path,
) -> None:
    criado = client.post("/api/documentos", data=documento_payload).json()

    _usar_repo(client, _RepoSomeNaEscrita)
    response = client.put(
        f"/api/documentos/{criado['_id']}",
        data=documento_payload,
        files=[("anexos", ("b.txt", b"b", "text/plain"))],
    )
    client.app.dependency_overrides.clear()  # type: ignore[attr-defined]
    assert response.status_code == 404
    assert list(uploads_dir.iterdir()) == []
