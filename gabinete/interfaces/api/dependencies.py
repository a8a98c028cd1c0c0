# gabinete/interfaces/api/dependencies.py
from collections.abc import Generator

import duckdb
from fastapi import Depends, Request

from gabinete.application.services.relatorio_service import RelatorioService
from gabinete.infrastructure.anexos import ArmazenamentoAnexos
from gabinete.infrastructure.duckdb_store import DuckDBStore
from gabinete.infrastructure.repositories.duckdb_agenda_repo import DuckDBAgendaRepo
from gabinete.infrastructure.repositories.duckdb_documento_repo import DuckDBDocumentoRepo
from gabinete.infrastructure.repositories.duckdb_eleitor_repo import DuckDBEleitorRepo


def get_store(request: Request) -> DuckDBStore:
    return request.app.state.store  # type: ignore[no-any-return]


def get_anexos(request: Request) -> ArmazenamentoAnexos:
    return request.app.state.anexos  # type: ignore[no-any-return]


def get_conexao(
    store: DuckDBStore = Depends(get_store),  # noqa: B008
) -> Generator[duckdb.DuckDBPyConnection, None, None]:
    """Um cursor por request, fechado ao final."""
    conn = store.cursor()
    try:
        yield conn
    finally:
        conn.close()


def get_documento_repo(
    conn: duckdb.DuckDBPyConnection = Depends(get_conexao),  # noqa: B008
) -> DuckDBDocumentoRepo:
    return DuckDBDocumentoRepo(conn)


def get_agenda_repo(
    conn: duckdb.DuckDBPyConnection = Depends(get_conexao),  # noqa: B008
) -> DuckDBAgendaRepo:
    return DuckDBAgendaRepo(conn)


def get_eleitor_repo(
    conn: duckdb.DuckDBPyConnection = Depends(get_conexao),  # noqa: B008
) -> DuckDBEleitorRepo:
    return DuckDBEleitorRepo(conn)


def get_relatorio_service(
    repo: DuckDBEleitorRepo = Depends(get_eleitor_repo),  # noqa: B008
) -> RelatorioService:
    return RelatorioService(eleitor_repo=repo)
