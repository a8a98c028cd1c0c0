# gabinete/infrastructure/duckdb_store.py
from __future__ import annotations

from pathlib import Path

import duckdb

from gabinete.domain.erros import FalhaArmazenamento

from .log import log

SCHEMA_PATH = Path(__file__).parent / "schema.sql"


class DuckDBStore:
    """Handle unico do banco: aberto no startup, fechado no shutdown.

    Cada request usa o proprio cursor (conexao sobre o mesmo banco); a
    conexao raiz nunca e compartilhada entre threads.
    """

    def __init__(self, path: str) -> None:
        self._path = path
        self._conn: duckdb.DuckDBPyConnection | None = None

    @property
    def aberto(self) -> bool:
        return self._conn is not None

    def abrir(self) -> None:
        if self._conn is not None:
            return
        try:
            conn = duckdb.connect(self._path)
            conn.execute(SCHEMA_PATH.read_text(encoding="utf-8"))
        except duckdb.Error as err:
            raise FalhaArmazenamento(f"Erro ao abrir banco {self._path}: {err}") from err
        self._conn = conn
        log(f"Banco aberto: {self._path}")

    def fechar(self) -> None:
        if self._conn is None:
            return
        self._conn.close()
        self._conn = None
        log(f"Banco fechado: {self._path}")

    def cursor(self) -> duckdb.DuckDBPyConnection:
        if self._conn is None:
            raise FalhaArmazenamento("Banco nao inicializado")
        return self._conn.cursor()
