# gabinete/infrastructure/repositories/duckdb_eleitor_repo.py
from __future__ import annotations

import uuid
from dataclasses import replace
from datetime import datetime

import duckdb

from gabinete.domain.consulta import Consulta
from gabinete.domain.eleitor.entities import ContagemBairro, Eleitor

from .sql import executar, traduzir

_SELECT = """
    SELECT id, nome, data_nascimento, endereco, bairro, telefone,
           email, observacoes, foto, data_cadastro
    FROM eleitor
"""

_COLUNAS = {
    "bairro": "bairro",
    "data_nascimento": "data_nascimento",
    "data_cadastro": "data_cadastro",
}
_TEMPORAIS = frozenset({"data_cadastro"})


class DuckDBEleitorRepo:
    def __init__(self, conn: duckdb.DuckDBPyConnection) -> None:
        self._conn = conn

    def inserir(self, eleitor: Eleitor) -> Eleitor:
        novo = replace(eleitor, id=uuid.uuid4().hex)
        executar(self._conn, """
            INSERT INTO eleitor
                (id, nome, data_nascimento, endereco, bairro, telefone,
                 email, observacoes, foto, data_cadastro)
            VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
        """, [
            novo.id, novo.nome, novo.data_nascimento, novo.endereco, novo.bairro,
            novo.telefone, novo.email, novo.observacoes, novo.foto, novo.data_cadastro,
        ])
        return novo

    def listar(self, consulta: Consulta) -> list[Eleitor]:
        where, params = traduzir(consulta, _COLUNAS, _TEMPORAIS)
        rows = executar(self._conn, f"{_SELECT} {where}", params)  # noqa: S608
        return [self._hidratar(r) for r in rows]

    def contar(self) -> int:
        rows = executar(self._conn, "SELECT count(*) FROM eleitor")
        return int(rows[0][0]) if rows else 0

    def contar_por_bairro(self) -> list[ContagemBairro]:
        """Maior contagem primeiro; empate desfeito pelo nome do bairro."""
        rows = executar(self._conn, """
            SELECT bairro, count(*) AS quantidade
            FROM eleitor
            GROUP BY bairro
            ORDER BY quantidade DESC, bairro ASC
        """)
        return [ContagemBairro(nome=str(r[0]), quantidade=int(r[1])) for r in rows]

    def aniversariantes_do_mes(self, mes: int) -> list[Eleitor]:
        rows = executar(
            self._conn,
            f"{_SELECT} WHERE month(data_nascimento) = ? ORDER BY data_nascimento ASC",  # noqa: S608
            [mes],
        )
        return [self._hidratar(r) for r in rows]

    def cadastrados_desde(self, limite: datetime) -> list[Eleitor]:
        rows = executar(
            self._conn,
            f"{_SELECT} WHERE data_cadastro >= ? ORDER BY data_cadastro DESC",  # noqa: S608
            [limite],
        )
        return [self._hidratar(r) for r in rows]

    def _hidratar(self, row: tuple) -> Eleitor:  # type: ignore[type-arg]
        return Eleitor(
            id=str(row[0]),
            nome=str(row[1]),
            data_nascimento=row[2],
            endereco=str(row[3]),
            bairro=str(row[4]),
            telefone=str(row[5]),
            email=row[6],
            observacoes=row[7],
            foto=row[8],
            data_cadastro=row[9],
        )
