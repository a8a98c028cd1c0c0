# gabinete/infrastructure/repositories/sql.py
"""Traducao de Consulta para SQL parametrizado + captura de erros do DuckDB."""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from datetime import datetime
from enum import Enum

import duckdb

from gabinete.domain.consulta import Consulta
from gabinete.domain.datas import para_horario_local
from gabinete.domain.erros import FalhaArmazenamento


def executar(
    conn: duckdb.DuckDBPyConnection,
    sql: str,
    params: Sequence[object] = (),
) -> list[tuple]:  # type: ignore[type-arg]
    """Executa e materializa. Todo duckdb.Error vira FalhaArmazenamento."""
    try:
        return conn.execute(sql, list(params)).fetchall()
    except duckdb.Error as err:
        raise FalhaArmazenamento(str(err)) from err


def para_sql(valor: object) -> object:
    if isinstance(valor, Enum):
        return valor.value
    if isinstance(valor, tuple):
        return list(valor)
    return valor


def limite_temporal(valor: object) -> object:
    """Limite com offset (ex.: ...Z) vira horario local, como nas gravacoes.

    Texto sem offset ou malformado segue cru para o CAST do banco.
    """
    if not isinstance(valor, str):
        return valor
    try:
        lido = datetime.fromisoformat(valor)
    except ValueError:
        return valor
    if lido.tzinfo is None:
        return valor
    return para_horario_local(lido)


def traduzir(
    consulta: Consulta,
    colunas: Mapping[str, str],
    temporais: frozenset[str] = frozenset(),
) -> tuple[str, list[object]]:
    """WHERE/ORDER BY para a Consulta. Campo fora da whitelist e erro de programacao.

    Colunas temporais comparam via CAST(? AS TIMESTAMP): datas em texto cru
    sao interpretadas pelo banco, e data malformada falha no banco. Limites
    com offset sao antes convertidos para horario local.
    """
    conditions: list[str] = []
    params: list[object] = []

    for c in consulta.condicoes:
        if c.campo not in colunas:
            raise ValueError(f"Campo nao filtravel: {c.campo}")
        valor = para_sql(c.valor)
        placeholder = "?"
        if c.campo in temporais:
            placeholder = "CAST(? AS TIMESTAMP)"
            valor = limite_temporal(valor)
        conditions.append(f"{colunas[c.campo]} {c.operador.value} {placeholder}")
        params.append(valor)

    sql = ""
    if conditions:
        sql = "WHERE " + " AND ".join(conditions)

    if consulta.ordenacao is not None:
        campo = consulta.ordenacao.campo
        if campo not in colunas:
            raise ValueError(f"Campo nao ordenavel: {campo}")
        direcao = "DESC" if consulta.ordenacao.descendente else "ASC"
        sql += f" ORDER BY {colunas[campo]} {direcao}"

    return sql, params
