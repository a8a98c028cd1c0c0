# gabinete/infrastructure/repositories/duckdb_agenda_repo.py
from __future__ import annotations

import uuid
from dataclasses import replace

import duckdb

from gabinete.domain.agenda.entities import EventoAgenda
from gabinete.domain.agenda.value_objects import StatusEvento, TipoEvento
from gabinete.domain.consulta import Consulta

from .sql import executar, para_sql, traduzir

# campo do dominio -> coluna
_COLUNAS = {
    "titulo": "titulo",
    "data_evento": "data_evento",
    "hora_inicio": "hora_inicio",
    "hora_fim": "hora_fim",
    "local": "local_evento",
    "tipo": "tipo",
    "descricao": "descricao",
    "participantes": "participantes",
    "status": "status",
    "data_criacao": "data_criacao",
    "responsavel": "responsavel",
    "observacoes": "observacoes",
}
_TEMPORAIS = frozenset({"data_evento", "data_criacao"})
_LISTAS = frozenset({"participantes"})

_RETORNO = "id, " + ", ".join(_COLUNAS.values())
_SELECT = f"SELECT {_RETORNO} FROM evento_agenda"


def _placeholder(campo: str) -> str:
    return "CAST(? AS VARCHAR[])" if campo in _LISTAS else "?"


class DuckDBAgendaRepo:
    def __init__(self, conn: duckdb.DuckDBPyConnection) -> None:
        self._conn = conn

    def inserir(self, evento: EventoAgenda) -> EventoAgenda:
        novo = replace(evento, id=uuid.uuid4().hex)
        valores = [novo.id] + [getattr(novo, campo) for campo in _COLUNAS]
        placeholders = ", ".join(["?"] + [_placeholder(campo) for campo in _COLUNAS])
        executar(
            self._conn,
            f"INSERT INTO evento_agenda ({_RETORNO}) VALUES ({placeholders})",  # noqa: S608
            [para_sql(v) for v in valores],
        )
        return novo

    def buscar_por_id(self, evento_id: str) -> EventoAgenda | None:
        rows = executar(self._conn, f"{_SELECT} WHERE id = ?", [evento_id])  # noqa: S608
        return self._hidratar(rows[0]) if rows else None

    def listar(self, consulta: Consulta) -> list[EventoAgenda]:
        where, params = traduzir(consulta, _COLUNAS, _TEMPORAIS)
        rows = executar(self._conn, f"{_SELECT} {where}", params)  # noqa: S608
        return [self._hidratar(r) for r in rows]

    def atualizar_parcial(
        self,
        evento_id: str,
        campos: dict[str, object],
    ) -> EventoAgenda | None:
        """SET apenas dos campos informados, num unico UPDATE. None se o id nao existe."""
        if not campos:
            return self.buscar_por_id(evento_id)

        sets: list[str] = []
        params: list[object] = []
        for campo, valor in campos.items():
            if campo not in _COLUNAS:
                raise ValueError(f"Campo nao atualizavel: {campo}")
            sets.append(f"{_COLUNAS[campo]} = {_placeholder(campo)}")
            params.append(para_sql(valor))
        params.append(evento_id)

        rows = executar(self._conn, f"""
            UPDATE evento_agenda SET {", ".join(sets)}
            WHERE id = ?
            RETURNING {_RETORNO}
        """, params)  # noqa: S608
        return self._hidratar(rows[0]) if rows else None

    def remover(self, evento_id: str) -> None:
        executar(self._conn, "DELETE FROM evento_agenda WHERE id = ?", [evento_id])

    def _hidratar(self, row: tuple) -> EventoAgenda:  # type: ignore[type-arg]
        return EventoAgenda(
            id=str(row[0]),
            titulo=str(row[1]),
            data_evento=row[2],
            hora_inicio=str(row[3]),
            hora_fim=str(row[4]),
            local=str(row[5]),
            tipo=TipoEvento(row[6]),
            descricao=row[7],
            participantes=tuple(row[8] or ()),
            status=StatusEvento(row[9]),
            data_criacao=row[10],
            responsavel=row[11],
            observacoes=row[12],
        )
