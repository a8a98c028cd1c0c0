# gabinete/infrastructure/repositories/duckdb_documento_repo.py
from __future__ import annotations

import uuid
from dataclasses import replace

import duckdb

from gabinete.domain.consulta import Consulta
from gabinete.domain.documento.entities import DocumentoLegislativo
from gabinete.domain.documento.value_objects import SituacaoDocumento, TipoDocumento

from .sql import executar, para_sql, traduzir

_SELECT = """
    SELECT id, numero, ano, data_apresentacao, autor, assunto,
           situacao, conteudo, observacoes, anexos, tipo
    FROM documento_legislativo
"""

_COLUNAS = {
    "tipo": "tipo",
    "autor": "autor",
    "situacao": "situacao",
    "ano": "ano",
    "data_apresentacao": "data_apresentacao",
}
_TEMPORAIS = frozenset({"data_apresentacao"})


class DuckDBDocumentoRepo:
    def __init__(self, conn: duckdb.DuckDBPyConnection) -> None:
        self._conn = conn

    def inserir(self, documento: DocumentoLegislativo) -> DocumentoLegislativo:
        novo = replace(documento, id=uuid.uuid4().hex)
        executar(self._conn, """
            INSERT INTO documento_legislativo
                (id, numero, ano, data_apresentacao, autor, assunto,
                 situacao, conteudo, observacoes, anexos, tipo)
            VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, CAST(? AS VARCHAR[]), ?)
        """, [para_sql(v) for v in (
            novo.id, novo.numero, novo.ano, novo.data_apresentacao, novo.autor,
            novo.assunto, novo.situacao, novo.conteudo, novo.observacoes,
            novo.anexos, novo.tipo,
        )])
        return novo

    def buscar_por_id(self, documento_id: str) -> DocumentoLegislativo | None:
        rows = executar(self._conn, _SELECT + " WHERE id = ?", [documento_id])
        return self._hidratar(rows[0]) if rows else None

    def listar(self, consulta: Consulta) -> list[DocumentoLegislativo]:
        where, params = traduzir(consulta, _COLUNAS, _TEMPORAIS)
        rows = executar(self._conn, f"{_SELECT} {where}", params)  # noqa: S608
        return [self._hidratar(r) for r in rows]

    def substituir(
        self,
        documento_id: str,
        documento: DocumentoLegislativo,
    ) -> DocumentoLegislativo | None:
        """Reescreve todos os campos. None se o id nao existe."""
        rows = executar(self._conn, """
            UPDATE documento_legislativo
            SET numero = ?, ano = ?, data_apresentacao = ?, autor = ?, assunto = ?,
                situacao = ?, conteudo = ?, observacoes = ?,
                anexos = CAST(? AS VARCHAR[]), tipo = ?
            WHERE id = ?
            RETURNING id, numero, ano, data_apresentacao, autor, assunto,
                      situacao, conteudo, observacoes, anexos, tipo
        """, [para_sql(v) for v in (
            documento.numero, documento.ano, documento.data_apresentacao,
            documento.autor, documento.assunto, documento.situacao,
            documento.conteudo, documento.observacoes, documento.anexos,
            documento.tipo, documento_id,
        )])
        return self._hidratar(rows[0]) if rows else None

    def _hidratar(self, row: tuple) -> DocumentoLegislativo:  # type: ignore[type-arg]
        return DocumentoLegislativo(
            id=str(row[0]),
            numero=str(row[1]),
            ano=int(row[2]),
            data_apresentacao=row[3],
            autor=str(row[4]),
            assunto=str(row[5]),
            situacao=SituacaoDocumento(row[6]),
            conteudo=str(row[7]),
            observacoes=str(row[8]) if row[8] is not None else None,
            anexos=tuple(row[9] or ()),
            tipo=TipoDocumento(row[10]),
        )
