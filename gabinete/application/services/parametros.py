# gabinete/application/services/parametros.py
"""Resolucao de query strings em valores tipados, uma vez no inicio do handler.

Regras de fallback:
  - texto vazio conta como parametro ausente;
  - inteiros usam o prefixo numerico ("2024abc" -> 2024, "abc" -> None);
  - periodo do relatorio: ausente, nao numerico ou 0 -> 30 dias.
"""
from __future__ import annotations

import re
from dataclasses import dataclass

PERIODO_PADRAO_DIAS = 30

_PREFIXO_INTEIRO = re.compile(r"\s*([+-]?\d+)")


def parse_int(raw: str | None) -> int | None:
    if raw is None:
        return None
    m = _PREFIXO_INTEIRO.match(raw)
    return int(m.group(1)) if m else None


def _texto(raw: str | None) -> str | None:
    return raw if raw else None


@dataclass(frozen=True)
class ParametrosDocumento:
    tipo: str | None = None
    autor: str | None = None
    situacao: str | None = None
    ano: int | None = None
    ano_invalido: bool = False  # informado mas nao numerico: nada casa

    @classmethod
    def resolver(
        cls,
        tipo: str | None = None,
        autor: str | None = None,
        situacao: str | None = None,
        ano: str | None = None,
    ) -> ParametrosDocumento:
        ano_int = parse_int(ano) if ano else None
        return cls(
            tipo=_texto(tipo),
            autor=_texto(autor),
            situacao=_texto(situacao),
            ano=ano_int,
            ano_invalido=bool(ano) and ano_int is None,
        )


@dataclass(frozen=True)
class ParametrosAgenda:
    tipo: str | None = None
    status: str | None = None
    data_inicio: str | None = None  # cru: o parser de datas e do banco
    data_fim: str | None = None

    @classmethod
    def resolver(
        cls,
        tipo: str | None = None,
        status: str | None = None,
        data_inicio: str | None = None,
        data_fim: str | None = None,
    ) -> ParametrosAgenda:
        return cls(
            tipo=_texto(tipo),
            status=_texto(status),
            data_inicio=_texto(data_inicio),
            data_fim=_texto(data_fim),
        )


@dataclass(frozen=True)
class ParametrosRelatorio:
    periodo_dias: int = PERIODO_PADRAO_DIAS

    @classmethod
    def resolver(cls, periodo: str | None = None) -> ParametrosRelatorio:
        return cls(periodo_dias=parse_int(periodo) or PERIODO_PADRAO_DIAS)
