# gabinete/domain/consulta.py
"""Predicado de listagem independente do banco.

Uma Consulta e uma conjuncao de condicoes campo/operador/valor mais uma
ordenacao opcional. Os repositorios traduzem para SQL contra uma whitelist
de colunas; nada aqui conhece DuckDB.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Operador(StrEnum):
    IGUAL = "="
    MAIOR_OU_IGUAL = ">="
    MENOR_OU_IGUAL = "<="
    MENOR = "<"


@dataclass(frozen=True)
class Condicao:
    campo: str
    operador: Operador
    valor: object  # None casa com nenhum registro (campo = NULL)


@dataclass(frozen=True)
class Ordenacao:
    campo: str
    descendente: bool = False


@dataclass(frozen=True)
class Consulta:
    condicoes: tuple[Condicao, ...] = ()
    ordenacao: Ordenacao | None = None
