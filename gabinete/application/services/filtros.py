# gabinete/application/services/filtros.py
"""Construcao de consultas de listagem. Funcoes puras, zero IO.

So vira condicao o parametro que foi de fato informado; sem parametros a
consulta casa todos os registros.
"""
from __future__ import annotations

from datetime import datetime

from gabinete.domain.consulta import Condicao, Consulta, Operador, Ordenacao
from gabinete.domain.datas import inicio_do_dia, inicio_do_dia_seguinte

from .parametros import ParametrosAgenda, ParametrosDocumento


def consulta_documentos(params: ParametrosDocumento) -> Consulta:
    condicoes: list[Condicao] = []
    if params.tipo:
        condicoes.append(Condicao("tipo", Operador.IGUAL, params.tipo))
    if params.autor:
        condicoes.append(Condicao("autor", Operador.IGUAL, params.autor))
    if params.situacao:
        condicoes.append(Condicao("situacao", Operador.IGUAL, params.situacao))
    if params.ano is not None:
        condicoes.append(Condicao("ano", Operador.IGUAL, params.ano))
    elif params.ano_invalido:
        condicoes.append(Condicao("ano", Operador.IGUAL, None))
    return Consulta(tuple(condicoes), Ordenacao("data_apresentacao", descendente=True))


def consulta_agenda(params: ParametrosAgenda) -> Consulta:
    condicoes: list[Condicao] = []
    if params.tipo:
        condicoes.append(Condicao("tipo", Operador.IGUAL, params.tipo))
    if params.status:
        condicoes.append(Condicao("status", Operador.IGUAL, params.status))
    if params.data_inicio:
        condicoes.append(Condicao("data_evento", Operador.MAIOR_OU_IGUAL, params.data_inicio))
    if params.data_fim:
        condicoes.append(Condicao("data_evento", Operador.MENOR_OU_IGUAL, params.data_fim))
    return Consulta(tuple(condicoes), Ordenacao("data_evento"))


def consulta_eventos_do_dia(agora: datetime) -> Consulta:
    """Janela [meia-noite local, meia-noite seguinte), por hora de inicio."""
    return Consulta(
        (
            Condicao("data_evento", Operador.MAIOR_OU_IGUAL, inicio_do_dia(agora)),
            Condicao("data_evento", Operador.MENOR, inicio_do_dia_seguinte(agora)),
        ),
        Ordenacao("hora_inicio"),
    )


def consulta_eleitores() -> Consulta:
    return Consulta((), Ordenacao("data_cadastro", descendente=True))
