# tests/domain/test_sql_traducao.py
from datetime import datetime, timezone

import pytest

from gabinete.domain.consulta import Condicao, Consulta, Operador, Ordenacao
from gabinete.domain.documento.value_objects import TipoDocumento
from gabinete.infrastructure.repositories.sql import limite_temporal, para_sql, traduzir

COLUNAS = {"tipo": "tipo", "ano": "ano", "data_evento": "data_evento", "local": "local_evento"}
TEMPORAIS = frozenset({"data_evento"})


def test_consulta_vazia_sem_where():
    assert traduzir(Consulta(), COLUNAS) == ("", [])


def test_condicoes_combinadas_com_and():
    c = Consulta((
        Condicao("tipo", Operador.IGUAL, TipoDocumento.MOCAO),
        Condicao("ano", Operador.IGUAL, 2025),
    ))
    sql, params = traduzir(c, COLUNAS)
    assert sql == "WHERE tipo = ? AND ano = ?"
    assert params == ["Moção", 2025]


def test_coluna_temporal_usa_cast():
    c = Consulta(
        (Condicao("data_evento", Operador.MAIOR_OU_IGUAL, "2026-03-01"),),
        Ordenacao("data_evento"),
    )
    sql, params = traduzir(c, COLUNAS, TEMPORAIS)
    assert sql == "WHERE data_evento >= CAST(? AS TIMESTAMP) ORDER BY data_evento ASC"
    assert params == ["2026-03-01"]


def test_campo_mapeado_para_coluna():
    c = Consulta((Condicao("local", Operador.IGUAL, "Plenario"),), Ordenacao("local", True))
    sql, _ = traduzir(c, COLUNAS)
    assert sql == "WHERE local_evento = ? ORDER BY local_evento DESC"


def test_campo_fora_da_whitelist_rejeitado():
    with pytest.raises(ValueError, match="nao filtravel"):
        traduzir(Consulta((Condicao("id; DROP", Operador.IGUAL, 1),)), COLUNAS)


def test_ordenacao_fora_da_whitelist_rejeitada():
    with pytest.raises(ValueError, match="nao ordenavel"):
        traduzir(Consulta((), Ordenacao("senha")), COLUNAS)


def test_para_sql_converte_enum_e_tupla():
    assert para_sql(TipoDocumento.OFICIO) == "Ofício"
    assert para_sql(("a", "b")) == ["a", "b"]
    agora = datetime(2026, 1, 1)
    assert para_sql(agora) is agora


def test_limite_temporal_com_offset_vira_horario_local():
    c = Consulta((Condicao("data_evento", Operador.MAIOR_OU_IGUAL, "2026-03-15T12:00:00Z"),))
    _, params = traduzir(c, COLUNAS, TEMPORAIS)
    esperado = datetime(2026, 3, 15, 12, tzinfo=timezone.utc).astimezone().replace(tzinfo=None)
    assert params == [esperado]


def test_limite_temporal_sem_offset_ou_malformado_segue_cru():
    assert limite_temporal("2026-03-15T12:00:00") == "2026-03-15T12:00:00"
    assert limite_temporal("ontem") == "ontem"
    assert limite_temporal(datetime(2026, 3, 15)) == datetime(2026, 3, 15)
