# gabinete/application/services/relatorio_service.py
"""Relatorio composto de eleitores: quatro leituras independentes da mesma
colecao, montadas em um unico payload.

ADR: Sem snapshot. As quatro consultas nao rodam numa transacao, entao uma
escrita concorrente pode deixar o total inconsistente com as listas. Aceito
como limitacao documentada; nao ha correcao silenciosa aqui.
"""
from __future__ import annotations

from datetime import datetime, timedelta

from gabinete.domain.eleitor.repository import EleitorRepository
from gabinete.domain.erros import FalhaAgregacao
from gabinete.infrastructure.log import log

from ..dtos.eleitor_dto import EleitorDTO
from ..dtos.relatorio_dto import BairroDTO, RelatorioEleitoresDTO
from .parametros import ParametrosRelatorio

MENSAGEM_FALHA = "Erro ao gerar relatório"


class RelatorioService:
    def __init__(self, eleitor_repo: EleitorRepository) -> None:
        self._eleitor_repo = eleitor_repo

    def gerar(self, params: ParametrosRelatorio, agora: datetime) -> RelatorioEleitoresDTO:
        """Tudo ou nada: qualquer subconsulta que falhe aborta o relatorio."""
        log(f"Gerando relatorio de eleitores (periodo={params.periodo_dias} dias)")

        try:
            # periodo fora do alcance de datetime (OverflowError) tambem aborta
            data_limite = agora - timedelta(days=params.periodo_dias)
            log(f"Data limite: {data_limite.isoformat(timespec='seconds')}")

            total = self._eleitor_repo.contar()
            log(f"Total de eleitores: {total}")

            por_bairro = self._eleitor_repo.contar_por_bairro()
            log(f"Bairros: {len(por_bairro)}")

            aniversariantes = self._eleitor_repo.aniversariantes_do_mes(agora.month)
            log(f"Aniversariantes: {len(aniversariantes)}")

            novos = self._eleitor_repo.cadastrados_desde(data_limite)
            log(f"Novos cadastros: {len(novos)}")
        except Exception as err:
            log(f"Erro ao gerar relatorio: {err!r}")
            raise FalhaAgregacao(MENSAGEM_FALHA, err) from err

        return RelatorioEleitoresDTO(
            total_eleitores=total,
            por_bairro=[BairroDTO(nome=b.nome, quantidade=b.quantidade) for b in por_bairro],
            aniversariantes=[EleitorDTO.from_domain(e) for e in aniversariantes],
            novos_cadastros=[EleitorDTO.from_domain(e) for e in novos],
        )
