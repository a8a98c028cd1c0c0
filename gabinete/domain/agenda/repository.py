# gabinete/domain/agenda/repository.py
from __future__ import annotations

from typing import Protocol

from gabinete.domain.consulta import Consulta

from .entities import EventoAgenda


class AgendaRepository(Protocol):
    def inserir(self, evento: EventoAgenda) -> EventoAgenda: ...
    def buscar_por_id(self, evento_id: str) -> EventoAgenda | None: ...
    def listar(self, consulta: Consulta) -> list[EventoAgenda]: ...
    def atualizar_parcial(
        self, evento_id: str, campos: dict[str, object],
    ) -> EventoAgenda | None: ...
    def remover(self, evento_id: str) -> None: ...
