# gabinete/domain/agenda/entities.py
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from gabinete.domain.validacao import exigir_texto

from .value_objects import StatusEvento, TipoEvento

# Campos que a atualizacao parcial nunca pode apagar
CAMPOS_OBRIGATORIOS = ("titulo", "data_evento", "hora_inicio", "hora_fim", "local", "tipo")


@dataclass(frozen=True)
class EventoAgenda:
    titulo: str
    data_evento: datetime
    hora_inicio: str  # texto livre, ex. "14:00"
    hora_fim: str
    local: str
    tipo: TipoEvento
    descricao: str | None = None
    participantes: tuple[str, ...] = ()
    status: StatusEvento = StatusEvento.AGENDADO
    data_criacao: datetime = field(default_factory=datetime.now)
    responsavel: str | None = None
    observacoes: str | None = None
    id: str | None = None

    def __post_init__(self) -> None:
        exigir_texto(self, "titulo", "hora_inicio", "hora_fim", "local")
        if not isinstance(self.data_evento, datetime):
            raise ValueError("data_evento: campo obrigatorio")
        object.__setattr__(self, "tipo", TipoEvento(self.tipo))
        object.__setattr__(self, "status", StatusEvento(self.status))
        object.__setattr__(self, "participantes", tuple(self.participantes))
