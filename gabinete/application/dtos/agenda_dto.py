# gabinete/application/dtos/agenda_dto.py
from __future__ import annotations

from datetime import datetime

from pydantic import Field, field_validator

from gabinete.domain.agenda.entities import CAMPOS_OBRIGATORIOS, EventoAgenda
from gabinete.domain.agenda.value_objects import StatusEvento, TipoEvento

from .base import CamelDTO, horario_local, vazio_para_none


class EventoEntradaDTO(CamelDTO):
    titulo: str
    data_evento: datetime
    hora_inicio: str
    hora_fim: str
    local: str
    tipo: TipoEvento
    descricao: str | None = None
    participantes: list[str] = Field(default_factory=list)
    status: StatusEvento = StatusEvento.AGENDADO
    responsavel: str | None = None
    observacoes: str | None = None

    @field_validator("descricao", "responsavel", "observacoes", mode="before")
    @classmethod
    def _opcional_vazio(cls, valor: object) -> object:
        return vazio_para_none(valor)

    @field_validator("data_evento", mode="after")
    @classmethod
    def _local(cls, valor: datetime) -> datetime:
        return horario_local(valor)  # type: ignore[return-value]

    def to_domain(self) -> EventoAgenda:
        return EventoAgenda(
            titulo=self.titulo,
            data_evento=self.data_evento,
            hora_inicio=self.hora_inicio,
            hora_fim=self.hora_fim,
            local=self.local,
            tipo=self.tipo,
            descricao=self.descricao,
            participantes=tuple(self.participantes),
            status=self.status,
            responsavel=self.responsavel,
            observacoes=self.observacoes,
        )


class EventoAtualizacaoDTO(CamelDTO):
    """Merge parcial: so os campos enviados mudam."""

    titulo: str | None = None
    data_evento: datetime | None = None
    hora_inicio: str | None = None
    hora_fim: str | None = None
    local: str | None = None
    tipo: TipoEvento | None = None
    descricao: str | None = None
    participantes: list[str] | None = None
    status: StatusEvento | None = None
    responsavel: str | None = None
    observacoes: str | None = None

    @field_validator(*CAMPOS_OBRIGATORIOS, "status", mode="before")
    @classmethod
    def _nao_apagar(cls, valor: object) -> object:
        if valor is None or (isinstance(valor, str) and not valor.strip()):
            raise ValueError("campo obrigatorio nao pode ser vazio")
        return valor

    @field_validator("participantes", mode="before")
    @classmethod
    def _lista(cls, valor: object) -> object:
        return [] if valor is None else valor

    @field_validator("data_evento", mode="after")
    @classmethod
    def _local(cls, valor: datetime | None) -> datetime | None:
        return horario_local(valor)

    def campos(self) -> dict[str, object]:
        return self.model_dump(exclude_unset=True)


class EventoDTO(CamelDTO):
    id: str = Field(alias="_id")
    titulo: str
    data_evento: datetime
    hora_inicio: str
    hora_fim: str
    local: str
    tipo: str
    descricao: str | None
    participantes: list[str]
    status: str
    data_criacao: datetime
    responsavel: str | None
    observacoes: str | None

    @classmethod
    def from_domain(cls, e: EventoAgenda) -> EventoDTO:
        return cls(
            id=e.id or "",
            titulo=e.titulo,
            data_evento=e.data_evento,
            hora_inicio=e.hora_inicio,
            hora_fim=e.hora_fim,
            local=e.local,
            tipo=e.tipo.value,
            descricao=e.descricao,
            participantes=list(e.participantes),
            status=e.status.value,
            data_criacao=e.data_criacao,
            responsavel=e.responsavel,
            observacoes=e.observacoes,
        )
