# gabinete/application/dtos/documento_dto.py
from __future__ import annotations

from datetime import datetime

from pydantic import Field, field_validator

from gabinete.domain.documento.entities import DocumentoLegislativo
from gabinete.domain.documento.value_objects import SituacaoDocumento, TipoDocumento

from .base import CamelDTO, horario_local, vazio_para_none


class DocumentoEntradaDTO(CamelDTO):
    numero: str
    ano: int
    data_apresentacao: datetime | None = None
    autor: str
    assunto: str
    situacao: SituacaoDocumento | None = None  # ausente: Em Tramitação
    conteudo: str
    observacoes: str | None = None
    tipo: TipoDocumento

    @field_validator("data_apresentacao", "observacoes", "situacao", mode="before")
    @classmethod
    def _opcional_vazio(cls, valor: object) -> object:
        return vazio_para_none(valor)

    @field_validator("data_apresentacao", mode="after")
    @classmethod
    def _local(cls, valor: datetime | None) -> datetime | None:
        return horario_local(valor)

    def to_domain(
        self,
        anexos: list[str],
        data_apresentacao_atual: datetime | None = None,
        documento_id: str | None = None,
    ) -> DocumentoLegislativo:
        """Na substituicao, a data de apresentacao original e mantida se omitida."""
        data = self.data_apresentacao or data_apresentacao_atual or datetime.now()
        return DocumentoLegislativo(
            numero=self.numero,
            ano=self.ano,
            autor=self.autor,
            assunto=self.assunto,
            conteudo=self.conteudo,
            tipo=self.tipo,
            situacao=self.situacao or SituacaoDocumento.EM_TRAMITACAO,
            data_apresentacao=data,
            observacoes=self.observacoes,
            anexos=tuple(anexos),
            id=documento_id,
        )


class DocumentoDTO(CamelDTO):
    id: str = Field(alias="_id")
    numero: str
    ano: int
    data_apresentacao: datetime
    autor: str
    assunto: str
    situacao: str
    conteudo: str
    observacoes: str | None
    anexos: list[str]
    tipo: str

    @classmethod
    def from_domain(cls, d: DocumentoLegislativo) -> DocumentoDTO:
        return cls(
            id=d.id or "",
            numero=d.numero,
            ano=d.ano,
            data_apresentacao=d.data_apresentacao,
            autor=d.autor,
            assunto=d.assunto,
            situacao=d.situacao.value,
            conteudo=d.conteudo,
            observacoes=d.observacoes,
            anexos=list(d.anexos),
            tipo=d.tipo.value,
        )
