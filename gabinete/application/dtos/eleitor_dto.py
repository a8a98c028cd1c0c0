# gabinete/application/dtos/eleitor_dto.py
from __future__ import annotations

from datetime import date, datetime

from pydantic import Field, field_validator

from gabinete.domain.eleitor.entities import Eleitor

from .base import CamelDTO, vazio_para_none


class EleitorEntradaDTO(CamelDTO):
    nome: str
    data_nascimento: date
    endereco: str
    bairro: str
    telefone: str
    email: str | None = None
    observacoes: str | None = None

    @field_validator("email", "observacoes", mode="before")
    @classmethod
    def _opcional_vazio(cls, valor: object) -> object:
        return vazio_para_none(valor)

    def to_domain(self, foto: str | None) -> Eleitor:
        return Eleitor(
            nome=self.nome,
            data_nascimento=self.data_nascimento,
            endereco=self.endereco,
            bairro=self.bairro,
            telefone=self.telefone,
            email=self.email,
            observacoes=self.observacoes,
            foto=foto,
        )


class EleitorDTO(CamelDTO):
    id: str = Field(alias="_id")
    nome: str
    data_nascimento: date
    endereco: str
    bairro: str
    telefone: str
    email: str | None
    observacoes: str | None
    foto: str | None
    data_cadastro: datetime

    @classmethod
    def from_domain(cls, e: Eleitor) -> EleitorDTO:
        return cls(
            id=e.id or "",
            nome=e.nome,
            data_nascimento=e.data_nascimento,
            endereco=e.endereco,
            bairro=e.bairro,
            telefone=e.telefone,
            email=e.email,
            observacoes=e.observacoes,
            foto=e.foto,
            data_cadastro=e.data_cadastro,
        )
