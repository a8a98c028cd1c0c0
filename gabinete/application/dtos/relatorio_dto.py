# gabinete/application/dtos/relatorio_dto.py
from pydantic import BaseModel

from .base import CamelDTO
from .eleitor_dto import EleitorDTO


class BairroDTO(BaseModel):
    nome: str
    quantidade: int


class RelatorioEleitoresDTO(CamelDTO):
    total_eleitores: int
    por_bairro: list[BairroDTO]
    aniversariantes: list[EleitorDTO]
    novos_cadastros: list[EleitorDTO]
