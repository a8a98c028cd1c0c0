# gabinete/domain/eleitor/repository.py
from __future__ import annotations

from datetime import datetime
from typing import Protocol

from gabinete.domain.consulta import Consulta

from .entities import ContagemBairro, Eleitor


class EleitorRepository(Protocol):
    def inserir(self, eleitor: Eleitor) -> Eleitor: ...
    def listar(self, consulta: Consulta) -> list[Eleitor]: ...
    def contar(self) -> int: ...
    def contar_por_bairro(self) -> list[ContagemBairro]: ...
    def aniversariantes_do_mes(self, mes: int) -> list[Eleitor]: ...
    def cadastrados_desde(self, limite: datetime) -> list[Eleitor]: ...
