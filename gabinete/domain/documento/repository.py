# gabinete/domain/documento/repository.py
from __future__ import annotations

from typing import Protocol

from gabinete.domain.consulta import Consulta

from .entities import DocumentoLegislativo


class DocumentoRepository(Protocol):
    def inserir(self, documento: DocumentoLegislativo) -> DocumentoLegislativo: ...
    def buscar_por_id(self, documento_id: str) -> DocumentoLegislativo | None: ...
    def listar(self, consulta: Consulta) -> list[DocumentoLegislativo]: ...
    def substituir(
        self, documento_id: str, documento: DocumentoLegislativo,
    ) -> DocumentoLegislativo | None: ...
