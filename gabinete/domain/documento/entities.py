# gabinete/domain/documento/entities.py
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from gabinete.domain.validacao import exigir_texto

from .value_objects import SituacaoDocumento, TipoDocumento


@dataclass(frozen=True)
class DocumentoLegislativo:
    """Nunca removido. Atualizacao substitui todos os campos de uma vez."""
    numero: str
    ano: int
    autor: str
    assunto: str
    conteudo: str
    tipo: TipoDocumento
    situacao: SituacaoDocumento = SituacaoDocumento.EM_TRAMITACAO
    data_apresentacao: datetime = field(default_factory=datetime.now)
    observacoes: str | None = None
    anexos: tuple[str, ...] = ()  # caminhos /uploads/..., na ordem do envio
    id: str | None = None  # atribuido pelo repositorio

    def __post_init__(self) -> None:
        exigir_texto(self, "numero", "autor", "assunto", "conteudo")
        # bool e subclasse de int
        if isinstance(self.ano, bool) or not isinstance(self.ano, int):
            raise ValueError("ano: deve ser inteiro")
        object.__setattr__(self, "tipo", TipoDocumento(self.tipo))
        object.__setattr__(self, "situacao", SituacaoDocumento(self.situacao))
        object.__setattr__(self, "anexos", tuple(self.anexos))
