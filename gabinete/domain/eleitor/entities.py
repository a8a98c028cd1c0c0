# gabinete/domain/eleitor/entities.py
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime

from gabinete.domain.validacao import exigir_texto


@dataclass(frozen=True)
class Eleitor:
    """Cadastrado uma vez, com no maximo uma foto. Sem update nem delete."""
    nome: str
    data_nascimento: date
    endereco: str
    bairro: str
    telefone: str
    email: str | None = None
    observacoes: str | None = None
    foto: str | None = None
    data_cadastro: datetime = field(default_factory=datetime.now)
    id: str | None = None

    def __post_init__(self) -> None:
        exigir_texto(self, "nome", "endereco", "bairro", "telefone")
        if not isinstance(self.data_nascimento, date):
            raise ValueError("data_nascimento: campo obrigatorio")


@dataclass(frozen=True)
class ContagemBairro:
    nome: str
    quantidade: int
