# gabinete/domain/validacao.py
from __future__ import annotations


def exigir_texto(entidade: object, *campos: str) -> None:
    """Rejeita texto obrigatorio vazio ou so com espacos."""
    for campo in campos:
        valor = getattr(entidade, campo)
        if not isinstance(valor, str) or not valor.strip():
            raise ValueError(f"{campo}: campo obrigatorio")
