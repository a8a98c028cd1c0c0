# gabinete/domain/erros.py
from __future__ import annotations


class ErroGabinete(Exception):
    """Base de todos os erros convertidos em resposta HTTP na borda da API."""

    def __init__(self, mensagem: str) -> None:
        super().__init__(mensagem)
        self.mensagem = mensagem


class ErroValidacao(ErroGabinete):
    """Campo obrigatorio ausente, valor fora do enum ou falha de escrita."""


class NaoEncontrado(ErroGabinete):
    """Busca por id sem registro correspondente."""


class FalhaArmazenamento(ErroGabinete):
    """Erro inesperado do banco ou do disco de anexos."""


class FalhaAgregacao(ErroGabinete):
    """Uma das consultas do relatorio composto falhou. Sem resultado parcial."""

    def __init__(self, mensagem: str, causa: BaseException) -> None:
        super().__init__(mensagem)
        self.causa = causa

    @property
    def detalhes(self) -> str:
        if isinstance(self.causa, ErroGabinete):
            return self.causa.mensagem
        return str(self.causa)
