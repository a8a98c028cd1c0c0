# gabinete/infrastructure/anexos.py
from __future__ import annotations

import time
import uuid
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

from starlette.concurrency import run_in_threadpool
from starlette.datastructures import UploadFile

from gabinete.domain.erros import FalhaArmazenamento
from gabinete.infrastructure.log import log

PREFIXO_URL = "/uploads"


def nome_gerado(original: str, agora_ms: int | None = None) -> str:
    """<epoch ms>-<8 hex>-<nome original>. O sufixo aleatorio evita colisao
    entre envios no mesmo milissegundo."""
    ms = agora_ms if agora_ms is not None else int(time.time() * 1000)
    # descarta diretorios vindos do cliente
    base = Path(original.replace("\\", "/")).name or "arquivo"
    return f"{ms}-{uuid.uuid4().hex[:8]}-{base}"


class ArmazenamentoAnexos:
    """Grava uploads em disco e devolve o caminho publico /uploads/<nome>."""

    def __init__(self, diretorio: Path) -> None:
        self._diretorio = diretorio

    @property
    def diretorio(self) -> Path:
        return self._diretorio

    def preparar(self) -> None:
        self._diretorio.mkdir(parents=True, exist_ok=True)

    def _gravar(self, nome: str, conteudo: bytes) -> None:
        try:
            (self._diretorio / nome).write_bytes(conteudo)
        except OSError as err:
            raise FalhaArmazenamento(f"Erro ao gravar anexo: {err}") from err

    def remover(self, caminhos: list[str]) -> None:
        for caminho in caminhos:
            arquivo = self._diretorio / caminho.removeprefix(f"{PREFIXO_URL}/")
            try:
                arquivo.unlink(missing_ok=True)
            except OSError as err:
                log(f"Anexo orfao nao removido: {arquivo} ({err})")

    async def salvar(self, arquivo: UploadFile) -> str:
        nome = nome_gerado(arquivo.filename or "arquivo")
        conteudo = await arquivo.read()
        await run_in_threadpool(self._gravar, nome, conteudo)
        return f"{PREFIXO_URL}/{nome}"

    @asynccontextmanager
    async def gravados(self, arquivos: list[UploadFile]) -> AsyncIterator[list[str]]:
        """Grava os arquivos e entrega os caminhos. Se o bloco falhar (ou a
        propria gravacao), os arquivos ja gravados sao apagados."""
        caminhos: list[str] = []
        try:
            for arquivo in arquivos:
                caminhos.append(await self.salvar(arquivo))
            yield caminhos
        except Exception:
            await run_in_threadpool(self.remover, caminhos)
            raise
