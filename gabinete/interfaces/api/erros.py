# gabinete/interfaces/api/erros.py
"""Conversao dos erros de dominio em respostas JSON. Nada e propagado alem do request."""
from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import TypeVar

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ValidationError

from gabinete.domain.erros import (
    ErroValidacao,
    FalhaAgregacao,
    FalhaArmazenamento,
    NaoEncontrado,
)
from gabinete.infrastructure.log import log

M = TypeVar("M", bound=BaseModel)

MENSAGEM_ERRO_INTERNO = "Erro interno do servidor"


def mensagem_validacao(err: ValidationError | RequestValidationError) -> str:
    partes = []
    for e in err.errors():
        campo = ".".join(str(p) for p in e.get("loc", ()) if p not in ("body", "query"))
        partes.append(f"{campo}: {e.get('msg', 'invalido')}" if campo else str(e.get("msg")))
    return "Dados invalidos: " + "; ".join(partes)


def validar_entrada(modelo: type[M], dados: object) -> M:
    """Valida payload cru; qualquer falha vira ErroValidacao (400)."""
    try:
        return modelo.model_validate(dados)
    except ValidationError as err:
        raise ErroValidacao(mensagem_validacao(err)) from err


@contextmanager
def erros_de_escrita() -> Iterator[None]:
    """Criacao/atualizacao: entidade invalida ou falha do banco/disco -> 400."""
    try:
        yield
    except ValidationError as err:
        raise ErroValidacao(mensagem_validacao(err)) from err
    except ValueError as err:
        raise ErroValidacao(str(err)) from err
    except FalhaArmazenamento as err:
        raise ErroValidacao(err.mensagem) from err


async def _erro_validacao(request: Request, exc: Exception) -> JSONResponse:
    assert isinstance(exc, ErroValidacao)
    return JSONResponse(status_code=400, content={"error": exc.mensagem})


async def _requisicao_invalida(request: Request, exc: Exception) -> JSONResponse:
    assert isinstance(exc, RequestValidationError)
    return JSONResponse(status_code=400, content={"error": mensagem_validacao(exc)})


async def _nao_encontrado(request: Request, exc: Exception) -> JSONResponse:
    assert isinstance(exc, NaoEncontrado)
    return JSONResponse(status_code=404, content={"error": exc.mensagem})


async def _falha_agregacao(request: Request, exc: Exception) -> JSONResponse:
    assert isinstance(exc, FalhaAgregacao)
    return JSONResponse(
        status_code=500,
        content={"error": exc.mensagem, "detalhes": exc.detalhes},
    )


async def _falha_armazenamento(request: Request, exc: Exception) -> JSONResponse:
    assert isinstance(exc, FalhaArmazenamento)
    log(f"{request.method} {request.url.path} falhou: {exc.mensagem}")
    return JSONResponse(status_code=500, content={"error": exc.mensagem})


async def _erro_inesperado(request: Request, exc: Exception) -> JSONResponse:
    log(f"{request.method} {request.url.path} erro inesperado: {exc!r}")
    return JSONResponse(status_code=500, content={"error": MENSAGEM_ERRO_INTERNO})


def registrar_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ErroValidacao, _erro_validacao)
    app.add_exception_handler(RequestValidationError, _requisicao_invalida)
    app.add_exception_handler(NaoEncontrado, _nao_encontrado)
    app.add_exception_handler(FalhaAgregacao, _falha_agregacao)
    app.add_exception_handler(FalhaArmazenamento, _falha_armazenamento)
    # ultimo recurso: nunca responder 500 em texto puro
    app.add_exception_handler(Exception, _erro_inesperado)
