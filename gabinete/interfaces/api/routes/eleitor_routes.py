# gabinete/interfaces/api/routes/eleitor_routes.py
from dataclasses import replace

from fastapi import APIRouter, Depends, Request
from starlette.concurrency import run_in_threadpool

from gabinete.application.dtos.eleitor_dto import EleitorDTO, EleitorEntradaDTO
from gabinete.application.services.filtros import consulta_eleitores
from gabinete.infrastructure.anexos import ArmazenamentoAnexos
from gabinete.infrastructure.repositories.duckdb_eleitor_repo import DuckDBEleitorRepo
from gabinete.interfaces.api.dependencies import get_anexos, get_eleitor_repo
from gabinete.interfaces.api.erros import erros_de_escrita, validar_entrada
from gabinete.interfaces.api.formularios import arquivos, ler_corpo

router = APIRouter()


@router.post("/eleitores", status_code=201, response_model=EleitorDTO)
async def criar_eleitor(
    request: Request,
    repo: DuckDBEleitorRepo = Depends(get_eleitor_repo),  # noqa: B008
    anexos: ArmazenamentoAnexos = Depends(get_anexos),  # noqa: B008
) -> EleitorDTO:
    dados, form = await ler_corpo(request)
    entrada = validar_entrada(EleitorEntradaDTO, dados)
    with erros_de_escrita():
        eleitor = entrada.to_domain(foto=None)
        fotos = arquivos(form, "foto")[:1]  # no maximo uma; extras sao ignoradas
        async with anexos.gravados(fotos) as caminhos:
            if caminhos:
                eleitor = replace(eleitor, foto=caminhos[0])
            salvo = await run_in_threadpool(repo.inserir, eleitor)
    return EleitorDTO.from_domain(salvo)


@router.get("/eleitores", response_model=list[EleitorDTO])
def listar_eleitores(
    repo: DuckDBEleitorRepo = Depends(get_eleitor_repo),  # noqa: B008
) -> list[EleitorDTO]:
    return [EleitorDTO.from_domain(e) for e in repo.listar(consulta_eleitores())]
