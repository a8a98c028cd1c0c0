# gabinete/interfaces/api/routes/documento_routes.py
from dataclasses import replace

from fastapi import APIRouter, Depends, Request
from starlette.concurrency import run_in_threadpool

from gabinete.application.dtos.documento_dto import DocumentoDTO, DocumentoEntradaDTO
from gabinete.application.services.filtros import consulta_documentos
from gabinete.application.services.parametros import ParametrosDocumento
from gabinete.domain.erros import NaoEncontrado
from gabinete.infrastructure.anexos import ArmazenamentoAnexos
from gabinete.infrastructure.repositories.duckdb_documento_repo import DuckDBDocumentoRepo
from gabinete.interfaces.api.dependencies import get_anexos, get_documento_repo
from gabinete.interfaces.api.erros import erros_de_escrita, validar_entrada
from gabinete.interfaces.api.formularios import arquivos, ler_corpo

router = APIRouter()

NAO_ENCONTRADO = "Documento não encontrado"


@router.post("/documentos", status_code=201, response_model=DocumentoDTO)
async def criar_documento(
    request: Request,
    repo: DuckDBDocumentoRepo = Depends(get_documento_repo),  # noqa: B008
    anexos: ArmazenamentoAnexos = Depends(get_anexos),  # noqa: B008
) -> DocumentoDTO:
    dados, form = await ler_corpo(request)
    entrada = validar_entrada(DocumentoEntradaDTO, dados)
    with erros_de_escrita():
        # valida antes de gravar qualquer arquivo
        documento = entrada.to_domain(anexos=[])
        async with anexos.gravados(arquivos(form, "anexos")) as caminhos:
            salvo = await run_in_threadpool(
                repo.inserir, replace(documento, anexos=tuple(caminhos)),
            )
    return DocumentoDTO.from_domain(salvo)


@router.get("/documentos", response_model=list[DocumentoDTO])
def listar_documentos(
    tipo: str | None = None,
    autor: str | None = None,
    situacao: str | None = None,
    ano: str | None = None,
    repo: DuckDBDocumentoRepo = Depends(get_documento_repo),  # noqa: B008
) -> list[DocumentoDTO]:
    params = ParametrosDocumento.resolver(tipo=tipo, autor=autor, situacao=situacao, ano=ano)
    return [DocumentoDTO.from_domain(d) for d in repo.listar(consulta_documentos(params))]


@router.get("/documentos/{documento_id}", response_model=DocumentoDTO)
def obter_documento(
    documento_id: str,
    repo: DuckDBDocumentoRepo = Depends(get_documento_repo),  # noqa: B008
) -> DocumentoDTO:
    documento = repo.buscar_por_id(documento_id)
    if documento is None:
        raise NaoEncontrado(NAO_ENCONTRADO)
    return DocumentoDTO.from_domain(documento)


@router.put("/documentos/{documento_id}", response_model=DocumentoDTO)
async def substituir_documento(
    documento_id: str,
    request: Request,
    repo: DuckDBDocumentoRepo = Depends(get_documento_repo),  # noqa: B008
    anexos: ArmazenamentoAnexos = Depends(get_anexos),  # noqa: B008
) -> DocumentoDTO:
    """Substituicao completa. Anexos so mudam quando novos arquivos sao enviados."""
    dados, form = await ler_corpo(request)
    entrada = validar_entrada(DocumentoEntradaDTO, dados)

    atual = await run_in_threadpool(repo.buscar_por_id, documento_id)
    if atual is None:
        raise NaoEncontrado(NAO_ENCONTRADO)

    with erros_de_escrita():
        documento = entrada.to_domain(
            anexos=list(atual.anexos),
            data_apresentacao_atual=atual.data_apresentacao,
        )
        async with anexos.gravados(arquivos(form, "anexos")) as caminhos:
            if caminhos:
                documento = replace(documento, anexos=tuple(caminhos))
            salvo = await run_in_threadpool(repo.substituir, documento_id, documento)
            # removido entre a leitura e a escrita: descarta os arquivos novos
            if salvo is None:
                raise NaoEncontrado(NAO_ENCONTRADO)

    return DocumentoDTO.from_domain(salvo)
