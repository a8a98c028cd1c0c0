# gabinete/interfaces/api/routes/agenda_routes.py
from datetime import datetime

from fastapi import APIRouter, Depends, Query, Response

from gabinete.application.dtos.agenda_dto import (
    EventoAtualizacaoDTO,
    EventoDTO,
    EventoEntradaDTO,
)
from gabinete.application.services.filtros import consulta_agenda, consulta_eventos_do_dia
from gabinete.application.services.parametros import ParametrosAgenda
from gabinete.domain.erros import NaoEncontrado
from gabinete.infrastructure.repositories.duckdb_agenda_repo import DuckDBAgendaRepo
from gabinete.interfaces.api.dependencies import get_agenda_repo
from gabinete.interfaces.api.erros import erros_de_escrita

router = APIRouter()

NAO_ENCONTRADO = "Evento não encontrado"


@router.post("/agenda", status_code=201, response_model=EventoDTO)
def criar_evento(
    entrada: EventoEntradaDTO,
    repo: DuckDBAgendaRepo = Depends(get_agenda_repo),  # noqa: B008
) -> EventoDTO:
    with erros_de_escrita():
        evento = repo.inserir(entrada.to_domain())
    return EventoDTO.from_domain(evento)


@router.get("/agenda", response_model=list[EventoDTO])
def listar_eventos(
    tipo: str | None = None,
    status: str | None = None,
    data_inicio: str | None = Query(default=None, alias="dataInicio"),
    data_fim: str | None = Query(default=None, alias="dataFim"),
    repo: DuckDBAgendaRepo = Depends(get_agenda_repo),  # noqa: B008
) -> list[EventoDTO]:
    params = ParametrosAgenda.resolver(
        tipo=tipo, status=status, data_inicio=data_inicio, data_fim=data_fim,
    )
    return [EventoDTO.from_domain(e) for e in repo.listar(consulta_agenda(params))]


# Antes de /agenda/{evento_id} por clareza; os paths nao conflitam
@router.get("/agenda/eventos/hoje", response_model=list[EventoDTO])
def eventos_de_hoje(
    repo: DuckDBAgendaRepo = Depends(get_agenda_repo),  # noqa: B008
) -> list[EventoDTO]:
    consulta = consulta_eventos_do_dia(datetime.now())
    return [EventoDTO.from_domain(e) for e in repo.listar(consulta)]


@router.get("/agenda/{evento_id}", response_model=EventoDTO)
def obter_evento(
    evento_id: str,
    repo: DuckDBAgendaRepo = Depends(get_agenda_repo),  # noqa: B008
) -> EventoDTO:
    evento = repo.buscar_por_id(evento_id)
    if evento is None:
        raise NaoEncontrado(NAO_ENCONTRADO)
    return EventoDTO.from_domain(evento)


@router.put("/agenda/{evento_id}", response_model=EventoDTO)
def atualizar_evento(
    evento_id: str,
    entrada: EventoAtualizacaoDTO,
    repo: DuckDBAgendaRepo = Depends(get_agenda_repo),  # noqa: B008
) -> EventoDTO:
    """Merge parcial: campos ausentes no corpo ficam como estao."""
    with erros_de_escrita():
        evento = repo.atualizar_parcial(evento_id, entrada.campos())
    if evento is None:
        raise NaoEncontrado(NAO_ENCONTRADO)
    return EventoDTO.from_domain(evento)


@router.delete("/agenda/{evento_id}", status_code=204)
def remover_evento(
    evento_id: str,
    repo: DuckDBAgendaRepo = Depends(get_agenda_repo),  # noqa: B008
) -> Response:
    # id inexistente tambem responde 204
    repo.remover(evento_id)
    return Response(status_code=204)
