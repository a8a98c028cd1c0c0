# gabinete/interfaces/api/routes/relatorio_routes.py
from datetime import datetime

from fastapi import APIRouter, Depends

from gabinete.application.dtos.relatorio_dto import RelatorioEleitoresDTO
from gabinete.application.services.parametros import ParametrosRelatorio
from gabinete.application.services.relatorio_service import RelatorioService
from gabinete.interfaces.api.dependencies import get_relatorio_service

router = APIRouter()


@router.get("/relatorios/eleitores", response_model=RelatorioEleitoresDTO)
def relatorio_eleitores(
    periodo: str | None = None,
    service: RelatorioService = Depends(get_relatorio_service),  # noqa: B008
) -> RelatorioEleitoresDTO:
    """Resultado sem garantia transacional entre as quatro consultas."""
    params = ParametrosRelatorio.resolver(periodo)
    return service.gerar(params, agora=datetime.now())
