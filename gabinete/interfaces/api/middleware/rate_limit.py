# gabinete/interfaces/api/middleware/rate_limit.py
from __future__ import annotations

import time
from collections import deque

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from gabinete.infrastructure.config import get_settings

JANELA_SEGUNDOS = 60.0
MENSAGEM_LIMITE = "Limite de requisicoes excedido. Tente novamente em 1 minuto."


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Janela deslizante de 60s por IP do cliente.

    IPs sem requisicao dentro da janela sao descartados numa varredura feita
    no maximo uma vez por janela, entao o mapa nao cresce com clientes que
    pararam de chamar.
    """

    def __init__(self, app: object) -> None:
        super().__init__(app)  # type: ignore[arg-type]
        self._por_ip: dict[str, deque[float]] = {}
        self._ultima_varredura = 0.0

    def permitir(self, client_ip: str, agora: float, limite: int) -> bool:
        if agora - self._ultima_varredura >= JANELA_SEGUNDOS:
            self._varrer(agora)

        instantes = self._por_ip.setdefault(client_ip, deque())
        while instantes and agora - instantes[0] >= JANELA_SEGUNDOS:
            instantes.popleft()

        if len(instantes) >= limite:
            return False
        instantes.append(agora)
        return True

    def _varrer(self, agora: float) -> None:
        self._por_ip = {
            ip: instantes
            for ip, instantes in self._por_ip.items()
            if instantes and agora - instantes[-1] < JANELA_SEGUNDOS
        }
        self._ultima_varredura = agora

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        limite = get_settings().rate_limit_per_minute

        # 0 = sem limite (usado em testes)
        if limite == 0:
            return await call_next(request)

        # integracoes internas do gabinete
        if request.headers.get("X-API-Key"):
            return await call_next(request)

        client_ip = request.client.host if request.client else "unknown"
        if not self.permitir(client_ip, time.time(), limite):
            return JSONResponse(status_code=429, content={"error": MENSAGEM_LIMITE})
        return await call_next(request)
