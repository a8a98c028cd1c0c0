# gabinete/interfaces/api/main.py
from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from gabinete.infrastructure.anexos import PREFIXO_URL, ArmazenamentoAnexos
from gabinete.infrastructure.config import get_settings
from gabinete.infrastructure.duckdb_store import DuckDBStore
from gabinete.interfaces.api.erros import registrar_handlers
from gabinete.interfaces.api.middleware.rate_limit import RateLimitMiddleware
from gabinete.interfaces.api.routes.agenda_routes import router as agenda_router
from gabinete.interfaces.api.routes.documento_routes import router as documento_router
from gabinete.interfaces.api.routes.eleitor_routes import router as eleitor_router
from gabinete.interfaces.api.routes.relatorio_routes import router as relatorio_router


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    store: DuckDBStore = app.state.store
    anexos: ArmazenamentoAnexos = app.state.anexos
    anexos.preparar()
    store.abrir()
    try:
        yield
    finally:
        store.fechar()


def create_app(
    store: DuckDBStore | None = None,
    anexos: ArmazenamentoAnexos | None = None,
) -> FastAPI:
    """Monta a aplicacao. O banco so e aberto no lifespan, nunca no import."""
    settings = get_settings()

    app = FastAPI(
        title="Gabinete API",
        debug=settings.debug,
        lifespan=lifespan,
        docs_url="/api/docs",
        redoc_url=None,
    )
    app.state.store = store or DuckDBStore(settings.duckdb_path)
    app.state.anexos = anexos or ArmazenamentoAnexos(Path(settings.uploads_dir))

    @app.middleware("http")
    async def add_security_headers(request: Request, call_next: object) -> Response:
        response = await call_next(request)  # type: ignore[operator]
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        return response  # type: ignore[no-any-return]

    app.add_middleware(RateLimitMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["*"],
    )

    registrar_handlers(app)

    app.include_router(documento_router, prefix="/api")
    app.include_router(agenda_router, prefix="/api")
    app.include_router(eleitor_router, prefix="/api")
    app.include_router(relatorio_router, prefix="/api")

    # diretorio criado no lifespan
    app.mount(
        PREFIXO_URL,
        StaticFiles(directory=app.state.anexos.diretorio, check_dir=False),
        name="uploads",
    )
    return app


app = create_app()
