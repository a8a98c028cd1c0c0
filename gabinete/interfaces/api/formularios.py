# gabinete/interfaces/api/formularios.py
"""Leitura de corpo multipart ou JSON para as rotas com upload."""
from __future__ import annotations

from fastapi import Request
from starlette.datastructures import FormData, UploadFile

from gabinete.domain.erros import ErroValidacao


def campos_texto(form: FormData) -> dict[str, str]:
    """Campos de texto do multipart. Arquivos ficam de fora."""
    return {k: v for k, v in form.multi_items() if isinstance(v, str)}


def arquivos(form: FormData | None, campo: str) -> list[UploadFile]:
    """Arquivos enviados sob `campo`, na ordem do envio. Partes vazias sao ignoradas."""
    if form is None:
        return []
    return [v for v in form.getlist(campo) if isinstance(v, UploadFile) and v.filename]


async def ler_corpo(request: Request) -> tuple[dict[str, object], FormData | None]:
    """Campos do corpo + o FormData (None quando o corpo e JSON, sem arquivos)."""
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        try:
            dados = await request.json()
        except ValueError as err:
            raise ErroValidacao("JSON invalido") from err
        if not isinstance(dados, dict):
            raise ErroValidacao("Corpo deve ser um objeto JSON")
        return dados, None

    form = await request.form()
    return campos_texto(form), form
