# gabinete/application/dtos/base.py
from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from gabinete.domain.datas import para_horario_local


class CamelDTO(BaseModel):
    """Campos snake_case no Python, camelCase no JSON."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


def vazio_para_none(valor: object) -> object:
    # formularios multipart mandam "" para campos opcionais nao preenchidos
    if isinstance(valor, str) and not valor.strip():
        return None
    return valor


def horario_local(valor: datetime | None) -> datetime | None:
    return para_horario_local(valor) if valor is not None else None
