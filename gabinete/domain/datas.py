# gabinete/domain/datas.py
from __future__ import annotations

from datetime import datetime, timedelta


def para_horario_local(valor: datetime) -> datetime:
    """Datetime ingenuo no fuso do servidor. Sem offset = ja e horario local."""
    if valor.tzinfo is None:
        return valor
    return valor.astimezone().replace(tzinfo=None)


def inicio_do_dia(referencia: datetime) -> datetime:
    """Meia-noite local do dia de referencia (truncamento por calendario)."""
    return referencia.replace(hour=0, minute=0, second=0, microsecond=0)


def inicio_do_dia_seguinte(referencia: datetime) -> datetime:
    return inicio_do_dia(referencia) + timedelta(days=1)
