# gabinete/infrastructure/log.py
"""Log do servidor: uma linha por evento no stdout, com o uptime do processo."""
from __future__ import annotations

import sys
import time

_inicio = time.monotonic()


def uptime() -> str:
    """HH:MM:SS desde a carga do modulo. Horas nao viram dias."""
    decorrido = int(time.monotonic() - _inicio)
    horas, resto = divmod(decorrido, 3600)
    minutos, segundos = divmod(resto, 60)
    return f"{horas:02d}:{minutos:02d}:{segundos:02d}"


def log(mensagem: str) -> None:
    # flush imediato: sob uvicorn o stdout pode estar em buffer
    sys.stdout.write(f"[gabinete {uptime()}] {mensagem}\n")
    sys.stdout.flush()
