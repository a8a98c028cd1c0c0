# gabinete/domain/agenda/value_objects.py
from enum import StrEnum


class TipoEvento(StrEnum):
    SESSAO_ORDINARIA = "Sessão Ordinária"
    SESSAO_EXTRAORDINARIA = "Sessão Extraordinária"
    REUNIAO = "Reunião"
    AUDIENCIA_PUBLICA = "Audiência Pública"
    EVENTO = "Evento"


class StatusEvento(StrEnum):
    AGENDADO = "Agendado"
    EM_ANDAMENTO = "Em Andamento"
    CONCLUIDO = "Concluído"
    CANCELADO = "Cancelado"
