# gabinete/domain/documento/value_objects.py
from enum import StrEnum


class TipoDocumento(StrEnum):
    REQUERIMENTO = "Requerimento"
    OFICIO = "Ofício"
    INDICACAO = "Indicação"
    MOCAO = "Moção"
    PROJETO = "Projeto"


class SituacaoDocumento(StrEnum):
    EM_TRAMITACAO = "Em Tramitação"
    APROVADO = "Aprovado"
    REJEITADO = "Rejeitado"
    ARQUIVADO = "Arquivado"
