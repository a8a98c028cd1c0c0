# tests/domain/test_anexos_nome.py
from gabinete.infrastructure.anexos import nome_gerado


def test_nome_prefixado_com_timestamp():
    nome = nome_gerado("oficio.pdf", agora_ms=1700000000000)
    assert nome.startswith("1700000000000-")
    assert nome.endswith("-oficio.pdf")


def test_nomes_no_mesmo_milissegundo_nao_colidem():
    a = nome_gerado("foto.jpg", agora_ms=1)
    b = nome_gerado("foto.jpg", agora_ms=1)
    assert a != b


def test_diretorios_do_cliente_descartados():
    assert nome_gerado("../../etc/passwd", agora_ms=1).endswith("-passwd")
    assert nome_gerado("C:\\docs\\ata.docx", agora_ms=1).endswith("-ata.docx")


def test_nome_vazio_recebe_padrao():
    assert nome_gerado("", agora_ms=1).endswith("-arquivo")
