"""
Validação dos dados recebidos nas rotas de objetos
"""
from app.errors import (
    ValidationError, MissingField, MissingContact, NoUpdatableField, InvalidFieldType,
)

CAMPOS_OBRIGATORIOS = ('titulo', 'categoria', 'local', 'palavraPasse')
CAMPOS_ATUALIZAVEIS = (
    'titulo', 'categoria', 'descricao', 'local',
    'foto', 'contatoInstagram', 'contatoWhatsapp',
)

# Nomes alternativos aceitos no corpo da requisição
ALIASES = {
    'imagem': 'foto',
    'instagram': 'contatoInstagram',
    'contato': 'contatoWhatsapp',
    'whatsapp': 'contatoWhatsapp',
}

CAMPOS_CONHECIDOS = set(CAMPOS_ATUALIZAVEIS) | {'palavraPasse'}


def texto(valor):
    """
    Converte o valor recebido em texto limpo

    None continua None e números viram string. Outros tipos
    (objetos, listas, booleanos) geram TypeError.
    """
    if valor is None:
        return None
    if isinstance(valor, bool) or not isinstance(valor, (str, int, float)):
        raise TypeError(type(valor).__name__)
    return str(valor).strip()


def normalizar_payload(dados):
    """
    Converte aliases para os nomes dos campos e remove espaços

    Campos desconhecidos são descartados. Se o nome oficial e o alias
    vierem juntos, o nome oficial prevalece.

    Raises:
        InvalidFieldType: campo com valor que não é texto nem número
    """
    normalizado = {}
    invalidos = []
    for chave, valor in (dados or {}).items():
        if chave in ALIASES:
            campo = ALIASES[chave]
            if campo in dados:
                continue
        else:
            campo = chave
        if campo not in CAMPOS_CONHECIDOS:
            continue
        try:
            valor = texto(valor)
        except TypeError:
            if chave not in invalidos:
                invalidos.append(chave)
            continue
        if campo in normalizado and not valor:
            continue
        normalizado[campo] = valor

    if invalidos:
        raise InvalidFieldType(invalidos)
    return normalizado


def _vazio(valor):
    return valor is None or (isinstance(valor, str) and not valor)


def validar_criacao(dados):
    """
    Valida os dados de criação de um objeto

    Raises:
        MissingField: titulo, categoria, local ou palavraPasse ausentes/vazios
        MissingContact: nenhum contato (Instagram ou WhatsApp) informado

    Returns:
        dict normalizado
    """
    dados = normalizar_payload(dados)

    faltando = [campo for campo in CAMPOS_OBRIGATORIOS if _vazio(dados.get(campo))]
    if faltando:
        raise MissingField(faltando)

    # bcrypt só considera 72 bytes
    if len(str(dados['palavraPasse']).encode('utf-8')) > 72:
        raise ValidationError('A palavra-passe deve ter no máximo 72 bytes')

    if _vazio(dados.get('contatoInstagram')) and _vazio(dados.get('contatoWhatsapp')):
        raise MissingContact()

    return dados


def validar_atualizacao(dados):
    """
    Extrai apenas os campos atualizáveis presentes na requisição

    Raises:
        NoUpdatableField: nenhum campo atualizável enviado
        MissingField: campo obrigatório enviado em branco
    """
    dados = normalizar_payload(dados)
    campos = {campo: dados[campo] for campo in CAMPOS_ATUALIZAVEIS if campo in dados}

    if not campos:
        raise NoUpdatableField()

    em_branco = [
        campo for campo in ('titulo', 'categoria', 'local')
        if campo in campos and _vazio(campos[campo])
    ]
    if em_branco:
        raise MissingField(em_branco)

    # Opcionais enviados vazios são gravados como NULL
    for campo, valor in campos.items():
        if _vazio(valor):
            campos[campo] = None

    return campos


def validar_propriedade(objeto, palavra_passe):
    """True se a palavra-passe informada confere com a do objeto"""
    try:
        palavra_passe = texto(palavra_passe)
    except TypeError:
        return False
    if _vazio(palavra_passe):
        return False
    return objeto.check_palavra_passe(palavra_passe)
