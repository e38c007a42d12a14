"""
Exceções canônicas do codec de dados estruturados do yang-lang.

Princípios fundamentais:
    - Falhas do compressor e do parser nunca escapam cruas
    - A exceção original fica encadeada em `__cause__`
    - Nenhuma falha é re-tentada

Invariantes:
    - Todas as exceções desta camada herdam de `CodecError`
"""

from ..exceptions import YangException


class CodecError(YangException):
    """
    Exceção base para falhas do codec (compressão, descompressão e parsing).
    """


class DecodeError(CodecError):
    """
    Exceção levantada quando os bytes fornecidos não formam um stream
    comprimido válido (cabeçalho inválido, truncamento, CRC incorreto,
    entrada vazia ou de tipo não binário).
    """


class ParseError(CodecError):
    """
    Exceção levantada quando o texto descomprimido não é texto estruturado
    válido: não decodifica no encoding configurado, não é YAML válido ou usa
    tags desconhecidas.
    """
