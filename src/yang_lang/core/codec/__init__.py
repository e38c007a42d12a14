"""
Camada de codec de dados estruturados do yang-lang.

Responsabilidades do pacote:
    - Forma textual canônica (YAML seguro com tags do yang-lang)
    - Compressão/descompressão round-trip (gzip)
    - Identidade estável de valores (SHA-256 do texto canônico)
    - Leitura de recursos estruturados empacotados

Invariantes:
    - `decompress(compress(v)) == v` para todo valor do modelo suportado
    - Falhas de stream viram `DecodeError`; falhas de texto viram `ParseError`
"""

from .errors import CodecError, DecodeError, ParseError
from .gzip_codec import compress, decompress
from .hashing import compute_value_hash
from .resources import read_resource
from .text import Dumper, Loader, read_text, write_text

__all__ = [
    "CodecError",
    "DecodeError",
    "Dumper",
    "Loader",
    "ParseError",
    "compress",
    "compute_value_hash",
    "decompress",
    "read_resource",
    "read_text",
    "write_text",
]
