# src/yang_lang/core/codec/gzip_codec.py
"""
Codec comprimido round-trip para dados estruturados.

    compress:   valor → texto canônico → bytes (encoding) → gzip → bytes
    decompress: bytes → gunzip → texto (encoding) → valor

Contrato de round-trip:
    `decompress(compress(v)) == v` para todo valor `v` do modelo de
    `codec.text`. A igualdade byte a byte do payload comprimido entre
    chamadas NÃO é garantida (o cabeçalho gzip carrega timestamp).

Decisões arquiteturais:
    - Codec não-streaming: o payload inteiro vive em memória
    - Buffers de entrada/saída são adquiridos em `with` e liberados em
      todo caminho de saída, inclusive em falha
    - O stream de compressão é fechado (finalizado) antes de ler os bytes

Limites explícitos:
    - Não persiste payloads
    - Não valida schema do valor
"""

from __future__ import annotations

import gzip
import io
import logging
import zlib
from typing import Any, Optional

from ..config.settings import DEFAULT_SETTINGS, CodecSettings, Settings
from .errors import DecodeError, ParseError
from .text import read_text, write_text


logger = logging.getLogger(__name__)


def _codec_settings(settings: Optional[Settings]) -> CodecSettings:
    return (settings or DEFAULT_SETTINGS).codec


def compress(value: Any, settings: Optional[Settings] = None) -> bytes:
    """
    Serializa e comprime `value`.

    Args:
        value: Valor do modelo suportado por `codec.text`.
        settings: Settings efetivos; usa `settings.codec.compression_level`
            e `settings.codec.encoding`. Sem `settings`, valem os defaults.

    Returns:
        bytes: Payload comprimido.
    """
    cfg = _codec_settings(settings)
    payload = write_text(value).encode(cfg.encoding)

    with io.BytesIO() as sink:
        with gzip.GzipFile(fileobj=sink, mode="wb", compresslevel=cfg.compression_level) as stream:
            stream.write(payload)
        compressed = sink.getvalue()

    logger.debug("compress: %d bytes de texto -> %d bytes gzip", len(payload), len(compressed))
    return compressed


def decompress(data: bytes, settings: Optional[Settings] = None) -> Any:
    """
    Reverte `compress` (com o mesmo `settings.codec.encoding`).

    Raises:
        DecodeError: Se `data` não for um stream gzip válido.
        ParseError: Se o texto descomprimido não decodificar ou não for
            texto estruturado válido.
    """
    encoding = _codec_settings(settings).encoding

    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise DecodeError(
            f"Payload comprimido deve ser bytes, recebido: {type(data).__name__}"
        )
    if len(data) == 0:
        raise DecodeError("Payload comprimido vazio")

    try:
        with io.BytesIO(data) as source, gzip.GzipFile(fileobj=source, mode="rb") as stream:
            raw = stream.read()
    except (OSError, EOFError, zlib.error) as exc:
        raise DecodeError(
            "Bytes não formam um stream gzip válido",
            details={"payload_bytes": len(data), "reason": str(exc)},
        ) from exc

    logger.debug("decompress: %d bytes gzip -> %d bytes de texto", len(data), len(raw))

    try:
        text = raw.decode(encoding)
    except UnicodeDecodeError as exc:
        raise ParseError(
            f"Texto descomprimido não é {encoding} válido",
            details={"encoding": encoding, "reason": str(exc)},
        ) from exc

    return read_text(text)
