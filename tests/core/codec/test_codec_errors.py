# tests/core/codec/test_codec_errors.py
"""
Testes dos caminhos de falha do codec.

Os testes asseguram que:
- bytes que não formam gzip viram `DecodeError`, nunca um valor silencioso
- gzip válido com texto inválido vira `ParseError`
- a falta original fica encadeada em `__cause__`
"""

import gzip
import random

import pytest

from yang_lang.core.codec import (
    CodecError,
    DecodeError,
    ParseError,
    compress,
    decompress,
    read_text,
)


def test_random_bytes_fail_with_decode_error():
    rng = random.Random(1234)
    data = b"\x00" + bytes(rng.randrange(256) for _ in range(256))
    with pytest.raises(DecodeError) as info:
        decompress(data)
    assert info.value.__cause__ is not None


def test_empty_payload_fails_with_decode_error():
    with pytest.raises(DecodeError):
        decompress(b"")


def test_non_bytes_payload_fails_with_decode_error():
    with pytest.raises(DecodeError):
        decompress("not bytes")


def test_truncated_payload_fails_with_decode_error():
    payload = compress(list(range(1000)))
    with pytest.raises(DecodeError):
        decompress(payload[: len(payload) // 2])


def test_corrupted_crc_fails_with_decode_error():
    payload = bytearray(compress({"a": 1}))
    payload[-8] ^= 0xFF  # primeiro byte do CRC32 no trailer gzip
    with pytest.raises(DecodeError):
        decompress(bytes(payload))


def test_valid_gzip_with_invalid_text_fails_with_parse_error():
    payload = gzip.compress(b"a: [1, 2\nb: }")
    with pytest.raises(ParseError):
        decompress(payload)


def test_valid_gzip_with_undecodable_text_fails_with_parse_error():
    payload = gzip.compress(b"\xff\xfe\xfa")
    with pytest.raises(ParseError) as info:
        decompress(payload)
    assert isinstance(info.value.__cause__, UnicodeDecodeError)


@pytest.mark.parametrize(
    "text",
    [
        b"!!int abc",
        b"!!float abc",
        b"!!timestamp nope",
        b"[" * 5000,
    ],
)
def test_valid_gzip_with_invalid_typed_text_fails_with_parse_error(text):
    """
    Gzip válido cujo texto falha nos construtores do loader (escalares
    tipados inválidos) ou no composer (aninhamento excessivo) vira
    `ParseError`, com a falta nativa encadeada.
    """
    with pytest.raises(ParseError) as info:
        decompress(gzip.compress(text))
    assert isinstance(info.value.__cause__, (ValueError, AttributeError, RecursionError))


def test_unsafe_tags_are_rejected():
    with pytest.raises(ParseError):
        read_text("!!python/object/apply:os.system ['true']")


def test_malformed_qualified_key_tag_is_a_parse_error():
    with pytest.raises(ParseError):
        read_text("!key '/one': 1")


def test_codec_errors_share_a_base_class():
    assert issubclass(DecodeError, CodecError)
    assert issubclass(ParseError, CodecError)
