# src/yang_lang/core/codec/resources.py
"""Leitura de recursos de texto estruturado empacotados."""

from __future__ import annotations

from importlib import resources
from typing import Any

from .text import read_text


def read_resource(package: str, name: str, *, encoding: str = "utf-8") -> Any:
    """
    Lê o recurso `name` do pacote `package` e o parseia com `read_text`.

    Raises:
        FileNotFoundError: Se o recurso não existir.
        ParseError: Se o conteúdo não for texto estruturado válido.
    """
    text = resources.files(package).joinpath(name).read_text(encoding=encoding)
    return read_text(text)
