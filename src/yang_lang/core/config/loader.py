# src/yang_lang/core/config/loader.py
"""
Loader canônico de configuração do yang-lang.

Este módulo carrega e resolve os `Settings` efetivos a partir de:
    - defaults (arquivo informado ou recurso empacotado)
    - um arquivo local de overrides (opcional)

Responsabilidades do módulo:
    - Carregar arquivos de configuração em YAML ou JSON
    - Validar requisitos estruturais mínimos (tipo raiz)
    - Resolver a configuração final via `merge_maps` (override vence nas folhas)
    - Converter o resultado em `Settings` tipados

Invariantes:
    - O resultado é sempre um `Settings` validado
    - Overrides nunca mutam os defaults
    - A mesma entrada sempre produz a mesma configuração final

Limites explícitos:
    - Não lê variáveis de ambiente
    - Não mantém estado global
"""

from __future__ import annotations

import hashlib
import json
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml  # PyYAML

from ..codec.resources import read_resource
from ..merge import merge_maps
from .errors import (
    DefaultsNotFoundError,
    InvalidConfigRootTypeError,
    UnsupportedConfigFormatError,
)
from .settings import Settings


DEFAULTS_PACKAGE = "yang_lang.resources"
DEFAULTS_RESOURCE = "defaults.yaml"

PathLike = Union[str, Path]


def _require_dict(data: Any, origin: str) -> Dict[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(
            f"Config root deve ser dict, recebido: {type(data).__name__}",
            details={"origin": origin},
        )
    return data


def _load_file(path: Path) -> Dict[str, Any]:
    """
    Carrega um arquivo de configuração e valida sua estrutura básica.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)

    Arquivos vazios são interpretados como dicionários vazios.

    Raises:
        UnsupportedConfigFormatError: Se o formato do arquivo não for suportado.
        InvalidConfigRootTypeError: Se o conteúdo raiz não for um dicionário.
    """
    suffix = path.suffix.lower()

    if suffix in {".yaml", ".yml"}:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

    elif suffix == ".json":
        with path.open("r", encoding="utf-8") as f:
            text = f.read()
        data = json.loads(text) if text.strip() else None

    else:
        raise UnsupportedConfigFormatError(
            f"Formato não suportado: {path.suffix}",
            details={"path": str(path)},
            hint="Use .yaml, .yml ou .json",
        )

    return _require_dict(data, str(path))


def load_packaged_defaults() -> Dict[str, Any]:
    """Lê os defaults empacotados em `yang_lang/resources/defaults.yaml`."""
    data = read_resource(DEFAULTS_PACKAGE, DEFAULTS_RESOURCE)
    return _require_dict(data, f"{DEFAULTS_PACKAGE}/{DEFAULTS_RESOURCE}")


def load_settings(
    *,
    defaults_path: Optional[PathLike] = None,
    local_path: Optional[PathLike] = None,
) -> Settings:
    """
    Carrega e resolve os `Settings` efetivos.

    Política de resolução:
        - Sem `defaults_path`, os defaults empacotados são usados
        - `defaults_path` informado é obrigatório no disco
        - O arquivo local é opcional; ausente, é ignorado
        - Quando presente, o local sempre tem prioridade sobre defaults

    Args:
        defaults_path: Caminho opcional para o arquivo de defaults.
        local_path: Caminho opcional para overrides locais.

    Returns:
        Settings: Configuração final validada.

    Raises:
        DefaultsNotFoundError: Se `defaults_path` não existir.
        UnsupportedConfigFormatError: Se o formato do arquivo não for suportado.
        InvalidConfigRootTypeError: Se o conteúdo não for um dicionário.
        InvalidSettingError: Se algum valor resolvido for inválido.
    """
    if defaults_path is None:
        defaults = load_packaged_defaults()
    else:
        defaults_file = Path(defaults_path)
        if not defaults_file.exists():
            raise DefaultsNotFoundError(
                f"Arquivo de defaults não encontrado: {defaults_file}",
                details={"path": str(defaults_file)},
            )
        defaults = _load_file(defaults_file)

    effective = defaults

    if local_path is not None:
        local_file = Path(local_path)
        if local_file.exists():
            effective = merge_maps(defaults, _load_file(local_file))

    return Settings.from_mapping(effective)


def compute_settings_hash(settings: Settings) -> str:
    """
    Gera um hash determinístico dos `Settings` efetivos.

    Política de hashing (v1):
        - Serialização JSON canônica (chaves ordenadas, separadores compactos)
        - Codificação UTF-8
        - Algoritmo SHA-256

    Invariantes:
        - O valor retornado é uma string hexadecimal de 64 caracteres
        - Settings iguais produzem o mesmo hash
    """
    if not isinstance(settings, Settings):
        raise TypeError(
            f"Settings para hashing deve ser Settings, recebido: {type(settings).__name__}"
        )

    canonical_json = json.dumps(
        settings.to_dict(),
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
        default=str,
    )

    return hashlib.sha256(canonical_json.encode("utf-8")).hexdigest()
