"""
Camada de configuração do yang-lang.

Este pacote carrega, resolve e valida os `Settings` usados pelos
componentes do núcleo (nível de compressão e encoding do codec, separador
de chaves qualificadas, pool de threads da future bridge).

Responsabilidades do pacote:
    - Defaults empacotados + overrides locais (YAML ou JSON)
    - Resolução via `merge_maps` (override vence nas folhas)
    - Validação tipada dos valores resolvidos
    - Hash canônico dos Settings efetivos

Princípios fundamentais:
    - Nenhum estado global: operações recebem Settings explicitamente
    - A mesma entrada sempre produz a mesma configuração final
"""

from .errors import (
    ConfigError,
    DefaultsNotFoundError,
    InvalidConfigRootTypeError,
    InvalidSettingError,
    UnsupportedConfigFormatError,
)
from .loader import compute_settings_hash, load_packaged_defaults, load_settings
from .settings import (
    DEFAULT_SETTINGS,
    CodecSettings,
    FutureSettings,
    KeySettings,
    Settings,
)

__all__ = [
    "CodecSettings",
    "ConfigError",
    "DEFAULT_SETTINGS",
    "DefaultsNotFoundError",
    "FutureSettings",
    "InvalidConfigRootTypeError",
    "InvalidSettingError",
    "KeySettings",
    "Settings",
    "UnsupportedConfigFormatError",
    "compute_settings_hash",
    "load_packaged_defaults",
    "load_settings",
]
