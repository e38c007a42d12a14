# src/yang_lang/core/config/settings.py
"""
Settings tipados do yang-lang.

Seções (v1):
    - codec:   compression_level (0..9), encoding
    - keys:    separator, no_namespace_bucket
    - futures: max_workers (>= 1), thread_name_prefix

Invariantes:
    - Settings são imutáveis (dataclasses congeladas)
    - `Settings.from_mapping(s.to_dict()) == s`
    - Seções e campos desconhecidos são rejeitados
"""

from __future__ import annotations

import codecs
from dataclasses import asdict, dataclass, field, fields
from typing import Any, Dict, Hashable, Mapping, Optional, Type

from .errors import InvalidSettingError


@dataclass(frozen=True)
class CodecSettings:
    compression_level: int = 9
    encoding: str = "utf-8"

    def __post_init__(self) -> None:
        _require_type("codec.compression_level", self.compression_level, int)
        if not 0 <= self.compression_level <= 9:
            raise InvalidSettingError(
                f"codec.compression_level fora de 0..9: {self.compression_level}",
                details={"field": "codec.compression_level", "value": self.compression_level},
            )
        _require_type("codec.encoding", self.encoding, str)
        try:
            codecs.lookup(self.encoding)
        except LookupError as exc:
            raise InvalidSettingError(
                f"codec.encoding desconhecido: {self.encoding}",
                details={"field": "codec.encoding", "value": self.encoding},
            ) from exc


@dataclass(frozen=True)
class KeySettings:
    separator: str = "/"
    no_namespace_bucket: Optional[Hashable] = None

    def __post_init__(self) -> None:
        _require_type("keys.separator", self.separator, str)
        if not self.separator:
            raise InvalidSettingError(
                "keys.separator não pode ser vazio",
                details={"field": "keys.separator"},
            )
        try:
            hash(self.no_namespace_bucket)
        except TypeError as exc:
            raise InvalidSettingError(
                "keys.no_namespace_bucket deve ser hashable",
                details={"field": "keys.no_namespace_bucket"},
            ) from exc


@dataclass(frozen=True)
class FutureSettings:
    max_workers: int = 4
    thread_name_prefix: str = "yang-lang-bridge"

    def __post_init__(self) -> None:
        _require_type("futures.max_workers", self.max_workers, int)
        if self.max_workers < 1:
            raise InvalidSettingError(
                f"futures.max_workers deve ser >= 1: {self.max_workers}",
                details={"field": "futures.max_workers", "value": self.max_workers},
            )
        _require_type("futures.thread_name_prefix", self.thread_name_prefix, str)


def _require_type(name: str, value: Any, expected: Type[Any]) -> None:
    # bool é subclasse de int e nunca é um valor válido aqui
    if isinstance(value, bool) or not isinstance(value, expected):
        raise InvalidSettingError(
            f"{name} deve ser {expected.__name__}, recebido: {type(value).__name__}",
            details={"field": name, "expected": expected.__name__},
        )


_SECTIONS: Dict[str, Type[Any]] = {
    "codec": CodecSettings,
    "keys": KeySettings,
    "futures": FutureSettings,
}


@dataclass(frozen=True)
class Settings:
    codec: CodecSettings = field(default_factory=CodecSettings)
    keys: KeySettings = field(default_factory=KeySettings)
    futures: FutureSettings = field(default_factory=FutureSettings)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Settings":
        unknown = sorted(str(k) for k in data if k not in _SECTIONS)
        if unknown:
            raise InvalidSettingError(
                f"Seções de configuração desconhecidas: {unknown}",
                details={"sections": unknown},
            )

        kwargs: Dict[str, Any] = {}
        for section, section_cls in _SECTIONS.items():
            raw = data.get(section) or {}
            if not isinstance(raw, Mapping):
                raise InvalidSettingError(
                    f"Seção '{section}' deve ser um mapa, recebido: {type(raw).__name__}",
                    details={"section": section},
                )
            allowed = {f.name for f in fields(section_cls)}
            extra = sorted(str(k) for k in raw if k not in allowed)
            if extra:
                raise InvalidSettingError(
                    f"Campos desconhecidos em '{section}': {extra}",
                    details={"section": section, "fields": extra},
                )
            kwargs[section] = section_cls(**raw)

        return cls(**kwargs)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


DEFAULT_SETTINGS = Settings()
