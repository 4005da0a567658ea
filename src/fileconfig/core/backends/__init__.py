# src/fileconfig/core/backends/__init__.py
"""
Backends de formato do fileconfig.

Cada backend converte texto ↔ documento para um único formato de
serialização e satisfaz o protocolo `FormatBackend`. O accessor depende
apenas desse protocolo, portanto novos formatos podem ser adicionados
registrando uma instância em um `BackendRegistry`.

Formatos incluídos (v1):
    - JSON (.json)        → stdlib `json`
    - YAML (.yaml, .yml)  → PyYAML
    - TOML (.toml)        → `tomllib` + `tomli_w`
"""

from .base import Document, FormatBackend, to_plain
from .json_backend import JsonBackend
from .registry import BackendRegistry, DuplicateExtensionError, default_registry
from .toml_backend import TomlBackend
from .yaml_backend import YamlBackend

__all__ = [
    "BackendRegistry",
    "Document",
    "DuplicateExtensionError",
    "FormatBackend",
    "JsonBackend",
    "TomlBackend",
    "YamlBackend",
    "default_registry",
    "to_plain",
]
