# src/fileconfig/__init__.py
"""
fileconfig — camada de acesso a arquivos de configuração.

Carrega, salva e atualiza incrementalmente documentos de configuração em
JSON, YAML e TOML, com uma taxonomia de erros uniforme e uma semântica
de merge determinística independente do formato.

Uso típico:

    >>> from fileconfig import ConfigAccessor
    >>> accessor = ConfigAccessor.for_path("settings.yaml")
    >>> accessor.update("settings.yaml", {"ui": {"theme": "dark"}})  # doctest: +SKIP

Limites explícitos:
    - Não valida schema
    - Não oferece atomicidade entre múltiplos arquivos
    - Não observa alterações externas nos arquivos
"""

import logging

from .core.accessor import ConfigAccessor
from .core.async_accessor import AsyncConfigAccessor
from .core.backends import (
    BackendRegistry,
    FormatBackend,
    JsonBackend,
    TomlBackend,
    YamlBackend,
    default_registry,
)
from .core.config import (
    UNSET,
    AccessorSettings,
    configs_equal,
    deep_merge,
    get_locale_value,
    resolve_placeholder,
    set_locale_value,
)
from .core.config.loader import load_layered, strip_defaults
from .core.exceptions import (
    ConfigFileError,
    ConfigFileNotFoundError,
    ConfigIOError,
    ConfigParseError,
    InvalidArgumentError,
    UnsupportedConfigFormatError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "AccessorSettings",
    "AsyncConfigAccessor",
    "BackendRegistry",
    "ConfigAccessor",
    "ConfigFileError",
    "ConfigFileNotFoundError",
    "ConfigIOError",
    "ConfigParseError",
    "FormatBackend",
    "InvalidArgumentError",
    "JsonBackend",
    "TomlBackend",
    "UNSET",
    "UnsupportedConfigFormatError",
    "YamlBackend",
    "configs_equal",
    "deep_merge",
    "default_registry",
    "get_locale_value",
    "load_layered",
    "resolve_placeholder",
    "set_locale_value",
    "strip_defaults",
]
