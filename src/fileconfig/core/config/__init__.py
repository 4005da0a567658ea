# src/fileconfig/core/config/__init__.py

"""
Semântica de configuração do fileconfig.

Este pacote contém as regras independentes de formato e de I/O:

    - merge        → deep-merge right-biased e o marcador `UNSET`
    - hashing      → igualdade estrutural e hash canônico
    - placeholder  → hooks de pré-processamento (`${a.b}`)
    - settings     → opções do accessor
    - locale       → campos localizados (`name[zh_CN]`)
    - loader       → resolução em camadas (defaults + local)

Invariantes:
    - Nenhuma função deste pacote muta seus inputs
    - Nenhum estado global é mantido

`loader` depende do accessor e por isso não é importado aqui.
"""

from .hashing import compute_config_hash, configs_equal
from .locale import get_locale_value, set_locale_value
from .merge import UNSET, deep_merge
from .placeholder import identity, placeholder_resolver, resolve_placeholder
from .settings import AccessorSettings

__all__ = [
    "AccessorSettings",
    "UNSET",
    "compute_config_hash",
    "configs_equal",
    "deep_merge",
    "get_locale_value",
    "identity",
    "placeholder_resolver",
    "resolve_placeholder",
    "set_locale_value",
]
