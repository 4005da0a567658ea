# src/fileconfig/core/config/hashing.py
"""
Identidade estrutural de documentos de configuração.

Este módulo concentra as duas formas de comparar documentos usadas pelo
fileconfig:

    - `configs_equal`: igualdade estrutural profunda, usada pelos
      short-circuits de `update` para evitar escritas redundantes
    - `compute_config_hash`: hash SHA-256 sobre JSON canônico, usado
      para correlacionar escritas nos logs

Invariantes:
    - Documentos estruturalmente equivalentes produzem o mesmo hash
    - A ordem das chaves nunca afeta igualdade nem hash
    - Nenhuma mutação ocorre sobre o input

Limites explícitos:
    - Não carrega nem persiste documentos
    - O hash não é gravado em disco
"""

import hashlib
import json
from datetime import date, datetime, time
from typing import Any, Mapping


def configs_equal(left: Any, right: Any) -> bool:
    """
    Igualdade estrutural profunda sobre o modelo de valores de documento.

    Regras:
        - mappings: mesmo conjunto de chaves e valores iguais por chave
        - listas/tuplas: mesma ordem e elementos iguais
        - escalares: igualdade de valor, mas `bool` nunca é igual a número
          (`True` != `1`), enquanto `1 == 1.0`

    Nunca compara por referência.
    """
    if isinstance(left, Mapping) and isinstance(right, Mapping):
        if set(left.keys()) != set(right.keys()):
            return False
        return all(configs_equal(left[key], right[key]) for key in left)

    if isinstance(left, (list, tuple)) and isinstance(right, (list, tuple)):
        if len(left) != len(right):
            return False
        return all(configs_equal(a, b) for a, b in zip(left, right))

    if isinstance(left, (Mapping, list, tuple)) or isinstance(right, (Mapping, list, tuple)):
        return False

    if isinstance(left, bool) or isinstance(right, bool):
        return isinstance(left, bool) and isinstance(right, bool) and left is right

    if _numbers_equal(left, right):
        return True

    return type(left) is type(right) and left == right


def _numbers_equal(left: Any, right: Any) -> bool:
    numeric = (int, float)
    return isinstance(left, numeric) and isinstance(right, numeric) and left == right


def _canonical_default(value: Any) -> Any:
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    return repr(value)


def compute_config_hash(config: Any) -> str:
    """
    Gera um hash determinístico de um documento de configuração.

    Política de hashing (v1):
        - Serialização JSON canônica
        - Ordenação estável de chaves
        - Separadores compactos
        - Datas serializadas em ISO 8601
        - Algoritmo SHA-256

    Args:
        config (Any): Documento (mapping ou lista).

    Returns:
        str: Hash SHA-256 hexadecimal de 64 caracteres.
    """
    canonical_json = json.dumps(
        config,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
        default=_canonical_default,
    )

    return hashlib.sha256(canonical_json.encode("utf-8")).hexdigest()
