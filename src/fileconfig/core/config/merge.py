# src/fileconfig/core/config/merge.py
"""
Utilitário canônico de deep-merge de configuração.

Este módulo implementa a política oficial de merge utilizada pelo
fileconfig para combinar uma configuração parcial sobre o documento já
existente em um arquivo.

Política de merge (v1):
    - dict + dict → merge recursivo por chave
    - list        → sobrescrita total (sem merge elemento a elemento)
    - escalar     → sobrescrita direta
    - tipos diferentes na mesma chave → o valor parcial vence
    - valor `UNSET` no parcial → a chave não é alterada

Princípios fundamentais:
    - O merge é determinístico e puramente funcional
    - Nenhum input é mutado durante o processo
    - O lado parcial sempre vence em conflitos (right-biased)

Invariantes:
    - A mesma entrada sempre produz a mesma saída
    - Chaves presentes apenas na base são preservadas
    - Chaves presentes apenas no parcial são adicionadas
    - Recursão só ocorre quando ambos os lados são dicionários

Limites explícitos:
    - Não carrega arquivos de configuração
    - Não remove chaves (não existe "delete via merge")
    - Não realiza coerção de tipos

Este módulo existe para garantir previsibilidade
na atualização incremental de arquivos de configuração.
"""

from copy import deepcopy
from typing import Any, Dict, Mapping

from ..exceptions import InvalidArgumentError


class _Unset:
    """Marcador de "sem alteração" para chaves de uma configuração parcial."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self


UNSET: Any = _Unset()


def deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Combina uma configuração parcial sobre uma configuração base.

    Esta função produz um novo dicionário resultante sem mutar nenhum
    dos inputs. É o coração de `ConfigAccessor.update` e também da
    resolução em camadas (defaults + local).

    Política de merge (v1):
        - dict + dict → merge recursivo por chave
        - list        → sobrescrita total
        - escalar     → sobrescrita direta pelo override
        - `UNSET`     → chave ignorada (nem escrita, nem removida)

    Decisões arquiteturais:
        - O merge é right-biased em todos os níveis
        - Conflitos de tipo não são erro: o override substitui o valor
        - O resultado é uma cópia profunda, seguro para mutação pelo chamador

    Args:
        base (Mapping[str, Any]): Documento existente.
        override (Mapping[str, Any]): Configuração parcial.

    Returns:
        Dict[str, Any]: Nova configuração resultante do merge.

    Raises:
        InvalidArgumentError: Se algum dos lados não for um mapping.
    """

    if not isinstance(base, Mapping) or not isinstance(override, Mapping):
        raise InvalidArgumentError(
            f"Deep-merge requer mappings no nível raiz, recebido: "
            f"{type(base).__name__} vs {type(override).__name__}",
            argument="base" if not isinstance(base, Mapping) else "override",
            expected="mapping",
            received=type(base if not isinstance(base, Mapping) else override).__name__,
        )

    result: Dict[str, Any] = {key: deepcopy(value) for key, value in base.items()}

    for key, override_value in override.items():
        if override_value is UNSET:
            continue

        base_value = result.get(key)

        # dict -> merge recursivo
        if isinstance(base_value, Mapping) and isinstance(override_value, Mapping):
            result[key] = deep_merge(base_value, override_value)
            continue

        # list, escalar ou troca de tipo -> sobrescrita
        result[key] = _strip_unset(override_value)

    return result


def _strip_unset(value: Any) -> Any:
    # chaves UNSET aninhadas em valores novos também não devem ser gravadas
    if isinstance(value, Mapping):
        return {k: _strip_unset(v) for k, v in value.items() if v is not UNSET}
    if isinstance(value, list):
        return [_strip_unset(v) for v in value]
    return deepcopy(value)
