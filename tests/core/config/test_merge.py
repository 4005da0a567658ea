# tests/core/config/test_merge.py
"""
Testes da política de deep-merge de configuração.

Este módulo valida o comportamento da função `deep_merge`, responsável
por combinar uma configuração parcial sobre o documento existente.

Os testes asseguram que:
- valores escalares são sobrescritos corretamente
- dicionários são mesclados de forma recursiva
- listas são sobrescritas integralmente
- trocas de tipo são aceitas e o parcial vence
- `UNSET` não altera a chave correspondente
- objetos de entrada não são mutados durante o merge

Limites explícitos:
    - Não valida carregamento de arquivos
    - Não valida integração com o accessor
"""

import pytest

try:
    from fileconfig.core.config.merge import UNSET, deep_merge
    from fileconfig.core.exceptions import InvalidArgumentError
except Exception as e:  # noqa: BLE001
    deep_merge = None
    UNSET = None
    InvalidArgumentError = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    """
    Garante que `deep_merge` e o marcador `UNSET` estejam disponíveis.

    Falha imediatamente com mensagem explícita, em vez de produzir erros
    indiretos em cada teste.
    """
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing merge module. Implement:\n"
            "- src/fileconfig/core/config/merge.py (deep_merge, UNSET)\n"
            f"Import error: {_IMPORT_ERR}"
        )


def test_merge_simple_override():
    """
    Verifica o override básico de escalares sem mutar os inputs.

    Invariantes:
        - O valor sobrescrito reflete exatamente o override
        - Chaves não sobrescritas permanecem inalteradas
        - `base` e `override` não sofrem mutação
    """
    _require_imports()
    base = {"a": 1, "b": 2}
    override = {"b": 3}

    out = deep_merge(base, override)

    assert out == {"a": 1, "b": 3}
    assert base == {"a": 1, "b": 2}
    assert override == {"b": 3}


def test_merge_is_right_biased_and_recursive():
    _require_imports()
    base = {"a": 1, "b": {"x": 1, "y": 2}}
    partial = {"b": {"y": 99, "z": 3}, "c": 4}

    assert deep_merge(base, partial) == {"a": 1, "b": {"x": 1, "y": 99, "z": 3}, "c": 4}


def test_merge_nested_three_levels():
    _require_imports()
    base = {"db": {"primary": {"host": "a", "port": 1}, "pool": 5}}
    partial = {"db": {"primary": {"port": 2}}}

    out = deep_merge(base, partial)

    assert out == {"db": {"primary": {"host": "a", "port": 2}, "pool": 5}}


def test_merge_list_overwrite():
    """
    Verifica que listas nunca são mescladas elemento a elemento.

    Decisões arquiteturais:
        - Apenas mappings são recursivos
        - Uma lista mais curta substitui integralmente a lista base
    """
    _require_imports()
    base = {"street": ["a", "b", "c"]}
    partial = {"street": ["x"]}

    assert deep_merge(base, partial) == {"street": ["x"]}


def test_merge_type_change_partial_wins():
    _require_imports()
    base = {"engine": {"fail_fast": True}, "level": "INFO"}
    partial = {"engine": "DEBUG", "level": {"root": "WARN"}}

    out = deep_merge(base, partial)

    assert out == {"engine": "DEBUG", "level": {"root": "WARN"}}


def test_merge_none_replaces_value():
    _require_imports()
    assert deep_merge({"a": 1}, {"a": None}) == {"a": None}


def test_merge_unset_means_no_change():
    """
    Verifica que `UNSET` sinaliza "sem alteração" e não remove a chave.

    Invariantes:
        - Chave existente com override `UNSET` permanece com o valor base
        - Chave inexistente com override `UNSET` não é criada
        - `UNSET` aninhado em um valor novo não é gravado
    """
    _require_imports()
    base = {"a": 1, "b": {"x": 1}}
    partial = {"a": UNSET, "new": UNSET, "b": {"x": UNSET, "y": 2}, "c": {"k": UNSET, "v": 1}}

    out = deep_merge(base, partial)

    assert out == {"a": 1, "b": {"x": 1, "y": 2}, "c": {"v": 1}}


def test_merge_result_is_independent_copy():
    _require_imports()
    base = {"addr": {"street": ["a"]}}
    partial = {"tags": ["t1"]}

    out = deep_merge(base, partial)
    out["addr"]["street"].append("b")
    out["tags"].append("t2")

    assert base == {"addr": {"street": ["a"]}}
    assert partial == {"tags": ["t1"]}


@pytest.mark.parametrize("bad", [[1, 2, 3], "text", 42, None])
def test_merge_rejects_non_mapping_override(bad):
    _require_imports()
    with pytest.raises(InvalidArgumentError):
        deep_merge({"a": 1}, bad)


def test_unset_is_falsy_singleton():
    _require_imports()
    import copy

    assert not UNSET
    assert copy.deepcopy(UNSET) is UNSET
    assert repr(UNSET) == "UNSET"
