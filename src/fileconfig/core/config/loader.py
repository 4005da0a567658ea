# src/fileconfig/core/config/loader.py
"""
Resolução de configuração em camadas (defaults + local).

Aplicações frequentemente mantêm um arquivo de defaults e um arquivo
local com apenas os overrides do usuário. Este módulo resolve a
configuração efetiva a partir dessas duas camadas e oferece a operação
inversa: remover de uma configuração tudo o que já é default, para que
o arquivo do usuário guarde apenas o que difere.

Política de resolução:
    - Ambos os arquivos são opcionais (ausência ⇒ `{}`)
    - O local sempre tem prioridade sobre os defaults
    - A resolução utiliza `deep_merge` (right-biased)

Invariantes:
    - O resultado é sempre um dicionário puro (`dict`)
    - Overrides nunca mutam os defaults
    - `deep_merge(defaults, strip_defaults(cfg, defaults))` reproduz `cfg`
      sempre que `cfg` não remove chaves dos defaults

Limites explícitos:
    - Não valida semântica de domínio
    - Não persiste configuração
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from ..accessor import ConfigAccessor, PathLike
from ..exceptions import InvalidArgumentError
from .hashing import configs_equal
from .merge import deep_merge


def _require_mapping(document: Any, path: PathLike) -> Dict[str, Any]:
    if not isinstance(document, Mapping):
        raise InvalidArgumentError(
            f"Config root deve ser mapping, recebido: {type(document).__name__} ({path})",
            argument="path",
            expected="mapping root",
            received=type(document).__name__,
        )
    return dict(document)


def load_layered(
    *,
    defaults_path: PathLike,
    local_path: Optional[PathLike] = None,
    accessor: Optional[ConfigAccessor] = None,
) -> Dict[str, Any]:
    """
    Carrega e resolve a configuração efetiva a partir de defaults + local.

    Quando `accessor` não é informado, o backend de cada arquivo é
    escolhido pela extensão, o que permite, por exemplo, defaults em YAML
    e overrides locais em JSON.

    Args:
        defaults_path: Caminho do arquivo de defaults.
        local_path: Caminho opcional do arquivo de overrides locais.
        accessor: Accessor a usar para ambos os arquivos.

    Returns:
        Dict[str, Any]: Configuração final resolvida.

    Raises:
        InvalidArgumentError: Se algum arquivo não tiver mapping na raiz.
        ConfigParseError: Se algum arquivo estiver malformado.
        ConfigIOError: Em falhas de leitura.
        UnsupportedConfigFormatError: Se a extensão não tiver backend.
    """
    defaults_accessor = accessor or ConfigAccessor.for_path(defaults_path)
    defaults = _require_mapping(defaults_accessor.load(defaults_path), defaults_path)

    if local_path is None:
        return defaults

    local_accessor = accessor or ConfigAccessor.for_path(local_path)
    local = _require_mapping(local_accessor.load(local_path), local_path)
    return deep_merge(defaults, local)


def strip_defaults(config: Mapping[str, Any], defaults: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Remove de `config` as entradas estruturalmente iguais aos defaults.

    Dicionários aninhados são comparados recursivamente; um dicionário
    que fica vazio após a remoção também é removido, desde que exista
    nos defaults.
    """
    if not isinstance(config, Mapping) or not isinstance(defaults, Mapping):
        raise InvalidArgumentError(
            "strip_defaults requer mappings",
            argument="config" if not isinstance(config, Mapping) else "defaults",
            expected="mapping",
            received=type(config if not isinstance(config, Mapping) else defaults).__name__,
        )

    result: Dict[str, Any] = {}
    for key, value in config.items():
        if key not in defaults:
            result[key] = value
            continue

        default_value = defaults[key]
        if configs_equal(value, default_value):
            continue

        if isinstance(value, Mapping) and isinstance(default_value, Mapping):
            nested = strip_defaults(value, default_value)
            if nested:
                result[key] = nested
            continue

        result[key] = value

    return result
