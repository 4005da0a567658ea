# src/fileconfig/core/backends/base.py
"""
Contrato canônico de backends de formato.

Este módulo define o protocolo `FormatBackend`, a capacidade mínima que
o accessor exige de cada formato (JSON, YAML, TOML): converter texto em
documento e documento em texto.

A validação do protocolo ocorre em runtime (`@runtime_checkable`),
permitindo verificação por duck typing; nenhuma herança é exigida.

Decisões arquiteturais:
    - Backends são stateless além de opções de serialização
    - Erros de parse são sempre `ConfigParseError`, nunca exceções da
      biblioteca de formato
    - Serialização é total: valores de tipos não suportados são ignorados

Invariantes:
    - Entrada vazia, só espaços ou só comentários resulta em `{}`
    - `parse(serialize(doc))` reproduz `doc` para os tipos de valor do modelo

Limites explícitos:
    - Não fazem I/O
    - Não realizam merge
"""

from __future__ import annotations

from datetime import date, datetime, time
from typing import Any, Callable, Dict, List, Mapping, Optional, Protocol, Tuple, Union, runtime_checkable

from ..config.merge import UNSET
from ..exceptions import ConfigParseError

Document = Union[Dict[str, Any], List[Any]]

# marcador interno para valores descartados durante a normalização
SKIP = object()

_SCALARS = (str, int, float, bool)
_DATES = (datetime, date, time)


@runtime_checkable
class FormatBackend(Protocol):
    """
    Protocolo de backend de formato.

    Atributos obrigatórios:
        - name: nome curto do formato (ex.: "json")
        - extension: extensão canônica, com ponto (ex.: ".json")
        - extensions: todas as extensões aceitas para roteamento
    """

    name: str
    extension: str
    extensions: Tuple[str, ...]

    def parse(self, text: str) -> Document:
        """Converte texto em documento; levanta `ConfigParseError` se inválido."""
        ...

    def serialize(self, document: Document) -> str:
        """Converte documento em texto; nunca falha para documentos bem formados."""
        ...


def to_plain(
    value: Any,
    *,
    keep_none: bool = True,
    convert_date: Optional[Callable[[Any], Any]] = None,
) -> Any:
    """
    Normaliza um valor para os tipos que um backend sabe gravar.

    Regras:
        - mappings viram `dict` com chaves `str`; entradas descartadas somem
        - listas e tuplas viram `list`; elementos descartados somem
        - `UNSET` vira `None` (ou é descartado se `keep_none=False`)
        - datas passam por `convert_date` (ou são mantidas se `None`)
        - qualquer outro tipo (funções, objetos, sets, bytes) retorna `SKIP`
    """
    if value is UNSET or value is None:
        return None if keep_none else SKIP

    if isinstance(value, _SCALARS):
        return value

    if isinstance(value, _DATES):
        return convert_date(value) if convert_date is not None else value

    if isinstance(value, Mapping):
        out: Dict[str, Any] = {}
        for key, item in value.items():
            plain = to_plain(item, keep_none=keep_none, convert_date=convert_date)
            if plain is not SKIP:
                out[str(key)] = plain
        return out

    if isinstance(value, (list, tuple)):
        items = (to_plain(item, keep_none=keep_none, convert_date=convert_date) for item in value)
        return [item for item in items if item is not SKIP]

    return SKIP


def normalize_parsed(data: Any, *, format: str) -> Document:
    """
    Aplica a normalização comum ao resultado de um parser de biblioteca.

    Chaves de mappings viram `str` em qualquer profundidade (YAML aceita
    `1:` ou `yes:` como chaves), de modo que o documento em memória é o
    mesmo que será relido depois de um `save`.
    """
    if data is None:
        return {}
    if isinstance(data, (dict, list)):
        return _string_keys(data)
    raise ConfigParseError(
        f"Conteúdo raiz de {format} deve ser mapping ou lista, recebido: {type(data).__name__}",
        format=format,
    )


def _string_keys(value: Any) -> Any:
    if isinstance(value, dict):
        return {str(key): _string_keys(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_string_keys(item) for item in value]
    return value
