# src/fileconfig/core/config/placeholder.py
"""
Hooks de pré-processamento de texto.

Um hook é uma função pura `str -> str` aplicada ao conteúdo bruto (já
sem espaços nas extremidades) de um arquivo antes do parse. O hook
padrão é a identidade.

`resolve_placeholder` substitui tokens `${caminho.pontuado}` pelo valor
encontrado em um objeto de contexto. A resolução não possui modo de
falha: tokens cujo caminho não existe permanecem literalmente no texto.
"""

import re
from typing import Any, Callable, Mapping, Sequence

PreprocessFunc = Callable[[str], str]

PLACEHOLDER_PATTERN = re.compile(r"\$\{\s*([^{}]+?)\s*\}")

_MISSING = object()


def identity(text: str) -> str:
    return text


def lookup_path(context: Any, dotted_path: str) -> Any:
    """Navega `context` por um caminho pontuado; retorna `_MISSING` se não existir."""
    current = context
    for part in dotted_path.split("."):
        if isinstance(current, Mapping):
            if part not in current:
                return _MISSING
            current = current[part]
        elif isinstance(current, Sequence) and not isinstance(current, (str, bytes)):
            try:
                current = current[int(part)]
            except (ValueError, IndexError):
                return _MISSING
        else:
            return _MISSING
    return current


def _format_value(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def resolve_placeholder(text: str, context: Any) -> str:
    """
    Resolve placeholders `${a.b.c}` em `text` usando `context`.

    Exemplos:
        >>> resolve_placeholder("title: ${locale.title}", {"locale": {"title": "Home"}})
        'title: Home'
        >>> resolve_placeholder("title: ${locale.missing}", {"locale": {}})
        'title: ${locale.missing}'
    """

    def _replace(match: "re.Match[str]") -> str:
        value = lookup_path(context, match.group(1))
        if value is _MISSING:
            return match.group(0)
        return _format_value(value)

    return PLACEHOLDER_PATTERN.sub(_replace, text)


def placeholder_resolver(context: Any) -> PreprocessFunc:
    """Fixa um contexto e devolve o hook correspondente."""
    return lambda text: resolve_placeholder(text, context)
