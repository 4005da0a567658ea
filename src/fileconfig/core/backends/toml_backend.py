# src/fileconfig/core/backends/toml_backend.py
"""Backend TOML: `tomllib` (stdlib) para leitura, `tomli_w` para escrita.

TOML não possui `null`: valores `None`/`UNSET` são omitidos na escrita.
A raiz de um arquivo TOML é sempre uma tabela, portanto listas na raiz
são rejeitadas na serialização.
"""

from __future__ import annotations

import tomllib
from typing import Tuple

import tomli_w

from ..exceptions import ConfigParseError, InvalidArgumentError
from .base import Document, SKIP, to_plain


class TomlBackend:
    name = "toml"
    extension = ".toml"
    extensions: Tuple[str, ...] = (".toml",)

    def __init__(self, *, multiline_strings: bool = False) -> None:
        self.multiline_strings = multiline_strings

    def parse(self, text: str) -> Document:
        try:
            return tomllib.loads(text)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigParseError(
                f"Não foi possível interpretar o conteúdo TOML: {exc}",
                cause=exc,
                format=self.name,
            ) from exc

    def serialize(self, document: Document) -> str:
        if isinstance(document, (list, tuple)):
            raise InvalidArgumentError(
                "Documentos TOML devem ter uma tabela (mapping) na raiz",
                argument="document",
                expected="mapping",
                received=type(document).__name__,
            )
        plain = to_plain(document, keep_none=False)
        if plain is SKIP:
            plain = {}
        return tomli_w.dumps(plain, multiline_strings=self.multiline_strings)
