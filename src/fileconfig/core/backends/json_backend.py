# src/fileconfig/core/backends/json_backend.py
"""Backend JSON (stdlib `json`).

Datas são gravadas como string ISO 8601 e não são reidratadas no load;
o chamador converte de volta quando precisar do tipo rico.
"""

from __future__ import annotations

import json
from typing import Any, Tuple

from ..exceptions import ConfigParseError
from .base import Document, SKIP, normalize_parsed, to_plain


def _iso(value: Any) -> str:
    return value.isoformat()


class JsonBackend:
    name = "json"
    extension = ".json"
    extensions: Tuple[str, ...] = (".json",)

    def __init__(self, *, indent: int = 2, sort_keys: bool = False, ensure_ascii: bool = False) -> None:
        self.indent = indent
        self.sort_keys = sort_keys
        self.ensure_ascii = ensure_ascii

    def parse(self, text: str) -> Document:
        if not text.strip():
            return {}
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ConfigParseError(
                f"Não foi possível interpretar o conteúdo JSON: {exc.msg} (linha {exc.lineno}, coluna {exc.colno})",
                cause=exc,
                format=self.name,
            ) from exc
        return normalize_parsed(data, format=self.name)

    def serialize(self, document: Document) -> str:
        plain = to_plain(document, convert_date=_iso)
        if plain is SKIP:
            plain = {}
        return json.dumps(
            plain,
            indent=self.indent,
            sort_keys=self.sort_keys,
            ensure_ascii=self.ensure_ascii,
        ) + "\n"
