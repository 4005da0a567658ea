# src/fileconfig/core/backends/yaml_backend.py
"""
Backend YAML baseado em PyYAML.

Decisões arquiteturais:
    - Apenas `safe_load` / `safe_dump` (nenhuma tag arbitrária de Python)
    - `YAMLError` é convertido em `ConfigParseError`, mantendo a causa
    - Documentos só com comentários resultam em `{}`
    - Datas são gravadas nativamente pelo YAML
"""

from __future__ import annotations

from typing import Tuple

import yaml  # PyYAML

from ..exceptions import ConfigParseError
from .base import Document, SKIP, normalize_parsed, to_plain


class YamlBackend:
    name = "yaml"
    extension = ".yaml"
    extensions: Tuple[str, ...] = (".yaml", ".yml")

    def __init__(self, *, sort_keys: bool = False, default_flow_style: bool = False) -> None:
        self.sort_keys = sort_keys
        self.default_flow_style = default_flow_style

    def parse(self, text: str) -> Document:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ConfigParseError(
                f"Não foi possível interpretar o conteúdo YAML: {exc}",
                cause=exc,
                format=self.name,
            ) from exc
        return normalize_parsed(data, format=self.name)

    def serialize(self, document: Document) -> str:
        plain = to_plain(document)
        if plain is SKIP:
            plain = {}
        return yaml.safe_dump(
            plain,
            sort_keys=self.sort_keys,
            default_flow_style=self.default_flow_style,
            allow_unicode=True,
        )
