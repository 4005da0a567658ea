# src/fileconfig/core/backends/registry.py
"""
Registro de backends por extensão de arquivo.

O `BackendRegistry` é a tabela de roteamento usada para escolher o
backend de um arquivo a partir da sua extensão. Ele substitui qualquer
hierarquia de classes por formato: um backend é apenas um objeto que
satisfaz `FormatBackend`.

Decisões arquiteturais:
    - Extensões são comparadas em minúsculas
    - Registrar uma extensão já ocupada é erro, a menos que `replace=True`
    - Não existe registro global mutável; `default_registry()` sempre
      devolve uma instância nova

Limites explícitos:
    - Não infere formato pelo conteúdo do arquivo
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Union

from ..exceptions import UnsupportedConfigFormatError
from .base import FormatBackend
from .json_backend import JsonBackend
from .toml_backend import TomlBackend
from .yaml_backend import YamlBackend


class DuplicateExtensionError(ValueError):
    """Extensão já associada a outro backend no registro."""


def _normalize_extension(extension: str) -> str:
    ext = extension.strip().lower()
    if not ext:
        raise ValueError("extension must be a non-empty string")
    return ext if ext.startswith(".") else f".{ext}"


@dataclass
class BackendRegistry:
    """Tabela extensão → backend, preservando a ordem de registro."""

    _by_extension: Dict[str, FormatBackend] = field(default_factory=dict, init=False, repr=False)
    _order: List[str] = field(default_factory=list, init=False, repr=False)

    def register(self, backend: FormatBackend, *, replace: bool = False) -> None:
        if not isinstance(backend, FormatBackend):
            raise TypeError(f"backend must implement FormatBackend, got {type(backend).__name__}")

        extensions = [_normalize_extension(ext) for ext in backend.extensions]
        if not replace:
            taken = [ext for ext in extensions if ext in self._by_extension]
            if taken:
                raise DuplicateExtensionError(f"Duplicate extension(s): {', '.join(taken)}")

        for ext in extensions:
            if ext not in self._by_extension:
                self._order.append(ext)
            self._by_extension[ext] = backend

    def get(self, extension: str) -> FormatBackend:
        ext = _normalize_extension(extension)
        try:
            return self._by_extension[ext]
        except KeyError:
            raise UnsupportedConfigFormatError(
                f"Formato não suportado: {ext}",
                extension=ext,
                supported=self.extensions(),
            ) from None

    def for_path(self, path: Union[str, Path]) -> FormatBackend:
        suffix = Path(path).suffix
        if not suffix:
            raise UnsupportedConfigFormatError(
                f"Arquivo sem extensão, formato não pode ser determinado: {path}",
                extension="",
                supported=self.extensions(),
            )
        return self.get(suffix)

    def extensions(self) -> List[str]:
        return list(self._order)


def default_registry() -> BackendRegistry:
    """Registro com os backends JSON, YAML e TOML."""
    registry = BackendRegistry()
    registry.register(JsonBackend())
    registry.register(YamlBackend())
    registry.register(TomlBackend())
    return registry
