# src/fileconfig/core/async_accessor.py
"""
Adapter assíncrono do `ConfigAccessor`.

Cada operação do accessor é exposta como corrotina com exatamente a
mesma semântica: o resultado de sucesso é devolvido sem alteração e
qualquer exceção é propagada como o mesmo objeto.

Decisões arquiteturais:
    - A operação síncrona roda em thread via `asyncio.to_thread`,
      liberando o event loop durante I/O
    - Nenhuma política adicional (sem retry, sem timeout)
    - Cancelar a corrotina não interrompe a leitura/escrita já iniciada
"""

from __future__ import annotations

import asyncio
from typing import Any, Dict, Mapping

from .accessor import ConfigAccessor, PathLike
from .backends import Document
from .config.placeholder import PreprocessFunc


class AsyncConfigAccessor:
    def __init__(self, accessor: ConfigAccessor) -> None:
        self.accessor = accessor

    @classmethod
    def for_path(cls, path: PathLike, **kwargs: Any) -> "AsyncConfigAccessor":
        return cls(ConfigAccessor.for_path(path, **kwargs))

    @property
    def extension(self) -> str:
        return self.accessor.extension

    async def load(self, path: PathLike) -> Document:
        return await asyncio.to_thread(self.accessor.load, path)

    async def load_with_preprocess(self, path: PathLike, preprocess: PreprocessFunc) -> Document:
        return await asyncio.to_thread(self.accessor.load_with_preprocess, path, preprocess)

    async def load_with_resolve_placeholder(self, path: PathLike, context: Any) -> Document:
        return await asyncio.to_thread(self.accessor.load_with_resolve_placeholder, path, context)

    async def save(self, path: PathLike, document: Document) -> None:
        await asyncio.to_thread(self.accessor.save, path, document)

    async def update(self, path: PathLike, partial: Mapping[str, Any]) -> Dict[str, Any]:
        return await asyncio.to_thread(self.accessor.update, path, partial)

    async def update_by_file(self, path: PathLike, reference_path: PathLike) -> Dict[str, Any]:
        return await asyncio.to_thread(self.accessor.update_by_file, path, reference_path)
