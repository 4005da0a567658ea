# src/fileconfig/core/io/__init__.py
"""Acesso a arquivos: leitura/escrita de texto com a taxonomia de erros do pacote."""

from .files import read_text, write_text

__all__ = ["read_text", "write_text"]
