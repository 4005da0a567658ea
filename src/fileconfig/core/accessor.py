# src/fileconfig/core/accessor.py
"""
Accessor canônico de arquivos de configuração.

Este módulo orquestra o ciclo completo de acesso a um arquivo de
configuração, independente do formato de serialização:

    load    → ler arquivo → trim → pré-processar → parse
    save    → serializar → escrever
    update  → load → comparar → merge → comparar → save
    update_by_file → load(referência) → update

O formato é delegado a um `FormatBackend`; o acesso a disco é delegado
às primitivas de `core.io`.

Princípios fundamentais:
    - Nenhum estado é mantido entre chamadas (sem cache por caminho)
    - Cada chamada materializa um documento novo
    - Ausência e conteúdo vazio são equivalentes a "configuração vazia"
    - Nenhuma escrita ocorre quando o resultado é igual ao conteúdo atual

Invariantes:
    - Erros de parse nunca vazam tipos de bibliotecas de formato
    - `update` nunca aplica merge parcial: ou grava tudo ou nada
    - `update` valida o argumento antes de qualquer I/O

Limites explícitos:
    - Não valida schema
    - Não cria diretórios
    - Não faz lock de arquivo (última escrita vence)
    - Não observa alterações externas nos arquivos
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Mapping, Optional, Union

from .backends import BackendRegistry, Document, FormatBackend, default_registry, to_plain
from .config.hashing import compute_config_hash, configs_equal
from .config.merge import deep_merge
from .config.placeholder import PreprocessFunc, identity, placeholder_resolver
from .config.settings import AccessorSettings
from .exceptions import ConfigFileNotFoundError, ConfigParseError, InvalidArgumentError
from .io import read_text, write_text

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


class ConfigAccessor:
    """
    Accessor de arquivos de configuração para um formato.

    O accessor combina um backend de formato com as primitivas de I/O e
    implementa a semântica de atualização incremental comum a todos os
    formatos.

    Decisões arquiteturais:
        - O formato é uma capacidade injetada (`FormatBackend`), não uma
          subclasse por formato
        - A seleção por extensão fica em `ConfigAccessor.for_path`
        - O accessor não guarda documentos; apenas backend e settings

    Exemplo:
        >>> accessor = ConfigAccessor.for_path("app.yaml")
        >>> accessor.update("app.yaml", {"server": {"port": 8080}})  # doctest: +SKIP
    """

    def __init__(self, backend: FormatBackend, settings: Optional[AccessorSettings] = None) -> None:
        if not isinstance(backend, FormatBackend):
            raise TypeError(f"backend must implement FormatBackend, got {type(backend).__name__}")
        self.backend = backend
        self.settings = settings or AccessorSettings()

    @classmethod
    def for_path(
        cls,
        path: PathLike,
        *,
        registry: Optional[BackendRegistry] = None,
        settings: Optional[AccessorSettings] = None,
    ) -> "ConfigAccessor":
        """Cria um accessor cujo backend é escolhido pela extensão de `path`."""
        registry = registry or default_registry()
        return cls(registry.for_path(path), settings=settings)

    @property
    def extension(self) -> str:
        return self.backend.extension

    def __repr__(self) -> str:
        return f"ConfigAccessor(backend={self.backend.name!r})"

    # ------------------------------------------------------------------
    # Load
    # ------------------------------------------------------------------
    def load(self, path: PathLike) -> Document:
        return self.load_with_preprocess(path, identity)

    def load_with_resolve_placeholder(self, path: PathLike, context: Any) -> Document:
        """Carrega resolvendo `${a.b}` a partir de `context`; tokens sem referente permanecem literais."""
        return self.load_with_preprocess(path, placeholder_resolver(context))

    def load_with_preprocess(self, path: PathLike, preprocess: PreprocessFunc) -> Document:
        """
        Carrega um documento aplicando um hook de pré-processamento ao texto.

        Política de carregamento:
            - arquivo ausente → `{}`
            - conteúdo vazio ou só espaços → `{}` (backend não é chamado)
            - caso contrário: `preprocess(texto_trim)` → `backend.parse`

        Args:
            path: Caminho do arquivo.
            preprocess: Função pura `str -> str`.

        Returns:
            Document: Documento novo (mapping ou lista).

        Raises:
            ConfigIOError: Falha de leitura diferente de ausência.
            ConfigParseError: Conteúdo inválido para o formato; inclui
                o caminho do arquivo e a causa original.
        """
        try:
            text = read_text(path, encoding=self.settings.encoding)
        except ConfigFileNotFoundError:
            logger.debug("config file absent, using empty document path=%s", path)
            return {}

        text = text.strip()
        if not text:
            logger.debug("config file empty, using empty document path=%s", path)
            return {}

        resolved = preprocess(text)

        try:
            document = self.backend.parse(resolved)
        except ConfigParseError as exc:
            raise exc.with_path(path) from exc.cause

        logger.debug("config loaded path=%s backend=%s", path, self.backend.name)
        return document

    # ------------------------------------------------------------------
    # Save
    # ------------------------------------------------------------------
    def save(self, path: PathLike, document: Document) -> None:
        """
        Serializa e grava `document` em `path`.

        O diretório de destino precisa existir; sua ausência resulta em
        `ConfigIOError`. Valores `UNSET` são gravados como `null` (ou
        omitidos em formatos sem `null`); tipos não suportados são ignorados.
        """
        text = self.backend.serialize(document)
        write_text(
            path,
            text,
            encoding=self.settings.encoding,
            atomic=self.settings.atomic_write,
        )
        logger.info(
            "config saved path=%s backend=%s hash=%s",
            path,
            self.backend.name,
            compute_config_hash(to_plain(document)),
        )

    # ------------------------------------------------------------------
    # Update
    # ------------------------------------------------------------------
    def update(self, path: PathLike, partial: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Atualiza incrementalmente o arquivo com uma configuração parcial.

        Algoritmo:
            1. `load` do arquivo (ausente → `{}`)
            2. parcial igual ao documento carregado → retorna sem escrever
            3. merge right-biased (`deep_merge`)
            4. resultado igual ao documento carregado → retorna sem escrever
            5. `save` do resultado e retorno

        Decisões arquiteturais:
            - Igualdade é estrutural (`configs_equal`), nunca por referência
            - Erros de parse do arquivo alvo são propagados: um arquivo
              corrompido não pode ser atualizado com segurança
            - Não é possível remover chaves via update

        Args:
            path: Caminho do arquivo alvo.
            partial: Mapping com apenas as chaves a alterar. Valores
                `UNSET` significam "sem alteração".

        Returns:
            Dict[str, Any]: Documento resultante (o carregado, se nada mudou).

        Raises:
            InvalidArgumentError: Se `partial` não for mapping, ou se o
                documento atual do arquivo não tiver um mapping na raiz.
            ConfigParseError: Se o arquivo alvo estiver malformado.
            ConfigIOError: Em falhas de leitura ou escrita.
        """
        if not isinstance(partial, Mapping):
            raise InvalidArgumentError(
                f"partial deve ser um mapping, recebido: {type(partial).__name__}",
                argument="partial",
                expected="mapping",
                received=type(partial).__name__,
            )

        current = self.load(path)
        if not isinstance(current, Mapping):
            raise InvalidArgumentError(
                f"O documento em {path} não possui mapping na raiz e não pode ser atualizado",
                argument="path",
                expected="mapping root",
                received=type(current).__name__,
            )

        if configs_equal(partial, current):
            logger.debug("update skipped, partial equals current document path=%s", path)
            return current

        merged = deep_merge(current, partial)

        if configs_equal(merged, current):
            logger.debug("update skipped, merge produced no changes path=%s", path)
            return current

        self.save(path, merged)
        return merged

    def update_by_file(self, path: PathLike, reference_path: PathLike) -> Dict[str, Any]:
        """
        Atualiza `path` com o conteúdo de outro arquivo de configuração.

        O arquivo de referência é opcional: se não existir, é tratado como
        `{}` (e, portanto, nada é escrito). A referência é lida com o mesmo
        backend do alvo. Demais erros e short-circuits vêm de `update`.
        """
        reference = self.load(reference_path)
        return self.update(path, reference)

