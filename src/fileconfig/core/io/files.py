# src/fileconfig/core/io/files.py
"""
Primitivas de acesso a arquivo usadas pelo accessor.

Este módulo é o único ponto do fileconfig que toca o filesystem. Ele
traduz erros do sistema operacional para a taxonomia do pacote,
distinguindo explicitamente "arquivo ausente" de qualquer outra falha
de I/O, o que permite ao accessor aplicar a política "ausente ⇒ `{}`".

Decisões arquiteturais:
    - Diretórios nunca são criados automaticamente
    - A escrita padrão é atômica (arquivo temporário irmão + `os.replace`)
    - Links simbólicos são seguidos; o destino real é substituído
    - Em caso de falha, o arquivo temporário é removido e o destino
      permanece intacto

Invariantes:
    - `read_text` levanta `ConfigFileNotFoundError` apenas para ausência
    - Qualquer outro `OSError` é encapsulado em `ConfigIOError` com `cause`

Limites explícitos:
    - Não realiza lock de arquivo (última escrita vence)
    - Não aplica timeout nem retry
"""

from __future__ import annotations

import logging
import os
import secrets
from pathlib import Path
from typing import TextIO, Tuple, Union

from ..exceptions import ConfigFileNotFoundError, ConfigIOError

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]

_TEMP_ATTEMPTS = 100


def read_text(path: PathLike, *, encoding: str = "utf-8") -> str:
    """
    Lê o conteúdo textual de um arquivo.

    Raises:
        ConfigFileNotFoundError: Se o arquivo não existir.
        ConfigIOError: Para qualquer outra falha de leitura (permissão,
            diretório no lugar de arquivo, erro de decodificação, etc.).
    """
    file_path = Path(path)
    try:
        return file_path.read_text(encoding=encoding)
    except FileNotFoundError as exc:
        raise ConfigFileNotFoundError(
            f"Arquivo de configuração não encontrado: {file_path}",
            path=str(file_path),
            cause=exc,
        ) from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigIOError(
            f"Não foi possível ler o arquivo de configuração: {file_path}",
            path=str(file_path),
            cause=exc,
            operation="read",
        ) from exc


def write_text(path: PathLike, text: str, *, encoding: str = "utf-8", atomic: bool = True) -> None:
    """
    Escreve `text` em `path`.

    O diretório de destino já deve existir; sua ausência é reportada como
    `ConfigIOError`. Com `atomic=True` o conteúdo é gravado em um arquivo
    temporário no mesmo diretório e então movido sobre o destino.
    """
    file_path = Path(path)

    if not atomic:
        try:
            file_path.write_text(text, encoding=encoding)
        except OSError as exc:
            raise _write_error(file_path, exc) from exc
        return

    # links são seguidos: o arquivo apontado é substituído, o link permanece
    target = Path(os.path.realpath(file_path))

    tmp_name = None
    try:
        tmp_name, fh = _create_temp(target, encoding)
        with fh:
            fh.write(text)
        _copy_mode(target, tmp_name)
        os.replace(tmp_name, target)
        tmp_name = None
    except OSError as exc:
        raise _write_error(file_path, exc) from exc
    finally:
        if tmp_name is not None:
            _discard(tmp_name)


def _create_temp(target: Path, encoding: str) -> Tuple[str, TextIO]:
    # O_EXCL com modo 0666: o kernel aplica a umask do processo sem alterá-la
    flags = os.O_WRONLY | os.O_CREAT | os.O_EXCL | getattr(os, "O_BINARY", 0)
    for _ in range(_TEMP_ATTEMPTS):
        name = str(target.parent / f".{target.name}.{secrets.token_hex(6)}.tmp")
        try:
            fd = os.open(name, flags, 0o666)
        except FileExistsError:
            continue
        return name, os.fdopen(fd, "w", encoding=encoding, newline="")
    raise FileExistsError(f"no temporary name available next to {target}")


def _copy_mode(target: Path, tmp_name: str) -> None:
    # arquivo novo mantém o modo criado sob a umask; existente preserva o seu
    try:
        mode = target.stat().st_mode
    except FileNotFoundError:
        return
    os.chmod(tmp_name, mode & 0o7777)


def _discard(tmp_name: str) -> None:
    try:
        os.unlink(tmp_name)
    except OSError as exc:
        logger.warning("temporary file not removed path=%s error=%s", tmp_name, exc)


def _write_error(file_path: Path, exc: OSError) -> ConfigIOError:
    return ConfigIOError(
        f"Não foi possível escrever o arquivo de configuração: {file_path}",
        path=str(file_path),
        cause=exc,
        operation="write",
    )
