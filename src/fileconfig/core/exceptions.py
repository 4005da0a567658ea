"""
fileconfig — Canonical Exceptions (v1)

Este módulo define as exceções tipadas da camada de acesso a arquivos
de configuração.

Objetivo:
- Expressar a taxonomia de erros (ausência, I/O, parse, argumento inválido)
- Nunca vazar exceções específicas de bibliotecas de formato ao chamador
- Facilitar o mapeamento determinístico para `ConfigErrorPayload`

Regras:
- A causa original é sempre preservada (`cause` + encadeamento `from`)
- Mensagens são curtas e humanas; dados estruturados ficam em `details`
- Cada tipo também herda da exceção builtin equivalente, para que
  chamadores que capturam `OSError`, `ValueError` ou `TypeError`
  continuem funcionando
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from . import errors


class ConfigFileError(Exception):
    """Base class para todas as exceções do fileconfig.

    Importante:
    - `path` identifica o arquivo envolvido (quando aplicável)
    - `cause` guarda a exceção original da biblioteca ou do sistema
    """

    def __init__(
        self,
        message: str,
        *,
        path: Optional[str] = None,
        cause: Optional[BaseException] = None,
        details: Optional[Dict[str, Any]] = None,
        hint: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.path = None if path is None else str(path)
        self.cause = cause
        self.details: Dict[str, Any] = dict(details or {})
        self.hint = hint

    def __str__(self) -> str:
        if self.cause is not None:
            return f"{self.message} ({type(self.cause).__name__}: {self.cause})"
        return self.message

    def to_payload(self) -> errors.ConfigErrorPayload:
        return errors.ConfigErrorPayload(
            type=errors.CONFIG_ERROR,
            message=self.message,
            details=dict(self.details, path=self.path),
            hint=self.hint,
        )


class ConfigFileNotFoundError(ConfigFileError, FileNotFoundError):
    """Arquivo ausente.

    Sinal interno consumido pela política "ausente ⇒ `{}`" do accessor;
    não chega aos chamadores de `load`, `update` e `update_by_file`.
    """

    def to_payload(self) -> errors.ConfigErrorPayload:
        return errors.file_not_found(path=self.path)


class ConfigIOError(ConfigFileError, OSError):
    """Falha de I/O diferente de ausência (permissão, dispositivo, diretório inexistente)."""

    def __init__(
        self,
        message: str,
        *,
        path: Optional[str] = None,
        cause: Optional[BaseException] = None,
        operation: Optional[str] = None,
        hint: Optional[str] = None,
    ) -> None:
        super().__init__(message, path=path, cause=cause, details={"operation": operation}, hint=hint)
        self.operation = operation

    def to_payload(self) -> errors.ConfigErrorPayload:
        return errors.io_error(path=self.path, operation=self.operation, cause=self.cause)


class ConfigParseError(ConfigFileError, ValueError):
    """Conteúdo malformado para o formato do backend."""

    def __init__(
        self,
        message: str,
        *,
        path: Optional[str] = None,
        cause: Optional[BaseException] = None,
        format: Optional[str] = None,
        hint: Optional[str] = None,
    ) -> None:
        super().__init__(message, path=path, cause=cause, details={"format": format}, hint=hint)
        self.format = format

    def with_path(self, path: Any) -> "ConfigParseError":
        """Retorna uma cópia com o caminho do arquivo preenchido."""
        return ConfigParseError(
            self.message,
            path=str(path),
            cause=self.cause,
            format=self.format,
            hint=self.hint,
        )

    def to_payload(self) -> errors.ConfigErrorPayload:
        return errors.parse_error(path=self.path, format=self.format, cause=self.cause)


class InvalidArgumentError(ConfigFileError, TypeError):
    """Um mapping era exigido e o chamador forneceu outra coisa."""

    def __init__(self, message: str, *, argument: str, expected: str, received: str) -> None:
        super().__init__(
            message,
            details={"argument": argument, "expected": expected, "received": received},
        )
        self.argument = argument
        self.expected = expected
        self.received = received

    def to_payload(self) -> errors.ConfigErrorPayload:
        return errors.invalid_argument(
            argument=self.argument,
            expected=self.expected,
            received=self.received,
        )


class UnsupportedConfigFormatError(ConfigFileError, ValueError):
    """
    Exceção levantada quando nenhuma backend está registrada para a
    extensão do arquivo.

    Decisões arquiteturais:
        - O formato é determinado apenas pela extensão
        - Não há inferência de formato por conteúdo
    """

    def __init__(self, message: str, *, extension: str, supported: list) -> None:
        super().__init__(message, details={"extension": extension, "supported": list(supported)})
        self.extension = extension
        self.supported = list(supported)

    def to_payload(self) -> errors.ConfigErrorPayload:
        return errors.unsupported_format(extension=self.extension, supported=self.supported)
