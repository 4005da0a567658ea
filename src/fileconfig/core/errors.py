"""
fileconfig — Canonical Error Payloads (v1)

Este módulo define o payload canônico de erro da camada de acesso a
arquivos de configuração. Toda exceção tipada do pacote consegue se
converter em um payload serializável, o que permite que chamadores
(CLIs, serviços, notebooks) reportem falhas de forma estável sem
depender do tipo concreto da exceção.

Erros devem ser:

- explícitos
- serializáveis
- acionáveis

Nenhum fallback silencioso é permitido além das duas normalizações
documentadas (arquivo ausente e arquivo vazio resultam em `{}`).
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ConfigErrorPayload:
    """
    Payload canônico de erro do fileconfig.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados relevantes para diagnóstico
    - hint: ação sugerida ao operador (onde corrigir)
    """

    type: str
    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro (v1)
# ---------------------------------------------------------------------------

CONFIG_ERROR = "CONFIG_ERROR"
CONFIG_FILE_NOT_FOUND = "CONFIG_FILE_NOT_FOUND"
CONFIG_IO_ERROR = "CONFIG_IO_ERROR"
CONFIG_PARSE_ERROR = "CONFIG_PARSE_ERROR"
CONFIG_INVALID_ARGUMENT = "CONFIG_INVALID_ARGUMENT"
CONFIG_UNSUPPORTED_FORMAT = "CONFIG_UNSUPPORTED_FORMAT"


def _cause_details(cause: Optional[BaseException]) -> Dict[str, Any]:
    if cause is None:
        return {"cause_type": None, "cause_message": None}
    return {"cause_type": type(cause).__name__, "cause_message": str(cause)}


# ---------------------------------------------------------------------------
# Helpers de fábrica
# ---------------------------------------------------------------------------

def file_not_found(
    *,
    path: Optional[str],
    hint: str = "Crie o arquivo ou trate a ausência como configuração vazia.",
) -> ConfigErrorPayload:
    return ConfigErrorPayload(
        type=CONFIG_FILE_NOT_FOUND,
        message="Arquivo de configuração não encontrado",
        details={"path": path},
        hint=hint,
    )


def io_error(
    *,
    path: Optional[str],
    operation: Optional[str] = None,
    cause: Optional[BaseException] = None,
    hint: str = "Verifique permissões e se o diretório do arquivo existe. Nenhum diretório é criado automaticamente.",
) -> ConfigErrorPayload:
    details: Dict[str, Any] = {"path": path, "operation": operation}
    details.update(_cause_details(cause))
    return ConfigErrorPayload(
        type=CONFIG_IO_ERROR,
        message="Falha de I/O ao acessar arquivo de configuração",
        details=details,
        hint=hint,
    )


def parse_error(
    *,
    path: Optional[str],
    format: Optional[str] = None,
    cause: Optional[BaseException] = None,
    hint: str = "Corrija a sintaxe do arquivo. Atualizações sobre arquivos corrompidos não são aplicadas.",
) -> ConfigErrorPayload:
    details: Dict[str, Any] = {"path": path, "format": format}
    details.update(_cause_details(cause))
    return ConfigErrorPayload(
        type=CONFIG_PARSE_ERROR,
        message="Conteúdo do arquivo de configuração inválido para o formato",
        details=details,
        hint=hint,
    )


def invalid_argument(
    *,
    argument: str,
    expected: str,
    received: str,
    hint: str = "Forneça um dicionário (mapping) como configuração parcial.",
) -> ConfigErrorPayload:
    return ConfigErrorPayload(
        type=CONFIG_INVALID_ARGUMENT,
        message="Argumento inválido para operação de configuração",
        details={"argument": argument, "expected": expected, "received": received},
        hint=hint,
    )


def unsupported_format(
    *,
    extension: str,
    supported: list,
    hint: str = "Use uma extensão registrada ou registre um backend para o formato.",
) -> ConfigErrorPayload:
    return ConfigErrorPayload(
        type=CONFIG_UNSUPPORTED_FORMAT,
        message="Formato de arquivo de configuração não suportado",
        details={"extension": extension, "supported": list(supported)},
        hint=hint,
    )
