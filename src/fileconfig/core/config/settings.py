# src/fileconfig/core/config/settings.py
"""
Configuração do próprio accessor.

`AccessorSettings` agrupa as opções que afetam I/O (encoding e escrita
atômica). O trim do conteúdo lido não é configurável: é sempre
aplicado antes do hook de pré-processamento. As opções de
serialização pertencem a cada backend e são passadas ao construtor
do backend.

As settings podem ser lidas de um arquivo de configuração com o próprio
fileconfig e convertidas via `AccessorSettings.from_dict`.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping

from ..exceptions import InvalidArgumentError


@dataclass(frozen=True)
class AccessorSettings:
    encoding: str = "utf-8"
    atomic_write: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AccessorSettings":
        """
        Constrói settings a partir de um mapping.

        Chaves desconhecidas ou valores com tipo errado são rejeitados
        explicitamente; chaves ausentes assumem o default.

        Raises:
            InvalidArgumentError: Se `data` não for mapping, contiver chaves
                desconhecidas ou valores de tipo incompatível.
        """
        if not isinstance(data, Mapping):
            raise InvalidArgumentError(
                "Settings devem ser um mapping",
                argument="settings",
                expected="mapping",
                received=type(data).__name__,
            )

        known = {f.name: f for f in fields(cls)}
        unknown = sorted(set(data) - set(known))
        if unknown:
            raise InvalidArgumentError(
                f"Chaves de settings desconhecidas: {', '.join(unknown)}",
                argument="settings",
                expected=", ".join(sorted(known)),
                received=", ".join(unknown),
            )

        defaults = cls()
        for key, value in data.items():
            expected_type = type(getattr(defaults, key))
            if type(value) is not expected_type:
                raise InvalidArgumentError(
                    f"Setting '{key}' deve ser {expected_type.__name__}, recebido: {type(value).__name__}",
                    argument=key,
                    expected=expected_type.__name__,
                    received=type(value).__name__,
                )

        return cls(**dict(data))
