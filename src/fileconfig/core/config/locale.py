# src/fileconfig/core/config/locale.py
"""
Propriedades localizadas em documentos de configuração.

Um campo localizado é gravado com o código de locale entre colchetes:

    Comment[en_GB] = "Edit text files"
    Comment[zh_CN] = "编辑文本文件"
    Comment[ja]    = "テキストファイルを編集します"
    Comment        = "Edit text files"

A leitura tenta, em ordem: o locale exato (`zh_CN`), apenas o idioma
(`zh`) e, por fim, o campo sem locale. Códigos com hífen (`en-US`) são
normalizados para sublinhado (`en_US`).
"""

from typing import Any, MutableMapping, Mapping, Optional

from .merge import UNSET


def normalize_locale_code(locale_code: str) -> str:
    return locale_code.replace("-", "_")


def locale_key(name: str, locale_code: str) -> str:
    return f"{name}[{normalize_locale_code(locale_code)}]"


def get_locale_value(config: Mapping[str, Any], name: str, locale_code: str) -> Optional[Any]:
    """Lê `name` para `locale_code`, com fallback para o idioma e depois para o campo base."""
    code = normalize_locale_code(locale_code)

    exact = locale_key(name, code)
    if exact in config:
        return config[exact]

    language, sep, _ = code.partition("_")
    if sep and language:
        language_key = locale_key(name, language)
        if language_key in config:
            return config[language_key]

    return config.get(name)


def set_locale_value(config: MutableMapping[str, Any], name: str, locale_code: str, value: Any) -> None:
    """Grava `name[locale]`; `UNSET` remove a entrada."""
    key = locale_key(name, locale_code)
    if value is UNSET:
        config.pop(key, None)
    else:
        config[key] = value
