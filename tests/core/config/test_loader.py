# tests/core/config/test_loader.py
"""
Testes da resolução em camadas (defaults + local).

Este módulo valida `load_layered` e `strip_defaults`.

Os testes asseguram que:
- defaults e local são opcionais
- o local tem prioridade sobre defaults (deep-merge)
- formatos diferentes podem ser combinados (backend por extensão)
- estruturas inválidas são detectadas
- `strip_defaults` mantém apenas o que difere dos defaults

Decisões arquiteturais:
    - Defaults representam a base da configuração
    - Configuração local atua apenas como override explícito
"""

from pathlib import Path

import pytest

try:
    from fileconfig.core.config.loader import load_layered, strip_defaults
    from fileconfig.core.config.merge import deep_merge
    from fileconfig.core.exceptions import (
        ConfigParseError,
        InvalidArgumentError,
        UnsupportedConfigFormatError,
    )
except Exception as e:  # noqa: BLE001
    load_layered = None
    strip_defaults = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


DEFAULTS_YAML = """
engine:
  fail_fast: true
  log_level: INFO
steps:
  ingest:
    enabled: true
  train:
    enabled: true
"""

LOCAL_JSON = '{"engine": {"log_level": "DEBUG"}, "steps": {"train": {"enabled": false}}}'


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing loader module. Implement:\n"
            "- src/fileconfig/core/config/loader.py (load_layered, strip_defaults)\n"
            f"Import error: {_IMPORT_ERR}"
        )


def test_load_defaults_only(tmp_path: Path):
    _require_imports()
    defaults = tmp_path / "defaults.yaml"
    defaults.write_text(DEFAULTS_YAML, encoding="utf-8")

    out = load_layered(defaults_path=defaults)

    assert out["engine"] == {"fail_fast": True, "log_level": "INFO"}
    assert out["steps"]["ingest"]["enabled"] is True


def test_load_defaults_and_local_mixed_formats(tmp_path: Path):
    """
    Verifica o merge de defaults YAML com overrides locais JSON.

    Invariantes:
        - Overrides locais têm precedência sobre defaults
        - Chaves não sobrescritas permanecem inalteradas
    """
    _require_imports()
    defaults = tmp_path / "defaults.yaml"
    local = tmp_path / "local.json"
    defaults.write_text(DEFAULTS_YAML, encoding="utf-8")
    local.write_text(LOCAL_JSON, encoding="utf-8")

    out = load_layered(defaults_path=defaults, local_path=local)

    assert out["engine"]["log_level"] == "DEBUG"
    assert out["engine"]["fail_fast"] is True
    assert out["steps"]["train"]["enabled"] is False
    assert out["steps"]["ingest"]["enabled"] is True


def test_missing_files_are_empty(tmp_path: Path):
    _require_imports()
    out = load_layered(defaults_path=tmp_path / "nope.yaml", local_path=tmp_path / "nope.json")
    assert out == {}


def test_invalid_root_type_raises(tmp_path: Path):
    _require_imports()
    defaults = tmp_path / "defaults.yaml"
    defaults.write_text("- just\n- a\n- list\n", encoding="utf-8")

    with pytest.raises(InvalidArgumentError):
        load_layered(defaults_path=defaults)


def test_malformed_local_raises_parse_error(tmp_path: Path):
    _require_imports()
    defaults = tmp_path / "defaults.yaml"
    local = tmp_path / "local.json"
    defaults.write_text(DEFAULTS_YAML, encoding="utf-8")
    local.write_text("{not json", encoding="utf-8")

    with pytest.raises(ConfigParseError) as ei:
        load_layered(defaults_path=defaults, local_path=local)
    assert ei.value.path == str(local)


def test_unsupported_extension_raises(tmp_path: Path):
    _require_imports()
    defaults = tmp_path / "defaults.ini"
    defaults.write_text("[engine]\nfail_fast = true\n", encoding="utf-8")

    with pytest.raises(UnsupportedConfigFormatError):
        load_layered(defaults_path=defaults)


def test_strip_defaults_keeps_only_overrides():
    _require_imports()
    defaults = {"engine": {"fail_fast": True, "log_level": "INFO"}, "tags": ["a"], "name": "x"}
    config = {"engine": {"fail_fast": True, "log_level": "DEBUG"}, "tags": ["a"], "name": "x", "extra": 1}

    stripped = strip_defaults(config, defaults)

    assert stripped == {"engine": {"log_level": "DEBUG"}, "extra": 1}
    assert deep_merge(defaults, stripped) == config


def test_strip_defaults_removes_emptied_sections():
    _require_imports()
    defaults = {"engine": {"fail_fast": True}}
    assert strip_defaults({"engine": {"fail_fast": True}}, defaults) == {}


def test_strip_defaults_rejects_non_mapping():
    _require_imports()
    with pytest.raises(InvalidArgumentError):
        strip_defaults([1], {})
