# tests/conftest.py
"""
Fixtures compartilhados para testes do fileconfig.

Este módulo define fixtures reutilizáveis que fornecem:
- o mesmo documento de exemplo escrito em JSON, YAML e TOML
- um contexto de placeholders correspondente
- accessors prontos para cada backend

Decisões arquiteturais:
    - Os três textos descrevem exatamente o mesmo documento, para que
      testes possam ser parametrizados por formato
    - Arquivos são sempre criados em `tmp_path`, nunca no repositório
    - Imports do pacote são realizados de forma lazy dentro das fixtures

Invariantes:
    - Nenhuma fixture depende de estado global
    - Todas as fixtures são seguras para execução em paralelo
"""

import pytest


SAMPLE_JSON = """
{
    "id": 123,
    "name": "foo",
    "text": "hello",
    "enabled": true,
    "category": "${locale.category}",
    "title": "${locale.title}",
    "addr": {
        "city": "sz",
        "postcode": "518000",
        "street": ["line1", "line2"]
    }
}
"""

SAMPLE_YAML = """
# configuração de exemplo
id: 123
name: foo
text: hello
enabled: true
category: ${locale.category}
title: ${locale.title}
addr:
  city: sz
  postcode: '518000'
  street:
    - line1
    - line2
"""

SAMPLE_TOML = """
# configuração de exemplo
id = 123
name = "foo"
text = "hello"
enabled = true
category = "${locale.category}"
title = "${locale.title}"

[addr]
city = "sz"
postcode = "518000"
street = ["line1", "line2"]
"""

SAMPLE_TEXTS = {
    ".json": SAMPLE_JSON,
    ".yaml": SAMPLE_YAML,
    ".toml": SAMPLE_TOML,
}

EXTENSIONS = sorted(SAMPLE_TEXTS)


@pytest.fixture(params=EXTENSIONS)
def extension(request) -> str:
    """Extensão de arquivo; parametriza o teste para os três formatos."""
    return request.param


@pytest.fixture
def accessor(extension):
    from fileconfig.core.accessor import ConfigAccessor

    return ConfigAccessor.for_path(f"config{extension}")


@pytest.fixture
def sample_file(tmp_path, extension):
    """Arquivo com o documento de exemplo no formato da extensão corrente."""
    path = tmp_path / f"sample{extension}"
    path.write_text(SAMPLE_TEXTS[extension], encoding="utf-8")
    return path


@pytest.fixture
def placeholder_context() -> dict:
    return {
        "locale": {
            "category": "类别",
            "title": "标题",
        }
    }
