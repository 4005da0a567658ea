# src/fileconfig/core/__init__.py
"""
Core do fileconfig.

Componentes principais:
    - backends      → conversão texto ↔ documento por formato (JSON, YAML, TOML)
    - io            → leitura/escrita de arquivos com taxonomia de erros
    - config        → merge, igualdade, placeholders, settings, camadas
    - accessor      → load / save / update / update_by_file
    - async_accessor → mesma superfície como corrotinas

Princípios fundamentais:
    - Nenhum estado compartilhado entre chamadas
    - Nenhuma escrita redundante
    - Nenhuma exceção de biblioteca de formato chega ao chamador
"""
