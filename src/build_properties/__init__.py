# src/build_properties/__init__.py
"""
Build Properties — ciclo de vida das propriedades de uma execução de build.

As propriedades de um build são carregadas uma única vez a partir de um
diretório, consultadas e mescladas com overrides sob demanda, e
parcialmente projetadas no estado global do processo (system properties)
no momento do load.

Arquitetura em alto nível:
    - core.properties → controller, handle estável, estados e projeção
    - core.config     → settings da própria biblioteca
    - core.logging_config → logging do pacote

Limites explícitos:
    - Não lê nem interpreta arquivos de propriedades
    - Não define precedência entre fontes
    - Não localiza o diretório do build
"""
# src/build_properties/__init__.py
from .core.properties import (
    BuildLayout,
    MappingPropertiesLoader,
    PropertiesController,
    PropertiesNotLoadedError,
    PropertySet,
    create_controller,
    create_controller_from_files,
)

__all__ = [
    "BuildLayout",
    "MappingPropertiesLoader",
    "PropertiesController",
    "PropertiesNotLoadedError",
    "PropertySet",
    "create_controller",
    "create_controller_from_files",
]
