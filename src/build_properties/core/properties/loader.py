# src/build_properties/core/properties/loader.py
"""
Contrato do loader colaborador de propriedades.

O controller não sabe ler propriedades: ele delega a um loader cujo
único contrato visível é "dado um diretório, retornar um PropertySet
totalmente resolvido". Formato de arquivos, variáveis de ambiente e
precedência entre fontes pertencem ao loader.

Este módulo expõe:
    - `PropertiesLoader` (Protocol): contrato consumido pelo controller
    - `MappingPropertiesLoader`: loader estático sobre um mapa fixo,
      útil para embedding e testes
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import List, Mapping, Protocol, runtime_checkable

from .property_set import DefaultPropertySet, PropertySet


@runtime_checkable
class PropertiesLoader(Protocol):
    """Resolve todas as fontes de propriedades para um diretório."""

    def load_properties(self, settings_dir: Path) -> PropertySet:
        ...


class MappingPropertiesLoader:
    """
    Loader que sempre retorna o mesmo mapa, independente do diretório.

    Registra os diretórios recebidos em `requested_dirs` (ordem de
    chegada), permitindo verificar quantas vezes o load foi de fato
    delegado.
    """

    def __init__(self, properties: Mapping[str, str]):
        self._properties = dict(properties)
        self._lock = threading.Lock()
        self.requested_dirs: List[Path] = []

    @property
    def calls(self) -> int:
        return len(self.requested_dirs)

    def load_properties(self, settings_dir: Path) -> PropertySet:
        with self._lock:
            self.requested_dirs.append(Path(settings_dir))
        return DefaultPropertySet(self._properties)
