# src/build_properties/core/properties/state.py
"""
Estados do ciclo de vida das propriedades do build.

O ciclo de vida é um tipo soma de duas variantes:

    - `Unloaded`: carrega a capacidade de executar o load (layout,
      loader colaborador e sink de system properties). Não responde
      consultas.
    - `Loaded`: carrega o PropertySet resolvido e seu fingerprint.
      Responde consultas e absorve novos loads como no-op.

As transições são funções puras sobre a variante atual; nenhuma das
variantes é mutável. O controller troca a referência do estado de uma
só vez, então um `Loaded` observado está sempre completo.

Decisões arquiteturais:
    - A transição é unidirecional (Unloaded → Loaded)
    - A projeção de system properties ocorre antes do `Loaded` existir
    - Falha do loader não produz estado: o chamador continua com o
      `Unloaded` original e pode tentar de novo

Limites explícitos:
    - Não sincroniza threads (responsabilidade do controller)
    - Não lê arquivos
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional, Union

from .errors import PropertiesNotLoadedError, SettingsDirUnresolvedError
from .hashing import compute_properties_hash
from .layout import BuildLayout
from .loader import PropertiesLoader
from .property_set import PropertySet
from .system_properties import SystemPropertySink, project_system_properties


@dataclass(frozen=True)
class Unloaded:
    """Estado inicial: sabe carregar, não sabe responder."""

    loader: PropertiesLoader
    system_properties: SystemPropertySink
    layout: Optional[BuildLayout] = None

    def resolve_settings_dir(self, settings_dir: Optional[Path]) -> Path:
        if settings_dir is not None:
            return Path(settings_dir)
        if self.layout is not None:
            return self.layout.settings_dir
        raise SettingsDirUnresolvedError(
            "Nenhum diretório informado e nenhum BuildLayout disponível para resolvê-lo."
        )


@dataclass(frozen=True)
class Loaded:
    """Estado terminal: snapshot resolvido das propriedades."""

    properties: PropertySet
    fingerprint: str
    settings_dir: Path
    system_properties: Dict[str, str]


PropertyState = Union[Unloaded, Loaded]


def properties_of(state: PropertyState) -> PropertySet:
    """
    Retorna o PropertySet do estado atual.

    Raises:
        PropertiesNotLoadedError: Se o estado ainda for `Unloaded`.
    """
    if isinstance(state, Loaded):
        return state.properties
    raise PropertiesNotLoadedError("As propriedades do build ainda não foram carregadas.")


def load_state(state: PropertyState, settings_dir: Optional[Path]) -> PropertyState:
    """
    Executa a transição de load sobre `state`.

    - `Loaded`: retorna o próprio estado (no-op, o diretório é ignorado)
    - `Unloaded`: delega ao loader, projeta system properties e retorna
      um novo `Loaded`

    Exceções do loader propagam sem alteração.
    """
    if isinstance(state, Loaded):
        return state

    directory = state.resolve_settings_dir(settings_dir)
    loaded = state.loader.load_properties(directory)

    # toda validação acontece antes da primeira escrita global
    materialized = dict(loaded.merge_properties({}))
    fingerprint = compute_properties_hash(materialized)
    projected = project_system_properties(materialized, state.system_properties)

    return Loaded(
        properties=loaded,
        fingerprint=fingerprint,
        settings_dir=directory,
        system_properties=projected,
    )
