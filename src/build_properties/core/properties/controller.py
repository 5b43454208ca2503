# src/build_properties/core/properties/controller.py
"""
PropertiesController — dono do ciclo de vida das propriedades do build.

Este módulo define o `PropertiesController`, responsável por carregar
as propriedades do build exatamente uma vez e por expor um handle
estável (`SharedPropertySet`) para consultá-las.

Contrato:
    - `get_properties()` sempre retorna o mesmo handle, em qualquer estado
    - `load(settings_dir)` executa o load na primeira chamada bem-sucedida
      e é no-op nas seguintes
    - consultas ao handle antes do load levantam `PropertiesNotLoadedError`

Concorrência:
    - loads concorrentes são serializados por um lock; apenas uma thread
      invoca o loader e projeta system properties
    - a troca de estado é uma única atribuição de referência, feita após
      o `Loaded` estar completo
    - leitores nunca tomam o lock

Invariantes:
    - O estado é sempre `Unloaded` ou `Loaded`
    - A transição ocorre no máximo uma vez por controller
    - O handle nunca muda de identidade
    - Após o load, todas as leituras observam o mesmo snapshot

Limites explícitos:
    - Não lê arquivos de propriedades (delegado ao loader)
    - Não descobre o layout do build
    - Não desfaz system properties projetadas (não existe unload)
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Dict, Mapping, Optional

from build_properties.core.config.errors import InvalidSettingError
from build_properties.core.config.loader import load_settings
from build_properties.core.config.settings import (
    SINK_ENVIRON,
    SINK_MEMORY,
    ControllerSettings,
    resolve_settings,
)
from build_properties.core.logging_config import setup_logging_from_settings

from .layout import BuildLayout
from .loader import PropertiesLoader
from .property_set import PropertySet
from .state import Loaded, PropertyState, Unloaded, load_state, properties_of
from .system_properties import (
    EnvironSystemProperties,
    InMemorySystemProperties,
    SystemPropertySink,
)


logger = logging.getLogger(__name__)


class SharedPropertySet:
    """
    Handle estável sobre o estado corrente do controller.

    Cada chamada lê o estado no momento da chamada; o chamador nunca
    precisa obter o handle de novo após o load.
    """

    __slots__ = ("_controller",)

    def __init__(self, controller: "PropertiesController"):
        self._controller = controller

    def find(self, name: str) -> Optional[str]:
        return self._current().find(name)

    def merge_properties(self, properties: Mapping[str, str]) -> Dict[str, str]:
        return self._current().merge_properties(properties)

    def _current(self) -> PropertySet:
        return properties_of(self._controller._state)

    def __repr__(self) -> str:
        return f"SharedPropertySet(loaded={self._controller.is_loaded})"


class PropertiesController:
    """
    Controla o load único das propriedades do build.

    Args:
        loader: Colaborador que resolve as propriedades de um diretório.
        layout: Layout opcional, usado quando `load()` não recebe diretório.
        system_properties: Destino da projeção `systemProp.*`
            (padrão: `EnvironSystemProperties`).
    """

    def __init__(
        self,
        loader: PropertiesLoader,
        *,
        layout: Optional[BuildLayout] = None,
        system_properties: Optional[SystemPropertySink] = None,
    ):
        self._system_properties = system_properties or EnvironSystemProperties()
        self._state: PropertyState = Unloaded(
            loader=loader,
            system_properties=self._system_properties,
            layout=layout,
        )
        self._lock = threading.Lock()
        self._shared = SharedPropertySet(self)

    @property
    def is_loaded(self) -> bool:
        return isinstance(self._state, Loaded)

    @property
    def system_properties(self) -> SystemPropertySink:
        return self._system_properties

    @property
    def fingerprint(self) -> Optional[str]:
        """Hash do snapshot carregado, ou `None` antes do load."""
        state = self._state
        return state.fingerprint if isinstance(state, Loaded) else None

    def get_properties(self) -> SharedPropertySet:
        return self._shared

    def load(self, settings_dir: Optional[Path] = None) -> None:
        """
        Carrega as propriedades a partir de `settings_dir`, uma única vez.

        Quando `settings_dir` é `None`, o diretório de settings do layout
        é utilizado. Após o primeiro load bem-sucedido, chamadas seguintes
        são no-op, mesmo com outro diretório.

        Raises:
            SettingsDirUnresolvedError: Sem diretório e sem layout.
            Exception: Qualquer falha do loader, sem alteração; o controller
                permanece `Unloaded`.
        """
        if isinstance(self._state, Loaded):
            logger.debug("Propriedades já carregadas; load ignorado (%s)", settings_dir)
            return

        with self._lock:
            current = self._state
            if isinstance(current, Loaded):
                logger.debug("Propriedades carregadas por outra thread; load ignorado")
                return

            logger.info("Carregando propriedades do build (dir=%s)", settings_dir)
            try:
                loaded = load_state(current, settings_dir)
            except Exception:
                logger.warning("Falha ao carregar propriedades do build", exc_info=True)
                raise

            self._state = loaded

        logger.info(
            "Propriedades carregadas de %s (fingerprint=%s, system properties=%d)",
            loaded.settings_dir,
            loaded.fingerprint[:12],
            len(loaded.system_properties),
        )


def create_controller(
    loader: PropertiesLoader,
    *,
    layout: Optional[BuildLayout] = None,
    settings: Optional[ControllerSettings] = None,
) -> PropertiesController:
    """
    Cria um controller com o sink de system properties definido em `settings`.

    Raises:
        InvalidSettingError: Se o sink não for suportado.
    """
    settings = settings or ControllerSettings()

    sink: SystemPropertySink
    if settings.system_properties_sink == SINK_MEMORY:
        sink = InMemorySystemProperties()
    elif settings.system_properties_sink == SINK_ENVIRON:
        sink = EnvironSystemProperties()
    else:
        raise InvalidSettingError(
            f"Sink de system properties não suportado: {settings.system_properties_sink}"
        )

    return PropertiesController(loader, layout=layout, system_properties=sink)


def create_controller_from_files(
    loader: PropertiesLoader,
    *,
    defaults_path: Optional[str] = None,
    local_path: Optional[str] = None,
    layout: Optional[BuildLayout] = None,
    configure_logging: bool = True,
) -> PropertiesController:
    """
    Ponto de entrada completo: arquivos de settings → controller pronto.

    Carrega os settings (`load_settings`), valida-os (`resolve_settings`),
    configura o logging do pacote quando `configure_logging` é verdadeiro
    e cria o controller com o sink escolhido.

    Raises:
        ConfigError: Qualquer falha de carregamento ou validação dos settings.
    """
    settings = resolve_settings(load_settings(defaults_path=defaults_path, local_path=local_path))
    if configure_logging:
        setup_logging_from_settings(settings)
    return create_controller(loader, layout=layout, settings=settings)
