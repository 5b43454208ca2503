# src/build_properties/core/config/__init__.py

"""
Camada de settings do Build Properties.

Este pacote carrega, mescla e valida os settings ambientais da
biblioteca (nível de log e destino das system properties).

Responsabilidades do pacote:
    - Carregamento de arquivos de settings (defaults + overrides locais)
    - Resolução via deep-merge determinístico
    - Conversão para `ControllerSettings` validado

Limites explícitos:
    - Não resolve propriedades do build
    - Não interage com o estado do controller
"""

from .errors import (  # noqa: F401
    ConfigError,
    ConfigTypeConflictError,
    DefaultsNotFoundError,
    InvalidConfigRootTypeError,
    InvalidSettingError,
    UnsupportedConfigFormatError,
)
from .loader import load_settings  # noqa: F401
from .merge import deep_merge  # noqa: F401
from .settings import (  # noqa: F401
    DEFAULT_SETTINGS,
    SINK_ENVIRON,
    SINK_MEMORY,
    ControllerSettings,
    resolve_settings,
)
