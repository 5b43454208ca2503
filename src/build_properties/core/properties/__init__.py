# src/build_properties/core/properties/__init__.py
"""
# Properties Core — Build Properties

Este pacote implementa o ciclo de vida das propriedades de um build:
load único a partir de um diretório, consulta e merge com overrides,
e projeção de `systemProp.*` no store global do processo.

## Componentes

- **property_set**: `PropertySet` (Protocol) e `DefaultPropertySet`
- **loader**: `PropertiesLoader` (Protocol) e `MappingPropertiesLoader`
- **layout**: `BuildLayout`
- **state**: variantes `Unloaded` / `Loaded` e suas transições
- **controller**: `PropertiesController`, `SharedPropertySet`, `create_controller`,
  `create_controller_from_files`
- **system_properties**: sinks e projeção `systemProp.*`
- **hashing**: fingerprint do snapshot carregado

## Invariantes

- A transição Unloaded → Loaded ocorre no máximo uma vez
- O handle retornado pelo controller nunca muda de identidade
- Consultas antes do load falham com `PropertiesNotLoadedError`
"""

from .controller import (  # noqa: F401
    PropertiesController,
    SharedPropertySet,
    create_controller,
    create_controller_from_files,
)
from .errors import (  # noqa: F401
    PropertiesError,
    PropertiesNotLoadedError,
    SettingsDirUnresolvedError,
    InvalidSystemPropertyError,
)
from .hashing import compute_properties_hash  # noqa: F401
from .layout import BuildLayout  # noqa: F401
from .loader import MappingPropertiesLoader, PropertiesLoader  # noqa: F401
from .property_set import DefaultPropertySet, PropertySet  # noqa: F401
from .state import Loaded, PropertyState, Unloaded  # noqa: F401
from .system_properties import (  # noqa: F401
    SYSTEM_PROP_PREFIX,
    EnvironSystemProperties,
    InMemorySystemProperties,
    SystemPropertySink,
    project_system_properties,
)
