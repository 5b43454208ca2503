# src/build_properties/core/config/settings.py
"""
Modelo de settings do Build Properties.

Os settings controlam apenas aspectos ambientais da biblioteca:
    - nível de log do pacote
    - destino das system properties projetadas no load

Eles não participam da resolução das propriedades do build, que é
responsabilidade exclusiva do loader colaborador.

Estrutura esperada (v1):

    logging:
      level: WARNING        # DEBUG | INFO | WARNING | ERROR | CRITICAL
    system_properties:
      sink: environ         # environ | memory
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict

from .errors import InvalidConfigRootTypeError, InvalidSettingError


SINK_ENVIRON = "environ"
SINK_MEMORY = "memory"
SUPPORTED_SINKS = (SINK_ENVIRON, SINK_MEMORY)

DEFAULT_SETTINGS: Dict[str, Any] = {
    "logging": {"level": "WARNING"},
    "system_properties": {"sink": SINK_ENVIRON},
}


@dataclass(frozen=True)
class ControllerSettings:
    """Settings resolvidos e validados (imutáveis)."""

    log_level: str = "WARNING"
    system_properties_sink: str = SINK_ENVIRON


def _section(config: Dict[str, Any], name: str) -> Dict[str, Any]:
    section = config.get(name) or {}
    if not isinstance(section, dict):
        raise InvalidSettingError(
            f"Seção '{name}' deve ser dict, recebido: {type(section).__name__}"
        )
    return section


def resolve_settings(config: Dict[str, Any]) -> ControllerSettings:
    """
    Converte um dicionário de settings (já mesclado) em `ControllerSettings`.

    Chaves ausentes assumem os valores de `DEFAULT_SETTINGS`. Valores fora
    do domínio aceito são rejeitados explicitamente, sem fallback.

    Raises:
        InvalidConfigRootTypeError: Se `config` não for um dicionário.
        InvalidSettingError: Se o nível de log ou o sink forem inválidos.
    """
    if not isinstance(config, dict):
        raise InvalidConfigRootTypeError(
            f"Settings devem ser dict, recebido: {type(config).__name__}"
        )

    level = str(_section(config, "logging").get("level", "WARNING")).upper()
    if not isinstance(logging.getLevelName(level), int):
        raise InvalidSettingError(f"Nível de log inválido: {level}")

    sink = str(_section(config, "system_properties").get("sink", SINK_ENVIRON)).lower()
    if sink not in SUPPORTED_SINKS:
        raise InvalidSettingError(
            f"Sink de system properties não suportado: {sink} "
            f"(esperado: {', '.join(SUPPORTED_SINKS)})"
        )

    return ControllerSettings(log_level=level, system_properties_sink=sink)
