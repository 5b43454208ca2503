# src/build_properties/core/logging_config.py
"""
Configuração de logging do pacote `build_properties`.

Todo módulo usa ``logger = logging.getLogger(__name__)``; esta função
apenas instala um handler em stderr no logger do pacote. O logger raiz
da aplicação hospedeira não é tocado.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from build_properties.core.config.errors import InvalidSettingError
from build_properties.core.config.settings import ControllerSettings


PACKAGE_LOGGER = "build_properties"

_FMT_MINIMAL = "%(message)s"

_FMT_VERBOSE = "%(asctime)s [%(name)s] %(message)s"
_DATEFMT_VERBOSE = "%H:%M:%S"

_FMT_DEBUG = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d - %(message)s"
_DATEFMT_DEBUG = "%H:%M:%S"


def setup_logging(level: str = "WARNING") -> logging.Logger:
    """Configura o logger do pacote e retorna-o.

    Nomes de nível desconhecidos levantam `InvalidSettingError`, a mesma
    política de `resolve_settings`.

    Chamadas repetidas substituem o handler anterior em vez de acumular.
    """
    numeric_level = _parse_level(level)

    if numeric_level <= logging.DEBUG:
        fmt, datefmt = _FMT_DEBUG, _DATEFMT_DEBUG
    elif numeric_level <= logging.INFO:
        fmt, datefmt = _FMT_VERBOSE, _DATEFMT_VERBOSE
    else:
        fmt, datefmt = _FMT_MINIMAL, None

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(numeric_level)
    handler.setFormatter(logging.Formatter(fmt, datefmt=datefmt))

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.handlers.clear()
    package_logger.addHandler(handler)
    package_logger.setLevel(numeric_level)
    return package_logger


def setup_logging_from_settings(settings: ControllerSettings) -> logging.Logger:
    return setup_logging(settings.log_level)


def _parse_level(level: Optional[str]) -> int:
    """Converte o nome de um nível em sua constante numérica.

    Raises:
        InvalidSettingError: Se o nome não corresponder a um nível do `logging`.
    """
    if not level:
        return logging.WARNING
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        raise InvalidSettingError(f"Nível de log inválido: {level}")
    return numeric
