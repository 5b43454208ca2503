# src/build_properties/core/properties/system_properties.py
"""
Projeção de propriedades do build em system properties do processo.

Propriedades cujo nome começa com `systemProp.` são escritas, sem o
prefixo, em um store global do processo no momento do load. Isso
permite que código que nunca vê o PropertySet seja influenciado pela
configuração do build através do canal global.

O store global fica atrás de uma interface estreita de escrita
(`SystemPropertySink.set`), para que testes capturem as escritas sem
tocar no estado real do processo. Um sink pode, opcionalmente, expor
`check(key, value)` para recusar pares que não consegue representar.

Sinks disponíveis:
    - `EnvironSystemProperties`: escreve em `os.environ` (padrão)
    - `InMemorySystemProperties`: dict protegido por lock

Política de projeção (v1):
    - Todos os pares são checados antes da primeira escrita
    - Pares recusados pelo sink são ignorados com WARNING
    - Só depois da checagem completa as escritas acontecem

Invariantes:
    - Apenas chaves com o prefixo são projetadas
    - Uma chave recusada nunca deixa escritas parciais no store
    - Cada escrita de chave é atômica para leitores daquela chave
    - A ordem de escrita entre chaves não é garantida

Limites explícitos:
    - Não remove system properties (não existe unload)
    - Não lê o store global
"""

from __future__ import annotations

import logging
import os
import threading
from typing import Dict, Mapping, Optional, Protocol, runtime_checkable

from .errors import InvalidSystemPropertyError


logger = logging.getLogger(__name__)

SYSTEM_PROP_PREFIX = "systemProp."


@runtime_checkable
class SystemPropertySink(Protocol):
    """Destino de escrita das system properties projetadas."""

    def set(self, key: str, value: str) -> None:
        ...


class EnvironSystemProperties:
    """Escreve system properties no ambiente do processo (`os.environ`)."""

    def check(self, key: str, value: str) -> None:
        """Recusa pares que `os.environ` rejeitaria na escrita."""
        if not key:
            raise InvalidSystemPropertyError("Nome de system property vazio")
        if "=" in key or "\0" in key:
            raise InvalidSystemPropertyError(
                f"Nome de system property não representável no ambiente: {key!r}"
            )
        if "\0" in value:
            raise InvalidSystemPropertyError(
                f"Valor da system property {key!r} contém caractere NUL"
            )

    def set(self, key: str, value: str) -> None:
        os.environ[key] = value

    def __repr__(self) -> str:
        return "EnvironSystemProperties()"


class InMemorySystemProperties:
    """Store de system properties em memória, seguro entre threads."""

    def __init__(self) -> None:
        self._values: Dict[str, str] = {}
        self._lock = threading.Lock()
        self.writes = 0

    def check(self, key: str, value: str) -> None:
        if not key:
            raise InvalidSystemPropertyError("Nome de system property vazio")

    def set(self, key: str, value: str) -> None:
        with self._lock:
            self._values[key] = value
            self.writes += 1

    def get(self, key: str) -> Optional[str]:
        with self._lock:
            return self._values.get(key)

    def snapshot(self) -> Dict[str, str]:
        with self._lock:
            return dict(self._values)


def project_system_properties(
    properties: Mapping[str, str],
    sink: SystemPropertySink,
    *,
    prefix: str = SYSTEM_PROP_PREFIX,
) -> Dict[str, str]:
    """
    Escreve no `sink` toda propriedade prefixada, sem o prefixo.

    A projeção tem duas fases: primeiro todos os pares são checados pelo
    sink (quando ele expõe `check`), depois os aceitos são escritos.
    Pares recusados são ignorados com WARNING e nunca chegam ao store.

    Args:
        properties: Propriedades materializadas (sem overrides).
        sink: Destino das escritas.
        prefix: Prefixo que marca uma system property.

    Returns:
        Dict[str, str]: As system properties efetivamente escritas.
    """
    check = getattr(sink, "check", None)

    accepted: Dict[str, str] = {}
    for key, value in properties.items():
        if not key.startswith(prefix):
            continue
        name = key[len(prefix):]
        if check is not None:
            try:
                check(name, value)
            except InvalidSystemPropertyError as exc:
                logger.warning("System property ignorada (%s): %s", key, exc)
                continue
        accepted[name] = value

    for name, value in accepted.items():
        sink.set(name, value)
        logger.debug("System property projetada: %s", name)
    return accepted
