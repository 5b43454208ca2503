# tests/conftest.py
"""
Fixtures compartilhados para testes do Build Properties.

Este módulo define fixtures reutilizáveis que fornecem:
- settings mínimos e determinísticos em YAML
- loaders colaboradores controlados (contagem, falha programada)
- sinks de system properties em memória

O objetivo destas fixtures é permitir testes do core sem depender de:
- arquivos de propriedades reais
- variáveis de ambiente do processo
- layout real de um build

Decisões arquiteturais:
    - Loaders dummy utilizam duck typing em vez de herança
    - Nenhuma fixture escreve em `os.environ`
    - Imports do core são realizados de forma lazy

Invariantes:
    - Nenhuma fixture executa load por conta própria
    - Todas as fixtures são seguras para execução em paralelo
"""

import threading
import time
from pathlib import Path

import pytest


# =====================================================
# Settings fixtures
# =====================================================

@pytest.fixture
def project_like_settings_defaults_yaml() -> str:
    """
    YAML de settings padrão semelhante ao uso real do projeto.

    Representa o conteúdo típico de um `settings.defaults.yaml`, sobre o
    qual settings locais são aplicados via deep-merge.
    """
    return (
        "logging:\n"
        "  level: INFO\n"
        "system_properties:\n"
        "  sink: environ\n"
    )


@pytest.fixture
def project_like_settings_local_yaml() -> str:
    """YAML de overrides locais: apenas o sink muda."""
    return (
        "system_properties:\n"
        "  sink: memory\n"
    )


# =====================================================
# Loader / sink fixtures
# =====================================================

@pytest.fixture
def CountingLoader():
    """
    Fornece uma classe de loader que conta invocações.

    O loader é thread-safe na contagem e pode, opcionalmente, falhar nas
    primeiras `fail_times` chamadas com `RuntimeError` ou demorar `delay`
    segundos (para alargar janelas de corrida).
    """
    from build_properties.core.properties.property_set import DefaultPropertySet

    class _CountingLoader:
        def __init__(self, properties=None, *, fail_times=0, delay=0.0):
            self.properties = dict(properties or {})
            self.fail_times = fail_times
            self.delay = delay
            self.calls = 0
            self.dirs = []
            self._lock = threading.Lock()

        def load_properties(self, settings_dir: Path):
            with self._lock:
                self.calls += 1
                self.dirs.append(settings_dir)
                should_fail = self.calls <= self.fail_times
            if self.delay:
                time.sleep(self.delay)
            if should_fail:
                raise RuntimeError(f"falha simulada ao ler {settings_dir}")
            return DefaultPropertySet(self.properties)

    return _CountingLoader


@pytest.fixture
def memory_sink():
    from build_properties.core.properties.system_properties import InMemorySystemProperties

    return InMemorySystemProperties()
