# tests/core/properties/test_system_properties.py
"""
Testes da projeção `systemProp.*` em system properties do processo.

Os testes asseguram que:
- apenas chaves com o prefixo são projetadas, sem o prefixo
- a projeção ocorre somente no primeiro load bem-sucedido
- o sink padrão escreve em `os.environ`
- pares recusados pelo sink nunca deixam escritas parciais

Decisões arquiteturais:
    - Testes usam `InMemorySystemProperties` sempre que possível
    - O sink de ambiente é validado via `monkeypatch`, sem vazar estado

Limites explícitos:
    - Não valida leitura das system properties por terceiros
"""

import logging
import os
from pathlib import Path

import pytest

try:
    from build_properties.core.properties.controller import PropertiesController
    from build_properties.core.properties.errors import InvalidSystemPropertyError
    from build_properties.core.properties.system_properties import (
        SYSTEM_PROP_PREFIX,
        EnvironSystemProperties,
        InMemorySystemProperties,
        SystemPropertySink,
        project_system_properties,
    )
except Exception as e:  # noqa: BLE001
    PropertiesController = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing system properties projection. Implement:\n"
            "- src/build_properties/core/properties/system_properties.py\n"
            f"Import error: {_IMPORT_ERR}"
        )


def test_prefix_constant():
    _require_imports()
    assert SYSTEM_PROP_PREFIX == "systemProp."


def test_projection_strips_prefix_and_filters():
    """
    Verifica que apenas chaves prefixadas chegam ao sink.

    Invariantes:
        - `systemProp.foo` vira `foo`
        - `other.key` não gera nenhuma escrita
        - O retorno reflete exatamente as escritas
    """
    _require_imports()
    sink = InMemorySystemProperties()
    projected = project_system_properties(
        {"systemProp.foo": "bar", "other.key": "x", "systemProp.a.b": "c"}, sink
    )

    assert projected == {"foo": "bar", "a.b": "c"}
    assert sink.snapshot() == {"foo": "bar", "a.b": "c"}
    assert sink.get("other.key") is None
    assert sink.get("key") is None


def test_prefix_must_be_at_start():
    _require_imports()
    sink = InMemorySystemProperties()
    project_system_properties({"x.systemProp.foo": "bar", "systemprop.foo": "baz"}, sink)
    assert sink.snapshot() == {}


def test_controller_projects_on_load(tmp_path: Path, CountingLoader, memory_sink):
    _require_imports()
    controller = PropertiesController(
        CountingLoader({"systemProp.foo": "bar", "other.key": "x"}),
        system_properties=memory_sink,
    )

    controller.load(tmp_path)

    assert memory_sink.snapshot() == {"foo": "bar"}


def test_projection_happens_once(tmp_path: Path, CountingLoader, memory_sink):
    """
    Verifica que loads redundantes não reescrevem system properties.
    """
    _require_imports()
    controller = PropertiesController(
        CountingLoader({"systemProp.foo": "bar", "systemProp.baz": "qux"}),
        system_properties=memory_sink,
    )

    controller.load(tmp_path)
    controller.load(tmp_path)
    controller.load(tmp_path / "other")

    assert memory_sink.writes == 2


def test_loaded_properties_keep_prefixed_keys(tmp_path: Path, CountingLoader, memory_sink):
    _require_imports()
    controller = PropertiesController(
        CountingLoader({"systemProp.foo": "bar"}), system_properties=memory_sink
    )
    controller.load(tmp_path)
    assert controller.get_properties().find("systemProp.foo") == "bar"
    assert controller.get_properties().find("foo") is None


def test_environ_sink_writes_process_environment(monkeypatch):
    _require_imports()
    monkeypatch.delenv("bp.test.key", raising=False)
    sink = EnvironSystemProperties()
    # registra a chave para que o monkeypatch a remova no teardown
    monkeypatch.setenv("bp.test.key", "placeholder")

    sink.set("bp.test.key", "value")

    assert os.environ["bp.test.key"] == "value"


def test_default_controller_sink_is_environ(tmp_path: Path, CountingLoader, monkeypatch):
    _require_imports()
    monkeypatch.setenv("bp.default.sink", "placeholder")
    controller = PropertiesController(CountingLoader({"systemProp.bp.default.sink": "on"}))

    controller.load(tmp_path)

    assert isinstance(controller.system_properties, EnvironSystemProperties)
    assert os.environ["bp.default.sink"] == "on"


def test_sinks_satisfy_protocol():
    _require_imports()
    assert isinstance(EnvironSystemProperties(), SystemPropertySink)
    assert isinstance(InMemorySystemProperties(), SystemPropertySink)


class _RecordingSink:
    """Sink que registra a ordem de `check`/`set` e recusa chaves marcadas."""

    def __init__(self, rejected=()):
        self.rejected = set(rejected)
        self.events = []

    def check(self, key, value):
        self.events.append(("check", key))
        if key in self.rejected:
            raise InvalidSystemPropertyError(f"recusada: {key}")

    def set(self, key, value):
        self.events.append(("set", key))


def test_all_checks_happen_before_first_write():
    """
    Verifica que a projeção valida todos os pares antes de escrever.

    Invariantes:
        - Nenhum `set` ocorre antes do último `check`
        - A chave recusada nunca é escrita
        - O retorno contém apenas as chaves aceitas
    """
    _require_imports()
    sink = _RecordingSink(rejected={"second"})

    projected = project_system_properties(
        {"systemProp.first": "1", "systemProp.second": "2", "systemProp.third": "3"}, sink
    )

    kinds = [kind for kind, _ in sink.events]
    assert kinds == ["check", "check", "check", "set", "set"]
    assert ("set", "second") not in sink.events
    assert projected == {"first": "1", "third": "3"}


def test_rejected_key_is_logged_and_load_succeeds(tmp_path: Path, CountingLoader, caplog):
    _require_imports()
    caplog.set_level(logging.WARNING, logger="build_properties")
    sink = _RecordingSink(rejected={"bad"})
    controller = PropertiesController(
        CountingLoader({"systemProp.ok": "1", "systemProp.bad": "2"}), system_properties=sink
    )

    controller.load(tmp_path)

    assert controller.is_loaded
    assert ("set", "bad") not in sink.events
    warnings = [r.getMessage() for r in caplog.records if r.levelno == logging.WARNING]
    assert any("systemProp.bad" in m for m in warnings)


def test_empty_name_is_skipped(tmp_path: Path, CountingLoader, memory_sink):
    _require_imports()
    controller = PropertiesController(
        CountingLoader({"systemProp.": "x", "systemProp.foo": "bar"}),
        system_properties=memory_sink,
    )

    controller.load(tmp_path)

    assert memory_sink.snapshot() == {"foo": "bar"}
    assert memory_sink.writes == 1


@pytest.mark.parametrize(
    "key, value",
    [("", "v"), ("a=b", "v"), ("a\0b", "v"), ("ok", "v\0")],
)
def test_environ_sink_rejects_unrepresentable_pairs(key, value):
    _require_imports()
    with pytest.raises(InvalidSystemPropertyError):
        EnvironSystemProperties().check(key, value)


def test_environ_sink_unrepresentable_key_does_not_poison_load(
    tmp_path: Path, CountingLoader, monkeypatch
):
    """
    Verifica que uma chave que `os.environ` recusaria não impede o load.

    Invariantes:
        - O load termina com sucesso na primeira tentativa
        - A chave válida é escrita no ambiente
        - A chave inválida é ignorada
        - Loads seguintes não invocam o loader de novo
    """
    _require_imports()
    monkeypatch.setenv("bp.env.ok", "placeholder")
    loader = CountingLoader({"systemProp.bp.env.ok": "1", "systemProp.a=b": "2"})
    controller = PropertiesController(loader)

    controller.load(tmp_path)
    controller.load(tmp_path)

    assert controller.is_loaded
    assert loader.calls == 1
    assert os.environ["bp.env.ok"] == "1"
    assert controller._state.system_properties == {"bp.env.ok": "1"}
