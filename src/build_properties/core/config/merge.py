# src/build_properties/core/config/merge.py
"""
Deep-merge dos settings do Build Properties.

Os settings são seções (`logging`, `system_properties`) de valores
escalares; o merge reflete exatamente esse formato:

Política de merge (v1):
    - seção + seção → merge recursivo por chave
    - valor + valor do mesmo tipo → o override vence
    - valor `None` na base → aceita qualquer override
    - qualquer outra combinação → `ConfigTypeConflictError`

Observação:
    Este merge é exclusivo da camada de settings. O merge de
    propriedades do build (`PropertySet.merge_properties`) é plano,
    chave a chave, e não passa por aqui.

Invariantes:
    - Nenhum input é mutado durante o processo
    - Conflitos estruturais interrompem o merge
"""

from copy import deepcopy
from typing import Any, Dict

from .errors import ConfigTypeConflictError


def _merge_value(key: str, current: Any, incoming: Any) -> Any:
    if isinstance(current, dict) and isinstance(incoming, dict):
        return deep_merge(current, incoming)
    if current is None or type(current) is type(incoming):
        return deepcopy(incoming)
    raise ConfigTypeConflictError(
        f"Conflito de tipo na chave '{key}': "
        f"{type(current).__name__} vs {type(incoming).__name__}"
    )


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Mescla `override` sobre `base`, retornando um novo dicionário.

    Raises:
        ConfigTypeConflictError: Se uma chave mudar de forma entre base e
            override (ex.: seção substituída por escalar).
    """
    if not isinstance(base, dict) or not isinstance(override, dict):
        raise ConfigTypeConflictError(
            f"Deep-merge requer dicts no nível raiz, recebido: "
            f"{type(base).__name__} vs {type(override).__name__}"
        )

    merged = deepcopy(base)
    for key, incoming in override.items():
        merged[key] = _merge_value(key, merged[key], incoming) if key in merged else deepcopy(incoming)
    return merged
