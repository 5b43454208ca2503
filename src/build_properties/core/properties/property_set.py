# src/build_properties/core/properties/property_set.py
"""
PropertySet — visão imutável das propriedades resolvidas de um build.

Este módulo define o contrato mínimo de acesso a propriedades
(`PropertySet`) e sua implementação canônica (`DefaultPropertySet`).

Um PropertySet é um mapa `str -> str` já resolvido pelo loader
colaborador. Ele oferece duas operações:
    - `find(name)`: valor armazenado ou `None`
    - `merge_properties(overrides)`: novo dict com overrides aplicados

Política de merge (v1):
    - Merge plano, chave a chave (sem recursão)
    - Em colisão, o override sempre vence
    - Chaves exclusivas de qualquer lado são preservadas

Invariantes:
    - O conteúdo de um DefaultPropertySet nunca muda após a construção
    - `merge_properties` nunca muta o PropertySet nem o override
    - O retorno de `merge_properties` é sempre um novo `dict`

Limites explícitos:
    - Não lê arquivos nem variáveis de ambiente
    - Não conhece precedência entre fontes de propriedades
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional, Protocol, runtime_checkable


@runtime_checkable
class PropertySet(Protocol):
    """
    Contrato mínimo de acesso a propriedades do build.

    Implementações devem ser seguras para leitura concorrente.
    """

    def find(self, name: str) -> Optional[str]:
        ...

    def merge_properties(self, properties: Mapping[str, str]) -> Dict[str, str]:
        ...


class DefaultPropertySet:
    """
    Implementação canônica de `PropertySet` sobre um mapa copiado.

    O mapa recebido é copiado na construção; alterações posteriores
    no mapa original não afetam o PropertySet.
    """

    __slots__ = ("_properties",)

    def __init__(self, properties: Mapping[str, str]):
        self._properties: Mapping[str, str] = MappingProxyType(dict(properties))

    def find(self, name: str) -> Optional[str]:
        return self._properties.get(name)

    def merge_properties(self, properties: Mapping[str, str]) -> Dict[str, str]:
        merged: Dict[str, str] = dict(self._properties)
        merged.update(properties)
        return merged

    def __len__(self) -> int:
        return len(self._properties)

    def __iter__(self) -> Iterator[str]:
        return iter(self._properties)

    def __repr__(self) -> str:
        return f"DefaultPropertySet({len(self._properties)} properties)"
