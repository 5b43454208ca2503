# src/build_properties/core/properties/hashing.py
"""
Hashing canônico do snapshot de propriedades carregado.

O hash representa a **identidade** do conjunto de propriedades que o
controller passou a servir após o load, e é utilizado para:
    - rastreabilidade (log do load)
    - verificação de que leituras repetidas observam o mesmo snapshot

Política de hashing (v1):
    - Serialização JSON canônica
    - Ordenação estável de chaves
    - Separadores compactos
    - Codificação UTF-8
    - Algoritmo SHA-256

Invariantes:
    - Conjuntos equivalentes produzem o mesmo hash, independente da ordem
    - O valor gerado é sempre uma string hexadecimal de 64 caracteres
"""

import hashlib
import json
from typing import Dict


def compute_properties_hash(properties: Dict[str, str]) -> str:
    """
    Gera um hash determinístico de um mapa de propriedades.

    Args:
        properties (Dict[str, str]): Propriedades materializadas.

    Returns:
        str: Hash SHA-256 hexadecimal.

    Raises:
        TypeError: Se o objeto fornecido não for um dicionário.
    """

    if not isinstance(properties, dict):
        raise TypeError(
            f"Propriedades para hashing devem ser dict, recebido: {type(properties).__name__}"
        )

    canonical_json = json.dumps(
        properties,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
    )

    return hashlib.sha256(canonical_json.encode("utf-8")).hexdigest()
