# src/build_properties/core/config/loader.py
"""
Loader canônico de settings do Build Properties.

Os settings efetivos são resolvidos a partir de:
    - `DEFAULT_SETTINGS` embutido no pacote (sempre presente)
    - um arquivo de defaults (opcional; obrigatório existir quando informado)
    - um arquivo local de overrides (opcional; ignorado se não existir)

Princípios fundamentais:
    - Settings são declarativos e explícitos
    - Erros estruturais são tratados como falhas fatais
    - A mesma entrada sempre produz os mesmos settings

Invariantes:
    - O resultado é sempre um dicionário puro (`dict`)
    - Overrides nunca mutam os defaults

Limites explícitos:
    - Não lê arquivos de propriedades do build (responsabilidade do loader
      colaborador do controller)
    - Não valida o domínio dos valores (ver `settings.resolve_settings`)
"""

import json
import logging
from pathlib import Path
from typing import IO, Any, Callable, Dict, Optional

import yaml  # PyYAML

from .errors import (
    DefaultsNotFoundError,
    InvalidConfigRootTypeError,
    UnsupportedConfigFormatError,
)
from .merge import deep_merge
from .settings import DEFAULT_SETTINGS


logger = logging.getLogger(__name__)


_PARSERS: Dict[str, Callable[[IO[str]], Any]] = {
    ".yaml": yaml.safe_load,
    ".yml": yaml.safe_load,
    ".json": json.load,
}


def _load_file(path: Path) -> Dict[str, Any]:
    """
    Lê um arquivo de settings, escolhendo o parser pela extensão.

    Arquivos vazios viram `{}`; qualquer outra raiz que não seja um
    dicionário é rejeitada.

    Raises:
        DefaultsNotFoundError: Se o arquivo não existir.
        UnsupportedConfigFormatError: Se a extensão não tiver parser.
        InvalidConfigRootTypeError: Se o conteúdo raiz não for um dicionário.
    """
    parser = _PARSERS.get(path.suffix.lower())
    if parser is None:
        raise UnsupportedConfigFormatError(f"Formato não suportado: {path.suffix}")
    if not path.is_file():
        raise DefaultsNotFoundError(f"Arquivo de settings não encontrado: {path}")

    with path.open("r", encoding="utf-8") as f:
        data = parser(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(
            f"Settings root deve ser dict, recebido: {type(data).__name__}"
        )
    return data


def load_settings(
    *,
    defaults_path: Optional[str] = None,
    local_path: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Carrega e resolve os settings efetivos da biblioteca.

    Política de resolução:
        - `DEFAULT_SETTINGS` é sempre a base
        - o arquivo de defaults, quando informado, deve existir
        - o arquivo local é opcional e tem prioridade sobre os demais
        - a resolução utiliza `deep_merge`

    Args:
        defaults_path (Optional[str]): Caminho para o arquivo de defaults.
        local_path (Optional[str]): Caminho opcional para overrides locais.

    Returns:
        Dict[str, Any]: Settings finais resolvidos.

    Raises:
        DefaultsNotFoundError: Se o arquivo de defaults não existir.
        UnsupportedConfigFormatError: Se o formato do arquivo não for suportado.
        InvalidConfigRootTypeError: Se o conteúdo não for um dicionário.
        ConfigTypeConflictError: Se ocorrer conflito estrutural durante o merge.
    """
    effective = deep_merge(DEFAULT_SETTINGS, {})

    if defaults_path is not None:
        effective = deep_merge(effective, _load_file(Path(defaults_path)))

    if local_path is not None:
        local_file = Path(local_path)
        if local_file.exists():
            effective = deep_merge(effective, _load_file(local_file))
        else:
            logger.debug("Settings locais ausentes, ignorando: %s", local_file)

    return effective
