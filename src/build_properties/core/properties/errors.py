# src/build_properties/core/properties/errors.py
"""Erros canônicos do ciclo de vida das propriedades do build.

Acessar propriedades antes do load é uma violação de contrato do
chamador (ordem de inicialização), não uma falha de dados: por isso
nunca é convertido em resultado vazio.
"""


class PropertiesError(Exception):
    """Erro base do domínio de propriedades."""


class PropertiesNotLoadedError(PropertiesError, RuntimeError):
    """Propriedades acessadas antes de `PropertiesController.load()`."""


class SettingsDirUnresolvedError(PropertiesError, ValueError):
    """`load()` sem diretório explícito e sem `BuildLayout` para resolvê-lo."""


class InvalidSystemPropertyError(PropertiesError, ValueError):
    """Par chave/valor que o sink de system properties não consegue representar."""
