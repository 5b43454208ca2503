# src/build_properties/core/config/errors.py
"""
Exceções canônicas da camada de configuração do Build Properties.

Este módulo define a hierarquia oficial de exceções utilizadas durante
o carregamento, validação estrutural e resolução dos settings da
biblioteca (nível de log, destino das system properties).

As exceções aqui definidas representam **violações estruturais
explícitas** de configuração, e não erros do ciclo de vida das
propriedades do build (ver `core.properties.errors`).

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Erros estruturais são tratados como falhas fatais
    - Mensagens de erro são claras e direcionadas ao usuário

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`

Limites explícitos:
    - Não realiza fallback ou recovery
    - Não depende do controller nem dos loaders de propriedades
"""


class ConfigError(Exception):
    """
    Exceção base para erros relacionados à configuração do Build Properties.

    Todas as exceções levantadas durante carregamento, merge e resolução
    de settings devem herdar desta classe, permitindo captura genérica
    sem confundir falhas de configuração com falhas de carregamento
    das propriedades do build.
    """


class DefaultsNotFoundError(ConfigError):
    """
    Exceção levantada quando um arquivo de settings explicitamente
    informado como defaults não existe no caminho especificado.

    Decisões arquiteturais:
        - Um defaults informado é obrigatório
        - Não tenta inferir ou criar o arquivo automaticamente
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Exceção levantada quando o formato do arquivo de settings
    não é suportado pelo loader.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)
    """


class InvalidConfigRootTypeError(ConfigError):
    """
    Exceção levantada quando o conteúdo raiz dos settings
    não é um dicionário (`dict`).

    Listas ou valores escalares no root são inválidos; o loader
    não tenta normalizar nem encapsular estruturas inválidas.
    """


class ConfigTypeConflictError(ConfigError):
    """
    Exceção levantada quando ocorre conflito de tipos durante o deep-merge.

    Exemplo de conflito:
        - base:     {"logging": {"level": "INFO"}}
        - override: {"logging": "DEBUG"}

    Invariantes:
        - Nenhum merge parcial é produzido em caso de conflito
    """


class InvalidSettingError(ConfigError):
    """
    Exceção levantada quando um valor de setting é estruturalmente válido
    mas não pertence ao domínio aceito (ex.: sink desconhecido,
    nível de log inexistente).
    """
