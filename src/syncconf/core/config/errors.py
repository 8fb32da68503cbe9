# src/syncconf/core/config/errors.py
"""
Exceções canônicas da camada de configuração do SyncConf.

Este módulo define a hierarquia de exceções levantadas ao carregar e
resolver as configurações do engine (defaults de schedule, namespace,
normalização, imagem dbt e tabela de prioridade de modos de sync).

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Erros estruturais de configuração são fatais e ocorrem antes de
      qualquer resolução de catálogo

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - Nenhuma exceção aqui representa violação de validação da conexão
      (essas são dados, não exceções)

Limites explícitos:
    - Não realiza fallback ou recovery
"""


class ConfigError(Exception):
    """
    Exceção base para erros de configuração do engine.

    Permite captura genérica de falhas de configuração, distinta das
    falhas de catálogo (`CatalogError`) e das violações de validação.
    """


class DefaultsNotFoundError(ConfigError):
    """
    Arquivo de configuração base (defaults) não encontrado.

    Decisões arquiteturais:
        - Quando um caminho de defaults é informado, ele é obrigatório
        - Não há tentativa de criar defaults automaticamente
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Formato de arquivo de configuração não suportado.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)
    """


class InvalidConfigRootTypeError(ConfigError):
    """Conteúdo raiz da configuração não é um dicionário (`dict`)."""


class ConfigTypeConflictError(ConfigError):
    """
    Conflito de tipos durante o deep-merge.

    Exemplo de conflito:
        - base:     {"engine": {"default_schedule": {"units": 24}}}
        - override: {"engine": {"default_schedule": "daily"}}

    Invariantes:
        - Nenhum merge parcial é produzido em caso de conflito
    """


class InvalidSettingsError(ConfigError):
    """Seção `engine` resolvida contém valor inválido para um setting."""
