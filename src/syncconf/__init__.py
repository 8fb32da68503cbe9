"""
SyncConf — resolução e validação de configuração de sincronização.

Este pacote raiz define o namespace público do SyncConf: o engine que
transforma um catálogo descoberto e as capacidades de um destino em uma
configuração de conexão pronta para edição, valida a configuração editada
e produz a lista ordenada de operações pós-carga.

Princípios centrais:
    - Toda resolução é uma função pura das entradas declaradas
    - Falhas de configuração do usuário são dados (violações), nunca abortos
    - Defaults são constantes de processo explícitas

Arquitetura em alto nível:
    - core.catalog    → modelo de capacidades (streams e destino)
    - core.resolver   → resolver de compatibilidade e normalizer
    - core.validation → ruleset de validação
    - core.operations → merger de operações
    - core.session    → builder do estado inicial e sessão de edição
"""

from .core.catalog import (
    DestinationCapabilities,
    DestinationSyncMode,
    SyncMode,
    SyncSchema,
    load_catalog,
    load_destination_capabilities,
)
from .core.operations import merge_operations
from .core.resolver import normalize, resolve_default_mode
from .core.session import ConnectionFormSession, build_initial_state
from .core.validation import validate_configuration, validate_connection

__all__ = [
    "ConnectionFormSession",
    "DestinationCapabilities",
    "DestinationSyncMode",
    "SyncMode",
    "SyncSchema",
    "build_initial_state",
    "load_catalog",
    "load_destination_capabilities",
    "merge_operations",
    "normalize",
    "resolve_default_mode",
    "validate_configuration",
    "validate_connection",
]
