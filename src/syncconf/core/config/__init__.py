# src/syncconf/core/config/__init__.py

"""
Camada de configuração do SyncConf.

Responsabilidades do pacote:
    - Carregamento de arquivos de configuração (defaults + overrides locais)
    - Resolução da configuração final via deep-merge determinístico
    - Materialização dos settings imutáveis do engine
    - Hash canônico para identidade estrutural de documentos

Invariantes:
    - A configuração resolvida é um dicionário puro (dict)
    - Conflitos estruturais são tratados como erro
    - Settings são constantes de processo, nunca estado mutável

Limites explícitos:
    - Não resolve catálogos nem valida conexões
"""

from .errors import (  # noqa: F401
    ConfigError,
    ConfigTypeConflictError,
    DefaultsNotFoundError,
    InvalidConfigRootTypeError,
    InvalidSettingsError,
    UnsupportedConfigFormatError,
)
from .hashing import compute_config_hash, compute_document_hash  # noqa: F401
from .loader import load_config  # noqa: F401
from .merge import deep_merge  # noqa: F401
from .settings import DEFAULT_SETTINGS, EngineSettings  # noqa: F401
