"""SyncConf — Resolver (core).

Negociação de modos de sync entre source e destino:
 - escolha do par preferido pela tabela de compatibilidade
 - reparo de cursor e chave primária a partir dos defaults da source
 - normalização do catálogo inteiro (ids de sessão + exclusões)
"""

from .compatibility import (  # noqa: F401
    repair_cursor_field,
    repair_primary_key,
    resolve_default_mode,
    verify_supported_sync_modes,
)
from .normalizer import NormalizationReport, normalize, normalize_with_report  # noqa: F401
