"""SyncConf — Session (core).

Estado inicial de uma conexão e sua sessão de edição:
 - builder puro do estado inicial
 - sessão com recálculo explícito, eventos e submissão
 - contrato do colaborador de persistência
"""

from .builder import (  # noqa: F401
    build_initial_state,
    default_transformation,
    initial_normalization,
    initial_transformations,
)
from .context import ConnectionFormSession, SubmissionResult, build_submission_payload  # noqa: F401
from .persistence import ConnectionPersistence  # noqa: F401
