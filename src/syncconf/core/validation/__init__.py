"""SyncConf — Validation (core).

Ruleset de validação da conexão editada, com violações como dados.
"""

from .rules import (  # noqa: F401
    ALLOWED_TOP_LEVEL_FIELDS,
    STREAM_RULES,
    StreamRule,
    validate_configuration,
    validate_connection,
)
from .violations import (  # noqa: F401
    INVALID_TYPE,
    INVALID_VALUE,
    MISSING_CURSOR_FIELD,
    MISSING_NAMESPACE_DEFINITION,
    MISSING_NAMESPACE_FORMAT,
    MISSING_PRIMARY_KEY,
    MISSING_SCHEDULE,
    UNKNOWN_FIELD,
    Violation,
)
