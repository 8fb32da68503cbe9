"""SyncConf — Operations (core).

Operações pós-carga de uma conexão:
 - tipos canônicos (normalização, transformação dbt)
 - parsing de operações persistidas
 - merge determinístico em uma lista ordenada
"""

from .errors import OperationError, OperationValidationError  # noqa: F401
from .merge import merge_operations  # noqa: F401
from .schema import parse_normalization_type, parse_operation, parse_operations  # noqa: F401
from .types import (  # noqa: F401
    DbtConfig,
    NormalizationOperation,
    NormalizationType,
    Operation,
    OperatorType,
    TransformationOperation,
    UNASSIGNED_OPERATION_ID,
    is_normalization,
    is_transformation,
)
