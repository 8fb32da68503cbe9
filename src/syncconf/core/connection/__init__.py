"""SyncConf — Connection (core).

Agregado de configuração de conexão e sua forma serializada.
"""

from .schema import parse_connection_values, parse_namespace_definition, parse_schedule  # noqa: F401
from .types import (  # noqa: F401
    ConnectionConfiguration,
    NamespaceDefinitionType,
    SOURCE_NAMESPACE_TAG,
    Schedule,
    TimeUnit,
)
