"""SyncConf — Catalog (core).

Modelo de capacidades do catálogo descoberto e do destino:
 - tipos canônicos (streams, modos de sync, configuração editável)
 - capacidades do destino e tabela de compatibilidade
 - parsing (YAML/JSON) e validação estrutural
"""

from .capabilities import COMPATIBILITY_TABLE, DestinationCapabilities  # noqa: F401
from .errors import (  # noqa: F401
    CatalogError,
    CatalogFileNotFoundError,
    CatalogParseError,
    CatalogValidationError,
    UnsupportedCatalogFormatError,
)
from .loader import load_catalog, load_destination_capabilities  # noqa: F401
from .schema import validate_capabilities_document, validate_catalog_document  # noqa: F401
from .types import (  # noqa: F401
    DestinationSyncMode,
    StreamConfig,
    StreamDescriptor,
    SyncMode,
    SyncModePair,
    SyncSchema,
    SyncSchemaStream,
)
