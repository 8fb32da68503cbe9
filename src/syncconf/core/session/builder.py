# src/syncconf/core/session/builder.py
"""
Builder do estado inicial de uma conexão.

Compõe a normalização do catálogo bruto com os campos de topo
(schedule, prefixo, namespace) e, conforme as capacidades do destino,
com as operações previamente persistidas.

Política (v1):
    - schedule: o da conexão quando a chave está presente (inclusive
      `None` = manual); senão, o default de 24 horas
    - namespace: `source` e `${SOURCE_NAMESPACE}` por default
    - transformações (destino com suporte a dbt): operações dbt
      persistidas, na ordem original
    - normalização (destino com suporte): opção persistida; senão,
      default `basic` para conexão nova; em edição, ausente é preservado
      como ausente

Invariantes:
    - Função pura: mesma entrada, saída igual
    - Nenhum input é mutado

Limites explícitos:
    - Não valida a configuração resultante
    - Não persiste nada
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence, Tuple

from syncconf.core.catalog.capabilities import DestinationCapabilities
from syncconf.core.catalog.types import SyncSchema
from syncconf.core.config.settings import DEFAULT_SETTINGS, EngineSettings
from syncconf.core.connection.schema import parse_namespace_definition, parse_schedule
from syncconf.core.connection.types import ConnectionConfiguration
from syncconf.core.operations.schema import parse_operations
from syncconf.core.operations.types import (
    DbtConfig,
    NormalizationType,
    Operation,
    TransformationOperation,
    UNASSIGNED_OPERATION_ID,
    is_normalization,
    is_transformation,
)
from syncconf.core.resolver.normalizer import normalize


def initial_transformations(operations: Sequence[Operation]) -> Tuple[TransformationOperation, ...]:
    return tuple(op for op in operations if is_transformation(op))


def initial_normalization(
    operations: Sequence[Operation],
    is_edit_mode: bool = False,
    settings: EngineSettings = DEFAULT_SETTINGS,
) -> Optional[NormalizationType]:
    """Opção persistida; default apenas para conexão nova; `None` em edição sem normalização."""
    persisted = next((op for op in operations if is_normalization(op)), None)
    if persisted is not None:
        return persisted.option
    if is_edit_mode:
        return None
    return settings.default_normalization


def default_transformation(
    workspace_id: str,
    settings: EngineSettings = DEFAULT_SETTINGS,
) -> TransformationOperation:
    """Transformação dbt inicial oferecida ao usuário ao adicionar uma nova."""
    return TransformationOperation(
        name=settings.default_transformation_name,
        workspace_id=workspace_id,
        config=DbtConfig(
            git_repo_url="",
            docker_image=settings.default_dbt_image,
            dbt_arguments=settings.default_dbt_arguments,
        ),
        operation_id=UNASSIGNED_OPERATION_ID,
    )


def build_initial_state(
    catalog: SyncSchema,
    capabilities: DestinationCapabilities,
    connection: Optional[Mapping[str, Any]] = None,
    *,
    is_edit_mode: bool = False,
    settings: EngineSettings = DEFAULT_SETTINGS,
) -> ConnectionConfiguration:
    """
    Produz a configuração pronta para edição.

    Args:
        catalog (SyncSchema): Catálogo bruto, na ordem de discovery.
        capabilities (DestinationCapabilities): Capacidades do destino.
        connection (Optional[Mapping]): Estado persistido (camelCase):
            `schedule`, `prefix`, `namespaceDefinition`, `namespaceFormat`,
            `operations`. Ausente para uma conexão nova.
        is_edit_mode (bool): Edição de uma conexão existente.
        settings (EngineSettings): Defaults de processo.

    Returns:
        ConnectionConfiguration: Estado inicial da sessão de edição.

    Raises:
        CatalogValidationError: Se o estado persistido tiver schedule ou
            namespace malformado.
    """
    connection = connection or {}

    schedule = (
        parse_schedule(connection["schedule"]) if "schedule" in connection else settings.default_schedule
    )

    namespace_definition = parse_namespace_definition(connection.get("namespaceDefinition"))
    namespace_format = connection.get("namespaceFormat")

    operations = parse_operations(connection.get("operations") or [])

    return ConnectionConfiguration(
        sync_catalog=normalize(catalog, capabilities, settings.compatibility_table),
        schedule=schedule,
        prefix=connection.get("prefix") or "",
        namespace_definition=namespace_definition or settings.default_namespace_definition,
        namespace_format=(
            namespace_format if namespace_format is not None else settings.default_namespace_format
        ),
        normalization=(
            initial_normalization(operations, is_edit_mode, settings)
            if capabilities.supports_normalization
            else None
        ),
        transformations=(
            initial_transformations(operations) if capabilities.supports_custom_transformations else None
        ),
    )
