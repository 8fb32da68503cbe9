# tests/conftest.py
"""
Fixtures compartilhados para testes do SyncConf.

Este módulo define fixtures reutilizáveis que fornecem:
- streams e catálogos mínimos e determinísticos
- descritores de capacidades de destino
- documentos camelCase equivalentes aos recebidos da API
- estado persistido de uma conexão em modo edição

Decisões arquiteturais:
    - Fixtures são mantidas simples e explícitas
    - Nenhuma fixture realiza I/O (testes de loader usam `tmp_path`)
    - Factories são expostas como fixtures para variar cenários

Limites explícitos:
    - Não substituir testes de integração
    - Não conter lógica condicional complexa
"""

import pytest

from syncconf.core.catalog.capabilities import DestinationCapabilities
from syncconf.core.catalog.types import (
    DestinationSyncMode,
    StreamConfig,
    StreamDescriptor,
    SyncMode,
    SyncSchema,
    SyncSchemaStream,
)


# =====================================================
# Catalog fixtures
# =====================================================

@pytest.fixture
def make_stream():
    """
    Factory de `SyncSchemaStream` com defaults neutros.

    Permite que cada teste declare apenas o que importa para o cenário
    (modos suportados, cursor, chave primária, configuração atual).

    Returns:
        Callable[..., SyncSchemaStream]
    """

    def _make(
        name="users",
        *,
        namespace="public",
        modes=(SyncMode.FULL_REFRESH, SyncMode.INCREMENTAL),
        source_defined_cursor=False,
        default_cursor=(),
        source_pk=(),
        selected=True,
        sync_mode=None,
        destination_sync_mode=None,
        cursor_field=None,
        primary_key=None,
        stream_id=None,
    ):
        return SyncSchemaStream(
            stream=StreamDescriptor(
                name=name,
                namespace=namespace,
                json_schema={"type": "object", "properties": {"id": {"type": "integer"}}},
                supported_sync_modes=tuple(modes),
                source_defined_cursor=source_defined_cursor,
                default_cursor_field=tuple(default_cursor),
                source_defined_primary_key=tuple(tuple(p) for p in source_pk),
            ),
            config=StreamConfig(
                selected=selected,
                sync_mode=sync_mode,
                destination_sync_mode=destination_sync_mode,
                cursor_field=list(cursor_field or []),
                primary_key=[list(p) for p in (primary_key or [])],
            ),
            id=stream_id,
        )

    return _make


@pytest.fixture
def all_modes_destination() -> DestinationCapabilities:
    """Destino que declara os três modos de escrita, com normalização e dbt."""
    return DestinationCapabilities.build(
        destination_sync_modes=[
            DestinationSyncMode.OVERWRITE,
            DestinationSyncMode.APPEND,
            DestinationSyncMode.APPEND_DEDUP,
        ],
        supports_normalization=True,
        supports_custom_transformations=True,
    )


@pytest.fixture
def overwrite_and_dedup_destination() -> DestinationCapabilities:
    return DestinationCapabilities.build(
        destination_sync_modes=[DestinationSyncMode.OVERWRITE, DestinationSyncMode.APPEND_DEDUP],
        pairs=[
            (SyncMode.FULL_REFRESH, DestinationSyncMode.OVERWRITE),
            (SyncMode.INCREMENTAL, DestinationSyncMode.APPEND_DEDUP),
        ],
    )


@pytest.fixture
def dedup_only_destination() -> DestinationCapabilities:
    return DestinationCapabilities.build(
        destination_sync_modes=[DestinationSyncMode.APPEND_DEDUP],
        pairs=[(SyncMode.INCREMENTAL, DestinationSyncMode.APPEND_DEDUP)],
    )


@pytest.fixture
def raw_catalog(make_stream) -> SyncSchema:
    """
    Catálogo bruto de três streams, na ordem de discovery:

    - `users`: full refresh + incremental, cursor default `updated_at`, pk `id`
    - `events`: apenas full refresh
    - `orders`: apenas incremental, cursor definido pela source
    """
    return SyncSchema(
        streams=(
            make_stream("users", default_cursor=["updated_at"], source_pk=[["id"]]),
            make_stream("events", modes=(SyncMode.FULL_REFRESH,)),
            make_stream("orders", modes=(SyncMode.INCREMENTAL,), source_defined_cursor=True),
        )
    )


# =====================================================
# Wire documents
# =====================================================

@pytest.fixture
def catalog_document() -> dict:
    return {
        "streams": [
            {
                "stream": {
                    "name": "users",
                    "namespace": "public",
                    "jsonSchema": {"type": "object"},
                    "supportedSyncModes": ["full_refresh", "incremental"],
                    "sourceDefinedCursor": False,
                    "defaultCursorField": ["updated_at"],
                    "sourceDefinedPrimaryKey": [["id"]],
                },
                "config": {
                    "selected": True,
                    "syncMode": "full_refresh",
                    "destinationSyncMode": "overwrite",
                    "cursorField": [],
                    "primaryKey": [],
                },
            },
            {
                "stream": {
                    "name": "events",
                    "supportedSyncModes": ["full_refresh"],
                },
            },
        ]
    }


@pytest.fixture
def persisted_operations() -> list:
    """Operações persistidas: normalização seguida de duas transformações dbt."""
    return [
        {
            "operationId": "op-norm",
            "name": "Normalization",
            "workspaceId": "ws-1",
            "operatorConfiguration": {
                "operatorType": "normalization",
                "normalization": {"option": "basic"},
            },
        },
        {
            "operationId": "op-dbt-1",
            "name": "first",
            "workspaceId": "ws-1",
            "operatorConfiguration": {
                "operatorType": "dbt",
                "dbt": {
                    "gitRepoUrl": "https://example.com/dbt.git",
                    "gitRepoBranch": "main",
                    "dockerImage": "fishtownanalytics/dbt:0.19.1",
                    "dbtArguments": "run",
                },
            },
        },
        {
            "operationId": "op-dbt-2",
            "name": "second",
            "workspaceId": "ws-1",
            "operatorConfiguration": {
                "operatorType": "dbt",
                "dbt": {"dockerImage": "fishtownanalytics/dbt:0.19.1", "dbtArguments": "test"},
            },
        },
    ]


@pytest.fixture
def valid_values() -> dict:
    """Valores de sessão válidos (camelCase) com uma stream incremental + dedup."""
    return {
        "schedule": {"units": 24, "timeUnit": "hours"},
        "prefix": "",
        "namespaceDefinition": "source",
        "namespaceFormat": "${SOURCE_NAMESPACE}",
        "syncCatalog": {
            "streams": [
                {
                    "id": "0",
                    "stream": {
                        "name": "users",
                        "supportedSyncModes": ["full_refresh", "incremental"],
                        "sourceDefinedCursor": False,
                    },
                    "config": {
                        "selected": True,
                        "syncMode": "incremental",
                        "destinationSyncMode": "append_dedup",
                        "cursorField": ["updated_at"],
                        "primaryKey": [["id"]],
                    },
                }
            ]
        },
    }


# =====================================================
# Config fixtures
# =====================================================

@pytest.fixture
def engine_defaults_yaml() -> str:
    return """
engine:
  default_schedule:
    units: 24
    timeUnit: hours
  default_namespace_definition: source
  default_namespace_format: "${SOURCE_NAMESPACE}"
  default_normalization: basic
  compatibility_table:
    - [incremental, append_dedup]
    - [full_refresh, overwrite]
    - [incremental, append]
    - [full_refresh, append]
""".lstrip()


@pytest.fixture
def engine_local_yaml() -> str:
    return """
engine:
  default_schedule: null
  default_normalization: raw
  compatibility_table:
    - [full_refresh, overwrite]
    - [incremental, append_dedup]
""".lstrip()
