"""
Schema canônico — documento de catálogo e descritor de capacidades.

Materializa os documentos brutos (já parseados de YAML/JSON) nos tipos
do engine. Erros estruturais são levantados como `CatalogValidationError`
antes de qualquer resolução.

Esta implementação evita dependências externas (ex.: Pydantic) para manter
o core leve.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from .capabilities import DestinationCapabilities
from .errors import CatalogValidationError
from .types import (
    DestinationSyncMode,
    FieldPath,
    StreamConfig,
    StreamDescriptor,
    SyncMode,
    SyncSchema,
    SyncSchemaStream,
)


_ALLOWED_SYNC_MODES = {m.value for m in SyncMode}
_ALLOWED_DESTINATION_SYNC_MODES = {m.value for m in DestinationSyncMode}


def _is_non_empty_str(x: Any) -> bool:
    return isinstance(x, str) and bool(x.strip())


def _expect(cond: bool, msg: str) -> None:
    if not cond:
        raise CatalogValidationError(msg)


def _field_path(value: Any, where: str) -> FieldPath:
    if value is None:
        return ()
    _expect(isinstance(value, list), f"{where} must be a list of strings")
    _expect(all(isinstance(s, str) for s in value), f"{where} must be a list of strings")
    return tuple(value)


def _field_paths(value: Any, where: str) -> List[FieldPath]:
    if value is None:
        return []
    _expect(isinstance(value, list), f"{where} must be a list of field paths")
    return [_field_path(p, f"{where}[{i}]") for i, p in enumerate(value)]


def parse_sync_mode(value: Any, where: str) -> Optional[SyncMode]:
    if value is None:
        return None
    _expect(value in _ALLOWED_SYNC_MODES, f"{where} must be one of {sorted(_ALLOWED_SYNC_MODES)}")
    return SyncMode(value)


def parse_destination_sync_mode(value: Any, where: str) -> Optional[DestinationSyncMode]:
    if value is None:
        return None
    _expect(
        value in _ALLOWED_DESTINATION_SYNC_MODES,
        f"{where} must be one of {sorted(_ALLOWED_DESTINATION_SYNC_MODES)}",
    )
    return DestinationSyncMode(value)


def parse_stream_descriptor(data: Any, where: str = "stream") -> StreamDescriptor:
    _expect(isinstance(data, dict), f"{where} must be a mapping")
    name = data.get("name")
    _expect(_is_non_empty_str(name), f"{where}.name is required")

    namespace = data.get("namespace")
    _expect(namespace is None or isinstance(namespace, str), f"{where}.namespace must be a string")

    json_schema = data.get("jsonSchema") or {}
    _expect(isinstance(json_schema, dict), f"{where}.jsonSchema must be a mapping")

    modes_raw = data.get("supportedSyncModes") or []
    _expect(isinstance(modes_raw, list), f"{where}.supportedSyncModes must be a list")
    modes: List[SyncMode] = []
    for i, m in enumerate(modes_raw):
        mode = parse_sync_mode(m, f"{where}.supportedSyncModes[{i}]")
        if mode is not None and mode not in modes:
            modes.append(mode)

    sdc = data.get("sourceDefinedCursor", False)
    _expect(isinstance(sdc, bool), f"{where}.sourceDefinedCursor must be boolean")

    return StreamDescriptor(
        name=name,
        namespace=namespace,
        json_schema=dict(json_schema),
        supported_sync_modes=tuple(modes),
        source_defined_cursor=sdc,
        default_cursor_field=_field_path(data.get("defaultCursorField"), f"{where}.defaultCursorField"),
        source_defined_primary_key=tuple(
            _field_paths(data.get("sourceDefinedPrimaryKey"), f"{where}.sourceDefinedPrimaryKey")
        ),
    )


def parse_stream_config(data: Any, where: str = "config") -> StreamConfig:
    """
    Materializa a configuração de uma stream.

    Uma stream descoberta sem `config` é oferecida como selecionada. Uma
    configuração presente sem a chave `selected` é tratada como não
    selecionada, o mesmo critério da validação.
    """
    if data is None:
        return StreamConfig()
    _expect(isinstance(data, dict), f"{where} must be a mapping")

    selected = data.get("selected", False)
    _expect(isinstance(selected, bool), f"{where}.selected must be boolean")

    alias = data.get("aliasName")
    _expect(alias is None or isinstance(alias, str), f"{where}.aliasName must be a string")

    return StreamConfig(
        selected=selected,
        sync_mode=parse_sync_mode(data.get("syncMode"), f"{where}.syncMode"),
        destination_sync_mode=parse_destination_sync_mode(
            data.get("destinationSyncMode"), f"{where}.destinationSyncMode"
        ),
        cursor_field=list(_field_path(data.get("cursorField"), f"{where}.cursorField")),
        primary_key=[list(p) for p in _field_paths(data.get("primaryKey"), f"{where}.primaryKey")],
        alias_name=alias,
    )


def parse_sync_schema_stream(data: Any, where: str) -> SyncSchemaStream:
    _expect(isinstance(data, dict), f"{where} must be a mapping")
    stream_id = data.get("id")
    _expect(stream_id is None or isinstance(stream_id, str), f"{where}.id must be a string")
    return SyncSchemaStream(
        stream=parse_stream_descriptor(data.get("stream"), f"{where}.stream"),
        config=parse_stream_config(data.get("config"), f"{where}.config"),
        id=stream_id,
    )


def validate_catalog_document(data: Any) -> SyncSchema:
    """Valida e materializa um documento de catálogo bruto (`{"streams": [...]}`)."""
    _expect(isinstance(data, dict), "catalog must be a mapping/dict")
    streams = data.get("streams")
    _expect(isinstance(streams, list), "catalog.streams must be a list")
    return SyncSchema(
        streams=tuple(
            parse_sync_schema_stream(s, f"streams[{i}]") for i, s in enumerate(streams)
        )
    )


def validate_capabilities_document(data: Any) -> DestinationCapabilities:
    """Valida e materializa um descritor de capacidades do destino."""
    _expect(isinstance(data, dict), "destination capabilities must be a mapping/dict")

    modes_raw = data.get("supportedDestinationSyncModes") or []
    _expect(isinstance(modes_raw, list), "supportedDestinationSyncModes must be a list")
    modes = [
        parse_destination_sync_mode(m, f"supportedDestinationSyncModes[{i}]")
        for i, m in enumerate(modes_raw)
    ]

    pairs = None
    pairs_raw = data.get("supportedSyncModePairs")
    if pairs_raw is not None:
        _expect(isinstance(pairs_raw, list), "supportedSyncModePairs must be a list")
        pairs = []
        for i, p in enumerate(pairs_raw):
            _expect(
                isinstance(p, list) and len(p) == 2 and None not in p,
                f"supportedSyncModePairs[{i}] must be a [syncMode, destinationSyncMode] pair",
            )
            pairs.append(
                (
                    parse_sync_mode(p[0], f"supportedSyncModePairs[{i}][0]"),
                    parse_destination_sync_mode(p[1], f"supportedSyncModePairs[{i}][1]"),
                )
            )

    normalization = data.get("supportsNormalization", False)
    dbt = data.get("supportsDbt", False)
    _expect(isinstance(normalization, bool), "supportsNormalization must be boolean")
    _expect(isinstance(dbt, bool), "supportsDbt must be boolean")

    return DestinationCapabilities.build(
        destination_sync_modes=modes,
        pairs=pairs,
        supports_normalization=normalization,
        supports_custom_transformations=dbt,
    )


def catalog_to_document(schema: SyncSchema) -> Dict[str, Any]:
    return schema.to_dict(include_ids=False)
