# src/syncconf/core/validation/rules.py
"""
Ruleset de validação da configuração de conexão editada.

Este módulo valida a forma de sessão (camelCase) de uma conexão antes da
submissão, produzindo zero ou mais violações. Zero violações significa
configuração aceita.

Regras por stream (somente quando `selected == true`):
    - `destinationSyncMode == append_dedup` → `primaryKey` não vazio
    - `syncMode == incremental` sem cursor definido pela source →
      `cursorField` não vazio
    - streams não selecionadas (inclusive sem a chave `selected`) são
      isentas de todas as regras

Regras de topo:
    - `schedule` deve estar presente; `null` é a sentinela manual e um
      schedule concreto exige `units` e `timeUnit`
    - `namespaceDefinition` obrigatório e dentro do enum
    - `namespaceFormat` obrigatório apenas quando `customformat`
    - campos desconhecidos no topo são rejeitados (schema fechado)

Decisões arquiteturais:
    - Regras dependentes de campos irmãos são uma tabela explícita de
      `(predicado sobre o registro) → violação`, avaliada em uma passada
    - Todas as regras aplicáveis são avaliadas (sem parada na primeira)
    - Violações são dados, nunca exceções

Invariantes:
    - A mesma entrada sempre produz a mesma lista, na mesma ordem
    - Nenhum input é mutado

Limites explícitos:
    - Não corrige valores (o resolver é quem repara defaults)
    - Não verifica se cursor/chave existem no JSON schema da stream
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, List, Mapping, Tuple

from syncconf.core.catalog.types import DestinationSyncMode, SyncMode
from syncconf.core.connection.types import ConnectionConfiguration, NamespaceDefinitionType, TimeUnit

from .violations import (
    MISSING_NAMESPACE_DEFINITION,
    MISSING_NAMESPACE_FORMAT,
    MISSING_SCHEDULE,
    Violation,
    invalid_type,
    invalid_value,
    missing_cursor_field,
    missing_field,
    missing_primary_key,
    unknown_fields,
)


ALLOWED_TOP_LEVEL_FIELDS = frozenset(
    {
        "schedule",
        "prefix",
        "syncCatalog",
        "namespaceDefinition",
        "namespaceFormat",
        "transformations",
        "normalization",
    }
)

_NAMESPACE_DEFINITIONS = [d.value for d in NamespaceDefinitionType]
_TIME_UNITS = [u.value for u in TimeUnit]


@dataclass(frozen=True)
class StreamRule:
    """Regra cruzada: `violated(stream, config)` → `build(stream_id)`."""

    name: str
    violated: Callable[[Mapping[str, Any], Mapping[str, Any]], bool]
    build: Callable[..., Violation]


def _dedup_without_primary_key(stream: Mapping[str, Any], config: Mapping[str, Any]) -> bool:
    return (
        config.get("destinationSyncMode") == DestinationSyncMode.APPEND_DEDUP.value
        and not config.get("primaryKey")
    )


def _incremental_without_cursor(stream: Mapping[str, Any], config: Mapping[str, Any]) -> bool:
    return (
        config.get("syncMode") == SyncMode.INCREMENTAL.value
        and not stream.get("sourceDefinedCursor", False)
        and not config.get("cursorField")
    )


STREAM_RULES: Tuple[StreamRule, ...] = (
    StreamRule("primary_key_required", _dedup_without_primary_key, missing_primary_key),
    StreamRule("cursor_field_required", _incremental_without_cursor, missing_cursor_field),
)


def _is_int(x: Any) -> bool:
    return isinstance(x, int) and not isinstance(x, bool)


def _is_field_path(x: Any) -> bool:
    return isinstance(x, list) and all(isinstance(s, str) for s in x)


def _validate_schedule(values: Mapping[str, Any]) -> List[Violation]:
    if "schedule" not in values:
        return [missing_field(kind=MISSING_SCHEDULE, field_path="schedule")]

    schedule = values["schedule"]
    if schedule is None:
        return []
    if not isinstance(schedule, Mapping):
        return [invalid_type(field_path="schedule", expected="mapping|null", actual=schedule)]

    out: List[Violation] = []
    units = schedule.get("units")
    if units is None:
        out.append(missing_field(kind=MISSING_SCHEDULE, field_path="schedule.units"))
    elif not _is_int(units):
        out.append(invalid_type(field_path="schedule.units", expected="integer", actual=units))

    time_unit = schedule.get("timeUnit")
    if time_unit is None or time_unit == "":
        out.append(missing_field(kind=MISSING_SCHEDULE, field_path="schedule.timeUnit"))
    elif not isinstance(time_unit, str):
        out.append(invalid_type(field_path="schedule.timeUnit", expected="string", actual=time_unit))
    elif time_unit not in _TIME_UNITS:
        out.append(invalid_value(field_path="schedule.timeUnit", value=time_unit, allowed=_TIME_UNITS))
    return out


def _validate_namespace(values: Mapping[str, Any]) -> List[Violation]:
    out: List[Violation] = []
    definition = values.get("namespaceDefinition")
    if definition is None or definition == "":
        out.append(missing_field(kind=MISSING_NAMESPACE_DEFINITION, field_path="namespaceDefinition"))
    elif definition not in _NAMESPACE_DEFINITIONS:
        out.append(
            invalid_value(field_path="namespaceDefinition", value=definition, allowed=_NAMESPACE_DEFINITIONS)
        )

    namespace_format = values.get("namespaceFormat")
    if namespace_format is not None and not isinstance(namespace_format, str):
        out.append(invalid_type(field_path="namespaceFormat", expected="string", actual=namespace_format))
    elif definition == NamespaceDefinitionType.CUSTOMFORMAT.value and not (
        namespace_format and namespace_format.strip()
    ):
        out.append(missing_field(kind=MISSING_NAMESPACE_FORMAT, field_path="namespaceFormat"))
    return out


def _validate_stream_shape(stream_id: str, stream: Mapping[str, Any], config: Mapping[str, Any]) -> List[Violation]:
    out: List[Violation] = []

    def path(name: str) -> str:
        return f"schema.streams[{stream_id}].config.{name}"

    sdc = stream.get("sourceDefinedCursor", False)
    if not isinstance(sdc, bool):
        out.append(
            invalid_type(
                field_path=f"schema.streams[{stream_id}].stream.sourceDefinedCursor", expected="boolean", actual=sdc
            )
        )

    if "selected" in config and not isinstance(config["selected"], bool):
        out.append(invalid_type(field_path=path("selected"), expected="boolean", actual=config["selected"]))
    for name in ("syncMode", "destinationSyncMode"):
        if config.get(name) is not None and not isinstance(config[name], str):
            out.append(invalid_type(field_path=path(name), expected="string", actual=config[name]))
    if not _is_field_path(config.get("cursorField")):
        out.append(
            invalid_type(field_path=path("cursorField"), expected="list[string]", actual=config.get("cursorField"))
        )
    primary_key = config.get("primaryKey", [])
    if not isinstance(primary_key, list) or not all(_is_field_path(p) for p in primary_key):
        out.append(invalid_type(field_path=path("primaryKey"), expected="list[list[string]]", actual=primary_key))
    return out


def _validate_streams(values: Mapping[str, Any]) -> List[Violation]:
    catalog = values.get("syncCatalog")
    if catalog is None:
        return []
    if not isinstance(catalog, Mapping) or not isinstance(catalog.get("streams"), list):
        return [invalid_type(field_path="syncCatalog", expected="{streams: list}", actual=catalog)]

    out: List[Violation] = []
    for position, node in enumerate(catalog["streams"]):
        if not isinstance(node, Mapping):
            out.append(invalid_type(field_path=f"schema.streams[{position}]", expected="mapping", actual=node))
            continue

        stream_id = str(node.get("id", position))
        stream = node.get("stream") or {}
        config = node.get("config")
        if not isinstance(stream, Mapping) or not isinstance(config, Mapping):
            out.append(
                invalid_type(field_path=f"schema.streams[{stream_id}]", expected="{stream, config}", actual=node)
            )
            continue

        shape = _validate_stream_shape(stream_id, stream, config)
        if shape:
            out.extend(shape)
            continue

        if config.get("selected") is not True:
            continue

        for rule in STREAM_RULES:
            if rule.violated(stream, config):
                out.append(rule.build(stream_id=stream_id))
    return out


def validate_connection(values: Any) -> List[Violation]:
    """
    Valida a forma de sessão de uma conexão editada.

    Args:
        values: Mapping camelCase (`ConnectionConfiguration.to_dict()`).

    Returns:
        List[Violation]: Violações encontradas; vazia ⇒ aceita.
    """
    if not isinstance(values, Mapping):
        return [invalid_type(field_path="connection", expected="mapping", actual=values)]

    violations: List[Violation] = []

    unknown = [k for k in values if k not in ALLOWED_TOP_LEVEL_FIELDS]
    if unknown:
        violations.append(unknown_fields(fields=[str(k) for k in unknown]))

    if values.get("prefix") is not None and not isinstance(values["prefix"], str):
        violations.append(invalid_type(field_path="prefix", expected="string", actual=values["prefix"]))

    violations.extend(_validate_schedule(values))
    violations.extend(_validate_namespace(values))
    violations.extend(_validate_streams(values))

    if values.get("transformations") is not None and not isinstance(values["transformations"], list):
        violations.append(
            invalid_type(field_path="transformations", expected="list", actual=values["transformations"])
        )
    if values.get("normalization") is not None and not isinstance(values["normalization"], str):
        violations.append(
            invalid_type(field_path="normalization", expected="string", actual=values["normalization"])
        )

    return violations


def validate_configuration(config: ConnectionConfiguration) -> List[Violation]:
    """Valida um `ConnectionConfiguration` pela sua forma de sessão."""
    return validate_connection(config.to_dict(include_ids=True))
