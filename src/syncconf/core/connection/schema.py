"""
Schema canônico — valores de conexão (forma de sessão, camelCase).

Materializa valores já aceitos pela validação em um
`ConnectionConfiguration`. Erros estruturais residuais são levantados
como `CatalogValidationError`.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from syncconf.core.catalog.errors import CatalogValidationError
from syncconf.core.catalog.schema import validate_catalog_document
from syncconf.core.operations.schema import parse_normalization_type, parse_operations
from syncconf.core.operations.types import TransformationOperation

from .types import (
    ConnectionConfiguration,
    NamespaceDefinitionType,
    SOURCE_NAMESPACE_TAG,
    Schedule,
    TimeUnit,
)


_ALLOWED_TIME_UNITS = {u.value for u in TimeUnit}
_ALLOWED_NAMESPACE_DEFINITIONS = {d.value for d in NamespaceDefinitionType}


def _expect(cond: bool, msg: str) -> None:
    if not cond:
        raise CatalogValidationError(msg)


def parse_schedule(value: Any) -> Optional[Schedule]:
    if value is None or isinstance(value, Schedule):
        return value
    _expect(isinstance(value, Mapping), "schedule must be a mapping or null")
    units = value.get("units")
    _expect(isinstance(units, int) and not isinstance(units, bool), "schedule.units must be an integer")
    time_unit = value.get("timeUnit")
    _expect(time_unit in _ALLOWED_TIME_UNITS, f"schedule.timeUnit must be one of {sorted(_ALLOWED_TIME_UNITS)}")
    return Schedule(units=units, time_unit=TimeUnit(time_unit))


def parse_namespace_definition(value: Any, where: str = "namespaceDefinition") -> Optional[NamespaceDefinitionType]:
    if value is None or value == "":
        return None
    if isinstance(value, NamespaceDefinitionType):
        return value
    _expect(
        isinstance(value, str) and value in _ALLOWED_NAMESPACE_DEFINITIONS,
        f"{where} must be one of {sorted(_ALLOWED_NAMESPACE_DEFINITIONS)}",
    )
    return NamespaceDefinitionType(value)


def parse_connection_values(values: Mapping[str, Any]) -> ConnectionConfiguration:
    """Converte valores de sessão validados em `ConnectionConfiguration`."""
    transformations = None
    if values.get("transformations") is not None:
        ops = parse_operations(values["transformations"], "transformations")
        _expect(
            all(isinstance(op, TransformationOperation) for op in ops),
            "transformations must contain only dbt operations",
        )
        transformations = tuple(ops)

    namespace_format = values.get("namespaceFormat")

    return ConnectionConfiguration(
        sync_catalog=validate_catalog_document(values.get("syncCatalog") or {"streams": []}),
        schedule=parse_schedule(values.get("schedule")),
        prefix=values.get("prefix") or "",
        namespace_definition=(
            parse_namespace_definition(values.get("namespaceDefinition")) or NamespaceDefinitionType.SOURCE
        ),
        namespace_format=namespace_format if namespace_format is not None else SOURCE_NAMESPACE_TAG,
        normalization=parse_normalization_type(values.get("normalization")),
        transformations=transformations,
    )
