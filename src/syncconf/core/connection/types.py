# src/syncconf/core/connection/types.py
"""
Tipos canônicos da configuração de conexão.

Este módulo define o agregado produzido pelo engine e entregue à sessão
de edição e, na submissão, ao colaborador de persistência.

Componentes principais:
    - TimeUnit / Schedule      → intervalo de sincronização
    - NamespaceDefinitionType  → política de namespace no destino
    - ConnectionConfiguration  → agregado editável da conexão

Decisões arquiteturais:
    - `schedule=None` é a sentinela explícita de execução manual
    - Ids de stream só aparecem na forma de sessão; o payload de
      submissão os remove

Limites explícitos:
    - Não valida a configuração (responsabilidade da validação)
    - Não persiste nada
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from syncconf.core.catalog.types import SyncSchema
from syncconf.core.operations.types import NormalizationType, TransformationOperation

SOURCE_NAMESPACE_TAG = "${SOURCE_NAMESPACE}"


class TimeUnit(str, Enum):
    MINUTES = "minutes"
    HOURS = "hours"
    DAYS = "days"
    WEEKS = "weeks"
    MONTHS = "months"


class NamespaceDefinitionType(str, Enum):
    SOURCE = "source"
    DESTINATION = "destination"
    CUSTOMFORMAT = "customformat"


@dataclass(frozen=True)
class Schedule:
    units: int
    time_unit: TimeUnit

    def to_dict(self) -> Dict[str, Any]:
        return {"units": self.units, "timeUnit": self.time_unit.value}


@dataclass(frozen=True)
class ConnectionConfiguration:
    """
    Agregado editável de uma conexão source → destino.

    Campos:
        - schedule: intervalo de sync; `None` = manual
        - prefix: prefixo aplicado aos nomes de stream no destino
        - namespace_definition / namespace_format: política de namespace
        - sync_catalog: SyncSchema normalizado
        - normalization: opção escolhida; `None` quando o destino não
          suporta normalização ou nenhuma foi escolhida
        - transformations: transformações dbt; `None` quando o destino
          não suporta transformações customizadas
    """

    sync_catalog: SyncSchema
    schedule: Optional[Schedule]
    prefix: str = ""
    namespace_definition: NamespaceDefinitionType = NamespaceDefinitionType.SOURCE
    namespace_format: str = SOURCE_NAMESPACE_TAG
    normalization: Optional[NormalizationType] = None
    transformations: Optional[Tuple[TransformationOperation, ...]] = field(default=None)

    def to_dict(self, *, include_ids: bool = True) -> Dict[str, Any]:
        """Forma de sessão (camelCase). Campos opcionais ausentes são omitidos."""
        data: Dict[str, Any] = {
            "schedule": self.schedule.to_dict() if self.schedule is not None else None,
            "prefix": self.prefix,
            "namespaceDefinition": self.namespace_definition.value,
            "namespaceFormat": self.namespace_format,
            "syncCatalog": self.sync_catalog.to_dict(include_ids=include_ids),
        }
        if self.transformations is not None:
            data["transformations"] = [t.to_dict() for t in self.transformations]
        if self.normalization is not None:
            data["normalization"] = self.normalization.value
        return data
