# src/syncconf/core/config/settings.py
"""
Settings imutáveis do engine.

Os defaults de processo (schedule padrão, token de namespace, normalização
padrão, transformação dbt inicial e tabela de prioridade de modos de sync)
são valores de configuração constantes, nunca estado calculado em runtime.

A configuração resolvida por `load_config` pode sobrescrevê-los na seção
`engine`:

    engine:
      default_schedule: {units: 24, timeUnit: hours}   # null = manual
      default_namespace_definition: source
      default_namespace_format: "${SOURCE_NAMESPACE}"
      default_normalization: basic
      default_transformation_name: My dbt transformations
      default_dbt_image: fishtownanalytics/dbt:0.19.1
      default_dbt_arguments: run
      compatibility_table:
        - [incremental, append_dedup]
        - [full_refresh, overwrite]
        - [incremental, append]
        - [full_refresh, append]

Invariantes:
    - `EngineSettings` é imutável (frozen)
    - `DEFAULT_SETTINGS` nunca é alterado
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from syncconf.core.catalog.capabilities import COMPATIBILITY_TABLE
from syncconf.core.catalog.errors import CatalogValidationError
from syncconf.core.catalog.schema import parse_destination_sync_mode, parse_sync_mode
from syncconf.core.catalog.types import SyncModePair
from syncconf.core.connection.schema import parse_schedule
from syncconf.core.connection.types import (
    NamespaceDefinitionType,
    SOURCE_NAMESPACE_TAG,
    Schedule,
    TimeUnit,
)
from syncconf.core.operations.types import NormalizationType

from .errors import InvalidSettingsError
from .merge import deep_merge


@dataclass(frozen=True)
class EngineSettings:
    default_schedule: Optional[Schedule] = Schedule(units=24, time_unit=TimeUnit.HOURS)
    default_namespace_definition: NamespaceDefinitionType = NamespaceDefinitionType.SOURCE
    default_namespace_format: str = SOURCE_NAMESPACE_TAG
    default_normalization: NormalizationType = NormalizationType.BASIC
    default_transformation_name: str = "My dbt transformations"
    default_dbt_image: str = "fishtownanalytics/dbt:0.19.1"
    default_dbt_arguments: str = "run"
    compatibility_table: Tuple[SyncModePair, ...] = COMPATIBILITY_TABLE

    def to_config(self) -> Dict[str, Any]:
        return {
            "engine": {
                "default_schedule": (
                    self.default_schedule.to_dict() if self.default_schedule is not None else None
                ),
                "default_namespace_definition": self.default_namespace_definition.value,
                "default_namespace_format": self.default_namespace_format,
                "default_normalization": self.default_normalization.value,
                "default_transformation_name": self.default_transformation_name,
                "default_dbt_image": self.default_dbt_image,
                "default_dbt_arguments": self.default_dbt_arguments,
                "compatibility_table": [[s.value, d.value] for s, d in self.compatibility_table],
            }
        }

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "EngineSettings":
        """
        Materializa settings a partir da configuração resolvida.

        Chaves ausentes na seção `engine` mantêm os defaults embutidos.

        Raises:
            InvalidSettingsError: Se algum valor da seção `engine` for inválido.
            ConfigTypeConflictError: Se a seção conflitar estruturalmente com os defaults.
        """
        engine = deep_merge(DEFAULT_SETTINGS.to_config(), config or {})["engine"]
        if not isinstance(engine, dict):
            raise InvalidSettingsError("engine must be a mapping")

        try:
            table = []
            for i, pair in enumerate(engine["compatibility_table"]):
                if not isinstance(pair, list) or len(pair) != 2 or None in pair:
                    raise InvalidSettingsError(
                        f"engine.compatibility_table[{i}] must be a [syncMode, destinationSyncMode] pair"
                    )
                table.append(
                    (
                        parse_sync_mode(pair[0], f"engine.compatibility_table[{i}][0]"),
                        parse_destination_sync_mode(pair[1], f"engine.compatibility_table[{i}][1]"),
                    )
                )

            return cls(
                default_schedule=parse_schedule(engine["default_schedule"]),
                default_namespace_definition=NamespaceDefinitionType(
                    engine["default_namespace_definition"]
                ),
                default_namespace_format=str(engine["default_namespace_format"]),
                default_normalization=NormalizationType(engine["default_normalization"]),
                default_transformation_name=str(engine["default_transformation_name"]),
                default_dbt_image=str(engine["default_dbt_image"]),
                default_dbt_arguments=str(engine["default_dbt_arguments"]),
                compatibility_table=tuple(table),
            )
        except (CatalogValidationError, ValueError) as e:
            raise InvalidSettingsError(str(e)) from e


DEFAULT_SETTINGS = EngineSettings()
