# src/syncconf/core/catalog/types.py
"""
Tipos canônicos do catálogo de sincronização.

Este módulo define as estruturas que descrevem um catálogo descoberto
de uma source e a configuração editável de cada stream.

Componentes principais:
    - SyncMode             → estratégia de extração na source
    - DestinationSyncMode  → estratégia de escrita no destino
    - StreamDescriptor     → declaração imutável da stream (source)
    - StreamConfig         → configuração editável pelo usuário
    - SyncSchemaStream     → par descriptor + config + id de sessão
    - SyncSchema           → sequência ordenada de streams

Princípios fundamentais:
    - Descriptors são imutáveis e pertencem ao colaborador de discovery
    - Operações do engine nunca mutam StreamConfig in place
    - Serialização segue o formato camelCase da API

Invariantes:
    - A ordem do SyncSchema é a ordem de discovery
    - `id` é um identificador efêmero, local à sessão de edição

Limites explícitos:
    - Não resolve modos de sync
    - Não valida configuração editada
    - Não realiza I/O

Este módulo existe para dar forma explícita ao catálogo
consumido pelo engine de resolução.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

FieldPath = Tuple[str, ...]


class SyncMode(str, Enum):
    """Estratégia de extração na source."""

    FULL_REFRESH = "full_refresh"
    INCREMENTAL = "incremental"


class DestinationSyncMode(str, Enum):
    """Estratégia de escrita no destino."""

    OVERWRITE = "overwrite"
    APPEND = "append"
    APPEND_DEDUP = "append_dedup"


SyncModePair = Tuple[SyncMode, DestinationSyncMode]


@dataclass(frozen=True)
class StreamDescriptor:
    """
    Declaração imutável de uma stream, produzida pelo discovery.

    Campos:
        - name / namespace: nome qualificado da stream
        - json_schema: JSON schema dos campos
        - supported_sync_modes: modos de extração suportados pela source
        - source_defined_cursor: a própria source define o cursor
        - default_cursor_field: caminho de cursor sugerido pela source
        - source_defined_primary_key: caminhos de chave primária declarados

    Decisões arquiteturais:
        - Uma stream sem modos declarados é tratada como `full_refresh`
        - A identidade durável é (namespace, name); o engine nunca
          correlaciona streams entre snapshots de discovery

    Limites explícitos:
        - Não é mutado pelo engine
    """

    name: str
    namespace: Optional[str] = None
    json_schema: Dict[str, Any] = field(default_factory=dict)
    supported_sync_modes: Tuple[SyncMode, ...] = ()
    source_defined_cursor: bool = False
    default_cursor_field: FieldPath = ()
    source_defined_primary_key: Tuple[FieldPath, ...] = ()

    @property
    def durable_key(self) -> Tuple[Optional[str], str]:
        return (self.namespace, self.name)

    @property
    def effective_sync_modes(self) -> Tuple[SyncMode, ...]:
        if not self.supported_sync_modes:
            return (SyncMode.FULL_REFRESH,)
        return self.supported_sync_modes

    def supports(self, sync_mode: Optional[SyncMode]) -> bool:
        return sync_mode is not None and sync_mode in self.effective_sync_modes

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "namespace": self.namespace,
            "jsonSchema": dict(self.json_schema),
            "supportedSyncModes": [m.value for m in self.supported_sync_modes],
            "sourceDefinedCursor": self.source_defined_cursor,
            "defaultCursorField": list(self.default_cursor_field),
            "sourceDefinedPrimaryKey": [list(p) for p in self.source_defined_primary_key],
        }


@dataclass
class StreamConfig:
    """
    Configuração editável de uma stream.

    `cursor_field` é uma sequência ordenada de segmentos; `primary_key`
    é uma lista de caminhos, cada um uma sequência de segmentos.
    """

    selected: bool = True
    sync_mode: Optional[SyncMode] = None
    destination_sync_mode: Optional[DestinationSyncMode] = None
    cursor_field: List[str] = field(default_factory=list)
    primary_key: List[List[str]] = field(default_factory=list)
    alias_name: Optional[str] = None

    @property
    def mode_pair(self) -> Optional[SyncModePair]:
        if self.sync_mode is None or self.destination_sync_mode is None:
            return None
        return (self.sync_mode, self.destination_sync_mode)

    def copy(self) -> "StreamConfig":
        return replace(
            self,
            cursor_field=list(self.cursor_field),
            primary_key=[list(p) for p in self.primary_key],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "selected": self.selected,
            "syncMode": self.sync_mode.value if self.sync_mode else None,
            "destinationSyncMode": (
                self.destination_sync_mode.value if self.destination_sync_mode else None
            ),
            "cursorField": list(self.cursor_field),
            "primaryKey": [list(p) for p in self.primary_key],
            "aliasName": self.alias_name,
        }


@dataclass(frozen=True)
class SyncSchemaStream:
    """
    Stream do catálogo pareada com sua configuração.

    `id` é a posição (zero-based, em string) da stream no catálogo bruto.
    Serve apenas para correlacionar violações de validação com linhas
    da sessão de edição: não é persistido e não sobrevive a um novo
    discovery.
    """

    stream: StreamDescriptor
    config: StreamConfig = field(default_factory=StreamConfig)
    id: Optional[str] = None

    def to_dict(self, *, include_id: bool = True) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "stream": self.stream.to_dict(),
            "config": self.config.to_dict(),
        }
        if include_id and self.id is not None:
            data["id"] = self.id
        return data


@dataclass(frozen=True)
class SyncSchema:
    """Sequência ordenada de streams, na ordem de discovery."""

    streams: Tuple[SyncSchemaStream, ...] = ()

    def __len__(self) -> int:
        return len(self.streams)

    def __iter__(self):
        return iter(self.streams)

    def to_dict(self, *, include_ids: bool = True) -> Dict[str, Any]:
        return {"streams": [s.to_dict(include_id=include_ids) for s in self.streams]}
