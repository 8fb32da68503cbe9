# src/syncconf/core/catalog/capabilities.py
"""
Capacidades declaradas pelo destino e tabela de compatibilidade.

A tabela de compatibilidade é uma lista fixa e ordenada de pares
(SyncMode, DestinationSyncMode) candidatos. A ordem codifica preferência:
o primeiro par viável vence, mesmo quando outros também são viáveis.

Invariantes:
    - A tabela não é mutada em runtime
    - Ausência de suporte é `False`, nunca erro
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Iterable, Optional, Sequence, Tuple

from .types import DestinationSyncMode, SyncMode, SyncModePair


COMPATIBILITY_TABLE: Tuple[SyncModePair, ...] = (
    (SyncMode.INCREMENTAL, DestinationSyncMode.APPEND_DEDUP),
    (SyncMode.FULL_REFRESH, DestinationSyncMode.OVERWRITE),
    (SyncMode.INCREMENTAL, DestinationSyncMode.APPEND),
    (SyncMode.FULL_REFRESH, DestinationSyncMode.APPEND),
)


@dataclass(frozen=True)
class DestinationCapabilities:
    """
    Capacidades declaradas por um conector de destino.

    Quando `supported_pairs` não é informado, os pares suportados são os
    da tabela de compatibilidade cujo modo de destino foi declarado em
    `supported_destination_sync_modes`.

    Decisões arquiteturais:
        - Consultas são apenas de pertinência (membership)
        - O descritor é lido, nunca alterado, durante a resolução
    """

    supported_destination_sync_modes: FrozenSet[DestinationSyncMode] = frozenset()
    supported_pairs: Optional[FrozenSet[SyncModePair]] = None
    supports_normalization: bool = False
    supports_custom_transformations: bool = False

    # chave "supportsDbt" na API
    @property
    def supports_dbt(self) -> bool:
        return self.supports_custom_transformations

    def declared_pairs(self, table: Sequence[SyncModePair] = COMPATIBILITY_TABLE) -> FrozenSet[SyncModePair]:
        if self.supported_pairs is not None:
            return frozenset(
                p for p in self.supported_pairs if p[1] in self.supported_destination_sync_modes
            )
        return frozenset(p for p in table if p[1] in self.supported_destination_sync_modes)

    def supports_destination_mode(self, mode: Optional[DestinationSyncMode]) -> bool:
        return mode is not None and mode in self.supported_destination_sync_modes

    def supports_pair(
        self,
        pair: Optional[SyncModePair],
        table: Sequence[SyncModePair] = COMPATIBILITY_TABLE,
    ) -> bool:
        if pair is None:
            return False
        return pair in self.declared_pairs(table)

    @classmethod
    def build(
        cls,
        *,
        destination_sync_modes: Iterable[DestinationSyncMode],
        pairs: Optional[Iterable[SyncModePair]] = None,
        supports_normalization: bool = False,
        supports_custom_transformations: bool = False,
    ) -> "DestinationCapabilities":
        return cls(
            supported_destination_sync_modes=frozenset(destination_sync_modes),
            supported_pairs=frozenset(pairs) if pairs is not None else None,
            supports_normalization=supports_normalization,
            supports_custom_transformations=supports_custom_transformations,
        )

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "supportedDestinationSyncModes": sorted(
                m.value for m in self.supported_destination_sync_modes
            ),
            "supportsNormalization": self.supports_normalization,
            "supportsDbt": self.supports_custom_transformations,
        }
        if self.supported_pairs is not None:
            data["supportedSyncModePairs"] = sorted(
                [s.value, d.value] for s, d in self.supported_pairs
            )
        return data
