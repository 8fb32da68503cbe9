# src/syncconf/core/resolver/normalizer.py
"""
Normalizer do catálogo bruto.

Aplica o resolver de compatibilidade a todas as streams de um catálogo
descoberto, produzindo o SyncSchema inicial da sessão de edição.

Política (v1):
    - `id` de cada stream = posição zero-based no catálogo bruto (string)
    - `verify_supported_sync_modes` → `repair_cursor_field` → `repair_primary_key`
    - Streams irresolvíveis são excluídas silenciosamente
    - A ordem relativa das streams restantes é preservada

Decisões arquiteturais:
    - O `id` é um identificador efêmero de sessão: um novo discovery pode
      reordenar o catálogo e, portanto, reatribuir ids. Isso é aceito.
    - A exclusão não é um erro de validação: uma stream sem par viável
      não é um engano do usuário
    - Ids são atribuídos antes da exclusão, logo podem ter lacunas

Invariantes:
    - Saída com len <= len(entrada)
    - Nenhuma configuração de entrada é mutada
    - Mesma entrada, mesma saída

Limites explícitos:
    - Não valida campos obrigatórios
    - Não persiste o catálogo
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Sequence, Tuple

from syncconf.core.catalog.capabilities import COMPATIBILITY_TABLE, DestinationCapabilities
from syncconf.core.catalog.types import SyncModePair, SyncSchema, SyncSchemaStream

from .compatibility import repair_cursor_field, repair_primary_key, verify_supported_sync_modes


@dataclass(frozen=True)
class NormalizationReport:
    """Resultado do normalizer com as streams excluídas, na ordem de discovery."""

    schema: SyncSchema
    excluded: Tuple[SyncSchemaStream, ...] = ()


def normalize_with_report(
    raw_schema: SyncSchema,
    capabilities: DestinationCapabilities,
    table: Sequence[SyncModePair] = COMPATIBILITY_TABLE,
) -> NormalizationReport:
    kept = []
    excluded = []

    for position, raw in enumerate(raw_schema.streams):
        node = replace(raw, id=str(position), config=raw.config.copy())

        verified = verify_supported_sync_modes(node, capabilities, table)
        if verified is None:
            excluded.append(node)
            continue

        kept.append(repair_primary_key(repair_cursor_field(verified)))

    return NormalizationReport(schema=SyncSchema(streams=tuple(kept)), excluded=tuple(excluded))


def normalize(
    raw_schema: SyncSchema,
    capabilities: DestinationCapabilities,
    table: Sequence[SyncModePair] = COMPATIBILITY_TABLE,
) -> SyncSchema:
    """Normaliza o catálogo bruto, descartando streams irresolvíveis."""
    return normalize_with_report(raw_schema, capabilities, table).schema
