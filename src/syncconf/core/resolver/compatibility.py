# src/syncconf/core/resolver/compatibility.py
"""
Resolver de compatibilidade entre stream e destino.

Este módulo escolhe e repara o par de modos de sync de uma stream a partir
das capacidades declaradas pela source (StreamDescriptor) e pelo destino
(DestinationCapabilities).

Política de resolução (v1):
    - A tabela de compatibilidade é percorrida em ordem de prioridade
    - O primeiro par viável para ambos os lados vence
    - Sem par viável, a stream é sinalizada como irresolvível (`None`)

Princípios fundamentais:
    - Funções puras: nenhuma entrada é mutada
    - Ausência de suporte é um resultado normal, não exceção
    - Nenhum cursor ou chave primária é inventado: apenas defaults
      declarados pela source são usados

Invariantes:
    - A mesma entrada sempre produz a mesma saída
    - A configuração retornada é sempre uma nova instância

Limites explícitos:
    - Não valida campos obrigatórios (responsabilidade da validação)
    - Não remove streams do catálogo (responsabilidade do normalizer)
    - Não realiza I/O

Este módulo existe para tornar explícita e testável
a negociação de modos de sync entre source e destino.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Optional, Sequence

from syncconf.core.catalog.capabilities import COMPATIBILITY_TABLE, DestinationCapabilities
from syncconf.core.catalog.types import (
    DestinationSyncMode,
    SyncMode,
    SyncModePair,
    SyncSchemaStream,
)


def resolve_default_mode(
    stream: SyncSchemaStream,
    capabilities: DestinationCapabilities,
    table: Sequence[SyncModePair] = COMPATIBILITY_TABLE,
) -> Optional[SyncModePair]:
    """
    Escolhe o par de modos de sync preferido para uma stream.

    Percorre `table` em ordem e retorna o primeiro par P tal que:
        - a stream suporta o modo de extração de P
        - o destino suporta P (pertinência sobre os pares declarados,
          filtrados pelos modos de destino que ele declara)

    Decisões arquiteturais:
        - Política first-match: entradas anteriores vencem mesmo quando
          várias são viáveis (ex.: incremental+dedup antes de append)
        - Nenhum par fora da tabela é considerado

    Args:
        stream (SyncSchemaStream): Stream a resolver.
        capabilities (DestinationCapabilities): Capacidades do destino.
        table (Sequence[SyncModePair]): Tabela de prioridade.

    Returns:
        Optional[SyncModePair]: Par escolhido, ou `None` quando nenhum par
        é viável (o chamador deve descartar a stream).
    """
    for pair in table:
        sync_mode, _ = pair
        if stream.stream.supports(sync_mode) and capabilities.supports_pair(pair, table):
            return pair
    return None


def repair_cursor_field(stream: SyncSchemaStream) -> SyncSchemaStream:
    """
    Completa o cursor de uma stream incremental com o default da source.

    Só atua quando o modo é incremental, a source não define o cursor e
    nenhum cursor está configurado. Sem default declarado, o cursor fica
    vazio e a ausência é apontada depois pela validação.
    """
    config = stream.config
    if config.sync_mode != SyncMode.INCREMENTAL:
        return stream
    if stream.stream.source_defined_cursor or config.cursor_field:
        return stream
    if not stream.stream.default_cursor_field:
        return stream
    return replace(
        stream,
        config=replace(config, cursor_field=list(stream.stream.default_cursor_field)),
    )


def repair_primary_key(stream: SyncSchemaStream) -> SyncSchemaStream:
    """Completa a chave primária de uma stream `append_dedup` com a declarada pela source."""
    config = stream.config
    if config.destination_sync_mode != DestinationSyncMode.APPEND_DEDUP:
        return stream
    if config.primary_key or not stream.stream.source_defined_primary_key:
        return stream
    return replace(
        stream,
        config=replace(
            config,
            primary_key=[list(p) for p in stream.stream.source_defined_primary_key],
        ),
    )


def verify_supported_sync_modes(
    stream: SyncSchemaStream,
    capabilities: DestinationCapabilities,
    table: Sequence[SyncModePair] = COMPATIBILITY_TABLE,
) -> Optional[SyncSchemaStream]:
    """
    Garante que o par configurado na stream é suportado por source e destino.

    Política:
        - par configurado suportado por ambos → stream inalterada
        - caso contrário → par substituído por `resolve_default_mode`
        - sem par viável → `None` (sinal de stream irresolvível)

    Decisões arquiteturais:
        - Irresolvível é um sinal, não uma exceção: o normalizer filtra
        - Os demais campos da configuração são preservados

    Returns:
        Optional[SyncSchemaStream]: Stream com par suportado, ou `None`.
    """
    pair = stream.config.mode_pair
    if (
        pair is not None
        and stream.stream.supports(pair[0])
        and capabilities.supports_pair(pair, table)
    ):
        return stream

    resolved = resolve_default_mode(stream, capabilities, table)
    if resolved is None:
        return None

    sync_mode, destination_sync_mode = resolved
    return replace(
        stream,
        config=replace(
            stream.config,
            sync_mode=sync_mode,
            destination_sync_mode=destination_sync_mode,
        ),
    )
