# src/syncconf/core/operations/merge.py
"""
Merge canônico de operações pós-carga.

Este módulo combina a escolha de normalização e as transformações
editadas pelo usuário com as operações previamente persistidas,
produzindo a lista ordenada de operações enviada à persistência.

Política de merge (v1):
    - normalização presente e diferente de `raw` → primeira operação
        - reutiliza a identidade da operação persistida (incluindo
          `operation_id`), com a opção escolhida
        - senão, sintetiza uma nova com id `""`
    - normalização ausente ou `raw` → nenhuma operação de normalização
      é emitida (o passo é pulado, não emitido e depois filtrado)
    - transformações → anexadas na ordem original, sem alteração

Invariantes:
    - Normalização, quando presente, está sempre no índice 0
    - A ordem relativa das transformações é preservada
    - Nenhuma operação é duplicada ou descartada, exceto o caso `raw`
    - Nenhum input é mutado

Limites explícitos:
    - Não persiste operações
    - Não atribui `operation_id` (responsabilidade da persistência)
    - Não valida o conteúdo das transformações
"""

from __future__ import annotations

from dataclasses import replace
from typing import List, Optional, Sequence

from .types import (
    NormalizationOperation,
    NormalizationType,
    Operation,
    TransformationOperation,
    UNASSIGNED_OPERATION_ID,
    is_normalization,
)


def merge_operations(
    transformations: Optional[Sequence[TransformationOperation]],
    normalization: Optional[NormalizationType],
    previous_operations: Optional[Sequence[Operation]],
    workspace_id: str,
) -> List[Operation]:
    """
    Mapeia normalização e transformações editadas para a lista de operações.

    Args:
        transformations: Transformações do usuário, na ordem desejada.
        normalization: Opção de normalização escolhida (ou `None`).
        previous_operations: Operações já persistidas para a conexão.
        workspace_id: Workspace dono de uma normalização sintetizada.

    Returns:
        List[Operation]: Nova lista ordenada de operações.
    """
    operations: List[Operation] = []

    if normalization is not None and normalization != NormalizationType.RAW:
        persisted = next((op for op in previous_operations or () if is_normalization(op)), None)
        if persisted is not None:
            operations.append(replace(persisted, option=normalization))
        else:
            operations.append(
                NormalizationOperation(
                    option=normalization,
                    workspace_id=workspace_id,
                    operation_id=UNASSIGNED_OPERATION_ID,
                )
            )

    if transformations:
        operations.extend(transformations)

    return operations
