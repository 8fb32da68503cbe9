# src/syncconf/core/session/persistence.py
"""
Contrato do colaborador de persistência.

A sessão de edição entrega o payload aceito (configuração sem ids de
stream + operações ordenadas) a um colaborador externo, tipicamente uma
chamada à API. O engine não conhece transporte nem formato de resposta.
"""

from __future__ import annotations

from typing import Any, Dict, Protocol, runtime_checkable


@runtime_checkable
class ConnectionPersistence(Protocol):
    """
    Contrato mínimo de persistência de uma conexão.

    Decisões arquiteturais:
        - O protocolo não impõe herança, apenas conformidade estrutural
        - Falhas de persistência pertencem ao colaborador e propagam ao
          chamador da submissão

    Limites explícitos:
        - Não atribui `operation_id` dentro do engine
    """

    def save(self, payload: Dict[str, Any]) -> Any:
        """Persiste o payload de submissão e retorna a resposta do colaborador."""
        ...
