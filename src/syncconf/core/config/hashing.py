# src/syncconf/core/config/hashing.py
"""
Hashing canônico do SyncConf.

Gera a identidade estrutural de documentos serializáveis: configuração
efetiva do engine, entradas de uma sessão de edição e configurações de
conexão resolvidas.

Política de hashing (v1):
    - Serialização JSON canônica (sort_keys, separadores compactos)
    - Codificação UTF-8
    - SHA-256

Invariantes:
    - Documentos estruturalmente equivalentes produzem o mesmo hash
    - O valor gerado é uma string hexadecimal de 64 caracteres
"""

import hashlib
import json
from typing import Any, Dict


def compute_document_hash(document: Any) -> str:
    """Computa SHA-256 de qualquer documento JSON-serializável em formato canônico."""
    canonical_json = json.dumps(
        document,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
    )
    return hashlib.sha256(canonical_json.encode("utf-8")).hexdigest()


def compute_config_hash(config: Dict[str, Any]) -> str:
    """
    Gera um hash determinístico da configuração efetiva do engine.

    Raises:
        TypeError: Se o objeto fornecido não for um dicionário.
    """
    if not isinstance(config, dict):
        raise TypeError(
            f"Config para hashing deve ser dict, recebido: {type(config).__name__}"
        )
    return compute_document_hash(config)
