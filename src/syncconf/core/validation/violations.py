"""
SyncConf — Canonical Violation Structures (v1)

Violações de validação são artefatos de domínio, não exceções. Elas fazem
parte do contrato entre o engine e a sessão de edição, devendo ser:

- explícitas
- serializáveis
- endereçáveis por caminho de campo
- recuperáveis por nova edição

Nenhuma violação interrompe o processo.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Violation:
    """
    Violação canônica de validação.

    Campos:
    - kind: código estável da violação (não é texto livre)
    - field_path: caminho do campo (ex.: `schema.streams[3].config.cursorField`)
    - message_key: chave de mensagem para a camada de apresentação
    - details: dados estruturados relevantes para diagnóstico
    """

    kind: str
    field_path: str
    message_key: str
    details: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável (`fieldPath`, `messageKey`, ...)."""
        data = asdict(self)
        return {
            "fieldPath": data["field_path"],
            "messageKey": data["message_key"],
            "kind": data["kind"],
            "details": data["details"],
        }


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de violação (v1)
# ---------------------------------------------------------------------------

# Stream
MISSING_PRIMARY_KEY = "MissingPrimaryKey"
MISSING_CURSOR_FIELD = "MissingCursorField"

# Conexão
MISSING_SCHEDULE = "MissingSchedule"
MISSING_NAMESPACE_DEFINITION = "MissingNamespaceDefinition"
MISSING_NAMESPACE_FORMAT = "MissingNamespaceFormat"
INVALID_VALUE = "InvalidValue"

# Contrato de entrada
UNKNOWN_FIELD = "UnknownField"
INVALID_TYPE = "InvalidType"

# Chaves de mensagem
EMPTY_ERROR_KEY = "form.empty.error"
PRIMARY_KEY_REQUIRED_KEY = "connectionForm.primaryKey.required"
CURSOR_FIELD_REQUIRED_KEY = "connectionForm.cursorField.required"
UNKNOWN_FIELD_KEY = "form.unknownField.error"
INVALID_TYPE_KEY = "form.invalidType.error"
INVALID_VALUE_KEY = "form.invalidValue.error"

# Caminho genérico para rejeições do contrato como um todo
CONNECTION_PATH = "connection"


def stream_config_path(stream_id: str, field_name: str) -> str:
    return f"schema.streams[{stream_id}].config.{field_name}"


# ---------------------------------------------------------------------------
# Helpers de fábrica
# ---------------------------------------------------------------------------

def missing_primary_key(*, stream_id: str) -> Violation:
    return Violation(
        kind=MISSING_PRIMARY_KEY,
        field_path=stream_config_path(stream_id, "primaryKey"),
        message_key=PRIMARY_KEY_REQUIRED_KEY,
        details={"stream_id": stream_id},
    )


def missing_cursor_field(*, stream_id: str) -> Violation:
    return Violation(
        kind=MISSING_CURSOR_FIELD,
        field_path=stream_config_path(stream_id, "cursorField"),
        message_key=CURSOR_FIELD_REQUIRED_KEY,
        details={"stream_id": stream_id},
    )


def missing_field(*, kind: str, field_path: str) -> Violation:
    return Violation(kind=kind, field_path=field_path, message_key=EMPTY_ERROR_KEY)


def unknown_fields(*, fields: List[str]) -> Violation:
    return Violation(
        kind=UNKNOWN_FIELD,
        field_path=CONNECTION_PATH,
        message_key=UNKNOWN_FIELD_KEY,
        details={"unknown": sorted(fields)},
    )


def invalid_type(*, field_path: str, expected: str, actual: Any) -> Violation:
    return Violation(
        kind=INVALID_TYPE,
        field_path=field_path,
        message_key=INVALID_TYPE_KEY,
        details={"expected": expected, "actual": type(actual).__name__},
    )


def invalid_value(*, field_path: str, value: Any, allowed: List[str]) -> Violation:
    return Violation(
        kind=INVALID_VALUE,
        field_path=field_path,
        message_key=INVALID_VALUE_KEY,
        details={"value": value, "allowed": allowed},
    )


def malformed_connection(*, error: str) -> Violation:
    return Violation(
        kind=INVALID_TYPE,
        field_path=CONNECTION_PATH,
        message_key=INVALID_TYPE_KEY,
        details={"error": error},
    )
