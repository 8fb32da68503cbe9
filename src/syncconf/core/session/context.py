# src/syncconf/core/session/context.py
"""
Sessão de edição de uma conexão.

Este módulo define a `ConnectionFormSession`, a estrutura que possui as
entradas de uma edição (catálogo bruto, capacidades do destino, estado
persistido, modo de edição) e o estado derivado delas.

Responsabilidades do módulo:
    - Recalcular o estado inicial quando alguma entrada muda
    - Manter estabilidade referencial: entradas idênticas devolvem o mesmo
      objeto de estado inicial
    - Validar e submeter valores editados ao colaborador de persistência
    - Registrar eventos estruturados e warnings não fatais

Decisões arquiteturais:
    - Não existe cache implícito: o recálculo é disparado explicitamente
      pela mudança da impressão digital (hash canônico) das entradas
    - Streams excluídas pelo normalizer viram warnings, não erros
    - Violações de validação são dados devolvidos ao chamador

Invariantes:
    - Eventos sempre incluem `session_id` e `stage`
    - Warnings são agrupados por `stage`; os de `normalize` refletem
      apenas o último recálculo
    - O recálculo é função total das entradas declaradas

Limites explícitos:
    - Não renderiza nada
    - Não conhece transporte de rede
    - Não executa syncs
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Optional, Tuple

from syncconf.core.catalog.capabilities import DestinationCapabilities
from syncconf.core.catalog.errors import CatalogValidationError
from syncconf.core.catalog.types import SyncSchema
from syncconf.core.config.hashing import compute_document_hash
from syncconf.core.config.settings import DEFAULT_SETTINGS, EngineSettings
from syncconf.core.connection.schema import parse_connection_values
from syncconf.core.connection.types import ConnectionConfiguration, Schedule
from syncconf.core.operations.errors import OperationValidationError
from syncconf.core.operations.merge import merge_operations
from syncconf.core.operations.schema import parse_operations
from syncconf.core.operations.types import Operation
from syncconf.core.resolver.normalizer import normalize_with_report
from syncconf.core.validation.rules import validate_connection
from syncconf.core.validation.violations import Violation, malformed_connection

from .builder import build_initial_state
from .persistence import ConnectionPersistence


@dataclass(frozen=True)
class SubmissionResult:
    """Resultado imutável de uma submissão."""

    accepted: bool
    violations: Tuple[Violation, ...] = ()
    configuration: Optional[ConnectionConfiguration] = None
    operations: Tuple[Operation, ...] = ()
    payload: Dict[str, Any] = field(default_factory=dict)
    persisted: Any = None


def _jsonable_connection(connection: Optional[Mapping[str, Any]]) -> Optional[Dict[str, Any]]:
    if connection is None:
        return None
    doc = dict(connection)
    if isinstance(doc.get("schedule"), Schedule):
        doc["schedule"] = doc["schedule"].to_dict()
    if doc.get("operations") is not None:
        doc["operations"] = [op.to_dict() if hasattr(op, "to_dict") else op for op in doc["operations"]]
    return doc


def build_submission_payload(
    configuration: ConnectionConfiguration,
    operations: List[Operation],
) -> Dict[str, Any]:
    """Payload de persistência: sem ids de stream, com operações ordenadas."""
    payload = configuration.to_dict(include_ids=False)
    payload.pop("transformations", None)
    payload.pop("normalization", None)
    payload["operations"] = [op.to_dict() for op in operations]
    return payload


@dataclass
class ConnectionFormSession:
    """
    Sessão de edição de uma conexão source → destino.

    Campos de entrada:
        - workspace_id: workspace dono de operações sintetizadas
        - catalog: catálogo bruto, na ordem de discovery
        - capabilities: capacidades do destino
        - connection: estado persistido (camelCase) em modo edição
        - is_edit_mode: edição de conexão existente
        - settings: defaults de processo

    Decisões arquiteturais:
        - Entradas são alteradas apenas via `update_inputs`
        - `initial_values` recalcula somente quando a impressão digital
          das entradas muda; caso contrário devolve o mesmo objeto
    """

    session_id: str
    workspace_id: str
    catalog: SyncSchema
    capabilities: DestinationCapabilities
    connection: Optional[Mapping[str, Any]] = None
    is_edit_mode: bool = False
    settings: EngineSettings = DEFAULT_SETTINGS
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    events: List[Dict[str, Any]] = field(default_factory=list, init=False)
    warnings: Dict[str, List[str]] = field(default_factory=dict, init=False)
    _fingerprint: Optional[str] = field(default=None, init=False, repr=False)
    _initial: Optional[ConnectionConfiguration] = field(default=None, init=False, repr=False)

    # -----------------------------
    # Logging & warnings
    # -----------------------------
    def log(self, *, stage: str, level: str, message: str, **extra: Any) -> None:
        event = {
            "session_id": self.session_id,
            "stage": stage,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

    def add_warning(self, *, stage: str, message: str) -> None:
        if stage not in self.warnings:
            self.warnings[stage] = []
        self.warnings[stage].append(message)

    # -----------------------------
    # Inputs & recomputation
    # -----------------------------
    def update_inputs(
        self,
        *,
        catalog: Optional[SyncSchema] = None,
        capabilities: Optional[DestinationCapabilities] = None,
        connection: Optional[Mapping[str, Any]] = None,
        is_edit_mode: Optional[bool] = None,
    ) -> None:
        if catalog is not None:
            self.catalog = catalog
        if capabilities is not None:
            self.capabilities = capabilities
        if connection is not None:
            self.connection = connection
        if is_edit_mode is not None:
            self.is_edit_mode = is_edit_mode

    def inputs_fingerprint(self) -> str:
        return compute_document_hash(
            {
                "catalog": self.catalog.to_dict(include_ids=False),
                "capabilities": self.capabilities.to_dict(),
                "connection": _jsonable_connection(self.connection),
                "is_edit_mode": self.is_edit_mode,
                "settings": self.settings.to_config(),
            }
        )

    @property
    def initial_values(self) -> ConnectionConfiguration:
        fingerprint = self.inputs_fingerprint()
        if self._initial is not None and fingerprint == self._fingerprint:
            return self._initial

        self.warnings.pop("normalize", None)
        report = normalize_with_report(self.catalog, self.capabilities, self.settings.compatibility_table)
        for stream in report.excluded:
            message = (
                f"stream '{stream.stream.name}' excluded: no compatible sync mode pair"
            )
            self.add_warning(stage="normalize", message=message)
            self.log(
                stage="normalize",
                level="WARNING",
                message=message,
                stream_id=stream.id,
                stream_name=stream.stream.name,
                stream_namespace=stream.stream.namespace,
            )

        self._initial = build_initial_state(
            self.catalog,
            self.capabilities,
            self.connection,
            is_edit_mode=self.is_edit_mode,
            settings=self.settings,
        )
        self._fingerprint = fingerprint
        self.log(
            stage="initial_state",
            level="INFO",
            message="initial state recomputed",
            fingerprint=fingerprint,
            streams=len(self._initial.sync_catalog),
            excluded=len(report.excluded),
        )
        return self._initial

    def previous_operations(self) -> List[Operation]:
        return parse_operations((self.connection or {}).get("operations") or [])

    # -----------------------------
    # Validation & submission
    # -----------------------------
    def validate(self, values: Any) -> List[Violation]:
        violations = validate_connection(values)
        self.log(
            stage="validate",
            level="INFO" if not violations else "WARNING",
            message="values accepted" if not violations else "values rejected",
            violations=[v.to_dict() for v in violations],
        )
        return violations

    def submit(
        self,
        values: Any,
        persistence: Optional[ConnectionPersistence] = None,
    ) -> SubmissionResult:
        """
        Valida, mescla operações e entrega o payload à persistência.

        Violações devolvem `accepted=False` sem chamar a persistência.
        Falhas do colaborador de persistência propagam ao chamador.
        """
        violations = self.validate(values)
        if violations:
            return SubmissionResult(accepted=False, violations=tuple(violations))

        try:
            configuration = parse_connection_values(values)
        except (CatalogValidationError, OperationValidationError) as e:
            violation = malformed_connection(error=str(e))
            self.log(stage="submit", level="WARNING", message="malformed values", violations=[violation.to_dict()])
            return SubmissionResult(accepted=False, violations=(violation,))

        operations = merge_operations(
            configuration.transformations,
            configuration.normalization,
            self.previous_operations(),
            self.workspace_id,
        )
        payload = build_submission_payload(configuration, operations)

        persisted = None
        if persistence is not None:
            persisted = persistence.save(payload)

        self.log(
            stage="submit",
            level="INFO",
            message="connection submitted",
            operations=len(operations),
            persisted=persistence is not None,
            payload_hash=compute_document_hash(payload),
        )
        return SubmissionResult(
            accepted=True,
            configuration=configuration,
            operations=tuple(operations),
            payload=payload,
            persisted=persisted,
        )
