# tests/core/session/test_session.py
"""
Testes da sessão de edição (`ConnectionFormSession`).

Os testes asseguram que:
- o estado inicial é recalculado apenas quando as entradas mudam
- streams excluídas geram warnings e eventos, nunca exceções
- submissões rejeitadas não chamam a persistência
- o payload persistido não contém ids de stream e traz operações ordenadas
"""

import copy

import pytest

from syncconf.core.catalog.types import SyncSchema
from syncconf.core.session import ConnectionFormSession, ConnectionPersistence


class RecordingPersistence:
    def __init__(self):
        self.payloads = []

    def save(self, payload):
        self.payloads.append(payload)
        return {"connectionId": "conn-1"}


class FailingPersistence:
    def save(self, payload):
        raise RuntimeError("api unavailable")


@pytest.fixture
def session(raw_catalog, all_modes_destination):
    return ConnectionFormSession(
        session_id="s-1",
        workspace_id="ws-1",
        catalog=raw_catalog,
        capabilities=all_modes_destination,
    )


def test_persistence_protocol_is_structural():
    assert isinstance(RecordingPersistence(), ConnectionPersistence)


def test_initial_values_are_referentially_stable(session):
    first = session.initial_values
    second = session.initial_values

    assert first is second
    recomputed = [e for e in session.events if e["message"] == "initial state recomputed"]
    assert len(recomputed) == 1
    assert recomputed[0]["session_id"] == "s-1"


def test_changed_inputs_trigger_recompute(session, make_stream):
    first = session.initial_values

    session.update_inputs(catalog=SyncSchema(streams=(make_stream("accounts"),)))
    second = session.initial_values

    assert second is not first
    assert [s.stream.name for s in second.sync_catalog] == ["accounts"]


def test_equal_inputs_do_not_recompute(session, raw_catalog):
    first = session.initial_values
    session.update_inputs(catalog=copy.deepcopy(raw_catalog))
    assert session.initial_values is first


def test_excluded_streams_become_warnings(raw_catalog, dedup_only_destination):
    session = ConnectionFormSession(
        session_id="s-2",
        workspace_id="ws-1",
        catalog=raw_catalog,
        capabilities=dedup_only_destination,
    )

    state = session.initial_values

    assert [s.stream.name for s in state.sync_catalog] == ["users", "orders"]
    assert len(session.warnings["normalize"]) == 1
    assert "events" in session.warnings["normalize"][0]
    warning_events = [e for e in session.events if e["level"] == "WARNING"]
    assert warning_events[0]["stream_name"] == "events"
    assert warning_events[0]["stream_id"] == "1"


def test_submit_rejected_does_not_persist(session, valid_values):
    values = copy.deepcopy(valid_values)
    values["syncCatalog"]["streams"][0]["config"]["primaryKey"] = []
    persistence = RecordingPersistence()

    result = session.submit(values, persistence)

    assert result.accepted is False
    assert [v.kind for v in result.violations] == ["MissingPrimaryKey"]
    assert persistence.payloads == []


def test_submit_accepted_builds_payload(session, valid_values):
    values = copy.deepcopy(valid_values)
    values["normalization"] = "basic"
    persistence = RecordingPersistence()

    result = session.submit(values, persistence)

    assert result.accepted is True
    assert result.persisted == {"connectionId": "conn-1"}
    payload = persistence.payloads[0]
    assert payload is result.payload
    assert "id" not in payload["syncCatalog"]["streams"][0]
    assert "normalization" not in payload
    assert payload["operations"][0]["operatorConfiguration"]["operatorType"] == "normalization"
    assert payload["operations"][0]["operationId"] == ""
    assert payload["operations"][0]["workspaceId"] == "ws-1"


def test_submit_in_edit_mode_reuses_operation_identity(
    raw_catalog, all_modes_destination, persisted_operations, valid_values
):
    session = ConnectionFormSession(
        session_id="s-3",
        workspace_id="ws-1",
        catalog=raw_catalog,
        capabilities=all_modes_destination,
        connection={"operations": persisted_operations},
        is_edit_mode=True,
    )
    values = copy.deepcopy(valid_values)
    values["normalization"] = "basic"
    values["transformations"] = [persisted_operations[2], persisted_operations[1]]

    result = session.submit(values)

    assert result.accepted is True
    assert result.persisted is None
    assert [op["operationId"] for op in result.payload["operations"]] == ["op-norm", "op-dbt-2", "op-dbt-1"]


def test_submit_raw_normalization_emits_no_operation(session, valid_values):
    values = copy.deepcopy(valid_values)
    values["normalization"] = "raw"

    result = session.submit(values)

    assert result.payload["operations"] == []


def test_submit_malformed_values_is_rejected(session, valid_values):
    values = copy.deepcopy(valid_values)
    values["syncCatalog"]["streams"][0]["config"]["syncMode"] = "sometimes"

    result = session.submit(values, RecordingPersistence())

    assert result.accepted is False
    assert result.violations[0].field_path == "connection"


def test_persistence_failure_propagates(session, valid_values):
    with pytest.raises(RuntimeError):
        session.submit(copy.deepcopy(valid_values), FailingPersistence())


def test_validate_logs_outcome(session, valid_values):
    assert session.validate(valid_values) == []
    assert session.events[-1]["stage"] == "validate"
    assert session.events[-1]["message"] == "values accepted"


def test_unchanged_edit_round_trip_keeps_empty_namespace_format(make_stream, all_modes_destination):
    session = ConnectionFormSession(
        session_id="s-4",
        workspace_id="ws-1",
        catalog=SyncSchema(streams=(make_stream("users", default_cursor=["updated_at"], source_pk=[["id"]]),)),
        capabilities=all_modes_destination,
        connection={"namespaceDefinition": "source", "namespaceFormat": ""},
        is_edit_mode=True,
    )

    initial = session.initial_values
    result = session.submit(initial.to_dict())

    assert initial.namespace_format == ""
    assert result.accepted is True
    assert result.configuration.namespace_format == ""
    assert result.payload["namespaceFormat"] == ""


def test_exclusion_warnings_reflect_latest_recompute(
    raw_catalog, dedup_only_destination, all_modes_destination
):
    session = ConnectionFormSession(
        session_id="s-5",
        workspace_id="ws-1",
        catalog=raw_catalog,
        capabilities=dedup_only_destination,
    )

    session.initial_values
    assert len(session.warnings["normalize"]) == 1

    session.update_inputs(capabilities=all_modes_destination)
    session.initial_values
    assert "normalize" not in session.warnings

    session.update_inputs(capabilities=dedup_only_destination)
    session.initial_values
    assert len(session.warnings["normalize"]) == 1
