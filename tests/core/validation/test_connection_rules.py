from __future__ import annotations

import copy

from syncconf.core.catalog.types import SyncMode, SyncSchema
from syncconf.core.connection.types import ConnectionConfiguration, NamespaceDefinitionType
from syncconf.core.validation import (
    INVALID_TYPE,
    INVALID_VALUE,
    MISSING_NAMESPACE_DEFINITION,
    MISSING_NAMESPACE_FORMAT,
    MISSING_SCHEDULE,
    UNKNOWN_FIELD,
    validate_configuration,
    validate_connection,
)


def test_schedule_must_be_present(valid_values) -> None:
    values = copy.deepcopy(valid_values)
    del values["schedule"]
    violations = validate_connection(values)
    assert [(v.kind, v.field_path) for v in violations] == [(MISSING_SCHEDULE, "schedule")]
    assert violations[0].message_key == "form.empty.error"


def test_null_schedule_is_manual_and_accepted(valid_values) -> None:
    values = copy.deepcopy(valid_values)
    values["schedule"] = None
    assert validate_connection(values) == []


def test_schedule_requires_units_and_time_unit(valid_values) -> None:
    values = copy.deepcopy(valid_values)
    values["schedule"] = {"units": None, "timeUnit": ""}
    paths = [(v.kind, v.field_path) for v in validate_connection(values)]
    assert paths == [(MISSING_SCHEDULE, "schedule.units"), (MISSING_SCHEDULE, "schedule.timeUnit")]


def test_schedule_rejects_unknown_time_unit(valid_values) -> None:
    values = copy.deepcopy(valid_values)
    values["schedule"] = {"units": 3, "timeUnit": "fortnights"}
    assert [v.kind for v in validate_connection(values)] == [INVALID_VALUE]


def test_namespace_format_required_only_for_custom_format(valid_values) -> None:
    values = copy.deepcopy(valid_values)
    values["namespaceFormat"] = ""
    assert validate_connection(values) == []

    values["namespaceDefinition"] = "customformat"
    violations = validate_connection(values)
    assert [(v.kind, v.field_path) for v in violations] == [(MISSING_NAMESPACE_FORMAT, "namespaceFormat")]

    values["namespaceFormat"] = "${SOURCE_NAMESPACE}_raw"
    assert validate_connection(values) == []


def test_namespace_definition_required_and_enumerated(valid_values) -> None:
    values = copy.deepcopy(valid_values)
    del values["namespaceDefinition"]
    assert [v.kind for v in validate_connection(values)] == [MISSING_NAMESPACE_DEFINITION]

    values["namespaceDefinition"] = "elsewhere"
    assert [v.kind for v in validate_connection(values)] == [INVALID_VALUE]


def test_unknown_top_level_fields_rejected_with_generic_path(valid_values) -> None:
    values = copy.deepcopy(valid_values)
    values["operations"] = []
    values["extra"] = 1
    violations = validate_connection(values)
    assert len(violations) == 1
    assert violations[0].kind == UNKNOWN_FIELD
    assert violations[0].field_path == "connection"
    assert violations[0].details == {"unknown": ["extra", "operations"]}


def test_wrong_primitive_types(valid_values) -> None:
    values = copy.deepcopy(valid_values)
    values["prefix"] = 5
    values["syncCatalog"]["streams"][0]["config"]["selected"] = "yes"
    violations = validate_connection(values)
    assert {v.kind for v in violations} == {INVALID_TYPE}
    assert [v.field_path for v in violations] == ["prefix", "schema.streams[0].config.selected"]


def test_non_mapping_submission_is_rejected() -> None:
    violations = validate_connection(["not", "a", "mapping"])
    assert [(v.kind, v.field_path) for v in violations] == [(INVALID_TYPE, "connection")]


def test_validate_configuration_model(make_stream, all_modes_destination) -> None:
    from syncconf.core.resolver import normalize

    stream = make_stream("users", modes=(SyncMode.INCREMENTAL,))
    catalog = normalize(SyncSchema(streams=(stream,)), all_modes_destination)
    config = ConnectionConfiguration(
        sync_catalog=catalog,
        schedule=None,
        namespace_definition=NamespaceDefinitionType.SOURCE,
    )

    kinds = [v.kind for v in validate_configuration(config)]

    assert kinds == ["MissingPrimaryKey", "MissingCursorField"]


def test_validation_is_deterministic(valid_values) -> None:
    values = copy.deepcopy(valid_values)
    values["schedule"] = {"units": None, "timeUnit": None}
    values["extra"] = True
    assert validate_connection(values) == validate_connection(values)
