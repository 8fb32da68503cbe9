# tests/core/operations/test_merge_operations.py
"""
Testes do merge de operações pós-carga.

Os testes asseguram que:
- a normalização, quando emitida, ocupa sempre o índice 0
- a identidade da normalização persistida é reutilizada
- `raw` e ausência de normalização não emitem operação
- transformações preservam ordem e identidade, para qualquer tamanho
"""

import pytest

from syncconf.core.operations import (
    DbtConfig,
    NormalizationOperation,
    NormalizationType,
    TransformationOperation,
    merge_operations,
    parse_operations,
)


def _transformations(n):
    return [
        TransformationOperation(
            name=f"t{i}",
            workspace_id="ws-1",
            config=DbtConfig(docker_image="fishtownanalytics/dbt:0.19.1", dbt_arguments="run"),
            operation_id=f"op-{i}",
        )
        for i in range(n)
    ]


@pytest.mark.parametrize("n", range(0, 11))
def test_normalization_first_then_transformations_in_order(n):
    transformations = _transformations(n)

    ops = merge_operations(transformations, NormalizationType.BASIC, [], "ws-1")

    assert len(ops) == n + 1
    assert isinstance(ops[0], NormalizationOperation)
    assert ops[0].option == NormalizationType.BASIC
    assert ops[1:] == transformations


@pytest.mark.parametrize("normalization", [None, NormalizationType.RAW])
def test_raw_or_absent_normalization_emits_only_transformations(normalization, persisted_operations):
    transformations = _transformations(2)

    ops = merge_operations(transformations, normalization, parse_operations(persisted_operations), "ws-1")

    assert ops == transformations
    assert not any(isinstance(op, NormalizationOperation) for op in ops)


def test_persisted_normalization_identity_is_reused(persisted_operations):
    previous = parse_operations(persisted_operations)

    ops = merge_operations([], NormalizationType.BASIC, previous, "ws-other")

    assert ops[0].operation_id == "op-norm"
    assert ops[0].workspace_id == "ws-1"
    assert ops[0].name == "Normalization"


def test_new_normalization_has_unassigned_id_and_given_workspace():
    ops = merge_operations(None, NormalizationType.BASIC, None, "ws-9")

    assert ops == [NormalizationOperation(option=NormalizationType.BASIC, workspace_id="ws-9", operation_id="")]


def test_inputs_are_not_mutated(persisted_operations):
    previous = parse_operations(persisted_operations)
    transformations = _transformations(3)
    snapshot = (list(previous), list(transformations))

    merge_operations(transformations, NormalizationType.BASIC, previous, "ws-1")

    assert (previous, transformations) == snapshot


def test_serialized_operations_keep_order(persisted_operations):
    previous = parse_operations(persisted_operations)
    transformations = [op for op in previous if isinstance(op, TransformationOperation)]

    docs = [op.to_dict() for op in merge_operations(transformations, NormalizationType.BASIC, previous, "ws-1")]

    assert [d["operationId"] for d in docs] == ["op-norm", "op-dbt-1", "op-dbt-2"]
    assert docs[0]["operatorConfiguration"] == {
        "operatorType": "normalization",
        "normalization": {"option": "basic"},
    }
