"""
Schema canônico — operações persistidas (`OperationRead`).

Materializa operações recebidas da camada de persistência nos tipos do
engine. Operações já materializadas são aceitas sem conversão.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Optional

from .errors import OperationValidationError
from .types import (
    DbtConfig,
    NormalizationOperation,
    NormalizationType,
    Operation,
    OperatorType,
    TransformationOperation,
    UNASSIGNED_OPERATION_ID,
)


_ALLOWED_OPERATOR_TYPES = {t.value for t in OperatorType}
_ALLOWED_NORMALIZATION_TYPES = {t.value for t in NormalizationType}


def _expect(cond: bool, msg: str) -> None:
    if not cond:
        raise OperationValidationError(msg)


def _str(data: dict, key: str, where: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    _expect(isinstance(value, str), f"{where}.{key} must be a string")
    return value


def parse_normalization_type(value: Any, where: str = "normalization") -> Optional[NormalizationType]:
    if value is None:
        return None
    if isinstance(value, NormalizationType):
        return value
    _expect(
        value in _ALLOWED_NORMALIZATION_TYPES,
        f"{where} must be one of {sorted(_ALLOWED_NORMALIZATION_TYPES)}",
    )
    return NormalizationType(value)


def parse_operation(data: Any, where: str = "operation") -> Operation:
    """Valida e materializa uma operação (`OperationRead`)."""
    if isinstance(data, (NormalizationOperation, TransformationOperation)):
        return data

    _expect(isinstance(data, dict), f"{where} must be a mapping")
    operation_id = _str(data, "operationId", where) or UNASSIGNED_OPERATION_ID
    name = _str(data, "name", where)
    workspace_id = _str(data, "workspaceId", where)

    operator = data.get("operatorConfiguration")
    _expect(isinstance(operator, dict), f"{where}.operatorConfiguration must be a mapping")
    operator_type = operator.get("operatorType")
    _expect(
        operator_type in _ALLOWED_OPERATOR_TYPES,
        f"{where}.operatorConfiguration.operatorType must be one of {sorted(_ALLOWED_OPERATOR_TYPES)}",
    )

    if operator_type == OperatorType.NORMALIZATION.value:
        normalization = operator.get("normalization")
        _expect(
            isinstance(normalization, dict),
            f"{where}.operatorConfiguration.normalization must be a mapping",
        )
        option = parse_normalization_type(
            normalization.get("option"), f"{where}.operatorConfiguration.normalization.option"
        )
        _expect(option is not None, f"{where}.operatorConfiguration.normalization.option is required")
        return NormalizationOperation(
            option=option,
            workspace_id=workspace_id,
            name=name or "Normalization",
            operation_id=operation_id,
        )

    dbt = operator.get("dbt") or {}
    _expect(isinstance(dbt, dict), f"{where}.operatorConfiguration.dbt must be a mapping")
    dbt_where = f"{where}.operatorConfiguration.dbt"
    return TransformationOperation(
        name=name,
        workspace_id=workspace_id,
        config=DbtConfig(
            git_repo_url=_str(dbt, "gitRepoUrl", dbt_where),
            git_repo_branch=_str(dbt, "gitRepoBranch", dbt_where),
            docker_image=_str(dbt, "dockerImage", dbt_where),
            dbt_arguments=_str(dbt, "dbtArguments", dbt_where),
        ),
        operation_id=operation_id,
    )


def parse_operations(items: Optional[Iterable[Any]], where: str = "operations") -> List[Operation]:
    if items is None:
        return []
    return [parse_operation(op, f"{where}[{i}]") for i, op in enumerate(items)]
