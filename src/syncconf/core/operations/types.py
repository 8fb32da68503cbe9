# src/syncconf/core/operations/types.py
"""
Tipos canônicos de operações pós-carga.

Uma operação é uma união etiquetada por `OperatorType`:
    - NormalizationOperation → passo fixo fornecido pelo destino
    - TransformationOperation → transformação dbt definida pelo usuário

Toda operação carrega um `operation_id` opaco atribuído pela camada de
persistência. Uma operação ainda não persistida usa a sentinela `""`.

Invariantes:
    - Operações são imutáveis
    - A serialização segue o formato `OperationRead` da API
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Union

UNASSIGNED_OPERATION_ID = ""


class OperatorType(str, Enum):
    NORMALIZATION = "normalization"
    DBT = "dbt"


class NormalizationType(str, Enum):
    """Opções de normalização. `RAW` significa nenhuma normalização."""

    BASIC = "basic"
    RAW = "raw"


@dataclass(frozen=True)
class DbtConfig:
    git_repo_url: str = ""
    git_repo_branch: str = ""
    docker_image: str = ""
    dbt_arguments: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "gitRepoUrl": self.git_repo_url,
            "gitRepoBranch": self.git_repo_branch,
            "dockerImage": self.docker_image,
            "dbtArguments": self.dbt_arguments,
        }


@dataclass(frozen=True)
class NormalizationOperation:
    option: NormalizationType
    workspace_id: str = ""
    name: str = "Normalization"
    operation_id: str = UNASSIGNED_OPERATION_ID

    operator_type = OperatorType.NORMALIZATION

    def to_dict(self) -> Dict[str, Any]:
        return {
            "operationId": self.operation_id,
            "name": self.name,
            "workspaceId": self.workspace_id,
            "operatorConfiguration": {
                "operatorType": self.operator_type.value,
                "normalization": {"option": self.option.value},
            },
        }


@dataclass(frozen=True)
class TransformationOperation:
    name: str
    workspace_id: str
    config: DbtConfig = field(default_factory=DbtConfig)
    operation_id: str = UNASSIGNED_OPERATION_ID

    operator_type = OperatorType.DBT

    def to_dict(self) -> Dict[str, Any]:
        return {
            "operationId": self.operation_id,
            "name": self.name,
            "workspaceId": self.workspace_id,
            "operatorConfiguration": {
                "operatorType": self.operator_type.value,
                "dbt": self.config.to_dict(),
            },
        }


Operation = Union[NormalizationOperation, TransformationOperation]


def is_normalization(op: Operation) -> bool:
    return isinstance(op, NormalizationOperation)


def is_transformation(op: Operation) -> bool:
    return isinstance(op, TransformationOperation)
