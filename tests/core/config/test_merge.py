# tests/core/config/test_merge.py
"""
Testes do deep-merge de configuração.

Os testes asseguram que:
- dicts são mesclados recursivamente
- listas são substituídas por inteiro
- `None` sobrescreve e é sobrescrito como escalar
- conflitos de tipo são erros explícitos
- nenhum input é mutado
"""

import copy

import pytest

from syncconf.core.config.errors import ConfigTypeConflictError
from syncconf.core.config.merge import deep_merge


def test_nested_dicts_are_merged():
    base = {"engine": {"default_normalization": "basic", "default_dbt_arguments": "run"}}
    override = {"engine": {"default_dbt_arguments": "test"}}

    assert deep_merge(base, override) == {
        "engine": {"default_normalization": "basic", "default_dbt_arguments": "test"}
    }


def test_lists_are_replaced():
    base = {"table": [["incremental", "append_dedup"], ["full_refresh", "overwrite"]]}
    override = {"table": [["full_refresh", "append"]]}

    assert deep_merge(base, override)["table"] == [["full_refresh", "append"]]


def test_none_overrides_and_is_overridden():
    assert deep_merge({"schedule": {"units": 24}}, {"schedule": None}) == {"schedule": None}
    assert deep_merge({"schedule": None}, {"schedule": {"units": 1}}) == {"schedule": {"units": 1}}


def test_new_keys_are_added():
    assert deep_merge({"a": 1}, {"b": 2}) == {"a": 1, "b": 2}


def test_type_conflict_raises():
    with pytest.raises(ConfigTypeConflictError):
        deep_merge({"engine": {"default_schedule": {"units": 24}}}, {"engine": {"default_schedule": "daily"}})


def test_non_dict_root_raises():
    with pytest.raises(ConfigTypeConflictError):
        deep_merge({"a": 1}, ["not", "a", "dict"])


def test_inputs_are_not_mutated():
    base = {"engine": {"x": {"y": [1, 2]}}}
    override = {"engine": {"x": {"z": 3}}}
    snapshot = (copy.deepcopy(base), copy.deepcopy(override))

    out = deep_merge(base, override)
    out["engine"]["x"]["y"].append(9)

    assert (base, override) == snapshot
