from __future__ import annotations

from types import SimpleNamespace

import pytest

from nurses.rules.base import RuleSpec
from nurses.rules.contiguous_shift import ContiguousShiftRule
from nurses.rules.coverage import CoverageRule
from nurses.rules.decision_variables import VariablesRule
from nurses.rules.registry import (
    RULE_REGISTRY,
    default_rule_specs,
    normalize_rule_specs,
)


def test_normalize_rule_specs_accepts_classes():
    specs = normalize_rule_specs([CoverageRule])
    assert len(specs) == 1
    assert specs[0].cls is CoverageRule


def test_normalize_rule_specs_rejects_other_objects():
    with pytest.raises(TypeError):
        normalize_rule_specs([object()])


def test_default_rule_specs_returns_fresh_instances():
    first = default_rule_specs()
    second = default_rule_specs()
    assert first[0].cls is second[0].cls
    first[0].settings["demo"] = "x"
    assert "demo" not in second[0].settings


def test_build_sequence_orders_by_spec_then_class_order():
    ctx = SimpleNamespace()
    rules = RULE_REGISTRY.build_sequence(
        ctx,
        [
            RuleSpec(cls=ContiguousShiftRule, settings={"shifts": (1,)}),
            RuleSpec(cls=CoverageRule, order=5),
            VariablesRule,
        ],
    )
    assert [type(r) for r in rules] == [VariablesRule, CoverageRule, ContiguousShiftRule]
    assert rules[-1].setting("shifts", None) == (1,)
    assert all(r.model is ctx for r in rules)
