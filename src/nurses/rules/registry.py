from __future__ import annotations

from typing import Sequence, Tuple, Type

from nurses.rules.base import BuildCtxProto, Rule, RuleSpec
from nurses.rules.contiguous_shift import ContiguousShiftRule
from nurses.rules.coverage import CoverageRule
from nurses.rules.decision_variables import VariablesRule
from nurses.rules.off_days import OffDaysRule
from nurses.rules.one_shift_per_day import OneShiftPerDayRule
from nurses.rules.shift_balance import ShiftBalanceRule
from nurses.rules.works_shift import WorksShiftRule

RuleTemplate = Tuple[Type[Rule], int, dict[str, object]]

VARIABLES_RULE_TEMPLATE: RuleTemplate = (VariablesRule, 0, {})
COVERAGE_RULE_TEMPLATE: RuleTemplate = (CoverageRule, 10, {})
ONE_SHIFT_PER_DAY_RULE_TEMPLATE: RuleTemplate = (OneShiftPerDayRule, 20, {})
OFF_DAYS_RULE_TEMPLATE: RuleTemplate = (OffDaysRule, 30, {})
WORKS_SHIFT_RULE_TEMPLATE: RuleTemplate = (WorksShiftRule, 40, {})
SHIFT_BALANCE_RULE_TEMPLATE: RuleTemplate = (ShiftBalanceRule, 50, {})
CONTIGUOUS_SHIFT_RULE_TEMPLATE: RuleTemplate = (ContiguousShiftRule, 60, {})

_DEFAULT_RULE_TEMPLATES: list[RuleTemplate] = [
    VARIABLES_RULE_TEMPLATE,
    COVERAGE_RULE_TEMPLATE,
    ONE_SHIFT_PER_DAY_RULE_TEMPLATE,
    OFF_DAYS_RULE_TEMPLATE,
    WORKS_SHIFT_RULE_TEMPLATE,
    SHIFT_BALANCE_RULE_TEMPLATE,
    CONTIGUOUS_SHIFT_RULE_TEMPLATE,
]


def default_rule_specs() -> list[RuleSpec]:
    """Return fresh copies of the default rule specifications."""
    specs: list[RuleSpec] = []
    for cls, order, settings in _DEFAULT_RULE_TEMPLATES:
        specs.append(RuleSpec(cls=cls, order=order, settings=dict(settings)))
    return specs


def normalize_rule_specs(
    rules: Sequence[RuleSpec | Type[Rule]] | None,
) -> list[RuleSpec]:
    """Turn user-provided rules into RuleSpec objects."""
    if rules is None:
        return default_rule_specs()

    normalized: list[RuleSpec] = []
    for item in rules:
        if isinstance(item, RuleSpec):
            normalized.append(item)
        elif isinstance(item, type) and issubclass(item, Rule):
            normalized.append(RuleSpec(cls=item))
        else:
            raise TypeError(
                "Rules must be RuleSpec instances or Rule subclasses; "
                f"got {type(item)!r}"
            )
    return normalized


class RuleRegistry:
    """Turns rule specs into ordered, instantiated rules bound to a build context."""

    def build_sequence(
        self,
        ctx: BuildCtxProto,
        rules: Sequence[RuleSpec | Type[Rule]] | None = None,
    ) -> list[Rule]:
        specs = normalize_rule_specs(rules)
        ordered = sorted(
            (spec for spec in specs if spec.enabled),
            key=lambda spec: spec.order if spec.order is not None else spec.cls.order,
        )
        instances: list[Rule] = []
        for spec in ordered:
            rule = spec.cls(ctx, **spec.settings)
            if rule.enabled:
                instances.append(rule)
        return instances


RULE_REGISTRY = RuleRegistry()
