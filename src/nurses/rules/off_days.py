from nurses.config import OFF_SHIFT
from nurses.rules.base import Rule


class OffDaysRule(Rule):
    """
    Bound the number of off days per nurse over the cycle.

    Config used:
      MIN_OFF_DAYS, MAX_OFF_DAYS (closed range; 1..2 means 5 or 6 working
      days in a 7-day week)
    """

    order = 30
    name = "OffDays"

    def add_hard(self):
        C, m, x = self.model.cfg, self.model.m, self.model.shift
        lo, hi = int(C.MIN_OFF_DAYS), int(C.MAX_OFF_DAYS)
        for n in C.all_nurses:
            off = sum(x[(n, d, OFF_SHIFT)] for d in C.all_days)
            ct = m.AddLinearConstraint(off, lo, hi)
            self._guard(ct, f"OFF-DAYS[n={n}]")
            self.model.count_constraint("linear")
