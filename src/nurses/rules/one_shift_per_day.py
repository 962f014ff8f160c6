from nurses.rules.base import Rule


class OneShiftPerDayRule(Rule):
    """Every nurse takes exactly one shift per day (the off shift counts)."""

    order = 20
    name = "OneShiftPerDay"

    def add_hard(self):
        C, m, x = self.model.cfg, self.model.m, self.model.shift
        for n in C.all_nurses:
            for d in C.all_days:
                ct = m.Add(sum(x[(n, d, s)] for s in C.all_shifts) == 1)
                self._guard(ct, f"ONE-SHIFT[n={n},d={d}]")
                self.model.count_constraint("linear")
