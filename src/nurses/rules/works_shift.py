from nurses.rules.base import Rule


class WorksShiftRule(Rule):
    """works_shift[n, s] is 1 iff nurse n works shift s on at least one day."""

    order = 40
    name = "WorksShift"

    def declare_vars(self):
        C, m = self.model.cfg, self.model.m
        self.model.works_shift = {
            (n, s): m.NewBoolVar(f"works_shift_n{n}s{s}")
            for n in C.all_nurses
            for s in C.all_shifts
        }

    def add_hard(self):
        C, m, x = self.model.cfg, self.model.m, self.model.shift
        for (n, s), works in self.model.works_shift.items():
            # max-equality cannot be enforced by a literal, so it is never guarded
            m.AddMaxEquality(works, [x[(n, d, s)] for d in C.all_days])
            self.model.count_constraint("max_equality")
