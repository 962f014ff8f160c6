from nurses.rules.base import Rule


class ShiftBalanceRule(Rule):
    """
    At most MAX_NURSES_PER_SHIFT distinct nurses ever work each working shift.

    Requires WorksShiftRule to have declared works_shift.
    """

    order = 50
    name = "ShiftBalance"

    def add_hard(self):
        C, m = self.model.cfg, self.model.m
        cap = int(self.setting("max_nurses", C.MAX_NURSES_PER_SHIFT))
        works = self.model.works_shift
        if not works:
            raise RuntimeError(
                "ShiftBalanceRule needs works_shift; register WorksShiftRule first."
            )
        for s in C.working_shifts:
            ct = m.Add(sum(works[(n, s)] for n in C.all_nurses) <= cap)
            self._guard(ct, f"SHIFT-BALANCE[s={s}]")
            self.model.count_constraint("linear")
