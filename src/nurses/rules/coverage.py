from nurses.rules.base import Rule


class CoverageRule(Rule):
    """
    Each (day, shift) slot is covered by one nurse.

    With COVERAGE_MODE="exact" every slot gets exactly one nurse, which is
    only satisfiable when N_NURSES == N_SHIFTS (every nurse takes exactly one
    slot per day, the off shift included). COVERAGE_MODE="at_most" caps each
    slot at one nurse instead.
    """

    order = 10
    name = "Coverage"

    def add_hard(self):
        C, m, x = self.model.cfg, self.model.m, self.model.shift
        exact = C.COVERAGE_MODE == "exact"
        for d in C.all_days:
            for s in C.all_shifts:
                total = sum(x[(n, d, s)] for n in C.all_nurses)
                ct = m.Add(total == 1) if exact else m.Add(total <= 1)
                self._guard(ct, f"COVER[d={d},s={s}]")
                self.model.count_constraint("linear")
