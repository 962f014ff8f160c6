from nurses.rules.base import Rule


class ContiguousShiftRule(Rule):
    """
    A nurse working one of CONTIGUOUS_SHIFTS on day d must also work it the
    day before or the day after. Days wrap around the cycle.

    Encoded per (n, s, d) as the clause
        shift[n, yesterday, s] OR NOT shift[n, d, s] OR shift[n, tomorrow, s]
    """

    order = 60
    name = "ContiguousShift"

    def add_hard(self):
        C, m, x = self.model.cfg, self.model.m, self.model.shift
        shifts = self.setting("shifts", C.CONTIGUOUS_SHIFTS)
        for n in C.all_nurses:
            for s in shifts:
                for d in C.all_days:
                    yesterday = (d - 1) % C.DAYS
                    tomorrow = (d + 1) % C.DAYS
                    ct = m.AddBoolOr(
                        [
                            x[(n, yesterday, s)],
                            x[(n, d, s)].Not(),
                            x[(n, tomorrow, s)],
                        ]
                    )
                    self._guard(ct, f"CONTIGUOUS[n={n},s={s},d={d}]")
                    self.model.count_constraint("bool_or")
