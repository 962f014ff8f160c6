from nurses.rules.base import Rule


class VariablesRule(Rule):
    """Define decision variables"""

    order = 0
    name = "Variables"

    def declare_vars(self):
        C = self.model.cfg
        m = self.model.m
        # shift[n, d, s]: nurse n works shift s on day d
        self.model.shift = {
            (n, d, s): m.NewBoolVar(f"shift_n{n}d{d}s{s}")
            for n in C.all_nurses
            for d in C.all_days
            for s in C.all_shifts
        }
