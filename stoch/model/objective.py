from stoch.model.cost import CostFn


MINIMIZE = "minimize"
MAXIMIZE = "maximize"


class Objective():
    """
    Wraps a `CostFn` together with the direction in which it should be optimized. The tour search minimizes its cost
    while the polynomial search maximizes its value, so the engine never compares raw values itself. It asks the
    `Objective` for the improvement of a move and whether one value beats another.
    """

    def __init__(self,
                cost: CostFn,          # cost (or value) function evaluated on a `Solution`
                direction: str=MINIMIZE
        ):
        """
        Arguments:
        ==========
        `cost` [CostFn]: instance whose `eval()` method maps a `Solution` to a scalar
        `direction` [str]: either `minimize` or `maximize`
        """

        assert direction in [MINIMIZE, MAXIMIZE], "`direction` takes values `minimize` or `maximize`!"

        self.cost = cost
        self.direction = direction

    @property
    def minimize(self) -> bool:
        return self.direction == MINIMIZE

    def eval(self, state) -> float:
        return self.cost.eval(state)

    def improvement(self, current_value: float, new_value: float) -> float:
        """Signed change of a move where positive means better (current - new if minimizing, new - current otherwise)"""
        if self.minimize:
            return current_value - new_value
        return new_value - current_value

    def is_better(self, value: float, reference: float) -> bool:
        """Strict comparison in the direction of optimization"""
        return self.improvement(reference, value) > 0

    def worst(self) -> float:
        return float("inf") if self.minimize else float("-inf")
