# --- Mixed Power Quadratic Function (2D) ---
import numpy as np

from SWARM_PSO.PSO.ObjectiveFunctions.ObjectiveFunction import BenchmarkFunction


def make_power_quadratic(name, shift_1, shift_2, offset, bound=5.0) -> BenchmarkFunction:
    """f(x) = (x1 - shift_1)^2 + (x2 - shift_2)^4 + offset."""

    def evaluate(x: np.ndarray) -> float:
        return (x[0] - shift_1) ** 2 + (x[1] - shift_2) ** 4 + offset

    return BenchmarkFunction(
        name=name,
        dimensions=2,
        lower_bounds=np.full(2, -bound),
        upper_bounds=np.full(2, bound),
        expected_minimum_value=offset,
        expected_minimum_position=np.array([shift_1, shift_2]),
        objective=evaluate,
    )
