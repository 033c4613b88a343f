# --- Weighted Sum of Squares Function ---
import numpy as np

from SWARM_PSO.PSO.ObjectiveFunctions.ObjectiveFunction import BenchmarkFunction


def make_weighted_sum_squares(name, weights, shift, offset, bound=5.0) -> BenchmarkFunction:
    """f(x) = sum(weights * (x - shift)^2) + offset."""
    weights = np.array(weights, dtype=float)
    shift = np.array(shift, dtype=float)
    if weights.shape != shift.shape:
        raise ValueError(f"{name}: weights and shift must have the same shape")
    dim = shift.size

    def evaluate(x: np.ndarray) -> float:
        return np.sum(weights * (x - shift) ** 2) + offset

    return BenchmarkFunction(
        name=name,
        dimensions=dim,
        lower_bounds=np.full(dim, -bound),
        upper_bounds=np.full(dim, bound),
        expected_minimum_value=offset,
        expected_minimum_position=shift,
        objective=evaluate,
    )
