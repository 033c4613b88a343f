# --- Shifted Sphere Function ---
import numpy as np

from SWARM_PSO.PSO.ObjectiveFunctions.ObjectiveFunction import BenchmarkFunction


def make_shifted_sphere(name, shift, offset, bound=5.0) -> BenchmarkFunction:
    """f(x) = sum((x - shift)^2) + offset, minimum `offset` at x = shift."""
    shift = np.array(shift, dtype=float)
    dim = shift.size

    def evaluate(x: np.ndarray) -> float:
        return np.sum((x - shift) ** 2) + offset

    return BenchmarkFunction(
        name=name,
        dimensions=dim,
        lower_bounds=np.full(dim, -bound),
        upper_bounds=np.full(dim, bound),
        expected_minimum_value=offset,
        expected_minimum_position=shift,
        objective=evaluate,
    )
