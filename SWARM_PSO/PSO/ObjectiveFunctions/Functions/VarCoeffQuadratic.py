# --- Quadratic with per-term coefficients (3D) ---
import numpy as np

from SWARM_PSO.PSO.ObjectiveFunctions.ObjectiveFunction import BenchmarkFunction


def make_var_coeff_quadratic(name, centre, coefficients, offset, bound=5.0) -> BenchmarkFunction:
    """f(x) = sum(coefficients * (x - centre)^2) + offset, written term by term."""
    centre = np.array(centre, dtype=float)
    coefficients = np.array(coefficients, dtype=float)
    dim = centre.size

    def evaluate(x: np.ndarray) -> float:
        total = offset
        for i in range(dim):
            total += coefficients[i] * (x[i] - centre[i]) ** 2
        return total

    return BenchmarkFunction(
        name=name,
        dimensions=dim,
        lower_bounds=np.full(dim, -bound),
        upper_bounds=np.full(dim, bound),
        expected_minimum_value=offset,
        expected_minimum_position=centre,
        objective=evaluate,
    )
