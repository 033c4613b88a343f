# Benchmark catalog used to validate the swarm.
from typing import Dict, List

from SWARM_PSO.PSO.ObjectiveFunctions.ObjectiveFunction import BenchmarkFunction
from SWARM_PSO.PSO.ObjectiveFunctions.Functions.ShiftedSphere import make_shifted_sphere
from SWARM_PSO.PSO.ObjectiveFunctions.Functions.WeightedSumSquares import make_weighted_sum_squares
from SWARM_PSO.PSO.ObjectiveFunctions.Functions.PowerQuadratic import make_power_quadratic
from SWARM_PSO.PSO.ObjectiveFunctions.Functions.VarCoeffQuadratic import make_var_coeff_quadratic

benchmark_functions: List[BenchmarkFunction] = [
    make_shifted_sphere("ShiftedSphere2D", shift=[1.0, 2.0], offset=0.1),
    make_shifted_sphere("ShiftedSphere3D", shift=[-1.0, 0.5, 3.0], offset=10.0),
    make_weighted_sum_squares("WeightedSumSquares2D", weights=[0.5, 2.0], shift=[2.0, -1.0], offset=2.5),
    make_weighted_sum_squares("WeightedSumSquares4D", weights=[0.1, 0.2, 0.3, 0.4],
                              shift=[0.5, 1.5, -0.5, -1.5], offset=1.0),
    make_power_quadratic("PowerQuadratic2D", shift_1=1.0, shift_2=-1.0, offset=0.2),
    make_shifted_sphere("ShiftedSphere5D", shift=[0.1, 0.2, 0.3, 0.4, 0.5], offset=5.0),
    make_var_coeff_quadratic("VarCoeffQuadratic3D", centre=[3.0, -2.0, 1.0],
                             coefficients=[1.0, 2.0, 0.5], offset=15.0),
    make_shifted_sphere("HighOffsetQuadratic4D", shift=[-2.0, -2.0, -2.0, -2.0], offset=100.0, bound=10.0),
    make_shifted_sphere("SimpleShiftedQuad2D", shift=[3.0, 1.0], offset=7.0),
    make_shifted_sphere("ShiftedSphere6D", shift=[1.5, -0.5, 2.5, -1.5, 0.5, 3.5], offset=25.0, bound=10.0),
]

_by_name: Dict[str, BenchmarkFunction] = {f.name: f for f in benchmark_functions}


def get_benchmark_function(name: str) -> BenchmarkFunction:
    """Looks up a catalog entry by name. Raises KeyError for unknown names."""
    try:
        return _by_name[name]
    except KeyError:
        raise KeyError(f"Unknown benchmark function '{name}'. "
                       f"Available: {', '.join(_by_name)}") from None


def list_benchmark_functions() -> List[str]:
    return [f.name for f in benchmark_functions]
