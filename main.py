from pathlib import Path

from SWARM_PSO.CONFIG import *
from SWARM_PSO.Logs.logger import log_header, log_info, log_success
from SWARM_PSO.PSO.ObjectiveFunctions.Loader import get_benchmark_function
from SWARM_PSO.PSO.PSO import Swarm

module_name = Path(__file__).stem


if __name__ == "__main__":
    obj_func = get_benchmark_function("ShiftedSphere2D")  # Must be 2D for the surface plot
    obj_func.plot_3d_surface()

    swarm = Swarm(
        num_particles=NUM_PARTICLES,
        dimensions=obj_func.dimensions,
        lower_bounds=obj_func.lower_bounds,
        upper_bounds=obj_func.upper_bounds,
        omega=OMEGA,
        phi_p=PHI_P,
        phi_g=PHI_G,
        max_iterations=MAX_ITERATIONS,
        seed=BENCHMARK_SEED,
    )

    def report(iteration, current):
        if iteration % LOG_INTERVAL == 0:
            log_info(f"Iteration {iteration}: GBest = {current.gbest_value:.6e}", module_name)

    log_header(f"Optimizing {obj_func.name}", module_name)
    best_position, best_value = swarm.optimize(obj_func, callback=report)
    log_success(f"Best value {best_value:.6f} at {best_position} "
                f"(expected {obj_func.expected_minimum_value} at {obj_func.expected_minimum_position})",
                module_name)
