# benchmark.py - Runs the swarm over the benchmark catalog and checks each result
# against the known minimum. Usable as a library (run_benchmark) or from the
# command line (python -m SWARM_PSO.Benchmark.benchmark, or the swarm-pso script).

import argparse
import time
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path  # To get module name
from typing import List, Optional, Sequence

import numpy as np
import matplotlib.pyplot as plt

from SWARM_PSO.CONFIG import *
from SWARM_PSO.Logs.logger import log_error, log_header, log_info, log_success, log_warning, set_color, set_debug
from SWARM_PSO.PSO.ObjectiveFunctions.Loader import (
    benchmark_functions,
    get_benchmark_function,
    list_benchmark_functions,
)
from SWARM_PSO.PSO.ObjectiveFunctions.ObjectiveFunction import BenchmarkFunction
from SWARM_PSO.PSO.PSO import Swarm

module_name = Path(__file__).stem  # Gets 'benchmark'


def generate_timestamped_filename(base_name: str, extension: str = "png") -> str:
    """Returns "YYYYMMDD_HHMMSS_base_name.extension"."""
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    return f"{timestamp}_{base_name}.{extension}"


@dataclass
class BenchmarkResult:
    name: str
    best_position: np.ndarray
    best_value: float
    expected_value: float
    expected_position: np.ndarray
    tolerance: float
    elapsed: float
    gbest_history: List[float] = field(default_factory=list)

    @property
    def value_error(self) -> float:
        return abs(self.best_value - self.expected_value)

    @property
    def position_error(self) -> float:
        """Largest per-coordinate distance to the expected minimiser."""
        return float(np.max(np.abs(self.best_position - self.expected_position)))

    @property
    def passed(self) -> bool:
        return self.value_error <= self.tolerance and self.position_error <= self.tolerance


def run_function(function: BenchmarkFunction,
                 num_particles: int = NUM_PARTICLES,
                 omega: float = OMEGA,
                 phi_p: float = PHI_P,
                 phi_g: float = PHI_G,
                 max_iterations: int = MAX_ITERATIONS,
                 seed: Optional[int] = BENCHMARK_SEED,
                 tolerance: float = BENCHMARK_TOLERANCE) -> BenchmarkResult:
    """Optimizes a single catalog entry with a fresh swarm."""
    swarm = Swarm(
        num_particles=num_particles,
        dimensions=function.dimensions,
        lower_bounds=function.lower_bounds,
        upper_bounds=function.upper_bounds,
        omega=omega,
        phi_p=phi_p,
        phi_g=phi_g,
        max_iterations=max_iterations,
        seed=seed,
    )
    start_time = time.time()
    best_position, best_value = swarm.optimize(function)
    elapsed = time.time() - start_time

    return BenchmarkResult(
        name=function.name,
        best_position=best_position,
        best_value=best_value,
        expected_value=function.expected_minimum_value,
        expected_position=np.array(function.expected_minimum_position),
        tolerance=tolerance,
        elapsed=elapsed,
        gbest_history=list(swarm.gbest_history),
    )


def run_benchmark(functions: Optional[Sequence[BenchmarkFunction]] = None,
                  num_particles: int = NUM_PARTICLES,
                  omega: float = OMEGA,
                  phi_p: float = PHI_P,
                  phi_g: float = PHI_G,
                  max_iterations: int = MAX_ITERATIONS,
                  seed: Optional[int] = BENCHMARK_SEED,
                  tolerance: float = BENCHMARK_TOLERANCE) -> List[BenchmarkResult]:
    """
    Runs the swarm on each function (the whole catalog by default).

    Every function gets its own swarm seeded with `seed`, so results do not
    depend on which other functions are in the run.

    Returns:
        List[BenchmarkResult]: One result per function, in input order.
    """
    if functions is None:
        functions = benchmark_functions

    log_header("Starting PSO Benchmark", module_name)
    log_info(f"  Particles: {num_particles}, Iterations: {max_iterations}, "
             f"omega: {omega}, phi_p: {phi_p}, phi_g: {phi_g}, seed: {seed}", module_name)

    results = []
    for function in functions:
        log_header(f"--- {function.name} (dim={function.dimensions}) ---", module_name)
        result = run_function(function, num_particles=num_particles, omega=omega, phi_p=phi_p,
                              phi_g=phi_g, max_iterations=max_iterations, seed=seed, tolerance=tolerance)
        message = (f"{result.name}: best={result.best_value:.6f} (expected {result.expected_value:.6f}), "
                   f"value error={result.value_error:.2e}, position error={result.position_error:.2e}, "
                   f"{result.elapsed:.2f}s")
        if result.passed:
            log_success(message, module_name)
        else:
            log_warning(message, module_name)
        results.append(result)

    num_passed = sum(r.passed for r in results)
    log_info(f"{num_passed}/{len(results)} functions within tolerance {tolerance}.", module_name)
    return results


def plot_gbest_convergence(results: Sequence[BenchmarkResult], save_dir: str = CHECKPOINT_BASE_DIR,
                           show_plots: bool = False) -> List[Path]:
    """
    Plots (gbest - expected minimum) per iteration on a log scale, one file per function.

    Returns:
        List[Path]: Paths of the saved figures.
    """
    checkpoint_dir = Path(save_dir) / "gbest_convergence"
    checkpoint_dir.mkdir(parents=True, exist_ok=True)

    saved = []
    for result in results:
        if not result.gbest_history:
            log_warning(f"No gbest history for {result.name}, skipping plot.", module_name)
            continue
        gap = np.asarray(result.gbest_history, dtype=float) - result.expected_value
        gap = np.maximum(gap, 1e-16)

        fig, ax = plt.subplots(figsize=(10, 5))
        ax.semilogy(np.arange(len(gap)), gap, 'b-', linewidth=2)
        ax.set_xlabel('Iteration')
        ax.set_ylabel('GBest - Expected Minimum')
        ax.set_title(f'GBest Convergence: {result.name}')
        ax.grid(True, alpha=0.3)
        plt.tight_layout()

        plot_path = checkpoint_dir / generate_timestamped_filename(f"gbest_convergence_{result.name}")
        plt.savefig(plot_path, dpi=150, bbox_inches='tight')
        log_success(f"Convergence plot saved to {plot_path}", module_name)
        saved.append(plot_path)

        if show_plots:
            plt.show()
        plt.close(fig)

    return saved


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Run the PSO swarm over the benchmark catalog')
    parser.add_argument('--particles', type=int, default=NUM_PARTICLES,
                        help=f'Number of particles (default: {NUM_PARTICLES})')
    parser.add_argument('--iterations', type=int, default=MAX_ITERATIONS,
                        help=f'Iterations per run (default: {MAX_ITERATIONS})')
    parser.add_argument('--omega', type=float, default=OMEGA,
                        help=f'Inertia weight (default: {OMEGA})')
    parser.add_argument('--phi-p', type=float, default=PHI_P,
                        help=f'Cognitive coefficient (default: {PHI_P})')
    parser.add_argument('--phi-g', type=float, default=PHI_G,
                        help=f'Social coefficient (default: {PHI_G})')
    parser.add_argument('--seed', type=int, default=BENCHMARK_SEED,
                        help=f'Random seed (default: {BENCHMARK_SEED})')
    parser.add_argument('--no-seed', action='store_true',
                        help='Draw a fresh seed for every run (overrides --seed)')
    parser.add_argument('--tolerance', type=float, default=BENCHMARK_TOLERANCE,
                        help=f'Allowed error on value and coordinates (default: {BENCHMARK_TOLERANCE})')
    parser.add_argument('--functions', nargs='+', default=None, metavar='NAME',
                        help='Catalog entries to run (default: all)')
    parser.add_argument('--list-functions', action='store_true',
                        help='List the benchmark catalog and exit')
    parser.add_argument('--plot', action='store_true',
                        help='Save gbest convergence plots')
    parser.add_argument('--checkpoint-dir', type=str, default=CHECKPOINT_BASE_DIR,
                        help=f'Directory for plots (default: {CHECKPOINT_BASE_DIR})')
    parser.add_argument('--debug', action='store_true',
                        help='Enable debug logging')
    parser.add_argument('--no-color', action='store_true',
                        help='Disable ANSI colours in log output')
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.debug:
        set_debug(True)
    if args.no_color:
        set_color(False)

    seed = None if args.no_seed else args.seed

    if args.list_functions:
        for name in list_benchmark_functions():
            log_info(name, module_name)
        return 0

    try:
        functions = None
        if args.functions:
            functions = [get_benchmark_function(name) for name in args.functions]
        results = run_benchmark(functions, num_particles=args.particles, omega=args.omega,
                                phi_p=args.phi_p, phi_g=args.phi_g, max_iterations=args.iterations,
                                seed=seed, tolerance=args.tolerance)
    except (KeyError, ValueError) as e:
        log_error(f"Benchmark aborted: {e}", module_name)
        return 2

    if args.plot:
        plot_gbest_convergence(results, args.checkpoint_dir)

    return 0 if all(r.passed for r in results) else 1


if __name__ == "__main__":
    raise SystemExit(main())
