# File: SWARM_PSO/PSO/PSO.py
# Sequential (asynchronous) global-best PSO over a box-bounded domain.
# Particles are processed one at a time in a fixed order, so a global best found
# by an early particle is already visible to the particles after it in the same pass.

import math
import time
import numpy as np
from pathlib import Path  # To get module name
from typing import Callable, List, Optional, Tuple

from SWARM_PSO.CONFIG import LOG_INTERVAL, REJECT_NON_FINITE_OBJECTIVE
from SWARM_PSO.Logs.logger import log_debug, log_info, log_success, log_warning
from SWARM_PSO.PSO.Bounds import BoundsSpec
from SWARM_PSO.PSO.Errors import InvalidBounds, InvalidConfiguration, InvalidObjectiveValue
from SWARM_PSO.PSO.Particle import Particle
from SWARM_PSO.PSO.Scratch import ScratchArena

# --- Module Name for Logging ---
module_name = Path(__file__).stem  # Gets 'PSO'

ObjectiveCallable = Callable[[np.ndarray], float]


def _is_int(value) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)


def _require_int(value, name: str, minimum: int):
    if not _is_int(value):
        raise InvalidConfiguration(f"{name} must be an integer, got {value!r}")
    if value < minimum:
        raise InvalidConfiguration(f"{name} must be >= {minimum}, got {value}")


def _frozen(vector: np.ndarray) -> np.ndarray:
    copy = np.array(vector, dtype=float, copy=True)
    copy.flags.writeable = False
    return copy


class Swarm:
    """
    Particle Swarm Optimizer with a fixed iteration budget.

    Attributes:
        num_particles (int): Number of particles N.
        dim (int): Dimension of the search space D.
        bounds (BoundsSpec): Private copy of the search bounds.
        omega (float): Inertia weight.
        phi_p (float): Cognitive coefficient.
        phi_g (float): Social coefficient.
        max_iterations (int): Iterations run by optimize().
        gbest_position (np.ndarray): Global best position (read-only).
        gbest_value (float): Global best value, inf until the first evaluation.
        gbest_history (list): Global best value at each iteration boundary of the
            last optimize() call; index 0 is the value after the initial evaluation.
        iterations_completed (int): Iterations finished by the last optimize() call.
    """

    def __init__(self,
                 num_particles: int,
                 dimensions: int,
                 lower_bounds,
                 upper_bounds,
                 omega: float,
                 phi_p: float,
                 phi_g: float,
                 max_iterations: int,
                 seed: Optional[int] = None,
                 rng: Optional[np.random.Generator] = None,
                 reject_non_finite: bool = REJECT_NON_FINITE_OBJECTIVE):
        """
        Validates the configuration and seeds the particles.

        Args:
            num_particles (int): Number of particles, > 0.
            dimensions (int): Problem dimension, > 0.
            lower_bounds: Per-dimension lower limits (length == dimensions).
            upper_bounds: Per-dimension upper limits, elementwise >= lower_bounds.
            omega (float): Inertia weight.
            phi_p (float): Cognitive coefficient.
            phi_g (float): Social coefficient.
            max_iterations (int): Number of iterations, >= 0.
            seed (Optional[int]): Seed for numpy.random.default_rng. Ignored if rng is given.
            rng (Optional[np.random.Generator]): Source of every uniform draw.
            reject_non_finite (bool): Raise InvalidObjectiveValue on NaN/inf objective values
                instead of silently ignoring them.

        Raises:
            InvalidConfiguration: Non-positive num_particles/dimensions or negative max_iterations.
            InvalidBounds: Malformed or inverted bounds, or bounds not matching dimensions.
        """
        _require_int(num_particles, "num_particles", 1)
        _require_int(dimensions, "dimensions", 1)
        _require_int(max_iterations, "max_iterations", 0)

        bounds = BoundsSpec(lower_bounds, upper_bounds)
        if bounds.dimensions != dimensions:
            raise InvalidBounds(f"Bounds have {bounds.dimensions} dimensions, expected {dimensions}")

        self.num_particles = int(num_particles)
        self.dim = int(dimensions)
        self.bounds = bounds
        self.omega = float(omega)
        self.phi_p = float(phi_p)
        self.phi_g = float(phi_g)
        self.max_iterations = int(max_iterations)
        self.reject_non_finite = reject_non_finite
        self.rng = rng if rng is not None else np.random.default_rng(seed)

        self.gbest_value = float('inf')
        self.gbest_position = _frozen(np.zeros(self.dim))
        self.gbest_history: List[float] = []
        self.iterations_completed = 0

        self._scratch = ScratchArena(self.dim)
        self._particles: List[Particle] = []
        self._initialize_particles()

        log_info(f"Initialized PSO swarm: {self.num_particles} particles, {self.dim} dimensions, "
                 f"omega={self.omega}, phi_p={self.phi_p}, phi_g={self.phi_g}, "
                 f"max_iterations={self.max_iterations}.", module_name)

    @property
    def particles(self) -> Tuple[Particle, ...]:
        return tuple(self._particles)

    def _initialize_particles(self):
        """Samples every particle uniformly in bounds with zero velocity."""
        zero_velocity = np.zeros(self.dim)
        for _ in range(self.num_particles):
            with self._scratch as scratch:
                position = scratch.acquire("initial_position")
                self.bounds.sample(self.rng, out=position)
                particle = Particle(position, zero_velocity)
                # Real objective values are only known after the initial evaluation pass.
                particle.set_personal_best(particle.position, float('inf'))
            self._particles.append(particle)

    def _evaluate(self, objective_function: ObjectiveCallable, particle: Particle) -> float:
        value = np.asarray(objective_function(particle.position), dtype=float).item()
        if not math.isfinite(value):
            if self.reject_non_finite:
                raise InvalidObjectiveValue(
                    f"Objective returned {value} at position {particle.position.tolist()}")
            log_debug(f"Non-finite objective value ({value}) ignored for best updates.", module_name)
        return value

    def _record_best(self, particle: Particle, value: float):
        """Caller-gated personal/global best update for a freshly evaluated particle."""
        if value < particle.pbest_value:
            particle.set_personal_best(particle.position, value)
        if particle.pbest_value < self.gbest_value:
            self.gbest_value = particle.pbest_value
            self.gbest_position = _frozen(particle.pbest_position)

    def _initial_evaluation(self, objective_function: ObjectiveCallable):
        for particle in self._particles:
            value = self._evaluate(objective_function, particle)
            self._record_best(particle, value)
        log_info(f"Initial GBest Value: {self.gbest_value:.6e}", module_name)

    def _step_particle(self, particle: Particle, objective_function: ObjectiveCallable):
        """
        Moves one particle and updates the bests.

        v' = omega * v + phi_p * rP * (pbest - x) + phi_g * rG * (gbest - x)
        x' = clamp(x + v')
        """
        with self._scratch as scratch:
            r_p = scratch.acquire("r_p")
            r_g = scratch.acquire("r_g")
            self.rng.random(out=r_p)
            self.rng.random(out=r_g)

            inertia = scratch.acquire("inertia")
            np.multiply(particle.velocity, self.omega, out=inertia)

            cognitive = scratch.acquire("cognitive")
            np.subtract(particle.pbest_position, particle.position, out=cognitive)
            cognitive *= r_p
            cognitive *= self.phi_p

            social = scratch.acquire("social")
            np.subtract(self.gbest_position, particle.position, out=social)
            social *= r_g
            social *= self.phi_g

            velocity = scratch.acquire("velocity")
            np.add(inertia, cognitive, out=velocity)
            velocity += social

            unclamped = scratch.acquire("unclamped_position")
            np.add(particle.position, velocity, out=unclamped)
            position = scratch.acquire("position")
            self.bounds.clamp(unclamped, out=position)

            particle.update(position, velocity)

        value = self._evaluate(objective_function, particle)
        self._record_best(particle, value)

    def optimize(self,
                 objective_function: ObjectiveCallable,
                 callback: Optional[Callable[[int, "Swarm"], None]] = None,
                 should_stop: Optional[Callable[[], bool]] = None) -> Tuple[np.ndarray, float]:
        """
        Minimizes objective_function.

        Runs the initial evaluation pass, then exactly max_iterations iterations,
        each visiting the particles once in stored order.

        Args:
            objective_function: Maps a position vector (read-only) to a scalar.
            callback: Called as callback(iteration, swarm) after every completed
                iteration (1-based). For observation only.
            should_stop: Cancellation hook checked before every iteration. Returning
                True ends the run early. Not part of the default behaviour, since an
                early stop changes the result.

        Returns:
            tuple: (best_position, best_value) as independent copies.
        """
        start_time = time.time()
        self.iterations_completed = 0
        self._initial_evaluation(objective_function)
        self.gbest_history = [self.gbest_value]

        for iteration in range(1, self.max_iterations + 1):
            if should_stop is not None and should_stop():
                log_warning(f"Optimization cancelled before iteration {iteration}/{self.max_iterations}.",
                            module_name)
                break

            for particle in self._particles:
                self._step_particle(particle, objective_function)

            self.iterations_completed = iteration
            self.gbest_history.append(self.gbest_value)
            if iteration % LOG_INTERVAL == 0:
                log_debug(f"Iteration {iteration}/{self.max_iterations}: GBest = {self.gbest_value:.6e}",
                          module_name)
            if callback is not None:
                callback(iteration, self)

        elapsed = time.time() - start_time
        log_success(f"Optimization finished after {self.iterations_completed} iterations "
                    f"({elapsed:.2f}s). GBest Value: {self.gbest_value:.6e}", module_name)

        return np.array(self.gbest_position, copy=True), float(self.gbest_value)
