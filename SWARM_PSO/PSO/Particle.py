import numpy as np


def _frozen_copy(vector) -> np.ndarray:
    copy = np.array(vector, dtype=float, copy=True)
    copy.flags.writeable = False
    return copy


class Particle:
    """
    One candidate solution: position, velocity and personal-best record.

    Every stored vector is an independent, read-only copy. The Swarm replaces
    them through update() and set_personal_best(); nothing else writes them.
    """

    def __init__(self, position, velocity):
        self.position = _frozen_copy(position)
        self.velocity = _frozen_copy(velocity)

        self.pbest_position = _frozen_copy(position)
        self.pbest_value = float('inf')

    @property
    def dim(self) -> int:
        return int(self.position.size)

    def update(self, new_position, new_velocity):
        """Replaces position and velocity. Bounds are the caller's responsibility."""
        self.position = _frozen_copy(new_position)
        self.velocity = _frozen_copy(new_velocity)

    def set_personal_best(self, position, value: float):
        """Overwrites the personal best unconditionally; the caller does the improvement test."""
        self.pbest_position = _frozen_copy(position)
        self.pbest_value = float(value)

    def __repr__(self):
        return (f"Particle(position={self.position.tolist()}, "
                f"pbest_value={self.pbest_value:.6e})")
