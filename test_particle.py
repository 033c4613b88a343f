#!/usr/bin/env python3
"""Tests for Particle copy semantics and the caller-gated personal best."""

import numpy as np
import pytest

from SWARM_PSO.PSO.Particle import Particle


def test_initialize_copies_and_sentinel():
    position = np.array([1.0, 2.0])
    velocity = np.array([0.5, -0.5])
    particle = Particle(position, velocity)

    position[0] = 99.0
    velocity[0] = 99.0

    np.testing.assert_array_equal(particle.position, [1.0, 2.0])
    np.testing.assert_array_equal(particle.velocity, [0.5, -0.5])
    np.testing.assert_array_equal(particle.pbest_position, [1.0, 2.0])
    assert particle.pbest_value == float('inf')
    assert particle.dim == 2
    assert particle.pbest_position is not particle.position


def test_update_leaves_personal_best_alone():
    particle = Particle([0.0, 0.0], [0.0, 0.0])
    particle.set_personal_best([0.0, 0.0], 3.0)

    new_position = np.array([10.0, -10.0])  # no bounds check in the particle
    particle.update(new_position, [1.0, 1.0])
    new_position[:] = 0.0

    np.testing.assert_array_equal(particle.position, [10.0, -10.0])
    np.testing.assert_array_equal(particle.velocity, [1.0, 1.0])
    np.testing.assert_array_equal(particle.pbest_position, [0.0, 0.0])
    assert particle.pbest_value == 3.0


def test_set_personal_best_is_unconditional():
    particle = Particle([0.0], [0.0])
    particle.set_personal_best([1.0], 1.0)
    particle.set_personal_best([2.0], 5.0)  # worse value still written

    np.testing.assert_array_equal(particle.pbest_position, [2.0])
    assert particle.pbest_value == 5.0


def test_state_is_read_only():
    particle = Particle([0.0, 1.0], [0.0, 0.0])
    with pytest.raises(ValueError):
        particle.position[0] = 1.0
    with pytest.raises(ValueError):
        particle.velocity[0] = 1.0
    with pytest.raises(ValueError):
        particle.pbest_position[0] = 1.0
