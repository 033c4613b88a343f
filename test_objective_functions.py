#!/usr/bin/env python3
"""Tests for the benchmark catalog records."""

import matplotlib
matplotlib.use("Agg")

import numpy as np
import pytest

from SWARM_PSO.PSO.ObjectiveFunctions.Loader import (
    benchmark_functions,
    get_benchmark_function,
    list_benchmark_functions,
)
from SWARM_PSO.PSO.ObjectiveFunctions.Functions.ShiftedSphere import make_shifted_sphere
from SWARM_PSO.PSO.ObjectiveFunctions.Functions.WeightedSumSquares import make_weighted_sum_squares


def test_catalog_contents():
    names = list_benchmark_functions()
    assert len(names) == 10
    assert len(set(names)) == len(names)
    assert names[0] == "ShiftedSphere2D"
    assert "WeightedSumSquares4D" in names


@pytest.mark.parametrize("function", benchmark_functions, ids=lambda f: f.name)
def test_expected_minimum(function):
    assert function.lower_bounds.shape == (function.dimensions,)
    assert function.upper_bounds.shape == (function.dimensions,)
    assert np.all(function.lower_bounds <= function.expected_minimum_position)
    assert np.all(function.expected_minimum_position <= function.upper_bounds)

    at_minimum = function.evaluate(function.expected_minimum_position)
    assert isinstance(at_minimum, float)
    assert at_minimum == pytest.approx(function.expected_minimum_value)

    rng = np.random.default_rng(0)
    for _ in range(20):
        x = rng.uniform(function.lower_bounds, function.upper_bounds)
        assert function(x) >= function.expected_minimum_value


def test_specific_values():
    sphere = get_benchmark_function("ShiftedSphere2D")
    assert sphere(np.array([0.0, 0.0])) == pytest.approx(5.1)

    power = get_benchmark_function("PowerQuadratic2D")
    assert power(np.array([1.0, 1.0])) == pytest.approx(16.2)

    var_coeff = get_benchmark_function("VarCoeffQuadratic3D")
    assert var_coeff(np.array([3.0, -1.0, 3.0])) == pytest.approx(15.0 + 2.0 + 2.0)

    high = get_benchmark_function("HighOffsetQuadratic4D")
    np.testing.assert_array_equal(high.lower_bounds, np.full(4, -10.0))


def test_unknown_name():
    with pytest.raises(KeyError):
        get_benchmark_function("Rosenbrock")


def test_records_are_immutable():
    function = get_benchmark_function("ShiftedSphere3D")
    with pytest.raises(ValueError):
        function.expected_minimum_position[0] = 0.0
    with pytest.raises(AttributeError):
        function.name = "Other"


def test_factory_validation():
    with pytest.raises(ValueError):
        make_weighted_sum_squares("Bad", weights=[1.0], shift=[0.0, 0.0], offset=0.0)

    custom = make_shifted_sphere("Custom", shift=[0.0], offset=1.0, bound=2.0)
    np.testing.assert_array_equal(custom.upper_bounds, [2.0])
    assert custom(np.array([1.0])) == 2.0


def test_surface_plot_requires_2d():
    with pytest.raises(ValueError):
        get_benchmark_function("ShiftedSphere3D").plot_3d_surface()


def test_surface_plot_uses_function_bounds(tmp_path):
    from matplotlib import pyplot as plt

    function = get_benchmark_function("SimpleShiftedQuad2D")
    target = tmp_path / "surface.png"
    fig = function.plot_3d_surface(resolution=20, save_path=target, show=False)
    try:
        ax = fig.axes[0]
        assert function.name in ax.get_title()
        low, high = function.lower_bounds[0], function.upper_bounds[0]
        assert f"[{low:g}, {high:g}]" in ax.get_xlabel()
        assert target.exists()
    finally:
        plt.close(fig)
