# --- Benchmark Function Record ---
from dataclasses import dataclass, field
from typing import Callable

import numpy as np
from matplotlib import pyplot as plt


def _frozen(values) -> np.ndarray:
    vector = np.array(values, dtype=float, copy=True)
    vector.flags.writeable = False
    return vector


@dataclass(frozen=True, eq=False)
class BenchmarkFunction:
    """
    A benchmark objective with its bounds and known minimum.

    The objective itself is a plain closure; entries differ by data, not by type.
    Instances are callable, so they can be passed to Swarm.optimize directly.
    """
    name: str
    dimensions: int
    lower_bounds: np.ndarray
    upper_bounds: np.ndarray
    expected_minimum_value: float
    expected_minimum_position: np.ndarray
    objective: Callable[[np.ndarray], float] = field(repr=False)

    def __post_init__(self):
        object.__setattr__(self, "lower_bounds", _frozen(self.lower_bounds))
        object.__setattr__(self, "upper_bounds", _frozen(self.upper_bounds))
        object.__setattr__(self, "expected_minimum_position", _frozen(self.expected_minimum_position))
        for label in ("lower_bounds", "upper_bounds", "expected_minimum_position"):
            if getattr(self, label).shape != (self.dimensions,):
                raise ValueError(f"{self.name}: {label} must have shape ({self.dimensions},)")

    def evaluate(self, x: np.ndarray) -> float:
        return float(self.objective(np.asarray(x, dtype=float)))

    def __call__(self, x: np.ndarray) -> float:
        return self.evaluate(x)

    def plot_3d_surface(self, resolution=100, save_path=None, show=True):
        """
        Draws f over the function's own box, with the known minimum marked.

        Each axis spans that dimension's bounds, so asymmetric boxes are drawn
        to scale.

        Args:
            resolution (int): Grid points per axis.
            save_path: Optional file to write the figure to.
            show (bool): Call plt.show() before returning.

        Returns:
            matplotlib.figure.Figure: The figure, left open when show is False.
        """
        if self.dimensions != 2:
            raise ValueError(f"{self.name}: 3D surface plot only supports 2D functions, got {self.dimensions}D.")

        (x_low, y_low), (x_high, y_high) = self.lower_bounds, self.upper_bounds
        X, Y = np.meshgrid(np.linspace(x_low, x_high, resolution), np.linspace(y_low, y_high, resolution))
        grid = np.stack([X.ravel(), Y.ravel()], axis=1)
        Z = np.array([self.evaluate(point) for point in grid]).reshape(X.shape)

        fig = plt.figure(figsize=(10, 7))
        ax = fig.add_subplot(111, projection='3d')
        ax.plot_surface(X, Y, Z, cmap='viridis', edgecolor='k', linewidth=0.2, alpha=0.8)
        x_min, y_min = self.expected_minimum_position
        ax.scatter([x_min], [y_min], [self.expected_minimum_value], color='red', s=40,
                   label=f"min {self.expected_minimum_value:g} at ({x_min:g}, {y_min:g})")
        ax.set_title(f"{self.name} on [{x_low:g}, {x_high:g}] x [{y_low:g}, {y_high:g}]")
        ax.set_xlabel(f"x1 in [{x_low:g}, {x_high:g}]")
        ax.set_ylabel(f"x2 in [{y_low:g}, {y_high:g}]")
        ax.set_zlabel("f(x)")
        ax.legend(loc='upper right')

        if save_path is not None:
            fig.savefig(save_path, dpi=150, bbox_inches='tight')
        if show:
            plt.show()
        return fig
