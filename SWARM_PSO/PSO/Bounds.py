import numpy as np
from typing import Optional

from SWARM_PSO.PSO.Errors import InvalidBounds


def _as_bound_vector(values, label: str) -> np.ndarray:
    try:
        vector = np.array(values, dtype=float)
    except (TypeError, ValueError) as e:
        raise InvalidBounds(f"{label} bounds are not numeric: {e}") from e
    if vector.ndim != 1:
        raise InvalidBounds(f"{label} bounds must be a 1-D vector, got shape {vector.shape}")
    if vector.size == 0:
        raise InvalidBounds(f"{label} bounds are empty")
    if not np.all(np.isfinite(vector)):
        raise InvalidBounds(f"{label} bounds contain non-finite values")
    return vector


class BoundsSpec:
    """
    Per-dimension search limits, validated once and read-only afterwards.

    The lower and upper vectors are private copies, so the caller's arrays
    can be modified or dropped without affecting these limits.

    Attributes:
        dimensions (int): Number of dimensions D.
        lower (np.ndarray): Lower limits, shape (D,).
        upper (np.ndarray): Upper limits, shape (D,).
    """

    def __init__(self, lower, upper):
        lower = _as_bound_vector(lower, "Lower")
        upper = _as_bound_vector(upper, "Upper")

        if lower.shape != upper.shape:
            raise InvalidBounds(
                f"Lower and upper bounds differ in length ({lower.size} != {upper.size})")

        inverted = np.flatnonzero(lower > upper)
        if inverted.size > 0:
            i = int(inverted[0])
            raise InvalidBounds(f"Lower bound exceeds upper bound at dimension {i} ({lower[i]} > {upper[i]})")

        with np.errstate(over="ignore"):
            width = upper - lower
        too_wide = np.flatnonzero(~np.isfinite(width))
        if too_wide.size > 0:
            i = int(too_wide[0])
            raise InvalidBounds(f"Bounds at dimension {i} span more than the largest float ({lower[i]} to {upper[i]})")

        lower.flags.writeable = False
        upper.flags.writeable = False
        width.flags.writeable = False
        self._lower = lower
        self._upper = upper
        self._width = width

    @property
    def dimensions(self) -> int:
        return int(self._lower.size)

    @property
    def lower(self) -> np.ndarray:
        return self._lower

    @property
    def upper(self) -> np.ndarray:
        return self._upper

    @property
    def width(self) -> np.ndarray:
        return self._width

    def sample(self, rng: np.random.Generator, out: Optional[np.ndarray] = None) -> np.ndarray:
        """
        Draws lower + u * (upper - lower) with u ~ Uniform[0, 1) per dimension.

        Writes into out when given (float64, shape (D,)). The result is clamped,
        so rounding never lands outside the box.
        """
        if out is None:
            out = np.empty(self.dimensions, dtype=float)
        rng.random(out=out)
        out *= self._width
        out += self._lower
        return self.clamp(out, out=out)

    def clamp(self, x: np.ndarray, out: Optional[np.ndarray] = None) -> np.ndarray:
        """Projects every out-of-range coordinate of x onto its nearest limit."""
        return np.clip(x, self._lower, self._upper, out=out)

    def contains(self, x: np.ndarray) -> bool:
        x = np.asarray(x, dtype=float)
        return bool(np.all((x >= self._lower) & (x <= self._upper)))

    def __repr__(self):
        return f"BoundsSpec(lower={self._lower.tolist()}, upper={self._upper.tolist()})"
