# Error types raised by the swarm engine.


class SwarmError(ValueError):
    """Base class for every error raised by SWARM_PSO."""


class InvalidBounds(SwarmError):
    """Malformed, inverted or mis-sized search bounds."""


class InvalidConfiguration(SwarmError):
    """Non-positive particle count or dimensions, or a negative iteration count."""


class InvalidObjectiveValue(SwarmError):
    """The objective returned NaN or infinity while non-finite values are rejected."""
