import numpy as np
from typing import Dict, Set


class ScratchArena:
    """
    Pool of named temporary vectors for a single particle step.

    Buffers are handed out with acquire() inside a ``with`` block and are
    reused from step to step. Leaving the block releases every buffer handed
    out during it: the contents are overwritten with NaN, so a value that was
    not copied into particle or swarm state cannot silently survive the step.

    Example:
        arena = ScratchArena(dim)
        with arena as scratch:
            r_p = scratch.acquire("r_p")
            rng.random(out=r_p)
    """

    def __init__(self, dimensions: int):
        self.dimensions = dimensions
        self._buffers: Dict[str, np.ndarray] = {}
        self._live: Set[str] = set()
        self._open = False
        self.scopes_closed = 0

    @property
    def is_open(self) -> bool:
        return self._open

    @property
    def live_count(self) -> int:
        return len(self._live)

    @property
    def pool_size(self) -> int:
        return len(self._buffers)

    def acquire(self, name: str) -> np.ndarray:
        """Returns the buffer registered under name, allocating it on first use."""
        if not self._open:
            raise RuntimeError(f"Scratch buffer '{name}' requested outside an open scope")
        buffer = self._buffers.get(name)
        if buffer is None:
            buffer = np.empty(self.dimensions, dtype=float)
            self._buffers[name] = buffer
        self._live.add(name)
        return buffer

    def release(self):
        for name in self._live:
            self._buffers[name].fill(np.nan)
        self._live.clear()
        self._open = False
        self.scopes_closed += 1

    def __enter__(self):
        if self._open:
            raise RuntimeError("Scratch scope is already open")
        self._open = True
        return self

    def __exit__(self, exc_type, exc_value, tb):
        self.release()
        return False
