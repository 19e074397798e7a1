# quantum_simulation/measurement.py
"""Born-rule sampling and projective collapse of a dense state vector."""
import logging
from typing import List, Sequence

import numpy as np

from .errors import InternalConsistencyError
from .state import State

logger = logging.getLogger(__name__)

def choose_state(state: State, rng: np.random.Generator) -> int:
    """
    Inverse-CDF sample of a basis index. Draws exactly one number from rng.

    The strict comparison cdf[i] > r never lands on a zero-probability index.
    If rounding leaves r past the last cumulative value, the last index with
    non-zero probability wins instead of running off the end.
    """
    probs = state.probabilities()
    # accumulate in double precision whatever the state dtype
    cdf = np.cumsum(probs, dtype=np.float64)
    r = rng.random()
    index = int(np.searchsorted(cdf, r, side="right"))
    if index >= probs.shape[0]:
        index = int(np.flatnonzero(probs)[-1])
    return index

def decode(index: int, qubits: Sequence[int]) -> List[bool]:
    return [(index >> q) & 1 == 1 for q in qubits]

def collapse_all(state: State, index: int):
    """Leave the register in basis state |index>."""
    state.psi[:] = 0
    state.psi[index] = 1.0

def collapse(state: State, qubits: Sequence[int], outcome: Sequence[bool]):
    """
    Project onto the subspace where qubits[j] == outcome[j] and renormalize.
    """
    psi = state.psi
    idx = np.arange(psi.shape[0], dtype=np.int64)
    keep = np.ones(psi.shape[0], dtype=bool)
    for q, bit in zip(qubits, outcome):
        keep &= ((idx >> q) & 1) == int(bit)
    psi[~keep] = 0
    mass = float(np.sum(np.abs(psi[keep]) ** 2))
    if mass == 0.0:
        raise InternalConsistencyError(
            f"No probability mass left after measuring qubits {list(qubits)} -> {list(outcome)}")
    psi[keep] *= 1.0 / np.sqrt(mass)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("collapsed %d of %d amplitudes, surviving mass %.6g",
                     int(np.count_nonzero(~keep)), psi.shape[0], mass)
