# quantum_simulation/oracle.py
"""
XOR-into-answer oracles U_f |x>|y> = |x>|y XOR f(x)> for an arbitrary boolean
function f with N_in input bits and N_out answer bits.

U_f only moves amplitude between indices that differ in answer bits, and the
toggle pattern depends on the input bits alone, which U_f never changes. So
index -> index ^ toggle(x) is an involution and U_f is a permutation matrix,
whatever f is.
"""
from typing import Callable, Sequence

import numpy as np

from .errors import OracleError

BoolFunction = Callable[[tuple], Sequence[bool]]

def _answer_bits(out, n_out: int) -> tuple:
    if isinstance(out, (bool, np.bool_)):
        out = (out,)
    out = tuple(bool(b) for b in out)
    if len(out) != n_out:
        raise OracleError(f"Oracle returned {len(out)} answer bits, expected {n_out}")
    return out

def toggle_table(f: BoolFunction, input_qubits: Sequence[int], answer_qubits: Sequence[int]) -> np.ndarray:
    """
    toggles[x] is the answer-qubit mask to XOR in for input value x, where bit j
    of x is the value of input_qubits[j]. f is called once per input value.
    """
    n_in = len(input_qubits)
    answer_masks = [1 << q for q in answer_qubits]
    toggles = np.zeros(1 << n_in, dtype=np.int64)
    for x in range(1 << n_in):
        bits = tuple((x >> j) & 1 == 1 for j in range(n_in))
        mask = 0
        for m, b in zip(answer_masks, _answer_bits(f(bits), len(answer_qubits))):
            if b:
                mask |= m
        toggles[x] = mask
    return toggles

def input_values(n: int, input_qubits: Sequence[int]) -> np.ndarray:
    """For every basis index of an n-qubit register, the packed value of its input bits."""
    idx = np.arange(1 << n, dtype=np.int64)
    x = np.zeros_like(idx)
    for j, q in enumerate(input_qubits):
        x |= ((idx >> q) & 1) << j
    return x

def partner_indices(n: int, f: BoolFunction, input_qubits: Sequence[int], answer_qubits: Sequence[int]) -> np.ndarray:
    """partner[i] = i ^ toggle(x(i)): the index whose amplitude U_f exchanges with i's."""
    toggles = toggle_table(f, input_qubits, answer_qubits)
    idx = np.arange(1 << n, dtype=np.int64)
    return idx ^ toggles[input_values(n, input_qubits)]
