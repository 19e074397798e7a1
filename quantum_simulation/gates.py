# quantum_simulation/gates.py
"""
Gate library: every named gate is a pure function over the amplitudes of the
2**k basis states of its k target qubits.

Tuple position p holds the amplitude whose j-th targeted qubit equals bit j of p,
so the first target varies fastest: (a00, a01, a10, a11) means positions
0b00, 0b01, 0b10, 0b11 with bit 0 = first target (the control for CNOT/CZ).
"""
import cmath
import math
from collections import namedtuple
from typing import Callable, Dict

import numpy as np

INV_SQRT_2 = 1.0 / math.sqrt(2.0)
T_PHASE = cmath.exp(0.25j * math.pi)

Gate = namedtuple("Gate", ["name", "arity", "fn"])

# ----------------------------- 1-qubit -----------------------------

def pauli_x(a0, a1):
    return a1, a0

def pauli_y(a0, a1):
    return -1j * a1, 1j * a0

def pauli_z(a0, a1):
    return a0, -a1

def hadamard(a0, a1):
    return INV_SQRT_2 * (a0 + a1), INV_SQRT_2 * (a0 - a1)

def s(a0, a1):
    return a0, 1j * a1

def t(a0, a1):
    return a0, T_PHASE * a1

# ----------------------------- 2-qubit -----------------------------

def cnot(a00, a01, a10, a11):
    # control is bit 0: flip the target bit wherever the control is set
    return a00, a11, a10, a01

def cz(a00, a01, a10, a11):
    return a00, a01, a10, -a11

def swap(a00, a01, a10, a11):
    return a00, a10, a01, a11

# ----------------------------- 3-qubit -----------------------------

def toffoli(a000, a001, a010, a011, a100, a101, a110, a111):
    # controls are bits 0 and 1, target is bit 2
    return a000, a001, a010, a111, a100, a101, a110, a011

# ----------------------------- registry -----------------------------

GATES: Dict[str, Gate] = {
    g.name: g for g in (
        Gate("pauli_x", 1, pauli_x),
        Gate("pauli_y", 1, pauli_y),
        Gate("pauli_z", 1, pauli_z),
        Gate("hadamard", 1, hadamard),
        Gate("s", 1, s),
        Gate("t", 1, t),
        Gate("cnot", 2, cnot),
        Gate("cz", 2, cz),
        Gate("swap", 2, swap),
        Gate("toffoli", 3, toffoli),
    )
}

def gate_matrix(fn: Callable, arity: int, dtype=np.complex128) -> np.ndarray:
    """Unitary of a tuple gate: column c is fn applied to basis vector e_c."""
    d = 1 << arity
    mat = np.zeros((d, d), dtype=dtype)
    for c in range(d):
        col = [0j] * d
        col[c] = 1.0 + 0j
        mat[:, c] = fn(*col)
    return mat
