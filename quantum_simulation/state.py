# quantum_simulation/state.py
import math
from dataclasses import dataclass
from typing import Sequence, Tuple, Union

import numpy as np

from .errors import NormalizationError

Qubit = Tuple[complex, complex]  # (amplitude of |0>, amplitude of |1>)

GROUND_QUBIT: Qubit = (1.0 + 0.0j, 0.0 + 0.0j)
EXCITED_QUBIT: Qubit = (0.0 + 0.0j, 1.0 + 0.0j)
PLUS_QUBIT: Qubit = (math.sqrt(0.5) + 0.0j, math.sqrt(0.5) + 0.0j)

# ---------------------------- basis encoding ----------------------------
# Bit j of a basis index is the value of qubit j (little-endian, qubit 0 is LSB).

def bit_of(index: int, qubit: int) -> bool:
    return (index >> qubit) & 1 == 1

def index_of(bits: Sequence[bool]) -> int:
    """Inverse of bit_of: bits[j] is the value of qubit j."""
    index = 0
    for j, b in enumerate(bits):
        if b:
            index |= 1 << j
    return index

# ---------------------------- single qubits ----------------------------

def random_qubit(rng: np.random.Generator) -> Qubit:
    """A uniformly parameterised point on the Bloch sphere (3 rng draws)."""
    t0, t1, t2 = rng.uniform(0.0, 2.0 * math.pi, size=3)
    a0 = complex(math.cos(t0) * math.cos(t1) * math.cos(t2),
                 math.sin(t0) * math.cos(t1) * math.cos(t2))
    a1 = complex(math.sin(t1) * math.cos(t2), math.sin(t2))
    return a0, a1

QubitDescription = Union[str, Qubit]

def describe_qubit(desc: QubitDescription, rng: np.random.Generator, tol=1e-9) -> Qubit:
    """Turn 'ground' / 'excited' / 'superposition' / 'random' or an explicit pair into a qubit."""
    if isinstance(desc, str):
        if desc == "ground":
            return GROUND_QUBIT
        if desc == "excited":
            return EXCITED_QUBIT
        if desc == "superposition":
            return PLUS_QUBIT
        if desc == "random":
            return random_qubit(rng)
        raise ValueError(f"Unknown qubit description: {desc!r}")
    a0, a1 = desc
    n2 = abs(a0) ** 2 + abs(a1) ** 2
    if abs(1.0 - n2) > tol:
        raise ValueError(f"Qubit {desc!r} is not normalized: |a0|^2+|a1|^2={n2}")
    return complex(a0), complex(a1)

# ---------------------------- full register ----------------------------

@dataclass
class State:
    n: int
    psi: np.ndarray  # shape (2**n,), dtype complex64/128

    @staticmethod
    def zero(n: int, dtype=np.complex128) -> "State":
        N = 1 << n
        psi = np.zeros(N, dtype=dtype)
        psi[0] = 1.0 + 0.0j
        return State(n=n, psi=psi)

    @staticmethod
    def basis(n: int, index: int, dtype=np.complex128) -> "State":
        psi = np.zeros(1 << n, dtype=dtype)
        psi[index] = 1.0 + 0.0j
        return State(n=n, psi=psi)

    @staticmethod
    def superposition(n: int, dtype=np.complex128) -> "State":
        N = 1 << n
        psi = np.full(N, 1.0 / math.sqrt(N), dtype=dtype)
        return State(n=n, psi=psi)

    @staticmethod
    def from_qubits(qubits: Sequence[Qubit], dtype=np.complex128) -> "State":
        """
        Tensor product of independent qubits. Amplitude of index i is the product
        over j of qubits[j][bit j of i], so qubit 0 is the last kron factor.
        """
        psi = np.ones(1, dtype=dtype)
        for a0, a1 in qubits:
            psi = np.kron(np.array([a0, a1], dtype=dtype), psi)
        return State(n=len(qubits), psi=psi)

    @staticmethod
    def random(n: int, rng: np.random.Generator, dtype=np.complex128) -> "State":
        return State.from_qubits([random_qubit(rng) for _ in range(n)], dtype=dtype)

    @property
    def dtype(self):
        return self.psi.dtype

    def norm2(self) -> float:
        return float(np.vdot(self.psi, self.psi).real)

    def check_normalized(self, tol=1e-6):
        n2 = self.norm2()
        if not (abs(1.0 - n2) <= tol):
            raise NormalizationError(f"Normalization failed: ||psi||^2={n2}")

    def probabilities(self) -> np.ndarray:
        return np.abs(self.psi) ** 2

    def copy(self) -> "State":
        return State(self.n, self.psi.copy())
