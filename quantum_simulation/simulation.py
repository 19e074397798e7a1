# quantum_simulation/simulation.py
"""
Simulation backends.

:class:`Simulation` is the capability set every backend implements:
initialization, measurement and the gate operations. :class:`StateVectorSimulation`
is the dense reference backend; the numba backend in this module reuses it and
only swaps the gate kernels.
"""
import abc
import logging
from numbers import Integral
from typing import List, Sequence

import numpy as np

from . import gates as G
from . import apply_serial
from .errors import InvalidQubitIndexError, QubitCountError, SeedError
from .measurement import choose_state, collapse, collapse_all, decode
from .oracle import BoolFunction
from .state import QubitDescription, State, describe_qubit

logger = logging.getLogger(__name__)

# Memory is 16 * 2**n bytes at complex128: 24 qubits is 256 MiB.
MAX_QUBIT_COUNT = 24


class Simulation(abc.ABC):
    """Capability set shared by all simulation backends."""

    @abc.abstractmethod
    def reset(self): ...

    # initialization
    @abc.abstractmethod
    def init_ground_state(self): ...
    @abc.abstractmethod
    def init_superposition_state(self): ...
    @abc.abstractmethod
    def init_random_state(self): ...
    @abc.abstractmethod
    def init_qubits(self, descriptions: Sequence[QubitDescription]): ...

    # measurement in the Z basis
    @abc.abstractmethod
    def measure_all(self) -> List[bool]: ...
    @abc.abstractmethod
    def measure(self, qubits: Sequence[int]) -> List[bool]: ...

    # 1-qubit gates
    @abc.abstractmethod
    def pauli_x(self, qubit: int): ...
    @abc.abstractmethod
    def pauli_y(self, qubit: int): ...
    @abc.abstractmethod
    def pauli_z(self, qubit: int): ...
    @abc.abstractmethod
    def hadamard(self, qubit: int): ...
    @abc.abstractmethod
    def s(self, qubit: int): ...
    @abc.abstractmethod
    def t(self, qubit: int): ...

    # 2-qubit gates
    @abc.abstractmethod
    def cnot(self, control: int, target: int): ...
    @abc.abstractmethod
    def cz(self, control: int, target: int): ...
    @abc.abstractmethod
    def swap(self, q0: int, q1: int): ...

    # 3-qubit gates
    @abc.abstractmethod
    def toffoli(self, control0: int, control1: int, target: int): ...

    @abc.abstractmethod
    def apply_oracle(self, f: BoolFunction, input_qubits: Sequence[int], answer_qubits: Sequence[int]): ...


class StateVectorSimulation(Simulation):
    """
    Full state vector simulation: all 2**n amplitudes are evolved exactly and a
    measurement samples one outcome from them with the instance's own seeded rng.

    >>> sim = StateVectorSimulation(2, seed=7)
    >>> sim.hadamard(0); sim.cnot(0, 1)
    >>> a, b = sim.measure_all()
    >>> a == b
    True
    """

    backend = "serial"

    def __init__(self, qubit_count: int, seed: int = 0, dtype=np.complex128):
        if isinstance(qubit_count, bool) or not isinstance(qubit_count, Integral):
            raise QubitCountError(f"qubit_count must be an integer, got {qubit_count!r}")
        if not 1 <= qubit_count <= MAX_QUBIT_COUNT:
            raise QubitCountError(
                f"qubit_count must be in [1, {MAX_QUBIT_COUNT}], got {qubit_count}")
        if isinstance(seed, bool) or not isinstance(seed, Integral):
            raise SeedError(f"seed must be an integer, got {seed!r}")
        self._n = int(qubit_count)
        self._dtype = np.dtype(dtype)
        # any integer, negative included, maps onto the unsigned 64-bit seed space
        self._rng = np.random.default_rng(int(seed) % (1 << 64))
        self._state = State.zero(self._n, dtype=self._dtype)
        logger.debug("%s backend: %d qubits, seed=%s, dtype=%s",
                     self.backend, self._n, seed, self._dtype)

    # ---------------------------- inspection ----------------------------

    @property
    def qubit_count(self) -> int:
        return self._n

    @property
    def dtype(self):
        return self._dtype

    @property
    def amplitudes(self) -> np.ndarray:
        """A copy of the amplitude vector, index bit j = qubit j."""
        return self._state.psi.copy()

    def probabilities(self) -> np.ndarray:
        return self._state.probabilities()

    def norm2(self) -> float:
        return self._state.norm2()

    def check_normalized(self, tol=1e-6):
        self._state.check_normalized(tol=tol)

    # ---------------------------- validation ----------------------------

    def _check_qubits(self, qubits: Sequence[int]) -> List[int]:
        checked = []
        for q in qubits:
            if isinstance(q, bool) or not isinstance(q, Integral):
                raise InvalidQubitIndexError(f"Qubit index must be an integer, got {q!r}")
            if not 0 <= q < self._n:
                raise InvalidQubitIndexError(
                    f"Qubit index {q} out of range for {self._n} qubits")
            checked.append(int(q))
        if len(set(checked)) != len(checked):
            raise InvalidQubitIndexError(f"Qubit indices must be distinct, got {checked}")
        return checked

    # ---------------------------- initialization ----------------------------

    def reset(self):
        self.init_ground_state()

    def init_ground_state(self):
        self._state = State.zero(self._n, dtype=self._dtype)

    def init_superposition_state(self):
        self._state = State.superposition(self._n, dtype=self._dtype)

    def init_random_state(self):
        self._state = State.random(self._n, self._rng, dtype=self._dtype)

    def init_qubits(self, descriptions: Sequence[QubitDescription]):
        """Product state from per-qubit descriptions, descriptions[j] for qubit j."""
        if len(descriptions) != self._n:
            raise ValueError(f"Expected {self._n} qubit descriptions, got {len(descriptions)}")
        qubits = [describe_qubit(d, self._rng) for d in descriptions]
        self._state = State.from_qubits(qubits, dtype=self._dtype)

    # ---------------------------- measurement ----------------------------

    def measure_all(self) -> List[bool]:
        index = choose_state(self._state, self._rng)
        collapse_all(self._state, index)
        outcome = decode(index, range(self._n))
        logger.debug("measure_all -> %s", outcome)
        return outcome

    def measure(self, qubits: Sequence[int]) -> List[bool]:
        qubits = self._check_qubits(qubits)
        index = choose_state(self._state, self._rng)
        outcome = decode(index, qubits)
        collapse(self._state, qubits, outcome)
        logger.debug("measure %s -> %s", qubits, outcome)
        return outcome

    # ---------------------------- gates ----------------------------

    def _apply(self, gate: G.Gate, *qubits: int):
        qubits = self._check_qubits(qubits)
        if gate.arity == 1:
            apply_serial.apply_single_qubit(self._state, gate.fn, qubits[0])
        else:
            apply_serial.apply_gate(self._state, gate.fn, qubits)

    def _apply_oracle(self, f, input_qubits, answer_qubits):
        apply_serial.apply_oracle(self._state, f, input_qubits, answer_qubits)

    def pauli_x(self, qubit: int):
        self._apply(G.GATES["pauli_x"], qubit)

    def pauli_y(self, qubit: int):
        self._apply(G.GATES["pauli_y"], qubit)

    def pauli_z(self, qubit: int):
        self._apply(G.GATES["pauli_z"], qubit)

    def hadamard(self, qubit: int):
        self._apply(G.GATES["hadamard"], qubit)

    def s(self, qubit: int):
        self._apply(G.GATES["s"], qubit)

    def t(self, qubit: int):
        self._apply(G.GATES["t"], qubit)

    def cnot(self, control: int, target: int):
        self._apply(G.GATES["cnot"], control, target)

    def cz(self, control: int, target: int):
        self._apply(G.GATES["cz"], control, target)

    def swap(self, q0: int, q1: int):
        self._apply(G.GATES["swap"], q0, q1)

    def toffoli(self, control0: int, control1: int, target: int):
        self._apply(G.GATES["toffoli"], control0, control1, target)

    def apply_oracle(self, f: BoolFunction, input_qubits: Sequence[int], answer_qubits: Sequence[int]):
        """
        U_f |x>|y> = |x>|y XOR f(x)>. f takes a tuple of len(input_qubits) bools
        and returns len(answer_qubits) bools (a bare bool for a single answer qubit).
        """
        input_qubits = list(input_qubits)
        answer_qubits = list(answer_qubits)
        if not answer_qubits:
            raise InvalidQubitIndexError("Oracle needs at least one answer qubit")
        checked = self._check_qubits(input_qubits + answer_qubits)
        self._apply_oracle(f, checked[:len(input_qubits)], checked[len(input_qubits):])


class NumbaStateVectorSimulation(StateVectorSimulation):
    """Same semantics as the serial backend with JIT-compiled parallel kernels."""

    backend = "numba"

    def __init__(self, qubit_count: int, seed: int = 0, dtype=np.complex128, num_threads=None):
        from . import apply_numba
        self._kernels = apply_numba
        if num_threads is not None:
            apply_numba.set_threads(int(num_threads))
        self._matrices = {
            name: G.gate_matrix(g.fn, g.arity, dtype) for name, g in G.GATES.items()
        }
        super().__init__(qubit_count, seed=seed, dtype=dtype)

    def _apply(self, gate: G.Gate, *qubits: int):
        qubits = self._check_qubits(qubits)
        self._kernels.apply_gate(self._state, self._matrices[gate.name], qubits)

    def _apply_oracle(self, f, input_qubits, answer_qubits):
        self._kernels.apply_oracle(self._state, f, input_qubits, answer_qubits)


def new_simulation(qubit_count: int, seed: int = 0, backend: str = "serial",
                   dtype=np.complex128, num_threads=None) -> StateVectorSimulation:
    if backend == "serial":
        return StateVectorSimulation(qubit_count, seed=seed, dtype=dtype)
    elif backend == "numba":
        try:
            return NumbaStateVectorSimulation(qubit_count, seed=seed, dtype=dtype, num_threads=num_threads)
        except ImportError as e:
            raise RuntimeError("Numba backend not available. Did you `pip install numba`?") from e
    raise NotImplementedError(f"Unknown backend: {backend}")
