# quantum_simulation/algorithms.py
"""
Textbook algorithms written against the :class:`Simulation` interface.

Each ``apply_*`` function runs one shot on a simulation that is already in the
ground state and returns the measured bits; the ``run_*`` helpers reset and
repeat for a number of shots.
"""
from typing import Callable, List, Sequence, Tuple

from .simulation import Simulation, new_simulation

# ----------------------------- entanglement -----------------------------

def apply_bell_state(sim: Simulation) -> List[bool]:
    """(|00> + |11>)/sqrt(2) on qubits 0 and 1."""
    sim.hadamard(0)
    sim.cnot(0, 1)
    return sim.measure([0, 1])

def apply_ghz_state(sim: Simulation, qubit_count: int) -> List[bool]:
    """(|0...0> + |1...1>)/sqrt(2) on the first qubit_count qubits."""
    sim.hadamard(0)
    for q in range(qubit_count - 1):
        sim.cnot(q, q + 1)
    return sim.measure(list(range(qubit_count)))

# ----------------------------- oracle problems -----------------------------
#
# Q0 .. Q(n-1) (inputs):  |0> ---------- H -- |+> --|     |-- H -- measure
#                                                   | U_f |
# Qn (answer):            |0> -- X -- H -- |-> -----|     |---------- |->

def apply_phase_oracle_algo(sim: Simulation, f: Callable, input_qubits: Sequence[int],
                            answer_qubit: int) -> List[bool]:
    """Shared circuit of Deutsch-Jozsa and Bernstein-Vazirani (phase kickback)."""
    sim.pauli_x(answer_qubit)
    sim.hadamard(answer_qubit)
    for q in input_qubits:
        sim.hadamard(q)
    sim.apply_oracle(f, input_qubits, [answer_qubit])
    for q in input_qubits:
        sim.hadamard(q)
    return sim.measure(input_qubits)

def deutsch_jozsa(f: Callable, n: int, runs: int = 100, seed: int = 0, backend: str = "serial") -> Tuple[str, List[List[bool]]]:
    """
    Classify f: {0,1}^n -> {0,1} as 'constant', 'balanced' or 'neither'.

    A constant f always measures all zeros, a balanced one never does. Any
    other function lands in between with some probability.
    """
    sim = new_simulation(n + 1, seed=seed, backend=backend)
    measurements = []
    constant_count = 0
    for _ in range(runs):
        sim.reset()
        m = apply_phase_oracle_algo(sim, f, list(range(n)), n)
        if not any(m):
            constant_count += 1
        measurements.append(m)
    if constant_count == runs:
        verdict = "constant"
    elif constant_count == 0:
        verdict = "balanced"
    else:
        verdict = "neither"
    return verdict, measurements

def dot_product_oracle(secret: Sequence[bool]) -> Callable:
    """f(x) = s.x mod 2"""
    secret = tuple(bool(b) for b in secret)

    def f(x):
        product = False
        for xi, si in zip(x, secret):
            product ^= xi and si
        return product
    return f

def bernstein_vazirani(secret: Sequence[bool], seed: int = 0, backend: str = "serial") -> List[bool]:
    """Recover the secret string of f(x) = s.x with a single oracle query."""
    n = len(secret)
    sim = new_simulation(n + 1, seed=seed, backend=backend)
    return apply_phase_oracle_algo(sim, dot_product_oracle(secret), list(range(n)), n)

# ----------------------------- Simon -----------------------------
#
# Q0 .. Q(n-1) (inputs):   |0> -- H -- |+> --|     |-- H -- measure
#                                            | U_f |
# Qn .. Q(2n-1) (answers): |0> --------------|     |------- measure

def simon_oracle(secret: Sequence[bool], g: Callable = tuple) -> Callable:
    """
    Two-to-one f with f(x) = f(x XOR s): f(x) = g(min(x, x XOR s)) for an
    injective g on bit tuples (identity by default).
    """
    secret = tuple(bool(b) for b in secret)

    def f(x):
        y = tuple(a != b for a, b in zip(x, secret))
        # compare as integers, qubit 0 least significant
        return g(x if x[::-1] < y[::-1] else y)
    return f

def apply_simon(sim: Simulation, f: Callable, n: int) -> List[bool]:
    inputs = list(range(n))
    answers = list(range(n, 2 * n))
    for q in inputs:
        sim.hadamard(q)
    sim.apply_oracle(f, inputs, answers)
    for q in inputs:
        sim.hadamard(q)
    return sim.measure(inputs)

def simon(f: Callable, n: int, runs: int = 100, seed: int = 0, backend: str = "serial") -> List[List[bool]]:
    """Each returned y satisfies y.s = 0 mod 2 for the hidden mask s."""
    sim = new_simulation(2 * n, seed=seed, backend=backend)
    measurements = []
    for _ in range(runs):
        sim.reset()
        measurements.append(apply_simon(sim, f, n))
    return measurements

# ----------------------------- communication -----------------------------

def prepare_qubit(sim: Simulation, gates: Sequence[str], qubit: int):
    for name in gates:
        getattr(sim, name)(qubit)

def teleport(sim: Simulation, preparation: Sequence[str] = ("hadamard",)) -> Tuple[bool, bool]:
    """
    Prepare qubit 0 with the given 1-qubit gates and teleport its state into
    qubit 2 through the Bell pair (1, 2). Returns the two classical bits sent.
    """
    prepare_qubit(sim, preparation, 0)
    sim.hadamard(1)
    sim.cnot(1, 2)

    sim.cnot(0, 1)
    sim.hadamard(0)
    first_bit, second_bit = sim.measure([0, 1])
    if second_bit:
        sim.pauli_x(2)
    if first_bit:
        sim.pauli_z(2)
    return first_bit, second_bit

def apply_teleportation(sim: Simulation, preparation: Sequence[str] = ("hadamard",)) -> List[bool]:
    teleport(sim, preparation)
    return sim.measure([2])

def superdense_coding(first_bit: bool, second_bit: bool, seed: int = 0, backend: str = "serial") -> Tuple[bool, bool]:
    """Send two classical bits by transmitting only qubit 0 of a shared Bell pair."""
    sim = new_simulation(2, seed=seed, backend=backend)
    sim.hadamard(0)
    sim.cnot(0, 1)

    # 00 -> |00>+|11>, 01 -> |00>-|11>, 10 -> |01>+|10>, 11 -> |01>-|10>
    if first_bit:
        sim.pauli_z(0)
    if second_bit:
        sim.pauli_x(0)

    sim.cnot(0, 1)
    sim.hadamard(0)
    received = sim.measure_all()
    return received[0], received[1]

def run_shots(apply: Callable[[Simulation], List[bool]], qubit_count: int, runs: int = 100,
              seed: int = 0, backend: str = "serial") -> List[List[bool]]:
    sim = new_simulation(qubit_count, seed=seed, backend=backend)
    measurements = []
    for _ in range(runs):
        sim.reset()
        measurements.append(apply(sim))
    return measurements
