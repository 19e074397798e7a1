# quantum_simulation/tests/test_measurement.py
import logging

import numpy as np
import pytest

from quantum_simulation import StateVectorSimulation
from quantum_simulation.errors import InternalConsistencyError, InvalidQubitIndexError
from quantum_simulation.measurement import choose_state, collapse, decode
from quantum_simulation.state import State

class FixedDraw:
    """Stands in for the rng with a chosen uniform draw."""
    def __init__(self, r):
        self.r = r
        self.calls = 0

    def random(self):
        self.calls += 1
        return self.r

def program1(sim):
    sim.reset()
    sim.pauli_x(0)
    sim.pauli_y(1)
    sim.pauli_z(2)
    sim.cz(0, 1)
    sim.toffoli(0, 1, 2)
    sim.s(0)
    sim.swap(1, 2)
    sim.t(1)
    sim.cnot(0, 1)
    sim.hadamard(1)

# ------------------------- sampling -------------------------

def test_choose_state_inverse_cdf():
    st = State(2, np.sqrt(np.array([0.1, 0.2, 0.3, 0.4], dtype=complex)))
    assert choose_state(st, FixedDraw(0.05)) == 0
    assert choose_state(st, FixedDraw(0.15)) == 1
    assert choose_state(st, FixedDraw(0.55)) == 2
    assert choose_state(st, FixedDraw(0.95)) == 3

def test_choose_state_skips_zero_probability():
    st = State.basis(2, 2)
    assert choose_state(st, FixedDraw(0.0)) == 2

def test_choose_state_tail_picks_last_possible_index():
    # mass slightly below 1, last index impossible
    psi = np.sqrt(np.array([0.5, 0.5 - 1e-9, 0.0, 0.0], dtype=complex))
    assert choose_state(State(2, psi), FixedDraw(0.9999999999)) == 1

def test_choose_state_complex64_keeps_small_probabilities():
    # 2**-26 is below half an ulp of 0.5625 in float32, so a float32
    # running sum would merge index 1 into index 0
    psi = np.array([0.75, 2.0 ** -13, np.sqrt(0.4375), 0.0], dtype=np.complex64)
    st = State(2, psi)
    assert choose_state(st, FixedDraw(0.5625 + 2.0 ** -27)) == 1
    assert choose_state(st, FixedDraw(0.5625 + 2.0 ** -25)) == 2

def test_one_draw_per_measurement():
    rng = FixedDraw(0.3)
    choose_state(State.superposition(3), rng)
    assert rng.calls == 1

def test_decode_order_follows_request():
    assert decode(0b110, [0, 1, 2]) == [False, True, True]
    assert decode(0b110, [2, 0]) == [True, False]

def test_collapse_renormalizes():
    st = State.superposition(2)
    collapse(st, [1], [True])
    assert np.allclose(st.psi, [0, 0, np.sqrt(0.5), np.sqrt(0.5)])

def test_collapse_logs_at_debug(caplog):
    st = State.superposition(2)
    with caplog.at_level(logging.DEBUG, logger="quantum_simulation.measurement"):
        collapse(st, [0], [False])
    assert "collapsed 2 of 4 amplitudes" in caplog.text

def test_collapse_without_mass_is_fatal():
    st = State.zero(2)
    with pytest.raises(InternalConsistencyError):
        collapse(st, [0], [True])

# ------------------------- simulation properties -------------------------

@pytest.mark.parametrize("n", [1, 3, 6])
@pytest.mark.parametrize("seed", [0, 1, 12345])
def test_ground_state_measures_all_false(n, seed):
    sim = StateVectorSimulation(n, seed=seed)
    for _ in range(5):
        sim.reset()
        assert sim.measure_all() == [False] * n

def test_hadamard_is_fair():
    trials = 10_000
    ones = 0
    for seed in range(trials):
        sim = StateVectorSimulation(1, seed=seed)
        sim.hadamard(0)
        ones += sim.measure_all()[0]
    assert abs(ones / trials - 0.5) < 0.02

def test_bell_outcomes_always_agree():
    sim = StateVectorSimulation(2, seed=3)
    seen = set()
    for _ in range(500):
        sim.reset()
        sim.hadamard(0)
        sim.cnot(0, 1)
        a, b = sim.measure_all()
        assert a == b
        seen.add(a)
    assert seen == {False, True}

def test_partial_and_full_measurements_are_consistent():
    sim012 = StateVectorSimulation(3, seed=0)
    sim1 = StateVectorSimulation(3, seed=0)
    sim02 = StateVectorSimulation(3, seed=0)
    for _ in range(100):
        for sim in (sim012, sim1, sim02):
            program1(sim)
        m012 = sim012.measure_all()
        m1 = sim1.measure([1])
        m02 = sim02.measure([0, 2])
        assert m012[1] == m1[0]
        assert m012[0] == m02[0]
        assert m012[2] == m02[1]

def test_measure_all_leaves_certainty():
    sim = StateVectorSimulation(3, seed=9)
    sim.init_superposition_state()
    first = sim.measure_all()
    for _ in range(5):
        assert sim.measure_all() == first
    assert np.count_nonzero(sim.amplitudes) == 1

def test_partial_measurement_keeps_rest_coherent():
    sim = StateVectorSimulation(3, seed=4)
    sim.hadamard(0)
    sim.hadamard(2)
    sim.cnot(2, 1)
    (q0,) = sim.measure([0])
    sim.check_normalized(tol=1e-12)
    # qubits 1 and 2 are still the Bell pair, qubit 0 is fixed
    p = sim.probabilities()
    for i in range(8):
        if (i & 1) != q0 or ((i >> 1) & 1) != ((i >> 2) & 1):
            assert p[i] == 0
        else:
            assert p[i] == pytest.approx(0.5)
    assert sim.measure([0]) == [q0]

def test_measure_rejects_bad_indices():
    sim = StateVectorSimulation(2)
    with pytest.raises(InvalidQubitIndexError):
        sim.measure([2])
    with pytest.raises(InvalidQubitIndexError):
        sim.measure([0, 0])
    with pytest.raises(InvalidQubitIndexError):
        sim.measure([-1])

def test_rng_advances_once_per_measurement():
    sim = StateVectorSimulation(2, seed=77)
    ref = np.random.default_rng(77)
    sim.hadamard(0)
    sim.hadamard(1)
    sim.measure([0])
    ref.random()
    sim.cnot(0, 1)  # gates never touch the rng
    sim.reset()
    sim.hadamard(1)
    r = ref.random()
    expect = r >= 0.5  # P(q1 = 0) = 0.5, first half of the CDF is q1 = 0
    assert sim.measure([1]) == [expect]

def test_empty_measure_returns_nothing_and_draws_once():
    sim = StateVectorSimulation(1, seed=21)
    ref = np.random.default_rng(21)
    sim.hadamard(0)
    before = sim.amplitudes
    assert sim.measure([]) == []
    assert np.allclose(sim.amplitudes, before)
    ref.random()
    expect = ref.random() >= 0.5
    assert sim.measure_all() == [expect]
