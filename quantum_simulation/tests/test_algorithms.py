# quantum_simulation/tests/test_algorithms.py
import pytest

from quantum_simulation import algorithms as A
from quantum_simulation import StateVectorSimulation

def dot(y, s):
    return sum(a and b for a, b in zip(y, s)) % 2

def test_bell_and_ghz_are_correlated():
    for m in A.run_shots(A.apply_bell_state, 2, runs=50, seed=1):
        assert m[0] == m[1]
    ms = A.run_shots(lambda sim: A.apply_ghz_state(sim, 4), 4, runs=50, seed=2)
    for m in ms:
        assert len(set(m)) == 1
    assert {m[0] for m in ms} == {False, True}

@pytest.mark.parametrize("f,expect", [
    (lambda x: False, "constant"),
    (lambda x: True, "constant"),
    (lambda x: x[0], "balanced"),
    (lambda x: sum(x) % 2 == 1, "balanced"),
])
def test_deutsch_jozsa(f, expect):
    verdict, ms = A.deutsch_jozsa(f, 3, runs=20, seed=4)
    assert verdict == expect
    assert len(ms) == 20 and all(len(m) == 3 for m in ms)

def test_deutsch_jozsa_and_function_is_neither():
    verdict, _ = A.deutsch_jozsa(lambda x: all(x), 2, runs=100, seed=0)
    assert verdict == "neither"

@pytest.mark.parametrize("secret", [
    [True, False, True],
    [True, False, False, True],
    [True, True, False, False, True],
])
def test_bernstein_vazirani_recovers_secret(secret):
    assert A.bernstein_vazirani(secret, seed=3) == secret

@pytest.mark.parametrize("secret,g", [
    ([True, False, True], tuple),
    ([True, True, False, True], lambda x: tuple(not b for b in x)),
])
def test_simon_samples_are_orthogonal_to_secret(secret, g):
    f = A.simon_oracle(secret, g)
    ms = A.simon(f, len(secret), runs=120, seed=8)
    for y in ms:
        assert dot(y, secret) == 0
    # enough distinct samples to pin down the secret
    assert len({tuple(y) for y in ms}) == 1 << (len(secret) - 1)

def test_simon_oracle_is_two_to_one():
    secret = (True, False, True)
    f = A.simon_oracle(secret)
    x = (False, True, True)
    y = tuple(a != b for a, b in zip(x, secret))
    assert f(x) == f(y)
    assert f(x) != f((True, True, True))

def test_teleportation_moves_the_state():
    # |+i> = S H |0> teleported, then undone with S^3 = S^dagger and H
    for seed in range(20):
        sim = StateVectorSimulation(3, seed=seed)
        A.teleport(sim, ("hadamard", "s"))
        sim.s(2); sim.s(2); sim.s(2)
        sim.hadamard(2)
        assert sim.measure([2]) == [False]

def test_teleportation_of_excited_state():
    for m in A.run_shots(lambda sim: A.apply_teleportation(sim, ("pauli_x",)), 3, runs=30, seed=6):
        assert m == [True]

@pytest.mark.parametrize("first_bit", [False, True])
@pytest.mark.parametrize("second_bit", [False, True])
def test_superdense_coding(first_bit, second_bit):
    assert A.superdense_coding(first_bit, second_bit) == (first_bit, second_bit)
