# quantum_simulation/evaluation.py
"""Tally batches of measurement outcomes into frequencies and per-qubit marginals."""
from collections import Counter
from dataclasses import dataclass
from typing import List, Sequence, Tuple

Outcome = Tuple[bool, ...]

@dataclass
class Evaluation:
    qubit_count: int
    measurement_count: int
    counts: List[Tuple[Outcome, int]]  # most frequent first
    one_probabilities: List[float]     # P(qubit j measured 1)

    def probability(self, outcome: Sequence[bool]) -> float:
        outcome = tuple(bool(b) for b in outcome)
        for o, c in self.counts:
            if o == outcome:
                return c / self.measurement_count
        return 0.0

def evaluate(measurements: Sequence[Sequence[bool]]) -> Evaluation:
    if not measurements:
        raise ValueError("No measurements to evaluate")
    qubit_count = len(measurements[0])
    counter = Counter()
    ones = [0] * qubit_count
    for m in measurements:
        if len(m) != qubit_count:
            raise ValueError(f"Measurement {list(m)} has {len(m)} qubits, expected {qubit_count}")
        m = tuple(bool(b) for b in m)
        counter[m] += 1
        for j, b in enumerate(m):
            if b:
                ones[j] += 1
    total = len(measurements)
    # ties are broken by the ket so the report is stable
    counts = sorted(counter.items(), key=lambda kv: (-kv[1], ket(kv[0])))
    return Evaluation(qubit_count, total, counts, [c / total for c in ones])

def ket(outcome: Sequence[bool]) -> str:
    """|q(n-1)...q0>, highest qubit first."""
    return "|" + "".join("1" if b else "0" for b in reversed(outcome)) + ">"

def wildcard(qubit_count: int, qubit: int) -> str:
    return "|" + "".join("1" if i == qubit else "*" for i in reversed(range(qubit_count))) + ">"

def format_evaluation(ev: Evaluation) -> str:
    lines = [
        "Quantum simulation results",
        f"Qubit count: {ev.qubit_count}",
        f"Measurement count: {ev.measurement_count}",
    ]
    for outcome, count in ev.counts:
        lines.append(f"{ket(outcome)}: {100.0 * count / ev.measurement_count:.2f}%")
    for j, p in enumerate(ev.one_probabilities):
        lines.append(f"{j}. {wildcard(ev.qubit_count, j)}: {100.0 * p:.2f}%")
    return "\n".join(lines)
