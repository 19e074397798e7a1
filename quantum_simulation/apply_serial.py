# quantum_simulation/apply_serial.py
from typing import Callable, List, Sequence

from .state import State
from .oracle import BoolFunction, toggle_table

def subset_offsets(qubits: Sequence[int]) -> List[int]:
    """
    Offsets of the 2**k members of a group relative to its representative.
    Offset s ORs together 1 << qubits[j] for every set bit j of s, so the
    first target qubit varies fastest.
    """
    masks = [1 << q for q in qubits]
    offsets = []
    for s in range(1 << len(masks)):
        off = 0
        for j, m in enumerate(masks):
            if (s >> j) & 1:
                off |= m
        offsets.append(off)
    return offsets

def apply_gate(state: State, fn: Callable, qubits: Sequence[int]):
    """
    Apply a k-qubit tuple gate in place. Indices with every targeted bit zero
    are the representatives of 2**(n-k) disjoint groups; each group is
    gathered, transformed and scattered back exactly once.
    """
    psi = state.psi
    N = psi.shape[0]
    offsets = subset_offsets(qubits)
    targeted = offsets[-1]
    for base in range(N):
        if base & targeted:
            continue
        idx = [base | off for off in offsets]
        out = fn(*[psi[i] for i in idx])
        for i, a in zip(idx, out):
            psi[i] = a

def apply_single_qubit(state: State, fn: Callable, k: int):
    """Pair-wise version of apply_gate for one qubit (little-endian: bit k)."""
    psi = state.psi
    N = psi.shape[0]
    step = 1 << k
    block = step << 1
    # iterate blocks of size 2^(k+1), update pairs (i0, i1=i0+step)
    for base in range(0, N, block):
        for off in range(step):
            i0 = base + off
            i1 = i0 + step
            psi[i0], psi[i1] = fn(psi[i0], psi[i1])

def apply_oracle(state: State, f: BoolFunction, input_qubits: Sequence[int], answer_qubits: Sequence[int]):
    """Swap every amplitude with its answer-toggled partner; each pair swaps once."""
    psi = state.psi
    N = psi.shape[0]
    toggles = toggle_table(f, input_qubits, answer_qubits)
    for i in range(N):
        x = 0
        for j, q in enumerate(input_qubits):
            x |= ((i >> q) & 1) << j
        partner = i ^ int(toggles[x])
        if partner > i:
            psi[i], psi[partner] = psi[partner], psi[i]
