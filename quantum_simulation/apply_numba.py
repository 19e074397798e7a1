# quantum_simulation/apply_numba.py
import numpy as np
from numba import config, njit, prange, set_num_threads, get_num_threads
from .state import State
from .apply_serial import subset_offsets
from .oracle import BoolFunction, partner_indices

# ---------- low-level kernels (Numba JIT) ----------

@njit(parallel=True, fastmath=True)
def _single_qubit_kernel(psi, U2, k):
    N = psi.shape[0]
    step = 1 << k
    block = step << 1
    nblocks = N // block
    for b in prange(nblocks):
        base = b * block
        for off in range(step):
            i0 = base + off
            i1 = i0 + step
            a0 = psi[i0]
            a1 = psi[i1]
            psi[i0] = U2[0,0]*a0 + U2[0,1]*a1
            psi[i1] = U2[1,0]*a0 + U2[1,1]*a1

@njit(parallel=True, fastmath=True)
def _multi_qubit_kernel(psi, U, offsets, nchunks):
    N = psi.shape[0]
    d = offsets.shape[0]
    targeted = offsets[d - 1]
    chunk = (N + nchunks - 1) // nchunks
    # One scratch row per chunk. Only bases where every targeted bit is 0 are
    # visited, each group has one such base, so chunks write disjoint indices.
    for ch in prange(nchunks):
        a = np.empty_like(U[0])
        start = ch * chunk
        stop = min(start + chunk, N)
        for base in range(start, stop):
            if (base & targeted) == 0:
                for c in range(d):
                    a[c] = psi[base | offsets[c]]
                for r in range(d):
                    acc = U[r, 0] * a[0]
                    for c in range(1, d):
                        acc += U[r, c] * a[c]
                    psi[base | offsets[r]] = acc

@njit(parallel=True)
def _permutation_kernel(psi, partner):
    N = psi.shape[0]
    for i in prange(N):
        j = partner[i]
        if j > i:
            a = psi[i]
            psi[i] = psi[j]
            psi[j] = a

# ---------- user-facing apply helpers ----------

def set_threads(n: int):
    # numba refuses more threads than its pool was started with
    set_num_threads(max(1, min(int(n), config.NUMBA_NUM_THREADS)))

def get_threads() -> int:
    return get_num_threads()

def apply_single_qubit(state: State, U2: np.ndarray, k: int):
    _single_qubit_kernel(state.psi, U2.astype(state.dtype), k)

def apply_gate(state: State, U: np.ndarray, qubits):
    if len(qubits) == 1:
        apply_single_qubit(state, U, qubits[0])
        return
    offsets = np.array(subset_offsets(qubits), dtype=np.int64)
    _multi_qubit_kernel(state.psi, U.astype(state.dtype), offsets, get_num_threads())

def apply_oracle(state: State, f: BoolFunction, input_qubits, answer_qubits):
    partner = partner_indices(state.n, f, input_qubits, answer_qubits)
    _permutation_kernel(state.psi, partner)
