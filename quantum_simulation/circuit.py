# quantum_simulation/circuit.py
from dataclasses import dataclass
from typing import List, Tuple
import numpy as np
from .simulation import Simulation, StateVectorSimulation, new_simulation

Op = Tuple[str, Tuple]  # e.g., ("hadamard",(k,)) or ("cnot",(c,t)) or ("oracle",(f,inputs,answers))

@dataclass
class Circuit:
    """A recorded gate sequence that can be replayed onto any Simulation."""
    n: int
    ops: List[Op]

    @staticmethod
    def empty(n:int) -> "Circuit":
        return Circuit(n, [])

    def x(self, k:int): self.ops.append(("pauli_x",(k,))); return self
    def y(self, k:int): self.ops.append(("pauli_y",(k,))); return self
    def z(self, k:int): self.ops.append(("pauli_z",(k,))); return self
    def h(self, k:int): self.ops.append(("hadamard",(k,))); return self
    def s(self, k:int): self.ops.append(("s",(k,))); return self
    def t(self, k:int): self.ops.append(("t",(k,))); return self
    def cnot(self, c:int, t:int): self.ops.append(("cnot",(c,t))); return self
    def cz(self, c:int, t:int): self.ops.append(("cz",(c,t))); return self
    def swap(self, a:int, b:int): self.ops.append(("swap",(a,b))); return self
    def toffoli(self, c0:int, c1:int, t:int): self.ops.append(("toffoli",(c0,c1,t))); return self

    def oracle(self, f, input_qubits, answer_qubits):
        self.ops.append(("oracle",(f, tuple(input_qubits), tuple(answer_qubits))))
        return self

    def apply(self, sim: Simulation) -> Simulation:
        for name, args in self.ops:
            if name == "oracle":
                sim.apply_oracle(*args)
            elif name in ("pauli_x", "pauli_y", "pauli_z", "hadamard", "s", "t",
                          "cnot", "cz", "swap", "toffoli"):
                getattr(sim, name)(*args)
            else:
                raise ValueError(f"Unknown gate {name}")
        return sim

    def run(self, backend:str="serial", seed:int=0, dtype=np.complex128, check_norm=True,
            num_threads=None, check_norm_tol=1e-6) -> StateVectorSimulation:
        sim = new_simulation(self.n, seed=seed, backend=backend, dtype=dtype, num_threads=num_threads)
        self.apply(sim)
        if check_norm:
            sim.check_normalized(tol=check_norm_tol)
        return sim
