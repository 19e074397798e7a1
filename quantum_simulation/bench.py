# quantum_simulation/bench.py
import argparse, csv, logging, os, socket, time
from datetime import datetime
import numpy as np
from .circuit import Circuit

logger = logging.getLogger(__name__)

DATA_DIR = os.path.join(os.path.dirname(__file__), "..", "data")

HEADER = ["qubits","depth","backend","threads","gates","wall_ms","hostname","dtype","timestamp"]

def new_csv(path):
    """Create/overwrite CSV with header."""
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    with open(path, "w", newline="") as f:
        csv.DictWriter(f, fieldnames=HEADER).writeheader()

def write_row(path, row):
    with open(path, "a", newline="") as f:
        csv.DictWriter(f, fieldnames=HEADER).writerow(row)

# ---------------------------------------------------------------------

def random_circuit(n, depth, seed=0):
    """Alternating layers of random H/X on every qubit and CNOTs on neighbour pairs."""
    rng = np.random.default_rng(seed)
    c = Circuit.empty(n)
    for layer in range(depth):
        if layer % 2 == 0:
            for k in range(n):
                if rng.integers(0, 2) == 0:
                    c.h(k)
                else:
                    c.x(k)
        else:
            for k in range(0, n-1, 2):
                if rng.integers(0, 2) == 0:
                    c.cnot(k, k+1)
                else:
                    c.cnot(k+1, k)
    return c

def time_run(circ, backend, threads=None, dtype=np.complex128):
    t0 = time.perf_counter()
    circ.run(backend=backend, dtype=dtype, num_threads=threads, check_norm=False)
    return (time.perf_counter() - t0) * 1e3  # ms

def threads_used(backend):
    if backend != "numba":
        return 0
    from .apply_numba import get_threads
    return get_threads()

def bench_qubits(ns, depth, backend, out_path, threads=None):
    print(f"[run] Qubits scaling → {out_path}")
    new_csv(out_path)
    if backend == "numba":
        # one dummy run to JIT-compile the kernels
        time_run(random_circuit(min(ns), depth, seed=42), backend, threads)
    rows = []
    for n in ns:
        circ = random_circuit(n, depth, seed=42)
        wall = time_run(circ, backend, threads)
        row = {
            "qubits": n, "depth": depth, "backend": backend, "threads": threads_used(backend),
            "gates": len(circ.ops), "wall_ms": f"{wall:.3f}",
            "hostname": socket.gethostname(), "dtype": "complex128",
            "timestamp": datetime.now().isoformat(timespec="seconds"),
        }
        write_row(out_path, row)
        rows.append(row)
        logger.debug("bench row %s", row)
        print(f"  n={n}  wall={wall:.2f} ms")
    print("✓ done.\n")
    return rows

# ---------------------------------------------------------------------
def main(argv=None):
    p = argparse.ArgumentParser(description="quantum_simulation benchmarks → data/<backend>/qubits.csv")
    p.add_argument("--ns", type=str, default="4,6,8,10")
    p.add_argument("--depth", type=int, default=20)
    p.add_argument("--backends", type=str, default="serial,numba")
    p.add_argument("--threads", type=int, default=None)
    p.add_argument("--data-dir", type=str, default=DATA_DIR)
    p.add_argument("--plot", action="store_true", help="write runtime_vs_qubits.png")
    p.add_argument("-v", "--verbose", action="store_true")
    args = p.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    ns = [int(x) for x in args.ns.split(",")]
    paths = []
    for backend in args.backends.split(","):
        out_path = os.path.join(args.data_dir, backend, "qubits.csv")
        bench_qubits(ns, args.depth, backend, out_path, args.threads)
        paths.append(out_path)

    if args.plot:
        from .plot_results import load_rows, plot_runtime_vs_qubits
        rows = [r for path in paths for r in load_rows(path)]
        out = plot_runtime_vs_qubits(rows, os.path.join(args.data_dir, "runtime_vs_qubits.png"))
        print(f"Saved {out}")

if __name__ == "__main__":
    main()
