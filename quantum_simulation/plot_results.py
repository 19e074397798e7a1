# quantum_simulation/plot_results.py
import csv
import matplotlib.pyplot as plt
from collections import defaultdict
from statistics import median

from .evaluation import Evaluation, ket, wildcard


def plot_histogram(ev: Evaluation, path, title="Measurement outcomes"):
    """Outcome frequencies on the left, per-qubit P(1) on the right."""
    fig, (ax0, ax1) = plt.subplots(1, 2, figsize=(10, 4))
    labels = [ket(o) for o, _ in ev.counts]
    freqs = [c / ev.measurement_count for _, c in ev.counts]
    ax0.bar(labels, freqs)
    ax0.set_ylabel("Frequency")
    ax0.set_title(title)
    ax0.tick_params(axis="x", rotation=90)

    ax1.bar([wildcard(ev.qubit_count, j) for j in range(ev.qubit_count)], ev.one_probabilities)
    ax1.set_ylim(0, 1)
    ax1.set_ylabel("P(1)")
    ax1.set_title("Per-qubit marginals")
    ax1.tick_params(axis="x", rotation=90)

    fig.tight_layout()
    fig.savefig(path, dpi=200)
    plt.close(fig)
    return path

def load_rows(path):
    rows = []
    with open(path, "r") as f:
        r = csv.DictReader(f)
        for row in r:
            row["qubits"]  = int(row["qubits"])
            row["depth"]   = int(row["depth"])
            row["threads"] = int(row["threads"])
            row["wall_ms"] = float(row["wall_ms"])
            rows.append(row)
    return rows

def plot_runtime_vs_qubits(rows, path):
    """Median wall time per (backend, qubits) on a log scale."""
    buckets = defaultdict(list)
    for r in rows:
        buckets[(r["backend"], r["qubits"])].append(r["wall_ms"])
    if not buckets:
        return None
    by_backend = defaultdict(list)
    for (be, n), vals in buckets.items():
        by_backend[be].append((n, median(vals)))

    fig = plt.figure()
    for be, p in sorted(by_backend.items()):
        xs, ys = zip(*sorted(p))
        plt.plot(xs, ys, marker="o", label=be)
    plt.xlabel("Qubits (n)")
    plt.ylabel("Runtime (ms, log scale)")
    plt.title("Runtime vs Qubits")
    plt.yscale("log")
    plt.grid(True, which="both", ls="--", lw=0.5)
    plt.legend()
    plt.tight_layout()
    plt.savefig(path, dpi=200)
    plt.close(fig)
    return path
