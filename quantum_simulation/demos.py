# quantum_simulation/demos.py
"""Command line runner for the algorithm demonstrations."""
import argparse
import logging

from . import algorithms as A
from .evaluation import evaluate, format_evaluation

def parse_bits(text: str):
    """'101' -> [True, False, True], first character is qubit 0."""
    if not text or set(text) - {"0", "1"}:
        raise argparse.ArgumentTypeError(f"expected a bit string, got {text!r}")
    return [c == "1" for c in text]

DJ_FUNCTIONS = {
    "false": lambda x: False,
    "true": lambda x: True,
    "projection": lambda x: x[0],
    "xor": lambda x: sum(x) % 2 == 1,
    "and": lambda x: all(x),
}

def report(measurements, plot=None, title=""):
    ev = evaluate(measurements)
    print(format_evaluation(ev))
    if plot:
        from .plot_results import plot_histogram
        plot_histogram(ev, plot, title=title)
        print(f"Saved {plot}")

def main(argv=None):
    p = argparse.ArgumentParser(description="quantum_simulation algorithm demonstrations")
    p.add_argument("--runs", type=int, default=100)
    p.add_argument("--seed", type=int, default=0)
    p.add_argument("--backend", type=str, default="serial", choices=["serial", "numba"])
    p.add_argument("--plot", type=str, default=None, help="write a histogram PNG here")
    p.add_argument("-v", "--verbose", action="store_true")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("bell", help="Bell state (|00>+|11>)/sqrt(2)")
    p_ghz = sub.add_parser("ghz", help="GHZ state on n qubits")
    p_ghz.add_argument("--n", type=int, default=3)

    p_dj = sub.add_parser("deutsch-jozsa", help="constant vs balanced")
    p_dj.add_argument("--function", type=str, default="projection", choices=sorted(DJ_FUNCTIONS))
    p_dj.add_argument("--n", type=int, default=4)

    p_bv = sub.add_parser("bernstein-vazirani", help="recover a secret dot-product string")
    p_bv.add_argument("--secret", type=parse_bits, default=parse_bits("101"))

    p_simon = sub.add_parser("simon", help="sample strings orthogonal to a hidden XOR mask")
    p_simon.add_argument("--secret", type=parse_bits, default=parse_bits("101"))

    sub.add_parser("teleportation", help="teleport |+> from qubit 0 to qubit 2")
    sub.add_parser("superdense", help="send two bits through one qubit")

    args = p.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    common = dict(seed=args.seed, backend=args.backend)

    if args.cmd == "bell":
        print("Bell state:")
        report(A.run_shots(A.apply_bell_state, 2, runs=args.runs, **common), args.plot, "Bell state")

    elif args.cmd == "ghz":
        print("GHZ state:")
        ms = A.run_shots(lambda sim: A.apply_ghz_state(sim, args.n), args.n, runs=args.runs, **common)
        report(ms, args.plot, "GHZ state")

    elif args.cmd == "deutsch-jozsa":
        print(f"Deutsch-Jozsa algorithm on {args.function} function")
        verdict, ms = A.deutsch_jozsa(DJ_FUNCTIONS[args.function], args.n, runs=args.runs, **common)
        print(f"The function is {verdict}.")
        report(ms, args.plot, "Deutsch-Jozsa")

    elif args.cmd == "bernstein-vazirani":
        secret = args.secret
        print(f"Bernstein-Vazirani algorithm on secret: {secret}")
        found = A.bernstein_vazirani(secret, **common)
        print(f"Recovered secret: {found}")

    elif args.cmd == "simon":
        secret = args.secret
        print(f"Simon's algorithm on secret mask: {secret}")
        ms = A.simon(A.simon_oracle(secret), len(secret), runs=args.runs, **common)
        report(ms, args.plot, "Simon")

    elif args.cmd == "teleportation":
        print("Teleportation:")
        report(A.run_shots(A.apply_teleportation, 3, runs=args.runs, **common), args.plot, "Teleportation")

    elif args.cmd == "superdense":
        print("Superdense coding:")
        for second_bit in (False, True):
            for first_bit in (False, True):
                got = A.superdense_coding(first_bit, second_bit, **common)
                sent = f"{int(second_bit)}{int(first_bit)}"
                print(f"Sending {sent}... received {int(got[1])}{int(got[0])}.")

if __name__ == "__main__":
    main()
