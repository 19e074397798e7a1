# quantum_simulation/errors.py


class SimulationError(Exception):
    """Base class for every error raised by the simulator."""


class QubitCountError(SimulationError, ValueError):
    """Requested qubit count is not in [1, MAX_QUBIT_COUNT]."""


class SeedError(SimulationError, ValueError):
    """Seed is not an integer, so replay would not be deterministic."""


class InvalidQubitIndexError(SimulationError, IndexError):
    """A gate or measurement referenced a bad or repeated qubit index."""


class OracleError(SimulationError, ValueError):
    """The oracle function returned the wrong number of answer bits."""


class InternalConsistencyError(SimulationError, RuntimeError):
    """Collapse found no probability mass left to renormalize."""


class NormalizationError(SimulationError, AssertionError):
    pass
