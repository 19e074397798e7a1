# quantum_simulation/__init__.py
from .errors import (
    InternalConsistencyError,
    InvalidQubitIndexError,
    NormalizationError,
    OracleError,
    QubitCountError,
    SeedError,
    SimulationError,
)
from .state import State, bit_of, index_of
from .simulation import (
    MAX_QUBIT_COUNT,
    NumbaStateVectorSimulation,
    Simulation,
    StateVectorSimulation,
    new_simulation,
)
from .circuit import Circuit
from .evaluation import Evaluation, evaluate, format_evaluation
