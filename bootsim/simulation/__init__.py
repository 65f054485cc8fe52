"""
End-to-end bootstrap interval simulation.

Usage:
    from bootsim.simulation import simulator

    result = simulator(0.5)             # centred on a fixed value
    result = simulator('observed')      # centred on the sample's own mean
    print(result.summary())
"""

from bootsim.simulation.solution import SimulationSolution
from bootsim.simulation.solvers import simulator

__all__ = [
    "simulator",
    "SimulationSolution",
]
