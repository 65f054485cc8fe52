"""
Shared compute infrastructure for bootsim.

Domain-specific backends live in {domain}/backends/. This module only
holds numeric plumbing shared by all of them.

Submodules:
    timing: Execution timing utilities
"""

from bootsim.core.compute.timing import Timer, timed

__all__ = [
    "Timer",
    "timed",
]
