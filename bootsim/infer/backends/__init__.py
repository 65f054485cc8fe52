"""
Null-distribution backends.

Available backends:
    CPUNullBootstrapBackend: looped resampling with a numpy Generator
"""

from bootsim.infer.backends.cpu import CPUNullBootstrapBackend

__all__ = ["CPUNullBootstrapBackend"]
