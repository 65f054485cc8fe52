"""
Sample generation backends.

Available backends:
    CPUSampleBackend: numpy Generator based Beta sampler
"""

from bootsim.sample.backends.cpu import CPUSampleBackend

__all__ = ["CPUSampleBackend"]
