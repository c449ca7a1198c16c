"""Linear system backends."""

from pymatrix.linsys.backends.cpu import CPUGaussBackend

__all__ = ["CPUGaussBackend"]
