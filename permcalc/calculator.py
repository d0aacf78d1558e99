"""
Effective permission calculation.
"""

from .config import PERMISSION_MASK


def effective_permission(mode: int, umask: int) -> int:
    """
    Apply ``umask`` to ``mode``: ``(mode & ~umask) & 0o777``.

    ``~umask`` is negative for Python ints, so the final mask is what brings
    the result back into the nine permission bits.
    """
    return (mode & ~umask) & PERMISSION_MASK
