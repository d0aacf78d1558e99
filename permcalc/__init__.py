"""
Permission Calculator
=====================

Compute the effective permission bits of a requested mode under a umask and
render them as 4-digit octal and ``rwxrwxrwx`` symbolic text.
"""

from .calculator import effective_permission
from .exceptions import OctalFormatError, PermCalcError, PermissionRangeError
from .formatter import int_to_octal4, mode_to_symbolic, triad_to_rwx
from .models import OctalPermission, PermissionTriad
from .octal import is_valid_octal4, octal_to_int

__version__ = "0.1.0"

__all__ = [
    "effective_permission",
    "int_to_octal4",
    "is_valid_octal4",
    "mode_to_symbolic",
    "octal_to_int",
    "triad_to_rwx",
    "OctalPermission",
    "PermissionTriad",
    "PermCalcError",
    "OctalFormatError",
    "PermissionRangeError",
]
