"""
Value types for permission bits.

``OctalPermission`` holds the nine low permission bits of a mode and
decomposes into three ``PermissionTriad`` values (user, group, other).
Both are immutable; every operation returns a new value.
"""

from dataclasses import dataclass

from .calculator import effective_permission
from .config import PERMISSION_MASK, TRIAD_MASK
from .exceptions import PermissionRangeError
from .formatter import int_to_octal4, split_triads, triad_to_rwx
from .octal import check_range


@dataclass(frozen=True)
class PermissionTriad:
    """Read/write/execute bits for a single permission class."""

    bits: int

    def __post_init__(self):
        if not 0 <= self.bits <= TRIAD_MASK:
            raise ValueError(f"Triad must be in range 0-7, got {self.bits}")

    def to_rwx(self) -> str:
        return triad_to_rwx(self.bits)


@dataclass(frozen=True)
class OctalPermission:
    """A permission value in the range 0..0o777."""

    value: int

    def __post_init__(self):
        if not 0 <= self.value <= PERMISSION_MASK:
            raise PermissionRangeError("permission", self.value)

    @classmethod
    def from_field(cls, value: int, field: str) -> "OctalPermission":
        """
        Build a permission from a parsed input field.

        Raises:
            PermissionRangeError: If value exceeds 0o777, naming ``field``
        """
        return cls(check_range(value, field))

    @property
    def triads(self) -> tuple[PermissionTriad, PermissionTriad, PermissionTriad]:
        """The (user, group, other) triads of this permission."""
        user, group, other = split_triads(self.value)
        return PermissionTriad(user), PermissionTriad(group), PermissionTriad(other)

    def apply_umask(self, umask: "OctalPermission") -> "OctalPermission":
        """Return the permission left after removing the bits set in ``umask``."""
        return OctalPermission(effective_permission(self.value, umask.value))

    def to_octal(self) -> str:
        return int_to_octal4(self.value)

    def to_symbolic(self) -> str:
        return "".join(triad.to_rwx() for triad in self.triads)

    def __str__(self) -> str:
        return self.to_octal()
