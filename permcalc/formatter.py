"""
Octal and symbolic rendering of permission values.
"""

from .config import (
    EXECUTE_BIT,
    OCTAL_WIDTH,
    PERMISSION_MASK,
    READ_BIT,
    TRIAD_MASK,
    TRIAD_SHIFTS,
    WRITE_BIT,
)


def int_to_octal4(value: int) -> str:
    """Render the permission bits of ``value`` as zero-padded octal, e.g. 420 -> '0644'."""
    return f"{value & PERMISSION_MASK:0{OCTAL_WIDTH}o}"


def triad_to_rwx(bits: int) -> str:
    """
    Convert one triad (0..7) to its ``rwx`` form.

    Examples:
        7 -> 'rwx', 5 -> 'r-x', 4 -> 'r--', 0 -> '---'
    """
    return (
        ("r" if bits & READ_BIT else "-")
        + ("w" if bits & WRITE_BIT else "-")
        + ("x" if bits & EXECUTE_BIT else "-")
    )


def split_triads(value: int) -> tuple[int, int, int]:
    """Split a permission value into its (user, group, other) triads."""
    user, group, other = ((value >> shift) & TRIAD_MASK for shift in TRIAD_SHIFTS)
    return user, group, other


def mode_to_symbolic(value: int) -> str:
    """Render the lower nine bits of ``value`` as ``rwxrwxrwx`` text."""
    return "".join(triad_to_rwx(bits) for bits in split_triads(value))
