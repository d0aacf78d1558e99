"""
Custom exceptions for the permission calculator.
"""

from .config import E_OCTAL, E_RANGE, OCTAL_MESSAGE, RANGE_MESSAGE


class PermCalcError(Exception):
    """Base exception for input that cannot be turned into a permission."""

    code = "E_UNKNOWN"

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.message = message
        self.field = field

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


class OctalFormatError(PermCalcError):
    """Raised when a field is not exactly four octal digits."""

    code = E_OCTAL

    def __init__(self, field: str):
        super().__init__(OCTAL_MESSAGE.format(field=field), field)


class PermissionRangeError(PermCalcError):
    """Raised when a parsed value does not fit in the nine permission bits."""

    code = E_RANGE

    def __init__(self, field: str, value: int | None = None):
        super().__init__(RANGE_MESSAGE.format(field=field), field)
        self.value = value
