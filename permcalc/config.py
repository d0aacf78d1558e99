"""
Constants shared by the permission calculator.
"""

# Lower nine permission bits: rwx for user, group and other
PERMISSION_MASK = 0o777
TRIAD_MASK = 0o7
OCTAL_WIDTH = 4

# user, group, other
TRIAD_SHIFTS = (6, 3, 0)

READ_BIT = 0o4
WRITE_BIT = 0o2
EXECUTE_BIT = 0o1

MODE_PROMPT = "Enter file mode (4-digit octal, e.g., 0644): "
UMASK_PROMPT = "Enter umask (4-digit octal, e.g., 0022): "

E_OCTAL = "E_OCTAL"
E_RANGE = "E_RANGE"

OCTAL_MESSAGE = "{field} must be 4-digit octal (0000-0777)"
RANGE_MESSAGE = "{field} out of range (0000-0777)"

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130
