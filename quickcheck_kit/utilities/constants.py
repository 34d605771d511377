"""
Constants and default values for Quickcheck-Kit.

Centralizes generator defaults, alphabets, and runner settings
used throughout the package.
"""

import string

# Runner defaults
DEFAULT_ITERATIONS = 100
PREVIEW_LENGTH = 20
PREVIEW_ELLIPSIS = "..."
FAILURE_PREFIX = "Property failed for value: "

# Number generator defaults
DEFAULT_NUMBER_MIN = -50.0
DEFAULT_NUMBER_MAX = 50.0

# String generator defaults
DEFAULT_MIN_LENGTH = 7
DEFAULT_MAX_LENGTH = 100
ALPHANUMERIC = string.ascii_uppercase + string.ascii_lowercase + string.digits
SYMBOLS = "!@#$%^&*()_+-=[]{}|;:,.<>?`~ "
DEFAULT_CHARACTERS = ALPHANUMERIC + SYMBOLS

# Array generator defaults
DEFAULT_ARRAY_MAX_LENGTH = 10

# Environment
DEBUG_ENV_VAR = "DEBUG_QUICKCHECK"
FALSY_ENV_VALUES = frozenset({"", "0", "false", "no", "off"})
