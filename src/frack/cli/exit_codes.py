# topmark:header:start
#
#   project      : Frack
#   file         : exit_codes.py
#   file_relpath : src/frack/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the Frack CLI.

Usage errors exit with the generic ``FAILURE`` code (1) after printing a
diagnostic that describes the mistake. Configuration problems follow the BSD
`sysexits` convention.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the Frack CLI.

    Attributes:
        SUCCESS: The diagnostic (or help text) was printed.
        FAILURE: Invalid invocation; a self-describing diagnostic was printed
            to stderr.
        CONFIG_ERROR: Configuration file missing, unreadable or malformed.
            Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1
    CONFIG_ERROR = 78  # EX_CONFIG
