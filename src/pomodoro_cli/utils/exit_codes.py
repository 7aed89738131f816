"""
Exit codes for Pomodoro CLI.

Semantic exit codes so scripts wrapping the timer can tell what happened.
"""

# Invalid arguments or unknown command (Click's usage error code)
ERROR_INVALID_ARGS = 2

# Stats file could not be read or written
ERROR_IO = 5

# Session interrupted with Ctrl-C (128 + SIGINT)
INTERRUPTED = 130
