"""
Exit codes for Pomotimer CLI.

Quitting the timer normally exits with SUCCESS. Only a failure of the TUI
itself (startup or crash) produces ERROR_GENERAL.
"""

# Success
SUCCESS = 0

# General error (the timer UI failed to start or crashed)
ERROR_GENERAL = 1

# Invalid arguments or validation error
ERROR_INVALID_ARGS = 2


def get_exit_code_name(code: int) -> str:
    """Get the name of an exit code for display purposes."""
    code_names = {
        SUCCESS: "SUCCESS",
        ERROR_GENERAL: "ERROR_GENERAL",
        ERROR_INVALID_ARGS: "ERROR_INVALID_ARGS",
    }
    return code_names.get(code, f"UNKNOWN({code})")


def get_exit_code_description(code: int) -> str:
    """Get a human-readable description of an exit code."""
    descriptions = {
        SUCCESS: "Timer exited normally",
        ERROR_GENERAL: "The timer failed to start or crashed",
        ERROR_INVALID_ARGS: "Invalid arguments or validation error",
    }
    return descriptions.get(code, "Unknown error")
