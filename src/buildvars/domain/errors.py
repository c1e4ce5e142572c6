"""
Error taxonomy for the vars store and its command surface.

Every fatal condition raised by buildvars itself is a VarsError subclass
with a stable ``kind`` string, so callers can match on the kind without
parsing messages. Errors raised by user configuration code are never
wrapped in these classes.
"""

from typing import Optional


class VarsError(Exception):
    """Base class for all buildvars errors."""

    kind = "VARS_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"{self.kind}: {self.message}"


class InvalidKeyFormat(VarsError):
    """Raised when a var key does not match the allowed identifier pattern."""

    kind = "INVALID_KEY_FORMAT"

    def __init__(self, key: str):
        super().__init__(
            f"Invalid key '{key}'. Keys can only contain letters, digits and "
            "underscores, and cannot start with a digit."
        )
        self.key = key


class InvalidEmptyValue(VarsError):
    """Raised when a value is empty after whitespace is stripped."""

    kind = "INVALID_EMPTY_VALUE"

    def __init__(self) -> None:
        super().__init__("A var cannot have an empty value.")


class UnrecognizedTask(VarsError):
    """Raised when the dispatcher is asked to run a task it does not know."""

    kind = "UNRECOGNIZED_TASK"

    def __init__(self, task: str, scope: str = "vars"):
        super().__init__(f"Unrecognized task '{task}' under scope '{scope}'.")
        self.task = task
        self.scope = scope


class ConfigurationEvaluationFailure(VarsError):
    """Raised when the configuration file cannot be located or read."""

    kind = "CONFIG_EVALUATION_FAILURE"

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class MissingConfigVariable(VarsError):
    """Raised when a configuration reads an unset var without a default."""

    kind = "MISSING_CONFIG_VARIABLE"

    def __init__(self, key: str):
        super().__init__(
            f"Cannot find a value for the configuration variable '{key}'. "
            f"Use 'buildvars set {key}' to set it or 'buildvars setup' to list "
            "all the configuration variables used by this project."
        )
        self.key = key


class CorruptedVarsFile(VarsError):
    """Raised when the store file exists but is not a valid vars document."""

    kind = "CORRUPTED_VARS_FILE"

    def __init__(self, path: str, reason: str):
        super().__init__(f"The vars file at '{path}' is corrupted: {reason}")
        self.path = path
