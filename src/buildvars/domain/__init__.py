"""
Domain layer package.

Contains pure data models, settings and the error taxonomy, with no I/O.
"""

from buildvars.domain.errors import (
    ConfigurationEvaluationFailure,
    CorruptedVarsFile,
    InvalidEmptyValue,
    InvalidKeyFormat,
    MissingConfigVariable,
    UnrecognizedTask,
    VarsError,
)
from buildvars.domain.models import (
    Requirement,
    StoredVar,
    VarRequest,
    VarsFile,
)
from buildvars.domain.settings import VarsSettings

__all__ = [
    # Errors
    "VarsError",
    "InvalidKeyFormat",
    "InvalidEmptyValue",
    "UnrecognizedTask",
    "ConfigurationEvaluationFailure",
    "MissingConfigVariable",
    "CorruptedVarsFile",
    # Models
    "Requirement",
    "StoredVar",
    "VarRequest",
    "VarsFile",
    # Settings
    "VarsSettings",
]
