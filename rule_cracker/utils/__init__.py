"""
Utility modules for the Rule Cracker.
"""

from .config import Config, verbosity_to_level
from .exceptions import (
    RuleCrackerError,
    InputFileError,
    MalformedTargetError,
    RuleSyntaxError,
    WordSourceError,
    UnknownAlgorithmError,
    SubstitutionSpecError,
    OutputSinkError,
    ConfigError,
)
from .logger import Logger
