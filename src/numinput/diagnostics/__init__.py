"""Diagnostic system for numinput errors.

Provides structured error diagnostics with codes and hints.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, ParseStage
from .errors import ConfigurationError, NumberInputError, NumberParseError
from .templates import ErrorTemplate

__all__ = [
    "ConfigurationError",
    "Diagnostic",
    "DiagnosticCode",
    "ErrorTemplate",
    "NumberInputError",
    "NumberParseError",
    "ParseStage",
]
