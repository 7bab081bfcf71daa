"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ParseStage",
]


class ParseStage(StrEnum):
    """Parser stage at which an input was rejected.

    Inherits from ``StrEnum`` so log aggregation receives plain strings
    (``"grammar"``) rather than the ``"ParseStage.GRAMMAR"`` repr.

    Stages:
        EMPTY: No text to parse
        GRAMMAR: Remaining text is not an integer run with optional fraction
        GROUPING: Grouping separators are not where the locale puts them
    """

    EMPTY = "empty"
    GRAMMAR = "grammar"
    GROUPING = "grouping"


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Configuration errors (profile construction)
        4000-4999: Parsing errors (text to number)
    """

    # Configuration errors (1000-1999)
    LOCALE_UNKNOWN = 1001
    CURRENCY_REQUIRED = 1002
    CURRENCY_UNKNOWN = 1003
    UNIT_REQUIRED = 1004
    UNIT_UNKNOWN = 1005
    PRECISION_INVALID = 1006
    NUMBERING_SYSTEM_UNSUPPORTED = 1007
    OPTION_INVALID = 1008

    # Parsing errors (4000-4999)
    PARSE_INPUT_EMPTY = 4001
    PARSE_GRAMMAR_MISMATCH = 4002
    PARSE_GROUPING_INVALID = 4003


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like a compiler message.

        Example output:
            error[CURRENCY_UNKNOWN]: Unknown currency code 'XYZ'
              = help: Use an ISO 4217 code such as EUR or USD

        Returns:
            Formatted error message
        """
        lines = [f"error[{self.code.name}]: {self.message}"]
        if self.hint:
            lines.append(f"  = help: {self.hint}")
        return "\n".join(lines)
